"""
Result type returned by use cases.

A Result carries either a value or an Error, plus a list of non-fatal
warnings collected by best-effort sub-steps.
"""

from dataclasses import dataclass
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Error:
    code: str
    message: str


class Result(Generic[T]):
    def __init__(
        self,
        value: Optional[T] = None,
        error: Optional[Error] = None,
        warnings: Optional[List[Error]] = None,
    ):
        self._value = value
        self._error = error
        self.warnings: List[Error] = list(warnings or [])

    def is_ok(self) -> bool:
        return self._error is None

    def is_err(self) -> bool:
        return self._error is not None

    @property
    def value(self) -> T:
        if self._error is not None:
            raise ValueError(f"Result is an error: {self._error.code}")
        return self._value

    @property
    def error(self) -> Error:
        if self._error is None:
            raise ValueError("Result has no error")
        return self._error

    def __repr__(self) -> str:
        if self.is_err():
            return f"Result(error={self._error!r})"
        return f"Result(value={self._value!r}, warnings={self.warnings!r})"


class Return:
    @staticmethod
    def ok(value: Optional[T] = None, warnings: Optional[List[Error]] = None) -> Result[T]:
        return Result(value=value, warnings=warnings)

    @staticmethod
    def err(error: Error) -> Result:
        return Result(error=error)
