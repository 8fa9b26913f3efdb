from datetime import UTC, datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    """Naive UTC timestamp, the form stored in DateTime columns."""
    return datetime.now(UTC).replace(tzinfo=None)


def as_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


def to_utc_iso(value: datetime) -> str:
    """ISO 8601 with a trailing Z, e.g. 2025-01-31T12:00:00Z"""
    return as_naive_utc(value).isoformat() + "Z"


# Stored naive UTC, rendered with an explicit Z in JSON
UtcDatetime = Annotated[datetime, PlainSerializer(to_utc_iso, return_type=str, when_used="json")]


class CamelModel(BaseModel):
    """DTO base serialized with camelCase keys, accepting either form on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
