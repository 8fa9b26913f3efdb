from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from beta_inviter.domain.entities import InviteCode


class DuplicateCodeError(Exception):
    """Raised on insert when the code string already exists."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Invite code already exists: {code}")


class IInviteCodeRepository(ABC):
    """Invite code repository interface - application layer"""

    @abstractmethod
    async def list_all(self) -> List[InviteCode]:
        """Get all invite codes, newest first"""
        pass

    @abstractmethod
    async def get_by_id(self, invite_code_id: UUID) -> Optional[InviteCode]:
        """Get invite code by ID"""
        pass

    @abstractmethod
    async def get_by_code(self, code: str) -> Optional[InviteCode]:
        """Get invite code by its code string"""
        pass

    @abstractmethod
    async def create(self, invite_code: InviteCode) -> InviteCode:
        """Insert a new invite code; raises DuplicateCodeError on conflict"""
        pass

    @abstractmethod
    async def update(self, invite_code: InviteCode) -> InviteCode:
        """Update existing invite code"""
        pass

    @abstractmethod
    async def delete(self, invite_code: InviteCode) -> None:
        """Delete an invite code"""
        pass

    @abstractmethod
    async def delete_expired(self, now) -> int:
        """Delete every code whose expiry is before now; returns count"""
        pass

    @abstractmethod
    async def add_recipient(self, code: str, email: str) -> Optional[InviteCode]:
        """Re-read the code and append email to its tracking list if absent"""
        pass
