from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from beta_inviter.domain.entities import WaitlistEntry


class IWaitlistRepository(ABC):
    """Waitlist repository interface - application layer"""

    @abstractmethod
    async def list_all(self) -> List[WaitlistEntry]:
        """Get all waitlist entries, newest first"""
        pass

    @abstractmethod
    async def get_by_id(self, entry_id: UUID) -> Optional[WaitlistEntry]:
        """Get waitlist entry by ID"""
        pass

    @abstractmethod
    async def update(self, entry: WaitlistEntry) -> WaitlistEntry:
        """Update existing waitlist entry"""
        pass

    @abstractmethod
    async def delete(self, entry: WaitlistEntry) -> None:
        """Delete a waitlist entry"""
        pass
