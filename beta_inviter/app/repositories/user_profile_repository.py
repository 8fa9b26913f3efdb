from abc import ABC, abstractmethod
from typing import Dict, Iterable

from beta_inviter.domain.entities import UserProfile


class IUserProfileRepository(ABC):
    """User profile repository interface - application layer"""

    @abstractmethod
    async def get_by_user_ids(self, user_ids: Iterable[str]) -> Dict[str, UserProfile]:
        """Get profiles keyed by user_id; unknown ids are absent"""
        pass
