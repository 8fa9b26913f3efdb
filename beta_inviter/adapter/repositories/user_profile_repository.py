from typing import Dict, Iterable

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from beta_inviter.app.repositories.user_profile_repository import IUserProfileRepository
from beta_inviter.domain.entities import UserProfile


class UserProfileRepository(IUserProfileRepository):
    """User profile repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_ids(self, user_ids: Iterable[str]) -> Dict[str, UserProfile]:
        """Get profiles keyed by user_id"""
        ids = list(user_ids)
        if not ids:
            return {}
        stmt = select(UserProfile).where(UserProfile.user_id.in_(ids))
        result = await self.session.execute(stmt)
        return {profile.user_id: profile for profile in result.scalars().all()}
