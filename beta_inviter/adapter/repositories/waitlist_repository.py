from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from beta_inviter.app.repositories.waitlist_repository import IWaitlistRepository
from beta_inviter.domain.entities import WaitlistEntry


class WaitlistRepository(IWaitlistRepository):
    """Waitlist repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> List[WaitlistEntry]:
        """Get all waitlist entries, newest first"""
        stmt = select(WaitlistEntry).order_by(WaitlistEntry.joined_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, entry_id: UUID) -> Optional[WaitlistEntry]:
        """Get waitlist entry by ID"""
        stmt = select(WaitlistEntry).where(WaitlistEntry.id == entry_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, entry: WaitlistEntry) -> WaitlistEntry:
        """Update existing waitlist entry"""
        self.session.add(entry)
        await self.session.flush()
        await self.session.refresh(entry)
        return entry

    async def delete(self, entry: WaitlistEntry) -> None:
        """Delete a waitlist entry"""
        await self.session.delete(entry)
        await self.session.flush()
