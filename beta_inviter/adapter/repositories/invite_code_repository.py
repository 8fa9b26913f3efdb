from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from beta_inviter.app.repositories.invite_code_repository import (
    DuplicateCodeError,
    IInviteCodeRepository,
)
from beta_inviter.domain.entities import InviteCode


class InviteCodeRepository(IInviteCodeRepository):
    """Invite code repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> List[InviteCode]:
        """Get all invite codes, newest first"""
        stmt = select(InviteCode).order_by(InviteCode.created_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, invite_code_id: UUID) -> Optional[InviteCode]:
        """Get invite code by ID"""
        stmt = select(InviteCode).where(InviteCode.id == invite_code_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_code(self, code: str) -> Optional[InviteCode]:
        """Get invite code by its code string"""
        stmt = select(InviteCode).where(InviteCode.code == code)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, invite_code: InviteCode) -> InviteCode:
        """
        Insert a new invite code.

        The lookup catches collisions without tripping the constraint; the
        IntegrityError branch covers a concurrent insert of the same code.
        Callers must roll back after DuplicateCodeError.
        """
        if await self.get_by_code(invite_code.code) is not None:
            raise DuplicateCodeError(invite_code.code)

        self.session.add(invite_code)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateCodeError(invite_code.code) from exc
        await self.session.refresh(invite_code)
        return invite_code

    async def update(self, invite_code: InviteCode) -> InviteCode:
        """Update existing invite code"""
        self.session.add(invite_code)
        await self.session.flush()
        await self.session.refresh(invite_code)
        return invite_code

    async def delete(self, invite_code: InviteCode) -> None:
        """Delete an invite code"""
        await self.session.delete(invite_code)
        await self.session.flush()

    async def delete_expired(self, now: datetime) -> int:
        """Delete every code whose expiry is before now"""
        stmt = (
            delete(InviteCode)
            .where(InviteCode.expires_at.is_not(None), InviteCode.expires_at < now)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def add_recipient(self, code: str, email: str) -> Optional[InviteCode]:
        """Read-modify-write of email_sent_to; no-op if email is already listed"""
        invite_code = await self.get_by_code(code)
        if invite_code is None:
            return None

        # Pick up sends recorded by other requests since this row was loaded
        await self.session.refresh(invite_code)
        if invite_code.add_recipient(email):
            self.session.add(invite_code)
            await self.session.flush()
        return invite_code
