"""
Delete Invite Code Use Cases

Explicit admin delete and the expiry sweep.
"""

from uuid import UUID

from beta_inviter.app.services.unit_of_work import UnitOfWork
from beta_inviter.domain.base import utc_now
from beta_inviter.libs.result import Error, Result, Return

from .dtos import DeleteExpiredCodesResponse, DeleteInviteCodeResponse


class DeleteInviteCodeUseCase:
    """Delete one invite code regardless of its status."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, invite_code_id: UUID) -> Result[DeleteInviteCodeResponse]:
        async with self.uow:
            invite_code = await self.uow.invite_codes.get_by_id(invite_code_id)
            if invite_code is None:
                return Return.err(
                    Error("INVITE_CODE_NOT_FOUND", "Invite code not found")
                )

            await self.uow.invite_codes.delete(invite_code)
            await self.uow.commit()

            return Return.ok(
                DeleteInviteCodeResponse(
                    success=True, message="Invite code deleted successfully"
                )
            )


class DeleteExpiredInviteCodesUseCase:
    """Delete every code whose expiry timestamp is in the past, used or not."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[DeleteExpiredCodesResponse]:
        async with self.uow:
            deleted = await self.uow.invite_codes.delete_expired(utc_now())
            await self.uow.commit()

            return Return.ok(DeleteExpiredCodesResponse(deleted_count=deleted))
