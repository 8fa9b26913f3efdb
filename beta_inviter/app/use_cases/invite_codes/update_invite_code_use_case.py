"""
Update Invite Code Use Case

Marks a code used or unused and records who redeemed it.
"""

from typing import Optional
from uuid import UUID

from beta_inviter.app.services.unit_of_work import UnitOfWork
from beta_inviter.domain.base import utc_now
from beta_inviter.libs.result import Error, Result, Return

from .dtos import InviteCodeResponse


class UpdateInviteCodeUseCase:
    """
    Use case for partial updates of an invite code.

    Business Rules:
    - is_used=True stamps used_at and sets current_uses=1
    - is_used=False clears used_at and sets current_uses=0
    - used_by is written only when provided
    - Marking an already used code fails (INVITE_CODE_ALREADY_USED)
    - Marking an expired code fails (INVITE_CODE_EXPIRED)
    - Missing code fails (INVITE_CODE_NOT_FOUND)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        invite_code_id: UUID,
        is_used: Optional[bool] = None,
        used_by: Optional[str] = None,
    ) -> Result[InviteCodeResponse]:
        now = utc_now()

        async with self.uow:
            invite_code = await self.uow.invite_codes.get_by_id(invite_code_id)
            if invite_code is None:
                return Return.err(
                    Error("INVITE_CODE_NOT_FOUND", "Invite code not found")
                )

            if is_used is True:
                if invite_code.is_used:
                    return Return.err(
                        Error(
                            "INVITE_CODE_ALREADY_USED",
                            "Invite code has already been used",
                        )
                    )
                if invite_code.is_expired(now):
                    return Return.err(
                        Error("INVITE_CODE_EXPIRED", "Invite code has expired")
                    )
                invite_code.mark_used(now)
            elif is_used is False:
                invite_code.clear_used()

            if used_by:
                invite_code.used_by = used_by

            await self.uow.invite_codes.update(invite_code)
            await self.uow.commit()

            return Return.ok(InviteCodeResponse.from_entity(invite_code, now))
