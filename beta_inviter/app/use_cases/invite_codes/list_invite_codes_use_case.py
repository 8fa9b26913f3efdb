"""
List Invite Codes Use Case

Returns all invite codes newest first, resolving a display name for redeemed
codes from the user profile table on a best-effort basis.
"""

import logging
from typing import Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from beta_inviter.app.services.unit_of_work import UnitOfWork
from beta_inviter.domain.base import utc_now
from beta_inviter.libs.result import Error, Result, Return

from .dtos import InviteCodeResponse, ListInviteCodesResponse, WarningResponse

logger = logging.getLogger(__name__)


class ListInviteCodesUseCase:
    """
    Use case for listing invite codes.

    Business Rules:
    - Ordered by creation time, newest first
    - Used codes with used_by get recipient_name from user_profiles
      (preferred_name, then full_name)
    - A failed profile lookup is a warning, never a failure of the list
    - Optional search matches the code or its status, case-insensitively
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, search: Optional[str] = None) -> Result[ListInviteCodesResponse]:
        warnings: List[Error] = []
        now = utc_now()

        async with self.uow:
            codes = await self.uow.invite_codes.list_all()

            redeemer_ids = {c.used_by for c in codes if c.is_used and c.used_by}
            names: Dict[str, Optional[str]] = {}
            if redeemer_ids:
                try:
                    profiles = await self.uow.user_profiles.get_by_user_ids(redeemer_ids)
                    names = {uid: p.display_name for uid, p in profiles.items()}
                except SQLAlchemyError as exc:
                    logger.warning(f"Failed to fetch user profiles: {exc}")
                    warnings.append(
                        Error("PROFILE_LOOKUP_FAILED", "Could not resolve redeemer names")
                    )

            if search:
                needle = search.strip().lower()
                codes = [
                    c
                    for c in codes
                    if needle in c.code.lower() or needle in c.status(now).value.lower()
                ]

            data = [
                InviteCodeResponse.from_entity(
                    c, now, recipient_name=names.get(c.used_by) if c.is_used else None
                )
                for c in codes
            ]

        return Return.ok(
            ListInviteCodesResponse(
                data=data,
                warnings=[WarningResponse.from_error(w) for w in warnings],
            ),
            warnings=warnings,
        )
