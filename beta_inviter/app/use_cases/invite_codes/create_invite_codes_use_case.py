"""
Create Invite Codes Use Case

Generates one or more invite codes and stores them, regenerating a code when
the datastore reports it already exists.
"""

import logging
from datetime import timedelta
from typing import Callable, List, Optional

from beta_inviter.app.repositories.invite_code_repository import DuplicateCodeError
from beta_inviter.app.services.unit_of_work import UnitOfWork
from beta_inviter.domain.base import utc_now
from beta_inviter.domain.code_generator import DEFAULT_PREFIX, generate_invite_code
from beta_inviter.domain.entities import InviteCode
from beta_inviter.libs.result import Error, Result, Return

from .dtos import GenerateCodesResponse, InviteCodeResponse

logger = logging.getLogger(__name__)

MAX_BATCH_SIZE = 100
MAX_ATTEMPTS = 5


class CreateInviteCodesUseCase:
    """
    Use case for generating invite codes.

    Business Rules:
    - Count must be between 1 and 100
    - New codes are unused with current_uses=0
    - expires_at = now + expires_in_days
    - On a uniqueness conflict the code is regenerated, up to 5 attempts
      per code; any other failure propagates
    - Each code is committed on its own, so a failed code leaves the
      earlier ones in place
    """

    def __init__(
        self,
        uow: UnitOfWork,
        code_generator: Callable[[str], str] = generate_invite_code,
        max_attempts: int = MAX_ATTEMPTS,
    ):
        self.uow = uow
        self.code_generator = code_generator
        self.max_attempts = max_attempts

    async def execute(
        self,
        count: int = 1,
        prefix: Optional[str] = None,
        expires_in_days: int = 30,
        max_uses: int = 1,
    ) -> Result[GenerateCodesResponse]:
        """
        Execute create invite codes use case.

        Args:
            count: Number of codes to generate (1-100)
            prefix: Code prefix, defaults to "NA"
            expires_in_days: Days until the codes expire
            max_uses: Redemptions allowed per code

        Returns:
            Result with GenerateCodesResponse DTO, or Error
        """
        if count < 1 or count > MAX_BATCH_SIZE:
            return Return.err(
                Error("INVALID_COUNT", f"Count must be between 1 and {MAX_BATCH_SIZE}")
            )
        if expires_in_days < 1:
            return Return.err(
                Error("INVALID_EXPIRY", "Expiry must be at least one day")
            )

        prefix = (prefix or DEFAULT_PREFIX).upper()
        data: List[InviteCodeResponse] = []

        async with self.uow:
            for _ in range(count):
                created = await self._create_one(prefix, expires_in_days, max_uses)
                if created is None:
                    return Return.err(
                        Error(
                            "DUPLICATE_CODE",
                            f"Could not generate a unique code after {self.max_attempts} "
                            f"attempts ({len(data)} of {count} created)",
                        )
                    )
                data.append(created)

        noun = "invite code" if count == 1 else "invite codes"
        return Return.ok(
            GenerateCodesResponse(
                success=True,
                data=data,
                message=f"Successfully generated {count} {noun}",
            )
        )

    async def _create_one(
        self, prefix: str, expires_in_days: int, max_uses: int
    ) -> Optional[InviteCodeResponse]:
        # A later rollback expires every instance in the session, so the
        # response is taken while the committed row is still loaded.
        for attempt in range(1, self.max_attempts + 1):
            now = utc_now()
            invite_code = InviteCode(
                code=self.code_generator(prefix),
                created_at=now,
                expires_at=now + timedelta(days=expires_in_days),
                max_uses=max_uses,
                current_uses=0,
                is_used=False,
                email_sent_to=[],
            )
            try:
                await self.uow.invite_codes.create(invite_code)
            except DuplicateCodeError as exc:
                logger.info(f"{exc}; regenerating (attempt {attempt}/{self.max_attempts})")
                await self.uow.rollback()
                continue

            await self.uow.commit()
            return InviteCodeResponse.from_entity(invite_code, now)

        logger.warning(f"Gave up generating a unique code after {self.max_attempts} attempts")
        return None
