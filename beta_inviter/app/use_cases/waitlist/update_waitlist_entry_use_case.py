"""
Update Waitlist Entry Use Cases

Field-by-field partial update and "mark notified".
"""

from typing import Any, Dict
from uuid import UUID

from beta_inviter.app.services.unit_of_work import UnitOfWork
from beta_inviter.domain.base import as_naive_utc, utc_now
from beta_inviter.domain.validators import is_valid_email
from beta_inviter.libs.result import Error, Result, Return

from .dtos import WaitlistEntryResponse

UPDATABLE_FIELDS = {
    "full_name",
    "email",
    "company",
    "reference",
    "referral_source",
    "referral_source_other",
    "is_notified",
    "notified_at",
    "phone_number",
    "country_code",
}
NON_NULLABLE_FIELDS = {"full_name", "email", "is_notified", "phone_number", "country_code"}


class UpdateWaitlistEntryUseCase:
    """
    Use case for editing a waitlist entry.

    Business Rules:
    - Only fields present in changes are written
    - null clears optional fields; required fields reject null
    - A changed email must be well formed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, entry_id: UUID, changes: Dict[str, Any]
    ) -> Result[WaitlistEntryResponse]:
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            return Return.err(
                Error("INVALID_FIELD", f"Unknown field(s): {', '.join(sorted(unknown))}")
            )
        for field in NON_NULLABLE_FIELDS & set(changes):
            if changes[field] is None:
                return Return.err(Error("INVALID_FIELD", f"{field} cannot be null"))
        if "email" in changes and not is_valid_email(changes["email"]):
            return Return.err(Error("INVALID_EMAIL", "Invalid email format"))

        async with self.uow:
            entry = await self.uow.waitlist.get_by_id(entry_id)
            if entry is None:
                return Return.err(
                    Error("WAITLIST_ENTRY_NOT_FOUND", "Waitlist entry not found")
                )

            for field, value in changes.items():
                if field == "notified_at" and value is not None:
                    value = as_naive_utc(value)
                setattr(entry, field, value)

            await self.uow.waitlist.update(entry)
            await self.uow.commit()

            return Return.ok(WaitlistEntryResponse.from_entity(entry))


class MarkWaitlistNotifiedUseCase:
    """Sets is_notified and stamps notified_at with the current time."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, entry_id: UUID) -> Result[WaitlistEntryResponse]:
        async with self.uow:
            entry = await self.uow.waitlist.get_by_id(entry_id)
            if entry is None:
                return Return.err(
                    Error("WAITLIST_ENTRY_NOT_FOUND", "Waitlist entry not found")
                )

            entry.mark_notified(utc_now())
            await self.uow.waitlist.update(entry)
            await self.uow.commit()

            return Return.ok(WaitlistEntryResponse.from_entity(entry))
