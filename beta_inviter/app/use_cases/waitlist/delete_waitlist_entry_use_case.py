from uuid import UUID

from beta_inviter.app.services.unit_of_work import UnitOfWork
from beta_inviter.libs.result import Error, Result, Return

from .dtos import DeleteWaitlistEntryResponse


class DeleteWaitlistEntryUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, entry_id: UUID) -> Result[DeleteWaitlistEntryResponse]:
        async with self.uow:
            entry = await self.uow.waitlist.get_by_id(entry_id)
            if entry is None:
                return Return.err(
                    Error("WAITLIST_ENTRY_NOT_FOUND", "Waitlist entry not found")
                )

            await self.uow.waitlist.delete(entry)
            await self.uow.commit()

            return Return.ok(
                DeleteWaitlistEntryResponse(
                    success=True, message="Waitlist entry deleted successfully"
                )
            )
