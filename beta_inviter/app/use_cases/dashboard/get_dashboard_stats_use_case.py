"""
Dashboard Stats Use Case

Aggregate counts for the dashboard cards, recomputed from the full lists on
every call.
"""

from beta_inviter.app.services.unit_of_work import UnitOfWork
from beta_inviter.app.use_cases.waitlist.dtos import WaitlistStatsResponse
from beta_inviter.domain.base import CamelModel, to_utc_iso, utc_now
from beta_inviter.domain.stats import compute_invite_code_stats, compute_waitlist_stats
from beta_inviter.libs.result import Result, Return


class InviteCodeStatsResponse(CamelModel):
    total: int
    used: int
    expired: int
    active: int
    emails_sent: int
    usage_rate: float


class DashboardStatsResponse(CamelModel):
    """Response DTO for GetDashboardStatsUseCase"""

    invite_codes: InviteCodeStatsResponse
    waitlist: WaitlistStatsResponse
    generated_at: str


class GetDashboardStatsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[DashboardStatsResponse]:
        async with self.uow:
            codes = await self.uow.invite_codes.list_all()
            entries = await self.uow.waitlist.list_all()

            now = utc_now()
            code_stats = compute_invite_code_stats(codes, now)
            waitlist_stats = compute_waitlist_stats(entries)

        return Return.ok(
            DashboardStatsResponse(
                invite_codes=InviteCodeStatsResponse(
                    total=code_stats.total,
                    used=code_stats.used,
                    expired=code_stats.expired,
                    active=code_stats.active,
                    emails_sent=code_stats.emails_sent,
                    usage_rate=code_stats.usage_rate,
                ),
                waitlist=WaitlistStatsResponse.from_stats(waitlist_stats),
                generated_at=to_utc_iso(now),
            )
        )
