"""
List Waitlist Use Case

Search, status filter and pagination over the waitlist.
"""

import math
from typing import Optional

from beta_inviter.app.services.unit_of_work import UnitOfWork
from beta_inviter.domain.entities import WaitlistStatusFilter
from beta_inviter.domain.stats import compute_waitlist_stats
from beta_inviter.libs.result import Error, Result, Return

from .dtos import WaitlistEntryResponse, WaitlistPageResponse, WaitlistStatsResponse

MAX_PAGE_SIZE = 100


class ListWaitlistUseCase:
    """
    Use case for browsing the waitlist.

    Business Rules:
    - Newest joined first
    - search matches name, email, company, reference, referral source
      or phone number, case-insensitively
    - Pages past the end are clamped to the last page
    - stats cover the filtered entries when a status filter is active,
      otherwise the whole waitlist
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        search: Optional[str] = None,
        status: WaitlistStatusFilter = WaitlistStatusFilter.all,
        page: int = 1,
        page_size: int = 10,
    ) -> Result[WaitlistPageResponse]:
        if page < 1:
            return Return.err(Error("INVALID_PAGE", "Page must be 1 or greater"))
        if page_size < 1 or page_size > MAX_PAGE_SIZE:
            return Return.err(
                Error("INVALID_PAGE_SIZE", f"Page size must be between 1 and {MAX_PAGE_SIZE}")
            )

        async with self.uow:
            entries = await self.uow.waitlist.list_all()

            filtered = entries
            if search and search.strip():
                filtered = [e for e in filtered if e.matches(search.strip())]
            if status == WaitlistStatusFilter.notified:
                filtered = [e for e in filtered if e.is_notified]
            elif status == WaitlistStatusFilter.not_notified:
                filtered = [e for e in filtered if not e.is_notified]
            filtered = sorted(filtered, key=lambda e: e.joined_at, reverse=True)

            total = len(filtered)
            total_pages = math.ceil(total / page_size)
            page = max(1, min(page, total_pages or 1))
            start = (page - 1) * page_size

            stats = compute_waitlist_stats(
                entries if status == WaitlistStatusFilter.all else filtered
            )
            items = [
                WaitlistEntryResponse.from_entity(e)
                for e in filtered[start : start + page_size]
            ]

        return Return.ok(
            WaitlistPageResponse(
                items=items,
                total=total,
                page=page,
                page_size=page_size,
                total_pages=total_pages,
                stats=WaitlistStatsResponse.from_stats(stats),
            )
        )
