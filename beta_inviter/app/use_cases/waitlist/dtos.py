"""
Waitlist Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from beta_inviter.domain.base import CamelModel, UtcDatetime
from beta_inviter.domain.entities import WaitlistEntry
from beta_inviter.domain.stats import WaitlistStats


class WaitlistEntryResponse(CamelModel):
    """Application shape of a waitlist row"""

    id: str
    full_name: str
    email: str
    company: Optional[str] = None
    reference: Optional[str] = None
    referral_source: Optional[str] = None
    referral_source_other: Optional[str] = None
    user_agent: Optional[str] = None
    ip_address: Optional[str] = None
    joined_at: UtcDatetime
    notified_at: Optional[UtcDatetime] = None
    is_notified: bool
    phone_number: str
    country_code: str

    @classmethod
    def from_entity(cls, entry: WaitlistEntry) -> "WaitlistEntryResponse":
        return cls(
            id=str(entry.id),
            full_name=entry.full_name,
            email=entry.email,
            company=entry.company,
            reference=entry.reference,
            referral_source=entry.referral_source,
            referral_source_other=entry.referral_source_other,
            user_agent=entry.user_agent,
            ip_address=entry.ip_address,
            joined_at=entry.joined_at,
            notified_at=entry.notified_at,
            is_notified=entry.is_notified,
            phone_number=entry.phone_number,
            country_code=entry.country_code,
        )


class WaitlistStatsResponse(CamelModel):
    total: int
    notified: int
    pending: int

    @classmethod
    def from_stats(cls, stats: WaitlistStats) -> "WaitlistStatsResponse":
        return cls(total=stats.total, notified=stats.notified, pending=stats.pending)


class WaitlistPageResponse(CamelModel):
    """Response for list waitlist use case"""

    items: List[WaitlistEntryResponse]
    total: int
    page: int
    page_size: int
    total_pages: int
    stats: WaitlistStatsResponse


class DeleteWaitlistEntryResponse(CamelModel):
    success: bool
    message: str
