"""
Dashboard aggregates.

Computed by a linear scan over the full list on every call; no counters are
kept between calls.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

from .base import utc_now
from .entities import InviteCode, WaitlistEntry


@dataclass(frozen=True)
class InviteCodeStats:
    total: int
    used: int
    expired: int
    active: int
    emails_sent: int
    usage_rate: float


@dataclass(frozen=True)
class WaitlistStats:
    total: int
    notified: int
    pending: int


def compute_invite_code_stats(
    codes: Iterable[InviteCode], now: Optional[datetime] = None
) -> InviteCodeStats:
    """total == used + expired + active holds for any input."""
    now = now or utc_now()
    total = used = expired = emails_sent = 0
    for code in codes:
        total += 1
        if code.is_used:
            used += 1
        elif code.is_expired(now):
            expired += 1
        emails_sent += len(code.recipients)

    usage_rate = (used / total) * 100 if total else 0.0
    return InviteCodeStats(
        total=total,
        used=used,
        expired=expired,
        active=total - used - expired,
        emails_sent=emails_sent,
        usage_rate=round(usage_rate, 1),
    )


def compute_waitlist_stats(entries: Iterable[WaitlistEntry]) -> WaitlistStats:
    total = notified = 0
    for entry in entries:
        total += 1
        if entry.is_notified:
            notified += 1
    return WaitlistStats(total=total, notified=notified, pending=total - notified)
