"""
Waitlist Use Cases

Admin-side browsing and maintenance of waitlist signups.
"""

from .delete_waitlist_entry_use_case import DeleteWaitlistEntryUseCase
from .dtos import (
    DeleteWaitlistEntryResponse,
    WaitlistEntryResponse,
    WaitlistPageResponse,
    WaitlistStatsResponse,
)
from .list_waitlist_use_case import ListWaitlistUseCase
from .update_waitlist_entry_use_case import (
    MarkWaitlistNotifiedUseCase,
    UpdateWaitlistEntryUseCase,
)

__all__ = [
    "ListWaitlistUseCase",
    "UpdateWaitlistEntryUseCase",
    "MarkWaitlistNotifiedUseCase",
    "DeleteWaitlistEntryUseCase",
    "WaitlistEntryResponse",
    "WaitlistPageResponse",
    "WaitlistStatsResponse",
    "DeleteWaitlistEntryResponse",
]
