"""
Beta Inviter Domain Entities

All domain entities organized by model.
"""

# Export all enums
from .enums import (
    InviteCodeStatus,
    WaitlistStatusFilter,
)

# Export all entities
from .invite_code import InviteCode
from .waitlist_entry import WaitlistEntry
from .user_profile import UserProfile

__all__ = [
    # Enums
    "InviteCodeStatus",
    "WaitlistStatusFilter",
    # Entities
    "InviteCode",
    "WaitlistEntry",
    "UserProfile",
]
