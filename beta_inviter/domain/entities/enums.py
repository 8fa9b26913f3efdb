"""
Beta Inviter Domain Enums

Enumeration types shared by entities, use cases and routes.
"""

from enum import Enum


class InviteCodeStatus(str, Enum):
    """Derived display status of an invite code"""

    used = "Used"
    not_used = "Not Used"
    expired = "Expired"


class WaitlistStatusFilter(str, Enum):
    """Waitlist list filter"""

    all = "all"
    notified = "notified"
    not_notified = "not-notified"
