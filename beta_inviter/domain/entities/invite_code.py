"""
InviteCode Entity

A short code entitling one redemption of the beta offer.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from ..base import utc_now
from .enums import InviteCodeStatus


class InviteCode(SQLModel, table=True):
    """
    InviteCode entity - one row per issued code.

    Business Rules:
    - code is unique across all rows
    - current_uses mirrors is_used (0 or 1)
    - email_sent_to never holds the same address twice
    - a code without expires_at never expires
    """

    __tablename__ = "invite_codes"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    code: str = Field(unique=True, index=True, max_length=32)

    is_used: bool = Field(default=False)
    used_by: Optional[str] = Field(default=None, max_length=255)
    used_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    max_uses: int = Field(default=1)
    current_uses: int = Field(default=0)

    email_sent_to: Optional[List[str]] = Field(
        default_factory=list, sa_column=Column(JSON)
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    expires_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_invite_code_created_at", "created_at"),
        Index("idx_invite_code_expires_at", "expires_at"),
    )

    @property
    def recipients(self) -> List[str]:
        return list(self.email_sent_to or [])

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        if self.expires_at is None:
            return False
        return self.expires_at < (now or utc_now())

    def status(self, now: Optional[datetime] = None) -> InviteCodeStatus:
        if self.is_used:
            return InviteCodeStatus.used
        if self.is_expired(now):
            return InviteCodeStatus.expired
        return InviteCodeStatus.not_used

    def mark_used(self, now: Optional[datetime] = None) -> None:
        self.is_used = True
        self.used_at = now or utc_now()
        self.current_uses = 1

    def clear_used(self) -> None:
        self.is_used = False
        self.used_at = None
        self.used_by = None
        self.current_uses = 0

    def add_recipient(self, email: str) -> bool:
        """Append email to the tracking list unless present. Returns True if added."""
        recipients = self.recipients
        if email in recipients:
            return False
        # Reassign so the JSON column is flagged dirty
        self.email_sent_to = recipients + [email]
        return True
