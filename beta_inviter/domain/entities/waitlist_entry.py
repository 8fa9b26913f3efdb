"""
WaitlistEntry Entity

Signup record of a prospective user awaiting an invitation.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utc_now


class WaitlistEntry(SQLModel, table=True):
    """
    WaitlistEntry entity - created by the public signup form.

    Business Rules:
    - Only read, updated and deleted by the admin API
    - Marking notified sets is_notified and notified_at together
    """

    __tablename__ = "waitlist"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    full_name: str = Field(max_length=255)
    email: str = Field(max_length=255, index=True)
    company: Optional[str] = Field(default=None, max_length=255)
    reference: Optional[str] = Field(default=None, max_length=255)
    referral_source: Optional[str] = Field(default=None, max_length=255)
    referral_source_other: Optional[str] = Field(default=None, max_length=255)
    user_agent: Optional[str] = Field(default=None)
    ip_address: Optional[str] = Field(default=None, max_length=64)
    phone_number: str = Field(default="", max_length=32)
    country_code: str = Field(default="", max_length=8)

    is_notified: bool = Field(default=False)

    # Timestamps
    joined_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    notified_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_waitlist_joined_at", "joined_at"),)

    def mark_notified(self, now: Optional[datetime] = None) -> None:
        self.is_notified = True
        self.notified_at = now or utc_now()

    def matches(self, search: str) -> bool:
        """Case-insensitive substring match over the searchable text fields."""
        needle = search.lower()
        fields = (
            self.full_name,
            self.email,
            self.company,
            self.reference,
            self.referral_source,
            self.phone_number,
        )
        return any(value and needle in value.lower() for value in fields)
