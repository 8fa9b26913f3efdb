"""
UserProfile Entity

Read-only view of the product's user profiles, used to show who redeemed a code.
"""

from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel


class UserProfile(SQLModel, table=True):
    __tablename__ = "user_profiles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: str = Field(unique=True, index=True, max_length=255)
    full_name: Optional[str] = Field(default=None, max_length=255)
    preferred_name: Optional[str] = Field(default=None, max_length=255)

    @property
    def display_name(self) -> Optional[str]:
        return self.preferred_name or self.full_name
