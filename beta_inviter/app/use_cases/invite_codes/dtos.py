"""
Invite Code Use Case DTOs (Data Transfer Objects)

Command and Response classes for the invite code domain. Responses serialize
with camelCase keys, the shape the dashboard consumes.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from beta_inviter.domain.base import CamelModel, UtcDatetime, utc_now
from beta_inviter.domain.entities import InviteCode
from beta_inviter.libs.result import Error


# ============================================================================
# Command DTOs
# ============================================================================


class SendEmailCommand(BaseModel):
    """Send an invitation or reminder for an existing code"""

    email: str
    invite_code: str
    first_name: str
    last_name: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class WarningResponse(CamelModel):
    """Non-fatal problem from a best-effort step"""

    code: str
    message: str

    @classmethod
    def from_error(cls, error: Error) -> "WarningResponse":
        return cls(code=error.code, message=error.message)


class InviteCodeResponse(CamelModel):
    """Application shape of an invite code row"""

    id: str
    code: str
    date_generated: UtcDatetime
    expiry_date: Optional[UtcDatetime] = None
    status: str
    email_sent_to: List[str]
    max_uses: int
    current_uses: int
    used_by: Optional[str] = None
    used_at: Optional[UtcDatetime] = None
    recipient_name: Optional[str] = None

    @classmethod
    def from_entity(
        cls,
        invite_code: InviteCode,
        now: Optional[datetime] = None,
        recipient_name: Optional[str] = None,
    ) -> "InviteCodeResponse":
        return cls(
            id=str(invite_code.id),
            code=invite_code.code,
            date_generated=invite_code.created_at,
            expiry_date=invite_code.expires_at,
            status=invite_code.status(now or utc_now()).value,
            email_sent_to=invite_code.recipients,
            max_uses=invite_code.max_uses,
            current_uses=invite_code.current_uses,
            used_by=invite_code.used_by,
            used_at=invite_code.used_at,
            recipient_name=recipient_name,
        )


class ListInviteCodesResponse(CamelModel):
    """Response for list invite codes use case"""

    data: List[InviteCodeResponse]
    warnings: List[WarningResponse] = []


class GenerateCodesResponse(CamelModel):
    """Response for create/generate invite codes use case"""

    success: bool
    data: List[InviteCodeResponse]
    message: str


class DeleteInviteCodeResponse(CamelModel):
    """Response for delete invite code use case"""

    success: bool
    message: str


class DeleteExpiredCodesResponse(CamelModel):
    """Response for expiry sweep use case"""

    deleted_count: int


class SendEmailResponse(CamelModel):
    """Response for invitation, reminder and test email use cases"""

    success: bool
    message_id: str
    message: str
    warnings: List[WarningResponse] = []
