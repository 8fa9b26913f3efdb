"""
Shared steps of the invitation and reminder sends.
"""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from beta_inviter.app.services.email_sender import (
    EmailDeliveryError,
    EmailMessage,
    IEmailSender,
)
from beta_inviter.app.services.unit_of_work import UnitOfWork
from beta_inviter.domain.entities import InviteCode
from beta_inviter.domain.validators import is_valid_email
from beta_inviter.libs.result import Error

logger = logging.getLogger(__name__)


def validate_recipient(email: str) -> Optional[Error]:
    if not is_valid_email(email):
        return Error("INVALID_EMAIL", "Invalid email format")
    return None


def check_sendable(invite_code: InviteCode, now: datetime) -> Optional[Error]:
    """Only unused, unexpired codes may be emailed."""
    if invite_code.is_used:
        return Error("INVITE_CODE_ALREADY_USED", "Invite code has already been used")
    if invite_code.is_expired(now):
        return Error("INVITE_CODE_EXPIRED", "Invite code has expired")
    return None


async def dispatch(sender: IEmailSender, message: EmailMessage):
    """Returns (message_id, None) or (None, Error)."""
    try:
        message_id = await sender.send(message)
    except EmailDeliveryError as exc:
        logger.error(f"Error sending '{message.subject}' to {message.to}: {exc}")
        return None, Error("EMAIL_DELIVERY_FAILED", str(exc) or "Failed to send email")
    logger.info(f"Email '{message.subject}' sent to {message.to}: {message_id}")
    return message_id, None


async def record_send(uow: UnitOfWork, code: str, email: str) -> Optional[Error]:
    """
    Append email to the code's tracking list after a successful send.

    Best-effort: a failure is logged and returned as a warning, the email
    stays sent.
    """
    try:
        tracked = await uow.invite_codes.add_recipient(code, email)
        await uow.commit()
    except SQLAlchemyError as exc:
        logger.warning(f"Failed to track email send for {code}: {exc}")
        await uow.rollback()
        return Error("TRACKING_FAILED", "Email sent but could not be recorded")

    if tracked is None:
        logger.warning(f"Failed to track email send for {code}: code no longer exists")
        return Error("TRACKING_FAILED", "Email sent but the invite code no longer exists")
    return None
