"""
Invite Code Use Cases

Invite code lifecycle and the emails sent for it.
"""

from .create_invite_codes_use_case import CreateInviteCodesUseCase
from .delete_invite_code_use_case import (
    DeleteExpiredInviteCodesUseCase,
    DeleteInviteCodeUseCase,
)
from .dtos import (
    DeleteExpiredCodesResponse,
    DeleteInviteCodeResponse,
    GenerateCodesResponse,
    InviteCodeResponse,
    ListInviteCodesResponse,
    SendEmailCommand,
    SendEmailResponse,
    WarningResponse,
)
from .list_invite_codes_use_case import ListInviteCodesUseCase
from .send_invite_email_use_case import SendInviteEmailUseCase
from .send_reminder_email_use_case import SendReminderEmailUseCase
from .send_test_email_use_case import SendTestEmailUseCase
from .update_invite_code_use_case import UpdateInviteCodeUseCase

__all__ = [
    "ListInviteCodesUseCase",
    "CreateInviteCodesUseCase",
    "UpdateInviteCodeUseCase",
    "DeleteInviteCodeUseCase",
    "DeleteExpiredInviteCodesUseCase",
    "SendInviteEmailUseCase",
    "SendReminderEmailUseCase",
    "SendTestEmailUseCase",
    "SendEmailCommand",
    "InviteCodeResponse",
    "ListInviteCodesResponse",
    "GenerateCodesResponse",
    "DeleteInviteCodeResponse",
    "DeleteExpiredCodesResponse",
    "SendEmailResponse",
    "WarningResponse",
]
