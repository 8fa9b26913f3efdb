"""
Send Reminder Email Use Case

Reminds a recipient that an already issued code is about to expire.
"""

from typing import List

from beta_inviter.app.services import email_templates
from beta_inviter.app.services.email_sender import IEmailSender
from beta_inviter.app.services.unit_of_work import UnitOfWork
from beta_inviter.domain.base import utc_now
from beta_inviter.libs.result import Error, Result, Return

from .dtos import SendEmailCommand, SendEmailResponse, WarningResponse
from .email_delivery import check_sendable, dispatch, record_send, validate_recipient


class SendReminderEmailUseCase:
    """
    Use case for sending the expiry reminder.

    Business Rules:
    - Same validation and eligibility as the invitation
    - The code must already have been emailed to someone (NO_EMAIL_FOUND)
    """

    def __init__(self, uow: UnitOfWork, email_sender: IEmailSender):
        self.uow = uow
        self.email_sender = email_sender

    async def execute(self, command: SendEmailCommand) -> Result[SendEmailResponse]:
        error = validate_recipient(command.email)
        if error:
            return Return.err(error)

        async with self.uow:
            invite_code = await self.uow.invite_codes.get_by_code(command.invite_code)
            if invite_code is None:
                return Return.err(
                    Error("INVITE_CODE_NOT_FOUND", "Invite code not found")
                )

            error = check_sendable(invite_code, utc_now())
            if error:
                return Return.err(error)

            if not invite_code.recipients:
                return Return.err(
                    Error("NO_EMAIL_FOUND", "No email found for this invite code")
                )

            message = email_templates.render_reminder(
                to=command.email,
                invite_code=invite_code.code,
                name=email_templates.greeting_name(command.first_name, command.last_name),
            )
            message_id, error = await dispatch(self.email_sender, message)
            if error:
                return Return.err(error)

            warnings: List[Error] = []
            tracking_error = await record_send(self.uow, invite_code.code, command.email)
            if tracking_error:
                warnings.append(tracking_error)

        return Return.ok(
            SendEmailResponse(
                success=True,
                message_id=message_id,
                message="Reminder email sent successfully",
                warnings=[WarningResponse.from_error(w) for w in warnings],
            ),
            warnings=warnings,
        )
