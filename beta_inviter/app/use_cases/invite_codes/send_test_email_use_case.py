"""
Send Test Email Use Case

Checks the SMTP configuration by sending a fixed message.
"""

from beta_inviter.app.services import email_templates
from beta_inviter.app.services.email_sender import IEmailSender
from beta_inviter.libs.result import Result, Return

from .dtos import SendEmailResponse
from .email_delivery import dispatch, validate_recipient


class SendTestEmailUseCase:
    def __init__(self, email_sender: IEmailSender):
        self.email_sender = email_sender

    async def execute(self, test_email: str) -> Result[SendEmailResponse]:
        error = validate_recipient(test_email)
        if error:
            return Return.err(error)

        message_id, error = await dispatch(
            self.email_sender, email_templates.render_test(test_email)
        )
        if error:
            return Return.err(error)

        return Return.ok(
            SendEmailResponse(
                success=True,
                message_id=message_id,
                message="Test email sent successfully",
            )
        )
