from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import ConfigDict, Field

from beta_inviter.api.error import ClientError, ServerError
from beta_inviter.api.utils.admin_auth import verify_admin_token
from beta_inviter.app.services.email_sender import IEmailSender
from beta_inviter.app.services.unit_of_work import UnitOfWork
from beta_inviter.app.use_cases.invite_codes import (
    SendEmailCommand,
    SendEmailResponse,
    SendInviteEmailUseCase,
    SendReminderEmailUseCase,
    SendTestEmailUseCase,
)
from beta_inviter.depends import get_email_sender, get_unit_of_work
from beta_inviter.domain.base import CamelModel
from beta_inviter.libs.result import Error

router = APIRouter(tags=["Emails"], dependencies=[Depends(verify_admin_token)])


class SendEmailRequest(CamelModel):
    """
    Invitation / reminder request payload

    Empty or whitespace-only strings count as missing.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    email: str = Field(..., min_length=1, description="Recipient address")
    invite_code: str = Field(..., min_length=1, description="Existing invite code")
    first_name: str = Field(..., min_length=1, description="Recipient first name")
    last_name: Optional[str] = Field(None, description="Recipient last name")


class TestEmailRequest(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    test_email: str = Field(..., min_length=1, description="Recipient address")


def _raise_for_send_error(error: Error):
    if error.code in ("INVALID_EMAIL", "NO_EMAIL_FOUND"):
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    elif error.code == "INVITE_CODE_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    elif error.code == "INVITE_CODE_ALREADY_USED":
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    elif error.code == "INVITE_CODE_EXPIRED":
        raise ClientError(error, status_code=status.HTTP_410_GONE)
    raise ServerError(error)


def _to_command(request: SendEmailRequest) -> SendEmailCommand:
    return SendEmailCommand(
        email=request.email,
        invite_code=request.invite_code,
        first_name=request.first_name,
        last_name=request.last_name or None,
    )


@router.post(
    "/send-invite-email",
    status_code=status.HTTP_200_OK,
    response_model=SendEmailResponse,
)
async def send_invite_email(
    request: SendEmailRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_sender: IEmailSender = Depends(get_email_sender),
):
    """
    Send Invitation Email

    Delivers the invitation for an existing code, then records the
    recipient on the code. A failed record is reported in warnings.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR, INVALID_EMAIL
        - 404 Not Found: INVITE_CODE_NOT_FOUND
        - 409 Conflict: INVITE_CODE_ALREADY_USED
        - 410 Gone: INVITE_CODE_EXPIRED
        - 500 Internal Server Error: EMAIL_DELIVERY_FAILED
    """
    use_case = SendInviteEmailUseCase(uow, email_sender)
    result = await use_case.execute(_to_command(request))

    if result.is_err():
        _raise_for_send_error(result.error)

    return result.value


@router.post(
    "/send-reminder-email",
    status_code=status.HTTP_200_OK,
    response_model=SendEmailResponse,
)
async def send_reminder_email(
    request: SendEmailRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_sender: IEmailSender = Depends(get_email_sender),
):
    """
    Send Reminder Email

    Only codes that were already emailed at least once can be reminded.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR, INVALID_EMAIL, NO_EMAIL_FOUND
        - 404 Not Found: INVITE_CODE_NOT_FOUND
        - 409 Conflict: INVITE_CODE_ALREADY_USED
        - 410 Gone: INVITE_CODE_EXPIRED
        - 500 Internal Server Error: EMAIL_DELIVERY_FAILED
    """
    use_case = SendReminderEmailUseCase(uow, email_sender)
    result = await use_case.execute(_to_command(request))

    if result.is_err():
        _raise_for_send_error(result.error)

    return result.value


@router.post(
    "/test-email",
    status_code=status.HTTP_200_OK,
    response_model=SendEmailResponse,
)
async def send_test_email(
    request: TestEmailRequest,
    email_sender: IEmailSender = Depends(get_email_sender),
):
    """Send a configuration check message through the SMTP transport."""
    use_case = SendTestEmailUseCase(email_sender)
    result = await use_case.execute(request.test_email)

    if result.is_err():
        _raise_for_send_error(result.error)

    return result.value
