from datetime import timedelta

import pytest
from sqlalchemy.exc import OperationalError

from beta_inviter.app.services.email_sender import EmailDeliveryError
from beta_inviter.app.use_cases.invite_codes import (
    SendEmailCommand,
    SendInviteEmailUseCase,
    SendTestEmailUseCase,
)
from beta_inviter.domain.base import utc_now


def _command(**overrides):
    data = {"email": "jane@acme.com", "invite_code": "NAAB12C", "first_name": "Jane"}
    data.update(overrides)
    return SendEmailCommand(**data)


@pytest.mark.asyncio
async def test_send_invite_success(mock_uow, mock_email_sender, active_code):
    mock_uow.invite_codes.get_by_code.return_value = active_code
    mock_uow.invite_codes.add_recipient.return_value = active_code
    use_case = SendInviteEmailUseCase(mock_uow, mock_email_sender)

    result = await use_case.execute(_command(last_name="Doe"))

    assert result.is_ok()
    assert result.value.success is True
    assert result.value.message_id == "<message-1@he2.ai>"
    assert result.value.message == "Email sent successfully"
    assert result.value.warnings == []

    message = mock_email_sender.send.await_args.args[0]
    assert message.to == "jane@acme.com"
    assert message.subject == "Your Helium Beta Invitation"
    assert message.text.count("Jane Doe") == 1
    assert message.text.count("NAAB12C") == 1

    mock_uow.invite_codes.add_recipient.assert_awaited_once_with("NAAB12C", "jane@acme.com")
    mock_uow.commit.assert_awaited_once()
    # Sending never redeems the code
    assert active_code.is_used is False


@pytest.mark.asyncio
@pytest.mark.parametrize("email", ["not-an-email", "a@b", "a b@c.io", "@acme.com"])
async def test_invalid_email_is_rejected_before_lookup(mock_uow, mock_email_sender, email):
    use_case = SendInviteEmailUseCase(mock_uow, mock_email_sender)

    result = await use_case.execute(_command(email=email))

    assert result.is_err()
    assert result.error.code == "INVALID_EMAIL"
    mock_uow.invite_codes.get_by_code.assert_not_awaited()
    mock_email_sender.send.assert_not_awaited()


@pytest.mark.asyncio
async def test_unknown_code(mock_uow, mock_email_sender):
    mock_uow.invite_codes.get_by_code.return_value = None
    use_case = SendInviteEmailUseCase(mock_uow, mock_email_sender)

    result = await use_case.execute(_command())

    assert result.is_err()
    assert result.error.code == "INVITE_CODE_NOT_FOUND"
    mock_email_sender.send.assert_not_awaited()


@pytest.mark.asyncio
async def test_used_code_is_not_sent(mock_uow, mock_email_sender, active_code):
    active_code.mark_used()
    mock_uow.invite_codes.get_by_code.return_value = active_code
    use_case = SendInviteEmailUseCase(mock_uow, mock_email_sender)

    result = await use_case.execute(_command())

    assert result.error.code == "INVITE_CODE_ALREADY_USED"
    mock_email_sender.send.assert_not_awaited()


@pytest.mark.asyncio
async def test_expired_code_is_not_sent(mock_uow, mock_email_sender, active_code):
    active_code.expires_at = utc_now() - timedelta(minutes=1)
    mock_uow.invite_codes.get_by_code.return_value = active_code
    use_case = SendInviteEmailUseCase(mock_uow, mock_email_sender)

    result = await use_case.execute(_command())

    assert result.error.code == "INVITE_CODE_EXPIRED"
    mock_email_sender.send.assert_not_awaited()


@pytest.mark.asyncio
async def test_transport_failure(mock_uow, mock_email_sender, active_code):
    mock_uow.invite_codes.get_by_code.return_value = active_code
    mock_email_sender.send.side_effect = EmailDeliveryError("535 Authentication failed")
    use_case = SendInviteEmailUseCase(mock_uow, mock_email_sender)

    result = await use_case.execute(_command())

    assert result.is_err()
    assert result.error.code == "EMAIL_DELIVERY_FAILED"
    assert "535" in result.error.message
    mock_uow.invite_codes.add_recipient.assert_not_awaited()


@pytest.mark.asyncio
async def test_tracking_failure_is_a_warning(mock_uow, mock_email_sender, active_code):
    mock_uow.invite_codes.get_by_code.return_value = active_code
    mock_uow.invite_codes.add_recipient.side_effect = OperationalError(
        "UPDATE invite_codes", {}, Exception("database is locked")
    )
    use_case = SendInviteEmailUseCase(mock_uow, mock_email_sender)

    result = await use_case.execute(_command())

    assert result.is_ok()
    assert result.value.success is True
    assert [w.code for w in result.warnings] == ["TRACKING_FAILED"]
    assert result.value.warnings[0].code == "TRACKING_FAILED"
    mock_uow.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_send_test_email(mock_email_sender):
    use_case = SendTestEmailUseCase(mock_email_sender)

    result = await use_case.execute("ops@acme.com")

    assert result.is_ok()
    assert result.value.message_id == "<message-1@he2.ai>"
    message = mock_email_sender.send.await_args.args[0]
    assert message.subject == "Helium Inviter - Test Email"


@pytest.mark.asyncio
async def test_send_test_email_invalid_address(mock_email_sender):
    result = await SendTestEmailUseCase(mock_email_sender).execute("nope")

    assert result.error.code == "INVALID_EMAIL"
    mock_email_sender.send.assert_not_awaited()
