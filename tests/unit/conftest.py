from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from beta_inviter.app.services.email_sender import IEmailSender
from beta_inviter.domain.base import utc_now
from beta_inviter.domain.entities import InviteCode


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.invite_codes = MagicMock()
    uow.invite_codes.list_all = AsyncMock(return_value=[])
    uow.invite_codes.get_by_id = AsyncMock()
    uow.invite_codes.get_by_code = AsyncMock()
    uow.invite_codes.create = AsyncMock(side_effect=lambda code: code)
    uow.invite_codes.update = AsyncMock(side_effect=lambda code: code)
    uow.invite_codes.delete = AsyncMock()
    uow.invite_codes.delete_expired = AsyncMock(return_value=0)
    uow.invite_codes.add_recipient = AsyncMock()

    uow.waitlist = MagicMock()
    uow.waitlist.list_all = AsyncMock(return_value=[])
    uow.waitlist.get_by_id = AsyncMock()
    uow.waitlist.update = AsyncMock(side_effect=lambda entry: entry)
    uow.waitlist.delete = AsyncMock()

    uow.user_profiles = MagicMock()
    uow.user_profiles.get_by_user_ids = AsyncMock(return_value={})
    return uow


@pytest.fixture
def mock_email_sender():
    sender = MagicMock(spec=IEmailSender)
    sender.send = AsyncMock(return_value="<message-1@he2.ai>")
    return sender


@pytest.fixture
def active_code():
    now = utc_now()
    return InviteCode(
        code="NAAB12C",
        created_at=now,
        expires_at=now + timedelta(days=30),
        email_sent_to=[],
    )
