from datetime import datetime, timedelta, timezone
from uuid import uuid4

from beta_inviter.app.use_cases.invite_codes import InviteCodeResponse
from beta_inviter.domain.base import to_utc_iso
from beta_inviter.domain.entities import InviteCode


def test_naive_value_is_marked_utc():
    assert to_utc_iso(datetime(2025, 1, 31, 12, 0)) == "2025-01-31T12:00:00Z"


def test_aware_value_is_converted_to_utc():
    value = datetime(2025, 1, 31, 14, 0, tzinfo=timezone(timedelta(hours=2)))

    assert to_utc_iso(value) == "2025-01-31T12:00:00Z"


def test_invite_code_json_timestamps():
    code = InviteCode(
        id=uuid4(),
        code="NAAB12C",
        created_at=datetime(2025, 1, 1, 9, 30),
        expires_at=datetime(2025, 1, 31, 9, 30),
        email_sent_to=[],
    )

    body = InviteCodeResponse.from_entity(code, datetime(2025, 1, 2)).model_dump(
        mode="json", by_alias=True
    )

    assert body["dateGenerated"] == "2025-01-01T09:30:00Z"
    assert body["expiryDate"] == "2025-01-31T09:30:00Z"
    assert body["usedAt"] is None
