from datetime import timedelta

import pytest
from sqlalchemy.exc import OperationalError

from beta_inviter.app.use_cases.dashboard import GetDashboardStatsUseCase
from beta_inviter.app.use_cases.invite_codes import ListInviteCodesUseCase
from beta_inviter.domain.base import utc_now
from beta_inviter.domain.entities import InviteCode, UserProfile, WaitlistEntry


@pytest.fixture
def codes():
    now = utc_now()
    redeemed = InviteCode(code="NAUSED1", created_at=now, email_sent_to=["a@x.io"])
    redeemed.mark_used(now)
    redeemed.used_by = "user-1"
    expired = InviteCode(
        code="NAOLD01",
        created_at=now - timedelta(days=40),
        expires_at=now - timedelta(days=10),
        email_sent_to=[],
    )
    fresh = InviteCode(
        code="NAFRESH",
        created_at=now,
        expires_at=now + timedelta(days=30),
        email_sent_to=["b@x.io", "c@x.io"],
    )
    return [redeemed, expired, fresh]


@pytest.mark.asyncio
async def test_list_resolves_recipient_names(mock_uow, codes):
    mock_uow.invite_codes.list_all.return_value = codes
    mock_uow.user_profiles.get_by_user_ids.return_value = {
        "user-1": UserProfile(user_id="user-1", full_name="Ada Lovelace", preferred_name="Ada")
    }

    result = await ListInviteCodesUseCase(mock_uow).execute()

    assert result.is_ok()
    data = result.value.data
    assert [c.code for c in data] == ["NAUSED1", "NAOLD01", "NAFRESH"]
    assert data[0].recipient_name == "Ada"
    assert data[0].status == "Used"
    assert data[1].status == "Expired"
    assert data[2].recipient_name is None
    assert result.value.warnings == []
    mock_uow.user_profiles.get_by_user_ids.assert_awaited_once_with({"user-1"})


@pytest.mark.asyncio
async def test_profile_lookup_failure_still_lists(mock_uow, codes):
    mock_uow.invite_codes.list_all.return_value = codes
    mock_uow.user_profiles.get_by_user_ids.side_effect = OperationalError(
        "SELECT user_profiles", {}, Exception("no such table: user_profiles")
    )

    result = await ListInviteCodesUseCase(mock_uow).execute()

    assert result.is_ok()
    assert len(result.value.data) == 3
    assert result.value.data[0].recipient_name is None
    assert result.value.warnings[0].code == "PROFILE_LOOKUP_FAILED"


@pytest.mark.asyncio
async def test_search_matches_code_or_status(mock_uow, codes):
    mock_uow.invite_codes.list_all.return_value = codes

    by_code = await ListInviteCodesUseCase(mock_uow).execute(search="fresh")
    by_status = await ListInviteCodesUseCase(mock_uow).execute(search="expired")

    assert [c.code for c in by_code.value.data] == ["NAFRESH"]
    assert [c.code for c in by_status.value.data] == ["NAOLD01"]


@pytest.mark.asyncio
async def test_dashboard_stats(mock_uow, codes):
    mock_uow.invite_codes.list_all.return_value = codes
    mock_uow.waitlist.list_all.return_value = [
        WaitlistEntry(full_name="Ada", email="ada@x.io", is_notified=True),
        WaitlistEntry(full_name="Bob", email="bob@x.io"),
    ]

    result = await GetDashboardStatsUseCase(mock_uow).execute()

    stats = result.value
    assert stats.invite_codes.total == 3
    assert stats.invite_codes.used == 1
    assert stats.invite_codes.expired == 1
    assert stats.invite_codes.active == 1
    assert stats.invite_codes.emails_sent == 3
    assert stats.invite_codes.usage_rate == 33.3
    assert stats.waitlist.pending == 1
