import re
from datetime import datetime, timedelta

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from beta_inviter.adapter.repositories.invite_code_repository import InviteCodeRepository
from beta_inviter.domain.base import utc_now
from beta_inviter.domain.entities import InviteCode
from config import ApplicationConfig


async def _create_code(client: AsyncClient, **body) -> dict:
    response = await client.post("/api/invite-codes", json=body)
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_invite_code_lifecycle(admin_client: AsyncClient, email_sender):
    """Create, redeem, remind, delete

    Given a freshly created code with a 30-day expiry
    When it is marked used, reminded without a previous send and deleted
    Then status, usage fields and the list reflect each step
    """
    created = await _create_code(admin_client, expiresInDays=30)

    assert re.fullmatch(r"NA[A-Z0-9]{5}", created["code"])
    assert created["status"] == "Not Used"
    assert created["emailSentTo"] == []
    assert created["dateGenerated"].endswith("Z")
    assert created["expiryDate"].endswith("Z")
    generated = datetime.fromisoformat(created["dateGenerated"])
    expiry = datetime.fromisoformat(created["expiryDate"])
    assert expiry - generated == timedelta(days=30)

    response = await admin_client.patch(
        f"/api/invite-codes/{created['id']}", json={"isUsed": True, "usedBy": "user-1"}
    )
    assert response.status_code == 200
    used = response.json()
    assert used["status"] == "Used"
    assert used["usedAt"] is not None
    assert used["usedAt"].endswith("Z")
    assert used["currentUses"] == 1
    assert used["usedBy"] == "user-1"

    other = await _create_code(admin_client)
    response = await admin_client.post(
        "/api/send-reminder-email",
        json={"email": "jane@acme.com", "inviteCode": other["code"], "firstName": "Jane"},
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "NO_EMAIL_FOUND"
    assert response.json()["error"]["message"] == "No email found for this invite code"
    assert email_sender.sent == []

    response = await admin_client.delete(f"/api/invite-codes/{created['id']}")
    assert response.status_code == 200
    assert response.json()["success"] is True

    response = await admin_client.get("/api/invite-codes")
    codes = [c["code"] for c in response.json()["data"]]
    assert created["code"] not in codes
    assert other["code"] in codes


@pytest.mark.asyncio
async def test_generate_codes(admin_client: AsyncClient):
    response = await admin_client.post(
        "/api/generate-codes", json={"count": 10, "prefix": "beta"}
    )

    assert response.status_code == 201
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Successfully generated 10 invite codes"
    codes = {c["code"] for c in data["data"]}
    assert len(codes) == 10
    assert all(re.fullmatch(r"BETA[A-Z0-9]{5}", c) for c in codes)


@pytest.mark.asyncio
@pytest.mark.parametrize("count", [0, 150])
async def test_generate_codes_count_out_of_range(admin_client: AsyncClient, count):
    response = await admin_client.post("/api/generate-codes", json={"count": count})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    listed = await admin_client.get("/api/invite-codes")
    assert listed.json()["data"] == []


@pytest.mark.asyncio
async def test_invalid_prefix(admin_client: AsyncClient):
    response = await admin_client.post("/api/invite-codes", json={"prefix": "NO-DASH"})

    assert response.status_code == 400
    assert "prefix" in response.json()["error"]["message"]


@pytest.mark.asyncio
async def test_mark_used_twice_conflicts(admin_client: AsyncClient):
    created = await _create_code(admin_client)
    url = f"/api/invite-codes/{created['id']}"

    await admin_client.patch(url, json={"isUsed": True})
    response = await admin_client.patch(url, json={"isUsed": True})

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "INVITE_CODE_ALREADY_USED"

    response = await admin_client.patch(url, json={"isUsed": False})
    assert response.status_code == 200
    assert response.json()["status"] == "Not Used"
    assert response.json()["usedAt"] is None


@pytest.mark.asyncio
async def test_unknown_code_returns_404(admin_client: AsyncClient):
    url = "/api/invite-codes/6f1c0c59-3f5e-4a3e-9d7e-2f5c2b1f4a10"

    assert (await admin_client.patch(url, json={"isUsed": True})).status_code == 404
    response = await admin_client.delete(url)
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "INVITE_CODE_NOT_FOUND"


@pytest.mark.asyncio
async def test_delete_expired_codes(admin_client: AsyncClient, db_session):
    now = utc_now()
    db_session.add(
        InviteCode(
            code="NAOLD01",
            created_at=now - timedelta(days=40),
            expires_at=now - timedelta(days=10),
            email_sent_to=[],
        )
    )
    db_session.add(InviteCode(code="NAFOREV", created_at=now, email_sent_to=[]))
    await db_session.commit()
    await _create_code(admin_client)

    response = await admin_client.delete("/api/invite-codes/expired")

    assert response.status_code == 200
    assert response.json() == {"deletedCount": 1}
    remaining = (await admin_client.get("/api/invite-codes")).json()["data"]
    assert len(remaining) == 2
    assert "NAOLD01" not in [c["code"] for c in remaining]


@pytest.mark.asyncio
async def test_search_by_status(admin_client: AsyncClient):
    created = await _create_code(admin_client)
    await _create_code(admin_client)
    await admin_client.patch(f"/api/invite-codes/{created['id']}", json={"isUsed": True})

    response = await admin_client.get("/api/invite-codes", params={"search": "used"})

    # "Not Used" also contains "used"
    assert len(response.json()["data"]) == 2

    response = await admin_client.get("/api/invite-codes", params={"search": "not used"})
    assert len(response.json()["data"]) == 1


@pytest.mark.asyncio
async def test_dashboard_stats(admin_client: AsyncClient):
    first = await _create_code(admin_client)
    await _create_code(admin_client)
    await admin_client.patch(f"/api/invite-codes/{first['id']}", json={"isUsed": True})

    response = await admin_client.get("/api/dashboard-stats")

    assert response.status_code == 200
    stats = response.json()
    codes = stats["inviteCodes"]
    assert codes["total"] == 2
    assert codes["used"] == 1
    assert codes["active"] == 1
    assert codes["expired"] == 0
    assert codes["usageRate"] == 50.0
    assert codes["total"] == codes["used"] + codes["active"] + codes["expired"]
    assert stats["waitlist"] == {"total": 0, "notified": 0, "pending": 0}


@pytest.mark.asyncio
async def test_datastore_failure_renders_json_error(admin_client: AsyncClient, monkeypatch):
    async def broken_list_all(self):
        raise OperationalError("SELECT invite_codes", {}, Exception("database is locked"))

    monkeypatch.setattr(InviteCodeRepository, "list_all", broken_list_all)

    response = await admin_client.get("/api/invite-codes")

    assert response.status_code == 500
    error = response.json()["error"]
    assert error["code"] == "DATABASE_ERROR"
    assert "database is locked" in error["message"]

    monkeypatch.setattr(ApplicationConfig, "ENVIRONMENT", "production")
    response = await admin_client.get("/api/invite-codes")

    assert response.status_code == 500
    assert response.json()["error"] == {
        "code": "DATABASE_ERROR",
        "message": "Internal server error",
    }
