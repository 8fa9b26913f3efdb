import bcrypt
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from beta_inviter.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from beta_inviter.app.services.email_sender import (
    EmailDeliveryError,
    EmailMessage,
    IEmailSender,
)
from beta_inviter.depends import get_email_sender, get_unit_of_work
from config import ApplicationConfig

ADMIN_EMAIL = "admin@he2.ai"
ADMIN_PASSWORD = "S3cure-admin-pass"


class FakeEmailSender(IEmailSender):
    """Records messages instead of talking to an SMTP server"""

    def __init__(self):
        self.sent = []
        self.fail_with = None

    async def send(self, message: EmailMessage) -> str:
        if self.fail_with:
            raise EmailDeliveryError(self.fail_with)
        self.sent.append(message)
        return f"<fake-{len(self.sent)}@he2.ai>"


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
def email_sender():
    return FakeEmailSender()


@pytest_asyncio.fixture
async def client(db_session, email_sender, monkeypatch):
    from httpx import ASGITransport
    from beta_inviter.api.app import create_app

    monkeypatch.setattr(ApplicationConfig, "AUTH_DISABLED", False)
    monkeypatch.setattr(ApplicationConfig, "ENVIRONMENT", "development")
    monkeypatch.setattr(ApplicationConfig, "ADMIN_EMAIL", ADMIN_EMAIL)
    monkeypatch.setattr(
        ApplicationConfig,
        "ADMIN_PASSWORD_HASH",
        bcrypt.hashpw(ADMIN_PASSWORD.encode(), bcrypt.gensalt(4)).decode(),
    )

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_email_sender] = lambda: email_sender

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def admin_client(client):
    """Client carrying a bearer token from a real admin login"""
    response = await client.post(
        "/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
    )
    assert response.status_code == 200
    client.headers["Authorization"] = f"Bearer {response.json()['accessToken']}"
    return client


@pytest_asyncio.fixture
def admin_credentials():
    return {"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
