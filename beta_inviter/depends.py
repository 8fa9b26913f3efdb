from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from beta_inviter.adapter.services.smtp_email_sender import SmtpEmailSender
from beta_inviter.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from beta_inviter.app.services.email_sender import IEmailSender
from config import ApplicationConfig

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_email_sender() -> IEmailSender:
    return SmtpEmailSender(ApplicationConfig)
