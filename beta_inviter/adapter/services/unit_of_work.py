from sqlmodel.ext.asyncio.session import AsyncSession

from beta_inviter.adapter.repositories.invite_code_repository import InviteCodeRepository
from beta_inviter.adapter.repositories.user_profile_repository import UserProfileRepository
from beta_inviter.adapter.repositories.waitlist_repository import WaitlistRepository
from beta_inviter.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.invite_codes = InviteCodeRepository(self.session)
        self.waitlist = WaitlistRepository(self.session)
        self.user_profiles = UserProfileRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
