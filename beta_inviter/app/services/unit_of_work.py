from abc import ABC, abstractmethod

from beta_inviter.app.repositories.invite_code_repository import IInviteCodeRepository
from beta_inviter.app.repositories.user_profile_repository import IUserProfileRepository
from beta_inviter.app.repositories.waitlist_repository import IWaitlistRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    invite_codes: IInviteCodeRepository
    waitlist: IWaitlistRepository
    user_profiles: IUserProfileRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
