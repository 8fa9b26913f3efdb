from abc import ABC, abstractmethod

from pydantic import BaseModel


class EmailMessage(BaseModel):
    """A rendered message ready for the transport"""

    to: str
    subject: str
    text: str
    html: str


class EmailDeliveryError(Exception):
    """The transport refused or failed to deliver a message."""


class IEmailSender(ABC):
    """Email transport interface - application layer"""

    @abstractmethod
    async def send(self, message: EmailMessage) -> str:
        """Deliver message; returns the transport message id or raises EmailDeliveryError"""
        pass
