from fastapi import status

from beta_inviter.libs.result import Error

GENERIC_SERVER_MESSAGE = "Internal server error"


class ClientError(Exception):
    """Failure the caller can correct; rendered with its own status code."""

    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)

    def to_dict(self) -> dict:
        return {"code": self.base_error.code, "message": self.base_error.message}


class ServerError(Exception):
    """
    Datastore or SMTP failure, always rendered as 500.

    The underlying message (e.g. the SMTP server's reply) is only exposed
    when the caller asks for it, which the app does in development.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)

    def to_dict(self, expose_message: bool = False) -> dict:
        message = self.base_error.message if expose_message else GENERIC_SERVER_MESSAGE
        return {"code": self.base_error.code, "message": message}
