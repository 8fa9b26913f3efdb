"""
Admin Login Use Case

Checks the configured admin credential pair and issues a bearer token.
"""

import secrets
from typing import Optional

import bcrypt

from beta_inviter.api.utils.jwt import generate_admin_jwt
from beta_inviter.libs.result import Error, Result, Return

from .dtos import AdminLoginResponse


class AdminLoginUseCase:
    """
    Use case for admin login.

    Business Rules:
    - Single admin identity; email and bcrypt hash come from configuration
    - Login is refused while no password hash is configured
    - Password check runs even for an unknown email to keep timing flat
    """

    def __init__(
        self, admin_email: str, admin_password_hash: Optional[str], expire_minutes: int
    ):
        self.admin_email = admin_email
        self.admin_password_hash = admin_password_hash
        self.expire_minutes = expire_minutes

    async def execute(self, email: str, password: str) -> Result[AdminLoginResponse]:
        if not self.admin_password_hash:
            bcrypt.checkpw(b"dummy_password", bcrypt.hashpw(b"dummy", bcrypt.gensalt(4)))
            return Return.err(
                Error("LOGIN_DISABLED", "Admin credentials are not configured")
            )

        email_matches = secrets.compare_digest(
            email.strip().lower().encode(), self.admin_email.strip().lower().encode()
        )
        try:
            password_valid = bcrypt.checkpw(
                password.encode(), self.admin_password_hash.encode()
            )
        except ValueError:
            return Return.err(
                Error("LOGIN_DISABLED", "Admin password hash is malformed")
            )

        if not (email_matches and password_valid):
            return Return.err(Error("INVALID_CREDENTIALS", "Invalid email or password"))

        token = generate_admin_jwt(self.admin_email, self.expire_minutes)
        return Return.ok(
            AdminLoginResponse(
                access_token=token,
                token_type="bearer",
                expires_in=self.expire_minutes * 60,
            )
        )
