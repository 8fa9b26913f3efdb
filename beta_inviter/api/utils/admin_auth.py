"""
Admin Bearer Token Authentication

Guards every admin endpoint with the JWT issued by POST /auth/login.
"""

from typing import Optional

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from beta_inviter.api.error import ClientError
from beta_inviter.api.utils.jwt import ADMIN_ROLE, verify_jwt
from beta_inviter.libs.result import Error
from config import ApplicationConfig

security = HTTPBearer(auto_error=False)


async def verify_admin_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """
    Verify the admin bearer token from the Authorization header.

    AUTH_DISABLED skips the check for local development.

    Raises:
        ClientError: 401 if token is missing, invalid, expired or not an admin token

    Returns:
        Decoded JWT payload
    """
    if ApplicationConfig.AUTH_DISABLED:
        return {"sub": ApplicationConfig.ADMIN_EMAIL, "role": ADMIN_ROLE}

    if credentials is None or not credentials.credentials:
        raise ClientError(
            Error("UNAUTHORIZED", "Admin bearer token required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    payload = verify_jwt(credentials.credentials)
    if payload is None or payload.get("role") != ADMIN_ROLE:
        raise ClientError(
            Error("INVALID_TOKEN", "Invalid or expired token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return payload
