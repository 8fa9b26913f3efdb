from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from beta_inviter.api.error import ClientError, ServerError
from beta_inviter.app.use_cases.auth import AdminLoginResponse, AdminLoginUseCase
from config import ApplicationConfig

router = APIRouter(prefix="/auth", tags=["Authentication"])


class LoginRequest(BaseModel):
    """
    Admin login HTTP request payload
    """

    email: str = Field(..., min_length=1, description="Admin email address")
    password: str = Field(..., min_length=1, description="Admin password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AdminLoginResponse)
async def login(request: LoginRequest):
    """
    Admin Login

    Exchanges the configured admin credentials for a bearer token used on
    every other admin endpoint.

    Raises:
        - 401 Unauthorized: INVALID_CREDENTIALS
        - 503 Service Unavailable: LOGIN_DISABLED (no password hash configured)
    """
    use_case = AdminLoginUseCase(
        admin_email=ApplicationConfig.ADMIN_EMAIL,
        admin_password_hash=ApplicationConfig.ADMIN_PASSWORD_HASH,
        expire_minutes=ApplicationConfig.JWT_EXPIRE_MINUTES,
    )
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "LOGIN_DISABLED":
            raise ClientError(error, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
        raise ServerError(error)

    return result.value
