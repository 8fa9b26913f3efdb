from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import Field

from beta_inviter.api.error import ClientError, ServerError
from beta_inviter.api.utils.admin_auth import verify_admin_token
from beta_inviter.app.services.unit_of_work import UnitOfWork
from beta_inviter.app.use_cases.invite_codes import (
    CreateInviteCodesUseCase,
    DeleteExpiredCodesResponse,
    DeleteExpiredInviteCodesUseCase,
    DeleteInviteCodeResponse,
    DeleteInviteCodeUseCase,
    GenerateCodesResponse,
    InviteCodeResponse,
    ListInviteCodesResponse,
    ListInviteCodesUseCase,
    UpdateInviteCodeUseCase,
)
from beta_inviter.depends import get_unit_of_work
from beta_inviter.domain.base import CamelModel
from beta_inviter.domain.validators import CODE_PREFIX_PATTERN
from config import ApplicationConfig

router = APIRouter(tags=["Invite Codes"], dependencies=[Depends(verify_admin_token)])


class CreateInviteCodeRequest(CamelModel):
    """
    Single invite code request payload

    Omitted fields fall back to the configured prefix and expiry.
    """

    prefix: Optional[str] = Field(
        None, pattern=CODE_PREFIX_PATTERN.pattern, description="Code prefix"
    )
    expires_in_days: Optional[int] = Field(None, ge=1, description="Days until expiry")
    max_uses: int = Field(1, ge=1, description="Redemptions allowed")


class GenerateCodesRequest(CamelModel):
    """Batch invite code request payload"""

    count: int = Field(..., ge=1, le=100, description="Number of codes (1-100)")
    prefix: Optional[str] = Field(
        None, pattern=CODE_PREFIX_PATTERN.pattern, description="Code prefix"
    )
    expires_in_days: Optional[int] = Field(None, ge=1, description="Days until expiry")


class UpdateInviteCodeRequest(CamelModel):
    """Partial update of the redemption state"""

    is_used: Optional[bool] = Field(None, description="Mark used or unused")
    used_by: Optional[str] = Field(None, description="Redeeming account id")


def _raise_for_create_error(error):
    if error.code in ("INVALID_COUNT", "INVALID_EXPIRY"):
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    elif error.code == "DUPLICATE_CODE":
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    raise ServerError(error)


@router.get(
    "/invite-codes",
    status_code=status.HTTP_200_OK,
    response_model=ListInviteCodesResponse,
)
async def list_invite_codes(
    search: Optional[str] = Query(None, description="Match on code or status"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Invite Codes

    Newest first, with the redeemer's display name for used codes.
    A failed name lookup is reported in warnings and does not fail the request.
    """
    use_case = ListInviteCodesUseCase(uow)
    result = await use_case.execute(search=search)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.post(
    "/invite-codes",
    status_code=status.HTTP_201_CREATED,
    response_model=InviteCodeResponse,
)
async def create_invite_code(
    request: CreateInviteCodeRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Invite Code

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 409 Conflict: DUPLICATE_CODE (no unique code after retries)
        - 500 Internal Server Error: Server error
    """
    use_case = CreateInviteCodesUseCase(uow)
    result = await use_case.execute(
        count=1,
        prefix=request.prefix or ApplicationConfig.INVITE_CODE_PREFIX,
        expires_in_days=request.expires_in_days
        or ApplicationConfig.INVITE_CODE_EXPIRY_DAYS,
        max_uses=request.max_uses,
    )

    if result.is_err():
        _raise_for_create_error(result.error)

    return result.value.data[0]


@router.post(
    "/generate-codes",
    status_code=status.HTTP_201_CREATED,
    response_model=GenerateCodesResponse,
)
async def generate_codes(
    request: GenerateCodesRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Generate Invite Codes in bulk

    Raises:
        - 400 Bad Request: count outside 1-100
        - 409 Conflict: DUPLICATE_CODE
        - 500 Internal Server Error: Server error
    """
    use_case = CreateInviteCodesUseCase(uow)
    result = await use_case.execute(
        count=request.count,
        prefix=request.prefix or ApplicationConfig.INVITE_CODE_PREFIX,
        expires_in_days=request.expires_in_days
        or ApplicationConfig.INVITE_CODE_EXPIRY_DAYS,
    )

    if result.is_err():
        _raise_for_create_error(result.error)

    return result.value


@router.delete(
    "/invite-codes/expired",
    status_code=status.HTTP_200_OK,
    response_model=DeleteExpiredCodesResponse,
)
async def delete_expired_invite_codes(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Delete Expired Invite Codes

    Removes every code whose expiry has passed, used or not.
    """
    use_case = DeleteExpiredInviteCodesUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.patch(
    "/invite-codes/{invite_code_id}",
    status_code=status.HTTP_200_OK,
    response_model=InviteCodeResponse,
)
async def update_invite_code(
    invite_code_id: UUID,
    request: UpdateInviteCodeRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Invite Code

    Raises:
        - 404 Not Found: INVITE_CODE_NOT_FOUND
        - 409 Conflict: INVITE_CODE_ALREADY_USED
        - 410 Gone: INVITE_CODE_EXPIRED
        - 500 Internal Server Error: Server error
    """
    use_case = UpdateInviteCodeUseCase(uow)
    result = await use_case.execute(
        invite_code_id, is_used=request.is_used, used_by=request.used_by
    )

    if result.is_err():
        error = result.error
        if error.code == "INVITE_CODE_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "INVITE_CODE_ALREADY_USED":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        elif error.code == "INVITE_CODE_EXPIRED":
            raise ClientError(error, status_code=status.HTTP_410_GONE)
        raise ServerError(error)

    return result.value


@router.delete(
    "/invite-codes/{invite_code_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeleteInviteCodeResponse,
)
async def delete_invite_code(
    invite_code_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Invite Code

    Raises:
        - 404 Not Found: INVITE_CODE_NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    use_case = DeleteInviteCodeUseCase(uow)
    result = await use_case.execute(invite_code_id)

    if result.is_err():
        error = result.error
        if error.code == "INVITE_CODE_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
