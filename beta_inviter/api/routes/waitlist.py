from datetime import datetime
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from beta_inviter.api.error import ClientError, ServerError
from beta_inviter.api.utils.admin_auth import verify_admin_token
from beta_inviter.app.services.unit_of_work import UnitOfWork
from beta_inviter.app.use_cases.waitlist import (
    DeleteWaitlistEntryResponse,
    DeleteWaitlistEntryUseCase,
    ListWaitlistUseCase,
    MarkWaitlistNotifiedUseCase,
    UpdateWaitlistEntryUseCase,
    WaitlistEntryResponse,
    WaitlistPageResponse,
)
from beta_inviter.depends import get_unit_of_work
from beta_inviter.domain.base import CamelModel
from beta_inviter.domain.entities import WaitlistStatusFilter
from beta_inviter.libs.result import Error

router = APIRouter(
    prefix="/waitlist", tags=["Waitlist"], dependencies=[Depends(verify_admin_token)]
)


class UpdateWaitlistEntryRequest(CamelModel):
    """
    Partial waitlist update payload

    Only keys present in the body are written; unknown keys are rejected.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid"
    )

    full_name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = Field(None, min_length=1)
    company: Optional[str] = None
    reference: Optional[str] = None
    referral_source: Optional[str] = None
    referral_source_other: Optional[str] = None
    is_notified: Optional[bool] = None
    notified_at: Optional[datetime] = None
    phone_number: Optional[str] = Field(None, min_length=1)
    country_code: Optional[str] = Field(None, min_length=1)


def _raise_for_entry_error(error: Error):
    if error.code in ("INVALID_FIELD", "INVALID_EMAIL"):
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    elif error.code == "WAITLIST_ENTRY_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)


@router.get("", status_code=status.HTTP_200_OK, response_model=WaitlistPageResponse)
async def list_waitlist(
    search: Optional[str] = Query(None, description="Match on name, email, company..."),
    status_filter: WaitlistStatusFilter = Query(
        WaitlistStatusFilter.all, alias="status"
    ),
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=100, alias="pageSize"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Waitlist

    Newest signups first. totalPages is 0 for an empty result; pages past the
    end return the last page.
    """
    use_case = ListWaitlistUseCase(uow)
    result = await use_case.execute(
        search=search, status=status_filter, page=page, page_size=page_size
    )

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_PAGE", "INVALID_PAGE_SIZE"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.patch(
    "/{entry_id}", status_code=status.HTTP_200_OK, response_model=WaitlistEntryResponse
)
async def update_waitlist_entry(
    entry_id: UUID,
    request: UpdateWaitlistEntryRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Waitlist Entry

    Raises:
        - 400 Bad Request: VALIDATION_ERROR, INVALID_FIELD, INVALID_EMAIL
        - 404 Not Found: WAITLIST_ENTRY_NOT_FOUND
    """
    use_case = UpdateWaitlistEntryUseCase(uow)
    result = await use_case.execute(entry_id, request.model_dump(exclude_unset=True))

    if result.is_err():
        _raise_for_entry_error(result.error)

    return result.value


@router.post(
    "/{entry_id}/notify",
    status_code=status.HTTP_200_OK,
    response_model=WaitlistEntryResponse,
)
async def mark_waitlist_entry_notified(
    entry_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Mark a waitlist entry as notified now."""
    use_case = MarkWaitlistNotifiedUseCase(uow)
    result = await use_case.execute(entry_id)

    if result.is_err():
        _raise_for_entry_error(result.error)

    return result.value


@router.delete(
    "/{entry_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeleteWaitlistEntryResponse,
)
async def delete_waitlist_entry(
    entry_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = DeleteWaitlistEntryUseCase(uow)
    result = await use_case.execute(entry_id)

    if result.is_err():
        _raise_for_entry_error(result.error)

    return result.value
