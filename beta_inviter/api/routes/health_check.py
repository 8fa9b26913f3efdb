from fastapi import APIRouter, status

from beta_inviter.domain.base import to_utc_iso, utc_now
from config import ApplicationConfig

router = APIRouter(tags=["Health"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    return {
        "status": "OK",
        "timestamp": to_utc_iso(utc_now()),
        "environment": ApplicationConfig.ENVIRONMENT,
    }
