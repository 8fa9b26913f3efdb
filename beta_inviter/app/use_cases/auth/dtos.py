"""
Authentication Use Case DTOs (Data Transfer Objects)
"""

from beta_inviter.domain.base import CamelModel


class AdminLoginResponse(CamelModel):
    """Response for admin login use case"""

    access_token: str
    token_type: str
    expires_in: int
