"""
Authentication Use Cases
"""

from .admin_login_use_case import AdminLoginUseCase
from .dtos import AdminLoginResponse

__all__ = [
    "AdminLoginUseCase",
    "AdminLoginResponse",
]
