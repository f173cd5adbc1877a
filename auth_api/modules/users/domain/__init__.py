"""
Domain Models

Pure data models representing the user entity.
"""

from .user import User, UserRole, NewUser, UserUpdate
from .errors import UserServiceError, InvalidArgumentError, InternalError

__all__ = [
    "User",
    "UserRole",
    "NewUser",
    "UserUpdate",
    "UserServiceError",
    "InvalidArgumentError",
    "InternalError",
]
