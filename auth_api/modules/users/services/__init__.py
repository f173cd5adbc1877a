"""
Business Logic Services

Services validate requests and orchestrate repository calls.
"""

from .user_service import UserService

__all__ = [
    "UserService",
]
