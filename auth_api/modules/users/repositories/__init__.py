"""
Data Access Layer (Repositories)

Repositories handle all database interactions.
"""

from .user_repository import UserRepository, auth_table, metadata

__all__ = [
    "UserRepository",
    "auth_table",
    "metadata",
]
