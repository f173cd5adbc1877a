"""
User Service

Orchestrates validation and repository calls for the auth user CRUD
operations. Errors from either step propagate to the caller unchanged.
"""
import logging
from typing import List

from auth_api.modules.users.domain.user import NewUser, User, UserUpdate
from auth_api.modules.users.repositories.user_repository import UserRepository
from auth_api.modules.users.services.validation import (
    validate_new_user,
    validate_user_id,
    validate_user_update,
)

logger = logging.getLogger("auth_api.users.service")


class UserService:
    """Service for user business logic."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def get_user(self, user_id: int) -> User:
        """Get user by ID."""
        logger.debug(f"[UserService.get_user] user_id={user_id}")
        validate_user_id(user_id)
        return await self.repository.get(user_id)

    async def create_user(self, new_user: NewUser) -> int:
        """Create a new user account and return its generated id."""
        logger.debug(f"[UserService.create_user] {new_user!r}")
        validated = validate_new_user(new_user)
        user_id = await self.repository.create(validated)
        logger.info(f"[UserService.create_user] created user_id={user_id}")
        return user_id

    async def update_user(self, user_update: UserUpdate) -> None:
        """
        Update an existing user.

        Role and updated_at are always written; name and email only when
        they are non-blank.
        """
        logger.debug(f"[UserService.update_user] {user_update!r}")
        validated = validate_user_update(user_update)
        await self.repository.update(validated)

    async def delete_user(self, user_id: int) -> None:
        """Hard delete user."""
        logger.debug(f"[UserService.delete_user] user_id={user_id}")
        validate_user_id(user_id)
        await self.repository.delete(user_id)

    async def list_users(self, limit: int = 10) -> List[User]:
        logger.debug(f"[UserService.list_users] limit={limit}")
        return await self.repository.list(limit=limit)
