"""
Shared fixtures for auth_api tests.
"""
from datetime import datetime, timezone
from typing import Dict, List

import pytest

from auth_api.modules.users.domain.errors import InternalError
from auth_api.modules.users.domain.user import NewUser, User, UserUpdate
from auth_api.modules.users.services.user_service import UserService


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0)


class InMemoryUserRepository:
    """Dict-backed stand-in for UserRepository with the same error behaviour."""

    def __init__(self):
        self.rows: Dict[int, dict] = {}
        self._next_id = 1

    async def get(self, user_id: int) -> User:
        if user_id not in self.rows:
            raise InternalError(f"Error while query row. Error info: no user with id {user_id}")
        return User.from_dict(self.rows[user_id])

    async def create(self, new_user: NewUser) -> int:
        user_id = self._next_id
        self._next_id += 1
        self.rows[user_id] = {
            "id": user_id,
            "name": new_user.name,
            "email": new_user.email,
            "password": new_user.password,
            "role": int(new_user.role),
            "created_at": utcnow(),
            "updated_at": None,
        }
        return user_id

    async def update(self, user_update: UserUpdate) -> None:
        row = self.rows.get(user_update.id)
        if row is None:
            return
        row["role"] = int(user_update.role)
        row["updated_at"] = utcnow()
        if user_update.name:
            row["name"] = user_update.name
        if user_update.email:
            row["email"] = user_update.email

    async def delete(self, user_id: int) -> None:
        self.rows.pop(user_id, None)

    async def list(self, limit: int = 10) -> List[User]:
        return [User.from_dict(self.rows[key]) for key in sorted(self.rows)[:limit]]


@pytest.fixture
def memory_repository():
    return InMemoryUserRepository()


@pytest.fixture
def user_service(memory_repository):
    return UserService(memory_repository)
