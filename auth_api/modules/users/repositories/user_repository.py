"""
User Repository

Handles all database operations for the auth table. Statements are built
with SQLAlchemy Core and executed through the shared ``databases`` pool.
"""
import logging
from typing import Callable, List

import sqlalchemy
from databases import Database
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql import ClauseElement

from auth_api.modules.users.domain.errors import InternalError
from auth_api.modules.users.domain.user import NewUser, User, UserUpdate

logger = logging.getLogger("auth_api.users.repository")

metadata = sqlalchemy.MetaData()

auth_table = sqlalchemy.Table(
    "auth",
    metadata,
    sqlalchemy.Column("id", sqlalchemy.Integer, primary_key=True),
    sqlalchemy.Column("name", sqlalchemy.Text, nullable=False),
    sqlalchemy.Column("email", sqlalchemy.Text, nullable=False),
    sqlalchemy.Column("password", sqlalchemy.Text),
    sqlalchemy.Column("role", sqlalchemy.Integer),
    sqlalchemy.Column(
        "created_at",
        sqlalchemy.DateTime,
        nullable=False,
        server_default=sqlalchemy.func.now(),
    ),
    sqlalchemy.Column("updated_at", sqlalchemy.DateTime),
)

USER_COLUMNS = (
    auth_table.c.id,
    auth_table.c.name,
    auth_table.c.email,
    auth_table.c.role,
    auth_table.c.created_at,
    auth_table.c.updated_at,
)


class UserRepository:
    """Repository for auth user data access."""

    def __init__(self, database: Database):
        self.database = database

    @staticmethod
    def _build(method: str, builder: Callable[[], ClauseElement]) -> ClauseElement:
        try:
            return builder()
        except SQLAlchemyError as e:
            logger.error(f"[UserRepository.{method}] Unable to create SQL query from builder: {e}", exc_info=True)
            raise InternalError(f"Unable to create SQL query from builder. Error info: {e}") from e

    @staticmethod
    def select_by_id(user_id: int) -> ClauseElement:
        return sqlalchemy.select(*USER_COLUMNS).where(auth_table.c.id == user_id)

    @staticmethod
    def insert_user(new_user: NewUser) -> ClauseElement:
        return (
            auth_table.insert()
            .values(
                name=new_user.name,
                email=new_user.email,
                password=new_user.password,
                role=int(new_user.role),
            )
            .returning(auth_table.c.id)
        )

    @staticmethod
    def update_user(user_update: UserUpdate) -> ClauseElement:
        values = {
            "role": int(user_update.role),
            "updated_at": sqlalchemy.func.now(),
        }
        # name/email arrive trimmed by validate_user_update; None means unchanged.
        if user_update.name is not None:
            values["name"] = user_update.name
        if user_update.email is not None:
            values["email"] = user_update.email

        return auth_table.update().where(auth_table.c.id == user_update.id).values(**values)

    @staticmethod
    def delete_by_id(user_id: int) -> ClauseElement:
        return auth_table.delete().where(auth_table.c.id == user_id)

    @staticmethod
    def select_page(limit: int) -> ClauseElement:
        return sqlalchemy.select(*USER_COLUMNS).order_by(auth_table.c.id).limit(limit)

    async def get(self, user_id: int) -> User:
        """Get user by ID."""
        query = self._build("get", lambda: self.select_by_id(user_id))

        try:
            row = await self.database.fetch_one(query)
        except Exception as e:
            logger.error(f"[UserRepository.get] Error while query row: {e}", exc_info=True)
            raise InternalError(f"Error while query row. Error info: {e}") from e

        if row is None:
            logger.error(f"[UserRepository.get] No row for user_id={user_id}")
            raise InternalError(f"Error while query row. Error info: no user with id {user_id}")

        return User.from_dict(dict(row._mapping))

    async def create(self, new_user: NewUser) -> int:
        """Create a new user and return user_id."""
        query = self._build("create", lambda: self.insert_user(new_user))

        try:
            user_id = await self.database.fetch_val(query)
        except Exception as e:
            logger.error(f"[UserRepository.create] Unable to get userID from created user: {e}", exc_info=True)
            raise InternalError(f"Unable to get userID from created user, error: {e}") from e

        return user_id

    async def update(self, user_update: UserUpdate) -> None:
        """Update role, updated_at and any provided name/email."""
        query = self._build("update", lambda: self.update_user(user_update))

        try:
            await self.database.execute(query)
        except Exception as e:
            logger.error(f"[UserRepository.update] Unable to execute SQL query: {e}", exc_info=True)
            raise InternalError(f"Unable to execute SQL query, error info: {e}") from e

    async def delete(self, user_id: int) -> None:
        """Hard delete user by ID."""
        query = self._build("delete", lambda: self.delete_by_id(user_id))

        try:
            await self.database.execute(query)
        except Exception as e:
            logger.error(f"[UserRepository.delete] Unable to execute SQL query: {e}", exc_info=True)
            raise InternalError(f"Unable to execute SQL query, error info: {e}") from e

    async def list(self, limit: int = 10) -> List[User]:
        """List users ordered by id."""
        query = self._build("list", lambda: self.select_page(limit))

        try:
            rows = await self.database.fetch_all(query)
        except Exception as e:
            logger.error(f"[UserRepository.list] Error while query rows: {e}", exc_info=True)
            raise InternalError(f"Error while query rows. Error info: {e}") from e

        return [User.from_dict(dict(row._mapping)) for row in rows]
