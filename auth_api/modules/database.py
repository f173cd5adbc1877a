"""
Database Connection Manager

Handles the connection pool lifecycle and health checks, and can apply the
bundled auth table schema for local setups.
"""
import logging
import os
from typing import List, Optional

from databases import Database

logger = logging.getLogger("auth_api.database.connection")

MIGRATIONS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "migrations")
AUTH_TABLE_MIGRATION = "20240715183832_create_auth_table.sql"


class ConnectionManager:
    """
    Manages database connection lifecycle.
    """

    def __init__(self, database_url: str, min_size: int = 1, max_size: int = 10):
        """
        Initialize connection manager.

        Args:
            database_url: postgresql:// URL of the auth database.
            min_size: Minimum pool size.
            max_size: Maximum pool size.
        """
        if not database_url:
            raise ValueError("database_url must be provided")

        self.database_url = database_url
        self.min_size = min_size
        self.max_size = max_size
        self._database: Optional[Database] = None

    @property
    def database(self) -> Database:
        """
        Get the database instance. Creates it if it doesn't exist.
        """
        if self._database is None:
            self._database = Database(self.database_url, min_size=self.min_size, max_size=self.max_size)
        return self._database

    async def connect(self) -> None:
        """
        Establish the connection pool.
        """
        if not self.database.is_connected:
            await self.database.connect()
            logger.info(f"Database connection established (pool {self.min_size}-{self.max_size})")

    async def disconnect(self) -> None:
        """
        Close the connection pool.
        """
        if self._database and self._database.is_connected:
            await self._database.disconnect()
            logger.info("Database connection closed")

    async def health_check(self) -> bool:
        """
        Check if database connection is healthy.

        Returns:
            True if connection is healthy, False otherwise
        """
        try:
            if not self.is_connected():
                return False
            await self._database.fetch_val("SELECT 1")
            return True
        except Exception as e:
            logger.warning(f"Database health check failed: {e}")
            return False

    def is_connected(self) -> bool:
        return bool(self._database and self._database.is_connected)


def read_migration_up(filename: str = AUTH_TABLE_MIGRATION) -> List[str]:
    """
    Read the ``-- +goose Up`` section of a bundled migration file.

    Returns:
        Individual SQL statements, in file order.
    """
    path = os.path.join(MIGRATIONS_DIR, filename)
    with open(path, "r") as f:
        content = f.read()

    up = content.split("-- +goose Down", 1)[0].replace("-- +goose Up", "")
    return [stmt.strip() for stmt in up.split(";") if stmt.strip()]


async def apply_schema(database: Database, filename: str = AUTH_TABLE_MIGRATION) -> None:
    """Create the auth table if it does not exist yet."""
    statements = read_migration_up(filename)
    for i, statement in enumerate(statements, 1):
        await database.execute(statement)
        logger.debug(f"Executed statement {i}/{len(statements)} from {filename}")
    logger.info(f"Schema from {filename} applied")
