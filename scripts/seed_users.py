#!/usr/bin/env python3
"""
Seed script to insert sample users into the auth table.

Inserts --count users through the repository and then prints the first
ten rows ordered by id.
"""
import argparse
import asyncio
import logging
import random
import sys
import uuid

from auth_api.core import config
from auth_api.core.config import ConfigError, PGConfig
from auth_api.core.logging_config import set_log_level, setup_logging
from auth_api.modules.database import ConnectionManager, apply_schema
from auth_api.modules.users.domain.user import NewUser, UserRole
from auth_api.modules.users.repositories.user_repository import UserRepository
from auth_api.modules.users.services.user_service import UserService

logger = logging.getLogger("auth_api.scripts.seed_users")

FIRST_NAMES = ["John", "Jane", "Michael", "Sarah", "Robert", "Emily", "David", "Anna"]
LAST_NAMES = ["Doe", "Smith", "Johnson", "Williams", "Brown", "Davis", "Miller", "Wilson"]


def sample_user() -> NewUser:
    first = random.choice(FIRST_NAMES)
    last = random.choice(LAST_NAMES)
    suffix = uuid.uuid4().hex[:8]
    password = uuid.uuid4().hex
    return NewUser(
        name=f"{first} {last}",
        email=f"{first}.{last}.{suffix}@example.com".lower(),
        password=password,
        password_confirm=password,
        role=random.choice([UserRole.USER, UserRole.ADMIN]),
    )


async def seed(pg_config: PGConfig, count: int, init_db: bool) -> None:
    connection = ConnectionManager(pg_config.dsn, min_size=pg_config.min_size, max_size=pg_config.max_size)
    await connection.connect()
    try:
        if init_db:
            await apply_schema(connection.database)

        service = UserService(UserRepository(connection.database))
        for _ in range(count):
            user_id = await service.create_user(sample_user())
            logger.info(f"inserted auth with id: {user_id}")

        print("Select result:\n")
        for user in await service.list_users(limit=10):
            print(
                f"id: {user.id}, name: {user.name}, email: {user.email}, "
                f"createdAt: {user.created_at}, updatedAt: {user.updated_at}, role: {user.role.name}"
            )
    finally:
        await connection.disconnect()


def main() -> int:
    parser = argparse.ArgumentParser(description="Insert sample users into the auth table")
    parser.add_argument("--config-path", default=config.DEFAULT_CONFIG_PATH, help="path to config file")
    parser.add_argument("--count", type=int, default=1, help="number of users to insert")
    parser.add_argument("--init-db", action="store_true", help="create the auth table first")
    args = parser.parse_args()

    setup_logging(config.log_level())
    config.load(args.config_path)
    set_log_level(config.log_level())

    try:
        pg_config = PGConfig.from_env()
    except ConfigError as e:
        logger.critical(f"Unable to load config: {e}")
        return 1

    asyncio.run(seed(pg_config, args.count, args.init_db))
    return 0


if __name__ == "__main__":
    sys.exit(main())
