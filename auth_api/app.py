"""
Auth API server

Entry point: loads config, opens the Postgres pool and serves user_v1.UserV1
over grpc.aio until SIGINT/SIGTERM.
"""
import argparse
import asyncio
import logging
import signal
import sys
from typing import Optional, Sequence

import grpc
from grpc_reflection.v1alpha import reflection

from auth_api.core import config
from auth_api.core.config import ConfigError, GRPCConfig, PGConfig
from auth_api.core.logging_config import API_NAME, set_log_level, setup_logging
from auth_api.modules.database import ConnectionManager
from auth_api.modules.users.api import SERVICE_NAME, UserV1Endpoints, add_UserV1Servicer_to_server
from auth_api.modules.users.repositories.user_repository import UserRepository
from auth_api.modules.users.services.user_service import UserService

logger = logging.getLogger("auth_api.app")

SHUTDOWN_GRACE_SECONDS = 5.0


class DatabaseUnavailableError(RuntimeError):
    """The pool connected but the database did not answer a health check."""


def create_server(service: UserService) -> grpc.aio.Server:
    """Build a grpc.aio server with UserV1 and reflection registered."""
    server = grpc.aio.server()
    add_UserV1Servicer_to_server(UserV1Endpoints(service), server)
    reflection.enable_server_reflection((SERVICE_NAME, reflection.SERVICE_NAME), server)
    return server


def _request_stop(stop_event: asyncio.Event, sig: signal.Signals) -> None:
    logger.info(f"Received {sig.name}, shutting down")
    stop_event.set()


async def serve(
    grpc_config: GRPCConfig,
    pg_config: PGConfig,
    stop_event: Optional[asyncio.Event] = None,
) -> None:
    """Serve until stop_event is set or SIGINT/SIGTERM arrives."""
    stop_event = stop_event or asyncio.Event()

    connection = ConnectionManager(pg_config.dsn, min_size=pg_config.min_size, max_size=pg_config.max_size)
    await connection.connect()
    if not await connection.health_check():
        await connection.disconnect()
        raise DatabaseUnavailableError("Database health check failed")

    server = create_server(UserService(UserRepository(connection.database)))
    loop = asyncio.get_running_loop()
    signals = (signal.SIGINT, signal.SIGTERM)
    try:
        server.add_insecure_port(grpc_config.address)
        await server.start()
        logger.info(f"Server listening at {grpc_config.address}")

        for sig in signals:
            loop.add_signal_handler(sig, _request_stop, stop_event, sig)

        await stop_event.wait()
    finally:
        for sig in signals:
            loop.remove_signal_handler(sig)
        await server.stop(SHUTDOWN_GRACE_SECONDS)
        await connection.disconnect()
        logger.info("Server stopped")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=f"{API_NAME} gRPC server")
    parser.add_argument(
        "--config-path",
        default=config.DEFAULT_CONFIG_PATH,
        help="path to config file",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(config.log_level())
    config.load(args.config_path)
    set_log_level(config.log_level())

    try:
        grpc_config = GRPCConfig.from_env()
        pg_config = PGConfig.from_env()
    except ConfigError as e:
        logger.critical(f"Unable to load config: {e}")
        return 1

    try:
        asyncio.run(serve(grpc_config, pg_config))
    except DatabaseUnavailableError as e:
        logger.critical(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
