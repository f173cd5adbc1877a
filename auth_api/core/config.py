"""
Configuration

Loads a dotenv file and reads typed gRPC and Postgres settings from the
environment.
"""
import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger("auth_api.config")

DEFAULT_CONFIG_PATH = ".env"

GRPC_HOST_ENV = "GRPC_HOST"
GRPC_PORT_ENV = "GRPC_PORT"
PG_DSN_ENV = "PG_DSN"
DATABASE_URL_ENV = "DATABASE_URL"
PG_POOL_MIN_SIZE_ENV = "PG_POOL_MIN_SIZE"
PG_POOL_MAX_SIZE_ENV = "PG_POOL_MAX_SIZE"
LOG_LEVEL_ENV = "LOG_LEVEL"


class ConfigError(ValueError):
    """Missing or malformed configuration value."""


def load(config_path: str = DEFAULT_CONFIG_PATH) -> bool:
    """
    Load environment variables from a dotenv file.

    Variables already present in the environment win. A missing file is
    not an error: the process environment may carry everything.
    """
    if not os.path.isfile(config_path):
        logger.warning(f"Config file {config_path} not found, using process environment")
        return False
    return load_dotenv(config_path)


def _required(name: str) -> str:
    value = os.getenv(name, "").strip()
    if not value:
        raise ConfigError(f"{name} not found")
    return value


def _int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {value!r}")


def _optional_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return _int(name, value.strip())


@dataclass(frozen=True)
class GRPCConfig:
    host: str
    port: int

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"

    @classmethod
    def from_env(cls) -> "GRPCConfig":
        host = _required(GRPC_HOST_ENV)
        port = _int(GRPC_PORT_ENV, _required(GRPC_PORT_ENV))
        if not 0 <= port <= 65535:
            raise ConfigError(f"{GRPC_PORT_ENV} out of range: {port}")
        return cls(host=host, port=port)


@dataclass(frozen=True)
class PGConfig:
    dsn: str
    min_size: int = 1
    max_size: int = 10

    @classmethod
    def from_env(cls) -> "PGConfig":
        dsn = os.getenv(PG_DSN_ENV, "").strip() or os.getenv(DATABASE_URL_ENV, "").strip()
        if not dsn:
            raise ConfigError(f"{PG_DSN_ENV} not found")

        min_size = _optional_int(PG_POOL_MIN_SIZE_ENV, 1)
        max_size = _optional_int(PG_POOL_MAX_SIZE_ENV, 10)
        if min_size < 1 or max_size < min_size:
            raise ConfigError(f"Invalid pool size: min={min_size}, max={max_size}")
        return cls(dsn=dsn, min_size=min_size, max_size=max_size)


def log_level(default: str = "INFO") -> str:
    value: Optional[str] = os.getenv(LOG_LEVEL_ENV)
    return (value or default).strip().upper()
