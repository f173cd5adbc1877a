import logging

API_NAME = "User-API-v1"

LOG_FORMAT = f"%(asctime)s %(levelname)s [{API_NAME}] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once for the whole process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )


def set_log_level(level: str) -> None:
    """Adjust the root level once the config file has been read."""
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))
