"""
Logging setup shared by the API and services.
"""

import logging
import sys

from app.config import Config

_configured = False


def setup_logging(config: Config) -> None:
    """Configure the root logger once from LOG_LEVEL / LOG_FORMAT."""
    global _configured
    if _configured:
        return

    level = getattr(logging, config.LOG_LEVEL.upper(), logging.INFO)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(config.LOG_FORMAT))

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)

    # SQL echo is controlled by DATABASE_ECHO, keep the engine logger quiet otherwise
    if not config.database.echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
