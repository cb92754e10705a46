"""
Application configuration.

Importing this package reads ``.env``, then ``config.toml`` (or the file named
by ``LINK_HERALD_CONFIG``), then the environment, and configures logging once.
A missing required setting raises ``ValueError`` here, before the bot connects.
"""

import logging
import os
from dotenv import load_dotenv

from .loader import load_raw_config
from .core import Core
from .links import Links

load_dotenv()

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# OpenAI SDK requests and mautrix sync polling log every round trip at INFO
QUIET_LOGGERS = ("httpx", "mautrix")


def log_level(name: str | None) -> int:
    """Map a ``LOG_LEVEL`` name such as ``debug`` to a level; unknown names mean INFO."""
    level = logging.getLevelName((name or "INFO").strip().upper())
    return level if isinstance(level, int) else logging.INFO


logging.basicConfig(format=LOG_FORMAT, datefmt=DATE_FORMAT, level=log_level(os.getenv("LOG_LEVEL")))
for _name in QUIET_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

_RAW_CONFIG = load_raw_config()

core = Core(_RAW_CONFIG)
links = Links(_RAW_CONFIG)


class Config:
    core = core
    links = links


__all__ = ["core", "links", "Config", "log_level"]
