from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Dict


DEFAULT_CONFIG_PATH = Path("config.toml")
CONFIG_PATH_ENV = "LINK_HERALD_CONFIG"


def config_path() -> Path:
    """``LINK_HERALD_CONFIG`` when set, otherwise ``config.toml`` in the working directory."""
    return Path(os.getenv(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH)


def load_raw_config(path: str | Path | None = None) -> Dict[str, Any]:
    """
    Load the bot's TOML settings.

    A missing file yields an empty dict and every setting comes from the
    environment. A file that exists but does not parse is a startup error.
    """
    target = Path(path) if path is not None else config_path()
    if not target.is_file():
        return {}

    try:
        with target.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Invalid config file {target}: {exc}") from exc


__all__ = ["load_raw_config", "config_path", "DEFAULT_CONFIG_PATH", "CONFIG_PATH_ENV"]
