"""Application settings switches used by the entry point.

Values come from an optional INI file ``app.ini`` in the data directory
(``HOSPITAL_DATA_DIR``, default ``data``) with environment overrides:

* ``[app] dev`` or ``HOSPITAL_DEV=1`` turns on dev mode.
* ``[logging] level`` or ``HOSPITAL_LOG_LEVEL`` sets the log level.  Dev mode
  defaults to ``DEBUG`` when no level is given.
* ``[console] clear_screen`` controls whether the menu clears the terminal.
"""

from __future__ import annotations

import configparser
from dataclasses import dataclass
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

_TRUE = {"1", "true", "yes", "on"}
_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True)
class AppSettings:
    dev_mode: bool = False
    log_level: str = "WARNING"
    clear_screen: bool = True


def _data_dir(data_dir: str | Path | None) -> Path:
    if data_dir is not None:
        return Path(data_dir)
    return Path(os.environ.get("HOSPITAL_DATA_DIR", "data"))


def _read_ini(path: Path) -> configparser.ConfigParser:
    cp = configparser.ConfigParser()
    if not path.exists():
        return cp
    try:
        cp.read(path)
    except configparser.Error as exc:
        logger.warning("Unable to parse %s; using defaults (%s)", path, exc)
        return configparser.ConfigParser()
    return cp


def _flag(raw: str | None, fallback: bool) -> bool:
    if raw is None:
        return fallback
    return raw.strip().lower() in _TRUE


def _level(raw: str | None) -> str | None:
    if raw is None:
        return None
    level = raw.strip().upper()
    if level not in _LEVELS:
        logger.warning("Unknown log level %r; using defaults", raw)
        return None
    return level


def load_settings(data_dir: str | Path | None = None) -> AppSettings:
    cp = _read_ini(_data_dir(data_dir) / "app.ini")

    dev_mode = _flag(cp.get("app", "dev", fallback=None), False) or _flag(
        os.environ.get("HOSPITAL_DEV"), False
    )
    level = _level(os.environ.get("HOSPITAL_LOG_LEVEL")) or _level(
        cp.get("logging", "level", fallback=None)
    )
    if level is None:
        level = "DEBUG" if dev_mode else "WARNING"
    clear_screen = _flag(cp.get("console", "clear_screen", fallback=None), True)

    return AppSettings(dev_mode=dev_mode, log_level=level, clear_screen=clear_screen)


__all__ = ["AppSettings", "load_settings"]
