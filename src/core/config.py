"""
Settings read from the environment (and a .env file, if present).
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv
from textual.logging import TextualHandler

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


@dataclass(frozen=True)
class Settings:
    timeout: Optional[float] = 30.0
    indent: int = 2
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """
        Build settings from ``GET_TUI_*`` variables.

        Args:
            environ: mapping to read from, defaults to ``os.environ`` after
                loading ``.env``
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        log_level = environ.get("GET_TUI_LOG_LEVEL", cls.log_level).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"GET_TUI_LOG_LEVEL: unknown level {log_level!r}")

        return cls(
            timeout=_parse_timeout(environ.get("GET_TUI_TIMEOUT")),
            indent=_parse_int("GET_TUI_INDENT", environ.get("GET_TUI_INDENT"), cls.indent),
            log_level=log_level,
            log_file=environ.get("GET_TUI_LOG_FILE") or None,
        )


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or raw.strip() == "":
        return Settings.timeout
    if raw.strip().lower() == "none":
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"GET_TUI_TIMEOUT: expected seconds, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"GET_TUI_TIMEOUT: must not be negative, got {raw!r}")
    return value or None


def _parse_int(name: str, raw: Optional[str], default: int) -> int:
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name}: expected an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name}: must not be negative, got {raw!r}")
    return value


def configure_logging(settings: Settings) -> None:
    """Send log records to the Textual console and, optionally, a file."""
    handlers: list[logging.Handler] = [TextualHandler()]
    if settings.log_file:
        file_handler = logging.FileHandler(settings.log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers.append(file_handler)
    logging.basicConfig(level=settings.log_level, handlers=handlers, force=True)
