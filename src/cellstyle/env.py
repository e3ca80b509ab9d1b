from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Final, Optional

_LOG = logging.getLogger(__name__)

_ANSI_ENV: Final[str] = "CELLSTYLE_ANSI"
_LOGGING_ENV: Final[str] = "CELLSTYLE_LOGGING"
_DEBUG_ENV: Final[str] = "CELLSTYLE_DEBUG"
_LOG_FILE_ENV: Final[str] = "CELLSTYLE_LOG_FILE"
_CONFIG_LOGGED = False


def _parse_bool(raw: Optional[str], *, default: bool = False) -> bool:
    if raw is None:
        return default
    token = raw.strip().lower()
    if token in {"1", "true", "yes", "on"}:
        return True
    if token in {"0", "false", "no", "off"}:
        return False
    return default


def ansi_enabled() -> bool:
    """Return ``True`` when colorized output should carry ANSI escapes.

    Controlled by ``CELLSTYLE_ANSI``; unset or unrecognised values keep ANSI
    on.
    """

    return _parse_bool(os.getenv(_ANSI_ENV), default=True)


def logging_enabled() -> bool:
    return _parse_bool(os.getenv(_LOGGING_ENV), default=False)


def debug_enabled() -> bool:
    return _parse_bool(os.getenv(_DEBUG_ENV), default=False)


def log_file_path() -> Optional[Path]:
    """Return the log file configured via ``CELLSTYLE_LOG_FILE``, if any."""

    raw = os.getenv(_LOG_FILE_ENV)
    if raw is None or not raw.strip():
        return None
    return Path(raw.strip()).expanduser()


def log_configuration_once() -> None:
    global _CONFIG_LOGGED

    if _CONFIG_LOGGED:
        return

    _LOG.info(
        "ansi=%s logging=%s debug=%s log_file=%s",
        ansi_enabled(),
        logging_enabled(),
        debug_enabled(),
        log_file_path(),
    )
    _CONFIG_LOGGED = True
