"""
Request Context and Configuration State for Logging.

The request id lives in a ContextVar so each request (thread or asyncio
task) sees only its own id. Module-level variables hold the logging
configuration shared by the whole process.

Environment Variables:
    - PICCY_TTS_LOG_LEVEL: Override log level (1-4 or name)
    - PICCY_TTS_LOG_DIR: Directory for the JSONL log file
    - PICCY_TTS_JSONL_FILE: JSONL filename
    - PICCY_TTS_LOG_ROTATE_BYTES: Max log file size
    - PICCY_TTS_LOG_ROTATE_BACKUP: Number of backup files
"""
from __future__ import annotations

import os
from contextvars import ContextVar
from typing import Any, Dict, Optional

from .levels import LogLevel

# "-" marks log lines emitted outside a request
_request_id: ContextVar[str] = ContextVar("request_id", default="-")

_configured: bool = False
_current_level: LogLevel = LogLevel.NORMAL


def get_request_id() -> str:
    """Get the request id of the current context, or "-"."""
    return _request_id.get()


def set_request_id(rid: str) -> None:
    """Set the request id for log correlation in the current context."""
    _request_id.set(rid)


def get_level() -> LogLevel:
    return _current_level


def set_level(level: LogLevel) -> None:
    global _current_level
    _current_level = level


def is_configured() -> bool:
    return _configured


def set_configured(value: bool) -> None:
    global _configured
    _configured = value


def read_logging_config(settings_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Read logging configuration from the settings file and environment.

    settings_path defaults to PICCY_TTS_SETTINGS (or config/settings.yaml).

    Priority (highest to lowest):
        1. PICCY_TTS_LOG_* environment variables
        2. settings.yaml logging section
        3. Defaults

    Returns:
        Dictionary with resolved logging configuration.
    """
    cfg: Dict[str, Any] = {}

    from piccy_tts.core.config import load_settings_or_defaults
    try:
        settings = load_settings_or_defaults(settings_path)
        cfg.update(settings.raw.get("logging") or {})
        cfg["level"] = settings.log_level
    except Exception:
        # Unreadable settings must not prevent logging from starting
        pass

    if os.getenv("PICCY_TTS_LOG_LEVEL"):
        cfg["level"] = os.environ["PICCY_TTS_LOG_LEVEL"]
    if os.getenv("PICCY_TTS_LOG_DIR"):
        cfg["log_dir"] = os.environ["PICCY_TTS_LOG_DIR"]
    if os.getenv("PICCY_TTS_JSONL_FILE"):
        cfg["jsonl_file"] = os.environ["PICCY_TTS_JSONL_FILE"]
    if os.getenv("PICCY_TTS_LOG_ROTATE_BYTES"):
        try:
            cfg["rotate_max_bytes"] = int(os.environ["PICCY_TTS_LOG_ROTATE_BYTES"])
        except ValueError:
            pass
    if os.getenv("PICCY_TTS_LOG_ROTATE_BACKUP"):
        try:
            cfg["rotate_backup_count"] = int(os.environ["PICCY_TTS_LOG_ROTATE_BACKUP"])
        except ValueError:
            pass

    return cfg
