"""Logging setup for the simulator, CLI and console.

``get_logger`` configures the root logger from environment variables on first
use so library modules can log at import time. Entry points then call
``configure_logging(settings)`` once settings are loaded, which applies the
``logging`` section (level, log directory, file on/off).
"""
from __future__ import annotations

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Any

DEFAULT_LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
_DATE_FMT = "%Y-%m-%d %H:%M:%S"

_configured = False
_console: logging.Handler | None = None
_file_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    """Return a named logger; configures root handlers on first call."""
    if not _configured:
        configure_logging()
    return logging.getLogger(name)


def parse_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ("1", "true", "yes", "on"):
        return True
    if text in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"not a boolean flag: {value!r}")


def _env_logging() -> dict[str, Any]:
    return {
        "level": os.environ.get("LOG_LEVEL", "INFO"),
        "dir": os.environ.get("CAREERPILOT_LOG_DIR") or str(DEFAULT_LOG_DIR),
        "file": os.environ.get("CAREERPILOT_LOG_FILE", "1") != "0",
    }


def log_file_path(log_dir: Path | str, day: datetime | None = None) -> Path:
    day = day or datetime.now()
    return Path(log_dir) / f"careerpilot_{day.strftime('%Y-%m-%d')}.log"


def configure_logging(settings: dict[str, Any] | None = None) -> None:
    """Apply the ``logging`` settings section, or env defaults without one.

    Safe to call repeatedly: the console handler is created once (and only
    when nothing else has configured the root logger), the file handler is
    replaced to follow the latest settings.
    """
    global _configured, _console, _file_handler
    cfg = _env_logging()
    if settings is not None:
        cfg.update({k: v for k, v in settings.get("logging", {}).items() if v is not None})

    level = getattr(logging, str(cfg["level"]).upper(), None)
    if not isinstance(level, int):
        level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)
    formatter = logging.Formatter(_FORMAT, datefmt=_DATE_FMT)

    if not _configured and not root.handlers:
        _console = logging.StreamHandler(sys.stdout)
        _console.setFormatter(formatter)
        root.addHandler(_console)
    if _console is not None:
        _console.setLevel(level)
    _configured = True

    if _file_handler is not None:
        root.removeHandler(_file_handler)
        _file_handler.close()
        _file_handler = None

    if not parse_flag(cfg.get("file", True)):
        return
    log_dir = Path(cfg.get("dir") or DEFAULT_LOG_DIR)
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        _file_handler = logging.FileHandler(log_file_path(log_dir), encoding="utf-8")
    except OSError:
        root.debug("Log directory %s not writable, console logging only", log_dir)
        return
    _file_handler.setLevel(logging.DEBUG)
    _file_handler.setFormatter(formatter)
    root.addHandler(_file_handler)
