"""Load settings from config/settings.yaml and the environment."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable

import yaml
from dotenv import load_dotenv

from careerpilot.log import get_logger, parse_flag

log = get_logger(__name__)

load_dotenv()

ROOT_DIR: Path = Path(__file__).resolve().parent.parent
CONFIG_DIR: Path = ROOT_DIR / "config"
SETTINGS_PATH: Path = CONFIG_DIR / "settings.yaml"
REPORTS_DIR: Path = ROOT_DIR / "reports"
DATA_DIR: Path = ROOT_DIR / "data"
LOG_DIR: Path = ROOT_DIR / "logs"

DEFAULT_SETTINGS: dict[str, Any] = {
    "functions": {
        "url": "",
        "anon_key": "",
        "timeout": 20.0,
    },
    "storage": {
        "backend": "memory",
        "dir": str(DATA_DIR / "sessions"),
    },
    "simulator": {
        "follow_up_probability": 0.3,
        "interview_offset_days": [5, 7],
    },
    "logging": {
        "level": "INFO",
        "dir": str(LOG_DIR),
        "file": True,
    },
}

# env var -> (section, key, cast)
_ENV_OVERRIDES: dict[str, tuple[str, str, Callable[[str], Any]]] = {
    "SUPABASE_URL": ("functions", "url", str),
    "SUPABASE_ANON_KEY": ("functions", "anon_key", str),
    "REQUEST_TIMEOUT": ("functions", "timeout", float),
    "CAREERPILOT_STORAGE": ("storage", "backend", str),
    "CAREERPILOT_DATA_DIR": ("storage", "dir", str),
    "FOLLOW_UP_PROBABILITY": ("simulator", "follow_up_probability", float),
    "LOG_LEVEL": ("logging", "level", str),
    "CAREERPILOT_LOG_DIR": ("logging", "dir", str),
    "CAREERPILOT_LOG_FILE": ("logging", "file", parse_flag),
}


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def load_settings(path: Path | None = None) -> dict[str, Any]:
    """Defaults, overlaid by the YAML file (if present), overlaid by env vars."""
    settings = {section: dict(values) for section, values in DEFAULT_SETTINGS.items()}

    path = path or SETTINGS_PATH
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        for section, values in data.items():
            if section not in settings or not isinstance(values, dict):
                log.warning("Ignoring unknown settings section %r in %s", section, path.name)
                continue
            settings[section].update(values)

    for env_key, (section, key, cast) in _ENV_OVERRIDES.items():
        raw = get_env(env_key)
        if not raw:
            continue
        try:
            settings[section][key] = cast(raw)
        except ValueError:
            log.warning("Invalid value for %s=%r, keeping %r", env_key, raw, settings[section][key])

    return settings


def ensure_dirs() -> None:
    for d in (REPORTS_DIR, DATA_DIR):
        d.mkdir(parents=True, exist_ok=True)
