"""User settings loaded from a JSON file.

Settings live in ``settings.json`` in the platform's config directory (or in
``$VIMLET_CONFIG_DIR``). A missing, unreadable or malformed file falls back to
defaults; a bad individual value is ignored with a warning.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)

APP_NAME = "vimlet"
CONFIG_DIR_ENV = "VIMLET_CONFIG_DIR"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class EditorSettings:
    poll_timeout: float = EditorConstants.POLL_TIMEOUT
    log_level: str = "WARNING"
    show_welcome: bool = True


def config_dir() -> Path:
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override)
    return Path(platformdirs.user_config_dir(APP_NAME))


def log_dir() -> Path:
    return Path(platformdirs.user_log_dir(APP_NAME))


def validate_setting(key: str, value: Any) -> bool:
    """Check one setting value.

    Unknown keys are accepted for forward compatibility; they are simply not
    applied.
    """
    if key == 'poll_timeout':
        return (isinstance(value, (int, float)) and not isinstance(value, bool)
                and 0 < value <= 5)
    if key == 'log_level':
        return isinstance(value, str) and value.upper() in LOG_LEVELS
    if key == 'show_welcome':
        return isinstance(value, bool)
    return True


def load_settings(path: Optional[Path] = None) -> EditorSettings:
    """Load settings from ``path`` (default: settings.json in config_dir())."""
    settings = EditorSettings()
    settings_file = path if path is not None else config_dir() / "settings.json"
    if not settings_file.exists():
        return settings

    try:
        with open(settings_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load settings from {settings_file}: {e}")
        return settings

    if not isinstance(data, dict):
        logger.warning("Settings file has invalid format (not a dict), ignoring")
        return settings

    known = {f.name for f in fields(EditorSettings)}
    for key, value in data.items():
        if key not in known:
            continue
        if not validate_setting(key, value):
            logger.warning(f"Ignoring invalid value for {key}: {value!r}")
            continue
        if key == 'log_level':
            value = value.upper()
        setattr(settings, key, value)
    return settings
