"""
Settings Module for Sudoku Solver

Provides persistent storage for user preferences using JSON.
Settings are stored in config.json in the working directory.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

# Settings file location (working directory)
SETTINGS_FILE = Path("config.json")

# Default settings
DEFAULT_SETTINGS: Dict[str, Any] = {
    "delay_ms": 50,
    "strategy_name": "backtracking",
    "show_time": False
}


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from config.json.

    Args:
        path: Settings file, SETTINGS_FILE if None

    Returns:
        Settings dictionary. Returns defaults if file missing or invalid.
    """
    path = path or SETTINGS_FILE

    if not path.exists():
        logger.debug("Settings file not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            settings = json.load(f)

        if not isinstance(settings, dict):
            raise ValueError("settings root must be an object")

        # Merge with defaults to handle missing keys
        result = DEFAULT_SETTINGS.copy()
        result.update(settings)
        _check_types(result)
        logger.debug(f"Settings loaded: {result}")
        return result

    except (ValueError, IOError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()


def _check_types(settings: Dict[str, Any]) -> None:
    """Replace values whose type does not match the default, in place."""
    for key, default in DEFAULT_SETTINGS.items():
        value = settings[key]
        # bool is an int subclass, so `true` must not pass as a delay
        if isinstance(value, bool) != isinstance(default, bool) or \
                not isinstance(value, type(default)):
            logger.warning(
                f"Invalid value for {key!r}: {value!r}, using {default!r}"
            )
            settings[key] = default
        elif key == "delay_ms" and value < 0:
            logger.warning(f"Negative delay_ms {value}, using {default}")
            settings[key] = default


def save_settings(settings: Dict[str, Any], path: Optional[Path] = None) -> bool:
    """
    Save settings to config.json.

    Args:
        settings: Settings dictionary to save
        path: Settings file, SETTINGS_FILE if None

    Returns:
        True if the file was written
    """
    path = path or SETTINGS_FILE

    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved: {settings}")
        return True
    except IOError as e:
        logger.error(f"Failed to save settings: {e}")
        return False
