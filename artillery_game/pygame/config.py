"""Persistent configuration helpers for the pygame client."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

_SETTINGS_PATH = Path(__file__).resolve().parent / "user_settings.json"


def load_user_settings() -> Dict[str, Any]:
    """Load persisted client settings (key bindings, window size) from disk."""
    try:
        with _SETTINGS_PATH.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
            if isinstance(data, dict):
                return data
    except FileNotFoundError:
        return {}
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", _SETTINGS_PATH, exc)
        return {}
    return {}


def save_user_settings(settings: Dict[str, Any]) -> None:
    """Persist client settings, ignoring filesystem errors."""
    try:
        _SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
        with _SETTINGS_PATH.open("w", encoding="utf-8") as handle:
            json.dump(settings, handle, indent=2, sort_keys=True)
    except OSError as exc:
        logger.warning("Could not save settings to %s: %s", _SETTINGS_PATH, exc)


__all__ = ["load_user_settings", "save_user_settings"]
