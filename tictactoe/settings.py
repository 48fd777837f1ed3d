"""Front-end preferences kept in a small JSON file (never scores)."""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger("tictactoe.settings")

SETTINGS_FILE = Path(os.getenv("TICTACTOE_SETTINGS_PATH", os.path.join("data", "settings.json")))
DEFAULT_SETTINGS: Dict[str, Any] = {
    "player_name": "Human",
    "symbol": "X",
    "difficulty": "Hard",
    "move_timeout": 30.0,
    "log_level": "INFO",
}


def load_settings(path: Optional[Path] = None, defaults: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Load settings from ``path`` merged over ``defaults``.

    Unknown keys are kept; a missing or unreadable file yields the defaults.
    """
    path = Path(path or SETTINGS_FILE)
    data = dict(DEFAULT_SETTINGS if defaults is None else defaults)
    if not path.exists():
        return data
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Could not read settings from %s (%s); using defaults.", path, exc)
        return data
    if not isinstance(raw, dict):
        logger.warning("Settings file %s does not hold an object; using defaults.", path)
        return data
    for key, value in raw.items():
        default = data.get(key)
        if default is not None and not _same_kind(value, default):
            logger.warning("Ignoring %s=%r in %s; expected %s.", key, value, path, type(default).__name__)
            continue
        data[key] = value
    return data


def _same_kind(value: Any, default: Any) -> bool:
    if isinstance(default, bool) or isinstance(value, bool):
        return isinstance(value, bool) and isinstance(default, bool)
    if isinstance(default, (int, float)):
        return isinstance(value, (int, float))
    return isinstance(value, type(default))


def save_settings(data: Dict[str, Any], path: Optional[Path] = None) -> bool:
    """Write ``data`` as JSON; returns False (and logs) when the file cannot be written."""
    path = Path(path or SETTINGS_FILE)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    except OSError as exc:
        logger.warning("Could not save settings to %s (%s).", path, exc)
        return False
    return True


def move_timeout(settings: Dict[str, Any]) -> Optional[float]:
    """Seconds to wait for a human move; ``None`` or non-positive disables the timeout."""
    value = settings.get("move_timeout")
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        return None
    return seconds if seconds > 0 else None
