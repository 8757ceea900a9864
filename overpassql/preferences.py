"""Persistent preferences, currently the Overpass API endpoint.

Preferences live in ``preferences.json`` inside the directory named by the
``OVERPASSQL_CONFIG_DIR`` environment variable, or ``~/.config/overpassql``.
The ``OVERPASSQL_ENDPOINT`` environment variable takes precedence over the
stored endpoint.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://overpass-api.de/api/"

CONFIG_DIR_ENV = "OVERPASSQL_CONFIG_DIR"
ENDPOINT_ENV = "OVERPASSQL_ENDPOINT"
PREFERENCES_FILE = "preferences.json"


def preferences_path() -> Path:
    """Return the path of the preferences file."""
    config_dir = os.environ.get(CONFIG_DIR_ENV)
    if config_dir:
        return Path(config_dir) / PREFERENCES_FILE
    return Path.home() / ".config" / "overpassql" / PREFERENCES_FILE


def load_preferences() -> Dict[str, Any]:
    """Load stored preferences; a missing or broken file means none are set."""
    path = preferences_path()
    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning(f"Ignoring unreadable preferences file {path}: {exc}")
        return {}
    return data if isinstance(data, dict) else {}


def _save_preferences(preferences: Dict[str, Any]) -> None:
    path = preferences_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(preferences, f, indent=2)


def get_endpoint() -> str:
    """Return the Overpass API endpoint used by all requests.

    Returns:
        The endpoint URL, always with a trailing slash.
    """
    return (
        os.environ.get(ENDPOINT_ENV)
        or load_preferences().get("endpoint")
        or DEFAULT_ENDPOINT
    )


def set_endpoint(endpoint: Optional[str] = None) -> bool:
    """Change the Overpass API endpoint for all functions.

    The endpoint needs to be a URL with a trailing slash, e.g.
    ``"https://overpass-api.de/api/"``. If set to ``None`` the stored
    endpoint is removed and the default endpoint is used again.

    Parameters:
        endpoint: The new endpoint or ``None``.

    Returns:
        True if a new endpoint was stored, False otherwise.
    """
    preferences = load_preferences()

    if endpoint is None:
        if preferences.pop("endpoint", None) is not None:
            _save_preferences(preferences)
        logger.debug("Endpoint setting removed")
        return False

    if not endpoint.endswith("/"):
        logger.warning(
            "The endpoint url is expected to have a trailing slash. "
            "No new endpoint is set."
        )
        return False

    preferences["endpoint"] = endpoint
    _save_preferences(preferences)
    logger.info(f"Endpoint set to {endpoint}")
    return True
