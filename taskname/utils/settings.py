"""
Ambient settings: loads ``taskname_settings.yaml``.

Only logging is configurable; the naming grammar itself is fixed in
``taskname._config``.  The file is looked up in the current directory,
or at the path given by the ``TASKNAME_SETTINGS`` environment variable.
"""
import logging
import os
from typing import Any, Dict, Optional

import yaml

from taskname._config import ENV_KEY_SETTINGS, SETTINGS_FILENAME

# Plain logging here: get_logger() itself reads these settings.
logger = logging.getLogger(__name__)


_DEFAULTS: Dict[str, Any] = {
    # Logging
    "log_enabled": False,               # enable/disable taskname internal logging
    "log_level": "INFO",                # DEBUG | INFO | WARNING | ERROR | CRITICAL
}

# ── Module-level cache ───────────────────────────────────────
_cached: Dict[str, Any] = {}


def settings_path() -> str:
    return os.environ.get(ENV_KEY_SETTINGS) or os.path.join(os.getcwd(), SETTINGS_FILENAME)


def load_settings(path: Optional[str] = None) -> Dict[str, Any]:
    """Load settings from *path* (default ``settings_path()``), falling back to defaults.

    Result is cached in-process; call ``reload_settings`` to refresh.
    """
    global _cached
    path = path or settings_path()
    merged = dict(_DEFAULTS)
    if os.path.exists(path):
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", path, e)
            data = {}
        if isinstance(data, dict):
            merged.update(data)
        else:
            logger.warning("Ignoring settings file %s: expected a mapping", path)
    _cached = merged
    return merged


def get(key: str, default: Any = None) -> Any:
    """Quick accessor for a single setting (uses cache)."""
    if not _cached:
        load_settings()
    return _cached.get(key, _DEFAULTS.get(key, default))


def reload_settings(path: Optional[str] = None) -> Dict[str, Any]:
    """Force reload from disk."""
    return load_settings(path)
