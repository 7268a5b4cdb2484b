import logging
import sys
import threading
from typing import Any, Dict, List, Optional

_LOG_CONFIG = {
    "console": {
        "format": "\033[32m%(asctime)s \033[33m[%(levelname)s] \033[34m%(name)s:%(lineno)d \033[0m%(message)s",
        "datefmt": "%Y-%m-%d %H:%M:%S"
    },
    "file": {
        "level": "DEBUG",
        "format": "%(asctime)s [%(levelname)s %(name)s:%(funcName)s:%(lineno)d] %(message)s"
    }
}

_LOGGER_LOCK = threading.RLock()
_LIBRARY_ROOT_LOGGER = None
_OWN_HANDLERS: List[logging.Handler] = []   # handlers added by this module
_FALLBACK_LEVEL = logging.INFO


def get_library_root():
    return __name__.split(".")[0]


def resolve_level(value: Any) -> Optional[int]:
    """Map a settings value (``"debug"``, ``10`` ...) to a logging level, or None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        level = logging.getLevelName(value.strip().upper())
        if isinstance(level, int):
            return level
    return None


def configure_project_root_logger(
        log_config: Optional[Dict] = None
):
    global _LIBRARY_ROOT_LOGGER
    log_config = log_config or _LOG_CONFIG

    with _LOGGER_LOCK:
        if _LIBRARY_ROOT_LOGGER:
            return

        # Logging switches come from the settings file; only a real boolean enables it
        from taskname.utils.settings import get as _get_setting
        log_enabled = _get_setting("log_enabled", False) is True
        raw_level = _get_setting("log_level", "INFO")
        log_level = resolve_level(raw_level)

        _LIBRARY_ROOT_LOGGER = logging.getLogger(get_library_root())
        _LIBRARY_ROOT_LOGGER.propagate = False

        if not log_enabled:
            # log calls short-circuit after an int compare
            _LIBRARY_ROOT_LOGGER.setLevel(logging.CRITICAL + 1)
            return

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(
            log_config["console"]["format"],
            datefmt=log_config["console"].get("datefmt"),
        ))
        console_handler.setLevel(_FALLBACK_LEVEL if log_level is None else log_level)

        _add_handler(console_handler)
        _LIBRARY_ROOT_LOGGER.setLevel("DEBUG")

        if log_level is None:
            _LIBRARY_ROOT_LOGGER.warning(
                "Unknown log_level %r in settings, using %s",
                raw_level, logging.getLevelName(_FALLBACK_LEVEL))


def _add_handler(handler: logging.Handler) -> None:
    _OWN_HANDLERS.append(handler)
    _LIBRARY_ROOT_LOGGER.addHandler(handler)


def reset_project_root_logger() -> None:
    """Drop our handlers so the next ``get_logger`` call re-reads the settings."""
    global _LIBRARY_ROOT_LOGGER
    with _LOGGER_LOCK:
        if _LIBRARY_ROOT_LOGGER is None:
            return
        while _OWN_HANDLERS:
            handler = _OWN_HANDLERS.pop()
            _LIBRARY_ROOT_LOGGER.removeHandler(handler)
            handler.close()
        _LIBRARY_ROOT_LOGGER.setLevel(logging.NOTSET)
        _LIBRARY_ROOT_LOGGER = None


def attach_file_handler(log_path: str, log_config: Optional[Dict] = None) -> None:
    log_config = log_config or _LOG_CONFIG

    with _LOGGER_LOCK:
        configure_project_root_logger()

        file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(log_config["file"]["format"], datefmt=log_config["console"].get("datefmt", None)))
        file_handler.setLevel(log_config["file"]["level"])

        _add_handler(file_handler)


def get_logger(name: str = None):
    if name == "__main__":
        name = get_library_root() + ".__main__"
    configure_project_root_logger()
    return logging.getLogger(name)
