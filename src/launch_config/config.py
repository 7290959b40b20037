from __future__ import annotations

import logging
import os
import threading
from typing import Optional, Union

from .exceptions import ConfigAlreadyInitializedError
from .store import ConfigStore
from .utils import _path_from_env, _require_path

logger = logging.getLogger("launch_config.config")
logger.addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "CONFIG_PATH_ENV",
    "get_instance",
    "init_with_path",
    "is_initialized",
]

DEFAULT_CONFIG_PATH = "config.txt"
CONFIG_PATH_ENV = "LAUNCH_CONFIG_FILE"

_instance: Optional[ConfigStore] = None
_instance_lock = threading.Lock()


def _build(path: str) -> ConfigStore:
    store = ConfigStore.from_path(path)
    logger.info(
        "Configuration initialized from %r (%d entries)", store.source_location, len(store)
    )
    return store


def get_instance() -> ConfigStore:
    """
    Return the process-wide ConfigStore, building it on first use.

    The source is ``$LAUNCH_CONFIG_FILE`` if set, else ``config.txt`` in the
    current working directory. Concurrent first callers all get the same instance.
    """
    global _instance
    store = _instance
    if store is not None:
        return store
    with _instance_lock:
        if _instance is None:
            _instance = _build(_path_from_env(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH)
        return _instance


def init_with_path(path: Union[str, "os.PathLike[str]"]) -> ConfigStore:
    """
    Build the singleton from ``path`` instead of the default location.

    Must run before the first get_instance(). Raises ConfigPathError for an
    unusable path and ConfigAlreadyInitializedError once the singleton exists.
    """
    global _instance
    fs_path = _require_path(path)
    with _instance_lock:
        if _instance is not None:
            logger.error(
                "init_with_path(%r) called after initialization from %r",
                fs_path,
                _instance.source_location,
            )
            raise ConfigAlreadyInitializedError(fs_path, _instance.source_location)
        _instance = _build(fs_path)
        return _instance


def is_initialized() -> bool:
    return _instance is not None


def _reset_instance() -> None:
    """Drop the cached instance (for testing only)."""
    global _instance
    with _instance_lock:
        _instance = None
