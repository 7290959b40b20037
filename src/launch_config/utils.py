from __future__ import annotations

import os
import re
from types import MappingProxyType
from typing import Any, Mapping, Optional, Set

from .exceptions import ConfigPathError

__all__ = [
    "TRUE_TOKENS",
    "parse_flag",
    "_require_path",
    "_frozen_mapping",
    "_path_from_env",
    "_redact_for_log",
]

TRUE_TOKENS = frozenset({"1", "true", "yes"})

_SECRET_WORDS = frozenset({"signature", "secret", "password", "passwd", "token", "key"})
_WORD = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|\d+")


def parse_flag(value: Optional[str]) -> bool:
    """Coerce a textual flag to bool. Anything unrecognised is False."""
    if value is None:
        return False
    return value.strip().lower() in TRUE_TOKENS


def _require_path(path: Any) -> str:
    if path is None:
        raise ConfigPathError(path, "configuration path must not be None")
    if not isinstance(path, (str, os.PathLike)):
        raise ConfigPathError(path, "configuration path must be str or os.PathLike")
    fs_path = os.fspath(path)
    if not isinstance(fs_path, str):
        raise ConfigPathError(path, "configuration path must be str or os.PathLike")
    if not fs_path.strip():
        raise ConfigPathError(path, "configuration path must not be empty")
    return fs_path


def _frozen_mapping(values: Mapping[str, Any]) -> MappingProxyType:
    return MappingProxyType(dict(values))


def _path_from_env(var_name: str) -> Optional[str]:
    value = os.getenv(var_name, "").strip()
    return value or None


def _name_words(name: str) -> Set[str]:
    return {word.lower() for word in _WORD.findall(name)}


def _redact_for_log(name: str, value: str) -> str:
    if _name_words(name) & _SECRET_WORDS:
        return "***"
    return repr(value)
