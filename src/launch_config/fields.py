from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Type

from .exceptions import ConfigFieldNotFoundError
from .utils import parse_flag

logger = logging.getLogger("launch_config.fields")
logger.addHandler(logging.NullHandler())

__all__ = ["FieldSpec", "FIELDS", "get_field_spec", "list_fields"]


@dataclass(frozen=True)
class FieldSpec:
    attr: str
    key: str
    value_type: Type
    default: Any
    description: Optional[str] = None

    def coerce(self, raw: Optional[str]) -> Any:
        if raw is None:
            return self.default
        if self.value_type is bool:
            return parse_flag(raw)
        return raw


def _text(attr: str, key: str, description: str) -> FieldSpec:
    return FieldSpec(attr=attr, key=key, value_type=str, default="", description=description)


def _flag(attr: str, key: str, description: str) -> FieldSpec:
    return FieldSpec(attr=attr, key=key, value_type=bool, default=False, description=description)


FIELDS: Tuple[FieldSpec, ...] = (
    _text("app_id", "AppId", "Application identifier"),
    _text("user_name", "UserName", "Name of the user the session belongs to"),
    _text("language", "Language", "Interface language code"),
    _flag("offline", "Offline", "Run without network access"),
    _flag("auto_dlc", "AutoDLC", "Enable downloadable content automatically"),
    _text("build_id", "BuildId", "Build identifier"),
    _text("dlc_name", "DLCName", "Name of the downloadable content"),
    _flag("update_db", "UpdateDB", "Refresh the local database on start"),
    _text("signature", "Signature", "Opaque launch signature"),
    _text("window_info", "WindowInfo", "Main window placement"),
    _text("lv_window_info", "LVWindowInfo", "Secondary window placement"),
    _text("application_path", "ApplicationPath", "Path of the application executable"),
    _text("working_directory", "WorkingDirectory", "Directory to launch in"),
    _flag("wait_for_exit", "WaitForExit", "Block until the launched process exits"),
    _flag("no_operation", "NoOperation", "Dry run; do not launch anything"),
)

_BY_KEY: Dict[str, FieldSpec] = {spec.key: spec for spec in FIELDS}
_BY_ATTR: Dict[str, FieldSpec] = {spec.attr: spec for spec in FIELDS}


def get_field_spec(name: str) -> FieldSpec:
    """
    Return the FieldSpec for a file key (``"AppId"``) or accessor name (``"app_id"``).
    """
    spec = _BY_KEY.get(name) or _BY_ATTR.get(name)
    if spec is None:
        logger.error("Unknown configuration field: %r", name)
        raise ConfigFieldNotFoundError(name)
    return spec


def list_fields() -> Tuple[str, ...]:
    return tuple(spec.key for spec in FIELDS)
