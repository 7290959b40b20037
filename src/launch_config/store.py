from __future__ import annotations

import logging
import os
from types import MappingProxyType
from typing import Any, Iterator, Optional, Union

from .fields import FIELDS, get_field_spec
from .sources import ConfigSource, FileSource
from .utils import _frozen_mapping, _redact_for_log

logger = logging.getLogger("launch_config.store")
logger.addHandler(logging.NullHandler())


def _field(attr: str) -> property:
    spec = get_field_spec(attr)

    def getter(self: "ConfigStore") -> Any:
        return self._ConfigStore__fields[attr]

    getter.__name__ = attr
    getter.__doc__ = f"{spec.description} (``{spec.key}``, default {spec.default!r})."
    return property(getter)


class ConfigStore:
    """
    Read-only view of one configuration source.

    Every raw key/value pair is kept in first-seen order and reachable through
    get(), get_all() and iteration. The well-known keys are also exposed as typed
    properties with defaults. Nothing can be changed after construction, so
    instances are safe to share between threads without locking.
    """

    app_id = _field("app_id")
    user_name = _field("user_name")
    language = _field("language")
    offline = _field("offline")
    auto_dlc = _field("auto_dlc")
    build_id = _field("build_id")
    dlc_name = _field("dlc_name")
    update_db = _field("update_db")
    signature = _field("signature")
    window_info = _field("window_info")
    lv_window_info = _field("lv_window_info")
    application_path = _field("application_path")
    working_directory = _field("working_directory")
    wait_for_exit = _field("wait_for_exit")
    no_operation = _field("no_operation")

    def __init__(self, source: ConfigSource) -> None:
        if not isinstance(source, ConfigSource):
            raise TypeError(f"Expected a ConfigSource, got {type(source).__name__}")

        entries = source.load()
        self.__location: str = source.location
        self.__load_error: Optional[str] = getattr(source, "last_error", None)
        self.__entries: MappingProxyType = _frozen_mapping(entries)
        self.__fields: MappingProxyType = _frozen_mapping(
            {spec.attr: spec.coerce(self.__entries.get(spec.key)) for spec in FIELDS}
        )
        for key, value in self.__entries.items():
            logger.debug("Entry %s = %s", key, _redact_for_log(key, value))
        logger.debug(
            "ConfigStore built from %r entries=%d load_error=%s",
            self.__location,
            len(self.__entries),
            self.__load_error,
        )
        self.__frozen = True

    @classmethod
    def from_path(cls, path: Union[str, "os.PathLike[str]"]) -> "ConfigStore":
        return cls(FileSource(path))

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, "_ConfigStore__frozen", False):
            raise AttributeError("ConfigStore is read-only")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        raise AttributeError("ConfigStore is read-only")

    @property
    def source_location(self) -> str:
        return self.__location

    @property
    def load_error(self) -> Optional[str]:
        """Diagnostic from a failed load, or None if the source was read."""
        return self.__load_error

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """
        Return the raw value for ``key``, or ``default`` when the key was never present.
        """
        if not isinstance(key, str):
            return default
        return self.__entries.get(key, default)

    def get_all(self) -> MappingProxyType:
        """Return every raw entry in first-seen order."""
        return self.__entries

    def field(self, name: str) -> Any:
        """Return a typed field by file key or accessor name."""
        return self.__fields[get_field_spec(name).attr]

    def fields(self) -> MappingProxyType:
        """Return all typed fields keyed by accessor name."""
        return self.__fields

    def render_summary(self) -> str:
        lines = ["ConfigStore {"]
        lines.extend(f"  {key} = {value}" for key, value in self.__entries.items())
        lines.append("}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render_summary()

    def __repr__(self) -> str:
        return f"<ConfigStore source={self.__location!r} entries={len(self.__entries)}>"

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self.__entries))

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in self.__entries

    def __len__(self) -> int:
        return len(self.__entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigStore):
            return NotImplemented
        return dict(self.__entries) == dict(other.get_all())

    def __hash__(self) -> int:
        return hash(frozenset(self.__entries.items()))
