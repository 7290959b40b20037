"""
launch_config: process-wide, read-only launch configuration.

- Reads a flat ``key=value`` property file once, on first access.
- Exposes well-known keys as typed properties with defaults.
- Keeps every raw key/value pair in file order for generic lookup.
- A missing or unreadable file yields an empty configuration, never a crash.
"""

from __future__ import annotations

from launch_config.config import (
    CONFIG_PATH_ENV,
    DEFAULT_CONFIG_PATH,
    get_instance,
    init_with_path,
    is_initialized,
)
from launch_config.exceptions import (
    ConfigAlreadyInitializedError,
    ConfigError,
    ConfigFieldNotFoundError,
    ConfigPathError,
    PropertySyntaxError,
)
from launch_config.fields import FIELDS, FieldSpec, get_field_spec, list_fields
from launch_config.parser import parse_properties
from launch_config.sources import ConfigSource, FileSource
from launch_config.store import ConfigStore
from launch_config.utils import parse_flag

__all__ = [
    "ConfigStore",
    "ConfigSource",
    "FileSource",
    "get_instance",
    "init_with_path",
    "is_initialized",
    "DEFAULT_CONFIG_PATH",
    "CONFIG_PATH_ENV",
    "FIELDS",
    "FieldSpec",
    "get_field_spec",
    "list_fields",
    "parse_properties",
    "parse_flag",
    "ConfigError",
    "ConfigPathError",
    "ConfigAlreadyInitializedError",
    "ConfigFieldNotFoundError",
    "PropertySyntaxError",
]
