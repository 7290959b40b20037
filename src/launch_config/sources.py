from __future__ import annotations

import logging
import os
from typing import Dict, Optional, Protocol, Union

from typing_extensions import runtime_checkable

from .exceptions import PropertySyntaxError
from .parser import parse_properties
from .utils import _require_path

logger = logging.getLogger("launch_config.sources")
logger.addHandler(logging.NullHandler())

DEFAULT_ENCODING = "utf-8-sig"
FALLBACK_ENCODING = "iso8859-1"


@runtime_checkable
class ConfigSource(Protocol):
    location: str

    def load(self) -> Dict[str, str]: ...


class FileSource:
    """
    Property file on disk.

    The file is decoded with ``encoding`` (UTF-8, BOM tolerated, by default). Bytes
    that do not decode fall back to Latin-1 with a warning, so every byte reads as
    some character. Loading is otherwise fail-soft: a missing, unreadable or
    malformed file is logged, remembered in ``last_error`` and read as empty.
    """

    def __init__(
        self, path: Union[str, "os.PathLike[str]"], encoding: str = DEFAULT_ENCODING
    ) -> None:
        self._path = _require_path(path)
        self._encoding = encoding
        self.last_error: Optional[str] = None

    @property
    def location(self) -> str:
        return self._path

    def _decode(self, data: bytes) -> str:
        try:
            return data.decode(self._encoding)
        except UnicodeDecodeError as exc:
            logger.warning(
                "Configuration file %r is not valid %s (%s); reading it as %s",
                self._path,
                self._encoding,
                exc,
                FALLBACK_ENCODING,
            )
            return data.decode(FALLBACK_ENCODING)

    def load(self) -> Dict[str, str]:
        self.last_error = None
        try:
            with open(self._path, "rb") as fh:
                data = fh.read()
            entries = parse_properties(self._decode(data))
        except (OSError, LookupError, PropertySyntaxError) as exc:
            self.last_error = f"{type(exc).__name__}: {exc}"
            logger.warning("Failed to load configuration file %r: %s", self._path, exc)
            return {}
        logger.debug("Loaded %d entries from %r", len(entries), self._path)
        return entries

    def __repr__(self) -> str:
        return f"<FileSource path={self._path!r} encoding={self._encoding!r}>"
