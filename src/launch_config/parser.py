"""
Line-oriented property-file parsing.

Follows the usual ``.properties`` conventions:

- blank lines and lines whose first non-blank character is ``#`` or ``!`` are skipped
- a line ending in an odd number of backslashes continues on the next line
- the key ends at the first unescaped ``=``, ``:`` or whitespace
- ``\\t``, ``\\n``, ``\\r``, ``\\f`` and ``\\uXXXX`` escapes are decoded; any other
  escaped character stands for itself

Keys and values are trimmed. Repeated keys keep their first position but take
the last value.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .exceptions import PropertySyntaxError

logger = logging.getLogger("launch_config.parser")
logger.addHandler(logging.NullHandler())

__all__ = ["iter_properties", "parse_properties"]

_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_COMMENT_MARKERS = "#!"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _continues(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _logical_lines(lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
    pending: Optional[List[str]] = None
    start = 0
    for number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n").lstrip(_WHITESPACE)
        if pending is None:
            if not line or line[0] in _COMMENT_MARKERS:
                continue
            pending = []
            start = number
        if _continues(line):
            pending.append(line[:-1])
            continue
        pending.append(line)
        yield start, "".join(pending)
        pending = None
    if pending is not None:
        yield start, "".join(pending)


def _unescape(text: str, line_number: int) -> str:
    if "\\" not in text:
        return text
    out: List[str] = []
    i = 0
    n = len(text)
    while i < n:
        char = text[i]
        i += 1
        if char != "\\":
            out.append(char)
            continue
        if i >= n:
            break
        char = text[i]
        i += 1
        if char == "u":
            digits = text[i : i + 4]
            if len(digits) != 4 or not set(digits) <= _HEX_DIGITS:
                raise PropertySyntaxError("malformed \\uXXXX encoding", line_number)
            out.append(chr(int(digits, 16)))
            i += 4
        else:
            out.append(_ESCAPES.get(char, char))
    return "".join(out)


def _split_entry(line: str, line_number: int) -> Tuple[str, str]:
    n = len(line)
    end = 0
    escaped = False
    while end < n:
        char = line[end]
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char in _SEPARATORS or char in _WHITESPACE:
            break
        end += 1

    pos = end
    while pos < n and line[pos] in _WHITESPACE:
        pos += 1
    if pos < n and line[pos] in _SEPARATORS:
        pos += 1
    while pos < n and line[pos] in _WHITESPACE:
        pos += 1

    key = _unescape(line[:end], line_number).strip()
    value = _unescape(line[pos:], line_number).strip()
    return key, value


def iter_properties(lines: Iterable[str]) -> Iterator[Tuple[str, str]]:
    """Yield ``(key, value)`` pairs in file order, duplicates included."""
    for line_number, logical in _logical_lines(lines):
        yield _split_entry(logical, line_number)


def parse_properties(text: str) -> Dict[str, str]:
    """Parse property text into an insertion-ordered dict."""
    entries: Dict[str, str] = {}
    for key, value in iter_properties(_LINE_BREAK.split(text)):
        if key in entries:
            logger.debug("Duplicate key %r; later value wins", key)
        entries[key] = value
    logger.debug("Parsed %d properties", len(entries))
    return entries
