"""Identifier naming and collision arbitration."""

from __future__ import annotations

import re
from collections.abc import Container

UNNAMED_TYPE_NAME = "UnnamedRecord"
EMPTY_FIELD_NAME = "empty"

_WORD_SEPARATOR = re.compile(r"[^A-Za-z0-9]+")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])")


def type_name(raw: str) -> str:
    """Turn a schema key or property name into a CamelCase type identifier."""
    words = _WORD_SEPARATOR.split(raw)
    name = "".join(_capitalize_first(word) for word in words if word)
    return name or UNNAMED_TYPE_NAME


def field_name(raw: str) -> str:
    """Turn a property name into a lowerCamelCase field identifier."""
    if not raw:
        return EMPTY_FIELD_NAME
    if _WORD_SEPARATOR.search(raw):
        segments = [segment for segment in _WORD_SEPARATOR.split(raw) if segment]
        if not segments:
            return EMPTY_FIELD_NAME
        head, *tail = segments
        return head.lower() + "".join(_capitalize_first(segment) for segment in tail)
    return raw[0].lower() + raw[1:]


def uniquify(candidate: str, taken: Container[str], *, qualifier: str | None = None) -> str:
    """Return a name that is not taken, never reusing an existing one.

    Tries the candidate, then the candidate qualified by the enclosing type
    name, then the candidate with an incrementing numeric suffix.
    """
    if candidate not in taken:
        return candidate
    if qualifier:
        qualified = f"{qualifier}{candidate}"
        if qualified not in taken:
            return qualified
    suffix = 2
    while f"{candidate}{suffix}" in taken:
        suffix += 1
    return f"{candidate}{suffix}"


def snake_case(name: str) -> str:
    """Convert a CamelCase identifier to snake_case."""
    return "_".join(word.lower() for word in _CAMEL_BOUNDARY.split(name))


def _capitalize_first(word: str) -> str:
    return word[:1].upper() + word[1:]
