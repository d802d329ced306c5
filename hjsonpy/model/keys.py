"""Reserved document-level keys and path helpers shared by parser and builder."""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum
from typing import Final, TypeAlias

Path: TypeAlias = tuple[str, ...]

ROOT_PATH: Final[Path] = ()
PATH_SEPARATOR: Final[str] = "/"

KIND: Final[str] = "$kind"
CLASS: Final[str] = "$class"
KEY: Final[str] = "$key"
VALUE: Final[str] = "$value"
ELEMENTS: Final[str] = "$elements"
ENTRIES: Final[str] = "$entries"
REF: Final[str] = "$ref"

KEY_WORDS: Final[frozenset[str]] = frozenset({"true", "false", "null"})

# Payload segments that do not contribute to a referenceable object's address.
_TRANSPARENT_SEGMENTS: Final[frozenset[str]] = frozenset({ELEMENTS, VALUE})


class ComplexObjectKind(StrEnum):
    """Values of the `$kind` property."""

    PRIMITIVE = "PRIMITIVE"
    OBJECT = "OBJECT"
    SINGLETON = "SINGLETON"
    ARRAY = "ARRAY"
    LIST = "LIST"
    SET = "SET"
    MAP = "MAP"

    @property
    def is_referenceable(self) -> bool:
        return self in (ComplexObjectKind.OBJECT, ComplexObjectKind.SINGLETON)


def referenceable_path(path: Iterable[str]) -> Path:
    """Address under which a referenceable object is registered."""
    return tuple(segment for segment in path if segment not in _TRANSPARENT_SEGMENTS)


def path_to_string(path: Iterable[str]) -> str:
    return PATH_SEPARATOR + PATH_SEPARATOR.join(path)


def path_from_string(text: str) -> Path:
    """Decode a reference string: drop the leading separator, then split."""
    stripped = text[1:] if text.startswith(PATH_SEPARATOR) else text
    if not stripped:
        return ROOT_PATH
    return tuple(stripped.split(PATH_SEPARATOR))


__all__ = [
    "CLASS",
    "ELEMENTS",
    "ENTRIES",
    "KEY",
    "KEY_WORDS",
    "KIND",
    "PATH_SEPARATOR",
    "REF",
    "ROOT_PATH",
    "VALUE",
    "ComplexObjectKind",
    "Path",
    "path_from_string",
    "path_to_string",
    "referenceable_path",
]
