"""Formatter configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class OutputStyle(StrEnum):
    COMPACT = "compact"
    PRETTY = "pretty"
    RELAXED = "relaxed"


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Indentation used by the multi-line styles.

    `indent` is the prefix of top-level members; every nesting level adds
    `increment`. The compact style ignores both.
    """

    indent: str = "  "
    increment: str = "  "
