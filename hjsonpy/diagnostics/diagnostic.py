"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from hjsonpy.text import TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic attached to every error raised by the library."""

    code: str
    message: str
    range: TextRange | None = None
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
