"""Error types raised while scanning, parsing, resolving and building HJson."""

from __future__ import annotations

from typing import Self

from hjsonpy.diagnostics import Diagnostic, DiagnosticSpec
from hjsonpy.text import TextRange, excerpt, line_column


class HJsonError(Exception):
    """Base exception for all hjsonpy errors.

    Carries the structured `Diagnostic` plus, when the failure has a source
    position, the 1-based line/column and a short excerpt of the input.
    """

    def __init__(
        self,
        diagnostic: Diagnostic,
        *,
        line: int | None = None,
        column: int | None = None,
        excerpt: str | None = None,
    ) -> None:
        self.diagnostic = diagnostic
        self.line = line
        self.column = column
        self.excerpt = excerpt
        super().__init__(self._format_message())

    @property
    def code(self) -> str:
        return self.diagnostic.code

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @classmethod
    def from_spec(
        cls,
        spec: DiagnosticSpec,
        message: str | None = None,
        *,
        range: TextRange | None = None,
        source: str | None = None,
    ) -> Self:
        diagnostic = Diagnostic(
            code=spec.code,
            message=message if message is not None else spec.message,
            range=range,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )
        if range is None or source is None:
            return cls(diagnostic)
        position = line_column(source, range.start)
        return cls(
            diagnostic,
            line=position.line,
            column=position.column,
            excerpt=excerpt(source, range.start),
        )

    def _format_message(self) -> str:
        if self.line is None:
            return self.diagnostic.message
        text = f"{self.diagnostic.message} at line {self.line}, column {self.column}"
        if self.excerpt:
            text += f" near {self.excerpt!r}"
        return text


class ScanError(HJsonError):
    """No token matches the current position against the expected spec."""


class StructureError(HJsonError):
    """Unexpected, missing or mismatched bracket/brace/separator."""


class ReferenceResolutionError(HJsonError):
    """A reference path has no registered target when it is followed."""


class TypeMismatchError(HJsonError):
    """A narrowing `as_*` call was made against the wrong value variant."""


class BuilderValidationError(HJsonError):
    """More (or fewer) values were supplied than the construction allows."""


__all__ = [
    "BuilderValidationError",
    "HJsonError",
    "ReferenceResolutionError",
    "ScanError",
    "StructureError",
    "TypeMismatchError",
]
