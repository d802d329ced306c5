"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from hjsonpy.diagnostics.diagnostic import Severity


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


SCANNER_NO_MATCH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCANNER_NO_MATCH",
    message="Token does not match at the current position",
    hint="Call has_next() before next().",
    category="scanner",
)

SCANNER_UNEXPECTED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCANNER_UNEXPECTED_CHARACTER",
    message="Unexpected character",
    category="scanner",
)

PARSER_EMPTY_INPUT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EMPTY_INPUT",
    message="Expected HJson content but input was empty",
    category="parser",
)

PARSER_UNEXPECTED_CLOSE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_CLOSE",
    message="Closing bracket or brace without a matching open",
    category="parser",
)

PARSER_MISMATCHED_CLOSE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISMATCHED_CLOSE",
    message="Closing bracket or brace does not match the open container",
    category="parser",
)

PARSER_UNEXPECTED_SEPARATOR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_SEPARATOR",
    message="Separator without a preceding value",
    category="parser",
)

PARSER_EXPECTED_SEPARATOR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_SEPARATOR",
    message="Expected a separator before the next value",
    hint="Separate values with ',' or a newline.",
    category="parser",
)

PARSER_EXPECTED_PROPERTY_SEPARATOR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_PROPERTY_SEPARATOR",
    message="Expected ':' after property name",
    category="parser",
)

PARSER_EXPECTED_PROPERTY_NAME: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_PROPERTY_NAME",
    message="Expected a property name",
    category="parser",
)

PARSER_EXPECTED_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_VALUE",
    message="Expected a value",
    category="parser",
)

PARSER_UNTERMINATED_CONTAINER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNTERMINATED_CONTAINER",
    message="Invalid input, probably an object or array is not closed",
    category="parser",
)

PARSER_MAX_DEPTH_EXCEEDED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MAX_DEPTH_EXCEEDED",
    message="Maximum nesting depth exceeded",
    hint="Raise ParserOptions.max_depth or flatten the input.",
    category="parser",
)

DOCUMENT_SEALED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DOCUMENT_SEALED",
    message="Document is sealed; referenceable objects can no longer be registered",
    category="document",
)

DOCUMENT_ROOT_MISSING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DOCUMENT_ROOT_MISSING",
    message="Document has no root value yet",
    category="document",
)

DOCUMENT_ROOT_ALREADY_SET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DOCUMENT_ROOT_ALREADY_SET",
    message="Document root can only be assigned once",
    category="document",
)

REFERENCE_UNRESOLVED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="REFERENCE_UNRESOLVED",
    message="Reference target not found",
    category="reference",
)

REFERENCE_DOCUMENT_UNSEALED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="REFERENCE_DOCUMENT_UNSEALED",
    message="References cannot be resolved before the document is complete",
    category="reference",
)

VALUE_TYPE_MISMATCH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALUE_TYPE_MISMATCH",
    message="Value is not of the requested kind",
    category="value",
)

BUILDER_DUPLICATE_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="BUILDER_DUPLICATE_VALUE",
    message="There can be only one value here",
    category="builder",
)

BUILDER_MISSING_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="BUILDER_MISSING_VALUE",
    message="A value is required here",
    category="builder",
)

BUILDER_UNSUPPORTED_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="BUILDER_UNSUPPORTED_VALUE",
    message="Cannot convert value to an HJson value",
    category="builder",
)

BUILDER_MAX_DEPTH_EXCEEDED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="BUILDER_MAX_DEPTH_EXCEEDED",
    message="Maximum nesting depth exceeded",
    hint="Pass a larger max_depth to DocumentBuilder or flatten the value.",
    category="builder",
)
