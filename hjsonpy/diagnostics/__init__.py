"""Diagnostics."""

from hjsonpy.diagnostics.codes import (
    BUILDER_DUPLICATE_VALUE,
    BUILDER_MAX_DEPTH_EXCEEDED,
    BUILDER_MISSING_VALUE,
    BUILDER_UNSUPPORTED_VALUE,
    DOCUMENT_ROOT_ALREADY_SET,
    DOCUMENT_ROOT_MISSING,
    DOCUMENT_SEALED,
    PARSER_EMPTY_INPUT,
    PARSER_EXPECTED_PROPERTY_NAME,
    PARSER_EXPECTED_PROPERTY_SEPARATOR,
    PARSER_EXPECTED_SEPARATOR,
    PARSER_EXPECTED_VALUE,
    PARSER_MAX_DEPTH_EXCEEDED,
    PARSER_MISMATCHED_CLOSE,
    PARSER_UNEXPECTED_CLOSE,
    PARSER_UNEXPECTED_SEPARATOR,
    PARSER_UNTERMINATED_CONTAINER,
    REFERENCE_DOCUMENT_UNSEALED,
    REFERENCE_UNRESOLVED,
    SCANNER_NO_MATCH,
    SCANNER_UNEXPECTED_CHARACTER,
    VALUE_TYPE_MISMATCH,
    DiagnosticSpec,
)
from hjsonpy.diagnostics.diagnostic import Diagnostic, Severity

__all__ = [
    "BUILDER_DUPLICATE_VALUE",
    "BUILDER_MAX_DEPTH_EXCEEDED",
    "BUILDER_MISSING_VALUE",
    "BUILDER_UNSUPPORTED_VALUE",
    "DOCUMENT_ROOT_ALREADY_SET",
    "DOCUMENT_ROOT_MISSING",
    "DOCUMENT_SEALED",
    "PARSER_EMPTY_INPUT",
    "PARSER_EXPECTED_PROPERTY_NAME",
    "PARSER_EXPECTED_PROPERTY_SEPARATOR",
    "PARSER_EXPECTED_SEPARATOR",
    "PARSER_EXPECTED_VALUE",
    "PARSER_MAX_DEPTH_EXCEEDED",
    "PARSER_MISMATCHED_CLOSE",
    "PARSER_UNEXPECTED_CLOSE",
    "PARSER_UNEXPECTED_SEPARATOR",
    "PARSER_UNTERMINATED_CONTAINER",
    "REFERENCE_DOCUMENT_UNSEALED",
    "REFERENCE_UNRESOLVED",
    "SCANNER_NO_MATCH",
    "SCANNER_UNEXPECTED_CHARACTER",
    "VALUE_TYPE_MISMATCH",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
]
