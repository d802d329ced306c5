"""Scanner."""

from hjsonpy.scanner.scanner import Scanner
from hjsonpy.scanner.tokens import (
    NUMBER_PATTERN,
    STRUCTURAL_CHARACTERS,
    TOKEN_ARRAY_END,
    TOKEN_ARRAY_START,
    TOKEN_BOOLEAN,
    TOKEN_CLOSE_OR_SEPARATOR,
    TOKEN_EOL,
    TOKEN_MULTILINE_STRING,
    TOKEN_NULL,
    TOKEN_NUMBER,
    TOKEN_OBJECT_END,
    TOKEN_OBJECT_START,
    TOKEN_PROPERTY_SEP,
    TOKEN_QUOTED_STRING,
    TOKEN_QUOTELESS_STRING,
    TOKEN_SEP,
    TOKEN_UNQUOTED_PROPERTY_NAME,
    TOKEN_WHITESPACE_OR_COMMENT,
    TokenKind,
    TokenSpec,
)

__all__ = [
    "NUMBER_PATTERN",
    "STRUCTURAL_CHARACTERS",
    "TOKEN_ARRAY_END",
    "TOKEN_ARRAY_START",
    "TOKEN_BOOLEAN",
    "TOKEN_CLOSE_OR_SEPARATOR",
    "TOKEN_EOL",
    "TOKEN_MULTILINE_STRING",
    "TOKEN_NULL",
    "TOKEN_NUMBER",
    "TOKEN_OBJECT_END",
    "TOKEN_OBJECT_START",
    "TOKEN_PROPERTY_SEP",
    "TOKEN_QUOTED_STRING",
    "TOKEN_QUOTELESS_STRING",
    "TOKEN_SEP",
    "TOKEN_UNQUOTED_PROPERTY_NAME",
    "TOKEN_WHITESPACE_OR_COMMENT",
    "Scanner",
    "TokenKind",
    "TokenSpec",
]
