"""Parser infrastructure (scanner-driven stack machine producing a Document)."""

from hjsonpy.parser.hjson import parse
from hjsonpy.parser.options import DEFAULT_IDENTITY, DEFAULT_MAX_DEPTH, ParserOptions
from hjsonpy.parser.parser import Parser

__all__ = [
    "DEFAULT_IDENTITY",
    "DEFAULT_MAX_DEPTH",
    "Parser",
    "ParserOptions",
    "parse",
]
