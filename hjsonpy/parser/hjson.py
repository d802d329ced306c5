"""HJson parse entrypoints."""

from __future__ import annotations

from hjsonpy.model import Document
from hjsonpy.parser.options import ParserOptions
from hjsonpy.parser.parser import Parser


def _resolve_options(
    options: ParserOptions | None,
    identity: str | None,
) -> ParserOptions:
    if identity is not None and options is not None:
        raise ValueError("Pass either options or identity, not both")

    if options is not None:
        return options

    if identity is not None:
        return ParserOptions(identity=identity)

    return ParserOptions()


def parse(
    text: str,
    options: ParserOptions | None = None,
    *,
    identity: str | None = None,
) -> Document:
    """Parse relaxed JSON text into a sealed `Document`.

    Raises `ScanError` or `StructureError` on the first problem found.
    """
    resolved_options = _resolve_options(options=options, identity=identity)
    return Parser(text, options=resolved_options).parse()
