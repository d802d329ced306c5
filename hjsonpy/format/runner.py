"""Format runner over a single parse."""

from __future__ import annotations

from dataclasses import dataclass

from hjsonpy.format.options import FormatOptions, OutputStyle
from hjsonpy.format.render import render
from hjsonpy.model import Document
from hjsonpy.parser import ParserOptions, parse


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Result of formatting from a shared parse."""

    document: Document
    formatted_text: str
    changed: bool


def run_format(
    text: str,
    style: OutputStyle = OutputStyle.RELAXED,
    options: FormatOptions | None = None,
    *,
    parser_options: ParserOptions | None = None,
    document: Document | None = None,
) -> FormatRunResult:
    """Reformat `text` in the requested style from one parse lifecycle."""
    resolved_document = _resolve_document(text, parser_options=parser_options, document=document)

    formatted_text = render(resolved_document.root, style, options)
    changed = formatted_text != text

    return FormatRunResult(
        document=resolved_document,
        formatted_text=formatted_text,
        changed=changed,
    )


def _resolve_document(
    text: str,
    *,
    parser_options: ParserOptions | None,
    document: Document | None,
) -> Document:
    if document is not None:
        if parser_options is not None:
            raise ValueError("Pass either document or parser_options, not both")
        return document
    return parse(text, options=parser_options)
