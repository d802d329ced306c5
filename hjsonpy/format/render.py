"""Text renderings of a value tree: compact JSON, pretty JSON and relaxed HJson."""

from __future__ import annotations

import re
from typing import Final

from hjsonpy.format.options import FormatOptions, OutputStyle
from hjsonpy.model import (
    KEY_WORDS,
    REF,
    HJsonArray,
    HJsonBoolean,
    HJsonNull,
    HJsonNumber,
    HJsonObject,
    HJsonReference,
    HJsonString,
    HJsonValue,
    encode,
    encode_multiline,
)
from hjsonpy.scanner import (
    STRUCTURAL_CHARACTERS,
    TOKEN_BOOLEAN,
    TOKEN_NULL,
    TOKEN_NUMBER,
)

_UNQUOTED_NAME_RE: Final[re.Pattern[str]] = re.compile(r"[^,:\[\]{}\s]+")

# Prefixes the scanner would read as something other than a quoteless value.
_RESERVED_PREFIXES: Final[tuple[str, ...]] = ('"', "'", "#", "//", "/*")


def render(
    value: HJsonValue,
    style: OutputStyle = OutputStyle.RELAXED,
    options: FormatOptions | None = None,
) -> str:
    resolved = options or FormatOptions()
    match style:
        case OutputStyle.COMPACT:
            return to_json_string(value)
        case OutputStyle.PRETTY:
            return to_formatted_json_string(value, resolved.indent, resolved.increment)
        case OutputStyle.RELAXED:
            return to_hjson_string(value, resolved.indent, resolved.increment)
    raise ValueError(f"Unknown output style: {style!r}")


# ----------------------------------------------------------------------
# Compact
# ----------------------------------------------------------------------


def to_json_string(value: HJsonValue) -> str:
    """Single-line JSON with minimal separators."""
    match value:
        case HJsonNull():
            return "null"
        case HJsonBoolean(value=flag):
            return _boolean(flag)
        case HJsonNumber(text=text):
            return text
        case HJsonString():
            return _quoted(value)
        case HJsonArray(elements=elements):
            return "[" + ",".join(to_json_string(element) for element in elements) + "]"
        case HJsonReference():
            return _compact_reference(value)
        case HJsonObject():
            members = (
                f'"{encode(key)}":{to_json_string(member)}'
                for key, member in value.properties.items()
            )
            return "{" + ",".join(members) + "}"
    raise TypeError(f"Cannot render {type(value).__name__}")


# ----------------------------------------------------------------------
# Pretty
# ----------------------------------------------------------------------


def to_formatted_json_string(value: HJsonValue, indent: str = "  ", increment: str = "  ") -> str:
    """Indented JSON; every nesting level adds `increment` to `indent`."""
    match value:
        case HJsonArray(elements=elements):
            if not elements:
                return "[]"
            if len(elements) == 1:
                return f"[ {to_formatted_json_string(elements[0], indent + increment, increment)} ]"
            lines = ",\n".join(
                indent + to_formatted_json_string(element, indent + increment, increment)
                for element in elements
            )
            return f"[\n{lines}\n{_outdent(indent, increment)}]"
        case HJsonReference():
            return _compact_reference(value)
        case HJsonObject():
            if not len(value):
                return "{}"
            lines = ",\n".join(
                f'{indent}"{encode(key)}" : {to_formatted_json_string(member, indent + increment, increment)}'
                for key, member in value.properties.items()
            )
            return f"{{\n{lines}\n{_outdent(indent, increment)}}}"
        case _:
            return to_json_string(value)


# ----------------------------------------------------------------------
# Relaxed
# ----------------------------------------------------------------------


def to_hjson_string(value: HJsonValue, indent: str = "  ", increment: str = "  ") -> str:
    """Canonical relaxed form: one member per line, no separators, minimal quoting."""
    match value:
        case HJsonNull():
            return "null"
        case HJsonBoolean(value=flag):
            return _boolean(flag)
        case HJsonNumber(text=text):
            return text
        case HJsonString():
            return _relaxed_string(value)
        case HJsonArray(elements=elements):
            if not elements:
                return "[]"
            lines = "\n".join(
                indent + to_hjson_string(element, indent + increment, increment)
                for element in elements
            )
            return f"[\n{lines}\n{_outdent(indent, increment)}]"
        case HJsonReference():
            return f'{{ {REF} : "{encode(value.path_string)}" }}'
        case HJsonObject():
            if not len(value):
                return "{}"
            lines = "\n".join(
                f"{indent}{_relaxed_key(key)} : {to_hjson_string(member, indent + increment, increment)}"
                for key, member in value.properties.items()
            )
            return f"{{\n{lines}\n{_outdent(indent, increment)}}}"
    raise TypeError(f"Cannot render {type(value).__name__}")


def _relaxed_string(string: HJsonString) -> str:
    text = string.value
    if not text:
        return '""'
    if "\n" in text:
        return f"'''{encode_multiline(text)}'''"
    if _can_be_quoteless(text):
        return string.encoded
    return _quoted(string)


def _can_be_quoteless(text: str) -> bool:
    if "\r" in text or text != text.strip():
        return False
    if not STRUCTURAL_CHARACTERS.isdisjoint(text):
        return False
    if text.startswith(_RESERVED_PREFIXES):
        return False
    # Anything that would lex back as null, a boolean or a number.
    return not any(
        spec.pattern.match(text) is not None for spec in (TOKEN_NULL, TOKEN_BOOLEAN, TOKEN_NUMBER)
    )


def _relaxed_key(key: str) -> str:
    if (
        key in KEY_WORDS
        or _UNQUOTED_NAME_RE.fullmatch(key) is None
        or key.startswith(_RESERVED_PREFIXES)
    ):
        return f'"{encode(key)}"'
    return key


# ----------------------------------------------------------------------
# Shared
# ----------------------------------------------------------------------


def _boolean(flag: bool) -> str:
    return "true" if flag else "false"


def _quoted(string: HJsonString) -> str:
    return f'"{string.encoded}"'


def _compact_reference(reference: HJsonReference) -> str:
    return f'{{"{REF}":"{encode(reference.path_string)}"}}'


def _outdent(indent: str, increment: str) -> str:
    """`indent` up to its last `increment`; unchanged when it has none."""
    if not increment:
        return indent
    head, found, _ = indent.rpartition(increment)
    return head if found else indent
