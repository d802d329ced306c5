"""String escape table shared by the parser (decode) and the serializers (encode)."""

from __future__ import annotations

import re
from typing import Final

_ESCAPE_TABLE: Final[dict[int, str]] = {
    ord("\\"): "\\\\",
    ord("\b"): "\\b",
    ord("\f"): "\\f",
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    ord("\t"): "\\t",
    ord('"'): '\\"',
}

# Triple-quoted strings keep their line breaks and escape `'` so a trailing or
# embedded quote can never close the literal early.
_MULTILINE_ESCAPE_TABLE: Final[dict[int, str]] = {
    **{key: value for key, value in _ESCAPE_TABLE.items() if key != ord("\n")},
    ord("'"): "\\'",
}

_DECODE_TABLE: Final[dict[str, str]] = {
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    '"': '"',
    "'": "'",
    "/": "/",
    "\\": "\\",
    # escaped line break: the literal continues on the next line
    "\n": "\n",
    "\r": "\n",
    "\r\n": "\n",
}

_ESCAPE_RE: Final[re.Pattern[str]] = re.compile(r"\\(u[0-9a-fA-F]{4}|\r\n|.)", re.DOTALL)


def encode(text: str) -> str:
    return text.translate(_ESCAPE_TABLE)


def encode_multiline(text: str) -> str:
    return text.translate(_MULTILINE_ESCAPE_TABLE)


def decode(encoded: str) -> str:
    """Undo `encode`/`encode_multiline`; unknown escapes are kept verbatim."""
    if "\\" not in encoded:
        return encoded
    return _ESCAPE_RE.sub(_decode_escape, encoded)


def _decode_escape(match: re.Match[str]) -> str:
    escaped = match.group(1)
    if len(escaped) == 5 and escaped[0] == "u":
        return chr(int(escaped[1:], 16))
    return _DECODE_TABLE.get(escaped, match.group(0))


__all__ = ["decode", "encode", "encode_multiline"]
