"""Token specs recognised by the scanner."""

from dataclasses import dataclass
from enum import IntEnum
import re
from typing import Final


class TokenKind(IntEnum):
    # -------------------------
    # Trivia
    # -------------------------
    WHITESPACE_OR_COMMENT = 10
    EOL = 11

    # -------------------------
    # Literals
    # -------------------------
    NULL = 20
    BOOLEAN = 21
    NUMBER = 22
    QUOTED_STRING = 23
    MULTILINE_STRING = 24
    QUOTELESS_STRING = 25
    UNQUOTED_PROPERTY_NAME = 26

    # -------------------------
    # Punctuation / separators
    # -------------------------
    ARRAY_START = 40  # [
    ARRAY_END = 41  # ]
    OBJECT_START = 42  # {
    OBJECT_END = 43  # }
    SEPARATOR = 44  # ,
    PROPERTY_SEPARATOR = 45  # :

    # -------------------------
    # Lookahead-only
    # -------------------------
    CLOSE_OR_SEPARATOR = 60


@dataclass(frozen=True, slots=True)
class TokenSpec:
    """A token kind paired with the pattern that must match at the scan position."""

    kind: TokenKind
    pattern: re.Pattern[str]

    @staticmethod
    def regex(kind: TokenKind, pattern: str, flags: int = 0) -> "TokenSpec":
        return TokenSpec(kind, re.compile(pattern, flags))

    @staticmethod
    def literal(kind: TokenKind, text: str) -> "TokenSpec":
        return TokenSpec(kind, re.compile(re.escape(text)))

    def __repr__(self) -> str:
        return f"TokenSpec({self.kind.name}, {self.pattern.pattern!r})"


# Literal words and numbers only count when they end the value: trailing
# horizontal whitespace/comment, then end-of-line, a separator, a close or EOF.
_VALUE_TERMINATOR: Final[str] = r"(?=[ \t\f\v]*(?:\Z|[\r\n,\]}]|#|//|/\*))"

_COMMENT: Final[str] = r"#[^\r\n]*|//[^\r\n]*|/\*.*?\*/"

# Escaped characters (including escaped line breaks) continue a quoteless string.
_QUOTELESS_CHAR: Final[str] = r"\\(?:\r\n|.)|[^\\\r\n]"

NUMBER_PATTERN: Final[str] = r"-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?"

TOKEN_WHITESPACE_OR_COMMENT: Final[TokenSpec] = TokenSpec.regex(
    TokenKind.WHITESPACE_OR_COMMENT, rf"[ \t\f\v]+|{_COMMENT}", re.DOTALL
)
TOKEN_EOL: Final[TokenSpec] = TokenSpec.regex(TokenKind.EOL, r"\r\n|\n|\r")
TOKEN_NULL: Final[TokenSpec] = TokenSpec.regex(TokenKind.NULL, rf"null{_VALUE_TERMINATOR}")
TOKEN_BOOLEAN: Final[TokenSpec] = TokenSpec.regex(TokenKind.BOOLEAN, rf"(?:true|false){_VALUE_TERMINATOR}")
TOKEN_NUMBER: Final[TokenSpec] = TokenSpec.regex(TokenKind.NUMBER, rf"{NUMBER_PATTERN}{_VALUE_TERMINATOR}")
TOKEN_QUOTED_STRING: Final[TokenSpec] = TokenSpec.regex(TokenKind.QUOTED_STRING, r'"(?:[^"\\\r\n]|\\.)*"')
TOKEN_MULTILINE_STRING: Final[TokenSpec] = TokenSpec.regex(
    TokenKind.MULTILINE_STRING, r"'''(?:[^\\]|\\.)*?'''", re.DOTALL
)
TOKEN_QUOTELESS_STRING: Final[TokenSpec] = TokenSpec.regex(
    TokenKind.QUOTELESS_STRING,
    rf"(?:\\(?:\r\n|.)|[^{{}}\[\],:\s\\])(?:{_QUOTELESS_CHAR})*",
    re.DOTALL,
)
TOKEN_UNQUOTED_PROPERTY_NAME: Final[TokenSpec] = TokenSpec.regex(
    TokenKind.UNQUOTED_PROPERTY_NAME, r"[^,:\[\]{}\s]+"
)
TOKEN_ARRAY_START: Final[TokenSpec] = TokenSpec.literal(TokenKind.ARRAY_START, "[")
TOKEN_ARRAY_END: Final[TokenSpec] = TokenSpec.literal(TokenKind.ARRAY_END, "]")
TOKEN_OBJECT_START: Final[TokenSpec] = TokenSpec.literal(TokenKind.OBJECT_START, "{")
TOKEN_OBJECT_END: Final[TokenSpec] = TokenSpec.literal(TokenKind.OBJECT_END, "}")
TOKEN_SEP: Final[TokenSpec] = TokenSpec.literal(TokenKind.SEPARATOR, ",")
TOKEN_PROPERTY_SEP: Final[TokenSpec] = TokenSpec.literal(TokenKind.PROPERTY_SEPARATOR, ":")
TOKEN_CLOSE_OR_SEPARATOR: Final[TokenSpec] = TokenSpec.regex(TokenKind.CLOSE_OR_SEPARATOR, r"[\]},]")

# Everything the parser may skip before looking at the next significant token.
SKIPPABLE: Final[re.Pattern[str]] = re.compile(rf"(?:[ \t\f\v\r\n]+|{_COMMENT})*", re.DOTALL)

STRUCTURAL_CHARACTERS: Final[frozenset[str]] = frozenset(",:[]{}")
