import pytest

from hjsonpy.errors import ScanError
from hjsonpy.scanner import (
    TOKEN_BOOLEAN,
    TOKEN_CLOSE_OR_SEPARATOR,
    TOKEN_EOL,
    TOKEN_MULTILINE_STRING,
    TOKEN_NULL,
    TOKEN_NUMBER,
    TOKEN_OBJECT_START,
    TOKEN_QUOTED_STRING,
    TOKEN_QUOTELESS_STRING,
    TOKEN_UNQUOTED_PROPERTY_NAME,
    TOKEN_WHITESPACE_OR_COMMENT,
    Scanner,
)
from hjsonpy.text import TextRange, TextSize


def test_next_consumes_and_tracks_last_range():
    scanner = Scanner("null, 1")

    assert scanner.has_next(TOKEN_NULL)
    assert scanner.next(TOKEN_NULL) == "null"
    assert scanner.position == TextSize(4)
    assert scanner.last_range == TextRange(0, 4)
    assert scanner.last_text == "null"
    assert scanner.current_char == ","


def test_has_next_does_not_consume():
    scanner = Scanner("true")

    assert scanner.has_next(TOKEN_BOOLEAN)
    assert scanner.has_next(TOKEN_BOOLEAN)
    assert scanner.position == TextSize(0)


def test_next_without_match_raises_scan_error_with_position():
    scanner = Scanner("{\n  x")
    scanner.next(TOKEN_OBJECT_START)
    scanner.next(TOKEN_EOL)
    scanner.next(TOKEN_WHITESPACE_OR_COMMENT)

    with pytest.raises(ScanError) as excinfo:
        scanner.next(TOKEN_NUMBER)

    error = excinfo.value
    assert error.code == "SCANNER_NO_MATCH"
    assert (error.line, error.column) == (2, 3)
    assert error.excerpt == "x"
    assert "at line 2, column 3 near 'x'" in str(error)


@pytest.mark.parametrize(
    ("text", "matches"),
    [
        ("1", True),
        ("-1", True),
        ("0", True),
        ("1.5e10", True),
        ("1E-3", True),
        ("1, 2", True),
        ("1 # comment", True),
        ("1 // comment", True),
        ("1]", True),
        ("00", False),
        ("01", False),
        ("1.", False),
        (".5", False),
        ("1.2.3", False),
        ("1 2", False),
        ("+1", False),
    ],
)
def test_number_requires_strict_grammar_and_value_terminator(text: str, matches: bool):
    assert Scanner(text).has_next(TOKEN_NUMBER) is matches


@pytest.mark.parametrize(
    ("text", "matches"),
    [
        ("true", True),
        ("false\n", True),
        ("true}", True),
        ("truely", False),
        ("true love", False),
        ("True", False),
    ],
)
def test_boolean_is_case_sensitive_and_whole_value(text: str, matches: bool):
    assert Scanner(text).has_next(TOKEN_BOOLEAN) is matches


def test_quoteless_string_runs_to_end_of_line():
    scanner = Scanner("hello, world: [x] # not a comment\nnext")

    assert scanner.next(TOKEN_QUOTELESS_STRING) == "hello, world: [x] # not a comment"
    assert scanner.has_next(TOKEN_EOL)


def test_quoteless_string_continues_over_escaped_newline():
    scanner = Scanner("first\\\nsecond\nthird")

    assert scanner.next(TOKEN_QUOTELESS_STRING) == "first\\\nsecond"


@pytest.mark.parametrize("text", [",a", ":a", "[a", "]a", "{a", "}a", " a", "\na"])
def test_quoteless_string_cannot_start_with_structural_or_space(text: str):
    assert not Scanner(text).has_next(TOKEN_QUOTELESS_STRING)


def test_quoted_string_does_not_cross_lines():
    assert Scanner('"a\\"b"').next(TOKEN_QUOTED_STRING) == '"a\\"b"'
    assert not Scanner('"a\nb"').has_next(TOKEN_QUOTED_STRING)


def test_multiline_string_spans_lines_and_respects_escaped_quote():
    scanner = Scanner("'''it\\'s\nfine''' tail")

    assert scanner.next(TOKEN_MULTILINE_STRING) == "'''it\\'s\nfine'''"


def test_comments_are_whitespace():
    scanner = Scanner("/* one\ntwo */# three\n")

    assert scanner.next(TOKEN_WHITESPACE_OR_COMMENT) == "/* one\ntwo */"
    assert scanner.next(TOKEN_WHITESPACE_OR_COMMENT) == "# three"
    assert scanner.next(TOKEN_EOL) == "\n"
    assert scanner.is_eof


def test_peek_ahead_skips_whitespace_newlines_and_comments():
    scanner = Scanner("  \n  // c\n  ]")

    assert scanner.peek_ahead(TOKEN_CLOSE_OR_SEPARATOR)
    assert scanner.position == TextSize(0)


def test_unquoted_property_name_stops_at_colon_and_space():
    scanner = Scanner("$kind: OBJECT")

    assert scanner.next(TOKEN_UNQUOTED_PROPERTY_NAME) == "$kind"


def test_unexpected_character_reports_location():
    scanner = Scanner("a\r\nb")
    scanner.next(TOKEN_QUOTELESS_STRING)
    scanner.next(TOKEN_EOL)

    error = scanner.unexpected_character()

    assert error.code == "SCANNER_UNEXPECTED_CHARACTER"
    assert (error.line, error.column) == (2, 1)

