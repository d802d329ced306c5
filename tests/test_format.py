import textwrap

import pytest

from hjsonpy.format import (
    FormatOptions,
    OutputStyle,
    render,
    run_format,
    to_formatted_json_string,
    to_hjson_string,
    to_json_string,
)
from hjsonpy.model import (
    NULL,
    Document,
    HJsonArray,
    HJsonBoolean,
    HJsonNumber,
    HJsonReference,
    HJsonString,
    HJsonUnreferencableObject,
)
from hjsonpy.parser import ParserOptions, parse


def _dedent(text: str) -> str:
    return textwrap.dedent(text).strip("\n")


SAMPLE = HJsonUnreferencableObject(
    {
        "a": HJsonNumber("1"),
        "b": HJsonString("hello"),
        "c": HJsonArray([HJsonNumber("1"), HJsonNumber("2")]),
        "d": HJsonUnreferencableObject(),
        "e": HJsonArray([HJsonBoolean(True)]),
    }
)


def test_compact_rendering():
    assert to_json_string(SAMPLE) == '{"a":1,"b":"hello","c":[1,2],"d":{},"e":[true]}'


def test_compact_escapes_strings_and_keys():
    value = HJsonUnreferencableObject({'k"ey': HJsonString("line\nbreak")})

    assert to_json_string(value) == '{"k\\"ey":"line\\nbreak"}'


def test_pretty_rendering():
    expected = _dedent(
        """
        {
          "a" : 1,
          "b" : "hello",
          "c" : [
            1,
            2
          ],
          "d" : {},
          "e" : [ true ]
        }
        """
    )

    assert to_formatted_json_string(SAMPLE) == expected


def test_pretty_custom_indent():
    value = HJsonArray([HJsonNumber("1"), HJsonArray([NULL, NULL])])

    assert to_formatted_json_string(value, "\t", "\t") == "[\n\t1,\n\t[\n\t\tnull,\n\t\tnull\n\t]\n]"


def test_relaxed_rendering():
    expected = _dedent(
        """
        {
          a : 1
          b : hello
          c : [
            1
            2
          ]
          d : {}
          e : [
            true
          ]
        }
        """
    )

    assert to_hjson_string(SAMPLE) == expected


def test_relaxed_single_element_array():
    assert to_hjson_string(HJsonArray([HJsonNumber("1")])) == "[\n  1\n]"


@pytest.mark.parametrize(
    ("text", "rendered"),
    [
        ("", '""'),
        ("plain words", "plain words"),
        ("tab\there", "tab\\there"),
        ("a, b", '"a, b"'),
        ("key: value", '"key: value"'),
        ("[x]", '"[x]"'),
        ("12", '"12"'),
        ("-1.5e3", '"-1.5e3"'),
        ("1 # note", '"1 # note"'),
        ("007", "007"),
        ("true", '"true"'),
        ("null", '"null"'),
        (" padded", '" padded"'),
        ("trailing ", '"trailing "'),
        ('"quoted', '"\\"quoted"'),
        ("# hash", '"# hash"'),
        ("// slashes", '"// slashes"'),
        ("two\nlines", "'''two\nlines'''"),
        ("it's\nmine", "'''it\\'s\nmine'''"),
        ("carriage\rreturn", '"carriage\\rreturn"'),
    ],
)
def test_relaxed_string_quoting(text: str, rendered: str):
    assert to_hjson_string(HJsonString(text)) == rendered


@pytest.mark.parametrize(
    ("key", "rendered"),
    [
        ("name", "name"),
        ("$kind", "$kind"),
        ("true", '"true"'),
        ("null", '"null"'),
        ("with space", '"with space"'),
        ("a:b", '"a:b"'),
        ("", '""'),
        ("#tag", '"#tag"'),
    ],
)
def test_relaxed_key_quoting(key: str, rendered: str):
    value = HJsonUnreferencableObject({key: NULL})

    assert to_hjson_string(value) == f"{{\n  {rendered} : null\n}}"


def test_references_render_per_style():
    document = Document("refs")
    reference = HJsonReference(document, ("a", "0"))

    assert to_json_string(reference) == '{"$ref":"/a/0"}'
    assert to_formatted_json_string(reference) == '{"$ref":"/a/0"}'
    assert to_hjson_string(reference) == '{ $ref : "/a/0" }'


def test_empty_containers_in_every_style():
    for renderer in (to_json_string, to_formatted_json_string, to_hjson_string):
        assert renderer(HJsonArray()) == "[]"
        assert renderer(HJsonUnreferencableObject()) == "{}"


def test_render_dispatches_on_style():
    value = HJsonArray([HJsonNumber("1"), HJsonNumber("2")])
    options = FormatOptions(indent="    ", increment="    ")

    assert render(value, OutputStyle.COMPACT) == "[1,2]"
    assert render(value, OutputStyle.PRETTY, options) == "[\n    1,\n    2\n]"
    assert render(value) == "[\n  1\n  2\n]"


def test_document_and_value_string_forms():
    document = parse("[1]")

    assert document.to_json_string() == "[1]"
    assert document.to_formatted_json_string() == "[ 1 ]"
    assert str(document) == "[\n  1\n]"
    assert str(HJsonString("x")) == "x"


def test_run_format_reports_change():
    result = run_format('{"a": [1, 2]}', OutputStyle.RELAXED)

    assert result.changed
    assert result.formatted_text == "{\n  a : [\n    1\n    2\n  ]\n}"
    assert result.document.sealed


def test_run_format_unchanged_when_already_canonical():
    result = run_format("[1,2]", OutputStyle.COMPACT)

    assert not result.changed
    assert result.formatted_text == "[1,2]"


def test_run_format_reuses_a_document():
    document = parse("[true]")

    result = run_format("ignored", OutputStyle.COMPACT, document=document)

    assert result.document is document
    assert result.formatted_text == "[true]"


def test_run_format_rejects_document_with_parser_options():
    with pytest.raises(ValueError):
        run_format("1", document=parse("1"), parser_options=ParserOptions())
