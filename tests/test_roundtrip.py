import pytest

from hjsonpy.builder import DocumentBuilder
from hjsonpy.format import OutputStyle, render, to_hjson_string, to_json_string
from hjsonpy.model import HJsonArray, HJsonString, HJsonUnreferencableObject
from hjsonpy.parser import DEFAULT_MAX_DEPTH, parse
from tests._shared_cases import VALID_CASES, HJsonCase, case_id

STYLES = (OutputStyle.COMPACT, OutputStyle.PRETTY, OutputStyle.RELAXED)


@pytest.mark.parametrize("case", VALID_CASES, ids=case_id)
def test_every_style_parses_back_to_the_same_document(case: HJsonCase):
    document = parse(case.source)

    for style in STYLES:
        assert parse(render(document.root, style)) == document, style


@pytest.mark.parametrize("case", VALID_CASES, ids=case_id)
def test_relaxed_form_is_idempotent(case: HJsonCase):
    once = to_hjson_string(parse(case.source).root)

    assert to_hjson_string(parse(once).root) == once


def test_awkward_strings_survive_relaxed_round_trip():
    strings = [
        "",
        " leading",
        "trailing\t",
        "01",
        "1 // not a comment",
        "false",
        "'single'",
        "'''",
        "back\\slash",
        "ends with backslash\\",
        "multi\nline with 'quotes' and '''triples'''",
        "\nstarts with newline",
        "crlf\r\nline",
        "unicode é ∑",
        "{braces}",
    ]
    value = HJsonArray([HJsonString(text) for text in strings])

    assert parse(to_hjson_string(value)).root == value


def test_awkward_keys_survive_relaxed_round_trip():
    value = HJsonUnreferencableObject(
        {
            key: HJsonString(key)
            for key in ["true", "a b", "x:y", "", "#h", "//c", '"q', "tab\tkey", "$ref"]
        }
    )

    assert parse(to_hjson_string(value)).root == value


def test_built_document_round_trips_through_compact_form():
    builder = DocumentBuilder("built")
    with builder.object_json() as root:
        root.property("name", "x")
        root.property("nothing", None)
        with root.property_value("items") as items:
            with items.array_json() as array:
                array.number(1)
                array.number(-2.5)
                array.string("three, with comma")
                array.boolean(False)

    document = builder.build()

    assert parse(to_json_string(document.root)) == document


def test_deepest_parseable_document_renders_and_compares():
    document = parse("[" * DEFAULT_MAX_DEPTH + "]" * DEFAULT_MAX_DEPTH)

    for style in STYLES:
        assert parse(render(document.root, style)) == document, style
