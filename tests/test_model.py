from decimal import Decimal

import pytest

from hjsonpy.errors import (
    BuilderValidationError,
    ReferenceResolutionError,
    StructureError,
    TypeMismatchError,
)
from hjsonpy.model import (
    NULL,
    ComplexObjectKind,
    Document,
    HJsonArray,
    HJsonBoolean,
    HJsonNumber,
    HJsonReferencableObject,
    HJsonReference,
    HJsonString,
    HJsonUnreferencableObject,
    decode,
    encode,
    encode_multiline,
    path_from_string,
    path_to_string,
    referenceable_path,
)


def test_encode_uses_standard_escape_table():
    assert encode('a\\b\bc\fd\ne\rf\tg"h') == 'a\\\\b\\bc\\fd\\ne\\rf\\tg\\"h'


def test_encode_multiline_keeps_newlines_and_escapes_single_quote():
    assert encode_multiline("it's\nfine\t") == "it\\'s\nfine\\t"


def test_decode_reverses_escapes_and_handles_unicode():
    assert decode('\\"q\\" \\u00e9 \\/ \\\\') == '"q" é / \\'


def test_decode_keeps_unknown_escapes():
    assert decode("\\x41") == "\\x41"


def test_decode_turns_escaped_line_break_into_newline():
    assert decode("a\\\r\nb") == "a\nb"


def test_number_keeps_source_text():
    number = HJsonNumber("1.50")

    assert number.text == "1.50"
    assert number.to_float() == 1.5
    assert number.to_decimal() == Decimal("1.50")
    assert not number.is_integral
    assert HJsonNumber("-12").value == -12
    assert HJsonNumber("1.50") != HJsonNumber("1.5")


def test_narrowing_succeeds_on_matching_variant():
    string = HJsonString("x")

    assert string.as_string() is string
    assert HJsonBoolean(True).as_boolean().value is True
    assert HJsonArray().as_array() == HJsonArray()


@pytest.mark.parametrize(
    "narrow",
    [
        lambda value: value.as_boolean(),
        lambda value: value.as_number(),
        lambda value: value.as_string(),
        lambda value: value.as_array(),
        lambda value: value.as_object(),
        lambda value: value.as_reference(),
    ],
)
def test_narrowing_null_raises_type_mismatch(narrow):
    with pytest.raises(TypeMismatchError) as excinfo:
        narrow(NULL)

    assert excinfo.value.code == "VALUE_TYPE_MISMATCH"


def test_null_is_null():
    assert NULL.is_null
    assert not HJsonString("null").is_null


def test_object_equality_ignores_identity_variant_and_kind_is_read_from_tag():
    document = Document("test")
    properties = {"$kind": HJsonString("OBJECT"), "$class": HJsonString("A")}
    referenceable = HJsonReferencableObject(document, ("a",), properties)
    plain = HJsonUnreferencableObject(properties)

    assert referenceable == plain
    assert referenceable.kind is ComplexObjectKind.OBJECT
    assert referenceable.class_name == "A"
    assert HJsonUnreferencableObject({"$kind": HJsonString("nope")}).kind is None


def test_array_and_object_mutators_chain():
    array = HJsonArray().add_element(NULL).add_element(HJsonBoolean(False))
    obj = HJsonUnreferencableObject().set_property("a", array)

    assert len(array) == 2
    assert obj["a"][1] == HJsonBoolean(False)
    assert "a" in obj
    assert obj.get("missing") is None


def test_referenceable_path_drops_payload_segments():
    assert referenceable_path(("a", "$elements", "0", "$value")) == ("a", "0")
    assert referenceable_path(("m", "$entries", "1", "$key")) == ("m", "$entries", "1", "$key")


def test_path_string_conversions():
    assert path_to_string(("a", "0")) == "/a/0"
    assert path_to_string(()) == "/"
    assert path_from_string("/a/0") == ("a", "0")
    assert path_from_string("/") == ()


def test_document_resolves_registered_object_after_sealing():
    document = Document("test")
    target = HJsonReferencableObject(document, ("a",))
    reference = HJsonReference(document, ("a",))

    with pytest.raises(ReferenceResolutionError) as excinfo:
        _ = reference.target
    assert excinfo.value.code == "REFERENCE_DOCUMENT_UNSEALED"

    document.root = HJsonUnreferencableObject({"a": target, "b": reference})

    assert document.sealed
    assert reference.target is target
    assert document.index[("a",)] is target
    assert document.references[("a",)] is target


def test_document_unresolved_reference():
    document = Document("test")
    reference = HJsonReference(document, ("missing",))
    document.root = reference

    with pytest.raises(ReferenceResolutionError) as excinfo:
        _ = reference.target

    assert excinfo.value.code == "REFERENCE_UNRESOLVED"
    assert "/missing" in str(excinfo.value)


def test_document_rejects_registration_after_sealing():
    document = Document("test")
    document.root = NULL

    with pytest.raises(StructureError) as excinfo:
        HJsonReferencableObject(document, ("late",))

    assert excinfo.value.code == "DOCUMENT_SEALED"


def test_document_root_is_assigned_once():
    document = Document("test")

    with pytest.raises(StructureError) as missing:
        _ = document.root
    assert missing.value.code == "DOCUMENT_ROOT_MISSING"

    document.root = NULL
    with pytest.raises(BuilderValidationError) as twice:
        document.root = NULL
    assert twice.value.code == "DOCUMENT_ROOT_ALREADY_SET"


def test_references_compare_by_path_only():
    first = Document("first")
    second = Document("second")

    assert HJsonReference(first, ("a",)) == HJsonReference(second, ("a",))
    assert HJsonReference(first, ("a",)).path_string == "/a"


def test_documents_compare_by_root():
    first = Document("first")
    second = Document("second")
    first.root = HJsonArray([HJsonNumber("1")])
    second.root = HJsonArray([HJsonNumber("1")])

    assert first == second


def test_sealed_document_index_is_read_only():
    document = Document("test")
    target = HJsonReferencableObject(document, ("a",))
    document.root = HJsonUnreferencableObject({"a": target})

    with pytest.raises(TypeError):
        document.index[("b",)] = target
    with pytest.raises(TypeError):
        del document.references[("a",)]

    assert document.index == {("a",): target}


def test_documents_are_unhashable():
    first = Document("first")
    second = Document("second")
    first.root = NULL
    second.root = NULL

    assert first == second
    with pytest.raises(TypeError):
        hash(first)
