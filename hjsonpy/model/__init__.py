"""Value model and document."""

from hjsonpy.model.document import Document
from hjsonpy.model.escape import decode, encode, encode_multiline
from hjsonpy.model.keys import (
    CLASS,
    ELEMENTS,
    ENTRIES,
    KEY,
    KEY_WORDS,
    KIND,
    PATH_SEPARATOR,
    REF,
    ROOT_PATH,
    VALUE,
    ComplexObjectKind,
    Path,
    path_from_string,
    path_to_string,
    referenceable_path,
)
from hjsonpy.model.values import (
    NULL,
    HJsonArray,
    HJsonBoolean,
    HJsonNull,
    HJsonNumber,
    HJsonObject,
    HJsonReferencableObject,
    HJsonReference,
    HJsonString,
    HJsonUnreferencableObject,
    HJsonValue,
    HJsonValueBase,
)

__all__ = [
    "CLASS",
    "ELEMENTS",
    "ENTRIES",
    "KEY",
    "KEY_WORDS",
    "KIND",
    "NULL",
    "PATH_SEPARATOR",
    "REF",
    "ROOT_PATH",
    "VALUE",
    "ComplexObjectKind",
    "Document",
    "HJsonArray",
    "HJsonBoolean",
    "HJsonNull",
    "HJsonNumber",
    "HJsonObject",
    "HJsonReferencableObject",
    "HJsonReference",
    "HJsonString",
    "HJsonUnreferencableObject",
    "HJsonValue",
    "HJsonValueBase",
    "Path",
    "decode",
    "encode",
    "encode_multiline",
    "path_from_string",
    "path_to_string",
    "referenceable_path",
]
