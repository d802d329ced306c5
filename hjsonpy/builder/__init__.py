"""Programmatic document construction."""

from hjsonpy.builder.builders import (
    ArrayBuilder,
    CollectionBuilder,
    DocumentBuilder,
    MapBuilder,
    ObjectBuilder,
    ValueBuilder,
)
from hjsonpy.builder.convert import Primitive, number_text, to_value

__all__ = [
    "ArrayBuilder",
    "CollectionBuilder",
    "DocumentBuilder",
    "MapBuilder",
    "ObjectBuilder",
    "Primitive",
    "ValueBuilder",
    "number_text",
    "to_value",
]
