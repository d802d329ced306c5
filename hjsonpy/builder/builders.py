"""Context-manager builders mirroring the value model.

Every builder knows the raw path of the value it produces, computed exactly
as the parser computes it, so a referenceable object built here is registered
under the same address it would receive when its rendering is parsed back.

    builder = DocumentBuilder("example")
    with builder.object_json() as root:
        root.property("name", "x")
        with root.property_value("items") as items:
            with items.list_object() as elements:
                elements.number(1)
    document = builder.build()
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from decimal import Decimal
import logging

from hjsonpy.builder.convert import Primitive, number_text, to_value
from hjsonpy.diagnostics import (
    BUILDER_DUPLICATE_VALUE,
    BUILDER_MAX_DEPTH_EXCEEDED,
    BUILDER_MISSING_VALUE,
)
from hjsonpy.errors import BuilderValidationError
from hjsonpy.model import (
    CLASS,
    ELEMENTS,
    ENTRIES,
    KEY,
    KIND,
    NULL,
    ROOT_PATH,
    VALUE,
    ComplexObjectKind,
    Document,
    HJsonArray,
    HJsonBoolean,
    HJsonNumber,
    HJsonReferencableObject,
    HJsonReference,
    HJsonString,
    HJsonUnreferencableObject,
    HJsonValue,
    Path,
    path_from_string,
    referenceable_path,
)
from hjsonpy.parser.options import DEFAULT_MAX_DEPTH

logger = logging.getLogger(__name__)


class _ValueSink(ABC):
    """Operations shared by everything that accepts values.

    Subclasses decide where the next value lives (`_claim`) and what to do
    with it once complete (`_put`).

    `depth` counts the containers enclosing the values this sink places, the
    same count the parser checks against `ParserOptions.max_depth`.
    """

    def __init__(self, document: Document, path: Path, depth: int, max_depth: int | None) -> None:
        self._document = document
        self._path = path
        self._depth = depth
        self._max_depth = max_depth

    @abstractmethod
    def _claim(self) -> Path: ...

    @abstractmethod
    def _put(self, value: HJsonValue) -> None: ...

    def _nested(self, levels: int = 1) -> int:
        return _deeper(self._depth, levels, self._max_depth)

    def _add(self, value: HJsonValue) -> None:
        self._claim()
        self._put(value)

    def null_value(self) -> None:
        self._add(NULL)

    def boolean(self, value: bool) -> None:
        self._add(HJsonBoolean(value))

    def number(self, value: int | float | Decimal) -> None:
        self._add(HJsonNumber(number_text(value)))

    def string(self, value: str) -> None:
        self._add(HJsonString(value))

    def primitive(self, value: Primitive) -> None:
        self._add(to_value(value))

    def primitive_object(self, class_name: str, value: Primitive) -> None:
        self._nested()
        self._add(
            HJsonUnreferencableObject(
                {
                    KIND: HJsonString(ComplexObjectKind.PRIMITIVE.value),
                    CLASS: HJsonString(class_name),
                    VALUE: to_value(value),
                }
            )
        )

    def reference(self, path: str) -> None:
        self._nested()
        self._add(HJsonReference(self._document, path_from_string(path)))

    @contextmanager
    def array_json(self) -> Iterator[ArrayBuilder]:
        builder = ArrayBuilder(self._document, self._claim(), self._nested(), self._max_depth)
        yield builder
        self._put(builder.build())

    @contextmanager
    def array_object(self) -> Iterator[CollectionBuilder]:
        yield from self._collection(ComplexObjectKind.ARRAY)

    @contextmanager
    def list_object(self) -> Iterator[CollectionBuilder]:
        yield from self._collection(ComplexObjectKind.LIST)

    @contextmanager
    def set_object(self) -> Iterator[CollectionBuilder]:
        yield from self._collection(ComplexObjectKind.SET)

    @contextmanager
    def map_object(self) -> Iterator[MapBuilder]:
        builder = MapBuilder(self._document, self._claim(), self._nested(2), self._max_depth)
        yield builder
        self._put(builder.build())

    @contextmanager
    def object_json(self) -> Iterator[ObjectBuilder]:
        builder = ObjectBuilder(self._document, self._claim(), self._nested(), self._max_depth)
        yield builder
        self._put(builder.build())

    @contextmanager
    def object_referenceable(self, class_name: str) -> Iterator[ObjectBuilder]:
        builder = ObjectBuilder(self._document, self._claim(), self._nested(), self._max_depth)
        yield builder
        self._put(builder.build_referenceable(class_name))

    def _collection(self, kind: ComplexObjectKind) -> Iterator[CollectionBuilder]:
        builder = CollectionBuilder(self._document, self._claim(), self._nested(2), self._max_depth)
        yield builder
        self._put(builder.build(kind))


class ValueBuilder(_ValueSink):
    """Holds exactly one value; `role` names the slot in error messages."""

    def __init__(
        self, document: Document, path: Path, depth: int, max_depth: int | None, role: str
    ) -> None:
        super().__init__(document, path, depth, max_depth)
        self._role = role
        self._claimed = False
        self._value: HJsonValue | None = None

    @property
    def value(self) -> HJsonValue | None:
        return self._value

    def require(self) -> HJsonValue:
        if self._value is None:
            raise BuilderValidationError.from_spec(
                BUILDER_MISSING_VALUE, f"No value for {self._role}"
            )
        return self._value

    def _claim(self) -> Path:
        if self._claimed:
            raise BuilderValidationError.from_spec(
                BUILDER_DUPLICATE_VALUE,
                f"There can be only one value for {self._role}",
            )
        self._claimed = True
        return self._path

    def _put(self, value: HJsonValue) -> None:
        self._value = value


class _SequenceBuilder(_ValueSink):
    def __init__(self, document: Document, path: Path, depth: int, max_depth: int | None) -> None:
        super().__init__(document, path, depth, max_depth)
        self._elements: list[HJsonValue] = []

    def _put(self, value: HJsonValue) -> None:
        self._elements.append(value)


class ArrayBuilder(_SequenceBuilder):
    """Builds a plain JSON array; elements live at `path + (ordinal,)`."""

    def _claim(self) -> Path:
        return (*self._path, str(len(self._elements)))

    def build(self) -> HJsonArray:
        return HJsonArray(list(self._elements))


class CollectionBuilder(_SequenceBuilder):
    """Elements of an ARRAY/LIST/SET object, addressed through `$elements`."""

    def _claim(self) -> Path:
        return (*self._path, ELEMENTS, str(len(self._elements)))

    def build(self, kind: ComplexObjectKind) -> HJsonUnreferencableObject:
        return HJsonUnreferencableObject(
            {
                KIND: HJsonString(kind.value),
                ELEMENTS: HJsonArray(list(self._elements)),
            }
        )


class MapBuilder:
    """Entries of a MAP object, each a `{$key, $value}` object under `$entries`."""

    def __init__(self, document: Document, path: Path, depth: int, max_depth: int | None) -> None:
        self._document = document
        self._path = path
        self._depth = depth
        self._max_depth = max_depth
        self._entries: list[HJsonValue] = []

    def entry(self, key: Primitive, value: Primitive) -> None:
        _deeper(self._depth, 1, self._max_depth)
        self._entries.append(_entry(to_value(key), to_value(value)))

    @contextmanager
    def entry_builders(self) -> Iterator[tuple[ValueBuilder, ValueBuilder]]:
        entry_path = (*self._path, ENTRIES, str(len(self._entries)))
        depth = _deeper(self._depth, 1, self._max_depth)
        key_builder = ValueBuilder(
            self._document, (*entry_path, KEY), depth, self._max_depth, "a map entry key"
        )
        value_builder = ValueBuilder(
            self._document, (*entry_path, VALUE), depth, self._max_depth, "a map entry value"
        )
        yield key_builder, value_builder
        self._entries.append(_entry(key_builder.require(), value_builder.require()))

    def build(self) -> HJsonUnreferencableObject:
        return HJsonUnreferencableObject(
            {
                KIND: HJsonString(ComplexObjectKind.MAP.value),
                ENTRIES: HJsonArray(list(self._entries)),
            }
        )


class ObjectBuilder:
    """Properties of a plain or referenceable object."""

    def __init__(self, document: Document, path: Path, depth: int, max_depth: int | None) -> None:
        self._document = document
        self._path = path
        self._depth = depth
        self._max_depth = max_depth
        self._properties: dict[str, HJsonValue] = {}

    def property(self, key: str, value: Primitive) -> None:
        self._properties[key] = to_value(value)

    @contextmanager
    def property_value(self, key: str) -> Iterator[ValueBuilder]:
        builder = ValueBuilder(
            self._document, (*self._path, key), self._depth, self._max_depth, "an object property"
        )
        yield builder
        self._properties[key] = builder.require()

    def build(self) -> HJsonUnreferencableObject:
        return HJsonUnreferencableObject(self._properties)

    def build_referenceable(self, class_name: str) -> HJsonReferencableObject:
        properties: dict[str, HJsonValue] = {
            KIND: HJsonString(ComplexObjectKind.OBJECT.value),
            CLASS: HJsonString(class_name),
        }
        properties.update(self._properties)
        return HJsonReferencableObject(self._document, referenceable_path(self._path), properties)


class DocumentBuilder(ValueBuilder):
    """Builds a document around exactly one root value.

    Nesting is bounded by `max_depth` exactly as parsing is, so anything built
    here can be rendered and parsed back with the default options.
    """

    def __init__(self, identity: str, max_depth: int | None = DEFAULT_MAX_DEPTH) -> None:
        super().__init__(Document(identity), ROOT_PATH, 0, max_depth, "the root of a document")

    def build(self) -> Document:
        root = self.require()
        self._document.root = root
        logger.debug(
            "built document %r with %d referenceable object(s)",
            self._document.identity,
            len(self._document.index),
        )
        return self._document


def _deeper(depth: int, levels: int, max_depth: int | None) -> int:
    nested = depth + levels
    if max_depth is not None and nested > max_depth:
        raise BuilderValidationError.from_spec(
            BUILDER_MAX_DEPTH_EXCEEDED, f"Maximum nesting depth of {max_depth} exceeded"
        )
    return nested


def _entry(key: HJsonValue, value: HJsonValue) -> HJsonUnreferencableObject:
    return HJsonUnreferencableObject({KEY: key, VALUE: value})
