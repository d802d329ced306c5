"""HJson value model.

The value space is closed: every value is one of the classes unioned in
`HJsonValue`. Consumers switch over it with `match`; the `as_*` narrowing
helpers raise `TypeMismatchError` instead of returning a wrong variant.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from functools import cached_property
import re
from types import MappingProxyType
from typing import TYPE_CHECKING, Final, Self, TypeAlias

from hjsonpy.diagnostics import VALUE_TYPE_MISMATCH
from hjsonpy.errors import TypeMismatchError
from hjsonpy.model.escape import encode
from hjsonpy.model.keys import CLASS, KIND, ComplexObjectKind, Path, path_to_string

if TYPE_CHECKING:
    from hjsonpy.model.document import Document

_INTEGER_RE: Final[re.Pattern[str]] = re.compile(r"^-?\d+$")


class HJsonValueBase:
    """Narrowing helpers shared by every value variant."""

    __slots__ = ()

    def as_boolean(self) -> HJsonBoolean:
        if isinstance(self, HJsonBoolean):
            return self
        raise _mismatch(self, "a boolean")

    def as_number(self) -> HJsonNumber:
        if isinstance(self, HJsonNumber):
            return self
        raise _mismatch(self, "a number")

    def as_string(self) -> HJsonString:
        if isinstance(self, HJsonString):
            return self
        raise _mismatch(self, "a string")

    def as_array(self) -> HJsonArray:
        if isinstance(self, HJsonArray):
            return self
        raise _mismatch(self, "an array")

    def as_object(self) -> HJsonObject:
        if isinstance(self, HJsonObject):
            return self
        raise _mismatch(self, "an object")

    def as_reference(self) -> HJsonReference:
        if isinstance(self, HJsonReference):
            return self
        raise _mismatch(self, "a reference")

    @property
    def is_null(self) -> bool:
        return isinstance(self, HJsonNull)

    def __str__(self) -> str:
        from hjsonpy.format import to_hjson_string

        return to_hjson_string(self)  # type: ignore[arg-type]


def _mismatch(value: HJsonValueBase, expected: str) -> TypeMismatchError:
    return TypeMismatchError.from_spec(
        VALUE_TYPE_MISMATCH,
        f"{type(value).__name__} is not {expected}",
    )


@dataclass(frozen=True, slots=True)
class HJsonNull(HJsonValueBase):
    def __repr__(self) -> str:
        return "NULL"


NULL: Final[HJsonNull] = HJsonNull()


@dataclass(frozen=True, slots=True)
class HJsonBoolean(HJsonValueBase):
    value: bool


@dataclass(frozen=True, slots=True)
class HJsonNumber(HJsonValueBase):
    """Number kept as its exact source text; converted only on request."""

    text: str

    @property
    def is_integral(self) -> bool:
        return _INTEGER_RE.fullmatch(self.text) is not None

    @property
    def value(self) -> int | float:
        return self.to_int() if self.is_integral else self.to_float()

    def to_int(self) -> int:
        return int(self.text)

    def to_float(self) -> float:
        return float(self.text)

    def to_decimal(self) -> Decimal:
        return Decimal(self.text)


@dataclass(frozen=True)
class HJsonString(HJsonValueBase):
    value: str

    @cached_property
    def encoded(self) -> str:
        """The value with the standard escape table applied."""
        return encode(self.value)


@dataclass(eq=False, slots=True)
class HJsonArray(HJsonValueBase):
    elements: list[HJsonValue] = field(default_factory=list)

    def add_element(self, element: HJsonValue) -> Self:
        self.elements.append(element)
        return self

    def __len__(self) -> int:
        return len(self.elements)

    def __getitem__(self, index: int) -> HJsonValue:
        return self.elements[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HJsonArray):
            return NotImplemented
        return self.elements == other.elements

    __hash__ = None  # type: ignore[assignment]


class HJsonObject(HJsonValueBase):
    """Ordered property mapping; equality ignores the identity variant."""

    __slots__ = ("_properties",)

    def __init__(self, properties: Mapping[str, HJsonValue] | None = None) -> None:
        self._properties: dict[str, HJsonValue] = dict(properties or {})

    @property
    def properties(self) -> Mapping[str, HJsonValue]:
        return MappingProxyType(self._properties)

    def set_property(self, key: str, value: HJsonValue) -> Self:
        self._properties[key] = value
        return self

    def get(self, key: str) -> HJsonValue | None:
        return self._properties.get(key)

    def __getitem__(self, key: str) -> HJsonValue:
        return self._properties[key]

    def __contains__(self, key: object) -> bool:
        return key in self._properties

    def __len__(self) -> int:
        return len(self._properties)

    @property
    def kind(self) -> ComplexObjectKind | None:
        """The `$kind` tag, when present and recognised."""
        tag = self._properties.get(KIND)
        if not isinstance(tag, HJsonString):
            return None
        try:
            return ComplexObjectKind(tag.value)
        except ValueError:
            return None

    @property
    def class_name(self) -> str | None:
        tag = self._properties.get(CLASS)
        return tag.value if isinstance(tag, HJsonString) else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HJsonObject):
            return NotImplemented
        return self._properties == other._properties

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._properties!r})"


class HJsonUnreferencableObject(HJsonObject):
    """Plain object; never registered with a document."""

    __slots__ = ()


class HJsonReferencableObject(HJsonObject):
    """Object bound to a document path; registers itself on construction."""

    __slots__ = ("_document", "_path")

    def __init__(
        self,
        document: Document,
        path: Iterable[str],
        properties: Mapping[str, HJsonValue] | None = None,
    ) -> None:
        super().__init__(properties)
        self._document = document
        self._path: Path = tuple(path)
        document.register(self)

    @property
    def document(self) -> Document:
        return self._document

    @property
    def path(self) -> Path:
        return self._path

    def __repr__(self) -> str:
        return f"HJsonReferencableObject(path={path_to_string(self._path)!r}, {self._properties!r})"


@dataclass(frozen=True, slots=True, eq=False)
class HJsonReference(HJsonValueBase):
    """Pointer to a referenceable object elsewhere in the same document.

    Equality and hashing use the path only, so comparing cyclic graphs never
    follows the reference.
    """

    document: Document = field(repr=False)
    path: Path

    @property
    def path_string(self) -> str:
        return path_to_string(self.path)

    @property
    def target(self) -> HJsonValue:
        return self.document.resolve(self.path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HJsonReference):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)


HJsonValue: TypeAlias = (
    HJsonNull
    | HJsonBoolean
    | HJsonNumber
    | HJsonString
    | HJsonArray
    | HJsonUnreferencableObject
    | HJsonReferencableObject
    | HJsonReference
)


__all__ = [
    "NULL",
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
]
