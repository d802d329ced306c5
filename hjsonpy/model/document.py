"""Document: root value plus the index of referenceable objects."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from hjsonpy.diagnostics import (
    DOCUMENT_ROOT_ALREADY_SET,
    DOCUMENT_ROOT_MISSING,
    DOCUMENT_SEALED,
    REFERENCE_DOCUMENT_UNSEALED,
    REFERENCE_UNRESOLVED,
)
from hjsonpy.errors import (
    BuilderValidationError,
    ReferenceResolutionError,
    StructureError,
)
from hjsonpy.model.keys import Path, path_to_string
from hjsonpy.model.values import HJsonReferencableObject, HJsonValue

logger = logging.getLogger(__name__)


class Document:
    """Owner of a value tree and of every referenceable object inside it.

    A document is open while it is being parsed or built: referenceable
    objects register themselves as they are created. Assigning `root` seals
    it; from then on the index is frozen and references may be resolved.
    Resolution is always lazy and is refused while the document is open,
    since a forward reference may not have been registered yet.
    """

    def __init__(self, identity: str) -> None:
        self._identity = identity
        self._root: HJsonValue | None = None
        self._index: dict[Path, HJsonValue] = {}
        self._references: dict[Path, HJsonValue] = {}

    @property
    def identity(self) -> str:
        return self._identity

    @property
    def sealed(self) -> bool:
        return self._root is not None

    @property
    def root(self) -> HJsonValue:
        if self._root is None:
            raise StructureError.from_spec(
                DOCUMENT_ROOT_MISSING, f"Document {self._identity!r} has no root yet"
            )
        return self._root

    @root.setter
    def root(self, value: HJsonValue) -> None:
        if self._root is not None:
            raise BuilderValidationError.from_spec(DOCUMENT_ROOT_ALREADY_SET)
        self._root = value
        logger.debug(
            "document %r sealed with %d referenceable object(s)",
            self._identity,
            len(self._index),
        )

    @property
    def index(self) -> Mapping[Path, HJsonValue]:
        return MappingProxyType(self._index)

    @property
    def references(self) -> Mapping[Path, HJsonValue]:
        return MappingProxyType(self._references)

    def register(self, obj: HJsonReferencableObject) -> None:
        if self.sealed:
            raise StructureError.from_spec(DOCUMENT_SEALED)
        self._index[obj.path] = obj
        self._references[obj.path] = obj
        logger.debug("registered %s in document %r", path_to_string(obj.path), self._identity)

    def resolve(self, path: Iterable[str]) -> HJsonValue:
        key = tuple(path)
        if not self.sealed:
            raise ReferenceResolutionError.from_spec(
                REFERENCE_DOCUMENT_UNSEALED,
                f"Cannot resolve {path_to_string(key)!r}: document {self._identity!r} is still being built",
            )
        target = self._references.get(key)
        if target is None:
            raise ReferenceResolutionError.from_spec(
                REFERENCE_UNRESOLVED,
                f"Reference target not found for path={path_to_string(key)!r}",
            )
        return target

    def to_json_string(self) -> str:
        from hjsonpy.format import to_json_string

        return to_json_string(self.root)

    def to_formatted_json_string(self, indent: str = "  ", increment: str = "  ") -> str:
        from hjsonpy.format import to_formatted_json_string

        return to_formatted_json_string(self.root, indent, increment)

    def to_hjson_string(self, indent: str = "  ", increment: str = "  ") -> str:
        from hjsonpy.format import to_hjson_string

        return to_hjson_string(self.root, indent, increment)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self._root == other._root

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.to_hjson_string()

    def __repr__(self) -> str:
        return f"Document(identity={self._identity!r}, sealed={self.sealed})"
