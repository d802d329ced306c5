"""Stack-driven HJson parser.

The parser pulls tokens from a `Scanner` and keeps three synchronised stacks:
completed `values` awaiting attachment, pending property `names` and the
current `path`. A frame per open container records whether the next token
must be a property name. Every structural event (open, separator, end of
line, close) is handled by one method; kind recognition runs when an object
closes and may replace it with a reference or a referenceable object.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TypeAlias

from hjsonpy.diagnostics import (
    PARSER_EMPTY_INPUT,
    PARSER_EXPECTED_PROPERTY_NAME,
    PARSER_EXPECTED_PROPERTY_SEPARATOR,
    PARSER_EXPECTED_SEPARATOR,
    PARSER_EXPECTED_VALUE,
    PARSER_MAX_DEPTH_EXCEEDED,
    PARSER_MISMATCHED_CLOSE,
    PARSER_UNEXPECTED_CLOSE,
    PARSER_UNEXPECTED_SEPARATOR,
    PARSER_UNTERMINATED_CONTAINER,
    DiagnosticSpec,
)
from hjsonpy.errors import StructureError
from hjsonpy.model import (
    NULL,
    REF,
    Document,
    HJsonArray,
    HJsonBoolean,
    HJsonNumber,
    HJsonObject,
    HJsonReferencableObject,
    HJsonReference,
    HJsonString,
    HJsonUnreferencableObject,
    HJsonValue,
    decode,
    path_from_string,
    path_to_string,
    referenceable_path,
)
from hjsonpy.parser.options import ParserOptions
from hjsonpy.scanner import (
    TOKEN_ARRAY_END,
    TOKEN_ARRAY_START,
    TOKEN_BOOLEAN,
    TOKEN_CLOSE_OR_SEPARATOR,
    TOKEN_EOL,
    TOKEN_MULTILINE_STRING,
    TOKEN_NULL,
    TOKEN_NUMBER,
    TOKEN_OBJECT_END,
    TOKEN_OBJECT_START,
    TOKEN_PROPERTY_SEP,
    TOKEN_QUOTED_STRING,
    TOKEN_QUOTELESS_STRING,
    TOKEN_SEP,
    TOKEN_UNQUOTED_PROPERTY_NAME,
    TOKEN_WHITESPACE_OR_COMMENT,
    Scanner,
)
from hjsonpy.text import TextRange

logger = logging.getLogger(__name__)

Container: TypeAlias = HJsonArray | HJsonUnreferencableObject


@dataclass(slots=True)
class _Frame:
    """One open container."""

    container: Container
    expecting_name: bool = False
    pending_name: str | None = None

    @property
    def is_object(self) -> bool:
        return isinstance(self.container, HJsonObject)


@dataclass(slots=True)
class _ParserState:
    values: list[HJsonValue] = field(default_factory=list)
    names: list[str] = field(default_factory=list)
    path: list[str] = field(default_factory=list)
    frames: list[_Frame] = field(default_factory=list)

    @property
    def frame(self) -> _Frame | None:
        return self.frames[-1] if self.frames else None

    @property
    def has_pending_value(self) -> bool:
        """A completed value sits above the innermost open container."""
        if not self.frames:
            return bool(self.values)
        return self.values[-1] is not self.frames[-1].container


class Parser:
    """Single-use parser: one instance produces exactly one `Document`."""

    def __init__(self, text: str, options: ParserOptions | None = None) -> None:
        self._scanner = Scanner(text)
        self._options = options or ParserOptions()
        self._document = Document(self._options.identity)
        self._state = _ParserState()
        self._started = False

    @property
    def options(self) -> ParserOptions:
        return self._options

    def parse(self) -> Document:
        if self._started:
            raise RuntimeError("Parser instances support exactly one parse")
        self._started = True

        scanner = self._scanner
        while scanner.has_more:
            before = scanner.position
            frame = self._state.frame
            if frame is not None and frame.expecting_name:
                self._step_property_name(frame)
            else:
                self._step_value()
            if not before < scanner.position:
                raise RuntimeError(f"Parser stopped making progress at {scanner.position}")

        return self._finish()

    # ------------------------------------------------------------------
    # Tokenizing modes
    # ------------------------------------------------------------------

    def _step_value(self) -> None:
        scanner = self._scanner

        if scanner.has_next(TOKEN_WHITESPACE_OR_COMMENT):
            scanner.next(TOKEN_WHITESPACE_OR_COMMENT)
        elif scanner.has_next(TOKEN_NULL):
            scanner.next(TOKEN_NULL)
            self._push_value(NULL)
        elif scanner.has_next(TOKEN_BOOLEAN):
            self._push_value(HJsonBoolean(scanner.next(TOKEN_BOOLEAN) == "true"))
        elif scanner.has_next(TOKEN_NUMBER):
            self._push_value(HJsonNumber(scanner.next(TOKEN_NUMBER)))
        elif scanner.has_next(TOKEN_QUOTED_STRING):
            self._push_value(HJsonString(decode(scanner.next(TOKEN_QUOTED_STRING)[1:-1])))
        elif scanner.has_next(TOKEN_MULTILINE_STRING):
            self._push_value(HJsonString(decode(scanner.next(TOKEN_MULTILINE_STRING)[3:-3])))
        elif scanner.has_next(TOKEN_ARRAY_START):
            scanner.next(TOKEN_ARRAY_START)
            self._open(HJsonArray())
        elif scanner.has_next(TOKEN_ARRAY_END):
            scanner.next(TOKEN_ARRAY_END)
            self._close(HJsonArray)
        elif scanner.has_next(TOKEN_OBJECT_START):
            scanner.next(TOKEN_OBJECT_START)
            self._open(HJsonUnreferencableObject())
        elif scanner.has_next(TOKEN_OBJECT_END):
            scanner.next(TOKEN_OBJECT_END)
            self._close(HJsonObject)
        elif scanner.has_next(TOKEN_SEP):
            scanner.next(TOKEN_SEP)
            self._separator()
        elif scanner.has_next(TOKEN_QUOTELESS_STRING):
            text = scanner.next(TOKEN_QUOTELESS_STRING)
            self._push_value(HJsonString(decode(text.rstrip(" \t\f\v"))))
        elif scanner.has_next(TOKEN_EOL):
            scanner.next(TOKEN_EOL)
            self._end_of_line()
        else:
            raise scanner.unexpected_character()

    def _step_property_name(self, frame: _Frame) -> None:
        scanner = self._scanner
        state = self._state

        if scanner.has_next(TOKEN_WHITESPACE_OR_COMMENT):
            scanner.next(TOKEN_WHITESPACE_OR_COMMENT)
        elif scanner.has_next(TOKEN_EOL):
            scanner.next(TOKEN_EOL)
        elif scanner.has_next(TOKEN_OBJECT_END):
            scanner.next(TOKEN_OBJECT_END)
            self._close(HJsonObject)
        elif scanner.has_next(TOKEN_PROPERTY_SEP):
            scanner.next(TOKEN_PROPERTY_SEP)
            if frame.pending_name is None:
                raise self._error(PARSER_EXPECTED_PROPERTY_NAME)
            state.names.append(frame.pending_name)
            state.path.append(frame.pending_name)
            frame.pending_name = None
            frame.expecting_name = False
        elif frame.pending_name is not None:
            raise self._error(PARSER_EXPECTED_PROPERTY_SEPARATOR, range=scanner.current_range)
        elif scanner.has_next(TOKEN_QUOTED_STRING):
            frame.pending_name = decode(scanner.next(TOKEN_QUOTED_STRING)[1:-1])
        elif scanner.has_next(TOKEN_UNQUOTED_PROPERTY_NAME):
            frame.pending_name = scanner.next(TOKEN_UNQUOTED_PROPERTY_NAME)
        else:
            raise self._error(
                PARSER_EXPECTED_PROPERTY_NAME,
                f"Expected a property name but found {scanner.current_char!r}",
                range=scanner.current_range,
            )

    # ------------------------------------------------------------------
    # Structural events
    # ------------------------------------------------------------------

    def _push_value(self, value: HJsonValue) -> None:
        if self._state.has_pending_value:
            raise self._error(PARSER_EXPECTED_SEPARATOR)
        self._state.values.append(value)

    def _open(self, container: Container) -> None:
        state = self._state
        max_depth = self._options.max_depth
        if max_depth is not None and len(state.frames) >= max_depth:
            raise self._error(
                PARSER_MAX_DEPTH_EXCEEDED,
                f"Maximum nesting depth of {max_depth} exceeded",
            )
        self._push_value(container)
        if isinstance(container, HJsonArray):
            state.frames.append(_Frame(container))
            state.path.append("0")
        else:
            state.frames.append(_Frame(container, expecting_name=True))

    def _separator(self) -> None:
        if self._state.frame is None or not self._state.has_pending_value:
            raise self._error(PARSER_UNEXPECTED_SEPARATOR)
        self._attach()

    def _end_of_line(self) -> None:
        state = self._state
        if state.frame is None or not state.has_pending_value:
            return
        # A newline right before a close (or before a separator) is not a separator.
        if self._scanner.peek_ahead(TOKEN_CLOSE_OR_SEPARATOR):
            return
        self._attach()

    def _close(self, kind: type[HJsonArray] | type[HJsonObject]) -> None:
        state = self._state
        frame = state.frame
        if frame is None:
            raise self._error(PARSER_UNEXPECTED_CLOSE)
        if not isinstance(frame.container, kind):
            raise self._error(
                PARSER_MISMATCHED_CLOSE,
                f"Expected to close {_describe(frame.container)} but found {self._scanner.last_text!r}",
            )

        if frame.is_object:
            if frame.pending_name is not None:
                raise self._error(PARSER_EXPECTED_PROPERTY_SEPARATOR)
            if not frame.expecting_name and not state.has_pending_value:
                raise self._error(PARSER_EXPECTED_VALUE)

        if state.has_pending_value:
            self._attach()
        if not frame.is_object:
            state.path.pop()

        state.frames.pop()
        closed = state.values.pop()
        state.values.append(self._recognise(closed))

    def _attach(self) -> None:
        state = self._state
        frame = state.frames[-1]
        value = state.values.pop()
        state.path.pop()
        match frame.container:
            case HJsonArray() as array:
                array.add_element(value)
                state.path.append(str(len(array.elements)))
            case HJsonUnreferencableObject() as obj:
                obj.set_property(state.names.pop(), value)
                frame.expecting_name = True
            case other:
                raise self._error(
                    PARSER_MISMATCHED_CLOSE,
                    f"Expected an Array or an Object but was {type(other).__name__}",
                )

    def _recognise(self, value: HJsonValue) -> HJsonValue:
        """Kind recognition for a just-closed object."""
        if not isinstance(value, HJsonObject):
            return value

        properties = value.properties
        ref = properties.get(REF)
        if len(properties) == 1 and isinstance(ref, HJsonString):
            reference = HJsonReference(self._document, path_from_string(ref.value))
            logger.debug("reference to %s at %s", reference.path_string, path_to_string(self._state.path))
            return reference

        kind = value.kind
        if kind is not None and kind.is_referenceable:
            obj = HJsonReferencableObject(
                self._document,
                referenceable_path(self._state.path),
                properties,
            )
            logger.debug("referenceable %s object at %s", kind, path_to_string(obj.path))
            return obj

        return value

    def _finish(self) -> Document:
        state = self._state
        if not state.values:
            raise self._error(PARSER_EMPTY_INPUT, range=self._scanner.current_range)
        if state.frames or len(state.values) != 1:
            raise self._error(PARSER_UNTERMINATED_CONTAINER, range=self._scanner.current_range)

        self._document.root = state.values.pop()
        logger.debug("parsed document %r", self._document.identity)
        return self._document

    def _error(
        self,
        spec: DiagnosticSpec,
        message: str | None = None,
        *,
        range: TextRange | None = None,
    ) -> StructureError:
        scanner = self._scanner
        return StructureError.from_spec(
            spec,
            message,
            range=range if range is not None else scanner.last_range,
            source=scanner.source,
        )


def _describe(container: Container) -> str:
    return "an array" if isinstance(container, HJsonArray) else "an object"
