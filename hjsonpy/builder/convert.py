"""Conversion of plain Python values into HJson values."""

from __future__ import annotations

from decimal import Decimal
import math
from typing import TypeAlias

from hjsonpy.diagnostics import BUILDER_UNSUPPORTED_VALUE
from hjsonpy.errors import BuilderValidationError
from hjsonpy.model import NULL, HJsonBoolean, HJsonNumber, HJsonString, HJsonValue

Primitive: TypeAlias = None | bool | int | float | Decimal | str


def to_value(value: Primitive) -> HJsonValue:
    match value:
        case None:
            return NULL
        case bool():
            return HJsonBoolean(value)
        case int() | float() | Decimal():
            return HJsonNumber(number_text(value))
        case str():
            return HJsonString(value)
    raise _unsupported(value)


def number_text(value: int | float | Decimal) -> str:
    """Source text for a number; rejects booleans and non-finite values."""
    if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
        raise _unsupported(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float) and not math.isfinite(value):
        raise _unsupported(value)
    if isinstance(value, Decimal) and not value.is_finite():
        raise _unsupported(value)
    return str(value)


def _unsupported(value: object) -> BuilderValidationError:
    return BuilderValidationError.from_spec(
        BUILDER_UNSUPPORTED_VALUE,
        f"Cannot convert {type(value).__name__} to an HJson value",
    )
