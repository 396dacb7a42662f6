# wolfram_query/query_api/decoder/shape.py
"""Decoding for fields the API serializes as either one object or an array.

Wolfram|Alpha collapses single-element collections (assumptions, sources,
warnings, ...) into a bare JSON object and only emits an array when there
are two or more elements. Everything here normalizes both shapes into a list.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from wolfram_query.query_api.errors import DecodeError

T = TypeVar("T")

# Insignificant whitespace per RFC 8259
_JSON_WHITESPACE = b" \t\r\n"


class Shape(Enum):
    """Wire shape of a one-or-many field."""

    OBJECT = "object"
    ARRAY = "array"


def detect_shape(raw: bytes | str) -> Shape:
    """Classify a raw JSON value by its first significant byte."""
    if isinstance(raw, str):
        raw = raw.encode("utf-8")
    if len(raw) == 0:
        raise DecodeError("empty payload")

    stripped = raw.lstrip(_JSON_WHITESPACE)
    if not stripped:
        raise DecodeError("empty payload")

    lead = stripped[:1]
    if lead == b"{":
        return Shape.OBJECT
    if lead == b"[":
        return Shape.ARRAY
    raise DecodeError(f"unrecognized shape (leading byte {lead!r})")


@lru_cache(maxsize=None)
def _adapter(item_type: Any, many: bool) -> TypeAdapter:
    return TypeAdapter(list[item_type] if many else item_type)


def decode_one_or_many(raw: bytes | str, item_type: type[T], *, field: str = "value") -> list[T]:
    """Decode raw JSON holding one ``item_type`` record or an array of them.

    Args:
      raw        the serialized field value, exactly as it appeared on the wire
      item_type  pydantic model (or any type TypeAdapter accepts) of one element
      field      wire name of the field, used in error messages

    Returns:
      list of decoded elements; length 1 for the object shape

    Raises:
      DecodeError for empty input, a leading byte other than ``{`` or ``[``,
      or elements that fail validation.

    """
    shape = detect_shape(raw)
    try:
        if shape is Shape.OBJECT:
            return [_adapter(item_type, False).validate_json(raw)]
        return _adapter(item_type, True).validate_json(raw)
    except ValidationError as e:
        raise DecodeError(f"error interpreting {field}", e) from e


def coerce_one_or_many(value: Any, *, field: str = "value") -> list[Any]:
    """Apply the object-or-array rule to an already parsed JSON value.

    This is the form used inside model validation, where the JSON text has
    already been tokenized: a mapping is the object shape, a list the array
    shape. Element validation is left to the caller's model.
    """
    if isinstance(value, dict):
        return [value]
    if isinstance(value, list):
        return value
    # Already-built model instances pass through as a single element.
    if hasattr(value, "model_fields"):
        return [value]
    raise DecodeError(f"{field} json does not indicate an object or array ({type(value).__name__})")
