"""Conversion of arbitrary values to lists of floats."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Mapping
from decimal import Decimal
from typing import Any

from .numbers import to_float32, to_float64
from .text import parse_json

_BYTES_LIKE = (bytes, bytearray, memoryview)
_NOT_JSON = object()
_MAX_FLOAT32 = 3.4028234663852886e38


def _decode(data: bytes) -> Any:
    try:
        return parse_json(data)
    except ValueError:
        return _NOT_JSON


def _is_zero(value: Any) -> bool:
    if isinstance(value, (bool, int, float, complex, Decimal)):
        return value == 0
    return False


def _json_number(item: Any, limit: float | None) -> float:
    if isinstance(item, bool) or not isinstance(item, (int, float, Decimal)):
        return 0.0
    try:
        number = float(item)
    except OverflowError:
        return 0.0
    if not math.isfinite(number):
        return 0.0
    if limit is not None and abs(number) > limit:
        return 0.0
    return number


def _to_float_list(
    value: Any, convert: Callable[[Any], float], limit: float | None
) -> list[float]:
    if value is None:
        return []
    if isinstance(value, str):
        return [convert(value)] if value else []
    if isinstance(value, _BYTES_LIKE):
        data = bytes(value)
        parsed = _decode(data)
        if isinstance(parsed, list):
            return [convert(_json_number(item, limit)) for item in parsed]
        return [convert(byte) for byte in data]
    if isinstance(value, Mapping):
        return [convert(value)]
    if isinstance(value, Iterable):
        return [convert(item) for item in value]
    return [] if _is_zero(value) else [convert(value)]


def to_float64s(value: Any) -> list[float]:
    """Convert ``value`` to a list of double-precision floats.

    Iterables are converted item by item and non-empty text is a single
    item.  Bytes holding a JSON array are decoded, non-numbers giving
    zero; other bytes become their byte values.  None, empty text and
    zero scalars give an empty list.
    """
    return _to_float_list(value, to_float64, None)


def to_float32s(value: Any) -> list[float]:
    """Convert ``value`` to a list of floats rounded to single precision."""
    return _to_float_list(value, to_float32, _MAX_FLOAT32)