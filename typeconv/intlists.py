"""Conversion of arbitrary values to lists of fixed-width integers."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from decimal import Decimal
from typing import Any

from .numbers import to_int, to_int32, to_int64
from .text import parse_json

_BYTES_LIKE = (bytes, bytearray, memoryview)
_NOT_JSON = object()


def _decode(data: str | bytes) -> Any:
    try:
        return parse_json(data)
    except ValueError:
        return _NOT_JSON


def _is_zero(value: Any) -> bool:
    if isinstance(value, (bool, int, float, complex, Decimal)):
        return value == 0
    return False


def _fits(item: Any, bits: int) -> bool:
    if not isinstance(item, int) or isinstance(item, bool):
        return False
    return -(1 << (bits - 1)) <= item < (1 << (bits - 1))


def _to_int_list(value: Any, convert: Callable[[Any], int], bits: int) -> list[int]:
    if value is None:
        return []
    if isinstance(value, _BYTES_LIKE):
        data = bytes(value)
        parsed = _decode(data)
        if isinstance(parsed, list):
            # Items that do not fit the target type are left as zero.
            return [item if _fits(item, bits) else 0 for item in parsed]
        return [convert(byte) for byte in data]
    if isinstance(value, str):
        parsed = _decode(value)
        if parsed is None:
            return []
        if isinstance(parsed, list) and all(
            item is None or _fits(item, bits) for item in parsed
        ):
            return [0 if item is None else item for item in parsed]
        return [convert(value)] if value else []
    if isinstance(value, Mapping):
        return [convert(value)]
    if isinstance(value, Iterable):
        return [convert(item) for item in value]
    return [] if _is_zero(value) else [convert(value)]


def to_ints(value: Any) -> list[int]:
    """Convert ``value`` to a list of 64-bit integers.

    Iterables are converted item by item.  Text or bytes holding a JSON
    array of integers are decoded; other bytes become their byte values
    and other non-empty text a single converted item.  None, empty text
    and zero scalars give an empty list.
    """
    return _to_int_list(value, to_int, 64)


def to_int32s(value: Any) -> list[int]:
    """Convert ``value`` to a list of signed 32-bit integers."""
    return _to_int_list(value, to_int32, 32)


def to_int64s(value: Any) -> list[int]:
    """Convert ``value`` to a list of signed 64-bit integers."""
    return _to_int_list(value, to_int64, 64)