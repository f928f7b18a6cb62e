"""Conversion of arbitrary values to lists of unsigned fixed-width integers."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from decimal import Decimal
from typing import Any

from .numbers import to_uint, to_uint32, to_uint64
from .text import parse_json

_BYTES_LIKE = (bytes, bytearray, memoryview)
_NOT_JSON = object()
_NUMERIC = re.compile(r"[-+]?[0-9]+(?:\.[0-9]+)?")


def _decode(data: str | bytes) -> Any:
    try:
        return parse_json(data)
    except (ValueError, UnicodeDecodeError):
        return _NOT_JSON


def _is_zero(value: Any) -> bool:
    if isinstance(value, (bool, int, float, complex, Decimal)):
        return value == 0
    return False


def _fits(item: Any, bits: int) -> bool:
    if not isinstance(item, int) or isinstance(item, bool):
        return False
    return 0 <= item < (1 << bits)


def _to_uint_list(value: Any, convert: Callable[[Any], int], bits: int) -> list[int]:
    if value is None:
        return []
    if isinstance(value, str):
        trimmed = value.strip()
        if not trimmed:
            return []
        if _NUMERIC.fullmatch(trimmed):
            return [convert(trimmed)]
        parsed = _decode(value)
        if parsed is None:
            return []
        if isinstance(parsed, list) and all(
            item is None or _fits(item, bits) for item in parsed
        ):
            return [0 if item is None else item for item in parsed]
        return [convert(value)]
    if isinstance(value, _BYTES_LIKE):
        data = bytes(value)
        parsed = _decode(data)
        if isinstance(parsed, list):
            # Items that do not fit the target type are left as zero.
            return [item if _fits(item, bits) else 0 for item in parsed]
        if parsed is None:
            return []
        return [convert(byte) for byte in data]
    if isinstance(value, Mapping):
        return [convert(value)]
    if isinstance(value, Iterable):
        return [convert(item) for item in value]
    return [] if _is_zero(value) else [convert(value)]


def to_uints(value: Any) -> list[int]:
    """Convert ``value`` to a list of unsigned 64-bit integers.

    Iterables are converted item by item.  Numeric text (after trimming)
    is a single item; text or bytes holding a JSON array of unsigned
    integers are decoded; other bytes become their byte values.  None,
    blank text and zero scalars give an empty list.
    """
    return _to_uint_list(value, to_uint, 64)


def to_uint32s(value: Any) -> list[int]:
    """Convert ``value`` to a list of unsigned 32-bit integers."""
    return _to_uint_list(value, to_uint32, 32)


def to_uint64s(value: Any) -> list[int]:
    """Convert ``value`` to a list of unsigned 64-bit integers."""
    return _to_uint_list(value, to_uint64, 64)