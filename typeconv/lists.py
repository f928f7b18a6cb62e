"""Conversion of arbitrary values to lists and lists of strings."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any

from .text import parse_json, to_str

_BYTES_LIKE = (bytes, bytearray, memoryview)


def _json_array(data: str | bytes) -> list[Any] | None:
    try:
        parsed = parse_json(data)
    except ValueError:
        return None
    return parsed if isinstance(parsed, list) else None


def _is_zero(value: Any) -> bool:
    if isinstance(value, (bool, int, float, complex, Decimal)):
        return value == 0
    return False


def to_list(value: Any) -> list[Any]:
    """Convert ``value`` to a list.

    A list is returned as is and other iterables are collected.  Bytes
    or text holding a JSON array are decoded; other bytes become their
    byte values.  A mapping or a non-zero scalar becomes a one-item list,
    while None, empty text and zero values give an empty list.
    """
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, _BYTES_LIKE):
        data = bytes(value)
        parsed = _json_array(data)
        return parsed if parsed is not None else list(data)
    if isinstance(value, str):
        parsed = _json_array(value)
        if parsed is not None:
            return parsed
        return [value] if value else []
    if isinstance(value, Mapping):
        return [value]
    if isinstance(value, Iterable):
        return list(value)
    return [] if _is_zero(value) else [value]


def to_strs(value: Any) -> list[str]:
    """Convert ``value`` to a list of strings.

    Bytes holding a JSON array keep its string items and blank the rest;
    other bytes become the text of each byte value.  Text holding a JSON
    array of strings is decoded; other non-empty text is a single item.
    """
    if value is None:
        return []
    if isinstance(value, _BYTES_LIKE):
        data = bytes(value)
        parsed = _json_array(data)
        if parsed is not None:
            return [item if isinstance(item, str) else "" for item in parsed]
        return [to_str(byte) for byte in data]
    if isinstance(value, str):
        parsed = _json_array(value)
        if parsed is not None and all(
            item is None or isinstance(item, str) for item in parsed
        ):
            return ["" if item is None else item for item in parsed]
        return [value] if value else []
    if isinstance(value, Mapping):
        return [to_str(value)]
    if isinstance(value, Iterable):
        return [to_str(item) for item in value]
    return [] if _is_zero(value) else [to_str(value)]