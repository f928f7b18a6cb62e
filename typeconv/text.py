"""Conversion of arbitrary values to text and booleans, and JSON decoding."""

from __future__ import annotations

import base64
import dataclasses
import datetime
import json
import math
import struct
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

EMPTY_STRINGS = frozenset({"", "0", "no", "off", "false"})
"""Lower-cased strings that convert to ``False``."""

STRUCT_TAG_PRIORITY = ("gconv", "param", "params", "c", "p", "json")
"""Tags consulted, in order, when mapping dataclass fields to keys."""


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _shortest_float32(value: float) -> str:
    for precision in range(1, 10):
        text = f"{value:.{precision}g}"
        if _to_float32(float(text)) == value:
            return text
    return repr(value)


def format_float(value: float, bits: int = 64) -> str:
    """Format ``value`` in plain decimal notation with the fewest digits.

    ``bits`` is 32 or 64 and selects the precision whose shortest
    round-tripping representation is produced.
    """
    if bits not in (32, 64):
        raise ValueError(f"bits must be 32 or 64, got {bits}")
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if bits == 64:
        digits = repr(value)
    else:
        try:
            digits = _shortest_float32(_to_float32(value))
        except OverflowError:
            return "+Inf" if value > 0 else "-Inf"
    text = format(Decimal(digits), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _json_default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            spec.name: getattr(obj, spec.name)
            for spec in dataclasses.fields(obj)
            if not spec.name.startswith("_")
        }
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return base64.b64encode(bytes(obj)).decode("ascii")
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    if isinstance(obj, Decimal):
        return float(obj)
    if isinstance(obj, (datetime.date, datetime.time)):
        return obj.isoformat()
    raise TypeError(f"{type(obj).__name__} is not JSON serializable")


def _dump_json(value: Any) -> str:
    options = {
        "default": _json_default,
        "separators": (",", ":"),
        "ensure_ascii": False,
        "allow_nan": False,
    }
    try:
        return json.dumps(value, sort_keys=True, **options)
    except TypeError:
        return json.dumps(value, **options)


def _has_own_str(value: Any) -> bool:
    return type(value).__str__ is not object.__str__


def to_str(value: Any) -> str:
    """Convert ``value`` to a string.

    Numbers and booleans use their canonical text, bytes are decoded as
    UTF-8, objects with their own ``__str__`` use it, and containers and
    dataclasses are rendered as compact JSON.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, float):
        return format_float(value, 64)
    if isinstance(value, str):
        return str.__str__(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, (datetime.date, datetime.time)):
        return str(value)
    if _has_own_str(value):
        return str(value)
    try:
        return _dump_json(value)
    except (TypeError, ValueError):
        return str(value)


def to_bool(value: Any) -> bool:
    """Convert ``value`` to a bool.

    False for None, False, empty containers and the strings
    ``"", "0", "no", "off", "false"`` in any letter case.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="replace").lower() not in EMPTY_STRINGS
    if isinstance(value, str):
        return value.lower() not in EMPTY_STRINGS
    if isinstance(value, (Mapping, list, tuple, set, frozenset)):
        return len(value) != 0
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    return to_str(value).lower() not in EMPTY_STRINGS


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON literal: {name}")


def parse_json(data: str | bytes) -> Any:
    """Decode JSON text, keeping fractional numbers exact as Decimal.

    Raises ValueError for invalid JSON and TypeError for non-text input.
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        text = bytes(data).decode("utf-8")
    elif isinstance(data, str):
        text = data
    else:
        raise TypeError(f"JSON input must be str or bytes, not {type(data).__name__}")
    return json.loads(text, parse_float=Decimal, parse_constant=_reject_constant)