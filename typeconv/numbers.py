"""Conversion of arbitrary values to fixed-width integers, floats and bytes.

Integer results wrap around to the requested width the way a two's
complement cast does.  Text is parsed as a decimal integer, a ``0x``
hexadecimal integer or, failing both, a float that is then truncated.
Values that cannot be parsed convert to zero.
"""

from __future__ import annotations

import math
import operator
import re
import struct
from typing import Any

from .text import to_str

_SIGNED_DIGITS = {
    10: re.compile(r"[+-]?[0-9]+"),
    16: re.compile(r"[+-]?[0-9a-fA-F]+"),
}
_UNSIGNED_DIGITS = {
    10: re.compile(r"[0-9]+"),
    16: re.compile(r"[0-9a-fA-F]+"),
}
_DECIMAL_FLOAT = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_HEX_FLOAT = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_BYTES_LIKE = (bytes, bytearray, memoryview)

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_UINT64_MAX = (1 << 64) - 1


def _wrap_signed(number: int, bits: int) -> int:
    span = 1 << bits
    number %= span
    return number - span if number >= span >> 1 else number


def _wrap_unsigned(number: int, bits: int) -> int:
    return number % (1 << bits)


def _float_to_int64(value: float) -> int:
    if not math.isfinite(value):
        return 0
    return _wrap_signed(int(value), 64)


def _float_to_uint64(value: float) -> int:
    if not math.isfinite(value):
        return 0
    return _wrap_unsigned(int(value), 64)


def _parse_signed(text: str, base: int) -> int | None:
    if not _SIGNED_DIGITS[base].fullmatch(text):
        return None
    number = int(text, base)
    return number if _INT64_MIN <= number <= _INT64_MAX else None


def _parse_unsigned(text: str, base: int) -> int | None:
    if not _UNSIGNED_DIGITS[base].fullmatch(text):
        return None
    number = int(text, base)
    return number if number <= _UINT64_MAX else None


def _parse_float(text: str) -> float:
    if _DECIMAL_FLOAT.fullmatch(text):
        return float(text)
    if _HEX_FLOAT.fullmatch(text):
        return float.fromhex(text)
    return 0.0


def _round_float32(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _has_index(value: Any) -> bool:
    return not isinstance(value, (str, *_BYTES_LIKE)) and hasattr(type(value), "__index__")


def _is_hex(text: str) -> bool:
    return len(text) > 2 and text[0] == "0" and text[1] in "xX"


def to_int64(value: Any) -> int:
    """Convert ``value`` to a signed 64-bit integer."""
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return _wrap_signed(value, 64)
    if isinstance(value, float):
        return _float_to_int64(value)
    if _has_index(value):
        return _wrap_signed(operator.index(value), 64)
    text = to_str(value)
    negative = False
    if text[:1] == "-":
        negative, text = True, text[1:]
    elif text[:1] == "+":
        text = text[1:]
    parsed = _parse_signed(text[2:], 16) if _is_hex(text) else None
    if parsed is None:
        parsed = _parse_signed(text, 10)
    if parsed is not None:
        return _wrap_signed(-parsed, 64) if negative else parsed
    return _float_to_int64(to_float64(value))


def to_int(value: Any) -> int:
    """Convert ``value`` to a platform integer (64 bits)."""
    return to_int64(value)


def to_int8(value: Any) -> int:
    """Convert ``value`` to a signed 8-bit integer."""
    return _wrap_signed(to_int64(value), 8)


def to_int16(value: Any) -> int:
    """Convert ``value`` to a signed 16-bit integer."""
    return _wrap_signed(to_int64(value), 16)


def to_int32(value: Any) -> int:
    """Convert ``value`` to a signed 32-bit integer."""
    return _wrap_signed(to_int64(value), 32)


def to_uint64(value: Any) -> int:
    """Convert ``value`` to an unsigned 64-bit integer."""
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return _wrap_unsigned(value, 64)
    if isinstance(value, float):
        return _float_to_uint64(value)
    if _has_index(value):
        return _wrap_unsigned(operator.index(value), 64)
    text = to_str(value)
    parsed = _parse_unsigned(text[2:], 16) if _is_hex(text) else None
    if parsed is None:
        parsed = _parse_unsigned(text, 10)
    if parsed is not None:
        return parsed
    return _float_to_uint64(to_float64(value))


def to_uint(value: Any) -> int:
    """Convert ``value`` to a platform unsigned integer (64 bits)."""
    return to_uint64(value)


def to_uint8(value: Any) -> int:
    """Convert ``value`` to an unsigned 8-bit integer."""
    return _wrap_unsigned(to_uint64(value), 8)


def to_uint16(value: Any) -> int:
    """Convert ``value`` to an unsigned 16-bit integer."""
    return _wrap_unsigned(to_uint64(value), 16)


def to_uint32(value: Any) -> int:
    """Convert ``value`` to an unsigned 32-bit integer."""
    return _wrap_unsigned(to_uint64(value), 32)


def to_float64(value: Any) -> float:
    """Convert ``value`` to a double-precision float.

    Only floats and objects defining ``__float__`` are taken as numbers
    directly; everything else goes through its text form, so text that
    is not a number (including ``"true"``) gives ``0.0``.
    """
    if value is None:
        return 0.0
    if isinstance(value, float):
        return float(value)
    if not isinstance(value, (bool, int, str, *_BYTES_LIKE)) and hasattr(
        type(value), "__float__"
    ):
        return float(value)
    return _parse_float(to_str(value))


def to_float32(value: Any) -> float:
    """Convert ``value`` to a float rounded to single precision."""
    return _round_float32(to_float64(value))


def to_byte(value: Any) -> int:
    """Convert ``value`` to a byte value."""
    return to_uint8(value)


def to_rune(value: Any) -> int:
    """Convert ``value`` to a code point (signed 32-bit integer)."""
    return to_int32(value)


def to_bytes(value: Any) -> bytes:
    """Convert ``value`` to bytes.

    Text is UTF-8 encoded; a list or tuple whose items all convert to
    0..255 becomes those bytes; anything else is its text form encoded.
    """
    if value is None:
        return b""
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, _BYTES_LIKE):
        return bytes(value)
    if hasattr(type(value), "__bytes__"):
        return bytes(value)
    if isinstance(value, (list, tuple)):
        codes = [to_int32(item) for item in value]
        if all(0 <= code <= 0xFF for code in codes):
            return bytes(codes)
    return to_str(value).encode("utf-8")


def to_runes(value: Any) -> list[int]:
    """Convert ``value`` to a list of code points."""
    if isinstance(value, list) and all(
        isinstance(item, int) and not isinstance(item, bool) for item in value
    ):
        return list(value)
    return [ord(char) for char in to_str(value)]