"""Conversion of arbitrary values to durations and date-times."""

from __future__ import annotations

import datetime
import re
from fractions import Fraction
from typing import Any

from dateutil import parser as _date_parser

from .numbers import to_int64
from .text import to_str

_UNIT_NS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,
    "μs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}
_COMPONENT = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]+)")
_NUMERIC = re.compile(r"[-+]?[0-9]+(?:\.[0-9]+)?")
_MAX_NS = (1 << 63) - 1


def _is_numeric(text: str) -> bool:
    return _NUMERIC.fullmatch(text) is not None


def _ns_to_timedelta(nanoseconds: int) -> datetime.timedelta:
    delta = datetime.timedelta(microseconds=abs(nanoseconds) // 1000)
    return -delta if nanoseconds < 0 else delta


def parse_duration(text: str) -> datetime.timedelta:
    """Parse a duration such as ``"1h30m"``, ``"1.5s"`` or ``"-300ms"``.

    Units are ns, us (or µs), ms, s, m and h.  The result has
    microsecond precision.  Raises ValueError for malformed text.
    """
    body = text
    negative = False
    if body and body[0] in "+-":
        negative = body[0] == "-"
        body = body[1:]
    if body == "0":
        return datetime.timedelta(0)
    if not body:
        raise ValueError(f'time: invalid duration "{text}"')
    total = Fraction(0)
    pos = 0
    while pos < len(body):
        match = _COMPONENT.match(body, pos)
        if match is None or not (match.group(1) or match.group(2)):
            raise ValueError(f'time: invalid duration "{text}"')
        whole, fraction, unit = match.groups()
        if unit not in _UNIT_NS:
            raise ValueError(f'time: unknown unit "{unit}" in duration "{text}"')
        amount = Fraction(int(whole or "0"))
        if fraction:
            amount += Fraction(int(fraction), 10 ** len(fraction))
        total += amount * _UNIT_NS[unit]
        pos = match.end()
    nanoseconds = int(total)
    if nanoseconds > _MAX_NS:
        raise ValueError(f'time: invalid duration "{text}"')
    return _ns_to_timedelta(-nanoseconds if negative else nanoseconds)


def to_duration(value: Any) -> datetime.timedelta:
    """Convert ``value`` to a timedelta.

    Numeric values are taken as nanoseconds; other text is parsed with
    :func:`parse_duration`, and unparsable text gives a zero duration.
    """
    if isinstance(value, datetime.timedelta):
        return value
    text = to_str(value)
    if not _is_numeric(text):
        try:
            return parse_duration(text)
        except ValueError:
            return datetime.timedelta(0)
    return _ns_to_timedelta(to_int64(value))


def to_time(value: Any, fmt: str | None = None) -> datetime.datetime | None:
    """Convert ``value`` to a datetime, or None if it cannot be converted.

    With ``fmt`` the text form of ``value`` is parsed by ``strptime``.
    Without it a datetime is returned as is, numeric values are Unix
    timestamps in seconds (UTC), and other text is parsed leniently.
    """
    if value is None:
        return None
    if fmt is None and isinstance(value, datetime.datetime):
        return value
    text = to_str(value)
    if not text:
        return None
    if fmt is not None:
        try:
            return datetime.datetime.strptime(text, fmt)
        except ValueError:
            return None
    if _is_numeric(text):
        try:
            return datetime.datetime.fromtimestamp(
                to_int64(text), tz=datetime.timezone.utc
            )
        except (OverflowError, OSError, ValueError):
            return None
    try:
        return _date_parser.parse(text)
    except (ValueError, OverflowError):
        return None