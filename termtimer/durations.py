"""Duration strings for termtimer.

Durations are written as a sequence of decimal numbers, each with an
optional fraction and a unit suffix, such as "90s", "1.5h" or "2h30m15s".
Valid units are "ns", "us" (or "µs"), "ms", "s", "m", "h".
"""

from __future__ import annotations

import re
from datetime import timedelta

_NANOSECOND = 1
_MICROSECOND = 1_000 * _NANOSECOND
_MILLISECOND = 1_000 * _MICROSECOND
_SECOND = 1_000 * _MILLISECOND
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE

_UNITS = {
    "ns": _NANOSECOND,
    "us": _MICROSECOND,
    "µs": _MICROSECOND,  # micro sign
    "μs": _MICROSECOND,  # greek small letter mu
    "ms": _MILLISECOND,
    "s": _SECOND,
    "m": _MINUTE,
    "h": _HOUR,
}

# A unit runs until the next digit or decimal point.
_COMPONENT = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")

# Longer digit runs overflow timedelta for every unit; fraction digits
# past this count are below nanosecond precision for every unit.
_MAX_WHOLE_DIGITS = 24
_MAX_FRAC_DIGITS = 18

_US_PER_SECOND = 1_000_000
_US_PER_MINUTE = 60 * _US_PER_SECOND


class DurationError(ValueError):
    """Raised when a duration string cannot be parsed."""


def parse_duration(text: str) -> timedelta:
    """Parse a duration string such as "2h30m15s" into a timedelta.

    The value is accumulated in whole nanoseconds and rounded to the
    nearest microsecond, the resolution of timedelta.
    """
    s = text
    negative = False
    if s[:1] in ("-", "+"):
        negative = s[0] == "-"
        s = s[1:]
    if s == "0":
        return timedelta(0)
    if not s:
        raise DurationError(f"invalid duration {text!r}")

    nanos = 0
    pos = 0
    while pos < len(s):
        match = _COMPONENT.match(s, pos)
        whole, frac, unit = match.groups()
        if not whole and not frac:
            raise DurationError(f"invalid duration {text!r}")
        if not unit:
            raise DurationError(f"missing unit in duration {text!r}")
        scale = _UNITS.get(unit)
        if scale is None:
            raise DurationError(f"unknown unit {unit!r} in duration {text!r}")
        whole = whole.lstrip("0")
        if len(whole) > _MAX_WHOLE_DIGITS:
            raise DurationError(f"duration out of range {text!r}")
        if whole:
            nanos += int(whole) * scale
        if frac:
            frac = frac[:_MAX_FRAC_DIGITS]
            nanos += int(frac) * scale // 10 ** len(frac)
        pos = match.end()

    micros = (nanos + 500) // 1000
    try:
        return timedelta(microseconds=-micros if negative else micros)
    except OverflowError:
        raise DurationError(f"duration out of range {text!r}") from None


def _decimal(value: int, digits: int) -> str:
    """Render value / 10**digits without trailing fractional zeros."""
    whole, frac = divmod(value, 10 ** digits)
    if not frac:
        return str(whole)
    return f"{whole}.{frac:0{digits}d}".rstrip("0")


def total_microseconds(d: timedelta) -> int:
    """Exact length of a timedelta in microseconds."""
    return (d.days * 86_400 + d.seconds) * _US_PER_SECOND + d.microseconds


def format_duration(d: timedelta) -> str:
    """Render a timedelta as a compact string, e.g. "25m0s" or "500ms".

    Leading zero units are omitted; values under one second use a
    smaller unit so the output never starts with "0.".
    """
    us = total_microseconds(d)
    if us == 0:
        return "0s"
    sign = "-" if us < 0 else ""
    us = abs(us)

    if us < _US_PER_SECOND:
        if us < 1000:
            return f"{sign}{us}µs"
        return f"{sign}{_decimal(us, 3)}ms"

    text = f"{_decimal(us % _US_PER_MINUTE, 6)}s"
    minutes = us // _US_PER_MINUTE
    if minutes:
        text = f"{minutes % 60}m{text}"
        hours = minutes // 60
        if hours:
            text = f"{hours}h{text}"
    return sign + text
