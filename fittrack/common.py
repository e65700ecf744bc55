"""Shared constants, error types and strict parsers for activity records."""

from __future__ import annotations

import re
from datetime import timedelta
from fractions import Fraction

STEP_LENGTH = 0.65  # average step length, metres
M_IN_KM = 1000  # metres in a kilometre
MIN_IN_H = 60  # minutes in an hour
STEP_LENGTH_COEFFICIENT = 0.45  # step length as a fraction of height
WALKING_CALORIES_COEFFICIENT = 0.5  # walking calories relative to running

_INT64_MAX = (1 << 63) - 1
_INT64_MIN = -(1 << 63)


class TrackerError(ValueError):
    """Base class for every error raised while handling activity data."""


class SliceLengthError(TrackerError):
    """A record has the wrong number of comma-separated fields."""


class ParamLimitExceededError(TrackerError):
    """A parameter lies outside its allowable range."""


class ParseDurationError(TrackerError):
    """A duration string could not be parsed."""


class ParseIntError(TrackerError):
    """An integer string could not be parsed."""


class EmptyStringError(TrackerError):
    """A required string field is empty."""


_INT_RE = re.compile(r"[+-]?[0-9]+")

_DURATION_COMPONENT = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")

_UNIT_NS = {
    "ns": 1,
    "us": 1_000,
    "\u00b5s": 1_000,  # micro sign
    "\u03bcs": 1_000,  # Greek small letter mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}


def parse_int(text: str) -> int:
    """Parse a base-10 signed 64-bit integer: optional sign and ASCII digits only."""
    if not _INT_RE.fullmatch(text):
        raise ParseIntError(f"invalid integer: {text!r}")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ParseIntError(f"integer out of range: {text!r}")
    return value


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as "1h30m", "1.5h" or "-300ms".

    Each component is a decimal number followed by one of the units
    ns, us (or µs), ms, s, m, h. A bare "0" is accepted without a unit.
    """
    rest = text
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    if rest == "0":
        return timedelta(0)
    if not rest:
        raise ParseDurationError(f"invalid duration: {text!r}")

    total = Fraction(0)
    pos = 0
    while pos < len(rest):
        match = _DURATION_COMPONENT.match(rest, pos)
        whole, frac, unit = match.groups()
        if not whole and not frac:
            raise ParseDurationError(f"invalid duration: {text!r}")
        if not unit:
            raise ParseDurationError(f"missing unit in duration: {text!r}")
        if unit not in _UNIT_NS:
            raise ParseDurationError(f"unknown unit {unit!r} in duration: {text!r}")
        value = Fraction(int(whole or "0"))
        if frac:
            value += Fraction(int(frac), 10 ** len(frac))
        total += value * _UNIT_NS[unit]
        pos = match.end()

    nanoseconds = int(total)
    limit = -_INT64_MIN if negative else _INT64_MAX
    if nanoseconds > limit:
        raise ParseDurationError(f"duration out of range: {text!r}")

    micro = timedelta(microseconds=nanoseconds // 1000)
    return -micro if negative else micro