"""Millisecond timestamps and durations with a compact text form."""

from __future__ import annotations

import json
import math
import re
import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import yaml

from promkit.labels import _quote

NANOS_PER_TICK = 1_000_000
SECOND = 1000
_DOT_PRECISION = 3

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_INT_RE = re.compile(r"[+-]?[0-9]+\Z")

_MS_PER_YEAR = 1000 * 60 * 60 * 24 * 365
_MS_PER_WEEK = 1000 * 60 * 60 * 24 * 7
_MS_PER_DAY = 1000 * 60 * 60 * 24
_MS_PER_HOUR = 1000 * 60 * 60
_MS_PER_MINUTE = 1000 * 60
_MS_PER_SECOND = 1000

_DURATION_RE = re.compile(
    r"(([0-9]+)y)?(([0-9]+)w)?(([0-9]+)d)?(([0-9]+)h)?(([0-9]+)m)?(([0-9]+)s)?(([0-9]+)ms)?"
)
# Regex group holding the digits of each unit, with the unit's size in ms.
_PARSE_UNITS = (
    (2, _MS_PER_YEAR),
    (4, _MS_PER_WEEK),
    (6, _MS_PER_DAY),
    (8, _MS_PER_HOUR),
    (10, _MS_PER_MINUTE),
    (12, _MS_PER_SECOND),
    (14, 1),
)
# Years and weeks are only used when they divide the remainder exactly.
_FORMAT_UNITS = (
    ("y", _MS_PER_YEAR, True),
    ("w", _MS_PER_WEEK, True),
    ("d", _MS_PER_DAY, False),
    ("h", _MS_PER_HOUR, False),
    ("m", _MS_PER_MINUTE, False),
    ("s", _MS_PER_SECOND, False),
    ("ms", 1, False),
)


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _format_float(x: float) -> str:
    """Shortest decimal representation of ``x`` without an exponent."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    s = format(Decimal(repr(x)), "f")
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _parse_int(s: str, bits: int) -> int:
    if not _INT_RE.match(s):
        raise ValueError(f"invalid syntax: {_quote(s)}")
    value = int(s)
    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        raise ValueError(f"value out of range: {_quote(s)}")
    return value


def _to_nanos(d: timedelta | int) -> int:
    if isinstance(d, timedelta):
        return (d // timedelta(microseconds=1)) * 1000
    return int(d)


class Time(int):
    """Milliseconds since the Unix epoch, excluding leap seconds."""

    def __new__(cls, value: int = 0) -> "Time":
        t = super().__new__(cls, value)
        if not _INT64_MIN <= t <= _INT64_MAX:
            raise OverflowError(f"time out of range: {int(value)}")
        return t

    def __repr__(self) -> str:
        return f"Time({int(self)})"

    @classmethod
    def now(cls) -> "Time":
        """Return the current time."""
        return cls.from_unix_nano(time.time_ns())

    @classmethod
    def from_unix(cls, t: int) -> "Time":
        """Return the Time for ``t`` seconds since the epoch."""
        return cls(t * SECOND)

    @classmethod
    def from_unix_nano(cls, t: int) -> "Time":
        """Return the Time for ``t`` nanoseconds since the epoch."""
        return cls(_trunc_div(t, NANOS_PER_TICK))

    def equal(self, other: int) -> bool:
        """Return True if both times are the same instant."""
        return int(self) == int(other)

    def before(self, other: int) -> bool:
        """Return True if this time is before ``other``."""
        return int(self) < int(other)

    def after(self, other: int) -> bool:
        """Return True if this time is after ``other``."""
        return int(self) > int(other)

    def add(self, d: timedelta | int) -> "Time":
        """Return this time plus ``d`` (a timedelta or nanoseconds)."""
        return Time(int(self) + _trunc_div(_to_nanos(d), NANOS_PER_TICK))

    def sub(self, other: int) -> timedelta:
        """Return the span from ``other`` to this time."""
        return timedelta(milliseconds=int(self) - int(other))

    def to_datetime(self) -> datetime:
        """Return the time as an aware UTC datetime."""
        return _EPOCH + timedelta(milliseconds=int(self))

    def unix(self) -> int:
        """Return the time as whole seconds since the epoch."""
        return _trunc_div(int(self), SECOND)

    def unix_nano(self) -> int:
        """Return the time as nanoseconds since the epoch."""
        return int(self) * NANOS_PER_TICK

    def __str__(self) -> str:
        return _format_float(float(int(self)) / float(SECOND))

    def to_json(self) -> str:
        """Encode as a JSON number of seconds."""
        return str(self)

    @classmethod
    def from_json(cls, text: str | bytes) -> "Time":
        """Decode a JSON number of seconds with up to millisecond precision."""
        if isinstance(text, bytes):
            text = text.decode("utf-8")
        parts = text.split(".")
        if len(parts) == 1:
            return cls(_parse_int(parts[0], 64) * SECOND)
        if len(parts) == 2:
            whole = _parse_int(parts[0], 64) * SECOND
            frac = parts[1]
            missing = _DOT_PRECISION - len(frac)
            if missing < 0:
                frac = frac[:_DOT_PRECISION]
            elif missing > 0:
                frac += "0" * missing
            millis = _parse_int(frac, 32)
            # A value like -0.1 loses its sign in the integer part.
            if parts[0].startswith("-") and whole + millis > 0:
                return cls(-(whole + millis))
            return cls(whole + millis)
        raise ValueError(f"invalid time {_quote(text)}")


EARLIEST = Time(_INT64_MIN)
LATEST = Time(_INT64_MAX)


@dataclass(frozen=True)
class Interval:
    """The span between two timestamps."""

    start: Time
    end: Time


class Duration(int):
    """A span of time in nanoseconds, written like ``1d2h30m``."""

    def __repr__(self) -> str:
        return f"Duration({int(self)})"

    def __str__(self) -> str:
        ms = _trunc_div(int(self), NANOS_PER_TICK)
        if ms == 0:
            return "0s"
        out = []
        for unit, mult, exact in _FORMAT_UNITS:
            if exact and ms % mult != 0:
                continue
            value = _trunc_div(ms, mult)
            if value > 0:
                out.append(f"{value}{unit}")
                ms -= value * mult
        return "".join(out)

    def to_timedelta(self) -> timedelta:
        """Return the duration as a timedelta."""
        return timedelta(microseconds=_trunc_div(int(self), 1000))

    def to_json(self) -> str:
        """Encode as a JSON string."""
        return json.dumps(str(self))

    @classmethod
    def from_json(cls, text: str | bytes) -> "Duration":
        """Decode a JSON string holding a duration."""
        value = json.loads(text)
        if not isinstance(value, str):
            raise ValueError("duration must be a JSON string")
        return parse_duration(value)

    @classmethod
    def from_yaml(cls, text: str | bytes) -> "Duration":
        """Decode a YAML scalar holding a duration."""
        value = yaml.load(text, Loader=yaml.BaseLoader)
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise ValueError("duration must be a YAML scalar")
        return parse_duration(value)


def parse_duration(s: str) -> Duration:
    """Parse a duration such as ``1w2d3h``.

    A year is 365 days, a week 7 days and a day 24 hours.
    """
    if s == "0":
        return Duration(0)
    if s == "":
        raise ValueError("empty duration string")
    match = _DURATION_RE.fullmatch(s)
    if match is None:
        raise ValueError(f"not a valid duration string: {_quote(s)}")
    total = 0
    out_of_range = False
    for group, mult in _PARSE_UNITS:
        digits = match.group(group)
        if not digits:
            continue
        n = int(digits)
        if n > _INT64_MAX // mult // NANOS_PER_TICK:
            out_of_range = True
        total += n * NANOS_PER_TICK * mult
        if total > _INT64_MAX:
            out_of_range = True
    if out_of_range:
        raise ValueError("duration out of range")
    return Duration(total)