"""
tzinstant.render.parse
----------------------
Small fixed grammars: time literals for with_time(), and a handful of date
layouts accepted at construction. No free-text parsing.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from ..core import calendar as cal
from ..core.errors import InvalidEpoch, UnparseableTime
from ..core.types import DateOrder, WallClock
from .format import month_index

_TIME_12H = re.compile(r"^(\d{1,2})(?::(\d{2}))?\s*(am|pm)$")
_TIME_24H = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")

_ISO = re.compile(
    r"^(-?\d{4})-(\d{1,2})-(\d{1,2})"
    r"(?:[t ](\d{1,2}):(\d{2})(?::(\d{2})(?:\.(\d{1,3}))?)?)?$"
)
_NUMERIC = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})(?:\s+(.+))?$")
_MONTH_FIRST = re.compile(r"^([a-z]+)\.?\s+(\d{1,2})(?:st|nd|rd|th)?,?\s+(\d{4})(?:,?\s+(.+))?$")
_DAY_FIRST = re.compile(r"^(\d{1,2})(?:st|nd|rd|th)?\s+([a-z]+)\.?,?\s+(\d{4})(?:,?\s+(.+))?$")


def parse_time(text: str) -> Tuple[int, int, Optional[int]]:
    """
    "4pm", "4:30pm" (am/pm required for 12-hour), "16:30" or "16:30:15".
    Returns (hour, minute, second-or-None).
    """
    if not isinstance(text, str):
        raise UnparseableTime(text)
    s = text.strip().lower()

    m = _TIME_12H.match(s)
    if m:
        hour = int(m.group(1))
        minute = int(m.group(2) or 0)
        if not (1 <= hour <= 12) or minute > 59:
            raise UnparseableTime(text)
        hour %= 12
        if m.group(3) == "pm":
            hour += 12
        return hour, minute, None

    m = _TIME_24H.match(s)
    if m:
        hour, minute = int(m.group(1)), int(m.group(2))
        second = int(m.group(3)) if m.group(3) is not None else None
        if hour > 23 or minute > 59 or (second is not None and second > 59):
            raise UnparseableTime(text)
        return hour, minute, second

    raise UnparseableTime(text)


def _checked(text: str, year: int, month0: int, date: int) -> None:
    if not (0 <= month0 <= 11) or not (1 <= date <= cal.days_in_month(year, month0)):
        raise InvalidEpoch(f"Date out of range in '{text}'")


def _with_time(text: str, f: WallClock, rest: Optional[str]) -> WallClock:
    if not rest:
        return f
    try:
        hour, minute, second = parse_time(rest)
    except UnparseableTime as e:
        raise InvalidEpoch(f"Cannot parse time part of '{text}'") from e
    return WallClock(f.year, f.month, f.date, hour, minute, second or 0)


def parse_date(text: str, order: DateOrder = DateOrder.MONTH_DAY_YEAR) -> WallClock:
    """
    Zone-local fields from one of:
      2023-10-31, 2023-10-31T09:00[:00[.000]], 10/31/2023 (or 31/10/2023 with
      DAY_MONTH_YEAR), October 31, 2023 [time], 31 October 2023 [time].
    Raises InvalidEpoch when nothing matches.
    """
    if not isinstance(text, str):
        raise InvalidEpoch(f"Cannot parse date from {type(text).__name__}")
    s = " ".join(text.strip().lower().split())

    m = _ISO.match(s)
    if m:
        y, mo, d = int(m.group(1)), int(m.group(2)) - 1, int(m.group(3))
        _checked(text, y, mo, d)
        hour = int(m.group(4) or 0)
        minute = int(m.group(5) or 0)
        second = int(m.group(6) or 0)
        ms = int((m.group(7) or "0").ljust(3, "0"))
        if hour > 23 or minute > 59 or second > 59:
            raise InvalidEpoch(f"Time out of range in '{text}'")
        return WallClock(y, mo, d, hour, minute, second, ms)

    m = _NUMERIC.match(s)
    if m:
        a, b, y = int(m.group(1)), int(m.group(2)), int(m.group(3))
        mo, d = (b - 1, a) if order is DateOrder.DAY_MONTH_YEAR else (a - 1, b)
        _checked(text, y, mo, d)
        return _with_time(text, WallClock(y, mo, d), m.group(4))

    for pattern, month_group, day_group in ((_MONTH_FIRST, 1, 2), (_DAY_FIRST, 2, 1)):
        m = pattern.match(s)
        if not m:
            continue
        try:
            mo = month_index(m.group(month_group))
        except ValueError:
            continue
        y, d = int(m.group(3)), int(m.group(day_group))
        _checked(text, y, mo, d)
        return _with_time(text, WallClock(y, mo, d), m.group(4))

    raise InvalidEpoch(f"Cannot parse date '{text}'")
