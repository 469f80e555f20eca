"""
tzinstant.core.calendar
-----------------------
Pure, offset-parameterized conversions between epoch milliseconds and
proleptic Gregorian wall-clock fields. No zone lookup happens here: callers
pass the UTC offset in minutes.

Integer arithmetic throughout, so there is no year range limit.
"""

from __future__ import annotations

from typing import Tuple

from .types import WallClock, WeekStart

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR
MS_PER_WEEK = 7 * MS_PER_DAY

# JDN of 1970-01-01
JDN_UNIX_EPOCH = 2440588

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


# ============================================================
# Gregorian date <-> day count (Fliegel-Van Flandern)
# ============================================================

def to_jdn(year: int, month: int, day: int) -> int:
    """Gregorian (year, month 1..12, day) -> Julian Day Number."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def from_jdn(jdn: int) -> Tuple[int, int, int]:
    """Inverse of to_jdn: JDN -> (year, month 1..12, day)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def days_from_civil(year: int, month0: int, day: int) -> int:
    """Days since 1970-01-01 for a (year, 0-based month, day) triple, normalizing month overflow."""
    year += month0 // 12
    month0 %= 12
    return to_jdn(year, month0 + 1, 1) - JDN_UNIX_EPOCH + (day - 1)


def civil_from_days(days: int) -> Tuple[int, int, int]:
    """Days since 1970-01-01 -> (year, 0-based month, day)."""
    y, m, d = from_jdn(days + JDN_UNIX_EPOCH)
    return y, m - 1, d


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month0: int) -> int:
    year += month0 // 12
    month0 %= 12
    if month0 == 1 and is_leap_year(year):
        return 29
    return _MONTH_DAYS[month0]


# ============================================================
# Epoch <-> wall clock
# ============================================================

def wall_ms(
    year: int,
    month0: int,
    date: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> int:
    """
    Zone-local milliseconds since 1970-01-01T00:00 (local), with overflow
    normalization: month 12 is January of the next year, date 32 rolls into
    the next month, hour 24 into the next day and so on.
    """
    days = days_from_civil(year, month0, date)
    return (
        days * MS_PER_DAY
        + hour * MS_PER_HOUR
        + minute * MS_PER_MINUTE
        + second * MS_PER_SECOND
        + millisecond
    )


def wall_from_fields(f: WallClock) -> int:
    return wall_ms(f.year, f.month, f.date, f.hour, f.minute, f.second, f.millisecond)


def fields_from_wall(local_ms: int) -> WallClock:
    days, rem = divmod(local_ms, MS_PER_DAY)
    y, m0, d = civil_from_days(days)
    hour, rem = divmod(rem, MS_PER_HOUR)
    minute, rem = divmod(rem, MS_PER_MINUTE)
    second, ms = divmod(rem, MS_PER_SECOND)
    return WallClock(y, m0, d, hour, minute, second, ms)


def fields_from_epoch(epoch_ms: int, offset_minutes: int) -> WallClock:
    return fields_from_wall(epoch_ms + offset_minutes * MS_PER_MINUTE)


def epoch_from_fields(f: WallClock, offset_minutes: int) -> int:
    return wall_from_fields(f) - offset_minutes * MS_PER_MINUTE


def local_year(epoch_ms: int, offset_minutes: int) -> int:
    days = (epoch_ms + offset_minutes * MS_PER_MINUTE) // MS_PER_DAY
    return civil_from_days(days)[0]


# ============================================================
# Weekdays and week numbers
# ============================================================

def day_of_week(days: int) -> int:
    """0=Sunday..6=Saturday for a day count since 1970-01-01 (a Thursday)."""
    return (days + 4) % 7


def iso_weekday(days: int) -> int:
    """1=Monday..7=Sunday."""
    return day_of_week(days - 1) + 1


def week_position(days: int, week_start: WeekStart) -> int:
    """Offset of the day within its week: 0 on the configured first day."""
    return (day_of_week(days) - int(week_start)) % 7


def day_of_year(year: int, month0: int, date: int) -> int:
    """1-based ordinal day."""
    return days_from_civil(year, month0, date) - days_from_civil(year, 0, 1) + 1


def week_anchor(year: int, week_start: WeekStart) -> int:
    """
    Day count that week counting starts from: the week_start weekday of the
    Sunday-based week holding 1 January, moved on a week when that lands on
    28-31 December.
    """
    jan1 = days_from_civil(year, 0, 1)
    start = jan1 + int(week_start) - day_of_week(jan1)
    if jan1 - 4 <= start < jan1:
        start += 7
    return start
