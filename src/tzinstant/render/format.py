"""
tzinstant.render.format
-----------------------
String rendering of zone-local fields, plus the English month/season name
tables shared with the setters.
"""

from __future__ import annotations

from typing import Callable, Dict, Tuple

from ..core.errors import InvalidField
from ..core.types import DateOrder, Hemisphere, WallClock

MONTH_NAMES: Tuple[str, ...] = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)
DAY_NAMES: Tuple[str, ...] = (
    "sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday",
)

# Indexed by season slot: 0 starts in March, 1 June, 2 September, 3 December.
SEASON_NAMES: Dict[str, Tuple[str, ...]] = {
    "North": ("spring", "summer", "autumn", "winter"),
    "South": ("autumn", "winter", "spring", "summer"),
}
SEASON_ALIASES = {"fall": "autumn"}


# ============================================================
# Name tables
# ============================================================

def month_name(month0: int) -> str:
    return MONTH_NAMES[month0 % 12]


def month_index(name: str) -> int:
    """'october' / 'Oct' -> 9."""
    key = str(name).strip().lower().rstrip(".")
    for i, full in enumerate(MONTH_NAMES):
        if key == full or (len(key) >= 3 and full.startswith(key)):
            return i
    raise InvalidField(f"Unknown month name '{name}'")


def season_slot(month0: int) -> int:
    return ((month0 - 2) % 12) // 3


def season_name(month0: int, hemisphere: Hemisphere = "North") -> str:
    return SEASON_NAMES[hemisphere][season_slot(month0)]


def season_month(name: str, hemisphere: Hemisphere = "North") -> int:
    """First month (0-based) of the named season in `hemisphere`."""
    key = str(name).strip().lower()
    key = SEASON_ALIASES.get(key, key)
    names = SEASON_NAMES[hemisphere]
    if key not in names:
        raise InvalidField(f"Unknown season '{name}'. Available: {sorted(names)}")
    return names.index(key) * 3 + 2


def ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


# ============================================================
# Renderers
# ============================================================

def time_12h(f: WallClock, *, minutes: bool = True) -> str:
    """'8:00pm'; with minutes=False, '8pm'."""
    h = f.hour % 12 or 12
    ampm = "am" if f.hour < 12 else "pm"
    if not minutes:
        return f"{h}{ampm}"
    return f"{h}:{f.minute:02d}{ampm}"


def time_24h(f: WallClock) -> str:
    return f"{f.hour:02d}:{f.minute:02d}"


def iso_date(f: WallClock) -> str:
    return f"{f.year:04d}-{f.month + 1:02d}-{f.date:02d}"


def offset_string(offset_minutes: int) -> str:
    sign = "+" if offset_minutes >= 0 else "-"
    h, m = divmod(abs(offset_minutes), 60)
    return f"{sign}{h:02d}:{m:02d}"


def iso(f: WallClock, offset_minutes: int) -> str:
    return (
        f"{iso_date(f)}T{f.hour:02d}:{f.minute:02d}:{f.second:02d}.{f.millisecond:03d}"
        f"{offset_string(offset_minutes)}"
    )


def numeric(f: WallClock, order: DateOrder) -> str:
    if order is DateOrder.DAY_MONTH_YEAR:
        return f"{f.date}/{f.month + 1}/{f.year}"
    return f"{f.month + 1}/{f.date}/{f.year}"


def nice(f: WallClock) -> str:
    """'Oct 30th, 8:00pm'."""
    return f"{month_name(f.month)[:3].title()} {ordinal(f.date)}, {time_12h(f)}"


Renderer = Callable[[WallClock, int, DateOrder], str]

FORMATS: Dict[str, Renderer] = {
    "iso-short": lambda f, off, order: iso_date(f),
    "iso": lambda f, off, order: iso(f, off),
    "time": lambda f, off, order: time_12h(f),
    "time-h": lambda f, off, order: time_12h(f, minutes=False),
    "time-24": lambda f, off, order: time_24h(f),
    "numeric": lambda f, off, order: numeric(f, order),
    "nice": lambda f, off, order: nice(f),
    "month-name": lambda f, off, order: month_name(f.month),
}

DEFAULT_FORMAT = "iso-short"


def render(f: WallClock, variant: str, *, offset: int, order: DateOrder) -> str:
    key = (variant or DEFAULT_FORMAT).strip().lower()
    if key not in FORMATS:
        raise InvalidField(f"Unknown format '{variant}'. Available: {sorted(FORMATS)}")
    return FORMATS[key](f, offset, order)
