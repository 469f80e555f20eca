"""
tzinstant.engines.truncate
--------------------------
Truncation Engine ("start of"): floor an Instant to the first moment of the
containing unit, in its own zone. Never fails.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Callable, Dict, Tuple, Union

from ..core import calendar as cal
from ..core.types import Unit, WallClock
from ._wall import wall_fields, with_epoch, with_wall
from .arithmetic import FIXED_MS

if TYPE_CHECKING:
    from ..instant import Instant

Floor = Callable[[WallClock, "Instant"], WallClock]

QUARTER_START_MONTHS = (0, 3, 6, 9)
# Meteorological seasons: spring=Mar, summer=Jun, autumn=Sep, winter=Dec.
SEASON_START_MONTHS = (2, 5, 8, 11)


def _midnight(f: WallClock) -> WallClock:
    return replace(f, hour=0, minute=0, second=0, millisecond=0)


def quarter_start_month(month0: int) -> int:
    return (month0 // 3) * 3


def season_start(year: int, month0: int) -> Tuple[int, int]:
    """(year, month0) of the season containing the month; Jan/Feb belong to the previous December."""
    m = ((month0 - 2) % 12) // 3 * 3 + 2
    if m > month0:
        return year - 1, m
    return year, m


def _floor_week(f: WallClock, inst: "Instant") -> WallClock:
    days = cal.days_from_civil(f.year, f.month, f.date)
    pos = cal.week_position(days, inst.config.week_start)
    return _midnight(replace(f, date=f.date - pos))


def _floor_season(f: WallClock, inst: "Instant") -> WallClock:
    year, month = season_start(f.year, f.month)
    return WallClock(year, month, 1)


_FLOORS: Dict[Unit, Floor] = {
    Unit.MILLISECOND: lambda f, inst: f,
    Unit.SECOND: lambda f, inst: replace(f, millisecond=0),
    Unit.MINUTE: lambda f, inst: replace(f, second=0, millisecond=0),
    Unit.QUARTERHOUR: lambda f, inst: replace(f, minute=f.minute - f.minute % 15, second=0, millisecond=0),
    Unit.HOUR: lambda f, inst: replace(f, minute=0, second=0, millisecond=0),
    Unit.DAY: lambda f, inst: _midnight(f),
    Unit.WEEK: _floor_week,
    Unit.MONTH: lambda f, inst: WallClock(f.year, f.month, 1),
    Unit.QUARTER: lambda f, inst: WallClock(f.year, quarter_start_month(f.month), 1),
    Unit.SEASON: _floor_season,
    Unit.YEAR: lambda f, inst: WallClock(f.year, 0, 1),
    Unit.DECADE: lambda f, inst: WallClock(f.year - f.year % 10, 0, 1),
    Unit.CENTURY: lambda f, inst: WallClock(f.year - f.year % 100, 0, 1),
}

_missing = set(Unit) - set(_FLOORS)
if _missing:
    raise RuntimeError(f"No floor for units: {sorted(u.value for u in _missing)}")


def start_of(inst: "Instant", unit: Union[Unit, str]) -> "Instant":
    u = Unit.parse(unit)
    if u is Unit.MILLISECOND:
        return inst
    floor = _FLOORS[u](wall_fields(inst), inst)
    out = with_wall(inst, floor)
    if out.epoch_ms > inst.epoch_ms:
        # Ambiguous fall-back wall time read as the later instant.
        out = with_wall(inst, floor, earlier=True)
    return out


# Start of the following unit, on the wall clock, for units of a day or more.
_NEXT: Dict[Unit, Callable[[WallClock], WallClock]] = {
    Unit.DAY: lambda f: replace(f, date=f.date + 1),
    Unit.WEEK: lambda f: replace(f, date=f.date + 7),
    Unit.MONTH: lambda f: replace(f, month=f.month + 1),
    Unit.QUARTER: lambda f: replace(f, month=f.month + 3),
    Unit.SEASON: lambda f: replace(f, month=f.month + 3),
    Unit.YEAR: lambda f: replace(f, year=f.year + 1),
    Unit.DECADE: lambda f: replace(f, year=f.year + 10),
    Unit.CENTURY: lambda f: replace(f, year=f.year + 100),
}


def end_of(inst: "Instant", unit: Union[Unit, str]) -> "Instant":
    """Last millisecond of the containing unit."""
    u = Unit.parse(unit)
    if u is Unit.MILLISECOND:
        return inst
    if u in FIXED_MS:
        start = start_of(inst, u)
        return with_epoch(start, start.epoch_ms + FIXED_MS[u] - 1)
    floor = _FLOORS[u](wall_fields(inst), inst)
    nxt = with_wall(inst, _NEXT[u](floor), earlier=True)
    return with_epoch(inst, nxt.epoch_ms - 1)
