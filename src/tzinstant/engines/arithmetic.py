"""
tzinstant.engines.arithmetic
----------------------------
Arithmetic Engine: add a signed count of calendar units to an Instant.

Millisecond through year are linear: the count times the unit's length is
added to the epoch and the offset is re-resolved from the result, so these
adds invert exactly. A day is 24 hours, a week 7 days and a year 365 days;
decade and century go through the year length. Month, quarter and season
move the zone-local wall clock, keep the time of day and clamp the day of
month; those do not always invert.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Callable, Dict, Union

from ..core import calendar as cal
from ..core.types import Unit
from ._wall import clamp_date, wall_fields, with_epoch, with_wall

if TYPE_CHECKING:
    from ..instant import Instant

Number = Union[int, float]
Adder = Callable[["Instant", Number], "Instant"]

# Sub-day units.
FIXED_MS: Dict[Unit, int] = {
    Unit.MILLISECOND: 1,
    Unit.SECOND: cal.MS_PER_SECOND,
    Unit.MINUTE: cal.MS_PER_MINUTE,
    Unit.QUARTERHOUR: 15 * cal.MS_PER_MINUTE,
    Unit.HOUR: cal.MS_PER_HOUR,
}

MS_PER_YEAR = 365 * cal.MS_PER_DAY

LINEAR_MS: Dict[Unit, int] = {
    **FIXED_MS,
    Unit.DAY: cal.MS_PER_DAY,
    Unit.WEEK: 7 * cal.MS_PER_DAY,
    Unit.YEAR: MS_PER_YEAR,
    Unit.DECADE: 10 * MS_PER_YEAR,
    Unit.CENTURY: 100 * MS_PER_YEAR,
}

# Month-based units, in months per unit.
MONTHS: Dict[Unit, int] = {
    Unit.MONTH: 1,
    Unit.QUARTER: 3,
    Unit.SEASON: 3,
}


def _add_months(inst: "Instant", months: int) -> "Instant":
    f = wall_fields(inst)
    return with_wall(inst, clamp_date(replace(f, month=f.month + months)))


def _build_adders() -> Dict[Unit, Adder]:
    adders: Dict[Unit, Adder] = {}
    for unit, ms in LINEAR_MS.items():
        adders[unit] = lambda inst, n, ms=ms: with_epoch(inst, inst.epoch_ms + round(n * ms))
    for unit, k in MONTHS.items():
        adders[unit] = lambda inst, n, k=k: _add_months(inst, int(n) * k)
    missing = set(Unit) - set(adders)
    if missing:
        raise RuntimeError(f"No adder for units: {sorted(u.value for u in missing)}")
    return adders


_ADDERS = _build_adders()


def add(inst: "Instant", count: Number, unit: Union[Unit, str]) -> "Instant":
    """
    Shift `inst` by `count` units (negative subtracts, zero is a no-op).

    Fractional counts are honoured for linear units (rounded to the
    millisecond) and truncated toward zero for month-based units.
    """
    u = Unit.parse(unit)
    if count == 0:
        return inst
    return _ADDERS[u](inst, count)


def subtract(inst: "Instant", count: Number, unit: Union[Unit, str]) -> "Instant":
    return add(inst, -count, unit)
