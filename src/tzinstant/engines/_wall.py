"""Shared helpers: read an Instant's zone-local fields and rebuild one from them."""
from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from ..core import calendar as cal
from ..core.types import WallClock
from ..zones.resolver import local_to_epoch, offset_at

if TYPE_CHECKING:
    from ..instant import Instant


def wall_fields(inst: "Instant") -> WallClock:
    return cal.fields_from_epoch(inst.epoch_ms, offset_at(inst.epoch_ms, inst.zone))


def with_epoch(inst: "Instant", epoch_ms: int) -> "Instant":
    if epoch_ms == inst.epoch_ms:
        return inst
    return replace(inst, epoch_ms=epoch_ms)


def with_wall(inst: "Instant", f: WallClock, *, earlier: bool = False) -> "Instant":
    """New Instant at wall-clock `f` (overflow-normalized) in the same zone."""
    return with_epoch(inst, local_to_epoch(cal.wall_from_fields(f), inst.zone, earlier=earlier))


def clamp_date(f: WallClock) -> WallClock:
    """Normalize month/year overflow and clamp date to the month's last day."""
    year = f.year + f.month // 12
    month = f.month % 12
    date = min(f.date, cal.days_in_month(year, month))
    return replace(f, year=year, month=month, date=date)
