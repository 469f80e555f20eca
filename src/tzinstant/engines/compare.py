"""
tzinstant.engines.compare
-------------------------
Comparator. is_same() truncates each instant in its own zone and compares the
resulting absolute instants; it is not a wall-clock field comparison.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from ..core import calendar as cal
from ..core.types import Unit
from ..zones.resolver import offset_at
from .arithmetic import LINEAR_MS, MONTHS, add
from .truncate import start_of

if TYPE_CHECKING:
    from ..instant import Instant


def is_same(a: "Instant", b: "Instant", unit: Union[Unit, str]) -> bool:
    u = Unit.parse(unit)
    return start_of(a, u).epoch_ms == start_of(b, u).epoch_ms


def is_before(a: "Instant", b: "Instant") -> bool:
    return a.epoch_ms < b.epoch_ms


def is_after(a: "Instant", b: "Instant") -> bool:
    return a.epoch_ms > b.epoch_ms


def is_equal(a: "Instant", b: "Instant") -> bool:
    """Same absolute instant, whatever the zones."""
    return a.epoch_ms == b.epoch_ms


def is_between(x: "Instant", start: "Instant", end: "Instant", *, inclusive: bool = False) -> bool:
    if inclusive:
        return start.epoch_ms <= x.epoch_ms <= end.epoch_ms
    return start.epoch_ms < x.epoch_ms < end.epoch_ms


def _trunc_div(n: int, d: int) -> int:
    q = abs(n) // d
    return q if n >= 0 else -q


def _settle(a: "Instant", b: "Instant", estimate: int, unit: Unit) -> int:
    """Step the estimate back until add(a, estimate, unit) does not overshoot b."""
    if estimate > 0:
        while estimate > 0 and add(a, estimate, unit).epoch_ms > b.epoch_ms:
            estimate -= 1
    elif estimate < 0:
        while estimate < 0 and add(a, estimate, unit).epoch_ms < b.epoch_ms:
            estimate += 1
    return estimate


def diff(a: "Instant", b: "Instant", unit: Union[Unit, str]) -> int:
    """
    Whole units from `a` to `b`, truncated toward zero (negative when b is
    earlier). Linear units divide the elapsed milliseconds; month-based
    units are counted on `a`'s wall clock.
    """
    u = Unit.parse(unit)
    if u in LINEAR_MS:
        return _trunc_div(b.epoch_ms - a.epoch_ms, LINEAR_MS[u])

    fa = cal.fields_from_epoch(a.epoch_ms, offset_at(a.epoch_ms, a.zone))
    fb = cal.fields_from_epoch(b.epoch_ms, offset_at(b.epoch_ms, a.zone))

    est = (fb.year - fa.year) * 12 + (fb.month - fa.month)
    months = _settle(a, b, est, Unit.MONTH)
    return _trunc_div(months, MONTHS[u])
