"""
tzinstant.engines.weeks
-----------------------
Week-of-year numbering.

Counting starts from the anchor day of the year (see
`calendar.week_anchor`) at the instant's own time of day. Week 1 also
covers the days before the anchor; when 1 January is not itself the anchor
the partial first week shifts every later week up by one. A week ends one
second before the next anchor-weekday at that time of day. The count stops
at 52: days after the 52nd boundary still read as week 52.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from ..core import calendar as cal
from ._wall import with_epoch, with_wall

if TYPE_CHECKING:
    from ..instant import Instant

WEEK_MS = 7 * cal.MS_PER_DAY
# Weeks skipped per elapsed month before walking; every month has at least four.
SKIP_PER_MONTH = 4
LAST_COUNTED = 52


def _anchor(inst: "Instant") -> "Instant":
    f = inst.fields
    y, m0, d = cal.civil_from_days(cal.week_anchor(f.year, inst.config.week_start))
    return with_wall(inst, replace(f, year=y, month=m0, date=d))


def _step(inst: "Instant", weeks: int) -> "Instant":
    f = inst.fields
    return with_wall(inst, replace(f, date=f.date + 7 * weeks))


def week_of_year(inst: "Instant") -> int:
    f = inst.fields
    jan1 = cal.days_from_civil(f.year, 0, 1)
    partial = 0 if cal.week_anchor(f.year, inst.config.week_start) == jan1 else 1

    edge = _anchor(inst).epoch_ms - cal.MS_PER_SECOND
    if edge > inst.epoch_ms:
        return 1

    count = f.month * SKIP_PER_MONTH
    boundary = with_epoch(inst, edge + count * WEEK_MS)
    while count <= LAST_COUNTED:
        if boundary.epoch_ms > inst.epoch_ms:
            return count + partial
        boundary = _step(boundary, 1)
        count += 1
    return LAST_COUNTED


def with_week(inst: "Instant", week: int) -> "Instant":
    """Anchor day of the year plus `week - 1` weeks, at the same time of day."""
    return _step(_anchor(inst), week - 1)
