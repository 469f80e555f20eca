"""
tzinstant.zones.resolver
------------------------
Offset Resolver. Given an epoch and a ZoneRecord, decides which UTC offset
is in force and whether it is DST.

Transitions are defined by local wall-clock hour, so each switch is read
under the offset in force just before it: the spring-forward switch under
the standard offset, the fall-back switch under the DST offset.
"""

from __future__ import annotations

from typing import Tuple

from ..core import calendar as cal
from ..core.types import OffsetState, TransitionRule, ZoneRecord


# ---------------------------------------------------------
# Day rules
# ---------------------------------------------------------

def nth_weekday(year: int, month: int, week: int, weekday: int) -> int:
    """
    Day of month of the n-th `weekday` (0=Monday..6=Sunday) in `month` (1..12).
    week 1..4 picks the n-th occurrence, 5 picks the last one.
    """
    first = cal.days_from_civil(year, month - 1, 1)
    first_weekday = cal.iso_weekday(first) - 1
    first_occurrence = 1 + (weekday - first_weekday) % 7
    if week < 5:
        return first_occurrence + (week - 1) * 7
    last_day = cal.days_in_month(year, month - 1)
    return first_occurrence + ((last_day - first_occurrence) // 7) * 7


def rule_day(rule: TransitionRule, year: int) -> int:
    return nth_weekday(year, rule.month, rule.week, rule.weekday)


def rule_wall_ms(rule: TransitionRule, year: int) -> int:
    """Local wall-clock ms of the switch in `year`."""
    return cal.wall_ms(year, rule.month - 1, rule_day(rule, year), rule.hour)


def transitions(record: ZoneRecord, year: int) -> Tuple[int, int]:
    """(spring-forward epoch_ms, fall-back epoch_ms) for `year`."""
    start, back = record.rules
    start_utc = rule_wall_ms(start, year) - record.offset * cal.MS_PER_MINUTE
    back_utc = rule_wall_ms(back, year) - start.offset * cal.MS_PER_MINUTE
    return start_utc, back_utc


def change_strings(record: ZoneRecord, year: int) -> Tuple[str, str]:
    """("MM/DD:HH", "MM/DD:HH") local times of the (start, back) switches."""
    out = []
    for rule in record.rules:
        out.append(f"{rule.month:02d}/{rule_day(rule, year):02d}:{rule.hour:02d}")
    return out[0], out[1]


# ---------------------------------------------------------
# Resolution
# ---------------------------------------------------------

def _in_dst(epoch_ms: int, record: ZoneRecord, year: int) -> bool:
    start_utc, back_utc = transitions(record, year)
    if record.hemisphere == "North":
        return start_utc <= epoch_ms < back_utc
    return not (back_utc <= epoch_ms < start_utc)


def resolve(epoch_ms: int, record: ZoneRecord) -> OffsetState:
    """UTC offset (minutes) and DST flag in force at `epoch_ms`."""
    if not record.has_dst:
        return OffsetState(record.offset, False)

    # First approximation: the local year under the standard offset.
    year = cal.local_year(epoch_ms, record.offset)
    is_dst = _in_dst(epoch_ms, record, year)
    offset = record.dst_offset if is_dst else record.offset

    # Re-test when the candidate offset puts the instant in another local year.
    year2 = cal.local_year(epoch_ms, offset)
    if year2 != year:
        is_dst = _in_dst(epoch_ms, record, year2)
        offset = record.dst_offset if is_dst else record.offset
    return OffsetState(offset, is_dst)


def offset_at(epoch_ms: int, record: ZoneRecord) -> int:
    return resolve(epoch_ms, record).offset


def local_to_epoch(local_ms: int, record: ZoneRecord, *, earlier: bool = False) -> int:
    """
    Zone-local wall-clock ms -> epoch ms.

    Wall times inside a spring-forward gap come out shifted forward by the
    gap. Ambiguous fall-back wall times map to the later (standard) instant,
    or to the earlier (DST) one with earlier=True.
    """
    if not record.has_dst:
        return local_ms - record.offset * cal.MS_PER_MINUTE
    if earlier:
        first = local_ms - record.dst_offset * cal.MS_PER_MINUTE
        if offset_at(first, record) == record.dst_offset:
            return first
    guess = local_ms - record.offset * cal.MS_PER_MINUTE
    off1 = offset_at(guess, record)
    epoch = local_ms - off1 * cal.MS_PER_MINUTE
    off2 = offset_at(epoch, record)
    if off2 != off1:
        epoch = local_ms - off2 * cal.MS_PER_MINUTE
    return epoch
