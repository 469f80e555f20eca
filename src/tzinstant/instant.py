"""
tzinstant.instant
-----------------
The Instant value: an epoch in milliseconds bound to a resolved zone and a
config. Every operation returns a new Instant; getters and with_* builders
come in pairs.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from functools import cached_property
from typing import Optional, Union

from .core import calendar as cal
from .core.config import DEFAULT_CONFIG, InstantConfig
from .core.errors import InvalidField
from .core.table import ZoneTable
from .core.types import OffsetState, Unit, WallClock, ZoneDescriptor, ZoneRecord
from .engines import arithmetic, compare, truncate, weeks
from .engines._wall import clamp_date, with_wall
from .render import format as fmt
from .render.parse import parse_time
from .zones import resolver
from .zones.lookup import resolve_zone

UnitLike = Union[Unit, str]


def default_instant(
    zone: ZoneRecord,
    config: InstantConfig = DEFAULT_CONFIG,
    table: Optional[ZoneTable] = None,
) -> "Instant":
    """00:00:00.000 on 1 January 1970, wall-clock in `zone`."""
    return Instant(resolver.local_to_epoch(0, zone), zone, config, table)


def _int_field(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidField(f"{name} must be an int, got {value!r}")
    return value


@dataclass(frozen=True)
class Instant:
    epoch_ms: int
    zone: ZoneRecord
    config: InstantConfig = DEFAULT_CONFIG
    table: Optional[ZoneTable] = field(default=None, compare=False, repr=False)

    # ---------------------------------------------------------
    # Resolution (computed once per value)
    # ---------------------------------------------------------

    @cached_property
    def state(self) -> OffsetState:
        return resolver.resolve(self.epoch_ms, self.zone)

    @cached_property
    def fields(self) -> WallClock:
        return cal.fields_from_epoch(self.epoch_ms, self.state.offset)

    @property
    def _days(self) -> int:
        f = self.fields
        return cal.days_from_civil(f.year, f.month, f.date)

    # ---------------------------------------------------------
    # Getters
    # ---------------------------------------------------------

    def year(self) -> int:
        return self.fields.year

    def month(self) -> int:
        """0-based month (0=January)."""
        return self.fields.month

    def date(self) -> int:
        """Day of month, 1..31."""
        return self.fields.date

    def day(self) -> int:
        """Day of week, 0=Sunday..6=Saturday."""
        return cal.day_of_week(self._days)

    def iso_weekday(self) -> int:
        return cal.iso_weekday(self._days)

    def day_name(self) -> str:
        return fmt.DAY_NAMES[self.day()]

    def hour(self) -> int:
        return self.fields.hour

    def minute(self) -> int:
        return self.fields.minute

    def second(self) -> int:
        return self.fields.second

    def millisecond(self) -> int:
        return self.fields.millisecond

    def day_of_year(self) -> int:
        f = self.fields
        return cal.day_of_year(f.year, f.month, f.date)

    def quarter(self) -> int:
        return self.fields.month // 3 + 1

    def week(self) -> int:
        return weeks.week_of_year(self)

    def month_name(self) -> str:
        return fmt.month_name(self.fields.month)

    def season(self) -> str:
        return fmt.season_name(self.fields.month, self.zone.hemisphere)

    def offset(self) -> int:
        """Current UTC offset in minutes."""
        return self.state.offset

    def is_dst(self) -> bool:
        return self.state.is_dst

    def hemisphere(self) -> str:
        return self.zone.hemisphere

    # ---------------------------------------------------------
    # with_* builders
    # ---------------------------------------------------------

    def _with(self, **changes: int) -> "Instant":
        return with_wall(self, replace(self.fields, **changes))

    def with_year(self, year: int) -> "Instant":
        f = replace(self.fields, year=_int_field("year", year))
        return with_wall(self, clamp_date(f))

    def with_month(self, month: int) -> "Instant":
        """0-based month; the day of month is clamped to the new month's length."""
        f = replace(self.fields, month=_int_field("month", month))
        return with_wall(self, clamp_date(f))

    def with_date(self, date: int) -> "Instant":
        return self._with(date=_int_field("date", date))

    def with_hour(self, hour: int) -> "Instant":
        return self._with(hour=_int_field("hour", hour))

    def with_minute(self, minute: int) -> "Instant":
        return self._with(minute=_int_field("minute", minute))

    def with_second(self, second: int) -> "Instant":
        return self._with(second=_int_field("second", second))

    def with_millisecond(self, millisecond: int) -> "Instant":
        return self._with(millisecond=_int_field("millisecond", millisecond))

    def with_time(self, text: str) -> "Instant":
        """Set hour/minute (and second, if given) from a time literal; the date is kept."""
        hour, minute, second = parse_time(text)
        if second is None:
            return self._with(hour=hour, minute=minute)
        return self._with(hour=hour, minute=minute, second=second)

    def with_day(self, day: Union[int, str]) -> "Instant":
        """Move to a weekday (0=Sunday or a name) within the current week."""
        if isinstance(day, str):
            key = day.strip().lower()
            matches = [i for i, n in enumerate(fmt.DAY_NAMES) if len(key) >= 2 and n.startswith(key)]
            if len(matches) != 1:
                raise InvalidField(f"Unknown day name '{day}'")
            want = matches[0]
        else:
            want = _int_field("day", day) % 7
        ws = int(self.config.week_start)
        shift = (want - ws) % 7 - (self.day() - ws) % 7
        return self._with(date=self.fields.date + shift)

    def with_week(self, week: int) -> "Instant":
        """
        Move to the first day of week `week` of the current year, keeping the
        time of day. Out-of-range numbers run into the neighbouring years.
        """
        return weeks.with_week(self, _int_field("week", week))

    def with_quarter(self, quarter: int) -> "Instant":
        """First day of quarter 1..4 at 00:00; other numbers clamp to 1 or 4."""
        q = min(max(_int_field("quarter", quarter), 1), 4)
        return with_wall(self, WallClock(self.fields.year, (q - 1) * 3, 1))

    def with_season(self, name: str) -> "Instant":
        f = replace(self.fields, month=fmt.season_month(name, self.zone.hemisphere))
        return with_wall(self, clamp_date(f))

    def with_month_name(self, name: str) -> "Instant":
        return self.with_month(fmt.month_index(name))

    # ---------------------------------------------------------
    # Engines
    # ---------------------------------------------------------

    def add(self, count: Union[int, float], unit: UnitLike) -> "Instant":
        return arithmetic.add(self, count, unit)

    def subtract(self, count: Union[int, float], unit: UnitLike) -> "Instant":
        return arithmetic.subtract(self, count, unit)

    def start_of(self, unit: UnitLike) -> "Instant":
        return truncate.start_of(self, unit)

    def end_of(self, unit: UnitLike) -> "Instant":
        return truncate.end_of(self, unit)

    def is_same(self, other: "Instant", unit: UnitLike) -> bool:
        return compare.is_same(self, other, unit)

    def is_before(self, other: "Instant") -> bool:
        return compare.is_before(self, other)

    def is_after(self, other: "Instant") -> bool:
        return compare.is_after(self, other)

    def is_equal(self, other: "Instant") -> bool:
        return compare.is_equal(self, other)

    def is_between(self, start: "Instant", end: "Instant", *, inclusive: bool = False) -> bool:
        return compare.is_between(self, start, end, inclusive=inclusive)

    def diff(self, other: "Instant", unit: UnitLike) -> int:
        return compare.diff(self, other, unit)

    def goto(self, tz: Optional[str]) -> "Instant":
        """Same absolute instant viewed from another zone (None = host zone)."""
        table = self.table
        if table is None:
            from .api import get_table
            table = get_table()
        return replace(self, zone=resolve_zone(tz, table), table=table)

    # ---------------------------------------------------------
    # Rendering
    # ---------------------------------------------------------

    def time(self) -> str:
        """12-hour clock, e.g. '8:00pm'."""
        return fmt.time_12h(self.fields)

    def format(self, variant: str = fmt.DEFAULT_FORMAT) -> str:
        return fmt.render(self.fields, variant, offset=self.state.offset, order=self.config.date_order)

    def iso(self) -> str:
        return self.format("iso")

    def timezone(self) -> ZoneDescriptor:
        """Zone summary; DST switch dates are quoted for the table's rule year."""
        z = self.zone
        change = None
        if z.has_dst:
            table = self.table
            if table is None:
                from .api import get_table
                table = get_table()
            year = table.rule_year if table.rule_year is not None else self.fields.year
            change = resolver.change_strings(z, year)
        return ZoneDescriptor(
            name=z.name,
            has_dst=z.has_dst,
            default_offset=z.reference_offset,
            hemisphere=z.hemisphere,
            current=self.state,
            change=change,
        )

    def __str__(self) -> str:
        return self.iso()
