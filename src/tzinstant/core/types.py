from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Dict, Literal, Optional, Tuple, Union

from .errors import InvalidField

Hemisphere = Literal["North", "South"]


class Unit(Enum):
    """Closed set of calendar units understood by add/start_of/is_same."""
    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    QUARTERHOUR = "quarterhour"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    SEASON = "season"
    YEAR = "year"
    DECADE = "decade"
    CENTURY = "century"

    @classmethod
    def parse(cls, unit: Union["Unit", str]) -> "Unit":
        if isinstance(unit, Unit):
            return unit
        if not isinstance(unit, str):
            raise InvalidField(f"Unit must be a Unit or a string, got {type(unit).__name__}")
        key = unit.strip().lower().replace("-", "").replace("_", "").replace(" ", "")
        if key in _UNIT_ALIASES:
            return _UNIT_ALIASES[key]
        if key.endswith("s") and key[:-1] in _UNIT_ALIASES:
            return _UNIT_ALIASES[key[:-1]]
        raise InvalidField(f"Unknown unit '{unit}'. Available: {[u.value for u in cls]}")


_UNIT_ALIASES: Dict[str, Unit] = {u.value: u for u in Unit}
_UNIT_ALIASES.update({
    "ms": Unit.MILLISECOND,
    "date": Unit.DAY,
    "centuries": Unit.CENTURY,
})


class WeekStart(IntEnum):
    """First day of the week, numbered like day_of_week (0=Sunday)."""
    SUNDAY = 0
    MONDAY = 1


class DateOrder(Enum):
    MONTH_DAY_YEAR = "mdy"
    DAY_MONTH_YEAR = "dmy"


@dataclass(frozen=True)
class TransitionRule:
    """
    One yearly DST switch, in local wall-clock terms.

    week is 1..4 for the n-th weekday of the month, 5 for the last one;
    weekday follows Python's convention (0=Monday..6=Sunday).
    offset is the UTC offset (minutes) in force after the switch.
    """
    month: int
    week: int
    weekday: int
    hour: int
    offset: int

    def __post_init__(self) -> None:
        if not (1 <= self.month <= 12):
            raise ValueError("month must be in 1..12")
        if not (1 <= self.week <= 5):
            raise ValueError("week must be in 1..5 (5 = last)")
        if not (0 <= self.weekday <= 6):
            raise ValueError("weekday must be in 0..6")
        if not (0 <= self.hour <= 23):
            raise ValueError("hour must be in 0..23")


@dataclass(frozen=True)
class ZoneRecord:
    """
    Read-only rule record for one canonical zone.

    offset is the standard (non-DST) offset in minutes. rules is empty for
    zones without DST, otherwise (start, back): the spring-forward switch and
    the fall-back switch.
    """
    name: str
    offset: int
    hemisphere: Hemisphere = "North"
    rules: Tuple[TransitionRule, ...] = ()
    aliases: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.hemisphere not in ("North", "South"):
            raise ValueError("hemisphere must be 'North' or 'South'")
        if len(self.rules) not in (0, 2):
            raise ValueError(f"{self.name}: rules must be empty or (start, back)")
        if self.rules and self.rules[1].offset != self.offset:
            raise ValueError(f"{self.name}: fall-back rule must return to the standard offset")

    @property
    def has_dst(self) -> bool:
        return bool(self.rules)

    @property
    def dst_offset(self) -> int:
        return self.rules[0].offset if self.rules else self.offset

    @property
    def reference_offset(self) -> int:
        """Offset in force in July: DST for northern DST zones, standard otherwise."""
        if self.has_dst and self.hemisphere == "North":
            return self.dst_offset
        return self.offset


@dataclass(frozen=True)
class WallClock:
    """Zone-local calendar fields. month is 0-based (0=January)."""
    year: int
    month: int
    date: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0


@dataclass(frozen=True)
class OffsetState:
    offset: int  # minutes
    is_dst: bool


def _hours(minutes: int) -> Union[int, float]:
    h = minutes / 60
    return int(h) if h == int(h) else h


@dataclass(frozen=True)
class ZoneDescriptor:
    name: str
    has_dst: bool
    default_offset: int  # minutes
    hemisphere: Hemisphere
    current: OffsetState
    change: Optional[Tuple[str, str]] = None

    def as_dict(self) -> Dict[str, Any]:
        """Descriptor with offsets in hours; 'change' only present for DST zones."""
        out: Dict[str, Any] = {
            "name": self.name,
            "hasDst": self.has_dst,
            "default_offset": _hours(self.default_offset),
            "hemisphere": self.hemisphere,
            "current": {"offset": _hours(self.current.offset), "isDST": self.current.is_dst},
        }
        if self.change is not None:
            out["change"] = {"start": self.change[0], "back": self.change[1]}
        return out
