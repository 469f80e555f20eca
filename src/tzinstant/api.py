from __future__ import annotations

import logging
import math
import time
from typing import List, Optional, Union

from .core import calendar as cal
from .core.config import DEFAULT_CONFIG, InstantConfig
from .core.errors import InvalidEpoch
from .core.table import ZoneTable
from .core.types import DateOrder, WeekStart, ZoneDescriptor, ZoneRecord
from .instant import Instant, default_instant as _default_instant
from .render.parse import parse_date
from .zones.lookup import resolve_zone
from .zones.resolver import local_to_epoch

logger = logging.getLogger(__name__)

I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1

Epoch = Union[int, float]
_table: Optional[ZoneTable] = None


def set_table(table: ZoneTable) -> None:
    """Swap the process-wide zone table snapshot."""
    global _table
    if not isinstance(table, ZoneTable):
        raise TypeError(f"Expected ZoneTable, got {type(table).__name__}")
    _table = table
    logger.debug("zone table set: version %s, %d zones", table.version, len(table))


def get_table() -> ZoneTable:
    if _table is None:
        raise RuntimeError("Zone table not initialized")
    return _table


def _config(week_start: WeekStart, silent: bool, date_order: DateOrder) -> InstantConfig:
    if (week_start, silent, date_order) == (
        DEFAULT_CONFIG.week_start, DEFAULT_CONFIG.silent, DEFAULT_CONFIG.date_order
    ):
        return DEFAULT_CONFIG
    return InstantConfig(week_start=week_start, silent=silent, date_order=date_order)


def _coerce_epoch(epoch: object) -> int:
    if isinstance(epoch, bool):
        raise InvalidEpoch("Epoch must be a number, got bool")
    if isinstance(epoch, int):
        ms = epoch
    elif isinstance(epoch, float):
        if not math.isfinite(epoch):
            raise InvalidEpoch(f"Epoch must be finite, got {epoch!r}")
        ms = int(epoch)
    else:
        raise InvalidEpoch(f"Epoch must be a number, got {type(epoch).__name__}")
    if not (I64_MIN <= ms <= I64_MAX):
        raise InvalidEpoch(f"Epoch {ms} is outside the 64-bit millisecond range")
    return ms


def _repair(err: InvalidEpoch, zone: ZoneRecord, cfg: InstantConfig, table: ZoneTable) -> Instant:
    if not cfg.silent:
        raise err
    logger.warning("%s; falling back to 1970-01-01 00:00 in %s", err, zone.name)
    return _default_instant(zone, cfg, table)


def instant(
    epoch: object,
    tz: Optional[str] = None,
    *,
    week_start: WeekStart = DEFAULT_CONFIG.week_start,
    silent: bool = DEFAULT_CONFIG.silent,
    date_order: DateOrder = DEFAULT_CONFIG.date_order,
    table: Optional[ZoneTable] = None,
) -> Instant:
    """
    Instant at `epoch` (Unix milliseconds) in zone `tz` (None = host zone).

    A string is handed to parse(). A missing or non-numeric epoch raises
    InvalidEpoch, or with silent=True yields 1970-01-01 00:00 local time.
    Unknown zones always raise UnknownZone.
    """
    tbl = table if table is not None else get_table()
    zone = resolve_zone(tz, tbl)
    cfg = _config(week_start, silent, date_order)
    if isinstance(epoch, str):
        return _parse_in(epoch, zone, cfg, tbl)
    try:
        ms = _coerce_epoch(epoch)
    except InvalidEpoch as e:
        return _repair(e, zone, cfg, tbl)
    return Instant(ms, zone, cfg, tbl)


def _parse_in(text: str, zone: ZoneRecord, cfg: InstantConfig, table: ZoneTable) -> Instant:
    try:
        f = parse_date(text, cfg.date_order)
    except InvalidEpoch as e:
        return _repair(e, zone, cfg, table)
    return Instant(local_to_epoch(cal.wall_from_fields(f), zone), zone, cfg, table)


def parse(
    text: str,
    tz: Optional[str] = None,
    *,
    week_start: WeekStart = DEFAULT_CONFIG.week_start,
    silent: bool = DEFAULT_CONFIG.silent,
    date_order: DateOrder = DEFAULT_CONFIG.date_order,
    table: Optional[ZoneTable] = None,
) -> Instant:
    """Instant from a date string read as wall-clock time in `tz`."""
    tbl = table if table is not None else get_table()
    zone = resolve_zone(tz, tbl)
    return _parse_in(text, zone, _config(week_start, silent, date_order), tbl)


def now(
    tz: Optional[str] = None,
    *,
    week_start: WeekStart = DEFAULT_CONFIG.week_start,
    date_order: DateOrder = DEFAULT_CONFIG.date_order,
    table: Optional[ZoneTable] = None,
) -> Instant:
    return instant(
        time.time_ns() // 1_000_000, tz,
        week_start=week_start, date_order=date_order, table=table,
    )


def default_instant(tz: Optional[str] = None, *, table: Optional[ZoneTable] = None) -> Instant:
    """1970-01-01 00:00:00.000 wall-clock in `tz`."""
    tbl = table if table is not None else get_table()
    return _default_instant(resolve_zone(tz, tbl), DEFAULT_CONFIG, tbl)


def zone_info(token: Optional[str], epoch: Optional[Epoch] = None) -> ZoneDescriptor:
    """Descriptor of zone `token` as seen at `epoch` (default: now)."""
    if epoch is None:
        return now(token).timezone()
    return instant(epoch, token, silent=False).timezone()


def list_zones() -> List[str]:
    return get_table().list()


def table_version() -> str:
    return get_table().version
