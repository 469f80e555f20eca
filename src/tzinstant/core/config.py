from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .types import DateOrder, WeekStart

logger = logging.getLogger(__name__)

ENV_ZONE = "TZINSTANT_ZONE"
LOCALTIME_PATH = Path("/etc/localtime")


@dataclass(frozen=True)
class InstantConfig:
    """Per-instant settings. Only week_start touches arithmetic (week truncation/numbering)."""
    week_start: WeekStart = WeekStart.MONDAY
    silent: bool = True
    date_order: DateOrder = DateOrder.MONTH_DAY_YEAR

    def __post_init__(self) -> None:
        if not isinstance(self.week_start, WeekStart):
            raise ValueError("week_start must be WeekStart.SUNDAY or WeekStart.MONDAY")
        if not isinstance(self.date_order, DateOrder):
            raise ValueError("date_order must be a DateOrder")
        if not isinstance(self.silent, bool):
            raise ValueError("silent must be a bool")


DEFAULT_CONFIG = InstantConfig()


def _zone_from_localtime(path: Path) -> Optional[str]:
    try:
        target = os.path.realpath(path)
    except OSError:
        return None
    marker = "zoneinfo/"
    if marker not in target:
        return None
    return target.split(marker, 1)[1]


def _zone_from_gmtoff() -> str:
    minutes = time.localtime().tm_gmtoff // 60
    if minutes % 60:
        # Fixed-offset tokens are whole hours only.
        return "Etc/UTC"
    return f"{minutes // 60:+d}h"


def host_zone_token() -> str:
    """
    Best guess at the host's zone, as a token for resolve_zone().

    Order: $TZINSTANT_ZONE, $TZ, the /etc/localtime symlink, then the
    current fixed UTC offset.
    """
    for var in (ENV_ZONE, "TZ"):
        val = (os.environ.get(var) or "").strip().lstrip(":")
        if val:
            logger.debug("host zone from $%s: %s", var, val)
            return val
    name = _zone_from_localtime(LOCALTIME_PATH)
    if name:
        logger.debug("host zone from %s: %s", LOCALTIME_PATH, name)
        return name
    token = _zone_from_gmtoff()
    logger.debug("host zone from tm_gmtoff: %s", token)
    return token
