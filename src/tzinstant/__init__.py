"""tzinstant public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize zone table on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    instant,
    parse,
    now,
    default_instant,
    zone_info,
    list_zones,
    table_version,
    set_table,
    get_table,
)
from .instant import Instant
from .core.config import InstantConfig
from .core.types import Unit, WeekStart, DateOrder, ZoneDescriptor
from .core.errors import (
    TzInstantError,
    InvalidEpoch,
    UnknownZone,
    UnparseableTime,
    InvalidField,
)

__all__ = [
    "instant",
    "parse",
    "now",
    "default_instant",
    "zone_info",
    "list_zones",
    "table_version",
    "set_table",
    "get_table",
    "Instant",
    "InstantConfig",
    "Unit",
    "WeekStart",
    "DateOrder",
    "ZoneDescriptor",
    "TzInstantError",
    "InvalidEpoch",
    "UnknownZone",
    "UnparseableTime",
    "InvalidField",
]
