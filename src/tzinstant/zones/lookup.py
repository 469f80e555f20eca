"""
tzinstant.zones.lookup
----------------------
Zone Resolution: turns a user-supplied zone token into a ZoneRecord.

Accepted forms, in order: None (host zone), canonical IANA-style name,
abbreviation or city alias, fixed-offset token such as "-5h", and literal
"Etc/GMT+5" style names. Anything else raises UnknownZone, regardless of the
silent flag.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from ..core.config import host_zone_token
from ..core.errors import UnknownZone
from ..core.table import ZoneTable
from ..core.types import ZoneRecord

logger = logging.getLogger(__name__)

FALLBACK_ZONE = "Etc/UTC"
MAX_FIXED_HOURS = 14

_FIXED_OFFSET_RE = re.compile(r"^([+-]?)(\d+)h$")
_ETC_GMT_RE = re.compile(r"^etc/gmt([+-])(\d+)$")


def fixed_offset_zone(hours: int) -> ZoneRecord:
    """
    Synthetic DST-free zone for a whole-hour offset east of UTC.

    Named with the POSIX sign inversion: -5 hours is "Etc/GMT+5".
    """
    if hours == 0:
        return ZoneRecord(name="Etc/GMT", offset=0)
    return ZoneRecord(name=f"Etc/GMT{-hours:+d}", offset=hours * 60)


def _parse_fixed(token: str) -> Optional[ZoneRecord]:
    m = _FIXED_OFFSET_RE.match(token)
    if m:
        hours = int(m.group(2))
        if m.group(1) == "-":
            hours = -hours
    else:
        m = _ETC_GMT_RE.match(token)
        if not m:
            return None
        hours = int(m.group(2))
        if m.group(1) == "+":
            hours = -hours
    if abs(hours) > MAX_FIXED_HOURS:
        return None
    return fixed_offset_zone(hours)


def resolve_zone(token: Optional[str], table: ZoneTable, *, host: Optional[str] = None) -> ZoneRecord:
    """
    Resolve `token` against `table`.

    None resolves to the host zone (`host` if given, else host_zone_token());
    an unresolvable host zone is repaired to Etc/UTC with a warning.
    """
    if token is None:
        host_token = host if host is not None else host_zone_token()
        try:
            return resolve_zone(host_token, table)
        except UnknownZone:
            logger.warning("Host zone %r is not in table %s; using %s", host_token, table.version, FALLBACK_ZONE)
            return table.get(FALLBACK_ZONE)

    if not isinstance(token, str):
        raise UnknownZone(token)
    key = token.strip().lower()
    if not key:
        raise UnknownZone(token)

    rec = table.find(key)
    if rec is not None:
        return rec

    rec = _parse_fixed(key)
    if rec is not None:
        logger.debug("zone token %r -> fixed offset %s", token, rec.name)
        return table.find(rec.name) or rec
    raise UnknownZone(token)
