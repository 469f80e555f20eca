"""
tzinstant.zones.data
--------------------
Static, versioned zone rule table. Records are pre-resolved from the IANA
database for the version below: a standard offset, at most one yearly
(start, back) pair of DST switches, the hemisphere, and alias strings.

Zones whose current rules cannot be written as two "n-th weekday" switches
(e.g. Jerusalem, Cairo, Casablanca) are not included.
"""

from __future__ import annotations

from typing import Tuple

from ..core.types import TransitionRule, ZoneRecord

TABLE_VERSION = "2023c"
RULE_YEAR = 2023

SUN = 6
LAST = 5


# ============================================================
# RULE FAMILIES
# ============================================================

def us_rules(std: int) -> Tuple[TransitionRule, TransitionRule]:
    """US/Canada: 2nd Sunday March 02:00 -> 1st Sunday November 02:00."""
    return (
        TransitionRule(3, 2, SUN, 2, std + 60),
        TransitionRule(11, 1, SUN, 2, std),
    )


def eu_rules(std: int) -> Tuple[TransitionRule, TransitionRule]:
    """EU: last Sunday March -> last Sunday October, both at 01:00 UTC."""
    std_h = std // 60
    return (
        TransitionRule(3, LAST, SUN, 1 + std_h, std + 60),
        TransitionRule(10, LAST, SUN, 2 + std_h, std),
    )


def au_rules(std: int) -> Tuple[TransitionRule, TransitionRule]:
    """South-east Australia: 1st Sunday October 02:00 -> 1st Sunday April 03:00."""
    return (
        TransitionRule(10, 1, SUN, 2, std + 60),
        TransitionRule(4, 1, SUN, 3, std),
    )


def _z(name: str, offset: int, *aliases: str) -> ZoneRecord:
    return ZoneRecord(name=name, offset=offset, aliases=tuple(aliases))


def _us(name: str, offset: int, *aliases: str) -> ZoneRecord:
    return ZoneRecord(name=name, offset=offset, rules=us_rules(offset), aliases=tuple(aliases))


def _eu(name: str, offset: int, *aliases: str) -> ZoneRecord:
    return ZoneRecord(name=name, offset=offset, rules=eu_rules(offset), aliases=tuple(aliases))


def _au(name: str, offset: int, *aliases: str) -> ZoneRecord:
    return ZoneRecord(name=name, offset=offset, hemisphere="South", rules=au_rules(offset),
                      aliases=tuple(aliases))


def _south(name: str, offset: int, *aliases: str) -> ZoneRecord:
    return ZoneRecord(name=name, offset=offset, hemisphere="South", aliases=tuple(aliases))


# ============================================================
# RECORDS
# ============================================================

ETC = (
    _z("Etc/UTC", 0, "utc", "universal", "zulu", "z"),
    _z("Etc/GMT", 0, "gmt", "greenwich"),
)

AMERICA = (
    _us("America/New_York", -300, "est", "edt", "eastern", "nyc", "us/eastern"),
    _us("America/Nassau", -300, "bahamas"),
    _us("America/Detroit", -300),
    _us("America/Toronto", -300, "ontario"),
    _us("America/Chicago", -360, "cst", "cdt", "central", "us/central"),
    _us("America/Winnipeg", -360),
    _us("America/Denver", -420, "mst", "mdt", "mountain", "us/mountain"),
    _us("America/Edmonton", -420, "calgary"),
    _z("America/Phoenix", -420, "arizona"),
    _us("America/Los_Angeles", -480, "pst", "pdt", "pacific", "la", "us/pacific", "san francisco"),
    _us("America/Vancouver", -480),
    _us("America/Anchorage", -540, "akst", "akdt", "alaska"),
    _us("America/Adak", -600),
    _us("America/Halifax", -240, "ast", "adt", "atlantic"),
    _us("America/St_Johns", -210, "nst", "ndt", "newfoundland"),
    _z("America/Mexico_City", -360, "mexico"),
    _z("America/Bogota", -300, "colombia"),
    _z("America/Lima", -300, "peru"),
    _z("America/Caracas", -240, "venezuela"),
    _z("America/Puerto_Rico", -240),
    ZoneRecord(
        name="America/Santiago",
        offset=-240,
        hemisphere="South",
        rules=(
            TransitionRule(9, 1, SUN, 0, -180),
            TransitionRule(4, 1, SUN, 0, -240),
        ),
        aliases=("chile",),
    ),
    _south("America/Sao_Paulo", -180, "brt", "brazil", "rio"),
    _south("America/Argentina/Buenos_Aires", -180, "argentina"),
    _south("America/Montevideo", -180),
)

EUROPE = (
    _eu("Europe/London", 0, "bst", "uk", "britain"),
    _eu("Europe/Dublin", 0, "ireland"),
    _eu("Europe/Lisbon", 0, "wet", "west", "portugal"),
    _eu("Europe/Paris", 60, "france"),
    _eu("Europe/Berlin", 60, "cet", "cest", "germany"),
    _eu("Europe/Madrid", 60, "spain"),
    _eu("Europe/Rome", 60, "italy"),
    _eu("Europe/Amsterdam", 60, "netherlands"),
    _eu("Europe/Brussels", 60, "belgium"),
    _eu("Europe/Vienna", 60, "austria"),
    _eu("Europe/Zurich", 60, "switzerland"),
    _eu("Europe/Stockholm", 60, "sweden"),
    _eu("Europe/Oslo", 60, "norway"),
    _eu("Europe/Copenhagen", 60, "denmark"),
    _eu("Europe/Warsaw", 60, "poland"),
    _eu("Europe/Prague", 60),
    _eu("Europe/Budapest", 60),
    _eu("Europe/Athens", 120, "eet", "eest", "greece"),
    _eu("Europe/Helsinki", 120, "finland"),
    _eu("Europe/Kiev", 120, "kyiv", "ukraine"),
    _eu("Europe/Bucharest", 120),
    _z("Europe/Istanbul", 180, "turkey"),
    _z("Europe/Minsk", 180),
    _z("Europe/Moscow", 180, "msk", "russia"),
)

AFRICA = (
    _z("Africa/Accra", 0),
    _z("Africa/Lagos", 60, "wat", "nigeria"),
    _z("Africa/Algiers", 60),
    _south("Africa/Johannesburg", 120, "sast", "south africa"),
    _z("Africa/Nairobi", 180, "eat", "kenya"),
)

ASIA = (
    _z("Asia/Riyadh", 180),
    _z("Asia/Baghdad", 180),
    _z("Asia/Tehran", 210, "iran"),
    _z("Asia/Dubai", 240, "gst", "uae"),
    _z("Asia/Karachi", 300, "pkt", "pakistan"),
    _z("Asia/Tashkent", 300),
    _z("Asia/Kolkata", 330, "ist", "india", "calcutta", "mumbai", "delhi"),
    _z("Asia/Kathmandu", 345, "nepal"),
    _z("Asia/Dhaka", 360, "bangladesh"),
    _z("Asia/Almaty", 360),
    _z("Asia/Yangon", 390),
    _z("Asia/Bangkok", 420, "ict", "thailand"),
    _z("Asia/Jakarta", 420, "wib"),
    _z("Asia/Singapore", 480, "sgt"),
    _z("Asia/Hong_Kong", 480, "hkt"),
    _z("Asia/Shanghai", 480, "china", "beijing"),
    _z("Asia/Manila", 480, "philippines"),
    _z("Asia/Taipei", 480, "taiwan"),
    _z("Asia/Seoul", 540, "kst", "korea"),
    _z("Asia/Tokyo", 540, "jst", "japan"),
)

AUSTRALIA_PACIFIC = (
    ZoneRecord(name="Australia/Perth", offset=480, hemisphere="South", aliases=("awst",)),
    ZoneRecord(name="Australia/Darwin", offset=570, hemisphere="South"),
    _au("Australia/Adelaide", 570, "acst", "acdt"),
    ZoneRecord(name="Australia/Brisbane", offset=600, hemisphere="South", aliases=("queensland",)),
    _au("Australia/Sydney", 600, "aest", "aedt", "canberra"),
    _au("Australia/Melbourne", 600),
    _au("Australia/Hobart", 600, "tasmania"),
    ZoneRecord(
        name="Pacific/Auckland",
        offset=720,
        hemisphere="South",
        rules=(
            TransitionRule(9, LAST, SUN, 2, 780),
            TransitionRule(4, 1, SUN, 3, 720),
        ),
        aliases=("nzst", "nzdt", "new zealand", "wellington"),
    ),
    _south("Pacific/Fiji", 720, "fiji"),
    _z("Pacific/Guam", 600),
    _south("Pacific/Port_Moresby", 600),
    _south("Pacific/Tongatapu", 780, "tonga"),
    _z("Pacific/Honolulu", -600, "hst", "hawaii"),
)

ALL_ZONES: Tuple[ZoneRecord, ...] = ETC + AMERICA + EUROPE + AFRICA + ASIA + AUSTRALIA_PACIFIC
