from __future__ import annotations
from tzinstant.core.table import ZoneTable
from tzinstant.zones.data import ALL_ZONES, RULE_YEAR, TABLE_VERSION

def build_table() -> ZoneTable:
    return ZoneTable.build(TABLE_VERSION, ALL_ZONES, rule_year=RULE_YEAR)
