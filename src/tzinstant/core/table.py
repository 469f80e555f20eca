from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional

from .types import ZoneRecord


def city_alias(name: str) -> Optional[str]:
    """'America/New_York' -> 'new york'; None for names without a region."""
    if "/" not in name:
        return None
    return name.rsplit("/", 1)[1].replace("_", " ").lower()


@dataclass(frozen=True)
class ZoneTable:
    """
    Immutable snapshot of the zone rule table.

    Keys are lower-case canonical names; aliases map lower-case tokens
    (abbreviations, city names) to canonical keys. Build a new snapshot with
    with_records() rather than mutating one.

    rule_year is the year the transition dates were published for; zone
    descriptors quote switch dates for that year. None means each instant's
    own year.
    """
    version: str
    _zones: Mapping[str, ZoneRecord] = field(repr=False)
    _aliases: Mapping[str, str] = field(repr=False)
    rule_year: Optional[int] = None

    @classmethod
    def build(cls, version: str, records: Iterable[ZoneRecord], *,
              rule_year: Optional[int] = None) -> "ZoneTable":
        zones: Dict[str, ZoneRecord] = {}
        aliases: Dict[str, str] = {}
        for rec in records:
            key = rec.name.lower()
            if key in zones:
                raise KeyError(f"Zone '{rec.name}' defined twice")
            zones[key] = rec
        # Explicit aliases win over derived city names.
        for key, rec in zones.items():
            city = city_alias(rec.name)
            if city and city not in zones:
                aliases.setdefault(city, key)
        for key, rec in zones.items():
            for a in rec.aliases:
                aliases[a.lower()] = key
        return cls(version, MappingProxyType(zones), MappingProxyType(aliases), rule_year)

    def get(self, name: str) -> ZoneRecord:
        key = name.lower()
        if key not in self._zones:
            raise KeyError(f"Unknown zone '{name}'. Available: {len(self._zones)} zones")
        return self._zones[key]

    def find(self, token: str) -> Optional[ZoneRecord]:
        """Canonical name or alias lookup (case-insensitive); None when absent."""
        key = token.strip().lower()
        if key in self._zones:
            return self._zones[key]
        if key in self._aliases:
            return self._zones[self._aliases[key]]
        return None

    def list(self) -> List[str]:
        return sorted(rec.name for rec in self._zones.values())

    def aliases(self) -> Dict[str, str]:
        return {a: self._zones[k].name for a, k in self._aliases.items()}

    def with_records(self, records: Iterable[ZoneRecord], *, version: Optional[str] = None,
                     overwrite: bool = False) -> "ZoneTable":
        merged = dict(self._zones)
        for rec in records:
            key = rec.name.lower()
            if (not overwrite) and key in merged:
                raise KeyError(f"Zone '{rec.name}' already exists. Use overwrite=True to replace.")
            merged[key] = rec
        return ZoneTable.build(version or self.version, merged.values(), rule_year=self.rule_year)

    def __len__(self) -> int:
        return len(self._zones)

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and self.find(token) is not None
