"""
tzinstant.diagnostics.offset_scan
---------------------------------
Sample a zone's offset over one local year on a fixed grid and check that
the empirical offset changes line up with the rule-derived transitions.
Optionally plots the offset curve.
"""

from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import tzinstant
from tzinstant.core import calendar as cal
from tzinstant.zones.lookup import resolve_zone
from tzinstant.zones.resolver import local_to_epoch, offset_at, transitions


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "tzinstant[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "tzinstant[diagnostics]"') from e


def scan(zone: str, year: int, step_minutes: int = 15):
    """(epochs, offsets) arrays sampled every `step_minutes` over local `year`."""
    np = _need_numpy()
    rec = resolve_zone(zone, tzinstant.get_table())
    start = local_to_epoch(cal.wall_ms(year, 0, 1), rec)
    end = local_to_epoch(cal.wall_ms(year + 1, 0, 1), rec)
    epochs = np.arange(start, end, step_minutes * cal.MS_PER_MINUTE, dtype=np.int64)
    offsets = np.fromiter((offset_at(int(e), rec) for e in epochs), dtype=np.int64, count=len(epochs))
    return epochs, offsets


def empirical_changes(epochs, offsets) -> List[Tuple[int, int, int]]:
    """(lower grid epoch, upper grid epoch, new offset) for every offset change."""
    np = _need_numpy()
    idx = np.nonzero(np.diff(offsets))[0]
    return [(int(epochs[i]), int(epochs[i + 1]), int(offsets[i + 1])) for i in idx]


def check(zone: str, year: int, step_minutes: int = 15) -> List[str]:
    """Mismatches between the scan and transitions(); empty when they agree."""
    rec = resolve_zone(zone, tzinstant.get_table())
    epochs, offsets = scan(zone, year, step_minutes)
    found = empirical_changes(epochs, offsets)
    expected = sorted(transitions(rec, year)) if rec.has_dst else []

    problems: List[str] = []
    if len(found) != len(expected):
        problems.append(f"{zone} {year}: expected {len(expected)} changes, found {len(found)}")
        return problems
    for t, (lo, hi, new_offset) in zip(expected, found):
        if not (lo < t <= hi):
            problems.append(f"{zone} {year}: transition {t} outside grid bracket ({lo}, {hi}]")
        if offset_at(t, rec) != new_offset:
            problems.append(f"{zone} {year}: offset after {t} is {offset_at(t, rec)}, scan saw {new_offset}")
    return problems


def plot(zone: str, year: int, step_minutes: int, out_png: str) -> None:
    np = _need_numpy()
    plt = _need_matplotlib()

    epochs, offsets = scan(zone, year, step_minutes)
    days = (epochs - epochs[0]) / cal.MS_PER_DAY

    fig, ax = plt.subplots(figsize=(10, 4))
    ax.step(days, offsets / 60.0, where="post", color="tab:blue")
    ax.set_title(f"UTC offset in {zone}, {year}")
    ax.set_xlabel("Day of year")
    ax.set_ylabel("Offset (hours)")
    ax.set_ylim(np.min(offsets) / 60.0 - 1, np.max(offsets) / 60.0 + 1)
    ax.grid(True, alpha=0.3)
    plt.tight_layout()
    plt.savefig(out_png, dpi=150)
    plt.close(fig)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scan zone offsets over a year and compare with rule transitions.")
    p.add_argument("--zones", default="America/New_York,Europe/London,Australia/Sydney,America/Santiago,Pacific/Auckland")
    p.add_argument("--year-start", type=int, default=2020)
    p.add_argument("--year-end", type=int, default=2030)
    p.add_argument("--step-minutes", type=int, default=15)
    p.add_argument("--out-png", default=None, help="plot the first zone's first year to this file")
    args = p.parse_args(argv)

    zones = [z.strip() for z in args.zones.split(",") if z.strip()]
    problems: List[str] = []
    for zone in zones:
        for year in range(args.year_start, args.year_end + 1):
            problems.extend(check(zone, year, args.step_minutes))

    for line in problems:
        print(line)

    if args.out_png and zones:
        plot(zones[0], args.year_start, args.step_minutes, args.out_png)
        print(f"Plot saved to {args.out_png}")

    if problems:
        print(f"Offset scan mismatches: {len(problems)}")
        return 1
    print("Offset scan agrees with rule transitions.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
