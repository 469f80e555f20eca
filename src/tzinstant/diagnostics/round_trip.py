from __future__ import annotations

import argparse
import random
from typing import List

import tzinstant
from tzinstant.core.types import Unit
from tzinstant.engines.arithmetic import LINEAR_MS

# 1900-01-01 .. 2100-01-01 UTC
EPOCH_MIN = -2208988800000
EPOCH_MAX = 4102444800000


def parse_list(s: str) -> List[str]:
    # "America/New_York,Europe/London" -> ["America/New_York", ...]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    zone: str,
    N: int,
    seed: int,
    *,
    max_failures: int,
    max_count: int = 500,
) -> int:
    """
    Linear units (millisecond through century) must invert exactly under
    add/subtract; every unit must bracket the instant between start_of and
    end_of. Month-based units clamp the date and are only bracket-checked.
    """
    random.seed(seed)
    failures = 0

    for _ in range(N):
        t = tzinstant.instant(random.randint(EPOCH_MIN, EPOCH_MAX), zone)
        n = random.randint(-max_count, max_count)

        for unit in Unit:
            back = t.add(n, unit).subtract(n, unit)
            if unit in LINEAR_MS and back.epoch_ms != t.epoch_ms:
                failures += 1
                print("\nFAIL (add/subtract)")
                print("zone:", zone, "unit:", unit.value, "n:", n)
                print("t:   ", t.iso(), t.epoch_ms)
                print("back:", back.iso(), back.epoch_ms)
                if failures >= max_failures:
                    return failures

            lo, hi = t.start_of(unit), t.end_of(unit)
            if not (lo.epoch_ms <= t.epoch_ms <= hi.epoch_ms) or lo.start_of(unit).epoch_ms != lo.epoch_ms:
                failures += 1
                print("\nFAIL (bracket)")
                print("zone:", zone, "unit:", unit.value)
                print("t:       ", t.iso())
                print("start_of:", lo.iso())
                print("end_of:  ", hi.iso())
                if failures >= max_failures:
                    return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: add -> subtract, start_of <= t <= end_of.")
    p.add_argument("--zones", type=str, default="America/New_York,Europe/London,Australia/Sydney,Asia/Tokyo,Etc/GMT+5",
                   help="Comma-separated zone list.")
    p.add_argument("--N", type=int, default=500, help="Trials per zone.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per zone.")
    args = p.parse_args(argv)

    total_fail = 0
    for zone in parse_list(args.zones):
        print(f"Testing {zone} ...")
        total_fail += roundtrip_test(zone, N=args.N, seed=args.seed, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
