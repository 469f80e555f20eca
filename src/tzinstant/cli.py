from __future__ import annotations

import argparse
import importlib
import inspect
import json
import logging
import re
import sys
from typing import Optional, Union

from .logging_utils import configure_logging

_EPOCH_RE = re.compile(r"^-?\d+$")


def _value(s: Optional[str]) -> Union[int, str, None]:
    """Integer strings are epochs in milliseconds; anything else is a date string."""
    if s is None:
        return None
    return int(s) if _EPOCH_RE.match(s.strip()) else s


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _add_instant_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--tz", default=None, help="zone name, alias or offset such as -5h (default: host zone)")
    p.add_argument("--format", default="iso", help="output format (iso, iso-short, nice, time, numeric, ...)")
    p.add_argument("--week-start", choices=["sunday", "monday"], default="monday")
    p.add_argument("--dmy", action="store_true", help="read and print numeric dates day-first")
    p.add_argument("--strict", action="store_true", help="raise on an invalid epoch instead of falling back")


def _make_instant(value: Union[int, str, None], args: argparse.Namespace):
    import tzinstant

    kw = dict(
        week_start=tzinstant.WeekStart[args.week_start.upper()],
        date_order=tzinstant.DateOrder.DAY_MONTH_YEAR if args.dmy else tzinstant.DateOrder.MONTH_DAY_YEAR,
    )
    if value is None:
        return tzinstant.now(args.tz, **kw)
    return tzinstant.instant(value, args.tz, silent=not args.strict, **kw)


def cmd_show(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="tzinstant show", description="Render an epoch or date string in a zone")
    p.add_argument("value", nargs="?", help="epoch milliseconds or date string (default: now)")
    _add_instant_args(p)
    args = p.parse_args(argv)

    t = _make_instant(_value(args.value), args)
    print(t.format(args.format))
    return 0


def cmd_zone(argv: list[str]) -> int:
    import tzinstant

    p = argparse.ArgumentParser(prog="tzinstant zone", description="Describe a zone")
    p.add_argument("token", nargs="?", default=None, help="zone name, alias or offset (default: host zone)")
    p.add_argument("--epoch", type=int, default=None, help="epoch milliseconds (default: now)")
    args = p.parse_args(argv)

    desc = tzinstant.zone_info(args.token, args.epoch)
    print(json.dumps(desc.as_dict(), indent=2))
    return 0


def cmd_add(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="tzinstant add", description="Add a count of units to an instant")
    p.add_argument("value", help="epoch milliseconds or date string")
    p.add_argument("count", type=float)
    p.add_argument("unit", help="millisecond, second, minute, quarterhour, hour, day, week, month, ...")
    _add_instant_args(p)
    args = p.parse_args(argv)

    count = int(args.count) if args.count.is_integer() else args.count
    t = _make_instant(_value(args.value), args).add(count, args.unit)
    print(t.format(args.format))
    return 0


def cmd_start_of(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="tzinstant start-of", description="Truncate an instant to a unit")
    p.add_argument("value", help="epoch milliseconds or date string")
    p.add_argument("unit")
    p.add_argument("--end", action="store_true", help="last millisecond of the unit instead")
    _add_instant_args(p)
    args = p.parse_args(argv)

    t = _make_instant(_value(args.value), args)
    t = t.end_of(args.unit) if args.end else t.start_of(args.unit)
    print(t.format(args.format))
    return 0


def cmd_zones(argv: list[str]) -> int:
    import tzinstant

    p = argparse.ArgumentParser(prog="tzinstant zones", description="List zones in the loaded table")
    p.add_argument("--aliases", action="store_true", help="also print alias -> zone pairs")
    args = p.parse_args(argv)

    table = tzinstant.get_table()
    print(f"# table {table.version}")
    for name in table.list():
        print(name)
    if args.aliases:
        for alias, name in sorted(table.aliases().items()):
            print(f"{alias} -> {name}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="tzinstant", description="Timezone-aware instants from the command line.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("show", help="Render an epoch or date string in a zone", add_help=False)
    sub.add_parser("zone", help="Describe a zone (JSON)", add_help=False)
    sub.add_parser("add", help="Add a count of units to an instant", add_help=False)
    sub.add_parser("start-of", help="Truncate an instant to a unit", add_help=False)
    sub.add_parser("zones", help="List known zones", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "offset-scan"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    from .core.errors import TzInstantError

    commands = {
        "show": cmd_show,
        "zone": cmd_zone,
        "add": cmd_add,
        "start-of": cmd_start_of,
        "zones": cmd_zones,
    }
    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "tzinstant.diagnostics.round_trip",
                "offset-scan": "tzinstant.diagnostics.offset_scan",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except TzInstantError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
