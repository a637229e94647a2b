from __future__ import annotations

import argparse
import importlib
import logging
import re
import sys
from typing import Optional

from .core.errors import PericopeError
from .core.types import DayResolution, NoEvent


_DATE_RE = re.compile(r"^\d{1,2}/\d{1,2}/\d{4}$")


def _run_tool(modpath: str, argv: list[str]) -> int:
    """Run `main(argv)` of a diagnostics module; its return value is the exit status."""
    mod = importlib.import_module(modpath)
    return int(mod.main(argv) or 0)


def render(res: DayResolution | NoEvent) -> str:
    """Console rendering of a resolved date."""
    from pericope.api import format_date

    if isinstance(res, NoEvent):
        return (
            f"No pericope event found for {format_date(res.date)} "
            f"in the liturgical year {res.liturgical_year}."
        )

    lines = []
    if res.exact:
        lines.append(f"Date: {format_date(res.date)}")
    else:
        lines.append(f"Note: {res.note}")
    lines += [
        f"Liturgical Year: {res.liturgical_year}",
        f"Set: {res.reading_set}",
        f"Pericope: {res.label}",
        f"Altar Color: {res.altar_color}",
        "Readings:",
        f"  Old Testament: {res.readings.old_testament}",
        f"  Lection:       {res.readings.lection}",
        f"  Gospel:        {res.readings.gospel}",
        f"  Preaching:     {res.readings.preaching}",
    ]
    return "\n".join(lines)


def cmd_day(argv: list[str]) -> int:
    import pericope
    from pericope.diagnostics.year_table import print_events

    p = argparse.ArgumentParser(prog="pericope day", description="Date -> liturgical pericope and readings")
    p.add_argument("date", help="DD/MM/YYYY")
    p.add_argument("--readings", default=None, help="CSV readings table (default: packaged table)")
    p.add_argument("--debug", action="store_true", help="debug logging and the full event list")
    args = p.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        d = pericope.parse_date(args.date)
        table = pericope.load_readings_csv(args.readings) if args.readings else None
        res = pericope.resolve_date(d, readings=table)
    except PericopeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(render(res))
    if args.debug:
        print()
        print_events(pericope.generate_events(res.liturgical_year))
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `pericope DD/MM/YYYY ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="pericope", description="Liturgical pericope calendar CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Date -> liturgical pericope and readings", add_help=False)
    sub.add_parser("year", help="List the events of one liturgical year", add_help=False)
    sub.add_parser("easter-table", help="Advent/Easter/Pentecost table per year", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["invariants", "easter-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "year":
        return _run_tool("pericope.diagnostics.year_table", rest)

    if args.cmd == "easter-table":
        return _run_tool("pericope.diagnostics.easter_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "invariants": "pericope.diagnostics.invariants",
            "easter-scatter": "pericope.diagnostics.easter_scatter",
        }
        return _run_tool(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
