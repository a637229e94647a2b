from __future__ import annotations

import argparse
import sys
from typing import List

import pericope
from pericope.core.types import Event


def print_events(events: List[Event]) -> None:
    headers = ("Date", "Weekday", "Pericope", "Color", "Prio")
    rows = [
        (pericope.format_date(ev.date), f"{ev.date:%a}", ev.label, ev.altar_color, str(ev.priority))
        for ev in events
    ]
    colw = [max(len(h), *(len(r[i]) for r in rows)) if rows else len(h) for i, h in enumerate(headers)]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))
    for r in rows:
        print("  ".join(c.ljust(w) for c, w in zip(r, colw)))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print all events of one liturgical year.")
    p.add_argument("year", type=int, help="Liturgical year (year in which Advent begins)")
    args = p.parse_args(argv)

    try:
        start, end = pericope.liturgical_year_bounds(args.year)
        events = pericope.generate_events(args.year)
    except pericope.PericopeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(
        f"Liturgical year {args.year}  Set {pericope.compute_set(args.year)}  "
        f"({pericope.format_date(start)} .. {pericope.format_date(end)})  {len(events)} events"
    )
    print_events(events)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
