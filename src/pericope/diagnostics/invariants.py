from __future__ import annotations

import argparse
from datetime import date, timedelta
from typing import List

import pericope
from pericope.engines.events import MAX_LIT_YEAR, MIN_LIT_YEAR


def check_year(Y: int) -> List[str]:
    """Return a list of violated properties for liturgical year Y (empty if all hold)."""
    errs: List[str] = []

    adv = pericope.first_sunday_of_advent(Y)
    if not (date(Y, 11, 21) <= adv <= date(Y, 11, 27)) or adv.weekday() != 6:
        errs.append(f"advent anchor {adv} outside Nov 21-27 or not a Sunday")

    easter = pericope.compute_easter(Y + 1)
    if not (date(Y + 1, 3, 22) <= easter <= date(Y + 1, 4, 25)) or easter.weekday() != 6:
        errs.append(f"easter {easter} outside Mar 22-Apr 25 or not a Sunday")

    events = pericope.generate_events(Y)
    start, end = pericope.liturgical_year_bounds(Y)
    if not events:
        return errs + ["no events generated"]
    if events[0].date != start or events[0].label != "advent":
        errs.append(f"first event is {events[0].label!r} on {events[0].date}, expected 'advent' on {start}")
    for a, b in zip(events, events[1:]):
        if not a.date < b.date:
            errs.append(f"dates not strictly increasing: {a.date} -> {b.date}")
    if events[-1].date >= end:
        errs.append(f"last event {events[-1].date} not before next Advent {end}")
    if (events[-1].date - events[0].date) >= timedelta(days=365 + 7):
        errs.append("event span exceeds 371 days")
    labels = [ev.label for ev in events]
    if len(set(labels)) != len(labels):
        errs.append("duplicate labels")

    b = pericope.christmas_boundary(Y)
    epiphany_at_candidate = (not b.new_year_emitted) and b.epiphany_start == b.new_year_candidate
    if b.new_year_emitted == epiphany_at_candidate:
        errs.append(f"christmas/epiphany boundary: new year emitted={b.new_year_emitted}, epiphany start {b.epiphany_start}")

    return errs


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Check generator invariants over a range of liturgical years.")
    p.add_argument("--from-year", type=int, default=1583)
    p.add_argument("--to-year", type=int, default=4099)
    p.add_argument("--max-failures", type=int, default=10, help="Stop after this many failing years.")
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")
    if not (MIN_LIT_YEAR <= args.from_year and args.to_year <= MAX_LIT_YEAR):
        raise SystemExit(f"years must lie in {MIN_LIT_YEAR}..{MAX_LIT_YEAR}")

    failures = 0
    for Y in range(args.from_year, args.to_year + 1):
        errs = check_year(Y)
        if errs:
            failures += 1
            print(f"\nFAIL {Y}")
            for e in errs:
                print("  ", e)
            if failures >= args.max_failures:
                break

    if failures == 0:
        print(f"All invariants hold for {args.from_year}..{args.to_year}.")
        return 0

    print(f"Years with violations: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
