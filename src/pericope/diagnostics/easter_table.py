from __future__ import annotations

from datetime import date, timedelta
import argparse

import pericope
from pericope.engines.events import MAX_LIT_YEAR, MIN_LIT_YEAR


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print Advent / Easter / Pentecost anchors and reading set per liturgical year."
    )
    p.add_argument("--from-year", type=int, default=2020)
    p.add_argument("--to-year", type=int, default=2040)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    args = p.parse_args(argv)

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")
    if not (MIN_LIT_YEAR <= Y0 and Y1 <= MAX_LIT_YEAR):
        raise SystemExit(f"years must lie in {MIN_LIT_YEAR}..{MAX_LIT_YEAR}")

    headers = ["Year", "Set", "Advent", "Epiphany", "Easter", "Pentecost", "NewYear"]
    colw = [5, 3] + [max(10 if args.dates == "iso" else 5, len(h)) for h in headers[2:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        start, _ = pericope.liturgical_year_bounds(Y)
        b = pericope.christmas_boundary(Y)
        easter = pericope.compute_easter(Y + 1)
        cells = [
            str(Y),
            str(pericope.compute_set(Y)),
            fmt(start),
            fmt(b.epiphany_start),
            fmt(easter),
            fmt(easter + timedelta(days=pericope.DEFAULT_SPEC.pentecost_offset_days)),
            "yes" if b.new_year_emitted else "-",
        ]
        print("  ".join(c.ljust(w) for c, w in zip(cells, colw)))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
