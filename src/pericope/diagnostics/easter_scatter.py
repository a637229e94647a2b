#!/usr/bin/env python3
from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple

import argparse
import importlib

import pericope


def _optional(modname: str):
    try:
        return importlib.import_module(modname)
    except ImportError as e:
        raise RuntimeError(f'{modname} is needed for this plot. Install: pip install "pericope[diagnostics]"') from e


def day_of_year(d: date) -> int:
    return (d - date(d.year, 1, 1)).days + 1


def days_after_march_21(d: date) -> int:
    """Easter offset from the ecclesiastical equinox, Mar 22 = 1."""
    return (d - date(d.year, 3, 21)).days


def build_series(np, start_year: int, end_year: int, *, metric: str) -> Tuple["np.ndarray", "np.ndarray"]:
    years = np.arange(start_year, end_year + 1, dtype=int)
    y = np.empty_like(years, dtype=float)

    for i, Y in enumerate(years):
        d = pericope.compute_easter(int(Y))
        if metric == "doy":
            y[i] = float(day_of_year(d))
        elif metric == "since-equinox":
            y[i] = float(days_after_march_21(d))
        else:
            raise ValueError("metric must be 'doy' or 'since-equinox'")

    return years, y


def epiphany_weeks_kept(np, years) -> "np.ndarray":
    """Number of Epiphany Sundays surviving Pre-Easter overrides, per liturgical year."""
    out = np.empty_like(years, dtype=float)
    for i, Y in enumerate(years):
        evs = pericope.generate_events(int(Y) - 1)
        out[i] = float(sum(1 for ev in evs if ev.label.startswith("epiphany")))
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Easter dates and surviving Epiphany Sundays.")
    p.add_argument("--start-year", type=int, default=1900)
    p.add_argument("--end-year", type=int, default=2100)
    p.add_argument("--outbase", default="easter_scatter", help="Output base name (writes .png)")
    p.add_argument(
        "--metric",
        choices=("since-equinox", "doy"),
        default="since-equinox",
        help="Y-axis metric (default: days after Mar 21).",
    )
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _optional("numpy")
    _optional("matplotlib").use("Agg")
    plt = _optional("matplotlib.pyplot")

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "legend.fontsize": 10,
        "axes.linewidth": 0.8,
    })

    x, y = build_series(np, args.start_year, args.end_year, metric=args.metric)
    ep = epiphany_weeks_kept(np, x)

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    sc = ax.scatter(x, y, s=14, c=ep, cmap="viridis", linewidths=0.0, alpha=0.8)
    cb = fig.colorbar(sc, ax=ax)
    cb.set_label("Epiphany Sundays kept")

    ax.set_xlabel("Gregorian year")
    if args.metric == "doy":
        ax.set_ylabel("Day-of-year (Jan 1 = 1)")
    else:
        ax.set_ylabel("Days after March 21 (Mar 22 = 1)")
    ax.set_title("Easter Sunday and the length of Epiphany-tide")

    fig.savefig(args.outbase + ".png", dpi=200)
    print(f"Saved: {args.outbase}.png")
    print(f"Easter range: {int(y.min())}..{int(y.max())}  mean {float(np.mean(y)):.2f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
