"""
pericope.engines.events
-----------------------
Builds the ordered event list of one liturgical year from the two anchors
(First Sunday of Advent, Easter) and the week-offset rules of a LectionarySpec.

Rule groups are inserted in priority order 1..7 into an EventMap. On a date
collision the candidate with the higher priority replaces the existing event;
with equal priority the later insertion wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, Iterator, List, Optional, Tuple

from pericope.core.errors import DateRangeError
from pericope.core.time import compute_easter, first_sunday_of_advent, first_sunday_on_or_after
from pericope.core.types import Event
from pericope.engines.specs import DEFAULT_SPEC, LectionarySpec

LOGGER = logging.getLogger(__name__)

WEEK = timedelta(days=7)

PRIORITY_ADVENT = 1
PRIORITY_CHRISTMAS = 2
PRIORITY_EPIPHANY = 3
PRIORITY_PRE_EASTER = 4
PRIORITY_EASTER = 5
PRIORITY_PENTECOST = 6
PRIORITY_TRINITY = 7

# Year Y runs into Y + 1 (next Advent, Easter); `date` stops at 9999.
MIN_LIT_YEAR = 1
MAX_LIT_YEAR = 9998


def series_label(base: str, i: int, sign: str = "+") -> str:
    """'advent', 'advent + 1', ... ; index 0 is the bare name."""
    return base if i == 0 else f"{base} {sign} {i}"


class EventMap:
    """
    Date -> Event map restricted to the half-open window [start, end).

    `insert` is the only way in: out-of-window candidates are dropped, and a
    candidate landing on an occupied date replaces the occupant only when its
    priority is >= the occupant's.
    """

    def __init__(self, start: date, end: date):
        if end <= start:
            raise ValueError(f"Empty window [{start}, {end})")
        self.start = start
        self.end = end
        self._by_date: Dict[date, Event] = {}

    def __len__(self) -> int:
        return len(self._by_date)

    def __contains__(self, d: object) -> bool:
        return d in self._by_date

    def __iter__(self) -> Iterator[Event]:
        return iter(self.events())

    def get(self, d: date) -> Optional[Event]:
        return self._by_date.get(d)

    def insert(self, ev: Event) -> bool:
        """Insert-or-override by priority. Returns True if `ev` is now stored."""
        if not 1 <= ev.priority <= 7:
            raise ValueError(f"priority must be in 1..7, got {ev.priority}")
        if not (self.start <= ev.date < self.end):
            return False
        existing = self._by_date.get(ev.date)
        if existing is not None:
            if ev.priority < existing.priority:
                LOGGER.debug("%s: keeping %r over %r", ev.date, existing.label, ev.label)
                return False
            LOGGER.debug("%s: %r overrides %r", ev.date, ev.label, existing.label)
        self._by_date[ev.date] = ev
        return True

    def events(self) -> List[Event]:
        return sorted(self._by_date.values(), key=lambda ev: ev.date)


@dataclass(frozen=True)
class ChristmasBoundary:
    christmas_1: date
    new_year_candidate: date
    new_year_emitted: bool
    epiphany_start: date


def check_lit_year(lit_year: int) -> None:
    if not MIN_LIT_YEAR <= lit_year <= MAX_LIT_YEAR:
        raise DateRangeError(
            f"Liturgical year {lit_year} is out of range ({MIN_LIT_YEAR}..{MAX_LIT_YEAR})"
        )

def liturgical_year_bounds(lit_year: int, spec: LectionarySpec = DEFAULT_SPEC) -> Tuple[date, date]:
    check_lit_year(lit_year)
    m, d = spec.advent_anchor
    return (
        first_sunday_of_advent(lit_year, month=m, day=d),
        first_sunday_of_advent(lit_year + 1, month=m, day=d),
    )

def christmas_boundary(lit_year: int, spec: LectionarySpec = DEFAULT_SPEC) -> ChristmasBoundary:
    """Decide whether the week after 'christmas + 1' is 'new year' or the start of Epiphany."""
    check_lit_year(lit_year)
    christmas = date(lit_year, *spec.christmas)
    christmas_1 = first_sunday_on_or_after(christmas + timedelta(days=1))
    candidate = christmas_1 + WEEK
    threshold = date(lit_year + 1, *spec.new_year_threshold)
    if candidate >= threshold:
        return ChristmasBoundary(christmas_1, candidate, True, first_sunday_on_or_after(threshold))
    return ChristmasBoundary(christmas_1, candidate, False, candidate)


def _advent(start: date, spec: LectionarySpec) -> Iterator[Event]:
    for i in range(spec.advent_weeks):
        yield Event(series_label("advent", i), start + i * WEEK, "purple", PRIORITY_ADVENT)

def _christmas(lit_year: int, boundary: ChristmasBoundary, spec: LectionarySpec) -> Iterator[Event]:
    christmas = date(lit_year, *spec.christmas)
    yield Event("christmas", christmas, "white", PRIORITY_CHRISTMAS)
    yield Event("christmas + 1", boundary.christmas_1, "white", PRIORITY_CHRISTMAS)
    if boundary.new_year_emitted:
        yield Event("new year", boundary.new_year_candidate, "white", PRIORITY_CHRISTMAS)
    else:
        LOGGER.debug("withholding 'new year' on %s; Epiphany starts there", boundary.new_year_candidate)

def _epiphany(boundary: ChristmasBoundary, spec: LectionarySpec) -> Iterator[Event]:
    for i in range(spec.epiphany_weeks):
        color = "white" if i == 0 else "green"
        yield Event(series_label("epiphany", i), boundary.epiphany_start + i * WEEK, color, PRIORITY_EPIPHANY)

def _pre_easter(easter: date, spec: LectionarySpec) -> Iterator[Event]:
    n = spec.pre_easter_weeks
    for j in range(1, n + 1):
        color = spec.pre_easter_colors[n - j]
        yield Event(f"easter - {j}", easter - j * WEEK, color, PRIORITY_PRE_EASTER)

def _easter(easter: date, spec: LectionarySpec) -> Iterator[Event]:
    for i in range(spec.easter_weeks):
        yield Event(series_label("easter", i), easter + i * WEEK, "white", PRIORITY_EASTER)

def _trinity(pentecost: date, spec: LectionarySpec) -> Iterator[Event]:
    start = pentecost + WEEK
    for i, color in enumerate(spec.trinity_colors):
        yield Event(series_label("trinity", i), start + i * WEEK, color, PRIORITY_TRINITY)


def build_event_map(lit_year: int, spec: LectionarySpec = DEFAULT_SPEC) -> EventMap:
    start, end = liturgical_year_bounds(lit_year, spec)
    emap = EventMap(start, end)

    boundary = christmas_boundary(lit_year, spec)
    easter = compute_easter(lit_year + 1)
    pentecost = easter + timedelta(days=spec.pentecost_offset_days)

    groups = (
        _advent(start, spec),
        _christmas(lit_year, boundary, spec),
        _epiphany(boundary, spec),
        _pre_easter(easter, spec),
        _easter(easter, spec),
        iter([Event("pentecost", pentecost, "red", PRIORITY_PENTECOST)]),
        _trinity(pentecost, spec),
    )
    for group in groups:
        for ev in group:
            emap.insert(ev)
    return emap

def generate_events(lit_year: int, spec: LectionarySpec = DEFAULT_SPEC) -> List[Event]:
    """All events of liturgical year `lit_year`, date-sorted, one per date."""
    return build_event_map(lit_year, spec).events()
