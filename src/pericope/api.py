from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple, Union

from .core.time import (
    compute_easter,
    first_sunday_of_advent,
    first_sunday_on_or_after,
    format_dmy,
    parse_dmy,
)
from .core.types import DayResolution, Event, NoEvent
from .engines.events import (
    ChristmasBoundary,
    christmas_boundary as _christmas_boundary,
    generate_events as _generate_events,
    liturgical_year_bounds as _liturgical_year_bounds,
)
from .engines.readings import ReadingTable, gospel_set, resolve_readings
from .engines.specs import DEFAULT_SPEC, LectionarySpec


def parse_date(s: str) -> date:
    return parse_dmy(s)

def format_date(d: date) -> str:
    return format_dmy(d)

def compute_liturgical_year(d: date, *, spec: LectionarySpec = DEFAULT_SPEC) -> int:
    """Year in which the liturgical year containing `d` began."""
    m, day = spec.advent_anchor
    if d >= first_sunday_of_advent(d.year, month=m, day=day):
        return d.year
    return d.year - 1

def compute_set(lit_year: int, *, spec: LectionarySpec = DEFAULT_SPEC) -> int:
    """Reading set in {1, 2, 3}; Advent 2024 -> set I."""
    # Python's % is already Euclidean for a positive modulus.
    return (lit_year - spec.set_anchor_year) % spec.set_cycle + 1

def liturgical_year_bounds(lit_year: int, *, spec: LectionarySpec = DEFAULT_SPEC) -> Tuple[date, date]:
    return _liturgical_year_bounds(lit_year, spec)

def christmas_boundary(lit_year: int, *, spec: LectionarySpec = DEFAULT_SPEC) -> ChristmasBoundary:
    return _christmas_boundary(lit_year, spec)

def generate_events(lit_year: int, *, spec: LectionarySpec = DEFAULT_SPEC) -> List[Event]:
    return _generate_events(lit_year, spec)

def events_for_date(d: date, *, spec: LectionarySpec = DEFAULT_SPEC) -> List[Event]:
    return _generate_events(compute_liturgical_year(d, spec=spec), spec)


def find_event(events: List[Event], d: date) -> Tuple[Optional[Event], bool]:
    """
    (event, exact) for `d` within a date-sorted event list: the event on `d`
    if there is one, else the latest event before `d`, else (None, False).
    """
    prior: Optional[Event] = None
    for ev in events:
        if ev.date == d:
            return ev, True
        if ev.date > d:
            break
        prior = ev
    return prior, False

def resolve_date(
    d: date,
    *,
    readings: Optional[ReadingTable] = None,
    spec: LectionarySpec = DEFAULT_SPEC,
) -> Union[DayResolution, NoEvent]:
    """Resolve an arbitrary date to its liturgical occasion and readings."""
    lit_year = compute_liturgical_year(d, spec=spec)
    rset = compute_set(lit_year, spec=spec)
    ev, exact = find_event(_generate_events(lit_year, spec), d)
    if ev is None:
        return NoEvent(d, lit_year, rset)
    return DayResolution(
        date=d,
        liturgical_year=lit_year,
        reading_set=rset,
        event=ev,
        readings=resolve_readings(ev.label, rset, readings),
        exact=exact,
    )
