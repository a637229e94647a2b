"""pericope public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    compute_easter,
    first_sunday_of_advent,
    first_sunday_on_or_after,
    gospel_set,
    parse_date,
    format_date,
    compute_liturgical_year,
    compute_set,
    liturgical_year_bounds,
    christmas_boundary,
    generate_events,
    events_for_date,
    find_event,
    resolve_date,
)
from .core.types import DayResolution, Event, NoEvent, Readings
from .core.errors import DateParseError, DateRangeError, PericopeError, ReadingsTableError
from .engines.readings import default_readings, load_readings_csv, resolve_readings
from .engines.specs import DEFAULT_SPEC, LectionarySpec

__all__ = [
    "compute_easter",
    "first_sunday_of_advent",
    "first_sunday_on_or_after",
    "gospel_set",
    "parse_date",
    "format_date",
    "compute_liturgical_year",
    "compute_set",
    "liturgical_year_bounds",
    "christmas_boundary",
    "generate_events",
    "events_for_date",
    "find_event",
    "resolve_date",
    "resolve_readings",
    "default_readings",
    "load_readings_csv",
    "DayResolution",
    "Event",
    "NoEvent",
    "Readings",
    "PericopeError",
    "DateParseError",
    "DateRangeError",
    "ReadingsTableError",
    "LectionarySpec",
    "DEFAULT_SPEC",
]
