from __future__ import annotations
import re
from datetime import date, timedelta

from .errors import DateParseError

SUNDAY = 6  # date.weekday(): Monday=0 .. Sunday=6

_DMY_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")


def first_sunday_on_or_after(d: date) -> date:
    """Smallest date >= d falling on a Sunday."""
    return d + timedelta(days=(SUNDAY - d.weekday()) % 7)

def first_sunday_of_advent(year: int, *, month: int = 11, day: int = 21) -> date:
    """First Sunday on or after November 21 of `year`."""
    return first_sunday_on_or_after(date(year, month, day))

def compute_easter(year: int) -> date:
    """Gregorian Easter Sunday (Meeus/Jones/Butcher, integer arithmetic only)."""
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31  # 3 = March, 4 = April
    day = (h + l - 7 * m + 114) % 31 + 1
    return date(year, month, day)


def parse_dmy(s: str) -> date:
    """Parse a strict dd/mm/yyyy string."""
    m = _DMY_RE.match(s.strip())
    if m is None:
        raise DateParseError(f"Unable to parse date {s!r}. Please use dd/mm/yyyy format.")
    d, mo, y = (int(x) for x in m.groups())
    try:
        return date(y, mo, d)
    except ValueError as e:
        raise DateParseError(f"Invalid date {s!r}: {e}") from e

def format_dmy(d: date) -> str:
    return f"{d.day:02d}/{d.month:02d}/{d.year:04d}"
