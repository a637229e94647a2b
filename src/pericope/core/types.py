from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Literal, Optional

from .time import format_dmy

AltarColor = Literal["purple", "white", "green", "red"]

@dataclass(frozen=True)
class Event:
    label: str
    date: date
    altar_color: AltarColor
    priority: int  # 1..7, tie-break on date collisions

@dataclass(frozen=True)
class Readings:
    old_testament: str
    lection: str
    gospel: str
    preaching: str
    custom: bool = False

    def as_tuple(self) -> tuple[str, str, str, str]:
        return (self.old_testament, self.lection, self.gospel, self.preaching)

@dataclass(frozen=True)
class DayResolution:
    """A date resolved to the liturgical occasion that governs it."""
    date: date
    liturgical_year: int
    reading_set: int
    event: Event
    readings: Readings
    exact: bool

    @property
    def label(self) -> str:
        return self.event.label

    @property
    def altar_color(self) -> str:
        return self.event.altar_color

    @property
    def event_date(self) -> date:
        return self.event.date

    @property
    def note(self) -> Optional[str]:
        if self.exact:
            return None
        return (
            f"{format_dmy(self.date)} is not an exact event date. "
            f"Using readings for {self.event.label} ({format_dmy(self.event.date)})."
        )

@dataclass(frozen=True)
class NoEvent:
    date: date
    liturgical_year: int
    reading_set: int
