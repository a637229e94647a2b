"""
pericope.engines.specs
----------------------
Pure data description of the lectionary rule set. The event generator reads
every anchor, offset and colour table from a `LectionarySpec`; `DEFAULT_SPEC`
is the one rule set the engine ships with.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Tuple


@dataclass(frozen=True)
class LectionarySpec:
    name: str = "default"

    # First Sunday of Advent: first Sunday on or after this month/day.
    advent_anchor: Tuple[int, int] = (11, 21)
    advent_weeks: int = 5

    # Christmas is fixed; the "new year" candidate is kept only on/after this
    # month/day of the following civil year.
    christmas: Tuple[int, int] = (12, 25)
    new_year_threshold: Tuple[int, int] = (1, 6)

    epiphany_weeks: int = 7

    # Indexed by 9 - j for the event "easter - j".
    pre_easter_colors: Tuple[str, ...] = (
        "green", "green", "white", "purple", "purple", "purple", "purple", "white", "white",
    )

    easter_weeks: int = 7
    pentecost_offset_days: int = 49

    # Index i of the series "trinity + i".
    trinity_colors: Tuple[str, ...] = (
        ("white",) + ("green",) * 4 + ("red",) + ("green",) * 22
    )

    # Liturgical year mapped to reading set I.
    set_anchor_year: int = 2024
    set_cycle: int = 3

    def __post_init__(self) -> None:
        if self.set_cycle < 1:
            raise ValueError("set_cycle must be >= 1")
        if self.advent_weeks < 1:
            raise ValueError("advent_weeks must be >= 1")

    @property
    def pre_easter_weeks(self) -> int:
        return len(self.pre_easter_colors)

    @property
    def trinity_weeks(self) -> int:
        return len(self.trinity_colors)

    def tweak(self, **changes: Any) -> "LectionarySpec":
        return replace(self, **changes)


DEFAULT_SPEC = LectionarySpec()
