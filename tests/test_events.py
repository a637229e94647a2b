# tests/test_events.py

import pytest
from datetime import date, timedelta

from pericope.core.errors import DateRangeError
from pericope.core.types import Event
from pericope.engines.events import EventMap, christmas_boundary, generate_events, liturgical_year_bounds
from pericope.engines.specs import DEFAULT_SPEC


def by_label(events):
    return {ev.label: ev for ev in events}


def test_year_2024_layout():
    evs = generate_events(2024)
    m = by_label(evs)

    assert evs[0] == Event("advent", date(2024, 11, 24), "purple", 1)
    assert m["advent + 4"].date == date(2024, 12, 22)
    assert m["christmas"].date == date(2024, 12, 25)
    assert m["christmas + 1"].date == date(2024, 12, 29)

    # New Year candidate (05/01/2025) is below the Jan 6 threshold: Epiphany starts there.
    assert "new year" not in m
    assert m["epiphany"] == Event("epiphany", date(2025, 1, 5), "white", 3)
    assert m["epiphany + 5"].date == date(2025, 2, 9)
    assert m["epiphany + 5"].altar_color == "green"

    # Easter 2025 is 20/04; "easter - 9" (16/02) displaces "epiphany + 6".
    assert "epiphany + 6" not in m
    assert m["easter - 9"] == Event("easter - 9", date(2025, 2, 16), "green", 4)
    assert m["easter"].date == date(2025, 4, 20)
    assert m["pentecost"] == Event("pentecost", date(2025, 6, 8), "red", 6)
    assert m["trinity"].date == date(2025, 6, 15)
    assert m["trinity + 5"].altar_color == "red"

    # trinity + 23 would fall on Advent 2025 (23/11/2025) and is cut off.
    assert evs[-1].label == "trinity + 22"
    assert evs[-1].date == date(2025, 11, 16)
    assert len(evs) == 53

def test_year_2025_pre_easter_overrides_epiphany():
    m = by_label(generate_events(2025))
    assert m["epiphany + 3"].date == date(2026, 1, 25)
    for lost in ("epiphany + 4", "epiphany + 5", "epiphany + 6"):
        assert lost not in m
    assert m["easter - 9"].date == date(2026, 2, 1)
    assert m["easter - 1"].date == date(2026, 3, 29)
    assert m["trinity + 24"].date == date(2026, 11, 15)
    assert "trinity + 25" not in m

def test_year_2022_christmas_overrides_advent():
    m = by_label(generate_events(2022))
    assert "advent + 4" not in m
    assert m["christmas"].date == date(2022, 12, 25)
    assert m["christmas + 1"].date == date(2023, 1, 1)
    # "new year" is emitted on 08/01/2023, then Epiphany (priority 3) claims the same date.
    assert "new year" not in m
    assert m["epiphany"].date == date(2023, 1, 8)

def test_pre_easter_colors():
    m = by_label(generate_events(2030))
    colors = [m[f"easter - {j}"].altar_color for j in range(9, 0, -1)]
    assert colors == ["green", "green", "white", "purple", "purple", "purple", "purple", "white", "white"]
    assert m["easter - 1"].altar_color == "white"
    assert m["easter - 3"].altar_color == "purple"
    assert m["easter - 7"].altar_color == "white"

def test_trinity_colors():
    for i, c in enumerate(DEFAULT_SPEC.trinity_colors):
        if i == 0:
            assert c == "white"
        elif i == 5:
            assert c == "red"
        else:
            assert c == "green"
    assert DEFAULT_SPEC.trinity_weeks == 28


def test_generated_years_invariants():
    for y in range(1583, 2400):
        evs = generate_events(y)
        start, end = liturgical_year_bounds(y)
        assert evs[0].label == "advent" and evs[0].date == start
        dates = [ev.date for ev in evs]
        assert all(a < b for a, b in zip(dates, dates[1:]))
        assert dates[-1] < end
        assert (dates[-1] - dates[0]).days < 365 + 7
        labels = [ev.label for ev in evs]
        assert len(labels) == len(set(labels))

def test_christmas_boundary_exclusive():
    seen = set()
    for y in range(1900, 2100):
        b = christmas_boundary(y)
        threshold = date(y + 1, 1, 6)
        withheld_start = (not b.new_year_emitted) and b.epiphany_start == b.new_year_candidate
        assert b.new_year_emitted != withheld_start
        assert b.new_year_emitted == (b.new_year_candidate >= threshold)
        assert b.christmas_1 + timedelta(days=7) == b.new_year_candidate
        seen.add(b.new_year_emitted)
    assert seen == {True, False}

def test_christmas_boundary_on_threshold():
    # 2024-12-25 falls on a Wednesday: candidate 2025-01-05, one day short.
    assert christmas_boundary(2024).new_year_emitted is False
    # 2023-12-31 is a Sunday: christmas + 1, and the candidate is exactly Jan 7 (>= Jan 6).
    b = christmas_boundary(2023)
    assert b.christmas_1 == date(2023, 12, 31)
    assert b.new_year_emitted is True
    assert b.epiphany_start == date(2024, 1, 7)


class TestEventMap:
    def setup_method(self):
        self.m = EventMap(date(2025, 1, 1), date(2025, 2, 1))
        self.d = date(2025, 1, 12)

    def test_window_is_half_open(self):
        assert self.m.insert(Event("a", date(2025, 1, 1), "green", 1))
        assert not self.m.insert(Event("b", date(2025, 2, 1), "green", 1))
        assert not self.m.insert(Event("c", date(2024, 12, 31), "green", 1))
        assert len(self.m) == 1

    def test_higher_priority_wins(self):
        self.m.insert(Event("low", self.d, "green", 2))
        assert self.m.insert(Event("high", self.d, "red", 5))
        assert not self.m.insert(Event("lower", self.d, "white", 4))
        assert self.m.get(self.d).label == "high"

    def test_equal_priority_later_wins(self):
        self.m.insert(Event("first", self.d, "green", 3))
        assert self.m.insert(Event("second", self.d, "white", 3))
        assert self.m.get(self.d).label == "second"

    def test_sorted_output(self):
        for day in (20, 5, 12):
            self.m.insert(Event(f"d{day}", date(2025, 1, day), "green", 1))
        assert [ev.label for ev in self.m.events()] == ["d5", "d12", "d20"]

    def test_priority_range(self):
        with pytest.raises(ValueError):
            self.m.insert(Event("x", self.d, "green", 0))
        with pytest.raises(ValueError):
            self.m.insert(Event("x", self.d, "green", 8))

    def test_empty_window(self):
        with pytest.raises(ValueError):
            EventMap(date(2025, 1, 1), date(2025, 1, 1))


@pytest.mark.parametrize("y", [0, -5, 9999])
def test_unsupported_years(y):
    with pytest.raises(DateRangeError):
        generate_events(y)
    with pytest.raises(DateRangeError):
        christmas_boundary(y)

def test_extreme_supported_years():
    assert generate_events(1)[0].date == date(1, 11, 25)
    assert generate_events(9998)[-1].date < liturgical_year_bounds(9998)[1]
