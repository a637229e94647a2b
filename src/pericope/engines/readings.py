"""
Custom readings table and reading resolution.

The table maps (event label, reading set) to four references
(Old Testament, Lection, Gospel, Preaching). Search order for the table:
  1) PERICOPE_READINGS_TABLE environment variable (path to CSV)
  2) packaged data (pericope.data/custom_readings.csv)

Expected CSV columns:
  label, set, old_testament, lection, gospel, preaching
"""

from __future__ import annotations

import csv
import importlib
import importlib.resources
import logging
import os
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

from pericope.core.errors import ReadingsTableError
from pericope.core.types import Readings

LOGGER = logging.getLogger(__name__)

ENV_VAR = "PERICOPE_READINGS_TABLE"
COLUMNS = ("label", "set", "old_testament", "lection", "gospel", "preaching")

ReadingTable = Mapping[Tuple[str, int], Readings]


def gospel_set(reading_set: int) -> int:
    """Gospel is read one set ahead: 1 -> 2, 2 -> 3, 3 -> 1."""
    return 1 if reading_set == 3 else reading_set + 1


def _read_rows(rows: Iterable[dict], source: str) -> ReadingTable:
    table = {}
    for lineno, row in enumerate(rows, start=2):
        try:
            label = row["label"].strip()
            s = int(row["set"])
        except (KeyError, TypeError, ValueError) as e:
            raise ReadingsTableError(f"{source}:{lineno}: bad label/set ({e})") from e
        if s not in (1, 2, 3):
            raise ReadingsTableError(f"{source}:{lineno}: set must be 1, 2 or 3, got {s}")
        if (label, s) in table:
            raise ReadingsTableError(f"{source}:{lineno}: duplicate entry for ({label!r}, {s})")
        refs = tuple((row.get(c) or "").strip() for c in COLUMNS[2:])
        table[(label, s)] = Readings(*refs, custom=True)
    return MappingProxyType(table)

def _check_header(fieldnames, source: str) -> None:
    missing = [c for c in COLUMNS if c not in (fieldnames or ())]
    if missing:
        raise ReadingsTableError(f"{source}: missing columns {missing}")

def load_readings_csv(path: str | os.PathLike) -> ReadingTable:
    path = Path(path).expanduser()
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            reader = csv.DictReader(f)
            _check_header(reader.fieldnames, str(path))
            return _read_rows(reader, str(path))
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise ReadingsTableError(f"Cannot read readings table {path}: {e}") from e

def _load_packaged() -> ReadingTable:
    pkg = importlib.import_module("pericope.data")
    res = importlib.resources.files(pkg).joinpath("custom_readings.csv")
    source = "pericope.data/custom_readings.csv"
    try:
        with res.open("r", encoding="utf-8", newline="") as f:
            reader = csv.DictReader(f)
            _check_header(reader.fieldnames, source)
            return _read_rows(reader, source)
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise ReadingsTableError(f"Cannot read readings table {source}: {e}") from e


@lru_cache(maxsize=1)
def default_readings() -> ReadingTable:
    """The process-wide readings table (loaded once)."""
    p = os.environ.get(ENV_VAR, "").strip()
    if p:
        LOGGER.debug("loading readings table from $%s=%s", ENV_VAR, p)
        return load_readings_csv(p)
    LOGGER.debug("loading packaged readings table")
    return _load_packaged()


def placeholder_readings(label: str, reading_set: int) -> Readings:
    g = gospel_set(reading_set)
    return Readings(
        f"Old Testament reading for {label} (Set {reading_set})",
        f"Lection reading for {label} (Set {reading_set})",
        f"Gospel reading for {label} (Set {g})",
        f"Preaching reading for {label} (Set {reading_set})",
    )

def resolve_readings(label: str, reading_set: int, table: Optional[ReadingTable] = None) -> Readings:
    """Custom entry for (label, set) if present, placeholders otherwise."""
    if table is None:
        table = default_readings()
    hit = table.get((label, reading_set))
    if hit is not None:
        return hit
    return placeholder_readings(label, reading_set)
