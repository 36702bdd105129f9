"""Pivot tables of profit and loss: CSV input, totals, live simulation and cell styling."""

from __future__ import annotations

import copy
import csv
import random
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, NamedTuple, Sequence

RGBA = tuple[int, int, int, int]

TOTAL = "Total"

POSITIVE: RGBA = (0x1E, 0xB9, 0x80, 255)
NEGATIVE: RGBA = (0xFF, 0x68, 0x59, 255)
WHITE: RGBA = (255, 255, 255, 255)
BACKGROUND: RGBA = (18, 18, 18, 255)

FADE_BELOW = 25
FADED_ALPHA = 25

OVERLAY_RECT = (280, 25, 350, 380)
OVERLAY_COLOR: RGBA = (0, 0, 0xFF, 0xFF)
OVERLAY_STROKE = 5

DEFAULT_FILE = "example.csv"
SIM_INTERVAL = 0.1

SECTORS: tuple[str, ...] = (
    "Technology",
    "Telecommunications",
    "Health Care",
    "Banks",
    "Financial Services",
    "Insurance",
    "Real Estate",
    "Automobiles and Parts",
    "Consumer Products and Services",
    "Media",
    "Retail",
    "Travel and Leisure",
    "Food, Beverage and Tobacco",
    "Personal Care, Drug and Grocery Stores",
    "Construction and Materials",
    "Industrial Goods and Services",
    "Basic Resources",
    "Chemicals",
    "Energy",
    "Utilities",
)

MARKETS: tuple[str, ...] = (
    "United Kingdom",
    "Germany",
    "France",
    "Switzerland",
    "Netherlands",
    "Spain",
    "Italy",
    "Sweden",
    "Belgium",
    "Denmark",
    "Finland",
    "Austria",
    "Poland",
)

Cells = dict[str, dict[str, float]]


@dataclass(frozen=True)
class Record:
    """One value booked against a row and a column."""

    row_name: str
    col_name: str
    value: float


class PivotTable(NamedTuple):
    """Row names, column names and cells of a pivot, totals included."""

    rows: list[str]
    cols: list[str]
    cells: Cells


def read_csv(path: str | Path) -> list[Record]:
    """Read records from a CSV file; only lines of three fields become records.

    Every line must have as many fields as the first one. A value that is
    not a number raises ValueError.
    """
    records = []
    expected_fields: int | None = None
    with open(path, newline="", encoding="utf-8") as handle:
        reader = csv.reader(handle)
        for line in reader:
            if not line:
                continue
            if expected_fields is None:
                expected_fields = len(line)
            elif len(line) != expected_fields:
                raise ValueError(
                    f"record on line {reader.line_num}: wrong number of fields"
                )
            if len(line) == 3:
                row_name, col_name, raw = line
                try:
                    value = float(raw)
                except ValueError as exc:
                    raise ValueError(
                        f"line {reader.line_num}: cannot convert {raw!r} to float"
                    ) from exc
                records.append(Record(row_name, col_name, value))
    return records


def pivot(records: Iterable[Record]) -> PivotTable:
    """Sum records into cells and add a Total column, a Total row and a grand total.

    Row and column names keep the order in which they first appear.
    """
    cells: Cells = {}
    row_sums: dict[str, float] = {}
    col_sums: dict[str, float] = {}
    grand_total = 0.0

    for record in records:
        row = cells.setdefault(record.row_name, {})
        row[record.col_name] = row.get(record.col_name, 0.0) + record.value
        row_sums[record.row_name] = row_sums.get(record.row_name, 0.0) + record.value
        col_sums[record.col_name] = col_sums.get(record.col_name, 0.0) + record.value
        grand_total += record.value

    rows = list(row_sums)
    cols = list(col_sums)

    for name in rows:
        cells[name][TOTAL] = row_sums[name]
    total_row = cells.setdefault(TOTAL, {})
    for name in cols:
        total_row[name] = col_sums[name]
    total_row[TOTAL] = grand_total

    if TOTAL not in rows:
        rows.append(TOTAL)
    if TOTAL not in cols:
        cols.append(TOTAL)
    return PivotTable(rows, cols, cells)


def sort_names(names: Iterable[str]) -> list[str]:
    """Sort names alphabetically, with Total always last."""
    return sorted(names, key=lambda name: (name == TOTAL, name))


def format_value(value: float) -> str:
    """Format a value with one decimal and comma thousands separators."""
    return f"{value:,.1f}"


def cell_color(value: float) -> RGBA:
    """Return the text colour of a value: green above zero, orange below, faded when small."""
    if value > 0:
        color = POSITIVE
    elif value < 0:
        color = NEGATIVE
    else:
        color = WHITE
    if abs(value) < FADE_BELOW:
        color = (*color[:3], FADED_ALPHA)
    return color


def init_data(rows: Iterable[str], cols: Iterable[str]) -> Cells:
    """Return a table of zeros over the given rows and columns, each with a Total added."""
    row_names = [*rows, TOTAL]
    col_names = [*cols, TOTAL]
    return {row: {col: 0.0 for col in col_names} for row in row_names}


@dataclass
class LiveTable:
    """A table of sector and market values, updated by simulation from another thread."""

    sectors: Sequence[str] = SECTORS
    markets: Sequence[str] = MARKETS
    data: Cells = field(init=False)
    _lock: threading.Lock = field(init=False, repr=False, default_factory=threading.Lock)

    def __post_init__(self) -> None:
        self.data = init_data(self.sectors, self.markets)

    def simulate(self, n: int, rng: random.Random | None = None) -> None:
        """Book n + 1 random normal values to random cells, keeping totals in step."""
        rng = rng if rng is not None else random.Random()
        for _ in range(n + 1):
            sector = rng.choice(self.sectors)
            market = rng.choice(self.markets)
            pnl = rng.gauss(0.0, 1.0)
            with self._lock:
                self.data[sector][market] += pnl
                self.data[TOTAL][market] += pnl
                self.data[sector][TOTAL] += pnl
                self.data[TOTAL][TOTAL] += pnl

    def snapshot(self) -> Cells:
        """Return a copy of all cells, taken under the lock."""
        with self._lock:
            return copy.deepcopy(self.data)

    def value(self, row: str, col: str) -> float:
        """Return one cell; an unknown row or column reads as zero."""
        with self._lock:
            return self.data.get(row, {}).get(col, 0.0)