"""Data model for grid label placement."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from wordgrid.layout.constants import (
    DEFAULT_CELL_SIZE,
    DEFAULT_COLS,
    DEFAULT_ROWS,
    SWEEP_MIN_COLS,
)

Cell = tuple[int, int]
"""A grid cell as ``(col, row)``."""


@dataclass(frozen=True)
class Region:
    """Inclusive column range of the grid reserved for labels."""

    start_col: int
    end_col: int

    @property
    def width(self) -> int:
        """Number of columns in the region (never less than 1)."""
        return max(1, self.end_col - self.start_col + 1)


@dataclass
class LayoutStep:
    """Planned lines and top row for one label, not yet collision-checked."""

    lines: list[str]
    base_row: int

    @property
    def height(self) -> int:
        return 2 if len(self.lines) == 2 else 1


@dataclass
class Letter:
    """One visible glyph of a placed label, in pixel space."""

    char: str
    x: float
    y: float
    ty: float  # Entry offset for the animator, always above y
    locked: bool = False


@dataclass
class LineMeta:
    """Final anchor of one physical line of a label."""

    text: str
    start_col: int
    row: int


@dataclass
class Placement:
    """Result of placing one label into the grid.

    ``letters`` skips spaces; ``lines`` covers every column of every line,
    spaces included, so ``cells()`` is exactly what the label occupies.
    """

    text: str
    letters: list[Letter] = field(default_factory=list)
    lines: list[LineMeta] = field(default_factory=list)

    def cells(self) -> set[Cell]:
        """Return every grid cell claimed by this placement."""
        return {
            (meta.start_col + i, meta.row)
            for meta in self.lines
            for i in range(len(meta.text))
        }

    def rows(self) -> list[int]:
        return [meta.row for meta in self.lines]


@dataclass
class PlaceOptions:
    """Optional overrides for a single placement call.

    ``lines`` and ``base_row`` normally come from a planned ``LayoutStep``.
    ``sweep_cols`` is the lower bound on how far the horizontal search may
    move a line; ``rng`` drives the letters' entry offsets.
    """

    lines: list[str] | None = None
    base_row: int | None = None
    sweep_cols: int = SWEEP_MIN_COLS
    rng: random.Random | None = None

    @classmethod
    def from_step(cls, step: LayoutStep, **kwargs) -> PlaceOptions:
        return cls(lines=list(step.lines), base_row=step.base_row, **kwargs)


@dataclass
class LabelSet:
    """Labels plus the grid settings read from a label file."""

    labels: list[str] = field(default_factory=list)
    cols: int = DEFAULT_COLS
    rows: int = DEFAULT_ROWS
    cell_size: int = DEFAULT_CELL_SIZE
    start_frac: float | None = None
    end_frac: float | None = None
    viewport_width: float | None = None
    blocked: set[Cell] = field(default_factory=set)

    @property
    def has_region(self) -> bool:
        return self.start_frac is not None and self.end_frac is not None
