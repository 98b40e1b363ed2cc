"""Helpers for the occupied-cell set shared between placement calls."""

from __future__ import annotations

import math
from collections.abc import Iterable

from wordgrid.parser.model import Cell, Letter, Placement


def placement_cells(placement: Placement) -> set[Cell]:
    """Return every cell a placement claims, spaces included."""
    return placement.cells()


def occupied_from_letters(letters: Iterable[Letter], cell_size: float) -> set[Cell]:
    """Rebuild an occupied set from glyph pixel positions.

    Only visible glyphs are counted, so the gaps left by spaces in earlier
    placements become free again. Glyphs with non-finite coordinates
    (mid-animation) are ignored.
    """
    occupied: set[Cell] = set()
    for letter in letters:
        if not (math.isfinite(letter.x) and math.isfinite(letter.y)):
            continue
        occupied.add((math.floor(letter.x / cell_size), math.floor(letter.y / cell_size)))
    return occupied


def parse_cell(text: str) -> Cell:
    """Parse a ``"col,row"`` key into a cell."""
    parts = text.strip().split(",")
    if len(parts) != 2:
        raise ValueError(f"Cell '{text}' must be written as col,row")
    try:
        col, row = int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"Cell '{text}' must contain two integers") from None
    if col < 0 or row < 0:
        raise ValueError(f"Cell '{text}' must not be negative")
    return col, row


def format_cell(cell: Cell) -> str:
    return f"{cell[0]},{cell[1]}"
