"""Fit checking for a single line of text on one grid row."""

from __future__ import annotations

from collections.abc import Set

from wordgrid.parser.model import Cell, Region


def can_fit_in_region(
    length: int,
    start_col: int,
    row: int,
    occupied: Set[Cell],
    region: Region,
    margin: int,
    cols: int,
) -> bool:
    """Check if a line of *length* cells can start at ``(start_col, row)``.

    The line must stay inside the region minus *margin* on each side,
    inside the grid width, and must not touch any occupied cell. Nothing
    is mutated; callers claim cells themselves after a successful fit.
    """
    end_col = start_col + length - 1
    if start_col < region.start_col + margin:
        return False
    if end_col > region.end_col - margin:
        return False
    if start_col < 0 or end_col >= cols:
        return False
    return not any((start_col + i, row) in occupied for i in range(length))
