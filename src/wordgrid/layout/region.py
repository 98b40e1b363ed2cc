"""Region calculation: fractional bounds to inclusive grid columns."""

from __future__ import annotations

import math

from wordgrid.layout.constants import (
    BOTTOM_INSET,
    MIN_BOTTOM_ROW,
    NARROW_END_FRAC,
    NARROW_START_FRAC,
    NARROW_VIEWPORT_PX,
    REGION_END_FRAC,
    REGION_START_FRAC,
    TOP_ROW,
)
from wordgrid.parser.model import Region


def clamp_int(value: int, lo: int, hi: int) -> int:
    """Clamp *value* into ``[lo, hi]``; *lo* wins when the range is empty."""
    return max(lo, min(hi, value))


def compute_region(cols: int, start_frac: float, end_frac: float) -> Region:
    """Convert fractions of the grid width into an inclusive column range.

    Fractions are not validated; values outside ``[0, 1]`` give a region
    outside the grid.
    """
    return Region(
        start_col=math.floor(cols * start_frac),
        end_col=math.floor(cols * end_frac),
    )


def region_for_viewport(
    cols: int,
    viewport_width: float,
    start_frac: float = REGION_START_FRAC,
    end_frac: float = REGION_END_FRAC,
) -> Region:
    """Pick the label region for a viewport width in pixels.

    Narrow viewports widen the region leftward so labels still fit.
    """
    if viewport_width < NARROW_VIEWPORT_PX:
        start_frac, end_frac = NARROW_START_FRAC, NARROW_END_FRAC
    return compute_region(cols, start_frac, end_frac)


def usable_rows(rows: int) -> tuple[int, int]:
    """Return the ``(top, bottom)`` rows labels may occupy."""
    return TOP_ROW, max(MIN_BOTTOM_ROW, rows - BOTTOM_INSET)
