"""Placement engine: puts one label into the grid without overlaps.

Each line of the label starts centered in the region. A blocked line is
first moved sideways (left before right) and, failing that, the whole
label is moved up or down (up before down) keeping the centered column.
The search order makes the result deterministic for a given occupied set.
"""

from __future__ import annotations

import logging
import math
import random
from collections.abc import MutableSet, Set

from wordgrid.layout.constants import (
    ENTRY_OFFSET_MIN,
    ENTRY_OFFSET_SPAN,
    LINE_GAP_ROWS,
    REGION_MARGIN,
    TOP_ROW,
)
from wordgrid.layout.fit import can_fit_in_region
from wordgrid.layout.region import clamp_int, usable_rows
from wordgrid.layout.wrap import split_into_two_lines
from wordgrid.parser.model import (
    Cell,
    Letter,
    LineMeta,
    Placement,
    PlaceOptions,
    Region,
)

logger = logging.getLogger(__name__)


def place_word_into_grid(
    text: str,
    cols: int,
    rows: int,
    occupied: MutableSet[Cell],
    cell_size: float,
    index: int,
    total: int,
    region: Region,
    opts: PlaceOptions | None = None,
) -> Placement | None:
    """Place *text* as label *index* of *total* inside *region*.

    On success every cell of every line (spaces included) is added to
    *occupied* and the placement is returned. ``None`` means the input
    was empty or no free position exists; *occupied* is then untouched.
    """
    if not text or cols <= 0 or rows <= 0:
        return None
    opts = opts or PlaceOptions()
    margin = REGION_MARGIN

    if opts.lines:
        lines = [str(line) for line in opts.lines[:2]]
    else:
        lines, _ = split_into_two_lines(text, max(1, region.width - margin * 2))

    top, bottom = usable_rows(rows)
    base_row = _initial_base_row(opts.base_row, index, total, top, bottom)
    if len(lines) == 2 and base_row + 1 > bottom:
        base_row = max(TOP_ROW, bottom - 1)

    reach = max(region.width, opts.sweep_cols)
    starts: list[int] = []
    for li, line in enumerate(lines):
        length = len(line)
        row_offset = li * LINE_GAP_ROWS
        min_start = region.start_col + margin
        max_start = region.end_col - margin - length + 1
        ideal = region.start_col + (region.width - length) // 2
        start_col = clamp_int(ideal, min_start, min(max_start, cols - length))
        row = base_row + row_offset

        # Grids of 3 rows or fewer put the band past the last row
        if 0 <= row < rows:
            if can_fit_in_region(length, start_col, row, occupied, region, margin, cols):
                starts.append(start_col)
                continue

            shifted = _sweep_columns(
                length,
                start_col,
                row,
                occupied,
                region,
                cols,
                min_start,
                max_start,
                reach,
            )
            if shifted is not None:
                logger.debug("'%s' line %d moved to column %d", text, li, shifted)
                starts.append(shifted)
                continue

        placed_lines = [(len(lines[j]), starts[j]) for j in range(li)]
        moved = _sweep_rows(
            length,
            start_col,
            li,
            len(lines),
            placed_lines,
            base_row,
            occupied,
            region,
            cols,
            rows,
            top,
            bottom,
        )
        if moved is None:
            logger.debug("'%s' has no free position in region %s", text, region)
            return None
        logger.debug("'%s' moved from row %d to row %d", text, base_row, moved)
        base_row = moved
        starts.append(start_col)

    return _claim(text, lines, starts, base_row, occupied, cell_size, opts.rng)


def _initial_base_row(
    requested: int | None,
    index: int,
    total: int,
    top: int,
    bottom: int,
) -> int:
    """Pick the label's first row before any collision search."""
    if requested is not None:
        return clamp_int(requested, top, bottom)
    bands = max(1, total)
    if bands == 1:
        return (top + bottom) // 2
    # Halves round up, not to even
    row = top + math.floor(index * (bottom - top) / (bands - 1) + 0.5)
    return clamp_int(row, top, bottom)


def _sweep_columns(
    length: int,
    start_col: int,
    row: int,
    occupied: Set[Cell],
    region: Region,
    cols: int,
    min_start: int,
    max_start: int,
    reach: int,
) -> int | None:
    """Search outward from *start_col* on one row, left before right."""
    for off in range(1, reach + 1):
        for cand in (start_col - off, start_col + off):
            if min_start <= cand <= max_start and can_fit_in_region(
                length, cand, row, occupied, region, REGION_MARGIN, cols
            ):
                return cand
    return None


def _sweep_rows(
    length: int,
    start_col: int,
    line_index: int,
    n_lines: int,
    placed_lines: list[tuple[int, int]],
    base_row: int,
    occupied: Set[Cell],
    region: Region,
    cols: int,
    rows: int,
    top: int,
    bottom: int,
) -> int | None:
    """Search for a new base row, up before down, at the centered column.

    Lines already accepted keep their columns and move with the label, so
    a candidate row must also leave them free.
    """

    def fits(n: int, col: int, row: int) -> bool:
        return can_fit_in_region(n, col, row, occupied, region, REGION_MARGIN, cols)

    last_offset = (n_lines - 1) * LINE_GAP_ROWS
    for off in range(1, rows + 1):
        for cand in (base_row - off, base_row + off):
            if n_lines == 2 and (cand < top or cand + 1 > bottom):
                continue
            if cand < 0 or cand + last_offset >= rows:
                continue
            if not fits(length, start_col, cand + line_index * LINE_GAP_ROWS):
                continue
            if all(
                fits(n, col, cand + j * LINE_GAP_ROWS)
                for j, (n, col) in enumerate(placed_lines)
            ):
                return cand
    return None


def _claim(
    text: str,
    lines: list[str],
    starts: list[int],
    base_row: int,
    occupied: MutableSet[Cell],
    cell_size: float,
    rng: random.Random | None,
) -> Placement:
    """Build the placement and mark its cells occupied."""
    rng = rng or random
    placement = Placement(text=text)
    for li, (line, start_col) in enumerate(zip(lines, starts)):
        row = base_row + li * LINE_GAP_ROWS
        placement.lines.append(LineMeta(text=line, start_col=start_col, row=row))
        for i, ch in enumerate(line):
            col = start_col + i
            if ch != " ":
                placement.letters.append(
                    Letter(
                        char=ch,
                        x=col * cell_size,
                        y=row * cell_size,
                        ty=-(ENTRY_OFFSET_MIN + rng.random() * ENTRY_OFFSET_SPAN),
                    )
                )
            occupied.add((col, row))
    return placement
