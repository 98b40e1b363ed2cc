"""Up-front vertical planning for a whole set of labels.

Every label is split into at most two lines for the region width, then
the blocks are spread top-to-bottom across the usable band with evenly
sized gaps. The plan is an intent only: the placement engine still
checks each step against the occupied set.
"""

from __future__ import annotations

import logging

from wordgrid.layout.constants import REGION_MARGIN
from wordgrid.layout.region import usable_rows
from wordgrid.layout.wrap import split_into_two_lines
from wordgrid.parser.model import LayoutStep, Region

logger = logging.getLogger(__name__)


def plan_label_layout(
    labels: list[str],
    cols: int,
    rows: int,
    region: Region,
    margin: int = REGION_MARGIN,
) -> list[LayoutStep]:
    """Assign lines and a base row to every label.

    Strategy:
    1. Split each label at ``region.width - 2 * margin`` columns; a wrapped
       label is a 2-row block, otherwise 1 row.
    2. Share the rows left over after all blocks evenly between the gaps,
       giving any remainder to the earliest gaps.
    3. If the last block still overruns the bottom row, shift every block
       up by the overrun, never above the top row.

    *cols* is accepted for symmetry with the placement engine; the column
    budget comes from *region*.
    """
    if not labels:
        return []

    top, bottom = usable_rows(rows)
    available = max(0, bottom - top + 1)
    max_line_len = max(1, region.width - margin * 2)

    line_data = [split_into_two_lines(str(label), max_line_len)[0][:2] for label in labels]
    heights = [2 if len(lines) == 2 else 1 for lines in line_data]

    gaps = len(labels) - 1
    leftover = max(0, available - sum(heights))
    gap_rows = leftover // gaps if gaps else 0
    extra = leftover % gaps if gaps else 0

    plan: list[LayoutStep] = []
    cursor = top
    for i, lines in enumerate(line_data):
        plan.append(LayoutStep(lines=lines, base_row=cursor))
        if i < gaps:
            cursor += heights[i] + gap_rows + (1 if extra > 0 else 0)
            if extra > 0:
                extra -= 1

    overflow = plan[-1].base_row + heights[-1] - 1 - bottom
    if overflow > 0:
        logger.debug("Plan overruns bottom row by %d, shifting up", overflow)
        for step in plan:
            step.base_row = max(top, step.base_row - overflow)

    return plan
