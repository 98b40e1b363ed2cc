"""Whole-pass driver: plan a label set once, then place every label in order."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from wordgrid.layout.engine import place_word_into_grid
from wordgrid.layout.planner import plan_label_layout
from wordgrid.parser.model import Cell, Placement, PlaceOptions, Region

logger = logging.getLogger(__name__)


@dataclass
class LayoutResult:
    """Outcome of one layout pass."""

    placements: list[Placement | None] = field(default_factory=list)
    occupied: set[Cell] = field(default_factory=set)

    @property
    def failed(self) -> list[int]:
        """Indices of labels that could not be placed."""
        return [i for i, p in enumerate(self.placements) if p is None]

    @property
    def placed_count(self) -> int:
        return sum(1 for p in self.placements if p is not None)


def layout_labels(
    labels: list[str],
    cols: int,
    rows: int,
    region: Region,
    cell_size: float,
    occupied: set[Cell] | None = None,
    use_plan: bool = True,
    rng: random.Random | None = None,
) -> LayoutResult:
    """Place all *labels* into one grid, earlier labels first.

    *occupied* is extended in place when given; otherwise a fresh set is
    used. With *use_plan* the planner's lines and rows seed each call,
    otherwise rows are spread by index alone.
    """
    result = LayoutResult(occupied=occupied if occupied is not None else set())
    plan = plan_label_layout(labels, cols, rows, region) if use_plan else []

    for i, label in enumerate(labels):
        if plan:
            opts = PlaceOptions.from_step(plan[i], rng=rng)
        else:
            opts = PlaceOptions(rng=rng)
        placement = place_word_into_grid(
            label, cols, rows, result.occupied, cell_size, i, len(labels), region, opts
        )
        result.placements.append(placement)

    logger.info(
        "Placed %d of %d labels in %dx%d grid", result.placed_count, len(labels), cols, rows
    )
    return result
