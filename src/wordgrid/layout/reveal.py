"""Incremental reveal of labels, one placement per step.

The queue owns the occupied set across steps. It has no clock: whatever
drives the animation calls ``step()`` on its own cadence, and a label
that cannot be placed yet is simply retried on the next step.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable

from wordgrid.layout.engine import place_word_into_grid
from wordgrid.layout.occupancy import occupied_from_letters
from wordgrid.layout.planner import plan_label_layout
from wordgrid.parser.model import Cell, LayoutStep, Letter, Placement, PlaceOptions, Region

logger = logging.getLogger(__name__)


class RevealQueue:
    """Reveal a fixed list of labels into a grid one at a time."""

    def __init__(
        self,
        labels: list[str],
        cols: int,
        rows: int,
        region: Region,
        cell_size: float,
        occupied: set[Cell] | None = None,
        plan: bool = True,
        rng: random.Random | None = None,
    ) -> None:
        self.labels = list(labels)
        self.cell_size = cell_size
        self.occupied: set[Cell] = occupied if occupied is not None else set()
        self.placed: list[Placement] = []
        self.use_plan = plan
        self.rng = rng
        self._plan: list[LayoutStep] = []
        self.resize(cols, rows, region)

    @property
    def pending(self) -> int:
        return len(self.labels) - len(self.placed)

    @property
    def done(self) -> bool:
        return self.pending == 0

    def resize(self, cols: int, rows: int, region: Region) -> None:
        """Change the grid geometry used by later steps and re-plan."""
        self.cols = cols
        self.rows = rows
        self.region = region
        if self.use_plan:
            self._plan = plan_label_layout(self.labels, cols, rows, region)

    def step(self) -> Placement | None:
        """Try to place the next label.

        Returns the new placement, or ``None`` when everything is placed
        or the next label does not fit yet.
        """
        if self.done:
            return None
        index = len(self.placed)
        if self._plan:
            opts = PlaceOptions.from_step(self._plan[index], rng=self.rng)
        else:
            opts = PlaceOptions(rng=self.rng)
        placement = place_word_into_grid(
            self.labels[index],
            self.cols,
            self.rows,
            self.occupied,
            self.cell_size,
            index,
            len(self.labels),
            self.region,
            opts,
        )
        if placement is None:
            logger.info("Label %d '%s' not placeable yet", index, self.labels[index])
            return None
        self.placed.append(placement)
        return placement

    def rebuild(self, letters: Iterable[Letter]) -> None:
        """Replace the occupied set with one built from live glyph positions."""
        self.occupied = occupied_from_letters(letters, self.cell_size)

    def letters(self) -> list[Letter]:
        """All glyphs placed so far, in placement order."""
        return [letter for p in self.placed for letter in p.letters]
