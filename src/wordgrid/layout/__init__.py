"""Grid layout subpackage.

Public API:
- compute_region / region_for_viewport: label region from fractions
- split_into_two_lines / wrap_text_to_lines: text wrapping
- can_fit_in_region: single-line fit check
- plan_label_layout: up-front vertical plan for a label set
- place_word_into_grid: collision-free placement of one label
- layout_labels: plan and place a whole label set
- RevealQueue: one-label-per-step reveal
"""

from wordgrid.layout.engine import place_word_into_grid
from wordgrid.layout.fit import can_fit_in_region
from wordgrid.layout.passes import LayoutResult, layout_labels
from wordgrid.layout.planner import plan_label_layout
from wordgrid.layout.region import compute_region, region_for_viewport
from wordgrid.layout.reveal import RevealQueue
from wordgrid.layout.wrap import split_into_two_lines, wrap_text_to_lines

__all__ = [
    "LayoutResult",
    "RevealQueue",
    "can_fit_in_region",
    "compute_region",
    "layout_labels",
    "place_word_into_grid",
    "plan_label_layout",
    "region_for_viewport",
    "split_into_two_lines",
    "wrap_text_to_lines",
]
