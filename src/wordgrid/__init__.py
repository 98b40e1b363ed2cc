"""wordgrid: collision-free placement of short labels on a character grid."""

__version__ = "0.1.0"

from wordgrid.layout import (
    can_fit_in_region,
    compute_region,
    layout_labels,
    place_word_into_grid,
    plan_label_layout,
    split_into_two_lines,
    wrap_text_to_lines,
)
from wordgrid.parser.model import (
    LayoutStep,
    Letter,
    LineMeta,
    Placement,
    PlaceOptions,
    Region,
)

__all__ = [
    "__version__",
    "LayoutStep",
    "Letter",
    "LineMeta",
    "PlaceOptions",
    "Placement",
    "Region",
    "can_fit_in_region",
    "compute_region",
    "layout_labels",
    "place_word_into_grid",
    "plan_label_layout",
    "split_into_two_lines",
    "wrap_text_to_lines",
]
