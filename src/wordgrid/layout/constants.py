"""Layout constants used across layout modules.

Centralizes the grid band, margins, search bounds and region policy
used by region.py, planner.py, engine.py and reveal.py.
"""

# ---------------------------------------------------------------------------
# Grid defaults
# ---------------------------------------------------------------------------
DEFAULT_COLS: int = 120
"""Grid width in character cells when none is given."""

DEFAULT_ROWS: int = 40
"""Grid height in character cells when none is given."""

DEFAULT_CELL_SIZE: int = 24
"""Pixel size of one square grid cell (also the glyph font size)."""

# ---------------------------------------------------------------------------
# Vertical band
# ---------------------------------------------------------------------------
TOP_ROW: int = 2
"""First row labels may use."""

BOTTOM_INSET: int = 3
"""Rows kept free at the bottom of the grid."""

MIN_BOTTOM_ROW: int = 3
"""Lower bound on the last usable row for very short grids."""

LINE_GAP_ROWS: int = 1
"""Row distance between the first and second line of a wrapped label."""

# ---------------------------------------------------------------------------
# Horizontal fitting
# ---------------------------------------------------------------------------
REGION_MARGIN: int = 1
"""Columns kept empty inside each edge of the region."""

SWEEP_MIN_COLS: int = 40
"""Minimum reach of the outward horizontal search, in columns.

The search reach is ``max(region width, SWEEP_MIN_COLS)``.
"""

# ---------------------------------------------------------------------------
# Letter entry offsets
# ---------------------------------------------------------------------------
ENTRY_OFFSET_MIN: float = 100.0
"""Smallest distance (px) above the top edge a letter starts from."""

ENTRY_OFFSET_SPAN: float = 300.0
"""Random spread (px) added on top of ENTRY_OFFSET_MIN."""

# ---------------------------------------------------------------------------
# Region policy
# ---------------------------------------------------------------------------
REGION_START_FRAC: float = 0.58
"""Left edge of the label region as a fraction of grid width."""

REGION_END_FRAC: float = 0.96
"""Right edge of the label region as a fraction of grid width."""

NARROW_VIEWPORT_PX: float = 900.0
"""Viewports narrower than this use the narrow region fractions."""

NARROW_START_FRAC: float = 0.52
"""Left region edge on narrow viewports."""

NARROW_END_FRAC: float = 0.96
"""Right region edge on narrow viewports."""

# ---------------------------------------------------------------------------
# Paragraph wrapping
# ---------------------------------------------------------------------------
DETAIL_MAX_LINES: int = 6
"""Default line cap for wrapped detail copy."""
