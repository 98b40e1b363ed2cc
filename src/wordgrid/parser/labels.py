"""Parser for label files with %%grid directives.

Uses a simple line-by-line approach: every non-blank line that is not a
``%%`` comment is one label, and ``%%grid <key>: <value>`` lines carry the
grid settings.
"""

from __future__ import annotations

import re

from wordgrid.layout.occupancy import parse_cell
from wordgrid.parser.model import LabelSet

# %%grid key: value
_DIRECTIVE_PATTERN = re.compile(r"^%%grid\s+(\w+)\s*:\s*(.*)$")

# 120x40
_SIZE_PATTERN = re.compile(r"^(\d+)\s*[xX]\s*(\d+)$")


def parse_label_file(text: str) -> LabelSet:
    """Parse a label file into a ``LabelSet``."""
    label_set = LabelSet()

    for lineno, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped:
            continue

        if stripped.startswith("%%grid"):
            _parse_directive(stripped, lineno, label_set)
            continue

        # Regular comments
        if stripped.startswith("%%"):
            continue

        label_set.labels.append(stripped)

    if label_set.start_frac is not None and label_set.end_frac is not None:
        if label_set.start_frac > label_set.end_frac:
            raise ValueError(
                f"Region start {label_set.start_frac} is right of its end "
                f"{label_set.end_frac}"
            )

    return label_set


def _parse_directive(line: str, lineno: int, label_set: LabelSet) -> None:
    """Parse a %%grid directive line."""
    m = _DIRECTIVE_PATTERN.match(line)
    if not m:
        raise ValueError(
            f"Line {lineno}: malformed directive '{line}'. "
            "Expected '%%grid <key>: <value>'."
        )
    key, value = m.group(1).lower(), m.group(2).strip()

    if key == "size":
        size_m = _SIZE_PATTERN.match(value)
        if not size_m:
            raise ValueError(
                f"Line {lineno}: grid size '{value}' must look like 120x40"
            )
        cols, rows = int(size_m.group(1)), int(size_m.group(2))
        if cols <= 0 or rows <= 0:
            raise ValueError(f"Line {lineno}: grid size must be positive")
        label_set.cols, label_set.rows = cols, rows
    elif key == "region":
        parts = [p.strip() for p in value.split("|")]
        if len(parts) != 2:
            raise ValueError(
                f"Line {lineno}: region '{value}' must look like 0.6 | 0.9"
            )
        label_set.start_frac = _fraction(parts[0], lineno)
        label_set.end_frac = _fraction(parts[1], lineno)
    elif key == "cell":
        label_set.cell_size = _positive_int(value, lineno, "cell size")
    elif key == "viewport":
        label_set.viewport_width = float(_positive_int(value, lineno, "viewport width"))
    elif key == "block":
        for token in value.split():
            try:
                label_set.blocked.add(parse_cell(token))
            except ValueError as e:
                raise ValueError(f"Line {lineno}: {e}") from None
    else:
        raise ValueError(
            f"Line {lineno}: unknown directive '{key}'. "
            "Supported: size, region, cell, viewport, block."
        )


def _fraction(value: str, lineno: int) -> float:
    try:
        frac = float(value)
    except ValueError:
        raise ValueError(f"Line {lineno}: '{value}' is not a number") from None
    if not 0.0 <= frac <= 1.0:
        raise ValueError(f"Line {lineno}: fraction {frac} is outside 0..1")
    return frac


def _positive_int(value: str, lineno: int, what: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise ValueError(f"Line {lineno}: {what} '{value}' is not an integer") from None
    if n <= 0:
        raise ValueError(f"Line {lineno}: {what} must be positive")
    return n
