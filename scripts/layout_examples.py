#!/usr/bin/env python3
"""Batch lay out every example label file and print a grid preview.

Usage:
    python scripts/layout_examples.py [--seed N]
"""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from wordgrid.cli import _format_grid  # noqa: E402
from wordgrid.layout import compute_region, layout_labels, region_for_viewport  # noqa: E402
from wordgrid.layout.constants import REGION_END_FRAC, REGION_START_FRAC  # noqa: E402
from wordgrid.parser import parse_label_file  # noqa: E402

EXAMPLES_DIR = project_root / "examples"
LABEL_FILES = sorted(EXAMPLES_DIR.glob("*.txt"))


def layout_file(path: Path, seed: int | None = None) -> tuple[str, list[str], str]:
    """Parse and lay out one label file.

    Returns (name, list_of_issues, grid_preview).
    """
    name = path.stem
    try:
        label_set = parse_label_file(path.read_text())
    except ValueError as e:
        return name, [f"PARSE ERROR: {e}"], ""

    cols, rows = label_set.cols, label_set.rows
    if label_set.has_region:
        region = compute_region(cols, label_set.start_frac, label_set.end_frac)
    elif label_set.viewport_width is not None:
        region = region_for_viewport(cols, label_set.viewport_width)
    else:
        region = compute_region(cols, REGION_START_FRAC, REGION_END_FRAC)

    result = layout_labels(
        label_set.labels,
        cols,
        rows,
        region,
        label_set.cell_size,
        occupied=set(label_set.blocked),
        rng=random.Random(seed),
    )
    issues = [f"unplaced: {label_set.labels[i]!r}" for i in result.failed]
    preview = _format_grid(cols, rows, region, result.placements, label_set.blocked)
    return name, issues, preview


def main():
    parser = argparse.ArgumentParser(description="Batch lay out example label files")
    parser.add_argument("--seed", type=int, default=0, help="Seed for entry offsets")
    args = parser.parse_args()

    print(f"Laying out {len(LABEL_FILES)} files from {EXAMPLES_DIR}/")
    any_errors = False

    for path in LABEL_FILES:
        name, issues, preview = layout_file(path, seed=args.seed)
        status = "OK" if not issues else "ISSUES"
        if any("ERROR" in i for i in issues):
            status = "FAIL"
            any_errors = True

        print(f"\n== {name} [{status}]")
        for issue in issues:
            print(f"    - {issue}")
        if preview:
            print(preview)

    if any_errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
