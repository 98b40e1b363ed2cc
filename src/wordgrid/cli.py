"""CLI for wordgrid."""

from __future__ import annotations

import json
import logging
import os
import random
from dataclasses import asdict
from pathlib import Path

import click

from wordgrid import __version__
from wordgrid.layout import (
    compute_region,
    layout_labels,
    plan_label_layout,
    region_for_viewport,
    split_into_two_lines,
    wrap_text_to_lines,
)
from wordgrid.layout.constants import (
    DETAIL_MAX_LINES,
    REGION_END_FRAC,
    REGION_MARGIN,
    REGION_START_FRAC,
)
from wordgrid.layout.region import usable_rows
from wordgrid.parser import LabelSet, parse_label_file
from wordgrid.parser.model import Cell, Placement, Region

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", type=click.Choice(_LOG_LEVELS, case_sensitive=False),
              default=lambda: os.environ.get("WORDGRID_LOG_LEVEL", "WARNING").upper(),
              help="Logging level (default: $WORDGRID_LOG_LEVEL or WARNING)")
def cli(log_level: str) -> None:
    """wordgrid: Place text labels on a character grid without overlaps."""
    logging.basicConfig(level=getattr(logging, log_level.upper()),
                        format="%(levelname)s %(name)s: %(message)s")


def _grid_options(func):
    """Options shared by commands that lay out a label file."""
    options = [
        click.argument("label_file", type=click.Path(exists=True, path_type=Path)),
        click.option("--cols", type=int, default=None,
                     help="Grid width in cells (overrides %%grid size)"),
        click.option("--rows", type=int, default=None,
                     help="Grid height in cells (overrides %%grid size)"),
        click.option("--region", type=(float, float), default=None,
                     metavar="START END",
                     help="Region as fractions of the grid width, e.g. 0.6 0.9"),
        click.option("--viewport", type=float, default=None,
                     help="Viewport width in pixels for the region policy"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _load(label_file: Path) -> LabelSet:
    try:
        return parse_label_file(label_file.read_text())
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)


def _resolve_grid(
    label_set: LabelSet,
    cols: int | None,
    rows: int | None,
    region: tuple[float, float] | None,
    viewport: float | None,
) -> tuple[int, int, Region]:
    """Merge CLI options over file directives and pick the region."""
    cols = cols if cols is not None else label_set.cols
    rows = rows if rows is not None else label_set.rows
    if cols <= 0 or rows <= 0:
        raise click.BadParameter("grid size must be positive")

    if region is not None:
        start, end = region
        if not 0.0 <= start <= end <= 1.0:
            raise click.BadParameter("need 0 <= START <= END <= 1", param_hint="--region")
        return cols, rows, compute_region(cols, start, end)
    if label_set.has_region:
        return cols, rows, compute_region(cols, label_set.start_frac, label_set.end_frac)

    viewport = viewport if viewport is not None else label_set.viewport_width
    if viewport is not None:
        return cols, rows, region_for_viewport(cols, viewport)
    return cols, rows, compute_region(cols, REGION_START_FRAC, REGION_END_FRAC)


@cli.command()
@_grid_options
@click.option("--cell", type=int, default=None,
              help="Cell size in pixels (overrides %%grid cell)")
@click.option("--no-plan", is_flag=True, default=False,
              help="Spread rows by index instead of planning the whole set")
@click.option("--seed", type=int, default=None,
              help="Seed for the letters' entry offsets")
@click.option("--format", "fmt", type=click.Choice(["json", "grid"]), default="json",
              help="Output format (default: json)")
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Write the result to a file instead of stdout")
def place(
    label_file: Path,
    cols: int | None,
    rows: int | None,
    region: tuple[float, float] | None,
    viewport: float | None,
    cell: int | None,
    no_plan: bool,
    seed: int | None,
    fmt: str,
    output: Path | None,
) -> None:
    """Place every label of a label file into the grid."""
    label_set = _load(label_file)
    cols, rows, grid_region = _resolve_grid(label_set, cols, rows, region, viewport)
    cell_size = cell if cell is not None else label_set.cell_size

    result = layout_labels(
        label_set.labels,
        cols,
        rows,
        grid_region,
        cell_size,
        occupied=set(label_set.blocked),
        use_plan=not no_plan,
        rng=random.Random(seed) if seed is not None else None,
    )

    if fmt == "grid":
        text = _format_grid(cols, rows, grid_region, result.placements, label_set.blocked)
    else:
        text = json.dumps(
            {
                "cols": cols,
                "rows": rows,
                "cell_size": cell_size,
                "region": asdict(grid_region),
                "placements": [
                    asdict(p) if p is not None else None for p in result.placements
                ],
            },
            indent=2,
        )

    if output is None:
        click.echo(text)
    else:
        output.write_text(text + "\n")

    for i in result.failed:
        click.echo(f"Could not place label {i}: {label_set.labels[i]!r}", err=True)
    click.echo(f"Placed {result.placed_count}/{len(label_set.labels)} labels "
               f"in {cols}x{rows} grid, region {grid_region.start_col}-"
               f"{grid_region.end_col}", err=output is None)


@cli.command()
@_grid_options
def plan(
    label_file: Path,
    cols: int | None,
    rows: int | None,
    region: tuple[float, float] | None,
    viewport: float | None,
) -> None:
    """Show the planned lines and base row of every label."""
    label_set = _load(label_file)
    cols, rows, grid_region = _resolve_grid(label_set, cols, rows, region, viewport)

    steps = plan_label_layout(label_set.labels, cols, rows, grid_region)
    for i, step in enumerate(steps):
        click.echo(f"[{i}] row {step.base_row}: " + " / ".join(step.lines))


@cli.command()
@_grid_options
def validate(
    label_file: Path,
    cols: int | None,
    rows: int | None,
    region: tuple[float, float] | None,
    viewport: float | None,
) -> None:
    """Validate a label file against its grid and region."""
    label_set = _load(label_file)
    cols, rows, grid_region = _resolve_grid(label_set, cols, rows, region, viewport)

    errors = []
    if not label_set.labels:
        errors.append("No labels found")

    max_line_len = max(1, grid_region.width - 2 * REGION_MARGIN)
    for label in label_set.labels:
        lines, _ = split_into_two_lines(label, max_line_len)
        if any(len(line) > max_line_len for line in lines):
            errors.append(f"Label '{label}' does not fit in two lines of "
                          f"{max_line_len} columns")

    for cell in sorted(label_set.blocked):
        if cell[0] >= cols or cell[1] >= rows:
            errors.append(f"Blocked cell {cell[0]},{cell[1]} is outside the grid")

    if label_set.labels:
        top, bottom = usable_rows(rows)
        steps = plan_label_layout(label_set.labels, cols, rows, grid_region)
        needed = sum(step.height for step in steps)
        if needed > bottom - top + 1:
            errors.append(f"Labels need {needed} rows but only "
                          f"{bottom - top + 1} are usable")

    if errors:
        click.echo("Validation errors:", err=True)
        for err in errors:
            click.echo(f"  - {err}", err=True)
        raise SystemExit(1)

    click.echo(f"Valid: {len(label_set.labels)} labels, "
               f"{cols}x{rows} grid, "
               f"region {grid_region.start_col}-{grid_region.end_col}, "
               f"{len(label_set.blocked)} blocked cells")


@cli.command()
@click.argument("text")
@click.option("--cols", type=int, default=40, help="Maximum line width (default: 40)")
@click.option("--max-lines", type=int, default=DETAIL_MAX_LINES,
              help=f"Maximum number of lines (default: {DETAIL_MAX_LINES})")
def wrap(text: str, cols: int, max_lines: int) -> None:
    """Word-wrap TEXT into a capped number of lines."""
    for line in wrap_text_to_lines(text, cols, max_lines):
        click.echo(line)


def _format_grid(
    cols: int,
    rows: int,
    region: Region,
    placements: list[Placement | None],
    blocked: set[Cell],
) -> str:
    """Draw the grid as text: glyphs, '#' for blocked cells, '|' at region edges."""
    canvas = [["." for _ in range(cols)] for _ in range(rows)]
    for row in canvas:
        for col in (region.start_col, region.end_col):
            if 0 <= col < cols:
                row[col] = "|"
    for col, row in blocked:
        if 0 <= col < cols and 0 <= row < rows:
            canvas[row][col] = "#"
    for placement in placements:
        if placement is None:
            continue
        for meta in placement.lines:
            for i, ch in enumerate(meta.text):
                col = meta.start_col + i
                if 0 <= col < cols and 0 <= meta.row < rows:
                    canvas[meta.row][col] = ch if ch != " " else "_"
    return "\n".join("".join(row) for row in canvas)
