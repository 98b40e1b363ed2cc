"""Tests for the label-file parser."""

import pytest

from wordgrid.layout.constants import DEFAULT_CELL_SIZE, DEFAULT_COLS, DEFAULT_ROWS
from wordgrid.parser.labels import parse_label_file


def test_parse_labels_only():
    label_set = parse_label_file("Lead Generation\n\nCRM Integration\n")
    assert label_set.labels == ["Lead Generation", "CRM Integration"]
    assert label_set.cols == DEFAULT_COLS
    assert label_set.rows == DEFAULT_ROWS
    assert label_set.cell_size == DEFAULT_CELL_SIZE
    assert not label_set.has_region
    assert label_set.blocked == set()


def test_parse_skips_comments():
    label_set = parse_label_file("%% a comment\nAlpha\n  %% indented comment\nBravo\n")
    assert label_set.labels == ["Alpha", "Bravo"]


def test_parse_strips_whitespace():
    label_set = parse_label_file("   Prospecting & Pipeline   \n")
    assert label_set.labels == ["Prospecting & Pipeline"]


def test_parse_directives():
    label_set = parse_label_file(
        "%%grid size: 40x20\n"
        "%%grid region: 0.6 | 0.9\n"
        "%%grid cell: 18\n"
        "%%grid viewport: 640\n"
        "%%grid block: 1,2 3,4\n"
        "Alpha\n"
    )
    assert (label_set.cols, label_set.rows) == (40, 20)
    assert (label_set.start_frac, label_set.end_frac) == (0.6, 0.9)
    assert label_set.has_region
    assert label_set.cell_size == 18
    assert label_set.viewport_width == 640.0
    assert label_set.blocked == {(1, 2), (3, 4)}
    assert label_set.labels == ["Alpha"]


def test_parse_block_accumulates():
    label_set = parse_label_file("%%grid block: 1,1\n%%grid block: 2,2\n")
    assert label_set.blocked == {(1, 1), (2, 2)}


@pytest.mark.parametrize(
    "text, match",
    [
        ("%%grid size: big\n", "120x40"),
        ("%%grid size: 0x20\n", "positive"),
        ("%%grid region: 0.6\n", "0.6 \\| 0.9"),
        ("%%grid region: 0.6 | lots\n", "not a number"),
        ("%%grid region: 0.6 | 1.5\n", "outside 0..1"),
        ("%%grid region: 0.9 | 0.6\n", "right of its end"),
        ("%%grid cell: -4\n", "positive"),
        ("%%grid cell: wide\n", "not an integer"),
        ("%%grid block: 1;2\n", "col,row"),
        ("%%grid colour: green\n", "unknown directive"),
        ("%%gridsize 40x20\n", "malformed directive"),
    ],
)
def test_parse_errors(text, match):
    with pytest.raises(ValueError, match=match):
        parse_label_file(text)


def test_parse_error_names_line():
    with pytest.raises(ValueError, match="Line 3"):
        parse_label_file("Alpha\nBravo\n%%grid cell: nope\n")
