"""Tests for the CLI entry points."""

import json
from pathlib import Path

from click.testing import CliRunner

from wordgrid.cli import cli

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"
SERVICES = EXAMPLES_DIR / "services.txt"
NARROW = EXAMPLES_DIR / "narrow.txt"


def test_place_writes_json(tmp_path):
    """place command writes every placement as JSON."""
    out = tmp_path / "layout.json"
    runner = CliRunner()
    result = runner.invoke(cli, ["place", str(SERVICES), "-o", str(out), "--seed", "1"])
    assert result.exit_code == 0, result.output
    assert "Placed 6/6 labels" in result.output

    data = json.loads(out.read_text())
    assert (data["cols"], data["rows"], data["cell_size"]) == (120, 40, 24)
    assert data["region"] == {"start_col": 69, "end_col": 115}
    assert len(data["placements"]) == 6
    first = data["placements"][0]
    assert first["text"] == "Lead Generation"
    assert first["lines"][0]["row"] == 2
    assert all(not letter["locked"] for letter in first["letters"])


def test_place_grid_preview():
    """place --format grid draws glyphs, region edges and blocked cells."""
    runner = CliRunner()
    result = runner.invoke(cli, ["place", str(NARROW), "--format", "grid"])
    assert result.exit_code == 0, result.output
    assert "ABCDEFGHIJKLMNOP" in result.output
    assert "|" in result.output
    assert "###" in result.output


def test_place_region_option_overrides_file(tmp_path):
    out = tmp_path / "layout.json"
    runner = CliRunner()
    result = runner.invoke(
        cli, ["place", str(SERVICES), "--region", "0.5", "0.8", "--cols", "100", "-o", str(out)]
    )
    assert result.exit_code == 0, result.output
    data = json.loads(out.read_text())
    assert data["region"] == {"start_col": 50, "end_col": 80}


def test_place_rejects_bad_region():
    runner = CliRunner()
    result = runner.invoke(cli, ["place", str(SERVICES), "--region", "0.9", "0.5"])
    assert result.exit_code != 0


def test_place_reports_unplaced_labels(tmp_path):
    labels = tmp_path / "wide.txt"
    labels.write_text("%%grid size: 40x20\n%%grid region: 0.6 | 0.9\n"
                      "Supercalifragilisticexpialidocious\nOK\n")
    out = tmp_path / "layout.json"
    runner = CliRunner()
    result = runner.invoke(cli, ["place", str(labels), "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert "Could not place label 0" in result.output
    data = json.loads(out.read_text())
    assert data["placements"][0] is None
    assert data["placements"][1]["text"] == "OK"


def test_plan_output():
    runner = CliRunner()
    result = runner.invoke(cli, ["plan", str(NARROW)])
    assert result.exit_code == 0, result.output
    assert "[0] row 2: ABCDEFGHIJKLMNOP" in result.output
    assert "Data-Driven / Growth" in result.output


def test_validate_success():
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(SERVICES)])
    assert result.exit_code == 0
    assert "Valid: 6 labels" in result.output


def test_validate_reports_problems(tmp_path):
    bad = tmp_path / "bad.txt"
    bad.write_text("%%grid size: 40x20\n%%grid region: 0.6 | 0.9\n"
                   "%%grid block: 50,1\n"
                   "Supercalifragilisticexpialidocious\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(bad)])
    assert result.exit_code == 1
    assert "does not fit in two lines" in result.output
    assert "outside the grid" in result.output


def test_validate_parse_error(tmp_path):
    bad = tmp_path / "bad.txt"
    bad.write_text("%%grid size: huge\nAlpha\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(bad)])
    assert result.exit_code == 1
    assert "Parse error" in result.output


def test_wrap_command():
    runner = CliRunner()
    result = runner.invoke(cli, ["wrap", "one two three four", "--cols", "5", "--max-lines", "2"])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["one", "two"]


def test_version():
    """--version flag prints version string."""
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "version" in result.output.lower()


def test_log_level_option(tmp_path):
    out = tmp_path / "layout.json"
    runner = CliRunner()
    result = runner.invoke(cli, ["--log-level", "debug", "place", str(SERVICES), "-o", str(out)])
    assert result.exit_code == 0, result.output


def test_place_nonexistent_file():
    runner = CliRunner()
    result = runner.invoke(cli, ["place", "/nonexistent/labels.txt"])
    assert result.exit_code != 0
