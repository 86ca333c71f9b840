"""Integration tests for the CLI."""
from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from src.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_recommend_two_colors_renders_categories(runner):
    result = runner.invoke(app, ["recommend", "WU"])

    assert result.exit_code == 0, result.output
    assert "Basic Lands" in result.output
    assert "Staple Lands" in result.output
    assert "Mana Rocks" in result.output
    assert "Total:" in result.output
    assert "39 cards" in result.output


def test_recommend_shows_basic_split(runner):
    result = runner.invoke(app, ["recommend", "U", "R"])

    assert result.exit_code == 0, result.output
    assert "Island x6" in result.output
    assert "Mountain x6" in result.output


def test_recommend_json_output(runner):
    result = runner.invoke(app, ["recommend", "w", "u", "b", "--json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert [entry["category"] for entry in payload] == [
        "Basic Lands",
        "Staple Lands",
        "Utility Lands",
        "Mana Rocks",
    ]
    triome = payload[1]["cards"][0]
    assert triome == {"type": "triome", "count": 1, "options": [{"name": "Raffine's Tower"}]}


def test_recommend_exclude_option(runner):
    result = runner.invoke(app, ["recommend", "UR", "--exclude", "OGDualLand", "--json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    staple_types = [card["type"] for card in payload[1]["cards"]]
    assert "OGDualLand" not in staple_types


def test_recommend_without_colors_prints_error_category(runner):
    result = runner.invoke(app, ["recommend"])

    assert result.exit_code == 0, result.output
    assert "Please select at least one color." in result.output


def test_recommend_four_colors_prints_warning(runner):
    result = runner.invoke(app, ["recommend", "WUBR", "--json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload[0]["category"] == "Warning"
    assert payload[0]["cards"][0]["count"] == 1


def test_recommend_unknown_color_exits_with_error(runner):
    result = runner.invoke(app, ["recommend", "WX"])

    assert result.exit_code == 1
    assert "Unknown color symbol" in result.output


def test_recommend_unknown_land_type_exits_with_error(runner):
    result = runner.invoke(app, ["recommend", "G", "--exclude", "dualLand"])

    assert result.exit_code == 1
    assert "Unknown land type" in result.output


def test_recommend_error_text_is_not_markup(runner):
    result = runner.invoke(app, ["recommend", "G", "--exclude", "[/red]"])

    assert result.exit_code == 1
    assert "Unknown land type" in result.output
    assert "[/red]" in result.output


def test_recommend_no_colors_with_unknown_exclude(runner):
    result = runner.invoke(app, ["recommend", "--exclude", "bogus", "--json"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output)[0]["category"] == "Error"


def test_tables_list(runner):
    result = runner.invoke(app, ["tables", "list"])

    assert result.exit_code == 0, result.output
    assert "shock_lands" in result.output
    assert "triomes" in result.output


def test_tables_show(runner):
    result = runner.invoke(app, ["tables", "show", "og_dual_lands"])

    assert result.exit_code == 0, result.output
    assert "Tundra" in result.output
    assert "WU" in result.output


def test_tables_show_unknown(runner):
    result = runner.invoke(app, ["tables", "show", "wastes"])

    assert result.exit_code == 1
    assert "Unknown land table" in result.output


def test_version(runner):
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "mana-base version 0.1.0" in result.output
