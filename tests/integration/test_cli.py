"""Integration tests for the command line front end."""
import json

import pytest
from click.testing import CliRunner

from interactive.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


def test_play_single_round(runner):
    result = runner.invoke(cli, ['play', '--rounds', '1', '--seed', '1'])

    assert result.exit_code == 0, result.output
    assert "Nick: [" in result.output
    assert "Frank: [" in result.output
    assert "Table: [" in result.output
    assert "=== Showdown ===" in result.output
    assert "Winner:" in result.output or "Tie:" in result.output


def test_play_is_reproducible_with_seed(runner):
    first = runner.invoke(cli, ['play', '--rounds', '2', '--seed', '9'])
    second = runner.invoke(cli, ['play', '--rounds', '2', '--seed', '9'])
    assert first.exit_code == 0
    assert first.output == second.output
    assert first.output.count("=== Showdown ===") == 2


def test_play_repeats_until_declined(runner):
    result = runner.invoke(cli, ['play', '--seed', '4'], input="y\nn\n")

    assert result.exit_code == 0, result.output
    assert result.output.count("Repeat?") == 2
    assert result.output.count("=== Showdown ===") == 2


def test_play_custom_players(runner):
    result = runner.invoke(cli, ['play', '--rounds', '1', '--player', 'Ann', '--player', 'Bea',
                                 '--player', 'Cal'])
    assert result.exit_code == 0, result.output
    for name in ("Ann", "Bea", "Cal"):
        assert f"{name}: [" in result.output


def test_play_heads_up_rejects_three_players(runner):
    result = runner.invoke(cli, ['play', '--game', 'heads_up_holdem', '--rounds', '1',
                                 '--player', 'Ann', '--player', 'Bea', '--player', 'Cal'])
    assert result.exit_code == 1
    assert "at most 2" in result.output


def test_play_rules_file(runner, tmp_path):
    rules_file = tmp_path / "omaha_deal.json"
    rules_file.write_text(json.dumps({
        "game": "Four Card Deal",
        "players": {"min": 2, "max": 6},
        "holeCards": 4,
        "board": [{"name": "Flop", "cards": 3}, {"name": "Turn", "cards": 1},
                  {"name": "River", "cards": 1}]
    }))

    result = runner.invoke(cli, ['play', '--rules', str(rules_file), '--rounds', '1', '--seed', '2'])

    assert result.exit_code == 0, result.output
    assert "=== Four Card Deal ===" in result.output


def test_play_invalid_rules_file(runner, tmp_path):
    rules_file = tmp_path / "broken.json"
    rules_file.write_text(json.dumps({"game": "Broken"}))

    result = runner.invoke(cli, ['play', '--rules', str(rules_file), '--rounds', '1'])

    assert result.exit_code == 1
    assert "Invalid round rules" in result.output


def test_evaluate(runner):
    result = runner.invoke(cli, ['evaluate', 'As', 'Kd', '7h', '7c', '2s'])

    assert result.exit_code == 0, result.output
    assert "Pair of Sevens: [7h][7c][As][Kd][2s]" in result.output
    assert "Kickers: Ace, King, Two" in result.output


def test_evaluate_concatenated_cards(runner):
    result = runner.invoke(cli, ['evaluate', 'AhKhQhJhTh9c2d'])
    assert result.exit_code == 0, result.output
    assert "Royal Flush" in result.output


@pytest.mark.parametrize("cards", [['As', 'Kd'], ['Xx', 'Kd', '7h', '7c', '2s'], ['As', 'As', '7h', '7c', '2s']])
def test_evaluate_bad_input(runner, cards):
    result = runner.invoke(cli, ['evaluate'] + cards)
    assert result.exit_code == 1
    assert "Error" in result.output
