"""Command-line entry point, non-interactive paths only."""

from __future__ import annotations

from typer.testing import CliRunner

import main

runner = CliRunner()


def test_solve_prints_solution() -> None:
    result = runner.invoke(main.app, ["--solve", "1 2 3 4 5 6 7 0 8"])
    assert result.exit_code == 0, result.output
    assert "1 moves" in result.output


def test_solve_goal_prints_zero_moves() -> None:
    result = runner.invoke(main.app, ["--solve", "123456780"])
    assert result.exit_code == 0, result.output
    assert "0 moves" in result.output


def test_solve_rejects_unsolvable_layout() -> None:
    result = runner.invoke(main.app, ["--solve", "2 1 3 4 5 6 7 8 0"])
    assert result.exit_code != 0


def test_solve_rejects_malformed_layout() -> None:
    result = runner.invoke(main.app, ["--solve", "1 2 3"])
    assert result.exit_code != 0
