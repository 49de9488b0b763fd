from __future__ import annotations

import pytest
from typer.testing import CliRunner

from crazy_eights.cli import main as cli_main
from crazy_eights.state import Difficulty, GameConfig

runner = CliRunner()


def test_benchmark_command_prints_table() -> None:
    result = runner.invoke(
        cli_main.app,
        ["benchmark", "--rounds", "2", "--baseline", "easy", "--challenger", "normal", "--seed", "5"],
    )

    assert result.exit_code == 0, result.output
    assert "Head-to-Head Benchmark" in result.output
    assert "Baseline" in result.output
    assert "2 game(s) simulated" in result.output


def test_benchmark_rejects_unknown_difficulty() -> None:
    result = runner.invoke(cli_main.app, ["benchmark", "--baseline", "impossible"])

    assert result.exit_code != 0


def test_play_command_launches_textual_app(monkeypatch: pytest.MonkeyPatch) -> None:
    recorded: dict[str, object] = {}

    def fake_run(*, difficulty: Difficulty, seed: int | None, config: GameConfig) -> None:
        recorded.update(difficulty=difficulty, seed=seed, config=config)

    monkeypatch.setattr(cli_main, "run_textual_app", fake_run)
    result = runner.invoke(cli_main.app, ["play", "--difficulty", "hard", "--seed", "4", "--delay", "0.5"])

    assert result.exit_code == 0, result.output
    assert recorded["difficulty"] is Difficulty.HARD
    assert recorded["seed"] == 4
    config = recorded["config"]
    assert isinstance(config, GameConfig)
    assert config.opponent_delay == 0.5
