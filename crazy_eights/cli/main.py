"""Typer entry-point wiring for the Crazy Eights CLI."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from .. import benchmark
from ..state import Difficulty, GameConfig
from .textual import run_textual_app

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()


def _configure_logging(level: str, log_file: Path | None) -> None:
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise typer.BadParameter(f"Unknown log level {level!r}.")
    kwargs: dict[str, object] = {
        "level": numeric,
        "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
    }
    if log_file is not None:
        kwargs["filename"] = str(log_file)
    logging.basicConfig(**kwargs)


@app.command()
def play(
    difficulty: Difficulty = typer.Option(Difficulty.NORMAL, help="Computer opponent strategy."),
    seed: int | None = typer.Option(None, help="Random seed for reproducible games (omit for randomness)."),
    delay: float = typer.Option(1.5, min=0.0, help="Seconds the computer waits before moving."),
    log_file: Path | None = typer.Option(None, help="Write engine logs to this file."),
    log_level: str = typer.Option("INFO", help="Logging level used with --log-file."),
) -> None:
    """Play against the computer in the terminal."""

    # The Textual UI owns the terminal, so logs only go to a file.
    if log_file is not None:
        _configure_logging(log_level, log_file)

    run_textual_app(
        difficulty=difficulty,
        seed=seed,
        config=GameConfig(opponent_delay=delay),
    )


@app.command("benchmark")
def benchmark_cli(
    rounds: int = typer.Option(100, min=1, help="Number of head-to-head games."),
    baseline: Difficulty = typer.Option(Difficulty.EASY, help="Strategy of the baseline agent."),
    challenger: Difficulty = typer.Option(Difficulty.HARD, help="Strategy of the challenger agent."),
    seed: int = typer.Option(123, help="Random seed for the benchmark."),
    log_level: str = typer.Option("WARNING", help="Logging level for engine messages."),
) -> None:
    """Run a baseline vs. challenger benchmark."""

    _configure_logging(log_level, None)
    report = benchmark.run_head_to_head(
        rounds=rounds,
        baseline=baseline,
        challenger=challenger,
        seed=seed,
    )

    table = Table(title="Head-to-Head Benchmark", box=box.SIMPLE_HEAVY)
    table.add_column("Agent", justify="center")
    table.add_column("Difficulty", justify="center")
    table.add_column("Wins", justify="right")
    table.add_column("Losses", justify="right")
    table.add_column("Stalemates", justify="right")
    table.add_column("Avg cards left", justify="right")

    for label, entry in (("Baseline", report.baseline), ("Challenger", report.challenger)):
        table.add_row(
            label,
            entry.difficulty.value,
            str(entry.wins),
            str(entry.losses),
            str(entry.stalemates),
            f"{entry.mean_cards_left:.2f}",
        )

    console.print(table)
    console.print(
        f"[cyan]{len(report.history.games)} game(s) simulated[/cyan] • "
        f"turns {report.mean_turns:.1f} ± {report.turn_std:.1f}"
    )


def main() -> None:
    """Entry-point for ``python -m crazy_eights.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
