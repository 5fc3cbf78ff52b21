"""Command-line entry point for the sliding puzzle."""

from pathlib import Path
from typing import Optional

import typer

from slidecore.config import (
    DEFAULT_SIZE,
    MAX_PLAY_SIZE,
    MIN_PLAY_SIZE,
    Difficulty,
    data_dir,
)
from slidecore.models.leaderboard import LeaderboardSort
from slidecore.utils.logger import configure_logging
from slideterm.app import print_scores, run

app = typer.Typer(add_completion=False)


@app.command()
def main(
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=MIN_PLAY_SIZE, max=MAX_PLAY_SIZE,
        help=f"Grid size ({MIN_PLAY_SIZE}-{MAX_PLAY_SIZE}).",
    ),
    difficulty: Difficulty = typer.Option(
        Difficulty.MEDIUM, "-d", "--difficulty",
        help="Starting difficulty; adapts after each solve.",
    ),
    name: str = typer.Option(
        "player", "-n", "--name",
        help="Name recorded on the leaderboard.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed the shuffle for a reproducible game.",
    ),
    scores: bool = typer.Option(
        False, "--scores",
        help="Show the leaderboard and exit.",
    ),
    sort: LeaderboardSort = typer.Option(
        LeaderboardSort.TIME, "--sort",
        help="Leaderboard ordering.",
    ),
    all_sizes: bool = typer.Option(
        False, "--all-sizes",
        help="With --scores, list every size instead of --size only.",
    ),
    data: Optional[Path] = typer.Option(
        None, "--data-dir",
        help="Directory holding the leaderboard file.",
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    ),
) -> None:
    """Sliding Puzzle Game."""
    configure_logging(log_level)

    directory = data if data is not None else data_dir()
    if scores:
        print_scores(
            directory, size=None if all_sizes else size, sort=sort
        )
        return

    run(
        size=size,
        data_dir=directory,
        difficulty=difficulty,
        username=name,
        seed=seed,
    )


if __name__ == "__main__":
    app()
