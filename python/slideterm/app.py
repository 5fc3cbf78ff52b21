"""Rich terminal frontend — board table, stats panel and leaderboard.

A thin collaborator: every rule lives in ``slidecore``; this module only
draws the engine's state and forwards keypresses to it.
"""

from __future__ import annotations

import random
from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from slidecore.config import LEADERBOARD_FILENAME, Difficulty
from slidecore.engine.achievements import Achievement, AchievementChecker
from slidecore.engine.difficulty import AdaptiveDifficulty
from slidecore.engine.gamegenerator import GameGenerator
from slidecore.engine.gamestate import GameState
from slidecore.engine.hints import HintAllowance, HintStatus
from slidecore.exceptions import StorageError
from slidecore.models.board import Direction, Position
from slidecore.models.leaderboard import Leaderboard, LeaderboardSort, SessionRecord
from slidecore.utils.logger import get_logger
from slideterm.input_handler import get_key

console = Console()
logger = get_logger(__name__)

# Keys name the way the *tile* slides, so the blank travels the other way.
_KEY_DIRECTIONS: dict[str, Direction] = {
    "up": Direction.DOWN,
    "down": Direction.UP,
    "left": Direction.RIGHT,
    "right": Direction.LEFT,
}


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


def open_leaderboard(data_dir: Path) -> Leaderboard | None:
    """Open the leaderboard, or return None if the file is unusable."""
    try:
        return Leaderboard(data_dir / LEADERBOARD_FILENAME)
    except StorageError as exc:
        logger.warning("Leaderboard disabled: %s", exc)
        return None


def _save_session(leaderboard: Leaderboard | None, record: SessionRecord) -> None:
    if leaderboard is None:
        return
    try:
        leaderboard.add(record)
    except OSError as exc:
        logger.warning("Could not save session: %s", exc)


def award_achievements(
    leaderboard: Leaderboard | None,
    record: SessionRecord,
    skill: float,
    unlocked: set[str],
) -> list[Achievement]:
    """Check a finished game for new achievements and remember them.

    *unlocked* is the in-memory set for this run; the leaderboard, when
    present, keeps them across runs.
    """
    if leaderboard is not None:
        unlocked |= leaderboard.achievements(record.username)
    new = AchievementChecker.evaluate(record, leaderboard, skill, unlocked)
    if not new:
        return []
    unlocked.update(a.value for a in new)
    if leaderboard is not None:
        try:
            leaderboard.unlock(record.username, [a.value for a in new])
        except OSError as exc:
            logger.warning("Could not save achievements: %s", exc)
    return new


# -- board rendering ----------------------------------------------------------


def render_board(state: GameState, hint: Position | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    engine = state.engine
    size = engine.size
    width = len(str(size * size - 1))
    movable = {tile.position for tile in engine.get_movable_tiles()}

    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(engine.get_grid()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif hint == (r, c):
                cells.append(f"[bold black on cyan]{val:>{width}}[/bold black on cyan]")
            elif engine.board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            elif (r, c) in movable:
                cells.append(f"[bold yellow]{val:>{width}}[/bold yellow]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _hint_message(
    state: GameState, allowance: HintAllowance
) -> tuple[Position | None, str]:
    result = allowance.request(state.engine)
    if result.status == HintStatus.OK:
        state.hints_used += 1
        return result.position, (
            f"[cyan]Hint:[/cyan] try the highlighted tile "
            f"({allowance.remaining} left)"
        )
    if result.status == HintStatus.COOLDOWN:
        return None, f"[yellow]Hint cooldown: {result.wait_seconds:.0f}s[/yellow]"
    if result.status == HintStatus.EXHAUSTED:
        return None, "[yellow]No more hints available![/yellow]"
    return None, "[yellow]No hint available at this time.[/yellow]"


# -- game screens -------------------------------------------------------------


def _draw_game(state: GameState, hint: Position | None, status: str = "") -> None:
    console.clear()

    size = state.engine.size
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(state.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(state.elapsed_time), style="bold yellow")
    stats.append("    Level: ", style="dim")
    stats.append(state.difficulty.value, style="bold magenta")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("U", style="bold cyan")
    controls.append("  undo   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  shuffle   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    panel = Panel(
        Align.center(render_board(state, hint)),
        title=f"[bold cyan]Sliding Puzzle  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _draw_win(
    state: GameState,
    next_level: Difficulty,
    achievements: list[Achievement] | None = None,
) -> None:
    console.clear()

    size = state.engine.size
    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("CONGRATULATIONS!", style="bold green")
    congrats.append("  You solved it!  ", style="green")
    congrats.append("★\n", style="bold yellow")

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(state.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(state.elapsed_time), style="bold yellow")
    stats.append("    Next level: ", style="dim")
    stats.append(next_level.value, style="bold magenta")

    body = [
        Align.center(render_board(state)),
        Align.center(congrats),
        Align.center(stats),
    ]
    for achievement in achievements or []:
        line = Text("  🏆 Achievement unlocked: ", style="yellow")
        line.append(achievement.title, style="bold yellow")
        body.append(Align.center(line))

    panel = Panel(
        Group(*body),
        title=f"[bold green]Sliding Puzzle  {size}×{size}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(Text("\n  Press R to play again, Q to quit.\n", style="dim"))
    )


def leaderboard_table(
    leaderboard: Leaderboard,
    size: int | None = None,
    sort: LeaderboardSort = LeaderboardSort.TIME,
    limit: int = 10,
) -> Table:
    title = "All sizes" if size is None else f"{size}×{size}"
    table = Table(
        title=title,
        title_style="bold cyan",
        box=rich.box.ROUNDED,
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Player", style="bold")
    table.add_column("Size", justify="right")
    table.add_column("Moves", justify="right", style="yellow")
    table.add_column("Time", justify="right", style="yellow")
    table.add_column("Date", style="dim")

    for i, s in enumerate(leaderboard.top(size=size, sort=sort, limit=limit), 1):
        table.add_row(
            str(i),
            s.username,
            f"{s.puzzle_size}×{s.puzzle_size}",
            str(s.moves),
            _format_time(s.time_seconds),
            s.date,
        )
    return table


def print_scores(
    data_dir: Path, size: int | None = None, sort: LeaderboardSort = LeaderboardSort.TIME
) -> None:
    leaderboard = open_leaderboard(data_dir)
    if leaderboard is None or not leaderboard.get_all_sizes():
        console.print("  [dim]No completed games yet.[/dim]")
        return
    console.print(Align.center(leaderboard_table(leaderboard, size=size, sort=sort)))


# -- game loop ----------------------------------------------------------------


def run(
    size: int,
    data_dir: Path,
    difficulty: Difficulty = Difficulty.MEDIUM,
    username: str = "player",
    seed: int | None = None,
) -> None:
    """Play games until the user quits."""
    rng = random.Random(seed)
    leaderboard = open_leaderboard(data_dir)
    adaptive = AdaptiveDifficulty()
    unlocked: set[str] = set()

    while True:
        state = GameState(GameGenerator.generate(size, difficulty, rng), difficulty)
        allowance = HintAllowance()
        hint: Position | None = None
        status = ""

        while not state.is_won:
            _draw_game(state, hint, status)
            status = ""
            key = get_key()

            if key in _KEY_DIRECTIONS:
                target = state.engine.tile_towards(_KEY_DIRECTIONS[key])
                if target is not None and state.move(*target):
                    hint = None
            elif key == "undo":
                if state.undo():
                    hint = None
                else:
                    status = "[yellow]Nothing to undo.[/yellow]"
            elif key == "hint":
                hint, status = _hint_message(state, allowance)
            elif key == "shuffle":
                state = GameState(
                    GameGenerator.generate(size, difficulty, rng), difficulty
                )
                allowance.reset()
                hint = None
                status = "[yellow]Shuffled![/yellow]"
            elif key == "quit":
                if state.moves:
                    _save_session(leaderboard, state.to_record(username))
                return

        # -- win ---------------------------------------------------------------
        state.pause()
        record = state.to_record(username)
        _save_session(leaderboard, record)
        difficulty = adaptive.record_completion(
            size, state.elapsed_time, state.moves
        )
        new = award_achievements(leaderboard, record, adaptive.skill, unlocked)
        _draw_win(state, difficulty, new)

        while True:
            key = get_key()
            if key == "shuffle":
                break
            if key == "quit":
                return
