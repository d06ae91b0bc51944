"""Rich terminal frontend — tables, colours, and panels.

Play mode scores a scrambled board; study mode starts solved and offers
scramble, hint and an animated optimal solve. ``print_solution`` is the
non-interactive view used by ``main.py --solve``.
"""

from __future__ import annotations

import random
import sys
import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamesolver import SearchResult, Solver
from backend.engine.gameplay import GamePlay
from backend.models.board import is_tile_correct
from backend.models.errors import PuzzleError
from backend.models.move import SIZE
from backend.models.state import PuzzleState
from frontend.cli.input_handler import get_key, key_pressed

STEP_DELAY = 0.35

console = Console()

_SLIDE_KEYS = ("up", "down", "left", "right")


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


def render_board(board: PuzzleState) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(SIZE):
        table.add_column(width=2, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif is_tile_correct(board.layout, r * SIZE + c):
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)

    return table


def _controls(*pairs: tuple[str, str]) -> Text:
    text = Text()
    for key, label in pairs:
        text.append(f"  {key}", style="bold cyan")
        text.append(f"  {label} ", style="dim")
    return text


# -- solver helpers -----------------------------------------------------------


def _apply_hint(game: GamePlay) -> str:
    if game.is_won:
        return "[green]Already solved![/green]"
    hint = game.hint()
    if hint is None:
        return "[red]Board is unsolvable.[/red]"
    game.move(hint)
    return f"[cyan]Hint:[/cyan] blank moved [bold]{hint.value}[/bold]"


def _auto_solve(game: GamePlay, delay: float) -> str:
    if game.is_won:
        return "[green]Already solved![/green]"
    try:
        path = game.solution()
    except PuzzleError as exc:
        return f"[red]{exc}[/red]"

    total = len(path) - 1
    for i, board in enumerate(game.replay(path), 1):
        progress = Text()
        progress.append(f"  Solving… move {i}/{total} ", style="bold cyan")
        progress.append(f"(blank {path[i].move.value})", style="dim")
        _draw_board_screen(board, "Auto-Solve", "cyan", progress)
        sys.stdout.flush()
        time.sleep(delay)
        if key_pressed():
            get_key()
            return f"[yellow]Stopped after {i} of {total} moves.[/yellow]"

    return f"[bold green]Solved in {total} moves![/bold green]"


# -- screens ------------------------------------------------------------------


def _draw_board_screen(
    board: PuzzleState, title: str, colour: str, *below: Text
) -> None:
    console.clear()
    panel = Panel(
        Align.center(render_board(board)),
        title=f"[bold {colour}]{title}  3×3[/bold {colour}]",
        border_style=colour,
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    for line in below:
        console.print(Align.center(line))


def _draw_menu() -> None:
    console.clear()

    opts = Text()
    opts.append("  1", style="bold cyan")
    opts.append("  Play    ")
    opts.append("2", style="bold yellow")
    opts.append("  Study    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    panel = Panel(
        Group(Text(""), Align.center(opts), Text("")),
        title="[bold]8 - P U Z Z L E[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )
    console.print()
    console.print(Align.center(panel))


def _draw_game(game: GamePlay, status: str = "") -> None:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.state.elapsed_time), style="bold yellow")

    lines = [stats]
    if status:
        lines.append(Text.from_markup(f"  {status}"))
    lines.append(
        _controls(("↑↓←→/WASD", "slide"), ("N", "hint"),
                  ("R", "new board"), ("Q", "back"))
    )
    _draw_board_screen(game.board, "8-Puzzle", "bright_blue", *lines)


def _draw_study(game: GamePlay, status: str = "") -> None:
    lines = []
    if status:
        lines.append(Text.from_markup(f"  {status}"))
    lines.append(
        _controls(("↑↓←→/WASD", "slide"), ("R", "scramble"),
                  ("G", "goal"), ("N", "hint"), ("V", "solve"), ("Q", "back"))
    )
    _draw_board_screen(game.board, "Study", "yellow", *lines)


def _draw_win(game: GamePlay) -> None:
    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("SOLVED!", style="bold green")
    congrats.append(
        f"  {game.state.moves} moves in {_format_time(game.state.elapsed_time)}  ",
        style="green",
    )
    congrats.append("★\n", style="bold yellow")
    hint = Text("  Press R to play again, Q to go back.\n", style="dim")
    _draw_board_screen(game.board, "8-Puzzle", "bold green", congrats, hint)


# -- game loops ---------------------------------------------------------------


def _play_game(rng: random.Random) -> None:
    """Play mode — scrambled board, hint only."""
    while True:
        game = GamePlay(rng)
        status = ""

        while not game.is_won:
            _draw_game(game, status)
            status = ""
            key = get_key()

            if key in _SLIDE_KEYS:
                game.slide(key)
            elif key == "hint":
                status = _apply_hint(game)
            elif key == "scramble":
                game.scramble()
            elif key == "quit":
                return

        game.state.pause()
        _draw_win(game)

        while True:
            key = get_key()
            if key == "scramble":
                break
            if key == "quit":
                return


def _study_game(rng: random.Random, delay: float) -> None:
    """Study mode — starts solved, scramble/hint/solve available."""
    game = GamePlay.from_layout(PuzzleState.goal().layout, rng)
    status = ""

    while True:
        _draw_study(game, status)
        status = ""
        key = get_key()

        if key in _SLIDE_KEYS:
            game.slide(key)
        elif key == "scramble":
            game.scramble()
            status = "[yellow]Scrambled![/yellow]"
        elif key == "reset":
            game.reset()
        elif key == "hint":
            status = _apply_hint(game)
        elif key == "solve":
            status = _auto_solve(game, delay)
        elif key == "quit":
            return


# -- non-interactive ----------------------------------------------------------


def print_solution(result: SearchResult) -> None:
    """Print every board of a solution with the move that produced it."""
    steps = Table(box=rich.box.ROUNDED, border_style="dim", show_lines=True)
    steps.add_column("#", justify="right", style="dim")
    steps.add_column("Blank", style="cyan")
    steps.add_column("Board")
    steps.add_column("g + h", justify="right", style="yellow")

    for i, state in enumerate(result.path):
        steps.add_row(
            str(i),
            state.move.value if state.move else "start",
            render_board(state),
            f"{state.g} + {state.h}",
        )

    summary = Text()
    summary.append(f"{result.length} moves", style="bold green")
    summary.append(
        f"   {result.expanded} expanded, {result.generated} generated, "
        f"{result.elapsed * 1000:.1f} ms",
        style="dim",
    )
    console.print(steps)
    console.print(summary)


def solve_and_print(tiles: list[int]) -> SearchResult:
    result = Solver.search(tiles)
    print_solution(result)
    return result


# -- public entry point -------------------------------------------------------


def run(rng: random.Random | None = None, delay: float = STEP_DELAY) -> None:
    """Launch the Rich CLI with interactive menu."""
    rng = rng or random.Random()
    while True:
        _draw_menu()
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        elif key in ("1", "enter"):
            _play_game(rng)
        elif key == "2":
            _study_game(rng, delay)
