#!/usr/bin/env python3
"""8-Puzzle.

Usage::

    python main.py                              # interactive menu
    python main.py -f rich                      # Rich terminal
    python main.py -f pygame --seed 7           # Pygame GUI, repeatable scrambles
    python main.py --solve "8 6 7 2 5 4 3 0 1"  # print an optimal solution
"""

import importlib
import logging
import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

DEFAULT_DELAY = 0.35
LOG_FORMAT = "%(name)s: %(message)s"


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pygame = "pygame"


_RUNNERS = {
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
}


# -- helpers ------------------------------------------------------------------


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def _launch(frontend: Frontend, rng: random.Random, delay: float) -> None:
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(rng=rng, delay=delay)


def _solve(text: str) -> None:
    from backend.models import PuzzleError, parse_layout
    from frontend.cli.rich.app import solve_and_print

    try:
        solve_and_print(list(parse_layout(text)))
    except PuzzleError as exc:
        raise typer.BadParameter(str(exc), param_hint="--solve") from exc


def _menu_loop(rng: random.Random, delay: float) -> None:
    while True:
        print()
        print("  ==============================")
        print("         8 - P U Z Z L E        ")
        print("  ==============================")
        print()
        print("  1.  Play  (Rich Terminal)")
        print("  2.  Play  (Pygame GUI)")
        print("  3.  Solve a layout")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice == "1":
            _launch(Frontend.rich, rng, delay)
        elif choice == "2":
            _launch(Frontend.pygame, rng, delay)
        elif choice == "3":
            raw = input("  Tiles, row by row (0 = blank): ").strip()
            try:
                _solve(raw)
            except typer.BadParameter as exc:
                print(f"  {exc.message}")
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    solve: Optional[str] = typer.Option(
        None, "--solve",
        help='Print an optimal solution for a layout, e.g. "8 6 7 2 5 4 3 0 1".',
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for scrambling, for repeatable boards.",
    ),
    delay: float = typer.Option(
        DEFAULT_DELAY, "--delay",
        min=0.0,
        help="Seconds between steps when animating a solution.",
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    ),
) -> None:
    """8-Puzzle with an optimal A* solver."""
    _setup_logging(log_level)

    if solve is not None:
        _solve(solve)
        return

    rng = random.Random(seed)
    if frontend is None:
        _menu_loop(rng, delay)
        return

    _launch(frontend, rng, delay)


if __name__ == "__main__":
    app()
