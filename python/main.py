#!/usr/bin/env python3
"""Two-bucket puzzle solver.

Usage::

    python main.py solve 5 3 4                 # shortest pour sequence
    python main.py solve 5 3 4 -o verbose      # with move descriptions
    python main.py solve 5 3 4 -f rich         # Rich table
    python main.py random --seed 7             # random solvable puzzle
    python main.py play 5 3 4                  # solve it yourself
"""

import importlib
import logging
import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import GameGenerator  # noqa: E402
from backend.engine.gamesolver import Solver, SolverConfig  # noqa: E402
from backend.engine.graphsearch import SearchLimitExceeded  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


class OutputFormat(StrEnum):
    concise = "concise"
    verbose = "verbose"


class LogLevel(StrEnum):
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _solve_and_show(
    capacity_a: int,
    capacity_b: int,
    target: int,
    frontend: Frontend,
    output: OutputFormat,
    max_states: Optional[int],
) -> None:
    mod = importlib.import_module(_RUNNERS[frontend])
    try:
        result = Solver.solve(
            capacity_a, capacity_b, target, SolverConfig(max_states=max_states)
        )
    except SearchLimitExceeded as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    mod.show_result(result, verbose=output is OutputFormat.verbose)
    if not result.solvable:
        raise typer.Exit(code=1)


# -- shared options -----------------------------------------------------------

_FRONTEND = typer.Option(
    Frontend.vanilla, "-f", "--frontend", help="Frontend used to print the result."
)
_OUTPUT = typer.Option(
    OutputFormat.concise, "-o", "--format",
    help="concise: one [a,b] per line; verbose: each move and what it leaves.",
)
_MAX_STATES = typer.Option(
    None, "--max-states", min=1,
    help="Give up after discovering this many states (default: no limit).",
)
_LOG_LEVEL = typer.Option(
    LogLevel.warning, "--log-level", case_sensitive=False, help="Logging verbosity."
)


# -- CLI entry point ----------------------------------------------------------

# negative sizes are arguments, not option flags
_NUMERIC_ARGS = {"ignore_unknown_options": True}

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.command(context_settings=_NUMERIC_ARGS)
def solve(
    capacity_a: int = typer.Argument(..., help="Size of the first bucket."),
    capacity_b: int = typer.Argument(..., help="Size of the second bucket."),
    target: int = typer.Argument(..., help="Amount to measure."),
    frontend: Frontend = _FRONTEND,
    output: OutputFormat = _OUTPUT,
    max_states: Optional[int] = _MAX_STATES,
    log_level: LogLevel = _LOG_LEVEL,
) -> None:
    """Find the shortest sequence of fills, empties and pours."""
    _configure_logging(log_level)
    _solve_and_show(capacity_a, capacity_b, target, frontend, output, max_states)


@app.command("random")
def random_puzzle(
    max_capacity: int = typer.Option(
        10, "-m", "--max-capacity", min=1, help="Largest bucket size to draw."
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Seed for a reproducible puzzle."
    ),
    frontend: Frontend = _FRONTEND,
    output: OutputFormat = _OUTPUT,
    log_level: LogLevel = _LOG_LEVEL,
) -> None:
    """Generate a random solvable puzzle and solve it."""
    _configure_logging(log_level)
    puzzle = GameGenerator.generate(max_capacity, random.Random(seed))
    typer.echo(
        f"Buckets {puzzle.capacity_a}L and {puzzle.capacity_b}L, "
        f"measure {puzzle.target}L"
    )
    _solve_and_show(
        puzzle.capacity_a, puzzle.capacity_b, puzzle.target, frontend, output, None
    )


@app.command(context_settings=_NUMERIC_ARGS)
def play(
    capacity_a: int = typer.Argument(..., help="Size of the first bucket."),
    capacity_b: int = typer.Argument(..., help="Size of the second bucket."),
    target: int = typer.Argument(..., help="Amount to measure."),
    frontend: Frontend = _FRONTEND,
    log_level: LogLevel = _LOG_LEVEL,
) -> None:
    """Measure the target yourself, one typed move at a time."""
    _configure_logging(log_level)
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run_play(capacity_a, capacity_b, target)


if __name__ == "__main__":
    app()
