"""Vanilla terminal frontend — no third-party dependencies.

Solutions are printed as plain text so they can be piped into other
tools.  The interactive session uses ANSI colours for the bucket gauges.
"""

from __future__ import annotations

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.models.bucket import BucketState, Capacities
from backend.models.solution import Result
from frontend.cli.input_handler import HELP_TEXT, read_command


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset

_GAUGE_WIDTH = 20


# -- result rendering ---------------------------------------------------------


def render_result(result: Result, verbose: bool = False) -> str:
    """Return the plain-text listing of *result*."""
    return result.verbose() if verbose else result.concise()


def show_result(result: Result, verbose: bool = False) -> None:
    print(render_result(result, verbose), end="")


# -- bucket rendering ---------------------------------------------------------


def _gauge(amount: int, capacity: int) -> str:
    filled = round(_GAUGE_WIDTH * amount / capacity) if capacity else 0
    bar = "#" * filled + "." * (_GAUGE_WIDTH - filled)
    return f"[{bar}] {amount:>3}/{capacity}"


def _render_buckets(buckets: BucketState, capacities: Capacities, target: int) -> str:
    lines: list[str] = []
    for name, amount, capacity in (
        ("A", buckets.a, capacities.a),
        ("B", buckets.b, capacities.b),
    ):
        colour = _G if amount == target else _C
        lines.append(f"  {colour}{name}{_R} {_gauge(amount, capacity)}")
    return "\n".join(lines)


def _draw(game: GamePlay, status: str = "") -> None:
    caps = game.capacities
    print()
    print(f"  {_C}=== {caps.a}L + {caps.b}L  ->  measure {game.target}L ==={_R}")
    print(_render_buckets(game.buckets, caps, game.target))
    print(f"  Moves: {_Y}{game.state.moves}{_R}")
    if status:
        print(f"  {status}")


# -- game loop ----------------------------------------------------------------


def run_play(capacity_a: int, capacity_b: int, target: int) -> None:
    """Interactive session driven by typed commands."""
    result = Solver.solve(capacity_a, capacity_b, target)
    if not result.solvable:
        show_result(result)
        return

    game = GamePlay(capacity_a, capacity_b, target)
    status = f"{_DIM}{HELP_TEXT}{_R}"

    while not game.is_won:
        _draw(game, status)
        status = ""
        cmd = read_command()

        if cmd == "quit":
            return
        if cmd == "help":
            status = f"{_DIM}{HELP_TEXT}{_R}"
        elif cmd == "restart":
            game = GamePlay(capacity_a, capacity_b, target)
        elif cmd == "hint":
            hint = Solver.hint(game.buckets, game.capacities, target)
            status = (
                f"{_C}Hint:{_R} {hint.describe(game.capacities)}"
                if hint is not None
                else f"{_Y}No hint available.{_R}"
            )
        elif cmd:
            if game.move(cmd):
                status = game.buckets.label
            else:
                status = f"{_Y}That move does nothing here.{_R}"
        else:
            status = f"{_Y}Unknown command.{_R} {_DIM}{HELP_TEXT}{_R}"

    _draw(game)
    print(f"\n  {_G}Solved in {game.state.moves} moves!{_R}")
