"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
command reader and backend as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.models.bucket import BucketState, Capacities
from backend.models.solution import Infeasible, Result, Solved
from frontend.cli.input_handler import HELP_TEXT, read_command

console = Console()


# -- result rendering ---------------------------------------------------------


def _render_solution(result: Solved, verbose: bool) -> Table:
    """Return a Rich Table listing every state on the solution path."""
    caps = result.capacities
    table = Table(
        title=f"{caps.a}L + {caps.b}L  →  {result.target}L",
        title_style="bold cyan",
        box=rich.box.ROUNDED,
        border_style="bright_blue",
    )
    table.add_column("#", justify="right", style="dim", width=3)
    if verbose:
        table.add_column("Move")
    table.add_column(f"A ({caps.a}L)", justify="right", style="yellow")
    table.add_column(f"B ({caps.b}L)", justify="right", style="yellow")

    for i, state in enumerate(result.path):
        a = _amount(state.a, result.target)
        b = _amount(state.b, result.target)
        if verbose:
            table.add_row(str(i), state.label, a, b)
        else:
            table.add_row(str(i), a, b)
    return table


def _amount(amount: int, target: int) -> str:
    if amount == target:
        return f"[bold green]{amount}[/bold green]"
    return str(amount)


def render_result(result: Result, verbose: bool = False) -> Panel:
    if isinstance(result, Infeasible):
        return Panel(
            Text(result.concise().strip(), style="bold red"),
            title="[bold red]Unsolvable[/bold red]",
            border_style="red",
            padding=(1, 2),
        )

    footer = Text()
    footer.append("  Moves: ", style="dim")
    footer.append(str(result.moves), style="bold yellow")

    return Panel(
        Group(Align.center(_render_solution(result, verbose)), Align.center(footer)),
        title="[bold green]Solved[/bold green]",
        border_style="green",
        padding=(1, 2),
    )


def show_result(result: Result, verbose: bool = False) -> None:
    console.print(render_result(result, verbose))


# -- bucket rendering ---------------------------------------------------------


def _render_buckets(buckets: BucketState, capacities: Capacities, target: int) -> Table:
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column(style="bold cyan")
    table.add_column(width=30)
    table.add_column(justify="right")

    for name, amount, capacity in (
        ("A", buckets.a, capacities.a),
        ("B", buckets.b, capacities.b),
    ):
        colour = "green" if amount == target else "cyan"
        bar = ProgressBar(
            total=max(capacity, 1), completed=amount, width=30, complete_style=colour
        )
        table.add_row(name, bar, f"{amount}/{capacity}")
    return table


def _draw(game: GamePlay, status: str = "") -> None:
    caps = game.capacities

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")

    parts = [Align.center(_render_buckets(game.buckets, caps, game.target)), Align.center(stats)]
    if status:
        parts.append(Align.center(Text.from_markup(f"  {status}")))

    panel = Panel(
        Group(*parts),
        title=f"[bold cyan]{caps.a}L + {caps.b}L  →  {game.target}L[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(panel)


# -- game loop ----------------------------------------------------------------


def run_play(capacity_a: int, capacity_b: int, target: int) -> None:
    """Interactive session driven by typed commands."""
    result = Solver.solve(capacity_a, capacity_b, target)
    if not result.solvable:
        show_result(result)
        return

    game = GamePlay(capacity_a, capacity_b, target)
    status = f"[dim]{HELP_TEXT}[/dim]"

    while not game.is_won:
        _draw(game, status)
        status = ""
        cmd = read_command()

        if cmd == "quit":
            return
        if cmd == "help":
            status = f"[dim]{HELP_TEXT}[/dim]"
        elif cmd == "restart":
            game = GamePlay(capacity_a, capacity_b, target)
        elif cmd == "hint":
            hint = Solver.hint(game.buckets, game.capacities, target)
            status = (
                f"[cyan]Hint:[/cyan] [bold]{hint.describe(game.capacities)}[/bold]"
                if hint is not None
                else "[yellow]No hint available.[/yellow]"
            )
        elif cmd:
            if game.move(cmd):
                status = game.buckets.label
            else:
                status = "[yellow]That move does nothing here.[/yellow]"
        else:
            status = f"[yellow]Unknown command.[/yellow] [dim]{HELP_TEXT}[/dim]"

    _draw(game)
    console.print(
        Align.center(
            Text(f"\n  ★ Solved in {game.state.moves} moves! ★\n", style="bold green")
        )
    )
