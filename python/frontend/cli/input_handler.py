"""Line-based command reader shared by the CLI frontends.

Players type a short command and press Enter.  Commands are
case-insensitive and surrounding whitespace is ignored.
"""

from __future__ import annotations

from backend.models.bucket import Move


# -- shared command mapping ----------------------------------------------------

_MOVE_MAP: dict[str, Move] = {
    "fa": Move.FILL_A,
    "fb": Move.FILL_B,
    "ea": Move.EMPTY_A,
    "eb": Move.EMPTY_B,
    "ab": Move.POUR_A_INTO_B,
    "ba": Move.POUR_B_INTO_A,
}

_ACTION_MAP: dict[str, str] = {
    "q": "quit",
    "quit": "quit",
    "exit": "quit",
    "h": "hint",
    "hint": "hint",
    "?": "help",
    "help": "help",
    "r": "restart",
    "restart": "restart",
}

HELP_TEXT = (
    "fa/fb  fill A/B    ea/eb  empty A/B    ab  pour A into B    "
    "ba  pour B into A    h  hint    r  restart    q  quit"
)


# -- public API ----------------------------------------------------------------


def resolve(line: str) -> Move | str:
    """Map a typed command to a ``Move`` or an action string.

    Possible return values:
        ``Move``                        — one of the six moves
        "quit", "hint", "help", "restart"
        ""                              — unrecognised input
    """
    cmd = line.strip().lower()
    if cmd in _MOVE_MAP:
        return _MOVE_MAP[cmd]
    return _ACTION_MAP.get(cmd, "")


def read_command(prompt: str = "> ") -> Move | str:
    """Read one line from stdin and resolve it.

    End of input counts as "quit".
    """
    try:
        line = input(prompt)
    except EOFError:
        return "quit"
    return resolve(line)
