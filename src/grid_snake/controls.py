"""Keyboard decoding into direction requests."""

from __future__ import annotations

from collections.abc import Iterable

from grid_snake.snake import Direction

# Checked in this order; the first pressed direction wins.
_KEY_PRIORITY: tuple[tuple[Direction, frozenset[str]], ...] = (
    (Direction.UP, frozenset({"up", "arrowup", "w"})),
    (Direction.DOWN, frozenset({"down", "arrowdown", "s"})),
    (Direction.LEFT, frozenset({"left", "arrowleft", "a"})),
    (Direction.RIGHT, frozenset({"right", "arrowright", "d"})),
)

_EXIT_KEYS = frozenset({"escape", "esc"})

_SCRIPT_CODES: dict[str, Direction | None] = {
    "u": Direction.UP,
    "d": Direction.DOWN,
    "l": Direction.LEFT,
    "r": Direction.RIGHT,
    ".": None,
}


def direction_from_keys(pressed: Iterable[str]) -> Direction | None:
    """Return the direction for the currently held keys, if any.

    Key names are case-insensitive. When several direction keys are held,
    up beats down beats left beats right.
    """
    keys = {k.lower() for k in pressed}
    for direction, names in _KEY_PRIORITY:
        if keys & names:
            return direction
    return None


def is_exit_key(key: str) -> bool:
    return key.lower() in _EXIT_KEYS


def parse_move_script(script: str) -> list[Direction | None]:
    """Parse a per-tick move script such as ``"rr.uul"``.

    Each character is one tick: ``u``/``d``/``l``/``r`` request a direction
    and ``.`` sends nothing. Whitespace is ignored.
    """
    moves: list[Direction | None] = []
    for ch in script.lower():
        if ch.isspace():
            continue
        if ch not in _SCRIPT_CODES:
            raise ValueError(f"Unknown move {ch!r}; expected one of 'udlr.'.")
        moves.append(_SCRIPT_CODES[ch])
    return moves


def parse_key_script(script: str) -> list[frozenset[str]]:
    """Parse a per-tick script of held keys such as ``"up;up,right;;esc"``.

    Ticks are separated by ``;`` and keys within a tick by ``,``. An empty
    tick means nothing is held.
    """
    if not script.strip():
        return []
    return [
        frozenset(k.strip().lower() for k in tick.split(",") if k.strip())
        for tick in script.split(";")
    ]
