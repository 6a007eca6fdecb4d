"""Simple command line game for the Lights Out logic."""

from __future__ import annotations

import re
import sys
from typing import Callable, Optional

from .config import resolve_config
from .game import Coordinate, InvalidCoordinate, LightsOutGame, format_grid

_MOVE_PATTERN = re.compile(r"^\s*(\d+)\s*[-,\s]\s*(\d+)\s*$")

QUIT_COMMANDS = {"q", "quit", "exit"}
NEW_GAME_COMMANDS = {"n", "new"}


def parse_move(text: str) -> Coordinate:
    """Parse ``"row col"``, ``"row-col"`` or ``"row,col"`` into a coordinate."""

    match = _MOVE_PATTERN.match(text)
    if match is None:
        raise ValueError(f"Moves look like 'row col', got {text.strip()!r}")
    return int(match.group(1)), int(match.group(2))


def play(
    game: LightsOutGame,
    *,
    input_fn: Optional[Callable[[str], str]] = None,
    output: Optional[Callable[[str], None]] = None,
) -> int:
    """Run a game until the player quits or input runs out.

    Returns the number of boards cleared by at least one move.
    """

    input_fn = input_fn or input
    output = output or print
    output("=== Lights Out ===")
    output("Turn every light off. Type 'row col' to press a light, 'n' for a new board, 'q' to quit.")
    cleared = 0
    announced = False
    while True:
        if game.won:
            if not announced:
                output(format_grid(game.grid))
                if game.moves:
                    output(f"You Win! Cleared in {game.moves} moves.")
                    cleared += 1
                else:
                    output("This board started with every light off.")
                announced = True
        else:
            output(format_grid(game.grid))
            output(f"Lit: {game.lit_count()}  Moves: {game.moves}")
        try:
            command = input_fn("> ").strip().lower()
        except EOFError:
            break
        if command in QUIT_COMMANDS:
            break
        if command in NEW_GAME_COMMANDS:
            game.new_game()
            announced = False
            continue
        if game.won:
            output("The board is clear. Type 'n' for a new board or 'q' to quit.")
            continue
        try:
            game.toggle(parse_move(command))
        except InvalidCoordinate as exc:
            output(f"No such light: {exc}")
        except ValueError as exc:
            output(str(exc))
    return cleared


def main() -> int:
    try:
        config = resolve_config()
    except ValueError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    cleared = play(LightsOutGame(config))
    print(f"Boards cleared: {cleared}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
