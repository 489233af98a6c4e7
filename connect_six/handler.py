"""Command loop and routing of parsed commands to the game engine."""

from __future__ import annotations

import logging
from typing import Iterable, TextIO

from connect_six.errors import ConnectSixError
from connect_six.game import ConnectSixGame
from connect_six.models import (
    ColPrintCmd,
    Command,
    PlaceCmd,
    PrintCmd,
    QuitCmd,
    ResetCmd,
    RowPrintCmd,
    StateCmd,
    parse_command,
)

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error, "


def execute(cmd: Command, game: ConnectSixGame) -> str | None:
    """Run one command and return the text to show, or None for quit."""
    if isinstance(cmd, PlaceCmd):
        return game.place(cmd.first_row, cmd.first_col, cmd.second_row, cmd.second_col)

    elif isinstance(cmd, RowPrintCmd):
        return game.print_line(cmd.index, horizontal=True)

    elif isinstance(cmd, ColPrintCmd):
        return game.print_line(cmd.index, horizontal=False)

    elif isinstance(cmd, PrintCmd):
        return game.print_board()

    elif isinstance(cmd, StateCmd):
        return game.state_of(cmd.row, cmd.col)

    elif isinstance(cmd, ResetCmd):
        return game.reset()

    elif isinstance(cmd, QuitCmd):
        return None

    raise TypeError(f"Unhandled command {cmd!r}")


def handle_line(line: str, game: ConnectSixGame) -> tuple[str | None, bool]:
    """Parse and execute one input line.

    Returns the output text (None when there is nothing to print) and whether
    the loop should keep going. Recoverable errors become "Error, ..." text.
    """
    try:
        cmd = parse_command(line)
        return execute(cmd, game), not isinstance(cmd, QuitCmd)
    except ConnectSixError as exc:
        logger.debug("Rejected %r: %s", line, exc.message)
        return ERROR_PREFIX + exc.message, True


def run(game: ConnectSixGame, lines: Iterable[str], out: TextIO) -> None:
    """Process input lines until quit or end of input."""
    for raw in lines:
        output, keep_going = handle_line(raw.rstrip("\r\n"), game)
        if output is not None:
            print(output, file=out)
        if not keep_going:
            return
