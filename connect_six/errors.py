"""Error taxonomy shared by the engine, the command parser, and the config loader."""

from __future__ import annotations


class ConnectSixError(Exception):
    """Base class for every recoverable error surfaced to the player."""

    message = "unexpected error."

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class OutOfBounds(ConnectSixError):
    message = "invalid row or column."


class CellOccupied(ConnectSixError):
    message = "one or both cells are already occupied."


class DuplicatePosition(ConnectSixError):
    message = "tokens must be placed in different positions."


class GameOver(ConnectSixError):
    message = "game is over."


class InvalidCommand(ConnectSixError):
    message = "invalid command."


class InvalidNumericFormat(ConnectSixError):
    message = "input isn't equal to an integer."


class InvalidConfiguration(ConnectSixError):
    message = "invalid configuration."
