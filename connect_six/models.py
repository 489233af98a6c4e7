"""Players, game states, and pydantic models for the text command protocol."""

from __future__ import annotations

import re
from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, BeforeValidator, Field, ValidationError
from pydantic_core import PydanticCustomError

from connect_six.errors import InvalidCommand, InvalidNumericFormat


# ---------------------------------------------------------------------------
# Game vocabulary
# ---------------------------------------------------------------------------

class Player(Enum):
    P1 = 0
    P2 = 1
    P3 = 2
    P4 = 3

    @property
    def label(self) -> str:
        return self.name

    @classmethod
    def first(cls) -> Player:
        return cls.P1

    def next(self, count: int) -> Player:
        """Return the player after this one in a rotation of `count` players."""
        return Player((self.value + 1) % count)


MAX_PLAYERS = len(Player)


class GameState(str, Enum):
    RUNNING = "running"
    WON = "won"
    DRAW = "draw"

    @property
    def is_over(self) -> bool:
        return self is not GameState.RUNNING


_INT_TEXT = re.compile(r"-?\d+")


def _check_int_text(value: object) -> object:
    """Only plain decimal digits with an optional minus sign count as integers."""
    if isinstance(value, str) and _INT_TEXT.fullmatch(value) is None:
        raise PydanticCustomError("int_parsing", "Input should be a valid integer")
    return value


IntText = Annotated[int, BeforeValidator(_check_int_text)]
LineIndex = Annotated[int, BeforeValidator(_check_int_text), Field(ge=0)]


# ---------------------------------------------------------------------------
# Commands (one line of user input each)
# ---------------------------------------------------------------------------

class PlaceCmd(BaseModel):
    type: Literal["place"] = "place"
    first_row: IntText
    first_col: IntText
    second_row: IntText
    second_col: IntText


class RowPrintCmd(BaseModel):
    type: Literal["rowprint"] = "rowprint"
    index: LineIndex


class ColPrintCmd(BaseModel):
    type: Literal["colprint"] = "colprint"
    index: LineIndex


class PrintCmd(BaseModel):
    type: Literal["print"] = "print"


class StateCmd(BaseModel):
    type: Literal["state"] = "state"
    row: IntText
    col: IntText


class ResetCmd(BaseModel):
    type: Literal["reset"] = "reset"


class QuitCmd(BaseModel):
    type: Literal["quit"] = "quit"


Command = PlaceCmd | RowPrintCmd | ColPrintCmd | PrintCmd | StateCmd | ResetCmd | QuitCmd

_ARG = r"[^;\s]+"

GRAMMAR: list[tuple[re.Pattern[str], type[BaseModel]]] = [
    (
        re.compile(
            rf"place (?P<first_row>{_ARG});(?P<first_col>{_ARG});"
            rf"(?P<second_row>{_ARG});(?P<second_col>{_ARG})"
        ),
        PlaceCmd,
    ),
    (re.compile(rf"rowprint (?P<index>{_ARG})"), RowPrintCmd),
    (re.compile(rf"colprint (?P<index>{_ARG})"), ColPrintCmd),
    (re.compile(r"print"), PrintCmd),
    (re.compile(rf"state (?P<row>{_ARG});(?P<col>{_ARG})"), StateCmd),
    (re.compile(r"reset"), ResetCmd),
    (re.compile(r"quit"), QuitCmd),
]


def parse_command(line: str) -> Command:
    """Parse one line of input into a typed command.

    Raises InvalidCommand when the line has the shape of no command, and
    InvalidNumericFormat when the shape matches but a field is not an integer.
    """
    for pattern, model in GRAMMAR:
        match = pattern.fullmatch(line)
        if match is None:
            continue
        try:
            return model.model_validate(match.groupdict())  # type: ignore[return-value]
        except ValidationError as exc:
            if any(err["type"].startswith("int_parsing") for err in exc.errors()):
                raise InvalidNumericFormat() from exc
            raise InvalidCommand() from exc
    raise InvalidCommand()
