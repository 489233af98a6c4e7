"""Session configuration: topology, board side length, and player count."""

from __future__ import annotations

import logging
import os
from typing import Sequence

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from connect_six.errors import InvalidConfiguration
from connect_six.models import MAX_PLAYERS, IntText
from connect_six.topology import Topology

logger = logging.getLogger(__name__)

MIN_SIDE = 18
MAX_SIDE = 20
MIN_PLAYERS = 2

ENV_TOPOLOGY = "CONNECT_SIX_TOPOLOGY"
ENV_BOARD_SIZE = "CONNECT_SIX_BOARD_SIZE"
ENV_PLAYERS = "CONNECT_SIX_PLAYERS"
ENV_LOG_LEVEL = "CONNECT_SIX_LOG_LEVEL"


class GameConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    topology: Topology
    side: IntText
    players: IntText

    @field_validator("side")
    @classmethod
    def _validate_side(cls, v: int) -> int:
        if v % 2 != 0 or not MIN_SIDE <= v <= MAX_SIDE:
            raise ValueError(
                f"invalid board size. Must be an even number between {MIN_SIDE} and {MAX_SIDE}."
            )
        return v

    @field_validator("players")
    @classmethod
    def _validate_players(cls, v: int) -> int:
        if not MIN_PLAYERS <= v <= MAX_PLAYERS:
            raise ValueError(
                f"invalid player count. Must be between {MIN_PLAYERS} and {MAX_PLAYERS}."
            )
        return v

    @classmethod
    def create(cls, topology: str, side: str | int, players: str | int) -> GameConfig:
        """Validate raw values, translating pydantic errors into InvalidConfiguration."""
        try:
            return cls.model_validate({"topology": topology, "side": side, "players": players})
        except ValidationError as exc:
            err = exc.errors()[0]
            field = err["loc"][0] if err["loc"] else "config"
            if field == "topology":
                message = "invalid game type. Expected 'standard' or 'torus'."
            elif err["type"].startswith("int_parsing"):
                message = f"{field} must be a valid integer."
            else:
                message = err["msg"].removeprefix("Value error, ")
            logger.warning("Rejected configuration %r: %s", (topology, side, players), message)
            raise InvalidConfiguration(message) from exc

    @classmethod
    def from_args(cls, args: Sequence[str]) -> GameConfig:
        """Build a config from the three positional arguments `<topology> <side> <players>`."""
        if len(args) != 3:
            raise InvalidConfiguration("invalid number of arguments. Expected 3 arguments.")
        return cls.create(*args)

    @classmethod
    def from_env(cls) -> GameConfig:
        """Build a config from CONNECT_SIX_* environment variables."""
        return cls.create(
            os.getenv(ENV_TOPOLOGY, Topology.STANDARD.value),
            os.getenv(ENV_BOARD_SIZE, str(MIN_SIDE)),
            os.getenv(ENV_PLAYERS, str(MIN_PLAYERS)),
        )
