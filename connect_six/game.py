"""Game logic: placement validation, win detection, and turn progression."""

from __future__ import annotations

import logging

from connect_six.board import Board
from connect_six.config import GameConfig
from connect_six.errors import CellOccupied, DuplicatePosition, GameOver
from connect_six.models import GameState, Player
from connect_six.topology import Topology

logger = logging.getLogger(__name__)

WIN_LENGTH = 6

# Eight scan directions: vertical, horizontal, diagonal ↘, diagonal ↙,
# each followed by its opposite.
DIRECTIONS = [
    (1, 0), (-1, 0),
    (0, 1), (0, -1),
    (1, 1), (-1, -1),
    (1, -1), (-1, 1),
]


def count_run(
    board: Board,
    topology: Topology,
    origin: tuple[int, int],
    owner: Player,
    direction: tuple[int, int],
) -> int:
    """Count `owner` cells from `origin` outward in one direction, origin included.

    Stops at the first foreign or empty cell, at a hard edge, or at WIN_LENGTH.
    """
    row, col = origin
    dr, dc = direction
    count = 1
    while count < WIN_LENGTH:
        next_row = topology.step(row + dr, board.side)
        next_col = topology.step(col + dc, board.side)
        if next_row is None or next_col is None:
            break
        if board.get(next_row, next_col) is not owner:
            break
        row, col = next_row, next_col
        count += 1
    return count


def has_winning_line(
    board: Board, topology: Topology, origin: tuple[int, int], owner: Player
) -> bool:
    """Check whether `origin` lies on six or more `owner` cells in a line."""
    for i in range(0, len(DIRECTIONS), 2):
        forward = count_run(board, topology, origin, owner, DIRECTIONS[i])
        if forward >= WIN_LENGTH:
            return True
        backward = count_run(board, topology, origin, owner, DIRECTIONS[i + 1])
        if backward >= WIN_LENGTH or forward + backward - 1 >= WIN_LENGTH:
            return True
    return False


class ConnectSixGame:
    """One game session: board, active player, placement counter, and state."""

    def __init__(self, config: GameConfig):
        self.config = config
        self.board = Board(config.side)
        self.current_player: Player = Player.first()
        self.state: GameState = GameState.RUNNING
        self.placements: int = 0

    @property
    def side(self) -> int:
        return self.config.side

    @property
    def topology(self) -> Topology:
        return self.config.topology

    @property
    def player_count(self) -> int:
        return self.config.players

    @property
    def max_placements(self) -> int:
        return self.side * self.side // 2

    def validate_placement(
        self, first_row: int, first_col: int, second_row: int, second_col: int
    ) -> tuple[tuple[int, int], tuple[int, int]]:
        """Return both canonical cells, or raise if the placement is not allowed."""
        if self.state.is_over:
            raise GameOver()
        first = self.topology.canonicalize_cell(first_row, first_col, self.side)
        second = self.topology.canonicalize_cell(second_row, second_col, self.side)
        if not self.board.is_empty(*first) or not self.board.is_empty(*second):
            raise CellOccupied()
        if first == second:
            raise DuplicatePosition()
        return first, second

    def place(self, first_row: int, first_col: int, second_row: int, second_col: int) -> str:
        """Place two tokens for the current player.

        Returns "OK" when play continues, "<player> wins" or "draw" when the
        game ends. The board is left untouched if validation fails.
        """
        first, second = self.validate_placement(first_row, first_col, second_row, second_col)
        player = self.current_player

        self.board.set(*first, player)
        self.board.set(*second, player)
        self.placements += 1
        logger.debug("%s placed at %s and %s (placement %d)", player.label, first, second, self.placements)

        if any(has_winning_line(self.board, self.topology, cell, player) for cell in (first, second)):
            self.state = GameState.WON
            logger.debug("%s completed a line of %d", player.label, WIN_LENGTH)
            return f"{player.label} wins"

        if self.placements == self.max_placements:
            self.state = GameState.DRAW
            logger.debug("Board full after %d placements", self.placements)
            return "draw"

        self.current_player = player.next(self.player_count)
        return "OK"

    def print_board(self) -> str:
        return self.board.render()

    def print_line(self, index: int, horizontal: bool) -> str:
        index = self.topology.canonicalize(index, self.side)
        return self.board.render_line(index, horizontal)

    def state_of(self, row: int, col: int) -> str:
        row, col = self.topology.canonicalize_cell(row, col, self.side)
        return self.board.label(row, col)

    def reset(self) -> str:
        self.board.clear()
        self.placements = 0
        self.current_player = Player.first()
        self.state = GameState.RUNNING
        logger.debug("Game reset")
        return "OK"
