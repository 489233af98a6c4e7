"""Square grid of player marks and its text views."""

from __future__ import annotations

from connect_six.models import Player

EMPTY_LABEL = "**"


class Board:
    def __init__(self, side: int):
        self.side = side
        self.cells: list[list[Player | None]] = [[None] * side for _ in range(side)]

    def get(self, row: int, col: int) -> Player | None:
        return self.cells[row][col]

    def set(self, row: int, col: int, player: Player) -> None:
        self.cells[row][col] = player

    def is_empty(self, row: int, col: int) -> bool:
        return self.cells[row][col] is None

    def clear(self) -> None:
        self.cells = [[None] * self.side for _ in range(self.side)]

    def label(self, row: int, col: int) -> str:
        owner = self.cells[row][col]
        return EMPTY_LABEL if owner is None else owner.label

    def render_line(self, index: int, horizontal: bool) -> str:
        """Render row `index` (horizontal) or column `index` as space-separated labels."""
        if horizontal:
            labels = (self.label(index, col) for col in range(self.side))
        else:
            labels = (self.label(row, index) for row in range(self.side))
        return " ".join(labels)

    def render(self) -> str:
        return "\n".join(self.render_line(row, True) for row in range(self.side))
