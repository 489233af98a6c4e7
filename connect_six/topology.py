"""Coordinate mapping for the two board topologies."""

from __future__ import annotations

from enum import Enum

from connect_six.errors import OutOfBounds


class Topology(str, Enum):
    STANDARD = "standard"
    TORUS = "torus"

    def canonicalize(self, index: int, side: int) -> int:
        """Map a raw coordinate to its in-range representative.

        Standard boards reject anything outside [0, side); torus boards wrap
        with a floor modulo, so -1 becomes side - 1.
        """
        if self is Topology.TORUS:
            return index % side
        if 0 <= index < side:
            return index
        raise OutOfBounds()

    def canonicalize_cell(self, row: int, col: int, side: int) -> tuple[int, int]:
        return self.canonicalize(row, side), self.canonicalize(col, side)

    def step(self, index: int, side: int) -> int | None:
        """Resolve a coordinate reached while walking a line.

        Returns None when the walk has left a standard board.
        """
        if 0 <= index < side:
            return index
        if self is Topology.TORUS:
            return index % side
        return None
