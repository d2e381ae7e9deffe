"""A move: a player choosing a cell."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Move:
    """A player's choice of the cell at (row, column)."""

    player: Any
    row: int
    column: int

    @property
    def position(self) -> tuple[int, int]:
        """The (row, column) pair of the move."""
        return (self.row, self.column)

    @position.setter
    def position(self, value: tuple[int, int]) -> None:
        self.row, self.column = value