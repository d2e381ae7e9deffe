"""A rectangular game board whose cells hold 'X', 'O' or a blank."""

from __future__ import annotations

EMPTY = " "
SYMBOLS = frozenset({"X", "O"})


class Board:
    """A grid of cells, each empty or marked by a player's symbol."""

    def __init__(self, rows: int, columns: int) -> None:
        if rows < 0 or columns < 0:
            raise ValueError("Board dimensions must not be negative.")
        self._rows = rows
        self._columns = columns
        self._cells = self._blank_grid(rows, columns)

    @staticmethod
    def _blank_grid(rows: int, columns: int) -> list[list[str]]:
        return [[EMPTY] * columns for _ in range(rows)]

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._columns

    @property
    def cells(self) -> list[list[str]]:
        """The live cell grid; callers must not modify it."""
        return self._cells

    def snapshot(self) -> list[list[str]]:
        """Return an independent copy of the cell grid."""
        return [list(row) for row in self._cells]

    def empty_cells(self) -> list[tuple[int, int]]:
        """Return the positions of empty cells in row-major order."""
        return [
            (r, c)
            for r, row in enumerate(self._cells)
            for c, value in enumerate(row)
            if value == EMPTY
        ]

    def is_valid_position(self, row: int, column: int) -> bool:
        """Tell whether the position lies on the board."""
        return 0 <= row < self._rows and 0 <= column < self._columns

    def get_cell(self, row: int, column: int) -> str:
        """Return the content of a cell."""
        if not self.is_valid_position(row, column):
            raise ValueError("Invalid cell access.")
        return self._cells[row][column]

    def set_cell(self, row: int, column: int, symbol: str) -> None:
        """Mark a cell with 'X' or 'O'."""
        if not self.is_valid_position(row, column) or symbol not in SYMBOLS:
            raise ValueError(
                "Invalid position or character. Must be 'X' or 'O' in a valid cell."
            )
        self._cells[row][column] = symbol

    def is_cell_empty(self, row: int, column: int) -> bool:
        """Tell whether a cell is empty."""
        if not self.is_valid_position(row, column):
            raise ValueError("Invalid cell position.")
        return self._cells[row][column] == EMPTY

    def is_full(self) -> bool:
        """Tell whether every cell is marked."""
        return all(value != EMPTY for row in self._cells for value in row)

    def reset(self) -> None:
        """Clear every cell, keeping the dimensions."""
        for row in self._cells:
            row[:] = [EMPTY] * self._columns

    def resize(self, rows: int, columns: int) -> None:
        """Replace the board with an empty one of the given size."""
        if rows <= 0 or columns <= 0:
            raise ValueError("Board dimensions must be positive.")
        self._rows = rows
        self._columns = columns
        self._cells = self._blank_grid(rows, columns)