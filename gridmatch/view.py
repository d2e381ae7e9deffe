"""Text rendering of a board grid."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO


class View:
    """Draws a grid of cells with row and column numbers."""

    def __init__(self, rows: int, columns: int, data: Sequence[Sequence[str]]) -> None:
        self.rows = rows
        self.columns = columns
        self.data = data

    def _render_row(self, row: Sequence[str]) -> str:
        last = self.columns - 1
        parts = []
        for j in range(self.columns):
            cell = row[j]
            if j == 0:
                parts.append(f"|{cell}:")
            elif j == last:
                parts.append(f":{cell}|")
            else:
                parts.append(f":{cell}:")
        return "".join(parts)

    def render(self) -> str:
        """Return the drawing of the grid as text."""
        rule = "  " + "-" * (self.columns * 3) + "\n"
        lines = ["   " + "".join(f"{j}  " for j in range(self.columns)) + "\n"]
        for i in range(self.rows):
            lines.append(rule)
            lines.append(f"{i} {self._render_row(self.data[i])}\n")
        if self.rows > 0:
            lines.append(rule)
        return "".join(lines)

    def draw(self, stream: TextIO | None = None) -> None:
        """Write the drawing to a stream, standard output by default."""
        (stream if stream is not None else sys.stdout).write(self.render())