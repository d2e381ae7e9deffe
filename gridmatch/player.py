"""Players, their statistics and how they place moves on a board."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .board import SYMBOLS, Board
from .move import Move

WINS_PER_LEVEL = 3


class Player(ABC):
    """A participant with a symbol, a record of games and a level."""

    def __init__(
        self, name: str, kind: str, wins: int, losses: int, played: int, symbol: str
    ) -> None:
        self.name = name
        self.kind = kind
        self.wins = wins
        self.losses = losses
        self.played = played
        self._symbol = symbol
        self.level = 1
        self.consecutive_wins = 0

    @property
    def symbol(self) -> str:
        """The player's mark, 'X' or 'O'."""
        return self._symbol

    @symbol.setter
    def symbol(self, value: str) -> None:
        if value not in SYMBOLS:
            raise ValueError("Invalid symbol. Only 'X' or 'O' are allowed.")
        self._symbol = value

    @abstractmethod
    def make_move(self, move: Move, board: Board) -> None:
        """Apply a move to the board."""

    @abstractmethod
    def __str__(self) -> str:
        """Describe the player."""

    def update_stats(self, win: bool) -> None:
        """Record a game; three wins in a row raise the level."""
        if win:
            self.wins += 1
            self.consecutive_wins += 1
        else:
            self.consecutive_wins = 0
            self.losses += 1
        if self.consecutive_wins == WINS_PER_LEVEL:
            self.consecutive_wins = 0
            self.level += 1
        self.played += 1

    def reset_progress(self) -> None:
        """Clear all statistics and return to level 1."""
        self.played = 0
        self.wins = 0
        self.losses = 0
        self.consecutive_wins = 0
        self.level = 1


class HumanPlayer(Player):
    """A player whose moves are chosen from outside."""

    def make_move(self, move: Move, board: Board) -> None:
        if move.player is not self:
            raise ValueError("Move does not belong to this player.")
        board.set_cell(move.row, move.column, self.symbol)

    def __str__(self) -> str:
        return (
            f"Name: {self.name}\n"
            f"Type: {self.kind}\n"
            f"Symbol: {self.symbol}\n"
            f"Level: {self.level}\n"
            f"Games Played: {self.played}\n"
            f"Wins: {self.wins}\n"
            f"Losses: {self.losses}"
        )


class AIPlayer(Player):
    """A player that takes the first empty cell in row-major order."""

    def make_move(self, move: Move, board: Board) -> None:
        empty = board.empty_cells()
        if not empty:
            return
        move.position = empty[0]
        move.player = self
        board.set_cell(move.row, move.column, self.symbol)

    def __str__(self) -> str:
        return (
            f"Name: {self.name}\n"
            f"Type: {self.kind}\n"
            f"Symbol: {self.symbol}\n"
            f"Level: {self.level}"
        )