"""Grid board, moves, players and a text view for X/O board games."""

__version__ = "0.1.0"
__all__ = ["board", "move", "player", "view"]