import pytest

from gridmatch.board import Board
from gridmatch.move import Move
from gridmatch.player import AIPlayer, HumanPlayer, Player


def test_player_is_abstract():
    with pytest.raises(TypeError):
        Player("Abdo", "Human", 0, 0, 0, "X")


def test_attributes_from_constructor():
    player = HumanPlayer("Abdo", "Human", 3, 1, 5, "X")
    assert player.name == "Abdo"
    assert player.kind == "Human"
    assert player.wins == 3
    assert player.losses == 1
    assert player.played == 5
    assert player.symbol == "X"
    assert player.level == 1
    assert player.consecutive_wins == 0


def test_setters_update_values():
    player = HumanPlayer("X", "AI", 0, 0, 0, "O")
    player.name = "NewName"
    player.kind = "Human"
    player.symbol = "X"
    player.level = 5
    assert player.name == "NewName"
    assert player.kind == "Human"
    assert player.symbol == "X"
    assert player.level == 5


def test_invalid_symbol_raises():
    player = HumanPlayer("Abdo", "Human", 0, 0, 0, "X")
    with pytest.raises(ValueError):
        player.symbol = "Z"
    assert player.symbol == "X"


def test_update_stats_on_win():
    player = HumanPlayer("Abdo", "Human", 0, 0, 0, "X")
    player.update_stats(True)
    assert player.wins == 1
    assert player.played == 1
    assert player.consecutive_wins == 1
    assert player.level == 1

    player.update_stats(True)
    player.update_stats(True)
    assert player.wins == 3
    assert player.consecutive_wins == 0
    assert player.level == 2


def test_update_stats_resets_streak_on_loss():
    player = HumanPlayer("Abdo", "Human", 2, 0, 2, "X")
    player.update_stats(True)
    assert player.consecutive_wins == 1
    player.update_stats(False)
    assert player.consecutive_wins == 0
    assert player.losses == 1
    assert player.played == 4


def test_reset_progress():
    player = HumanPlayer("Abdo", "Human", 5, 3, 10, "O")
    player.level = 4
    player.update_stats(True)
    player.reset_progress()
    assert player.wins == 0
    assert player.losses == 0
    assert player.played == 0
    assert player.level == 1
    assert player.consecutive_wins == 0


def test_human_player_str():
    description = str(HumanPlayer("Abdo", "Human", 3, 1, 4, "X"))
    for part in (
        "Name: Abdo",
        "Type: Human",
        "Symbol: X",
        "Games Played: 4",
        "Wins: 3",
        "Losses: 1",
    ):
        assert part in description


def test_human_make_move_valid():
    player = HumanPlayer("Abdo", "Human", 0, 0, 0, "X")
    board = Board(3, 3)
    player.make_move(Move(player, 1, 2), board)
    assert board.get_cell(1, 2) == "X"


def test_human_make_move_invalid_owner():
    player1 = HumanPlayer("P1", "Human", 0, 0, 0, "X")
    player2 = HumanPlayer("P2", "Human", 0, 0, 0, "O")
    board = Board(3, 3)
    with pytest.raises(ValueError):
        player1.make_move(Move(player2, 0, 0), board)
    assert board.is_cell_empty(0, 0) is True


def test_ai_takes_first_empty_cell():
    ai = AIPlayer("Bot", "AI", 0, 0, 0, "O")
    other = HumanPlayer("P1", "Human", 0, 0, 0, "X")
    board = Board(2, 2)
    board.set_cell(0, 0, "X")
    move = Move(other, 0, 0)
    ai.make_move(move, board)
    assert move.position == (0, 1)
    assert move.player is ai
    assert board.get_cell(0, 1) == "O"


def test_ai_on_full_board_changes_nothing():
    ai = AIPlayer("Bot", "AI", 0, 0, 0, "O")
    board = Board(1, 1)
    board.set_cell(0, 0, "X")
    move = Move(ai, 5, 5)
    ai.make_move(move, board)
    assert move.position == (5, 5)
    assert board.snapshot() == [["X"]]


def test_ai_player_str():
    assert str(AIPlayer("Bot", "AI", 0, 0, 0, "O")) == (
        "Name: Bot\nType: AI\nSymbol: O\nLevel: 1"
    )