import random

import pytest

from connect_four.errors import ColumnFull, GameAlreadyOver, InvalidColumn
from connect_four.game.session import ConnectFourGame
from connect_four.utils import Color, QualityLevel


def test_new_game():
    game = ConnectFourGame()
    assert game.human_color is Color.RED
    assert not game.is_computer_turn()
    assert game.get_valid_moves() == list(range(7))
    assert game.get_winner() is None


def test_turns_alternate_between_human_and_computer():
    game = ConnectFourGame(quality=QualityLevel.MEDIUM)
    game.play(3)
    assert game.is_computer_turn()

    with pytest.raises(RuntimeError):
        game.play(2)

    column = game.computer_move()
    top = game.state.board.height(column) - 1
    assert game.state.board.cell(column, top) is Color.YELLOW
    assert not game.is_computer_turn()

    with pytest.raises(RuntimeError):
        game.computer_move()


def test_computer_can_move_first():
    game = ConnectFourGame(computer_color=Color.RED, quality="bad", rng=random.Random(3))
    assert game.human_color is Color.YELLOW
    assert game.is_computer_turn()
    game.computer_move()
    assert game.state.current_player is Color.YELLOW


def test_engine_errors_propagate(play):
    game = ConnectFourGame()
    game.state = play([0] * 6)

    with pytest.raises(ColumnFull):
        game.play(0)
    with pytest.raises(InvalidColumn):
        game.play(9)
    assert game.state.board.height(0) == 6


def test_finished_game(play):
    game = ConnectFourGame(quality=QualityLevel.LOW, rng=random.Random(0))
    game.state = play([0, 6, 1, 6, 2, 6])
    game.play(3)

    assert game.is_game_over()
    assert game.get_winner() is Color.RED
    assert game.get_valid_moves() == []
    with pytest.raises(GameAlreadyOver):
        game.play(4)
    with pytest.raises(GameAlreadyOver):
        game.computer_move()


def test_reset():
    game = ConnectFourGame()
    game.play(3)
    game.reset()
    assert game.state.board.is_empty()
    assert game.state.current_player is Color.RED
