import json

import pytest

from connect_four.data.wire import WireFormat, decode, dumps, encode, loads, translate
from connect_four.errors import InvalidState
from connect_four.game.state import create_initial_state
from connect_four.utils import COLS, ROWS, Color

SNAKE, CAMEL = WireFormat.SNAKE, WireFormat.CAMEL


def _empty_board(empty):
    return [[empty] * ROWS for _ in range(COLS)]


def test_initial_state_snake_json():
    column = "[" + ",".join(['"Empty"'] * ROWS) + "]"
    board = "[" + ",".join([column] * COLS) + "]"
    expected = '{"board":' + board + ',"current_player":"Red","winner":null,"is_game_over":false}'
    assert dumps(create_initial_state(), SNAKE) == expected


def test_initial_state_camel_json():
    column = "[" + ",".join(["null"] * ROWS) + "]"
    board = "[" + ",".join([column] * COLS) + "]"
    expected = '{"board":' + board + ',"currentPlayer":"red","isGameOver":false,"winner":null}'
    assert dumps(create_initial_state(), CAMEL) == expected


def test_field_order():
    state = create_initial_state()
    assert list(encode(state, SNAKE)) == ["board", "current_player", "winner", "is_game_over"]
    assert list(encode(state, CAMEL)) == ["board", "currentPlayer", "isGameOver", "winner"]


def test_first_move_in_both_formats(play):
    state = play([3])

    snake = encode(state, SNAKE)
    assert snake["board"][3][ROWS - 1] == {"Filled": "Red"}
    assert snake["board"][3][ROWS - 2] == "Empty"
    assert snake["current_player"] == "Yellow"

    camel = encode(state, CAMEL)
    assert camel["board"][3][ROWS - 1] == "red"
    assert camel["board"][3][ROWS - 2] is None
    assert camel["currentPlayer"] == "yellow"


def test_columns_are_listed_top_first():
    # Red's first piece in column 3, written the way the other engine writes it
    snake = _empty_board("Empty")
    snake[3][ROWS - 1] = {"Filled": "Red"}
    state = decode({"board": snake, "current_player": "Yellow", "winner": None,
                    "is_game_over": False}, SNAKE)
    assert state.board.cell(3, 0) is Color.RED
    assert state.board.height(3) == 1
    assert state.current_player is Color.YELLOW

    camel = _empty_board(None)
    camel[3][ROWS - 1] = "red"
    camel[3][ROWS - 2] = "yellow"
    state = decode({"board": camel, "currentPlayer": "red", "isGameOver": False}, CAMEL)
    assert state.board.column(3)[:3] == (Color.RED, Color.YELLOW, None)


def test_piece_at_the_top_of_an_empty_column_is_floating():
    board = _empty_board("Empty")
    board[3][0] = {"Filled": "Red"}
    with pytest.raises(InvalidState):
        decode({"board": board, "current_player": "Yellow", "is_game_over": False}, SNAKE)


def test_finished_games(play, draw_sequence):
    won = encode(play([0, 0, 1, 1, 2, 2, 3]), CAMEL)
    assert won["isGameOver"] is True
    assert won["winner"] == "red"

    drawn = encode(play(draw_sequence), SNAKE)
    assert drawn["is_game_over"] is True
    assert drawn["winner"] is None


@pytest.mark.parametrize("fmt", [SNAKE, CAMEL])
def test_decode_restores_the_state(fmt, play, draw_sequence, random_states):
    states = [play([0, 0, 1, 1, 2, 2, 3]), play(draw_sequence)] + random_states(3, seed=9)
    for state in states:
        assert decode(encode(state, fmt), fmt) == state
        assert loads(dumps(state, fmt), fmt) == state


def test_translate_both_ways(play):
    state = play([3, 4, 3, 4])
    snake, camel = encode(state, SNAKE), encode(state, CAMEL)

    assert translate(snake, SNAKE, CAMEL) == camel
    assert translate(camel, CAMEL, SNAKE) == snake
    assert "winner" in translate(snake, SNAKE, CAMEL)


def test_missing_winner_and_extra_fields():
    data = {"board": _empty_board(None), "currentPlayer": "red",
            "isGameOver": False, "newestPieceColumn": 3}
    assert decode(data, CAMEL) == create_initial_state()


def test_terminal_state_may_name_either_player(play):
    data = encode(play([0, 0, 1, 1, 2, 2, 3]), SNAKE)
    data["current_player"] = "Yellow"
    state = decode(data, SNAKE)
    assert state.winner is Color.RED
    assert state.current_player is Color.YELLOW


def _snake_initial():
    return encode(create_initial_state(), SNAKE)


def _with(**changes):
    data = _snake_initial()
    data.update(changes)
    return data


@pytest.mark.parametrize("data", [
    _with(board=_empty_board("Empty")[:-1]),
    _with(board=[column[:-1] for column in _empty_board("Empty")]),
    _with(board=[["Red"] + ["Empty"] * (ROWS - 1)] + _empty_board("Empty")[1:]),
    _with(board=[[{"Filled": "Green"}] + ["Empty"] * (ROWS - 1)] + _empty_board("Empty")[1:]),
    _with(current_player="Blue"),
    _with(current_player="red"),
    _with(is_game_over="true"),
    _with(is_game_over=0),
    _with(winner="Red", is_game_over=True),
    {"board": _empty_board("Empty"), "current_player": "Red"},
    "not a state",
])
def test_invalid_snake_states(data):
    with pytest.raises(InvalidState):
        decode(data, SNAKE)


def test_floating_piece_is_invalid():
    board = _empty_board(None)
    board[2][3] = "yellow"
    data = {"board": board, "currentPlayer": "red", "isGameOver": False, "winner": None}
    with pytest.raises(InvalidState):
        decode(data, CAMEL)


def test_unbalanced_counts_are_invalid():
    board = _empty_board(None)
    board[0][-1] = board[1][-1] = "red"
    data = {"board": board, "currentPlayer": "yellow", "isGameOver": False}
    with pytest.raises(InvalidState):
        decode(data, CAMEL)


def test_snake_state_is_not_camel():
    with pytest.raises(InvalidState):
        decode(_snake_initial(), CAMEL)


@pytest.mark.parametrize("text", ["", "{", "[]", json.dumps({"board": None})])
def test_bad_json(text):
    with pytest.raises(InvalidState):
        loads(text, CAMEL)
