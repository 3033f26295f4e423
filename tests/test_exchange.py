import json
import random

import pytest

from connect_four.data.wire import WireFormat, encode
from connect_four.game.state import create_initial_state
from connect_four.interfaces.exchange import (Exchange, dump_exchange, initial_exchange,
                                              load_exchange, next_exchanges, respond)
from connect_four.utils import Color, QualityLevel


def _payload(state, **extra):
    data = encode(state, WireFormat.CAMEL)
    data.update(extra)
    return data


@pytest.mark.parametrize("payload", [
    None,
    "",
    "{broken",
    b"[1, 2, 3]",
    {"board": []},
    {"board": [[None] * 6] * 7, "currentPlayer": "purple", "isGameOver": False},
])
def test_bad_payload_starts_a_new_game(payload):
    exchange = load_exchange(payload)
    assert exchange == initial_exchange()
    assert exchange.state == create_initial_state()
    assert exchange.quality is QualityLevel.HIGH


def test_bad_bookkeeping_fields_start_a_new_game():
    state = create_initial_state()
    assert load_exchange(_payload(state, newestPieceColumn=9)) == initial_exchange()
    assert load_exchange(_payload(state, minimaxQuality="great")) == initial_exchange()


def test_load_reads_every_field(play):
    state = play([3, 2])
    payload = _payload(state, newestPieceColumn=3, newestComputerPieceColumn=2,
                       minimaxQuality="medium")

    exchange = load_exchange(json.dumps(payload))

    assert exchange.state == state
    assert exchange.quality is QualityLevel.MEDIUM
    assert exchange.newest_piece_column == 3
    assert exchange.newest_computer_piece_column == 2


def test_load_state_written_top_first():
    board = [[None] * 6 for _ in range(7)]
    board[3][5] = "red"
    exchange = load_exchange({"board": board, "currentPlayer": "yellow", "isGameOver": False,
                              "winner": None, "newestPieceColumn": 3})

    assert exchange != initial_exchange()
    assert exchange.state.board.cell(3, 0) is Color.RED
    assert exchange.newest_piece_column == 3


def test_dump_then_load(play):
    exchange = Exchange(state=play([3, 3, 4]), quality=QualityLevel.LOW,
                        newest_piece_column=4, newest_computer_piece_column=3)
    text = dump_exchange(exchange)

    data = json.loads(text)
    assert data["minimaxQuality"] == "bad"
    assert data["newestPieceColumn"] == 4
    assert load_exchange(text) == exchange


def test_respond_plays_for_the_computer(play):
    exchange = Exchange(state=play([0, 6, 1, 6, 2]), newest_piece_column=2)

    reply = respond(exchange)

    assert reply.newest_computer_piece_column == 3
    assert reply.newest_piece_column == 2
    assert reply.state.board.cell(3, 0) is Color.YELLOW
    assert reply.state.current_player is Color.RED
    assert exchange.state.board.height(3) == 0


def test_respond_waits_for_the_human():
    exchange = initial_exchange()
    assert respond(exchange) is exchange


def test_respond_to_finished_game(play):
    exchange = Exchange(state=play([0, 6, 1, 6, 2, 6, 3]))
    assert respond(exchange) is exchange


def test_respond_with_low_quality_uses_rng(play):
    exchange = Exchange(state=play([3]), quality=QualityLevel.LOW)
    first = respond(exchange, rng=random.Random(8))
    second = respond(exchange, rng=random.Random(8))
    assert first == second


def test_next_exchanges(play):
    exchange = Exchange(state=play([3, 3] * 3), quality=QualityLevel.MEDIUM,
                        newest_piece_column=3, newest_computer_piece_column=3)

    candidates = next_exchanges(exchange)

    assert sorted(candidates) == [0, 1, 2, 4, 5, 6]
    for column, candidate in candidates.items():
        assert candidate.newest_piece_column == column
        assert candidate.newest_computer_piece_column is None
        assert candidate.quality is QualityLevel.MEDIUM
        assert candidate.state.board.cell(column, 0) is Color.RED
    assert exchange.state.board.height(0) == 0


def test_next_exchanges_are_not_shared(play):
    first = next_exchanges(Exchange(state=play([3])))
    second = next_exchanges(Exchange(state=play([4])))
    assert first[0].state != second[0].state
    assert next_exchanges(Exchange(state=play([3]))) is not first


def test_full_round(play):
    """Human move chosen from the candidates, then the computer answers."""
    exchange = load_exchange(None)
    exchange = next_exchanges(exchange)[3]
    exchange = respond(load_exchange(dump_exchange(exchange)))

    assert exchange.newest_piece_column == 3
    assert exchange.newest_computer_piece_column is not None
    assert exchange.state.current_player is Color.RED
    assert exchange.state.board.count(Color.YELLOW) == 1
