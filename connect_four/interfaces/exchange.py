"""
exchange.py - Game states passed to and from a web front end

A web page keeps the whole game in a URL parameter: the camelCase state plus
the columns of the newest human and computer pieces and the chosen quality.
This module reads such payloads, plays the computer's reply, and builds the
candidate states for every human move.

Unlike the engine, ``load_exchange`` does not fail on bad input: a payload that
cannot be read is logged and replaced by a new game.
"""

import json
import random
from dataclasses import dataclass, replace
from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import Field, StrictInt

from connect_four.ai.search import choose_move
from connect_four.data.wire import CamelStateModel, WireFormat, model_to_state, state_to_model
from connect_four.debug import debug
from connect_four.game.state import GameState, apply_move, create_initial_state, legal_moves
from connect_four.utils import COLS, Color, QualityLevel

ColumnIndex = Annotated[StrictInt, Field(ge=0, le=COLS - 1)]


class ExchangeModel(CamelStateModel):
    """CamelCase game state with the page's bookkeeping fields."""

    newest_piece_column: Optional[ColumnIndex] = None
    newest_computer_piece_column: Optional[ColumnIndex] = None
    minimax_quality: Literal["bad", "medium", "best"] = "best"


@dataclass(frozen=True)
class Exchange:
    """
    One round trip with the page.

    Attributes:
        state: The game state
        quality: Strength of the computer player
        newest_piece_column: Column of the human's latest piece, if any
        newest_computer_piece_column: Column of the computer's latest piece, if any
    """
    state: GameState
    quality: QualityLevel = QualityLevel.HIGH
    newest_piece_column: Optional[int] = None
    newest_computer_piece_column: Optional[int] = None


def initial_exchange(quality: QualityLevel = QualityLevel.HIGH) -> Exchange:
    return Exchange(state=create_initial_state(), quality=quality)


def load_exchange(payload: Union[str, bytes, Dict[str, Any], None]) -> Exchange:
    """
    Read an exchange sent by the page.

    Args:
        payload: JSON text, already parsed JSON, or None for a new game

    Returns:
        The decoded exchange, or a new game if the payload is missing or
        malformed
    """
    if payload is None or payload == "":
        return initial_exchange()

    try:
        if isinstance(payload, (str, bytes)):
            payload = json.loads(payload)
        model = ExchangeModel.model_validate(payload)
        state = model_to_state(model)
    except ValueError as e:
        # InvalidState, ValidationError and JSONDecodeError are all ValueErrors
        debug.warning(f"Invalid game state, starting a new game: {e}", "exchange")
        return initial_exchange()

    return Exchange(
        state=state,
        quality=QualityLevel(model.minimax_quality),
        newest_piece_column=model.newest_piece_column,
        newest_computer_piece_column=model.newest_computer_piece_column,
    )


def dump_exchange(exchange: Exchange) -> str:
    """Serialize an exchange to compact camelCase JSON."""
    base = state_to_model(exchange.state, WireFormat.CAMEL)
    model = ExchangeModel(
        **base.model_dump(),
        newest_piece_column=exchange.newest_piece_column,
        newest_computer_piece_column=exchange.newest_computer_piece_column,
        minimax_quality=exchange.quality.value,
    )
    return model.model_dump_json(by_alias=True)


def respond(exchange: Exchange, computer_color: Color = Color.YELLOW,
            rng: Optional[random.Random] = None) -> Exchange:
    """
    Play the computer's move if it is the computer's turn.

    Args:
        exchange: The exchange received from the page
        computer_color: Color the computer plays
        rng: Random source for the Low tier

    Returns:
        The exchange after the computer's move, or the same exchange when the
        game is over or the human is to move
    """
    state = exchange.state
    if state.is_game_over or state.current_player is not computer_color:
        return exchange

    column = choose_move(state, exchange.quality, rng)
    debug.info(f"Computer replies in column {column}", "exchange")
    return replace(exchange, state=apply_move(state, column),
                   newest_computer_piece_column=column)


def next_exchanges(exchange: Exchange) -> Dict[int, Exchange]:
    """
    Build the exchange that each legal human move would produce.

    The dict is computed for this exchange only; it must not be reused for
    another game or request.

    Returns:
        Column to resulting exchange; empty once the game is over
    """
    return {
        column: replace(exchange, state=apply_move(exchange.state, column),
                        newest_piece_column=column, newest_computer_piece_column=None)
        for column in legal_moves(exchange.state)
    }
