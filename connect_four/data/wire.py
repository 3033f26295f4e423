"""
wire.py - Serialized form of the game state

Two engines exchange game states through JSON, and they name things
differently:

    SNAKE  {"board": [[..., "Empty", {"Filled": "Red"}], ...],
            "current_player": "Red", "winner": null, "is_game_over": false}
    CAMEL  {"board": [[..., null, "red"], ...],
            "currentPlayer": "red", "isGameOver": false, "winner": null}

Both layouts are fixed: field order, color spelling and cell encoding are part
of the contract, because states serialized by one engine are read by the
other. ``board`` is always 7 columns of 6 cells with the top cell first, the
reverse of ``Board``, whose columns start at the bottom.
"""

from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError
from pydantic.alias_generators import to_camel

from connect_four.debug import debug
from connect_four.errors import InvalidState
from connect_four.game.board import Board
from connect_four.game.state import GameState, validate_state
from connect_four.utils import COLS, ROWS, Cell, Color


class WireFormat(Enum):
    """Naming conventions of the serialized state."""
    SNAKE = "snake"
    CAMEL = "camel"


# --- SNAKE CASE (tagged cells, capitalized colors) ---

SnakeColor = Literal["Red", "Yellow"]


class FilledCell(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    Filled: SnakeColor


SnakeCell = Union[Literal["Empty"], FilledCell]
SnakeColumn = Annotated[List[SnakeCell], Field(min_length=ROWS, max_length=ROWS)]


class SnakeStateModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    board: Annotated[List[SnakeColumn], Field(min_length=COLS, max_length=COLS)]
    current_player: SnakeColor
    winner: Optional[SnakeColor] = None
    is_game_over: StrictBool


# --- CAMEL CASE (null for empty, lowercase colors) ---

CamelColor = Literal["red", "yellow"]
CamelColumn = Annotated[List[Optional[CamelColor]], Field(min_length=ROWS, max_length=ROWS)]


class CamelStateModel(BaseModel):
    model_config = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)

    board: Annotated[List[CamelColumn], Field(min_length=COLS, max_length=COLS)]
    current_player: CamelColor
    is_game_over: StrictBool
    winner: Optional[CamelColor] = None


MODELS: Dict[WireFormat, Type[BaseModel]] = {
    WireFormat.SNAKE: SnakeStateModel,
    WireFormat.CAMEL: CamelStateModel,
}

_SNAKE_NAMES = {Color.RED: "Red", Color.YELLOW: "Yellow"}
_CAMEL_NAMES = {Color.RED: "red", Color.YELLOW: "yellow"}
_SNAKE_COLORS = {name: color for color, name in _SNAKE_NAMES.items()}
_CAMEL_COLORS = {name: color for color, name in _CAMEL_NAMES.items()}


def _snake_cell(cell: Cell) -> SnakeCell:
    return "Empty" if cell is None else FilledCell(Filled=_SNAKE_NAMES[cell])


def _snake_to_cell(cell: SnakeCell) -> Cell:
    return None if cell == "Empty" else _SNAKE_COLORS[cell.Filled]


def _optional(mapping, key):
    return None if key is None else mapping[key]


def state_to_model(state: GameState, fmt: WireFormat) -> BaseModel:
    """Build the wire model for a state."""
    columns = [column[::-1] for column in state.board.columns()]
    if fmt is WireFormat.SNAKE:
        return SnakeStateModel(
            board=[[_snake_cell(cell) for cell in column] for column in columns],
            current_player=_SNAKE_NAMES[state.current_player],
            winner=_optional(_SNAKE_NAMES, state.winner),
            is_game_over=state.is_game_over,
        )
    return CamelStateModel(
        board=[[_optional(_CAMEL_NAMES, cell) for cell in column] for column in columns],
        current_player=_CAMEL_NAMES[state.current_player],
        is_game_over=state.is_game_over,
        winner=_optional(_CAMEL_NAMES, state.winner),
    )


def model_to_state(model: BaseModel) -> GameState:
    """
    Convert a validated wire model into a GameState.

    Raises:
        InvalidState: If the board breaks gravity or the state is inconsistent
    """
    if isinstance(model, SnakeStateModel):
        columns = [[_snake_to_cell(cell) for cell in reversed(column)] for column in model.board]
        colors = _SNAKE_COLORS
    else:
        columns = [[_optional(_CAMEL_COLORS, cell) for cell in reversed(column)]
                   for column in model.board]
        colors = _CAMEL_COLORS

    state = GameState(
        board=Board.from_columns(columns),
        current_player=colors[model.current_player],
        is_game_over=model.is_game_over,
        winner=_optional(colors, model.winner),
    )
    return validate_state(state)


def _validate(fmt: WireFormat, data: Any, from_json: bool) -> BaseModel:
    model_cls = MODELS[fmt]
    try:
        if from_json:
            return model_cls.model_validate_json(data)
        return model_cls.model_validate(data)
    except ValidationError as e:
        debug.debug(f"Rejected {fmt.value} state: {e.error_count()} error(s)", "wire")
        raise InvalidState(f"Malformed {fmt.value} game state: {e}") from e


def encode(state: GameState, fmt: WireFormat = WireFormat.SNAKE) -> Dict[str, Any]:
    """
    Encode a state as JSON-ready data.

    Args:
        state: State to encode
        fmt: Naming convention to produce

    Returns:
        A dict with the fields of ``fmt`` in contract order
    """
    return state_to_model(state, fmt).model_dump(mode="json", by_alias=True)


def decode(data: Dict[str, Any], fmt: WireFormat = WireFormat.SNAKE) -> GameState:
    """
    Decode and validate a state.

    Args:
        data: Parsed JSON in the ``fmt`` layout; unknown fields are ignored
        fmt: Naming convention of ``data``

    Returns:
        The equivalent GameState

    Raises:
        InvalidState: If the data does not follow the layout or describes a
            position no legal game reaches
    """
    return model_to_state(_validate(fmt, data, from_json=False))


def dumps(state: GameState, fmt: WireFormat = WireFormat.SNAKE) -> str:
    """Serialize a state to compact JSON."""
    return state_to_model(state, fmt).model_dump_json(by_alias=True)


def loads(text: Union[str, bytes], fmt: WireFormat = WireFormat.SNAKE) -> GameState:
    """Parse and validate a JSON state. Raises InvalidState on bad input."""
    return model_to_state(_validate(fmt, text, from_json=True))


def translate(data: Dict[str, Any], source: WireFormat, target: WireFormat) -> Dict[str, Any]:
    """
    Convert a serialized state from one naming convention to the other.

    Every field survives the trip, including a null winner, so translating
    back gives the original data.

    Raises:
        InvalidState: If ``data`` is not a valid ``source`` state
    """
    return encode(decode(data, source), target)
