"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import GameError, InvalidRequestError
from src.core.shared_types import Side, Status
from src.foxhound.board import initialise_positions, validate_position_format
from src.foxhound.save_format import is_valid_save_string


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    # None: use the configured default dimension
    dimension: Optional[int] = None

    @field_validator("dimension")
    @classmethod
    def validate_dimension(cls, value: Optional[int]) -> Optional[int]:
        if value is None:
            return value

        try:
            initialise_positions(value)
        except GameError as error:
            raise InvalidRequestError(f"Cannot start a game on this board: {error}")
        return value


class GetGameRequest(BaseModel):
    game_id: UUID


class LegalMovesRequest(BaseModel):
    game_id: UUID


class MoveRequest(BaseModel):
    game_id: UUID
    origin: str
    destination: str

    @field_validator(*["origin", "destination"])
    @classmethod
    def validate_coordinate(cls, value: str) -> str:
        # accept 'b1' as well as 'B1'
        value = value.strip().upper()
        try:
            validate_position_format(value)
        except GameError:
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a valid coordinate."
            )
        return value


class ExportGameRequest(BaseModel):
    game_id: UUID


class ImportGameRequest(BaseModel):
    game_id: UUID
    state: str

    @field_validator("state")
    @classmethod
    def validate_state(cls, value: str) -> str:
        """Only the structure: whether it fits the board is up to the game itself."""
        if not is_valid_save_string(value.strip()):
            raise InvalidRequestError(f"Cannot interpret {value!r} as a saved game.")
        return value.strip()


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    dimension: int
    state: str
    side_to_move: Side
    status: Status
    move_history: list[str]


class LegalMovesResponse(BaseModel):
    game_id: UUID
    side_to_move: Side
    legal_moves: list[str]


class ExportGameResponse(BaseModel):
    game_id: UUID
    state: str
