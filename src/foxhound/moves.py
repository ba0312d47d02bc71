"""
Geometry/Base movement rules

Key idea: Use strategy pattern to define the allowed steps for each piece kind.

A move is judged by check_move(), which never raises: it returns a MoveVerdict that either says the move is legal,
or says why it is not (a broken precondition or a violated rule).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Union

from src.core.exceptions import InvalidCoordinateFormatError, ValidationError, ValidationFailure
from src.foxhound.board import (
    validate_dimension,
    validate_dimension_matches_positions,
    validate_position_format,
    validate_position_set,
)
from src.foxhound.coordinate import Coordinate
from src.foxhound.pieces import PieceKind, Positions

Vector = tuple[int, int]
CoordinateLike = Union[Coordinate, str]
PositionsLike = Union[Positions, Sequence[str]]


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    origin: Coordinate
    destination: Coordinate

    @classmethod
    def from_text(cls, text: str) -> Move:
        """
        Two coordinates separated by a single space, origin first

        examples:
        * "D8 C7": move the piece on D8 to C7
        * "b1 c2": lower case is accepted as well
        """
        parts = text.strip().upper().split(" ")
        if len(parts) != 2:
            raise InvalidCoordinateFormatError(
                f"Expected two coordinates separated by a space: {text!r}"
            )
        origin, destination = (validate_position_format(part) for part in parts)
        return cls(origin, destination)

    def to_text(self) -> str:
        return f"{self.origin.to_text()} {self.destination.to_text()}"


# --- MOVEMENT RULES ---
# Both kinds move a single square diagonally. The fox in any direction, hounds only forward (increasing row).
FOX_STEPS: list[Vector] = [(1, 1), (1, -1), (-1, 1), (-1, -1)]
HOUND_STEPS: list[Vector] = [(1, 1), (-1, 1)]

# -- STRATEGY PATTERN: MOVEMENT RULES ---
MOVEMENT_RULES: dict[PieceKind, list[Vector]] = {
    PieceKind.FOX: FOX_STEPS,
    PieceKind.HOUND: HOUND_STEPS,
}


class MoveRejection(Enum):
    """Rules a move can break, in the order they get checked."""

    OFF_BOARD = "origin or destination not on the board"
    EMPTY_ORIGIN = "no piece on the origin"
    WRONG_PIECE = "piece on the origin belongs to the other side"
    OCCUPIED_DESTINATION = "destination is occupied"
    WRONG_DIRECTION = "destination cannot be reached in a single step"


@dataclass(frozen=True)
class MoveVerdict:
    """
    Outcome of checking a move
    ----

    * legal: the only thing the menu flow cares about
    * failure: set if the input itself was broken (bad dimension, malformed coordinate, inconsistent positions)
    * rejection: set if the input was fine, but the move breaks a rule
    """

    legal: bool
    failure: Optional[ValidationFailure] = None
    rejection: Optional[MoveRejection] = None
    message: str = ""

    @classmethod
    def accept(cls) -> MoveVerdict:
        return cls(legal=True)

    @classmethod
    def invalid_input(cls, error: ValidationError) -> MoveVerdict:
        return cls(legal=False, failure=error.failure, message=str(error))

    @classmethod
    def reject(cls, rejection: MoveRejection) -> MoveVerdict:
        return cls(legal=False, rejection=rejection, message=rejection.value)

    def __bool__(self) -> bool:
        return self.legal


def check_move(
    dimension: int,
    positions: PositionsLike,
    moving_kind: PieceKind,
    origin: CoordinateLike,
    destination: CoordinateLike,
) -> MoveVerdict:
    """
    Decide if the piece of the given kind may move from origin to destination
    ----

    **Preconditions** (reported as `failure`)
    1. dimension in range
    2. origin and destination well-formed
    3. positions consistent with the dimension (count, bounds, no duplicates)

    **Rules** (reported as `rejection`, first one broken wins)
    1. origin and destination on the board
    2. origin holds a piece of the moving kind
    3. destination is empty (there is no capturing)
    4. the step is one of the allowed steps for that kind
    """
    try:
        validate_dimension(dimension)
        origin = _as_coordinate(origin)
        destination = _as_coordinate(destination)
        positions = _as_positions(positions)
        validate_dimension_matches_positions(positions, dimension)
    except ValidationError as error:
        return MoveVerdict.invalid_input(error)

    if not (origin.is_within(dimension) and destination.is_within(dimension)):
        return MoveVerdict.reject(MoveRejection.OFF_BOARD)

    occupant = positions.kind_at(origin)
    if occupant is None:
        return MoveVerdict.reject(MoveRejection.EMPTY_ORIGIN)
    if occupant != moving_kind:
        return MoveVerdict.reject(MoveRejection.WRONG_PIECE)

    if destination in positions:
        return MoveVerdict.reject(MoveRejection.OCCUPIED_DESTINATION)

    step = (destination.column - origin.column, destination.row - origin.row)
    if step not in MOVEMENT_RULES[moving_kind]:
        return MoveVerdict.reject(MoveRejection.WRONG_DIRECTION)

    return MoveVerdict.accept()


def is_legal_move(
    dimension: int,
    positions: PositionsLike,
    moving_kind: PieceKind,
    origin: CoordinateLike,
    destination: CoordinateLike,
) -> bool:
    """Convenience wrapper for callers that only need a yes/no"""
    return check_move(dimension, positions, moving_kind, origin, destination).legal


def candidate_moves(positions: Positions, kind: PieceKind) -> list[Move]:
    """Every single step of every piece of this kind. Might be off the board or blocked: legality is checked later."""
    squares = [positions.fox] if kind == PieceKind.FOX else list(positions.hounds)
    return [
        Move(square, square.shifted(d_column, d_row))
        for square in squares
        for d_column, d_row in MOVEMENT_RULES[kind]
    ]


def legal_moves(dimension: int, positions: Positions, kind: PieceKind) -> list[Move]:
    """The candidate moves that survive check_move()"""
    return [
        move
        for move in candidate_moves(positions, kind)
        if is_legal_move(dimension, positions, kind, move.origin, move.destination)
    ]


# -- Internal helpers --
def _as_coordinate(value: CoordinateLike) -> Coordinate:
    if isinstance(value, Coordinate):
        return value
    return validate_position_format(value)


def _as_positions(value: PositionsLike) -> Positions:
    if isinstance(value, Positions):
        return value
    return validate_position_set(value)
