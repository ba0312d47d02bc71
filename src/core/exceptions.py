"""
Custom exceptions used across layers.

Everything raised on purpose derives from GameError, so the service (and anything above it) can catch a single type.
Validation errors additionally carry a ValidationFailure, which tells the caller *which* invariant got violated
without having to match on the exception class.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from src.foxhound.moves import MoveVerdict


class ValidationFailure(Enum):
    """The distinguishable ways in which a board configuration / coordinate can be invalid."""

    DIMENSION_OUT_OF_RANGE = "dimension out of range"
    INVALID_COORDINATE_FORMAT = "invalid coordinate format"
    INVALID_COORDINATE_VALUE = "invalid coordinate value"
    PLAYER_COUNT_MISMATCH = "player count mismatch"
    POSITION_OUT_OF_IMPLIED_BOUND = "position out of implied bound"
    NULL_POSITION_SET = "null position set"
    DUPLICATE_POSITION = "duplicate position"
    POSITION_OFF_BOARD = "position off board"
    CORRUPTED_FIGURE = "corrupted figure"


class GameError(Exception):
    """Top-level exception for anything that goes wrong while handling a game."""


# --- VALIDATION ---
class ValidationError(GameError):
    failure: ValidationFailure


class DimensionOutOfRangeError(ValidationError):
    failure = ValidationFailure.DIMENSION_OUT_OF_RANGE


class InvalidCoordinateFormatError(ValidationError):
    failure = ValidationFailure.INVALID_COORDINATE_FORMAT


class InvalidCoordinateValueError(ValidationError):
    failure = ValidationFailure.INVALID_COORDINATE_VALUE


class PlayerCountMismatchError(ValidationError):
    failure = ValidationFailure.PLAYER_COUNT_MISMATCH


class PositionOutOfImpliedBoundError(ValidationError):
    failure = ValidationFailure.POSITION_OUT_OF_IMPLIED_BOUND


class NullPositionSetError(ValidationError):
    failure = ValidationFailure.NULL_POSITION_SET


class DuplicatePositionError(ValidationError):
    failure = ValidationFailure.DUPLICATE_POSITION


class PositionOffBoardError(ValidationError):
    failure = ValidationFailure.POSITION_OFF_BOARD


class CorruptedFigureError(ValidationError):
    """The side-to-move character of a saved game is neither 'F' nor 'H' (the legacy '#')."""

    failure = ValidationFailure.CORRUPTED_FIGURE


# --- GAME FLOW ---
class LoadFailedError(GameError):
    """Loading a saved state failed. The specific cause is chained as __cause__."""


class IllegalMoveError(GameError):
    def __init__(self, message: str, verdict: Optional[MoveVerdict] = None) -> None:
        super().__init__(message)
        self.verdict = verdict


class GameStateError(GameError):
    pass


# --- OUTER LAYERS ---
class RepositoryError(GameError):
    pass


class InvalidRequestError(GameError):
    """Raised from pydantic validators. Not a ValueError, so pydantic lets it through unwrapped."""
