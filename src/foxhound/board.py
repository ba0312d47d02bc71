"""
The board configuration: which dimensions are allowed and which sets of positions make sense for them.

Every check raises a subclass of ValidationError (see src/core/exceptions.py) at the first violated invariant.
"""

from typing import Optional, Sequence

from src.core.exceptions import (
    DimensionOutOfRangeError,
    DuplicatePositionError,
    InvalidCoordinateFormatError,
    NullPositionSetError,
    PlayerCountMismatchError,
    PositionOffBoardError,
    PositionOutOfImpliedBoundError,
)
from src.foxhound.coordinate import MAX_POSITION_LENGTH, MIN_POSITION_LENGTH, Coordinate
from src.foxhound.pieces import Positions

DEFAULT_DIMENSION = 8
MIN_DIMENSION = 4
MAX_DIMENSION = 26

# Starting layout: hounds along the first row on every other column, fox in the middle of the last row
FIRST_HOUND_COLUMN = 1
HOUND_COLUMN_STEP = 2
HOUND_START_ROW = 0


def expected_piece_count(dimension: int) -> int:
    """dimension/2 hounds + 1 fox"""
    return dimension // 2 + 1


def validate_dimension(dimension: int) -> None:
    if not (MIN_DIMENSION <= dimension <= MAX_DIMENSION):
        raise DimensionOutOfRangeError(
            f"Dimension out of range ({MIN_DIMENSION}-{MAX_DIMENSION}): {dimension}"
        )


def validate_position_format(text: str) -> Coordinate:
    """Check a single coordinate written as text, return it decoded."""
    if not isinstance(text, str):
        raise InvalidCoordinateFormatError(f"Coordinate should be text, got {text!r}")
    if not (MIN_POSITION_LENGTH <= len(text) <= MAX_POSITION_LENGTH):
        raise InvalidCoordinateFormatError(
            f"Coordinate should have length of {MIN_POSITION_LENGTH}-{MAX_POSITION_LENGTH}: {text!r}"
        )
    return Coordinate.from_text(text)


def validate_position_set(texts: Optional[Sequence[str]]) -> Positions:
    """
    Check a flat list of coordinates (hounds first, fox last) without knowing the dimension of the board.
    ----

    ---
    1. The list must exist (and hold at least the fox)
    2. Every entry must be a well-formed coordinate
    3. No coordinate may exceed the largest board that many pieces could belong to:
        n pieces --> n - 1 hounds --> dimension of at most 2 * (n - 1) + 1 = 2n - 1 squares.
        This catches an oversized / corrupted save even when nobody vouches for the dimension.
    4. No two pieces may share a square
    """
    if texts is None or len(texts) == 0:
        raise NullPositionSetError("The position set is empty or missing")

    coordinates = [validate_position_format(text) for text in texts]

    implied_bound = len(texts) * 2 - 1
    for coordinate in coordinates:
        if coordinate.column >= implied_bound or coordinate.row >= implied_bound:
            raise PositionOutOfImpliedBoundError(
                f"Coordinate {coordinate} exceeds the board span of {implied_bound} implied by {len(texts)} pieces"
            )

    _check_no_shared_squares(coordinates)
    return Positions.from_coordinates(coordinates)


def validate_dimension_matches_positions(positions: Positions, dimension: int) -> None:
    """Positions (already validated on their own) have to fit this particular board."""
    validate_dimension(dimension)

    if len(positions) != expected_piece_count(dimension):
        raise PlayerCountMismatchError(
            f"Players number does not match the dimension: expected {expected_piece_count(dimension)} for dimension {dimension}, got {len(positions)}"
        )

    for coordinate in positions:
        if not coordinate.is_within(dimension):
            raise PositionOffBoardError(
                f"Coordinate {coordinate} is not on a board of dimension {dimension}"
            )

    _check_no_shared_squares(list(positions))


def initialise_positions(dimension: int) -> Positions:
    """
    Canonical starting layout
    ----

    ex) dimension 8: hounds on B1, D1, F1, H1 and the fox on E8
    """
    validate_dimension(dimension)
    if dimension % 2 != 0:
        raise DimensionOutOfRangeError(
            f"Dimension must be even to set up the board: {dimension}"
        )

    hound_count = dimension // 2
    hounds = tuple(
        Coordinate(FIRST_HOUND_COLUMN + i * HOUND_COLUMN_STEP, HOUND_START_ROW)
        for i in range(hound_count)
    )
    fox = Coordinate(dimension // 2, dimension - 1)
    return Positions(hounds, fox)


def _check_no_shared_squares(coordinates: list[Coordinate]) -> None:
    if len(set(coordinates)) == len(coordinates):
        return
    duplicates = sorted({str(c) for c in coordinates if coordinates.count(c) > 1})
    raise DuplicatePositionError(
        f"Multiple pieces on the same square: {', '.join(duplicates)}"
    )
