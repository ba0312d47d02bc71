"""
A coordinate on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_uppercase, digits

from src.core.exceptions import InvalidCoordinateFormatError, InvalidCoordinateValueError

# Textual form is a single column letter + a row number of at most two digits
MIN_POSITION_LENGTH = 2
MAX_POSITION_LENGTH = 3


def encode(column: int, row: int) -> str:
    """Zero-based (column, row) --> 'A1' style text. Only negative values are rejected here."""
    if column < 0:
        raise InvalidCoordinateValueError(
            f"Column number should start from zero, got {column}"
        )
    if row < 0:
        raise InvalidCoordinateValueError(f"Row number should start from zero, got {row}")
    return f"{chr(ord('A') + column)}{row + 1}"


@dataclass(frozen=True)
class Coordinate:
    column: int
    row: int

    @classmethod
    def from_text(cls, text: str) -> Coordinate:
        """Text notation: 'A1' - 'Z26' get converted to (0,0) - (25,25)"""
        if not (MIN_POSITION_LENGTH <= len(text) <= MAX_POSITION_LENGTH):
            raise InvalidCoordinateFormatError(
                f"Coordinate should have length of {MIN_POSITION_LENGTH}-{MAX_POSITION_LENGTH}: {text!r}"
            )

        column_char, row_text = text[0], text[1:]
        if column_char not in ascii_uppercase:
            raise InvalidCoordinateFormatError(
                f"Coordinate {text!r} does not contain a valid column label"
            )

        # NOTE: ASCII digits only, so no signs and no other scripts. A leading zero would break the exact round trip ('A01' vs 'A1')
        if not row_text or any(c not in digits for c in row_text) or row_text.startswith("0"):
            raise InvalidCoordinateFormatError(
                f"Coordinate {text!r} does not contain a valid row number"
            )

        return cls(ord(column_char) - ord("A"), int(row_text) - 1)

    def to_text(self) -> str:
        return encode(self.column, self.row)

    def is_within(self, dimension: int) -> bool:
        return (0 <= self.column < dimension) and (0 <= self.row < dimension)

    def shifted(self, d_column: int, d_row: int) -> Coordinate:
        """Neighbouring coordinate. Can end up off the board (or negative): caller checks."""
        return Coordinate(self.column + d_column, self.row + d_row)

    def __str__(self) -> str:
        return f"{chr(ord('A') + self.column)}{self.row + 1}"
