"""Defines the two kinds of pieces, and where they stand"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Sequence

from src.foxhound.coordinate import Coordinate


class PieceKind(Enum):
    """Values are the characters used for the side to move in a saved game."""

    FOX = "F"
    HOUND = "H"

    @property
    def opponent(self) -> PieceKind:
        return PieceKind.HOUND if self == PieceKind.FOX else PieceKind.FOX


@dataclass(frozen=True)
class Positions:
    """
    All pieces on the board
    ----

    The legacy representation is a flat list of coordinates where the last one happens to be the fox.
    Here the fox is stored explicitly. Hounds are kept in insertion order: not meaningful for the rules,
    but it keeps the saved line stable after a load/save cycle.
    """

    hounds: tuple[Coordinate, ...]
    fox: Coordinate

    @classmethod
    def from_coordinates(cls, coordinates: Sequence[Coordinate]) -> Positions:
        """Flat list: hounds first, fox last"""
        *hounds, fox = coordinates
        return cls(tuple(hounds), fox)

    @classmethod
    def from_text_list(cls, texts: Sequence[str]) -> Positions:
        """NOTE: no validation beyond decoding each coordinate. See board.validate_position_set()"""
        return cls.from_coordinates([Coordinate.from_text(text) for text in texts])

    def to_coordinates(self) -> list[Coordinate]:
        return [*self.hounds, self.fox]

    def to_text_list(self) -> list[str]:
        return [coordinate.to_text() for coordinate in self.to_coordinates()]

    def __len__(self) -> int:
        return len(self.hounds) + 1

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.to_coordinates())

    def __contains__(self, coordinate: object) -> bool:
        return coordinate == self.fox or coordinate in self.hounds

    def kind_at(self, coordinate: Coordinate) -> Optional[PieceKind]:
        if coordinate == self.fox:
            return PieceKind.FOX
        if coordinate in self.hounds:
            return PieceKind.HOUND
        return None

    def move(self, origin: Coordinate, destination: Coordinate) -> Positions:
        """
        Replace origin by destination. Legality must be checked by the caller (see moves.check_move()).
        If nothing stands on the origin, the same positions are returned.
        """
        if origin == self.fox:
            return Positions(self.hounds, destination)
        hounds = tuple(destination if hound == origin else hound for hound in self.hounds)
        return Positions(hounds, self.fox)
