"""
Everything needed to write a game to a single line of text, and to read it back.
"""

from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import CorruptedFigureError, GameError
from src.foxhound.board import validate_dimension_matches_positions, validate_position_set
from src.foxhound.pieces import PieceKind, Positions

SEPARATOR = " "


def parse_side_to_move(token: str) -> PieceKind:
    """'F' or 'H', nothing else"""
    if token not in {kind.value for kind in PieceKind}:
        raise CorruptedFigureError(f"Figure to move is neither F nor H: {token!r}")
    return PieceKind(token)


def is_valid_save_string(line: str, dimension: Optional[int] = None) -> bool:
    try:
        SaveState.from_save_string(line, dimension)
    except GameError:
        return False
    return True


@dataclass
class SaveState:
    """
    Data that can be constructed from a saved line.
    ----

    <side to move> <hound 1> ... <hound n> <fox>

    * The side to move is either "F" (fox) or "H" (hounds)
    * The coordinates follow, separated by single spaces. The hounds come first, the fox is always the last one.
    * n = dimension / 2

    ex) The standard starting position on a board of dimension 8 is saved as
    F B1 D1 F1 H1 E8
    """

    side_to_move: PieceKind
    positions: Positions

    @classmethod
    def from_save_string(cls, line: str, dimension: Optional[int] = None) -> Self:
        """
        Parse the line into data.
        If the dimension of the board that will receive it is known, also check the positions fit that board.
        """
        side_token, *coordinate_tokens = line.rstrip("\n").split(SEPARATOR)
        side_to_move = parse_side_to_move(side_token)

        positions = validate_position_set(coordinate_tokens)
        if dimension is not None:
            validate_dimension_matches_positions(positions, dimension)

        return cls(side_to_move, positions)

    def to_save_string(self) -> str:
        """reverse operation: write a line from the given data"""
        return SEPARATOR.join([self.side_to_move.value, *self.positions.to_text_list()])
