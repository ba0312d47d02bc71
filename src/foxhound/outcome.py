"""
End of game detection

The fox wins by reaching the first row (row 0). The hounds win by leaving the fox without a single legal move.
Both checks only look at the position. Whose turn it is does not matter.
"""

from src.foxhound.coordinate import Coordinate
from src.foxhound.moves import MOVEMENT_RULES, is_legal_move
from src.foxhound.pieces import PieceKind, Positions

FOX_GOAL_ROW = 0


def fox_wins(fox: Coordinate) -> bool:
    return fox.row == FOX_GOAL_ROW


def hounds_win(positions: Positions, dimension: int) -> bool:
    """
    Is the fox trapped?
    ----

    NOTE: Only meaningful if the fox has not won yet. Check fox_wins() first.

    Off-board diagonals simply count as blocked: check_move() reports them as illegal instead of raising.
    """
    fox = positions.fox
    for d_column, d_row in MOVEMENT_RULES[PieceKind.FOX]:
        target = fox.shifted(d_column, d_row)
        if is_legal_move(dimension, positions, PieceKind.FOX, fox, target):
            return False
    return True
