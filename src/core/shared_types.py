"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    FOX_WIN = "fox wins"
    HOUNDS_WIN = "hounds win"


# NOTE the domain layer uses src/foxhound/pieces.py PieceKind ("F"/"H", the characters of the save format).
# This is the spelled-out version for the boundary layers.
class Side(StrEnum):
    FOX = "fox"
    HOUNDS = "hounds"
