"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn of the board game -->
passes this information to the service layer, which can then pass it onwards to the API layer.
"""

from dataclasses import dataclass
from typing import Optional, Self, Union

from src.core.exceptions import (
    GameError,
    GameStateError,
    IllegalMoveError,
    LoadFailedError,
)
from src.core.models import GameModel
from src.core.shared_types import Status
from src.foxhound.board import DEFAULT_DIMENSION, initialise_positions
from src.foxhound.moves import Move, MoveVerdict, check_move, legal_moves
from src.foxhound.outcome import fox_wins, hounds_win
from src.foxhound.pieces import PieceKind, Positions
from src.foxhound.save_format import SaveState

# The fox always opens the game
FIRST_TO_MOVE = PieceKind.FOX


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    dimension: int
    positions: Positions
    side_to_move: PieceKind
    moves: list[Move]
    status: Status

    @classmethod
    def new_game(cls, dimension: int = DEFAULT_DIMENSION) -> Self:
        """Start from the canonical layout with the fox to move."""
        positions = initialise_positions(dimension)
        return cls(
            dimension=dimension,
            positions=positions,
            side_to_move=FIRST_TO_MOVE,
            moves=[],
            status=Status.IN_PROGRESS,
        )

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        if model.status not in {status.value for status in Status}:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join([status.value for status in Status])}"
            )

        # create the Game
        state = SaveState.from_save_string(model.state, model.dimension)
        moves = [Move.from_text(text) for text in model.moves]
        return cls(
            dimension=model.dimension,
            positions=state.positions,
            side_to_move=state.side_to_move,
            moves=moves,
            status=Status(model.status),
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            dimension=self.dimension,
            state=self.save(),
            moves=[move.to_text() for move in self.moves],
            status=self.status.value,
        )

    @property
    def is_over(self) -> bool:
        return self.status != Status.IN_PROGRESS

    @property
    def winner(self) -> Optional[PieceKind]:
        if self.status == Status.FOX_WIN:
            return PieceKind.FOX
        if self.status == Status.HOUNDS_WIN:
            return PieceKind.HOUND
        return None

    def legal_moves(self) -> list[str]:
        """All legal moves for the side to move. Empty once the game is over."""
        if self.is_over:
            return []
        return [
            move.to_text()
            for move in legal_moves(self.dimension, self.positions, self.side_to_move)
        ]

    def check_move(self, move: Move) -> MoveVerdict:
        """Judge a move for the side to move, without making it."""
        return check_move(
            self.dimension,
            self.positions,
            self.side_to_move,
            move.origin,
            move.destination,
        )

    def make_move(self, move: Union[Move, str]) -> None:
        """
        Attempt to make a move
        -----

        1. make sure the game is still in progress
        2. check the move for the side to move
        3. update the positions
        4. update the (history of) moves
        5. update game status: fox first, then hounds
        6. if nobody won, the other side is to move
        """
        if self.is_over:
            raise GameStateError(f"Game is not in progress. status: {self.status}")

        if isinstance(move, str):
            move = Move.from_text(move)

        verdict = self.check_move(move)
        if not verdict.legal:
            raise IllegalMoveError(
                f"Move not allowed: {move.to_text()} ({verdict.message})", verdict
            )

        self._update_positions(move)
        self._update_moves(move)
        self._update_game_status()
        if not self.is_over:
            self.side_to_move = self.side_to_move.opponent

    def save(self) -> str:
        """The single line that describes the current state (see save_format.py)"""
        return SaveState(self.side_to_move, self.positions).to_save_string()

    def load(self, line: str) -> None:
        """
        Replace the state by the one encoded in the line
        ----

        All or nothing: the line is completely validated against this board before anything gets touched.
        The move history is cleared, as it no longer leads up to the loaded position.
        """
        try:
            state = SaveState.from_save_string(line, self.dimension)
        except GameError as error:
            raise LoadFailedError(f"Loading game failed: {error}") from error

        self.positions = state.positions
        self.side_to_move = state.side_to_move
        self.moves = []
        self._change_status(Status.IN_PROGRESS)
        self._update_game_status()

    # -- PRIVATE HELPERS ---
    def _update_positions(self, move: Move) -> None:
        self.positions = self.positions.move(move.origin, move.destination)

    def _update_moves(self, move: Move) -> None:
        self.moves.append(move)

    def _update_game_status(self) -> None:
        """Performs checks to see if game has ended and changes status accordingly.

        NOTE hounds_win() is only asked once we know the fox did not win.
        """
        if fox_wins(self.positions.fox):
            self._change_status(Status.FOX_WIN)
        elif hounds_win(self.positions, self.dimension):
            self._change_status(Status.HOUNDS_WIN)

    def _change_status(self, new_status: Status) -> None:
        self.status = new_status
