"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from typing import Optional
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    ExportGameRequest,
    ExportGameResponse,
    GameResponse,
    GetGameRequest,
    ImportGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
)
from src.core.config import Settings
from src.core.exceptions import GameError, RepositoryError
from src.core.models import GameModel
from src.core.shared_types import Side
from src.db.repository import GameRepository
from src.foxhound.game import Game
from src.foxhound.moves import Move
from src.foxhound.pieces import PieceKind
from src.foxhound.save_format import SaveState

logger = logging.getLogger(__name__)

SIDE_NAMES: dict[PieceKind, Side] = {
    PieceKind.FOX: Side.FOX,
    PieceKind.HOUND: Side.HOUNDS,
}


class FoxHoundService:
    """Orchestration of layers for fox and hound games."""

    def __init__(
        self, repository: GameRepository, settings: Optional[Settings] = None
    ) -> None:
        self.repo = repository
        self.settings = settings or Settings()

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Set up a new board (of the requested or the default dimension)."""

        dimension = request.dimension or self.settings.default_dimension
        new_game = Game.new_game(dimension)
        created_game_data = new_game.to_model()

        # Store the GameModel in the repository
        stored_game, game_id = self.repo.create_game(created_game_data)
        logger.info("Created game %s on a %dx%d board", game_id, dimension, dimension)

        return self._create_game_response(game_id, stored_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to check whose turn it is for instance.
        """
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """retrieve set of legal moves for the side to move."""
        stored_model = self._fetch_game(request.game_id)
        game = Game.from_model(stored_model)
        return LegalMovesResponse(
            game_id=request.game_id,
            side_to_move=SIDE_NAMES[game.side_to_move],
            legal_moves=game.legal_moves(),
        )

    def make_move(self, request: MoveRequest) -> GameResponse:
        """Make a move attempt. Illegal moves raise, and nothing gets stored."""
        stored_model = self._fetch_game(request.game_id)
        game = Game.from_model(stored_model)
        move = Move.from_text(f"{request.origin} {request.destination}")

        try:
            game.make_move(move)
        except GameError as error:
            logger.info("Rejected move %s in game %s: %s", move.to_text(), request.game_id, error)
            raise

        after_move = game.to_model()
        self.repo.update_game(request.game_id, after_move)
        logger.info("Game %s: %s played, status %s", request.game_id, move.to_text(), game.status)
        return self._create_game_response(request.game_id, after_move)

    def export_game(self, request: ExportGameRequest) -> ExportGameResponse:
        """The single saved line of the game, to be written wherever the caller likes."""
        stored_model = self._fetch_game(request.game_id)
        return ExportGameResponse(game_id=request.game_id, state=stored_model.state)

    def import_game(self, request: ImportGameRequest) -> GameResponse:
        """
        Replace the state of a game by a saved line.
        ----
        All or nothing: if the line does not fit the game, the stored game is left as it was.
        """
        stored_model = self._fetch_game(request.game_id)
        game = Game.from_model(stored_model)

        try:
            game.load(request.state)
        except GameError as error:
            logger.warning("Loading into game %s failed: %s", request.game_id, error)
            raise

        loaded = game.to_model()
        self.repo.update_game(request.game_id, loaded)
        logger.info("Game %s: loaded state %r", request.game_id, loaded.state)
        return self._create_game_response(request.game_id, loaded)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        deleted = self.repo.delete_game(request.game_id)
        if deleted is None:
            raise RepositoryError(f"Game with {request.game_id=} not found.")
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        state = SaveState.from_save_string(model.state, model.dimension)
        return GameResponse(
            game_id=game_id,
            dimension=model.dimension,
            state=model.state,
            side_to_move=SIDE_NAMES[state.side_to_move],
            status=model.status,
            move_history=model.moves,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
