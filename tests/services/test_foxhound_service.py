"""Unit tests for src/services/foxhound_service.py"""

from typing import Generator
from uuid import UUID, uuid4

import pytest
from sqlalchemy.orm import Session

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
from src.core.exceptions import (
    GameError,
    GameStateError,
    IllegalMoveError,
    LoadFailedError,
    RepositoryError,
)
from src.core.models import GameModel
from src.core.shared_types import Side, Status
from src.db.sql_repository import SQLGameRepository
from src.services.foxhound_service import FoxHoundService

START_STATE = "F B1 D1 F1 H1 E8"


# --- MOCK DEPENDENCIES ----
class MockRepository:
    """Mock the GameRepository using a dictionary of game models."""

    def __init__(self) -> None:
        self._games: dict[UUID, GameModel] = {}

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        game_id = uuid4()
        self._games[game_id] = game
        return game, game_id

    def get_game(self, game_id: UUID) -> GameModel | None:
        return self._games.get(game_id)

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        if game_id not in self._games:
            return None
        self._games[game_id] = game
        return game

    def delete_game(self, game_id: UUID) -> GameModel | None:
        return self._games.pop(game_id, None)

    def clear(self) -> None:
        """Clear the repository (useful in between tests)"""
        self._games.clear()


@pytest.fixture
def mock_repository() -> Generator[MockRepository, None, None]:
    """Ensures to clear the repository between tests"""
    repo = MockRepository()
    try:
        yield repo
    finally:
        repo.clear()


@pytest.fixture
def service(mock_repository: MockRepository) -> FoxHoundService:
    return FoxHoundService(mock_repository)


def new_game_id(service: FoxHoundService, dimension: int | None = None) -> UUID:
    return service.create_new_game(CreateGameRequest(dimension=dimension)).game_id


# --- SERVICE - CREATE NEW GAME ----
def test_create_a_new_game(
    mock_repository: MockRepository, service: FoxHoundService
) -> None:
    """Check that new game is created, persisted in repo, and return has the appropriate information."""
    response = service.create_new_game(CreateGameRequest())

    assert isinstance(response, GameResponse)
    assert isinstance(response.game_id, UUID)
    assert response.dimension == 8
    assert response.state == START_STATE
    assert response.side_to_move == Side.FOX
    assert response.status == Status.IN_PROGRESS
    assert response.move_history == []

    stored_game = mock_repository.get_game(response.game_id)
    assert stored_game is not None
    assert stored_game.state == START_STATE
    assert stored_game.moves == []


def test_create_with_requested_dimension(service: FoxHoundService) -> None:
    response = service.create_new_game(CreateGameRequest(dimension=4))
    assert response.dimension == 4
    assert response.state == "F B1 D1 C4"


def test_create_with_configured_default(mock_repository: MockRepository) -> None:
    service = FoxHoundService(mock_repository, Settings(default_dimension=6))
    response = service.create_new_game(CreateGameRequest())
    assert response.dimension == 6
    assert response.state == "F B1 D1 F1 D6"


# --- SERVICE - GET GAME ----
def test_get_existing_game_state(service: FoxHoundService) -> None:
    game_id = new_game_id(service)

    response = service.get_game_state(GetGameRequest(game_id=game_id))

    assert response.game_id == game_id
    assert response.state == START_STATE
    assert response.side_to_move == Side.FOX


def test_attempt_to_find_unknown_game(service: FoxHoundService) -> None:
    """Ensure exception is raised when trying to look up a game with an unknown ID."""
    with pytest.raises(RepositoryError):
        _ = service.get_game_state(GetGameRequest(game_id=uuid4()))


# --- SERVICE - LEGAL MOVES ----
def test_getting_legal_moves(service: FoxHoundService) -> None:
    game_id = new_game_id(service)

    response = service.legal_moves(LegalMovesRequest(game_id=game_id))

    assert isinstance(response, LegalMovesResponse)
    assert response.side_to_move == Side.FOX
    assert set(response.legal_moves) == {"E8 F7", "E8 D7"}


def test_legal_moves_for_the_hounds(service: FoxHoundService) -> None:
    game_id = new_game_id(service, dimension=4)
    service.make_move(MoveRequest(game_id=game_id, origin="C4", destination="B3"))

    response = service.legal_moves(LegalMovesRequest(game_id=game_id))

    assert response.side_to_move == Side.HOUNDS
    assert set(response.legal_moves) == {"B1 A2", "B1 C2", "D1 C2"}


# --- SERVICE - MAKE MOVE ---
def test_make_legal_move(
    mock_repository: MockRepository, service: FoxHoundService
) -> None:
    game_id = new_game_id(service)

    response = service.make_move(
        MoveRequest(game_id=game_id, origin="e8", destination="d7")
    )

    assert response.state == "H B1 D1 F1 H1 D7"
    assert response.side_to_move == Side.HOUNDS
    assert response.move_history == ["E8 D7"]

    stored_game = mock_repository.get_game(game_id)
    assert stored_game is not None
    assert stored_game.state == "H B1 D1 F1 H1 D7"
    assert stored_game.moves == ["E8 D7"]


def test_attempt_illegal_move(
    mock_repository: MockRepository, service: FoxHoundService
) -> None:
    """Service must propagate error raised by Game upwards, and keep the stored game as it was."""
    game_id = new_game_id(service)

    with pytest.raises(IllegalMoveError):
        _ = service.make_move(MoveRequest(game_id=game_id, origin="E8", destination="E7"))

    stored_game = mock_repository.get_game(game_id)
    assert stored_game is not None
    assert stored_game.state == START_STATE
    assert stored_game.moves == []


def test_attempt_move_before_your_turn(service: FoxHoundService) -> None:
    game_id = new_game_id(service)
    with pytest.raises(GameError):
        _ = service.make_move(MoveRequest(game_id=game_id, origin="B1", destination="C2"))


def test_move_after_game_over(service: FoxHoundService) -> None:
    game_id = new_game_id(service)
    service.import_game(ImportGameRequest(game_id=game_id, state="H A6 D1 F1 H1 A8"))

    response = service.make_move(MoveRequest(game_id=game_id, origin="A6", destination="B7"))
    assert response.status == Status.HOUNDS_WIN

    with pytest.raises(GameStateError):
        _ = service.make_move(MoveRequest(game_id=game_id, origin="D1", destination="E2"))

    legal = service.legal_moves(LegalMovesRequest(game_id=game_id))
    assert legal.legal_moves == []


# --- SERVICE - EXPORT / IMPORT ---
def test_export_game(service: FoxHoundService) -> None:
    game_id = new_game_id(service)
    service.make_move(MoveRequest(game_id=game_id, origin="E8", destination="F7"))

    response = service.export_game(ExportGameRequest(game_id=game_id))

    assert isinstance(response, ExportGameResponse)
    assert response.state == "H B1 D1 F1 H1 F7"


def test_import_game(mock_repository: MockRepository, service: FoxHoundService) -> None:
    game_id = new_game_id(service)
    service.make_move(MoveRequest(game_id=game_id, origin="E8", destination="F7"))

    response = service.import_game(
        ImportGameRequest(game_id=game_id, state="F C2 D1 F1 H1 E6")
    )

    assert response.state == "F C2 D1 F1 H1 E6"
    assert response.side_to_move == Side.FOX
    assert response.move_history == []

    stored_game = mock_repository.get_game(game_id)
    assert stored_game is not None
    assert stored_game.state == "F C2 D1 F1 H1 E6"


def test_import_not_matching_board(
    mock_repository: MockRepository, service: FoxHoundService
) -> None:
    """A state meant for a smaller board does not replace anything."""
    game_id = new_game_id(service)

    with pytest.raises(LoadFailedError):
        _ = service.import_game(ImportGameRequest(game_id=game_id, state="F B1 D1 E4"))

    stored_game = mock_repository.get_game(game_id)
    assert stored_game is not None
    assert stored_game.state == START_STATE


# --- SERVICE - DELETE GAME ---
def test_delete_game(mock_repository: MockRepository, service: FoxHoundService) -> None:
    game_id = new_game_id(service)

    service.delete_game(DeleteGameRequest(game_id=game_id))

    assert mock_repository.get_game(game_id) is None
    with pytest.raises(RepositoryError):
        _ = service.get_game_state(GetGameRequest(game_id=game_id))


def test_delete_unknown_game(service: FoxHoundService) -> None:
    """Nothing to delete: report it instead of pretending it worked."""
    with pytest.raises(RepositoryError):
        service.delete_game(DeleteGameRequest(game_id=uuid4()))


# --- SERVICE + DATABASE ---
def test_play_against_database(db_session_shared: Session) -> None:
    """Same flow, but persisted through SQLAlchemy."""
    service = FoxHoundService(SQLGameRepository(db_session_shared))
    game_id = new_game_id(service, dimension=4)

    for origin, destination in [("C4", "B3"), ("B1", "A2"), ("B3", "C2"), ("A2", "B3")]:
        service.make_move(
            MoveRequest(game_id=game_id, origin=origin, destination=destination)
        )
    response = service.make_move(MoveRequest(game_id=game_id, origin="C2", destination="B1"))

    assert response.status == Status.FOX_WIN
    assert response.side_to_move == Side.FOX

    stored = service.get_game_state(GetGameRequest(game_id=game_id))
    assert stored.state == "F B3 D1 B1"
    assert stored.move_history == ["C4 B3", "B1 A2", "B3 C2", "A2 B3", "C2 B1"]
