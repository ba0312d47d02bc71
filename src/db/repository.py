"""Where games are kept between requests. SQLGameRepository is the real thing, the service tests use a dictionary."""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel


class GameRepository(Protocol):
    """Storage of fox and hound games, keyed by a generated UUID"""

    def get_game(self, game_id: UUID) -> GameModel | None:
        """The stored game, or None for an unknown ID."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store a freshly set up game. Returns what was stored together with its new ID."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Overwrite state, move history and status after a move or a load. None for an unknown ID."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Drop the record. Returns the last stored version, or None if there was nothing to drop."""
        ...
