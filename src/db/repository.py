"""
Where games live between requests.

Two backends follow this Protocol: `InMemoryGameRepository` (the default, a dict that is gone on restart)
and `SQLGameRepository` (a `games` table). The service only ever talks to this interface.
"""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel


class GameRepository(Protocol):
    """
    Stores GameModel snapshots by game ID.

    An unknown ID is never an error here: lookups, updates and deletes return None
    and the service decides what that means.
    """

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Position, turn and outcome stored for `game_id`."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Register a freshly set up game under a new ID."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Replace the stored snapshot after an accepted move."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Forget a game, returning what was stored."""
        ...
