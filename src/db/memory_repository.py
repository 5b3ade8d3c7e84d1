"""Implementation of (Game)Repository that keeps everything in a dictionary (lost on restart)"""

from dataclasses import replace
from uuid import UUID, uuid4

from src.core.models import GameModel


class InMemoryGameRepository:
    """Registry of games keyed by their ID. One instance per application, no module level state."""

    def __init__(self) -> None:
        self._games: dict[UUID, GameModel] = {}

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        game = self._games.get(game_id)
        return replace(game) if game else None

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store new game and return the stored data + newly created game ID."""
        game_id = uuid4()
        self._games[game_id] = replace(game)
        return replace(game), game_id

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Add new info to existing record."""
        if game_id not in self._games:
            return None
        self._games[game_id] = replace(game)
        return replace(game)

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record."""
        return self._games.pop(game_id, None)

    def __len__(self) -> int:
        return len(self._games)
