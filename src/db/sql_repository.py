"""Implementation of (Game)Repository using SQLAlchemy"""

import logging
from dataclasses import asdict
from uuid import UUID, uuid4

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.models import GameModel
from src.db.schema import DBGame

_log = logging.getLogger(__name__)

# Columns of DBGame that mirror a GameModel one-to-one
STORED_FIELDS = ("board_fen", "turn", "status", "winner")


class SQLGameRepository:
    """
    Games stored as rows of the `games` table.
    ---

    One repository per session (and the app opens one session per request).
    Every write is committed right away, a failed commit is rolled back so the session stays usable.
    """

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        row = self.db.get(DBGame, game_id)
        return _to_model(row) if row is not None else None

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store new game and return the stored data + newly created game ID."""
        row = DBGame(id=uuid4(), **asdict(game))
        self.db.add(row)
        self._commit(row)
        return _to_model(row), row.id

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Overwrite the position and outcome of an existing record."""
        row = self.db.get(DBGame, game_id)
        if row is None:
            return None

        for name, value in asdict(game).items():
            setattr(row, name, value)
        self._commit(row)
        return _to_model(row)

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record. Returns what was stored, or None if there was nothing."""
        row = self.db.get(DBGame, game_id)
        if row is None:
            return None

        deleted = _to_model(row)
        self.db.delete(row)
        self._commit()
        return deleted

    def _commit(self, row: DBGame | None = None) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            _log.exception("Commit failed, rolling back")
            self.db.rollback()
            raise
        if row is not None:
            self.db.refresh(row)


def _to_model(row: DBGame) -> GameModel:
    return GameModel(**{name: getattr(row, name) for name in STORED_FIELDS})
