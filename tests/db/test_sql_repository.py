"""Unit tests for src/db/sql_repository.py"""

from uuid import uuid4

from sqlalchemy import Engine
from sqlalchemy.orm import Session

from src.core.shared_types import Status
from src.db.sql_repository import GameModel, SQLGameRepository

STARTING_POSITION_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def new_model() -> GameModel:
    return GameModel(
        board_fen=STARTING_POSITION_FEN,
        turn="white",
        status=Status.IN_PROGRESS.value,
        winner=None,
    )


def test_create_game(sql_repository: SQLGameRepository) -> None:
    """Conversion from a GameModel to DBGame for a new entry to the database."""
    model = new_model()
    repo = sql_repository
    record_in_db, _ = repo.create_game(model)
    assert isinstance(record_in_db, GameModel)
    assert record_in_db == model


def test_get_game_by_id(sql_repository: SQLGameRepository) -> None:
    """Create a game, then fetch it from db."""
    repo = sql_repository
    expected_game, game_id = repo.create_game(new_model())
    game_found = repo.get_game(game_id)
    assert game_found == expected_game


def test_get_unknown_game(sql_repository: SQLGameRepository) -> None:
    """
    Should return None if ID does not match anything in database.

    NOTE with an empty database, any id is a valid test case.
    """
    repo = sql_repository
    assert repo.get_game(uuid4()) is None

    # Now do it with creating a game, but retrieving from the wrong ID
    repo.create_game(new_model())
    assert repo.get_game(uuid4()) is None


def test_update_game(sql_repository: SQLGameRepository) -> None:
    """Update an earlier created record, incl. the end of the game"""
    repo = sql_repository
    _, game_id = repo.create_game(new_model())

    finished = GameModel(
        board_fen="rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR",
        turn="white",
        status=Status.CHECKMATE.value,
        winner="black",
    )
    updated = repo.update_game(game_id, finished)
    assert updated == finished
    assert repo.get_game(game_id) == finished


def test_update_unknown_game(sql_repository: SQLGameRepository) -> None:
    repo = sql_repository
    assert repo.update_game(uuid4(), new_model()) is None


def test_delete_game(sql_repository: SQLGameRepository) -> None:
    repo = sql_repository
    model, game_id = repo.create_game(new_model())
    assert repo.delete_game(game_id) == model
    assert repo.get_game(game_id) is None
    assert repo.delete_game(game_id) is None


def test_records_survive_a_new_session(engine: Engine) -> None:
    """What one request stored, the next one (with its own session) can read and change."""
    with Session(engine) as first:
        _, game_id = SQLGameRepository(first).create_game(new_model())

    with Session(engine) as second:
        repo = SQLGameRepository(second)
        assert repo.get_game(game_id) == new_model()
        assert repo.delete_game(game_id) is not None
