"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
import threading
from typing import Optional
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
)
from src.chess.game import Game
from src.core.exceptions import (
    GameStateError,
    IllegalMoveError,
    NotYourTurnError,
    RepositoryError,
)
from src.core.models import GameModel
from src.db.repository import GameRepository

_log = logging.getLogger(__name__)


class ChessService:
    """
    Orchestration of layers for chess game.

    The engine does not guard against concurrent moves on one game, so every read-modify-write goes
    through `lock`. Share the same lock between services that work on the same repository.
    """

    def __init__(
        self, repository: GameRepository, lock: Optional[threading.Lock] = None
    ) -> None:
        self.repo = repository
        self.lock = lock or threading.Lock()

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """A player requested a new game. White always moves first."""

        new_game = Game.new_game(starting_fen=request.starting_fen)
        with self.lock:
            stored_game, game_id = self.repo.create_game(new_game.to_model())
        _log.info("Created game %s", game_id)
        return self._create_game_response(game_id, stored_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to check when it is the player's turn for instance.
        """
        with self.lock:
            game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """Retrieve the set of legal moves for the side to move (UCI notation)."""
        with self.lock:
            stored_model = self._fetch_game(request.game_id)

        game = Game.from_model(stored_model)
        if game.is_over:
            raise GameStateError(f"Game is not in progress. status: {game.status}")

        color = game.get_turn()
        return LegalMovesResponse(
            game_id=request.game_id,
            color=color,
            legal_moves=[move.to_uci() for move in game.legal_moves(color)],
        )

    def make_move(self, request: MoveRequest) -> GameResponse:
        """
        Make a move attempt.
        ----

        The engine knows nothing about who is asking. Checked here first:
        * the game still has to be in progress
        * the color stated in the request must be the side to move
        """
        with self.lock:
            stored_model = self._fetch_game(request.game_id)
            game = Game.from_model(stored_model)

            if game.is_over:
                raise GameStateError(
                    f"Game is over. {game.winner} won by {game.status}."
                )

            if request.color != game.get_turn():
                raise NotYourTurnError(f"It's {game.get_turn()}'s turn")

            try:
                game.apply_move(
                    request.from_square.to_square(), request.to_square.to_square()
                )
            except IllegalMoveError as exc:
                _log.info("Rejected move in game %s: %s", request.game_id, exc.reason)
                raise

            after_move = game.to_model()
            self.repo.update_game(request.game_id, after_move)

        return self._create_game_response(request.game_id, after_move)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        with self.lock:
            deleted = self.repo.delete_game(request.game_id)
        if deleted is None:
            raise RepositoryError(f"Game with game_id={request.game_id} not found.")
        _log.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        game = Game.from_model(model)
        return GameResponse.from_board(
            game_id=game_id,
            board=game.get_board(),
            turn=game.get_turn(),
            game_over=game.is_over,
            winner=game.winner,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            _log.warning("Game %s not found", game_id)
            raise RepositoryError(f"Game with game_id={game_id} not found.")
        return game_model
