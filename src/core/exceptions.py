"""
Custom exceptions.

Everything derives from GameError, so the higher layers can catch "any problem with the game" in one go,
while tests can still check the specific type.
"""

from src.core.shared_types import RejectionReason


class GameError(Exception):
    """Base class for all expected (recoverable) errors while playing a game."""


class GameStateError(GameError):
    """The request does not fit the current state of the game (ex. moving after checkmate)."""


class NotYourTurnError(GameError):
    """The player requesting a move is not the side to move."""


class InvalidFENError(GameError):
    """A FEN (piece placement) string could not be parsed."""


class InvalidRequestError(GameError):
    """Malformed request data coming in from the API layer."""


class RepositoryError(GameError):
    """Looking up a game failed (unknown game ID)."""


class IllegalMoveError(GameError):
    """
    The engine rejected a move.
    ---

    The board is left untouched, so the caller can simply try another move.
    """

    reason: RejectionReason = RejectionReason.INVALID_MOVE

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.reason.value)


class NoPieceAtSourceError(IllegalMoveError):
    reason = RejectionReason.NO_PIECE_AT_SOURCE


class InvalidMoveError(IllegalMoveError):
    reason = RejectionReason.INVALID_MOVE


class MoveIntoCheckError(IllegalMoveError):
    reason = RejectionReason.MOVE_INTO_CHECK
