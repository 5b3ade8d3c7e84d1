"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    CHECKMATE = "checkmate"


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class PieceType(StrEnum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"


class RejectionReason(StrEnum):
    """Why the engine refused a move. Values double as the messages sent back to clients."""

    NO_PIECE_AT_SOURCE = "no piece at source"
    INVALID_MOVE = "invalid move"
    MOVE_INTO_CHECK = "you cannot move into check"


def opponent(color: Color) -> Color:
    return Color.BLACK if color == Color.WHITE else Color.WHITE
