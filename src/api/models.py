"""Requests and Response models"""

from typing import Optional, Self
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.chess.board import Board, is_valid_position
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, PieceType


# --- SHARED PIECES OF THE WIRE FORMAT ---
class SquareModel(BaseModel):
    row: int = Field(ge=0, lt=BOARD_DIMENSIONS[0])
    col: int = Field(ge=0, lt=BOARD_DIMENSIONS[1])

    def to_square(self) -> Square:
        return Square(self.row, self.col)


class PieceModel(BaseModel):
    type: PieceType
    color: Color


BoardRows = list[list[Optional[PieceModel]]]


def board_to_rows(board: Board) -> BoardRows:
    """Row 0 first (White's back rank), each row from the a-file to the h-file. Empty squares are null."""
    return [
        [
            PieceModel(type=piece.type, color=piece.color) if piece else None
            for piece in row
        ]
        for row in board.rows()
    ]


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    starting_fen: Optional[str] = None

    @field_validator("starting_fen")
    @classmethod
    def validate_starting_fen(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        value = value.strip()
        if not is_valid_position(value):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a FEN piece placement."
            )
        return value


class MoveBody(BaseModel):
    """What a client posts to make a move: `{"from": {...}, "to": {...}, "color": "white"}`"""

    model_config = ConfigDict(populate_by_name=True)

    from_square: SquareModel = Field(alias="from")
    to_square: SquareModel = Field(alias="to")
    color: Color


class MoveRequest(MoveBody):
    game_id: UUID


class GetGameRequest(BaseModel):
    game_id: UUID


class LegalMovesRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    board: BoardRows
    turn: Color
    game_over: bool
    winner: Optional[Color] = None

    @classmethod
    def from_board(
        cls,
        game_id: UUID,
        board: Board,
        turn: Color,
        game_over: bool,
        winner: Optional[Color],
    ) -> Self:
        return cls(
            game_id=game_id,
            board=board_to_rows(board),
            turn=turn,
            game_over=game_over,
            winner=winner,
        )


class LegalMovesResponse(BaseModel):
    game_id: UUID
    color: Color
    legal_moves: list[str]
