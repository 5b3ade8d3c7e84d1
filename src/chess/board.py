"""The Game board holds the `position` (in chess: the configuration of pieces on the board)"""

from dataclasses import dataclass
from typing import Optional, Self

from src.chess.pieces import FEN_TO_PIECE, Piece
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import InvalidFENError
from src.core.shared_types import Color, PieceType

Grid = list[list[Optional[Piece]]]

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def is_valid_position(position: str) -> bool:
    """Only check the part of the FEN encoding for the board position."""
    num_rows, num_cols = BOARD_DIMENSIONS
    rank_fens = position.split("/")
    if len(rank_fens) != num_rows:
        return False

    for rank_fen in rank_fens:
        file_count = 0
        for character in rank_fen:
            # make sure every character is valid
            if character.isascii() and character.isdigit():
                file_count += int(character)
            elif character.lower() in FEN_TO_PIECE:
                file_count += 1
            else:
                # immediately invalidate if the character is anything else
                return False

        # make sure you are creating a correctly sized board
        if file_count != num_cols:
            return False
    return True


@dataclass
class Board:
    grid: Grid

    @classmethod
    def empty(cls) -> Self:
        num_rows, num_cols = BOARD_DIMENSIONS
        return cls([[None] * num_cols for _ in range(num_rows)])

    @classmethod
    def starting_position(cls) -> Self:
        """White on rows 0-1, Black on rows 6-7. Back rank order: R N B Q K B N R"""
        board = cls.empty()
        for color, back_row, pawn_row in [(Color.WHITE, 0, 1), (Color.BLACK, 7, 6)]:
            for col, piece_type in enumerate(BACK_RANK):
                board.place_piece(Piece(piece_type, color), Square(back_row, col))
                board.place_piece(Piece(PieceType.PAWN, color), Square(pawn_row, col))
        return board

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using a given FEN string.

        That is, we supply the first part of the FEN string that denotes the board position
        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the 8th rank (row 7), starting with rook on a8, knight on b8, etc.
        * pawns cover 7th rank entirely
        * ranks 6 through 3 have 8 consecutive empty squares
        * rank 2 are the white pawns (capital letters)
        * 1st rank (row 0) are the white pieces.
        """
        if not is_valid_position(fen_str):
            raise InvalidFENError(
                f"Cannot interpret supplied string as a board position: {fen_str!r}"
            )

        board = cls.empty()
        for rank_idx, fen_one_rank in enumerate(fen_str.split("/")):
            # FEN string is read from top rank (8th) to bottom rank (1st)
            row = BOARD_DIMENSIONS[0] - 1 - rank_idx
            # ... but the first character is the a-file, so reads in normal direction
            col = 0
            for character in fen_one_rank:
                if character.isalpha():
                    board.place_piece(Piece.from_fen(character), Square(row, col))
                    col += 1
                else:
                    # A number denotes the amount of empty squares after each other
                    col += int(character)
        return board

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(
            self._row_to_fen(row) for row in range(BOARD_DIMENSIONS[0] - 1, -1, -1)
        )

    def _row_to_fen(self, row: int) -> str:
        """FEN string of a single rank"""
        fen_characters: list[str] = []
        empty_count = 0
        for piece in self.grid[row]:
            if piece is not None:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def piece(self, square: Square) -> Optional[Piece]:
        return self.grid[square.row][square.col]

    def place_piece(self, piece: Piece, square: Square) -> None:
        self.grid[square.row][square.col] = piece

    def remove_piece(self, square: Square) -> None:
        self.grid[square.row][square.col] = None

    def move_piece(self, from_square: Square, to_square: Square) -> None:
        """Update the position on the board. Whatever stood on the target square is captured."""
        piece_that_moved = self.piece(from_square)
        self.grid[to_square.row][to_square.col] = piece_that_moved
        self.grid[from_square.row][from_square.col] = None

    def copy(self) -> Self:
        """
        Independent copy for trying out moves.
        Pieces are frozen, so copying the rows is enough to never share state with the original.
        """
        return type(self)([list(row) for row in self.grid])

    def rows(self) -> Grid:
        """Snapshot of the grid. Changing the returned lists does not touch the board."""
        return [list(row) for row in self.grid]

    def squares(self) -> list[Square]:
        num_rows, num_cols = BOARD_DIMENSIONS
        return [Square(row, col) for row in range(num_rows) for col in range(num_cols)]

    def squares_of(self, color: Color) -> list[Square]:
        return [
            square
            for square in self.squares()
            if (piece := self.piece(square)) is not None and piece.color == color
        ]

    def find_king(self, color: Color) -> Optional[Square]:
        king = Piece(PieceType.KING, color)
        return next(
            (square for square in self.squares() if self.piece(square) == king), None
        )
