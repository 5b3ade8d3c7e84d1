"""
Geometry/Base movement and capturing/attacking rules

Key idea: Use strategy pattern to define the shape rule for each piece type.

Whether a move leaves your own king in check is decided later by Game (on a copy of the board).
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Self

from src.chess.pieces import Piece
from src.chess.square import Square
from src.core.shared_types import Color, PieceType, opponent


class Board(Protocol):
    """Just the parts the movement rules need"""

    def piece(self, square: Square) -> Optional[Piece]: ...
    def squares_of(self, color: Color) -> list[Square]: ...
    def find_king(self, color: Color) -> Optional[Square]: ...


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_square: Square
    to_square: Square

    @classmethod
    def from_uci(cls, uci: str) -> Self:
        """
        Universal Chess Interface:
        ---
        One of the standard chess notations for moves

        examples:
        * "e2e4": move the piece that was on e2 to e4
        * "g1f3": knight from g1 to f3

        NOTE: no promotion suffix, pawns never promote here
        """
        from_sq = Square.from_algebraic(uci[:2])
        to_sq = Square.from_algebraic(uci[2:4])
        return cls(from_sq, to_sq)

    def to_uci(self) -> str:
        """Convert into UCI notation"""
        return f"{self.from_square.to_algebraic()}{self.to_square.to_algebraic()}"


# --- PATH CLEARANCE ---
def clear_path(from_square: Square, to_square: Square, board: Board) -> bool:
    """
    Walk from `from_square` towards `to_square` one unit step at a time.
    ---

    Both end points are excluded: returns False as soon as a square in between is occupied.
    Only meaningful for straight or diagonal lines (rook, bishop, queen).
    """
    dr = _sign(to_square.row - from_square.row)
    dc = _sign(to_square.col - from_square.col)
    row = from_square.row + dr
    col = from_square.col + dc
    while (row, col) != (to_square.row, to_square.col):
        if board.piece(Square(row, col)) is not None:
            return False
        row += dr
        col += dc
    return True


# --- SHAPE RULES ---
def pawn_move(piece: Piece, from_square: Square, to_square: Square, board: Board) -> bool:
    """
    A pawn:
    - moves by a single square forward onto an empty square.
    - can move by two from its starting row, if both squares are empty
    - takes diagonally (one step forward, one file sideways)

    NOTE: White moves UP the board (+1 row), Black moves DOWN. No en passant, no promotion.
    """
    direction = 1 if piece.color == Color.WHITE else -1
    home_row = 1 if piece.color == Color.WHITE else 6
    dr = to_square.row - from_square.row
    dc = to_square.col - from_square.col
    target = board.piece(to_square)

    one_step = dr == direction and dc == 0 and target is None
    two_step = (
        from_square.row == home_row
        and dr == 2 * direction
        and dc == 0
        and target is None
        and board.piece(Square(from_square.row + direction, from_square.col)) is None
    )
    # same color targets are already rejected, so any piece here is the opponent's
    capture = dr == direction and abs(dc) == 1 and target is not None
    return one_step or two_step or capture


def knight_move(piece: Piece, from_square: Square, to_square: Square, board: Board) -> bool:
    """Knights jump: |delta_row| + |delta_col| = 3 (in an L-shape). Nothing in between matters."""
    dr = abs(to_square.row - from_square.row)
    dc = abs(to_square.col - from_square.col)
    return (dr, dc) in {(2, 1), (1, 2)}


def bishop_move(piece: Piece, from_square: Square, to_square: Square, board: Board) -> bool:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    dr = to_square.row - from_square.row
    dc = to_square.col - from_square.col
    return abs(dr) == abs(dc) and clear_path(from_square, to_square, board)


def rook_move(piece: Piece, from_square: Square, to_square: Square, board: Board) -> bool:
    """Rooks move either horizontally or vertically"""
    dr = to_square.row - from_square.row
    dc = to_square.col - from_square.col
    return (dr == 0 or dc == 0) and clear_path(from_square, to_square, board)


def queen_move(piece: Piece, from_square: Square, to_square: Square, board: Board) -> bool:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    dr = to_square.row - from_square.row
    dc = to_square.col - from_square.col
    is_line = dr == 0 or dc == 0 or abs(dr) == abs(dc)
    return is_line and clear_path(from_square, to_square, board)


def king_move(piece: Piece, from_square: Square, to_square: Square, board: Board) -> bool:
    """
    The king can move by a single square at the time.

    Whether the target square is attacked is not checked here: moving into check is refused
    for every piece type by Game.
    """
    dr = abs(to_square.row - from_square.row)
    dc = abs(to_square.col - from_square.col)
    return dr <= 1 and dc <= 1


# -- STRATEGY PATTERN: MOVEMENT RULES ---
ShapeRuleFn = Callable[[Piece, Square, Square, Board], bool]
MOVEMENT_RULES: dict[PieceType, ShapeRuleFn] = {
    PieceType.PAWN: pawn_move,
    PieceType.KNIGHT: knight_move,
    PieceType.BISHOP: bishop_move,
    PieceType.ROOK: rook_move,
    PieceType.QUEEN: queen_move,
    PieceType.KING: king_move,
}


def is_valid_piece_move(
    from_square: Square,
    to_square: Square,
    board: Board,
    color_to_move: Optional[Color] = None,
) -> bool:
    """
    Can the piece on `from_square` go to `to_square`?
    ----

    ----
    Checked in order:
    1. there is a piece on the starting square (and it belongs to `color_to_move`, if given)
    2. the target square lies on the board
    3. the target square does not hold a piece of the same color
    4. the shape rule of the piece type (incl. path clearance for sliding pieces)

    Pass `color_to_move=None` to ignore whose turn it is. That is how attacks are detected:
    "could this piece take on that square", regardless of who is to move.
    """
    if not from_square.is_within_bounds():
        return False

    piece = board.piece(from_square)
    if piece is None:
        return False
    if color_to_move is not None and piece.color != color_to_move:
        return False

    if not to_square.is_within_bounds():
        return False

    target = board.piece(to_square)
    if target is not None and target.color == piece.color:
        return False

    shape_rule = MOVEMENT_RULES[piece.type]
    return shape_rule(piece, from_square, to_square, board)


# --- ATTACKS / CHECK ---
def is_square_attacked(square: Square, by_color: Color, board: Board) -> bool:
    """True if any piece of `by_color` could move onto (i.e. capture on) the square."""
    return any(
        is_valid_piece_move(attacker_square, square, board)
        for attacker_square in board.squares_of(by_color)
    )


def is_in_check(color: Color, board: Board) -> bool:
    """
    Find the king of the given color and check if the opponent attacks it.

    NOTE: A board without that king is simply reported as not in check.
    """
    king_square = board.find_king(color)
    if king_square is None:
        return False
    return is_square_attacked(king_square, opponent(color), board)
