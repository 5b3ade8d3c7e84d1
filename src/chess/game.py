"""
The Game class will be the entrypoint into the domain layer for the service layer.
It owns one Board and the side to move, validates and applies moves, and reports checkmate.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Self

from src.chess.board import Board
from src.chess.moves import Move, is_in_check, is_valid_piece_move
from src.chess.square import Square
from src.core.exceptions import (
    GameStateError,
    InvalidFENError,
    InvalidMoveError,
    MoveIntoCheckError,
    NoPieceAtSourceError,
)
from src.core.models import GameModel
from src.core.shared_types import Color, PieceType, Status, opponent

_log = logging.getLogger(__name__)


def _validate_start_position(board: Board, turn: Color) -> None:
    """
    A game can only start from a position that could occur during play:
    exactly one king per color, and the side that just "moved" may not be left in check.
    """
    for color in Color:
        kings = [
            square
            for square in board.squares_of(color)
            if board.piece(square).type == PieceType.KING
        ]
        if len(kings) != 1:
            raise InvalidFENError(
                f"A position needs exactly one {color} king, found {len(kings)}."
            )

    waiting = opponent(turn)
    if is_in_check(waiting, board):
        raise InvalidFENError(
            f"{waiting} is in check, but it is {turn}'s turn to move."
        )


@dataclass(frozen=True)
class MoveResult:
    """What the caller gets back after a successful move"""

    board: Board
    turn: Color
    game_over: bool
    winner: Optional[Color]


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    turn: Color
    status: Status = Status.IN_PROGRESS
    winner: Optional[Color] = None

    @classmethod
    def new_game(
        cls, starting_fen: Optional[str] = None, turn: Color = Color.WHITE
    ) -> Self:
        """Standard starting position with White to move (or a custom position, given as FEN piece placement)."""
        board = (
            Board.from_fen(starting_fen) if starting_fen else Board.starting_position()
        )
        _validate_start_position(board, turn)
        return cls(board=board, turn=turn)

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        if model.status not in {status.value for status in Status}:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join(status.value for status in Status)}"
            )
        if model.turn not in {color.value for color in Color}:
            raise GameStateError(f"Invalid color to move: {model.turn!r}")

        winner = Color(model.winner) if model.winner else None
        return cls(
            board=Board.from_fen(model.board_fen),
            turn=Color(model.turn),
            status=Status(model.status),
            winner=winner,
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            board_fen=self.board.to_fen(),
            turn=self.turn.value,
            status=self.status.value,
            winner=self.winner.value if self.winner else None,
        )

    # --- STATE QUERIES ---
    def get_board(self) -> Board:
        """A copy: whatever the caller does with it, the game's own board stays untouched."""
        return self.board.copy()

    def get_turn(self) -> Color:
        return self.turn

    @property
    def is_over(self) -> bool:
        return self.status == Status.CHECKMATE

    def is_in_check(self, color: Color) -> bool:
        return is_in_check(color, self.board)

    def legal_moves(self, color: Color) -> list[Move]:
        """All moves of `color` that do not leave its own king in check."""
        return list(self._generate_legal_moves(color))

    def is_checkmate(self, color: Color) -> bool:
        """
        Try every move of every piece of `color` on a copy of the board.
        If any of them leaves the king out of check, it is not mate.

        NOTE: no separate test for check. A side without any legal move counts as mated (stalemate included).
        """
        return next(self._generate_legal_moves(color), None) is None

    # --- STATE TRANSITION ---
    def apply_move(self, from_square: Square, to_square: Square) -> MoveResult:
        """
        Attempt to make a move
        -----

        1. there has to be a piece on the starting square
        2. the move has to follow the movement rules (and it must be your piece)
        3. the move may not leave your own king in check (tested on a copy of the board)
        4. commit the board and hand the turn to the opponent
        5. check if the opponent got mated

        Rejections raise an IllegalMoveError subclass and leave the game untouched.
        """
        if not from_square.is_within_bounds():
            raise InvalidMoveError()

        if self.board.piece(from_square) is None:
            raise NoPieceAtSourceError()

        if not is_valid_piece_move(from_square, to_square, self.board, self.turn):
            raise InvalidMoveError()

        trial_board = self._board_after(Move(from_square, to_square))
        if is_in_check(self.turn, trial_board):
            raise MoveIntoCheckError()

        # commit
        mover = self.turn
        self.board = trial_board
        self.turn = opponent(mover)
        _log.debug(
            "%s played %s%s",
            mover,
            from_square.to_algebraic(),
            to_square.to_algebraic(),
        )

        self._update_game_status(mover)
        return MoveResult(
            board=self.get_board(),
            turn=self.turn,
            game_over=self.is_over,
            winner=self.winner,
        )

    # -- PRIVATE HELPERS ---
    def _board_after(self, move: Move) -> Board:
        """Copy the board and make the move on the copy"""
        board = self.board.copy()
        board.move_piece(move.from_square, move.to_square)
        return board

    def _candidate_moves(self, color: Color) -> Iterator[Move]:
        """Every move that follows the movement rules, before looking at checks"""
        for from_square in self.board.squares_of(color):
            for to_square in self.board.squares():
                if is_valid_piece_move(from_square, to_square, self.board, color):
                    yield Move(from_square, to_square)

    def _generate_legal_moves(self, color: Color) -> Iterator[Move]:
        """Lazily, so checkmate detection can stop at the first escape."""
        for move in self._candidate_moves(color):
            if not is_in_check(color, self._board_after(move)):
                yield move

    def _update_game_status(self, mover: Color) -> None:
        """The side to move has already been flipped: see if it has any way out."""
        if self.is_checkmate(self.turn):
            self.status = Status.CHECKMATE
            self.winner = mover
            _log.info("Checkmate: %s wins", mover)
