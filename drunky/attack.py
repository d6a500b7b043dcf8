"""Whether a square is attacked by a given side."""

from __future__ import annotations

from typing import TYPE_CHECKING

from drunky.pieces import Colour, Piece
from drunky.squares import OFFBOARD, on_board

if TYPE_CHECKING:
    from drunky.board import Board

KNIGHT_DIRS = (-8, -19, -21, -12, 8, 19, 21, 12)
ROOK_DIRS = (-1, -10, 1, 10)
BISHOP_DIRS = (-9, -11, 11, 9)
KING_DIRS = (-1, -10, 1, 10, -9, -11, 11, 9)


def _piece_at(board: Board, sq: int) -> Piece | None:
    content = board.pieces[sq]
    if content in (OFFBOARD, Piece.EMPTY):
        return None
    return Piece(content)


def _slider_attacks(board: Board, sq: int, side: Colour, dirs, test) -> bool:
    for step in dirs:
        target = sq + step
        while board.pieces[target] != OFFBOARD:
            piece = _piece_at(board, target)
            if piece is not None:
                if test(piece) and piece.colour() == side:
                    return True
                break
            target += step
    return False


def square_attacked(sq: int, side: int, board: Board) -> bool:
    """True if any piece of ``side`` attacks the 120-based square ``sq``."""
    if not on_board(sq):
        raise ValueError(f"square {sq} is not on the board")
    if side not in (Colour.WHITE, Colour.BLACK):
        raise ValueError(f"invalid side {side}")
    side = Colour(side)

    if side is Colour.WHITE:
        if Piece.WP in (board.pieces[sq - 11], board.pieces[sq - 9]):
            return True
    elif Piece.BP in (board.pieces[sq + 11], board.pieces[sq + 9]):
        return True

    for dirs, test in ((KNIGHT_DIRS, Piece.is_knight), (KING_DIRS, Piece.is_king)):
        for step in dirs:
            piece = _piece_at(board, sq + step)
            if piece is not None and test(piece) and piece.colour() == side:
                return True

    return _slider_attacks(
        board, sq, side, ROOK_DIRS, Piece.is_rook_queen
    ) or _slider_attacks(board, sq, side, BISHOP_DIRS, Piece.is_bishop_queen)