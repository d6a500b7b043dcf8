"""Pieces, sides and castling rights, with the per-piece lookup data."""

from __future__ import annotations

import enum

_PIECE_CHARS = ".PNBRQKpnbrqk"
_SIDE_CHARS = "wb-"

_BIG = (False, False, True, True, True, True, True, False, True, True, True, True, True)
_MAJOR = (False, False, False, False, True, True, True, False, False, False, True, True, True)
_MINOR = (False, False, True, True, False, False, False, False, True, True, False, False, False)
_VALUE = (0, 100, 325, 325, 550, 1000, 50000, 100, 325, 325, 550, 1000, 50000)
_PAWN = (False, True, False, False, False, False, False, True, False, False, False, False, False)
_KNIGHT = (False, False, True, False, False, False, False, False, True, False, False, False, False)
_KING = (False, False, False, False, False, False, True, False, False, False, False, False, True)
_ROOK_QUEEN = (False, False, False, False, True, True, False, False, False, False, True, True, False)
_BISHOP_QUEEN = (False, False, False, True, False, True, False, False, False, True, False, True, False)
_SLIDES = (False, False, False, True, True, True, False, False, False, True, True, True, False)


class Colour(enum.IntEnum):
    """The side to move; BOTH doubles as 'no side'."""

    WHITE = 0
    BLACK = 1
    BOTH = 2

    def char(self) -> str:
        """Single-letter form: 'w', 'b' or '-'."""
        return _SIDE_CHARS[int(self)]


_COLOUR = (Colour.BOTH,) + (Colour.WHITE,) * 6 + (Colour.BLACK,) * 6


class Piece(enum.IntEnum):
    """A square's content: empty or one of the twelve pieces."""

    EMPTY = 0
    WP = 1
    WN = 2
    WB = 3
    WR = 4
    WQ = 5
    WK = 6
    BP = 7
    BN = 8
    BB = 9
    BR = 10
    BQ = 11
    BK = 12

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Return the piece written as ``char`` ('.' is EMPTY)."""
        if len(char) != 1 or char not in _PIECE_CHARS:
            raise ValueError(f"not a piece character: {char!r}")
        return cls(_PIECE_CHARS.index(char))

    def char(self) -> str:
        return _PIECE_CHARS[int(self)]

    def colour(self) -> Colour:
        return _COLOUR[int(self)]

    def value(self) -> int:
        """Material value of the piece."""
        return _VALUE[int(self)]

    def is_big(self) -> bool:
        return _BIG[int(self)]

    def is_major(self) -> bool:
        return _MAJOR[int(self)]

    def is_minor(self) -> bool:
        return _MINOR[int(self)]

    def is_pawn(self) -> bool:
        return _PAWN[int(self)]

    def is_knight(self) -> bool:
        return _KNIGHT[int(self)]

    def is_king(self) -> bool:
        return _KING[int(self)]

    def is_rook_queen(self) -> bool:
        return _ROOK_QUEEN[int(self)]

    def is_bishop_queen(self) -> bool:
        return _BISHOP_QUEEN[int(self)]

    def slides(self) -> bool:
        return _SLIDES[int(self)]


class Castling(enum.IntFlag):
    """Castling rights, one bit per side and wing."""

    WKCA = 1
    WQCA = 2
    BKCA = 4
    BQCA = 8

    def to_fen(self) -> str:
        """The FEN castling field: letters present, or '-' when none."""
        letters = "".join(
            letter
            for flag, letter in (
                (Castling.WKCA, "K"),
                (Castling.WQCA, "Q"),
                (Castling.BKCA, "k"),
                (Castling.BQCA, "q"),
            )
            if self & flag
        )
        return letters or "-"