"""The 120-square mailbox board and its mapping to 64 squares."""

from __future__ import annotations

BRD_SQ_NUM = 120

FILE_A, FILE_B, FILE_C, FILE_D, FILE_E, FILE_F, FILE_G, FILE_H, FILE_NONE = range(9)
RANK_1, RANK_2, RANK_3, RANK_4, RANK_5, RANK_6, RANK_7, RANK_8, RANK_NONE = range(9)

A1 = 21
H8 = 98
NO_SQ = 99
OFFBOARD = 100

# Value sq64() gives for a square off the playing area.
OFFBOARD_64 = 65

_FULL_64 = (1 << 64) - 1


def fr2sq(file: int, rank: int) -> int:
    """The 120-based square for a file and rank."""
    return 21 + file + rank * 10


def _build_tables() -> tuple[tuple[int, ...], tuple[int, ...], tuple[int, ...], tuple[int, ...]]:
    to64 = [OFFBOARD_64] * BRD_SQ_NUM
    files = [OFFBOARD] * BRD_SQ_NUM
    ranks = [OFFBOARD] * BRD_SQ_NUM
    to120 = []
    for rank in range(RANK_1, RANK_8 + 1):
        for file in range(FILE_A, FILE_H + 1):
            sq = fr2sq(file, rank)
            to64[sq] = len(to120)
            to120.append(sq)
            files[sq] = file
            ranks[sq] = rank
    return tuple(to64), tuple(to120), tuple(files), tuple(ranks)


_SQ120_TO_SQ64, _SQ64_TO_SQ120, _FILES, _RANKS = _build_tables()


def _check120(sq: int) -> None:
    if not 0 <= sq < BRD_SQ_NUM:
        raise ValueError(f"square {sq} outside the 120-square board")


def _check64(sq: int) -> None:
    if not 0 <= sq < 64:
        raise ValueError(f"square {sq} outside 0..63")


def sq64(sq120: int) -> int:
    """64-based index of a 120-based square, OFFBOARD_64 when off the board."""
    _check120(sq120)
    return _SQ120_TO_SQ64[sq120]


def sq120(sq64: int) -> int:
    """120-based square of a 64-based index."""
    _check64(sq64)
    return _SQ64_TO_SQ120[sq64]


def file_of(sq: int) -> int:
    """File of a 120-based square, OFFBOARD when off the board."""
    _check120(sq)
    return _FILES[sq]


def rank_of(sq: int) -> int:
    """Rank of a 120-based square, OFFBOARD when off the board."""
    _check120(sq)
    return _RANKS[sq]


def on_board(sq: int) -> bool:
    return 0 <= sq < BRD_SQ_NUM and _FILES[sq] != OFFBOARD


def square_name(sq: int) -> str:
    """Algebraic name such as 'e4' of a 120-based square."""
    if not on_board(sq):
        raise ValueError(f"square {sq} is not on the board")
    return "abcdefgh"[_FILES[sq]] + "12345678"[_RANKS[sq]]


def set_mask(sq64: int) -> int:
    _check64(sq64)
    return 1 << sq64


def clear_mask(sq64: int) -> int:
    return ~set_mask(sq64) & _FULL_64