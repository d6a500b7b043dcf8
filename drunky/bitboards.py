"""Operations on 64-bit bitboards held as Python ints."""

from __future__ import annotations

from collections.abc import Iterator

from drunky.squares import FILE_A, FILE_H, RANK_1, RANK_8, clear_mask, set_mask

_FULL_64 = (1 << 64) - 1


def _check(bb: int) -> None:
    if not 0 <= bb <= _FULL_64:
        raise ValueError(f"bitboard {bb} is not a 64-bit unsigned value")


def pop_bit(bb: int) -> tuple[int, int]:
    """Return the index of the lowest set bit and the bitboard without it."""
    _check(bb)
    if not bb:
        raise ValueError("no bit to pop from an empty bitboard")
    lowest = bb & -bb
    return lowest.bit_length() - 1, bb ^ lowest


def count_bits(bb: int) -> int:
    _check(bb)
    return bin(bb).count("1")


def iter_bits(bb: int) -> Iterator[int]:
    """Yield the indices of the set bits, lowest first."""
    _check(bb)
    while bb:
        index, bb = pop_bit(bb)
        yield index


def set_bit(bb: int, sq64: int) -> int:
    _check(bb)
    return bb | set_mask(sq64)


def clear_bit(bb: int, sq64: int) -> int:
    _check(bb)
    return bb & clear_mask(sq64)


def format_bitboard(bb: int) -> str:
    """Draw the bitboard rank 8 first, 'X' for a set bit and '-' otherwise."""
    _check(bb)
    rows = (
        "".join(
            "X" if bb >> (rank * 8 + file) & 1 else "-"
            for file in range(FILE_A, FILE_H + 1)
        )
        + "\n"
        for rank in range(RANK_8, RANK_1 - 1, -1)
    )
    return "\n" + "".join(rows) + "\n\n"