"""Zobrist keys and position hashing."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass

from drunky.pieces import Colour, Piece
from drunky.squares import BRD_SQ_NUM, NO_SQ, OFFBOARD


@dataclass(frozen=True)
class ZobristKeys:
    """Random 64-bit keys for pieces on squares, side to move and castling."""

    pieces: tuple[tuple[int, ...], ...]
    side: int
    castle: tuple[int, ...]

    @classmethod
    def generate(cls, seed: int | None = None) -> ZobristKeys:
        """Draw a fresh key set; the same seed gives the same keys."""
        rng = random.Random(seed)
        pieces = tuple(
            tuple(rng.getrandbits(64) for _ in range(BRD_SQ_NUM))
            for _ in Piece
        )
        side = rng.getrandbits(64)
        castle = tuple(rng.getrandbits(64) for _ in range(16))
        return cls(pieces, side, castle)

    def piece_key(self, piece: int, sq: int) -> int:
        return self.pieces[piece][sq]


def generate_pos_key(
    pieces: Sequence[int],
    side: int,
    en_passant: int,
    castle_perm: int,
    keys: ZobristKeys,
) -> int:
    """Hash a position from its 120-square contents and state."""
    key = 0
    for sq, piece in enumerate(pieces):
        if piece in (NO_SQ, Piece.EMPTY, OFFBOARD):
            continue
        if not Piece.WP <= piece <= Piece.BK:
            raise ValueError(f"invalid piece {piece} on square {sq}")
        key ^= keys.piece_key(piece, sq)

    if side == Colour.WHITE:
        key ^= keys.side

    if en_passant != NO_SQ:
        if not 0 <= en_passant < BRD_SQ_NUM:
            raise ValueError(f"invalid en passant square {en_passant}")
        key ^= keys.piece_key(Piece.EMPTY, en_passant)

    if not 0 <= castle_perm <= 15:
        raise ValueError(f"invalid castling permission {castle_perm}")
    return key ^ keys.castle[castle_perm]