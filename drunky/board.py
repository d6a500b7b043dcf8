"""The game board: FEN parsing, piece lists, material and consistency checks."""

from __future__ import annotations

from dataclasses import dataclass

from drunky.bitboards import count_bits, iter_bits, set_bit
from drunky.hashkeys import ZobristKeys, generate_pos_key
from drunky.pieces import Castling, Colour, Piece
from drunky.squares import (
    BRD_SQ_NUM,
    FILE_A,
    FILE_H,
    NO_SQ,
    OFFBOARD,
    RANK_1,
    RANK_3,
    RANK_6,
    RANK_8,
    fr2sq,
    rank_of,
    sq64,
    sq120,
)

MAX_GAME_MOVES = 2048

START_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLE_CHARS = {
    "K": Castling.WKCA,
    "Q": Castling.WQCA,
    "k": Castling.BKCA,
    "q": Castling.BQCA,
}


class FenError(ValueError):
    """A FEN string could not be parsed."""


class BoardError(AssertionError):
    """The board's redundant state is inconsistent."""


@dataclass
class Undo:
    """State needed to take back one move."""

    move: int
    castle_perm: int
    en_pas: int
    fifty_move: int
    pos_key: int


def _require(condition: bool, description: str) -> None:
    if not condition:
        raise BoardError(f"{description} - Failed")


class Board:
    """A position on a 120-square mailbox board."""

    def __init__(self, keys: ZobristKeys | None = None) -> None:
        self.keys = keys if keys is not None else ZobristKeys.generate()
        self.history: list[Undo] = []
        self.reset()

    @classmethod
    def from_fen(cls, fen: str, keys: ZobristKeys | None = None) -> Board:
        board = cls(keys)
        board.parse_fen(fen)
        return board

    def reset(self) -> None:
        """Empty the board and clear every counter."""
        self.pieces: list[int] = [OFFBOARD] * BRD_SQ_NUM
        for index in range(64):
            self.pieces[sq120(index)] = Piece.EMPTY
        self.big_pce = [0, 0]
        self.maj_pce = [0, 0]
        self.min_pce = [0, 0]
        self.material = [0, 0]
        self.pawns = [0, 0, 0]
        self.pce_num = [0] * len(Piece)
        self.p_list: list[list[int]] = [[] for _ in Piece]
        self.king_sq = [NO_SQ, NO_SQ]
        self.side = Colour.BOTH
        self.en_pas = NO_SQ
        self.fifty_move = 0
        self.ply = 0
        self.his_ply = 0
        self.castle_perm = 0
        self.pos_key = 0
        self.history.clear()

    def parse_fen(self, fen: str) -> None:
        """Set up the position described by ``fen``; raise FenError if malformed."""
        self.reset()
        fields = fen.split()
        if len(fields) < 4:
            raise FenError(f"FEN needs at least four fields: {fen!r}")
        placement, side, castling, en_passant = fields[:4]

        rows = placement.split("/")
        if len(rows) != 8:
            raise FenError(f"FEN placement needs eight ranks: {placement!r}")
        for rank, row in zip(range(RANK_8, RANK_1 - 1, -1), rows):
            file = FILE_A
            for char in row:
                if char in "12345678":
                    file += int(char)
                    if file > FILE_H + 1:
                        raise FenError(f"too many squares on rank {rank + 1}")
                    continue
                if char == "." or char not in ".PNBRQKpnbrqk":
                    raise FenError(f"FEN error: unexpected {char!r}")
                if file > FILE_H:
                    raise FenError(f"too many squares on rank {rank + 1}")
                self.pieces[sq120(rank * 8 + file)] = Piece.from_char(char)
                file += 1

        if side not in ("w", "b"):
            raise FenError(f"side to move must be 'w' or 'b': {side!r}")
        self.side = Colour.WHITE if side == "w" else Colour.BLACK

        for char in castling[:4]:
            self.castle_perm |= _CASTLE_CHARS.get(char, 0)

        if en_passant != "-":
            if (
                len(en_passant) != 2
                or en_passant[0] not in "abcdefgh"
                or en_passant[1] not in "12345678"
            ):
                raise FenError(f"bad en passant square: {en_passant!r}")
            file = ord(en_passant[0]) - ord("a")
            rank = ord(en_passant[1]) - ord("1")
            self.en_pas = fr2sq(file, rank)

        self.pos_key = self.generate_pos_key()
        self.update_lists_material()

    def update_lists_material(self) -> None:
        """Fill piece lists, counters, material, king squares and pawn bitboards."""
        for sq, content in enumerate(self.pieces):
            if content in (OFFBOARD, Piece.EMPTY):
                continue
            piece = Piece(content)
            colour = piece.colour()
            if piece.is_big():
                self.big_pce[colour] += 1
            if piece.is_minor():
                self.min_pce[colour] += 1
            if piece.is_major():
                self.maj_pce[colour] += 1
            self.material[colour] += piece.value()

            self.p_list[piece].append(sq)
            self.pce_num[piece] += 1

            if piece is Piece.WK:
                self.king_sq[Colour.WHITE] = sq
            elif piece is Piece.BK:
                self.king_sq[Colour.BLACK] = sq
            elif piece.is_pawn():
                self.pawns[colour] = set_bit(self.pawns[colour], sq64(sq))
                self.pawns[Colour.BOTH] = set_bit(self.pawns[Colour.BOTH], sq64(sq))

    def generate_pos_key(self) -> int:
        return generate_pos_key(
            self.pieces, self.side, self.en_pas, self.castle_perm, self.keys
        )

    def check(self) -> bool:
        """Verify the redundant board state; raise BoardError on any mismatch."""
        for piece in Piece:
            for sq in self.p_list[piece][: self.pce_num[piece]]:
                _require(self.pieces[sq] == piece, "pieces[sq120] == t_piece")

        counted = [0] * len(Piece)
        big = [0, 0]
        major = [0, 0]
        minor = [0, 0]
        material = [0, 0]
        for index in range(64):
            piece = Piece(self.pieces[sq120(index)])
            counted[piece] += 1
            if piece is Piece.EMPTY:
                continue
            colour = piece.colour()
            big[colour] += piece.is_big()
            minor[colour] += piece.is_minor()
            major[colour] += piece.is_major()
            material[colour] += piece.value()

        for piece in Piece:
            if piece is not Piece.EMPTY:
                _require(counted[piece] == self.pce_num[piece], "t_pceNum == pceNum")

        white, black, both = self.pawns
        _require(count_bits(white) == self.pce_num[Piece.WP], "white pawn count")
        _require(count_bits(black) == self.pce_num[Piece.BP], "black pawn count")
        _require(
            count_bits(both) == self.pce_num[Piece.WP] + self.pce_num[Piece.BP],
            "both pawn count",
        )
        for index in iter_bits(white):
            _require(self.pieces[sq120(index)] == Piece.WP, "white pawn square")
        for index in iter_bits(black):
            _require(self.pieces[sq120(index)] == Piece.BP, "black pawn square")
        for index in iter_bits(both):
            _require(
                self.pieces[sq120(index)] in (Piece.WP, Piece.BP), "pawn square"
            )

        _require(material == self.material, "material")
        _require(minor == self.min_pce, "minPce")
        _require(major == self.maj_pce, "majPce")
        _require(big == self.big_pce, "bigPce")

        _require(self.side in (Colour.WHITE, Colour.BLACK), "side")
        _require(self.generate_pos_key() == self.pos_key, "GeneratePosKey == posKey")

        _require(
            self.en_pas == NO_SQ
            or (rank_of(self.en_pas) == RANK_6 and self.side == Colour.WHITE)
            or (rank_of(self.en_pas) == RANK_3 and self.side == Colour.BLACK),
            "enPas",
        )

        _require(self.pieces[self.king_sq[Colour.WHITE]] == Piece.WK, "white king")
        _require(self.pieces[self.king_sq[Colour.BLACK]] == Piece.BK, "black king")
        return True

    def render(self) -> str:
        """A text drawing of the board and its state."""
        lines = ["", "Game Board:", ""]
        for rank in range(RANK_8, RANK_1 - 1, -1):
            cells = "".join(
                f"{Piece(self.pieces[fr2sq(file, rank)]).char():>3}"
                for file in range(FILE_A, FILE_H + 1)
            )
            lines.append(f"{rank + 1}  {cells}")
        lines.append("")
        lines.append("   " + "".join(f"{letter:>3}" for letter in "abcdefgh"))
        lines.append(f"side:{Colour(self.side).char()}")
        lines.append(f"enPas:{self.en_pas}")
        castle = "".join(
            letter if self.castle_perm & flag else "-"
            for letter, flag in _CASTLE_CHARS.items()
        )
        lines.append(f"castle:{castle}")
        lines.append(f"PosKey:{self.pos_key:X}")
        return "\n".join(lines) + "\n"