import pytest

from drunky.hashkeys import ZobristKeys, generate_pos_key
from drunky.pieces import Colour, Piece
from drunky.squares import NO_SQ, OFFBOARD, fr2sq, sq120


@pytest.fixture
def keys():
    return ZobristKeys.generate(1)


def _empty_board():
    pieces = [OFFBOARD] * 120
    for i in range(64):
        pieces[sq120(i)] = Piece.EMPTY
    return pieces


def test_generate_is_deterministic():
    first = ZobristKeys.generate(7)
    second = ZobristKeys.generate(7)
    assert first.side == second.side
    assert first.castle == second.castle
    assert first.pieces == second.pieces


def test_generate_seeds_differ():
    a, b = ZobristKeys.generate(1), ZobristKeys.generate(2)
    assert a.side != b.side
    assert len(a.castle) == len(b.castle) == 16


def test_key_shapes(keys):
    assert len(keys.pieces) == 13
    assert all(len(row) == 120 for row in keys.pieces)
    assert len(keys.castle) == 16
    all_keys = [k for row in keys.pieces for k in row] + [keys.side, *keys.castle]
    assert all(0 <= k < 1 << 64 for k in all_keys)


def test_piece_key_lookup(keys):
    assert keys.piece_key(Piece.WK, 25) == keys.pieces[Piece.WK][25]


def test_empty_board_black(keys):
    assert generate_pos_key(_empty_board(), Colour.BLACK, NO_SQ, 0, keys) == keys.castle[0]


def test_side_key(keys):
    board = _empty_board()
    black = generate_pos_key(board, Colour.BLACK, NO_SQ, 0, keys)
    white = generate_pos_key(board, Colour.WHITE, NO_SQ, 0, keys)
    assert black ^ white == keys.side


def test_piece_contributes(keys):
    board = _empty_board()
    before = generate_pos_key(board, Colour.BLACK, NO_SQ, 3, keys)
    sq = fr2sq(4, 0)
    board[sq] = Piece.WK
    after = generate_pos_key(board, Colour.BLACK, NO_SQ, 3, keys)
    assert before ^ after == keys.piece_key(Piece.WK, sq)


def test_en_passant_contributes(keys):
    board = _empty_board()
    sq = fr2sq(3, 5)
    without = generate_pos_key(board, Colour.WHITE, NO_SQ, 15, keys)
    with_ep = generate_pos_key(board, Colour.WHITE, sq, 15, keys)
    assert without ^ with_ep == keys.piece_key(Piece.EMPTY, sq)


def test_castling_contributes(keys):
    board = _empty_board()
    a = generate_pos_key(board, Colour.BLACK, NO_SQ, 0, keys)
    b = generate_pos_key(board, Colour.BLACK, NO_SQ, 15, keys)
    assert a ^ b == keys.castle[0] ^ keys.castle[15]


def test_invalid_castling(keys):
    with pytest.raises(ValueError):
        generate_pos_key(_empty_board(), Colour.WHITE, NO_SQ, 16, keys)


def test_invalid_piece(keys):
    board = _empty_board()
    board[sq120(0)] = 13
    with pytest.raises(ValueError):
        generate_pos_key(board, Colour.WHITE, NO_SQ, 0, keys)


def test_invalid_en_passant(keys):
    with pytest.raises(ValueError):
        generate_pos_key(_empty_board(), Colour.WHITE, 200, 0, keys)