import pytest

from drunky.pieces import Castling, Colour, Piece


@pytest.mark.parametrize("index, char", list(enumerate(".PNBRQKpnbrqk")))
def test_chars_in_order(index, char):
    assert Piece(index).char() == char


@pytest.mark.parametrize("piece", list(Piece))
def test_from_char_round_trip(piece):
    assert Piece.from_char(piece.char()) is piece


@pytest.mark.parametrize("bad", ["x", "", "PP", "9"])
def test_from_char_rejects(bad):
    with pytest.raises(ValueError):
        Piece.from_char(bad)


def test_colours():
    assert Piece.EMPTY.colour() is Colour.BOTH
    assert all(Piece(i).colour() is Colour.WHITE for i in range(1, 7))
    assert all(Piece(i).colour() is Colour.BLACK for i in range(7, 13))


def test_values():
    assert Piece.EMPTY.value() == 0
    assert Piece.WP.value() == 100
    assert Piece.BN.value() == 325
    assert Piece.WR.value() == 550
    assert Piece.BQ.value() == 1000
    assert Piece.WK.value() == 50000


def test_white_black_values_mirror():
    for i in range(1, 7):
        assert Piece(i).value() == Piece(i + 6).value()


def test_big_is_everything_but_pawns():
    assert not Piece.EMPTY.is_big()
    assert not Piece.WP.is_big()
    assert not Piece.BP.is_big()
    assert Piece.WN.is_big()
    assert Piece.WB.is_big()
    assert Piece.WR.is_big()
    assert Piece.WQ.is_big()
    assert Piece.WK.is_big()
    assert Piece.BN.is_big()
    assert Piece.BB.is_big()
    assert Piece.BR.is_big()
    assert Piece.BQ.is_big()
    assert Piece.BK.is_big()


def test_major_and_minor():
    assert Piece.WR.is_major()
    assert Piece.WQ.is_major()
    assert Piece.WK.is_major()
    assert Piece.BR.is_major()
    assert Piece.BQ.is_major()
    assert Piece.BK.is_major()
    assert not Piece.WN.is_major()
    assert not Piece.BB.is_major()
    assert not Piece.WP.is_major()
    assert not Piece.EMPTY.is_major()

    assert Piece.WN.is_minor()
    assert Piece.WB.is_minor()
    assert Piece.BN.is_minor()
    assert Piece.BB.is_minor()
    assert not Piece.WR.is_minor()
    assert not Piece.BQ.is_minor()
    assert not Piece.BK.is_minor()
    assert not Piece.BP.is_minor()
    assert not Piece.EMPTY.is_minor()


def test_kinds():
    assert {p for p in Piece if p.is_pawn()} == {Piece.WP, Piece.BP}
    assert {p for p in Piece if p.is_knight()} == {Piece.WN, Piece.BN}
    assert {p for p in Piece if p.is_king()} == {Piece.WK, Piece.BK}
    assert Piece.WQ.is_rook_queen() and Piece.WQ.is_bishop_queen()
    assert not Piece.BR.is_bishop_queen()
    assert not Piece.BB.is_rook_queen()


@pytest.mark.parametrize("index", range(13))
def test_slides_matches_lines(index):
    piece = Piece(index)
    assert piece.slides() == (piece.is_rook_queen() or piece.is_bishop_queen())


def test_slides_values():
    assert Piece.WB.slides()
    assert Piece.BR.slides()
    assert Piece.WQ.slides()
    assert not Piece.WN.slides()
    assert not Piece.BK.slides()
    assert not Piece.WP.slides()


def test_colour_chars():
    assert Colour.WHITE.char() == "w"
    assert Colour.BLACK.char() == "b"
    assert Colour.BOTH.char() == "-"


def test_castling_fen():
    assert Castling(15).to_fen() == "KQkq"
    assert Castling(0).to_fen() == "-"
    assert (Castling.WKCA | Castling.BQCA).to_fen() == "Kq"