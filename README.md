# drunky

The board layer of a chess engine. A position is held on a 120-square
mailbox with a 64-square mapping, white, black and combined pawn
bitboards, per-piece square lists, material counters and a Zobrist
position key.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
drunky [FEN] [--seed N]
```

With no FEN it parses a built-in test position. It prints the board,
the side to move, the en passant square, the castling rights and the
position key, then runs the consistency check. Next it flips the side
key in the stored position key, which breaks the board on purpose, and
runs the check again; the failed check is printed and the command exits
with status 1.

`--seed` fixes the random Zobrist keys, so the printed position key is
the same from run to run. Without it, fresh keys are drawn each time.

## Library use

```python
from drunky.hashkeys import ZobristKeys
from drunky.board import Board, BoardError, FenError
from drunky.attack import square_attacked
from drunky.pieces import Colour
from drunky.squares import fr2sq

keys = ZobristKeys.generate(seed=1)
board = Board.from_fen(
    "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1", keys
)
print(board.render())

board.check()  # raises BoardError if any counter, list or key is inconsistent

# Is d3 attacked by any white piece?
square_attacked(fr2sq(3, 2), Colour.WHITE, board)
```

A malformed FEN string raises `FenError`.

- `drunky.board`: `Board` (`from_fen`, `parse_fen`, `reset`,
  `update_lists_material`, `generate_pos_key`, `check`, `render`),
  `Undo`, `FenError`, `BoardError`.
- `drunky.attack`: `square_attacked` looks for pawn, knight, king,
  rook/queen and bishop/queen attacks on a square.
- `drunky.hashkeys`: `ZobristKeys` and `generate_pos_key`.
- `drunky.squares`: conversion between 120- and 64-square indices
  (`sq64`, `sq120`, `fr2sq`), `file_of`, `rank_of`, `on_board`,
  `square_name`, `set_mask`, `clear_mask`.
- `drunky.bitboards`: `pop_bit`, `count_bits`, `iter_bits`, `set_bit`,
  `clear_bit`, `format_bitboard`.
- `drunky.pieces`: `Piece`, `Colour` and `Castling`, with piece values,
  colours and the big, major and minor classes.

## What it does not do

There is no move generation, no making or taking back of moves and no
search or evaluation. `Undo` records and the board's `history` list are
there to hold move state, but nothing in the package fills them. The
halfmove and fullmove fields of a FEN string are accepted and ignored.