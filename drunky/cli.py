"""Command line entry: set up a position, show it and run the board checks."""

from __future__ import annotations

import argparse
import sys

from drunky.board import Board, BoardError
from drunky.hashkeys import ZobristKeys

PERFT_FEN = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="drunky")
    parser.add_argument("fen", nargs="?", default=PERFT_FEN)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    board = Board.from_fen(args.fen, ZobristKeys.generate(args.seed))
    print(board.render(), end="")
    try:
        board.check()
        print("\nForced asserts...")
        board.pos_key ^= board.keys.side
        board.check()
    except BoardError as error:
        print(error)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())