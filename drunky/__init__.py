"""Chess board representation with FEN parsing, Zobrist hashing, attack detection and consistency checks."""

__version__ = "0.1.0"