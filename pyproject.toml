[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drunky"
version = "0.1.0"
description = "Chess board representation: FEN parsing, Zobrist keys, pawn bitboards, attack detection and board consistency checks"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "fen", "zobrist", "bitboard", "board-games"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
drunky = "drunky.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["drunky"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
