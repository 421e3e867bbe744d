"""Shared puzzle fixtures."""

import pytest

from puzzlearcade.engine import (
    WordSearchPuzzle,
    CrosswordPuzzle,
    LetterScramblePuzzle,
    MazePuzzle,
)


# D . . .      DOG runs diagonally from the top-left corner;
# . O . .      CAT is written backwards along the bottom row.
# . . G .
# T A C .
DIRECTION_GRID = [
    ["D", "Q", "Z", "X"],
    ["K", "O", "V", "J"],
    ["Y", "L", "G", "P"],
    ["T", "A", "C", "M"],
]

# C A T
# O # O
# W E E
CROSSWORD_DATA = {
    "rows": 3,
    "cols": 3,
    "grid": [["", "", ""], ["", None, ""], ["", "", ""]],
    "clues": {
        "across": [
            {"number": 1, "clue": "Feline pet", "answer": "CAT", "row": 0, "col": 0},
            {"number": 3, "clue": "Very small", "answer": "WEE", "row": 2, "col": 0},
        ],
        "down": [
            {"number": 1, "clue": "Dairy animal", "answer": "COW", "row": 0, "col": 0},
            {"number": 2, "clue": "Foot digit", "answer": "TOE", "row": 0, "col": 2},
        ],
    },
}

MAZE_DATA = "\n".join([
    "#####",
    "S   #",
    "### #",
    "#   E",
    "#####",
])


@pytest.fixture
def cat_puzzle() -> WordSearchPuzzle:
    return WordSearchPuzzle(
        grid=[["C", "A", "T"], ["X", "X", "X"], ["X", "X", "X"]],
        words=["CAT"],
        difficulty="easy",
    )


@pytest.fixture
def direction_grid():
    return [row[:] for row in DIRECTION_GRID]


@pytest.fixture
def crossword_puzzle() -> CrosswordPuzzle:
    return CrosswordPuzzle.model_validate(CROSSWORD_DATA)


@pytest.fixture
def scramble_puzzle() -> LetterScramblePuzzle:
    return LetterScramblePuzzle.model_validate({
        "letters": ["A", "A", "B"],
        "possibleWords": ["ab", "ba", "aba", "baa"],
    })


@pytest.fixture
def maze_puzzle() -> MazePuzzle:
    return MazePuzzle.model_validate({"mazeData": MAZE_DATA, "isSolvable": True})
