"""Grid addressing utilities: straight lines, cell paths and clue spans."""

from typing import Dict, List, Optional, Sequence, Tuple

from .models import Position, CrosswordClue, CrosswordClues


Step = Tuple[int, int]

HORIZONTAL: Step = (0, 1)
VERTICAL: Step = (1, 0)
DIAGONAL_DOWN: Step = (1, 1)
DIAGONAL_UP: Step = (-1, 1)

FORWARD_STRAIGHT: List[Step] = [HORIZONTAL, VERTICAL]
FORWARD_DIAGONAL: List[Step] = [DIAGONAL_DOWN, DIAGONAL_UP]

# Directions in which a word may be written, by difficulty
DIRECTION_POLICY: Dict[str, List[Step]] = {
    "easy": FORWARD_STRAIGHT,
    "medium": FORWARD_STRAIGHT + FORWARD_DIAGONAL,
    "hard": [
        step
        for forward in FORWARD_STRAIGHT + FORWARD_DIAGONAL
        for step in (forward, (-forward[0], -forward[1]))
    ],
}

CLUE_STEPS: Dict[str, Step] = {"across": HORIZONTAL, "down": VERTICAL}


def sign(n: int) -> int:
    return (n > 0) - (n < 0)


def line_direction(start: Position, end: Position) -> Optional[Step]:
    """
    Unit step leading from `start` to `end` along a straight line.

    Returns None when the cells coincide or do not share a row, a column
    or a diagonal.
    """
    d_row = end[0] - start[0]
    d_col = end[1] - start[1]
    if d_row == 0 and d_col == 0:
        return None
    if d_row != 0 and d_col != 0 and abs(d_row) != abs(d_col):
        return None
    return (sign(d_row), sign(d_col))


def is_straight_line(start: Position, end: Position) -> bool:
    return line_direction(start, end) is not None


def cells_between(start: Position, end: Position) -> List[Position]:
    """Ordered cells from `start` to `end` inclusive, or [] if not on a line."""
    start, end = Position(*start), Position(*end)
    if start == end:
        return [start]
    step = line_direction(start, end)
    if step is None:
        return []
    length = max(abs(end.row - start.row), abs(end.col - start.col))
    return [
        Position(start.row + i * step[0], start.col + i * step[1])
        for i in range(length + 1)
    ]


def allowed_directions(difficulty: str) -> List[Step]:
    """Directions a word may be written in for a difficulty."""
    if difficulty not in DIRECTION_POLICY:
        raise ValueError(f"Unknown difficulty: {difficulty!r}")
    return DIRECTION_POLICY[difficulty]


def in_bounds(grid: Sequence[Sequence], pos: Position) -> bool:
    """Check a cell exists; rows may have different lengths."""
    row, col = pos
    return 0 <= row < len(grid) and 0 <= col < len(grid[row])


def read_cells(grid: Sequence[Sequence[Optional[str]]], cells: Sequence[Position]) -> str:
    """Concatenate the upper-cased letters found along a path."""
    return "".join((grid[r][c] or "").upper() for r, c in cells)


def placement_directions(
    grid: Sequence[Sequence[str]],
    path: Sequence[Position],
    word: str,
) -> List[Step]:
    """
    Directions in which `word` could be written under `path`.

    Dragging against a word's direction reads it backwards, so a match on
    the reversed reading means the word runs opposite to the drag.
    A palindrome yields both directions.
    """
    if len(path) < 2:
        return []
    step = line_direction(path[0], path[-1])
    if step is None:
        return []

    word = word.upper()
    forward = read_cells(grid, path)
    directions: List[Step] = []
    if forward == word:
        directions.append(step)
    if forward[::-1] == word:
        directions.append((-step[0], -step[1]))
    return directions


def find_word(
    grid: Sequence[Sequence[str]],
    word: str,
    directions: Sequence[Step],
) -> Optional[List[Position]]:
    """Locate `word` written along one of `directions`; returns its path."""
    word = word.upper()
    if not word:
        return None

    for r, row in enumerate(grid):
        for c, letter in enumerate(row):
            if letter.upper() != word[0]:
                continue
            for d_row, d_col in directions:
                path = [Position(r + i * d_row, c + i * d_col) for i in range(len(word))]
                if all(in_bounds(grid, p) for p in path) and read_cells(grid, path) == word:
                    return path
    return None


def clue_span(clue: CrosswordClue, direction: str) -> List[Position]:
    """Cells occupied by a clue's answer."""
    d_row, d_col = CLUE_STEPS[direction]
    return [
        Position(clue.row + i * d_row, clue.col + i * d_col)
        for i in range(len(clue.answer))
    ]


def clue_number_at(clues: CrosswordClues, pos: Position) -> Optional[int]:
    """Number printed in a cell, preferring the across clue that starts there."""
    for clue in clues.across + clues.down:
        if (clue.row, clue.col) == tuple(pos):
            return clue.number
    return None


def clue_at(clues: CrosswordClues, pos: Position, direction: str) -> Optional[CrosswordClue]:
    """The clue in `direction` whose span covers `pos`."""
    clue_list = clues.across if direction == "across" else clues.down
    for clue in clue_list:
        if tuple(pos) in clue_span(clue, direction):
            return clue
    return None
