"""
Puzzle verification for generated puzzles.

A session is only ever built from a puzzle that passes these checks:
1. Word search: rectangular, non-empty grid; every word findable under the
   difficulty direction policy
2. Crossword: every clue span in bounds and on open cells
3. Letter scramble: every possible word spelled from the rack
4. Maze: one start, one end, both on the border, reachable when solvable
"""

from collections import Counter, deque
from typing import Callable, Dict, List, Optional, Sequence

from .models import (
    WordSearchPuzzle,
    CrosswordPuzzle,
    LetterScramblePuzzle,
    MazePuzzle,
    Position,
    ValidationError,
    ValidationResult,
)
from .grid import allowed_directions, find_word, clue_span, in_bounds
from .parsing import parse_maze, MazeLayout, MazeParseError, MAZE_CELLS


def _result(errors: List[ValidationError], warnings: Optional[List[ValidationError]] = None) -> ValidationResult:
    return ValidationResult(valid=not errors, errors=errors, warnings=warnings or [])


def _check_rectangular(grid: Sequence[Sequence], errors: List[ValidationError]) -> bool:
    if not grid or not grid[0]:
        errors.append(ValidationError(code="EMPTY_GRID", message="Grid is empty"))
        return False
    width = len(grid[0])
    for r, row in enumerate(grid):
        if len(row) != width:
            errors.append(ValidationError(
                code="RAGGED_GRID",
                message=f"Row {r} has {len(row)} cells, expected {width}",
            ))
            return False
    return True


def verify_word_search(puzzle: WordSearchPuzzle) -> ValidationResult:
    """Check that every listed word is hidden in the grid."""
    errors: List[ValidationError] = []
    warnings: List[ValidationError] = []

    if not _check_rectangular(puzzle.grid, errors):
        return _result(errors)

    if not puzzle.words:
        errors.append(ValidationError(code="EMPTY_WORDS", message="Word list is empty"))
        return _result(errors)

    for r, row in enumerate(puzzle.grid):
        for c, cell in enumerate(row):
            if len(cell) != 1 or not cell.isalpha():
                errors.append(ValidationError(
                    code="INVALID_CELL",
                    message=f"Cell ({r}, {c}) holds {cell!r}, expected a single letter",
                ))

    directions = allowed_directions(puzzle.difficulty)
    seen = set()
    for word in puzzle.words:
        if word in seen:
            warnings.append(ValidationError(
                code="DUPLICATE_WORD",
                message=f"'{word}' is listed more than once",
                word=word,
                severity="warning",
            ))
            continue
        seen.add(word)
        if find_word(puzzle.grid, word, directions) is None:
            errors.append(ValidationError(
                code="WORD_NOT_FOUND",
                message=f"'{word}' cannot be found in the grid on {puzzle.difficulty} difficulty",
                word=word,
            ))

    return _result(errors, warnings)


def verify_crossword(puzzle: CrosswordPuzzle) -> ValidationResult:
    """
    Check that every clue's answer is made of letters, lands on open cells
    inside the grid, and agrees with the answers crossing it.
    """
    errors: List[ValidationError] = []

    if not _check_rectangular(puzzle.grid, errors):
        return _result(errors)

    clues = puzzle.clues.all()
    if not clues:
        errors.append(ValidationError(code="EMPTY_CLUES", message="Crossword has no clues"))
        return _result(errors)

    letters: Dict[Position, str] = {}
    for direction, clue in clues:
        label = f"{clue.number} {direction}"
        if not clue.answer.isalpha():
            errors.append(ValidationError(
                code="INVALID_ANSWER",
                message=f"Answer for {label} ('{clue.answer}') must contain only letters",
                word=clue.answer,
            ))
            continue

        span = clue_span(clue, direction)
        for pos in span:
            if not in_bounds(puzzle.grid, pos):
                errors.append(ValidationError(
                    code="CLUE_OUT_OF_BOUNDS",
                    message=f"Answer for {label} ('{clue.answer}') runs off the grid at {tuple(pos)}",
                    word=clue.answer,
                ))
                break
            if puzzle.is_blocked(pos):
                errors.append(ValidationError(
                    code="CLUE_BLOCKED",
                    message=f"Answer for {label} ('{clue.answer}') crosses a blocked cell at {tuple(pos)}",
                    word=clue.answer,
                ))
                break
        else:
            for pos, letter in zip(span, clue.answer):
                if letters.setdefault(pos, letter) != letter:
                    errors.append(ValidationError(
                        code="CLUE_CONFLICT",
                        message=f"Answer for {label} ('{clue.answer}') puts '{letter}' at {tuple(pos)}, "
                                f"which a crossing answer fills with '{letters[pos]}'",
                        word=clue.answer,
                    ))
                    break

    return _result(errors)


def verify_letter_scramble(puzzle: LetterScramblePuzzle) -> ValidationResult:
    """Check that every possible word can be spelled from the rack."""
    errors: List[ValidationError] = []

    if not puzzle.letters:
        errors.append(ValidationError(code="EMPTY_RACK", message="Letter rack is empty"))
        return _result(errors)
    if not puzzle.possible_words:
        errors.append(ValidationError(code="EMPTY_WORDS", message="Possible word list is empty"))
        return _result(errors)

    rack = Counter(letter.lower() for letter in puzzle.letters)
    for word in puzzle.possible_words:
        if Counter(word) - rack:
            errors.append(ValidationError(
                code="UNFORMABLE_WORD",
                message=f"'{word}' cannot be spelled from {''.join(puzzle.letters)}",
                word=word,
            ))

    return _result(errors)


def _on_border(layout: MazeLayout, pos: Position) -> bool:
    row_len = len(layout.grid[pos.row])
    return pos.row in (0, layout.rows - 1) or pos.col in (0, row_len - 1)


def maze_path_exists(layout: MazeLayout) -> bool:
    """Breadth-first search over open cells from start to end."""
    queue = deque([layout.start])
    visited = {layout.start}
    while queue:
        pos = queue.popleft()
        if pos == layout.end:
            return True
        for d_row, d_col in ((0, 1), (1, 0), (0, -1), (-1, 0)):
            nxt = Position(pos.row + d_row, pos.col + d_col)
            if nxt in visited or not in_bounds(layout.grid, nxt) or layout.cell(nxt) == "#":
                continue
            visited.add(nxt)
            queue.append(nxt)
    return False


def verify_maze(puzzle: MazePuzzle) -> ValidationResult:
    """Check maze endpoints and, for a solvable maze, connectivity."""
    errors: List[ValidationError] = []
    warnings: List[ValidationError] = []

    try:
        layout = parse_maze(puzzle.maze_data)
    except MazeParseError as e:
        errors.append(ValidationError(code="MAZE_PARSE", message=str(e)))
        return _result(errors)

    if not puzzle.is_solvable:
        errors.append(ValidationError(code="UNSOLVABLE", message="Generator reported the maze as unsolvable"))
        return _result(errors)

    widths = {len(row) for row in layout.grid}
    if len(widths) > 1:
        warnings.append(ValidationError(
            code="RAGGED_GRID",
            message=f"Maze rows have differing widths {sorted(widths)}",
            severity="warning",
        ))

    stray = sorted({cell for row in layout.grid for cell in row} - MAZE_CELLS)
    if stray:
        warnings.append(ValidationError(
            code="UNKNOWN_CELLS",
            message=f"Maze contains unexpected characters {stray}; they are treated as open paths",
            severity="warning",
        ))

    for name, pos in (("Start", layout.start), ("End", layout.end)):
        if not _on_border(layout, pos):
            errors.append(ValidationError(
                code="ENDPOINT_NOT_ON_BORDER",
                message=f"{name} cell {tuple(pos)} is not on the maze border",
            ))

    if not maze_path_exists(layout):
        errors.append(ValidationError(code="NO_PATH", message="No open path joins start and end"))

    return _result(errors, warnings)


VERIFIERS: Dict[str, Callable[..., ValidationResult]] = {
    "word-search": verify_word_search,
    "crossword": verify_crossword,
    "letter-scramble": verify_letter_scramble,
    "maze": verify_maze,
}


def verify(game: str, puzzle) -> ValidationResult:
    """Verify a puzzle of the given game type."""
    if game not in VERIFIERS:
        raise ValueError(f"Unknown game type: {game!r}")
    return VERIFIERS[game](puzzle)
