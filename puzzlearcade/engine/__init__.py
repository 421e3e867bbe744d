"""Puzzle data, grid addressing and verification for Puzzle Arcade."""

from .models import (
    Position,
    Difficulty,
    GameType,
    DIFFICULTIES,
    GAME_TYPES,
    WordSearchPuzzle,
    CrosswordClue,
    CrosswordClues,
    CrosswordPuzzle,
    LetterScramblePuzzle,
    MazePuzzle,
    ValidationError,
    ValidationResult,
)
from .grid import (
    line_direction,
    is_straight_line,
    cells_between,
    allowed_directions,
    in_bounds,
    read_cells,
    placement_directions,
    find_word,
    clue_span,
    clue_number_at,
    clue_at,
)
from .parsing import extract_json_payload, parse_maze, MazeLayout, MazeParseError
from .verify import (
    verify,
    verify_word_search,
    verify_crossword,
    verify_letter_scramble,
    verify_maze,
    maze_path_exists,
)

__all__ = [
    # Models
    "Position",
    "Difficulty",
    "GameType",
    "DIFFICULTIES",
    "GAME_TYPES",
    "WordSearchPuzzle",
    "CrosswordClue",
    "CrosswordClues",
    "CrosswordPuzzle",
    "LetterScramblePuzzle",
    "MazePuzzle",
    "ValidationError",
    "ValidationResult",
    # Grid addressing
    "line_direction",
    "is_straight_line",
    "cells_between",
    "allowed_directions",
    "in_bounds",
    "read_cells",
    "placement_directions",
    "find_word",
    "clue_span",
    "clue_number_at",
    "clue_at",
    # Parsing
    "extract_json_payload",
    "parse_maze",
    "MazeLayout",
    "MazeParseError",
    # Verification
    "verify",
    "verify_word_search",
    "verify_crossword",
    "verify_letter_scramble",
    "verify_maze",
    "maze_path_exists",
]
