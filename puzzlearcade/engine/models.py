"""Data models for puzzles and puzzle verification."""

from typing import List, Optional, Literal, NamedTuple
from pydantic import BaseModel, Field, ConfigDict, field_validator


Difficulty = Literal["easy", "medium", "hard"]
GameType = Literal["word-search", "crossword", "letter-scramble", "maze"]
ClueDirection = Literal["across", "down"]

DIFFICULTIES: List[str] = ["easy", "medium", "hard"]
GAME_TYPES: List[str] = ["word-search", "crossword", "letter-scramble", "maze"]


class Position(NamedTuple):
    """A cell on a grid, addressed by row then column."""
    row: int
    col: int


class WordSearchPuzzle(BaseModel):
    """A letter grid with the words hidden in it."""
    grid: List[List[str]]
    words: List[str]
    difficulty: Difficulty = "hard"

    @field_validator("grid")
    @classmethod
    def _upper_grid(cls, grid: List[List[str]]) -> List[List[str]]:
        return [[cell.strip().upper() for cell in row] for row in grid]

    @field_validator("words")
    @classmethod
    def _upper_words(cls, words: List[str]) -> List[str]:
        return [w.strip().upper() for w in words if w.strip()]

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0


class CrosswordClue(BaseModel):
    """A numbered clue and where its answer starts on the grid."""
    number: int
    clue: str
    answer: str = Field(..., min_length=1)
    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)

    @field_validator("answer")
    @classmethod
    def _upper_answer(cls, answer: str) -> str:
        return answer.strip().upper()


class CrosswordClues(BaseModel):
    across: List[CrosswordClue] = Field(default_factory=list)
    down: List[CrosswordClue] = Field(default_factory=list)

    def all(self) -> List[tuple]:
        """Every clue paired with its direction, across first."""
        return (
            [("across", c) for c in self.across]
            + [("down", c) for c in self.down]
        )


class CrosswordPuzzle(BaseModel):
    """
    A crossword grid and its clues.

    Blocked squares are `None`; open squares hold an empty string (or a
    pre-filled letter) in the generated data.
    """
    grid: List[List[Optional[str]]]
    clues: CrosswordClues
    rows: int = 0
    cols: int = 0

    def model_post_init(self, __context) -> None:
        """Derive dimensions from the grid when the generator left them out."""
        if not self.rows:
            self.rows = len(self.grid)
        if not self.cols:
            self.cols = len(self.grid[0]) if self.grid else 0

    def is_blocked(self, pos: "Position") -> bool:
        return self.grid[pos.row][pos.col] is None


class LetterScramblePuzzle(BaseModel):
    """A rack of letters and every word that can be spelled from it."""
    model_config = ConfigDict(populate_by_name=True)

    letters: List[str]
    possible_words: List[str] = Field(..., alias="possibleWords")

    @field_validator("letters")
    @classmethod
    def _upper_letters(cls, letters: List[str]) -> List[str]:
        return [letter.strip().upper() for letter in letters if letter.strip()]

    @field_validator("possible_words")
    @classmethod
    def _lower_words(cls, words: List[str]) -> List[str]:
        return [w.strip().lower() for w in words if w.strip()]


class MazePuzzle(BaseModel):
    """Maze text using '#' walls, ' ' paths, 'S' start and 'E' end."""
    model_config = ConfigDict(populate_by_name=True)

    maze_data: str = Field(..., alias="mazeData")
    is_solvable: bool = Field(True, alias="isSolvable")


class ValidationError(BaseModel):
    """A single problem found in a generated puzzle."""
    code: str
    message: str
    word: Optional[str] = None
    severity: Literal["error", "warning"] = "error"


class ValidationResult(BaseModel):
    """Result of puzzle verification."""
    valid: bool
    errors: List[ValidationError] = Field(default_factory=list)
    warnings: List[ValidationError] = Field(default_factory=list)
