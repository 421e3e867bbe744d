"""
Pydantic models for the session layer.

Statuses, guess outcomes and the read-only snapshots handed to a display
surface. The session and rules classes live in their own modules.
"""

from typing import Dict, List, Optional, Literal
from pydantic import BaseModel, Field

from ..engine.models import Position, ClueDirection


# Type aliases
GameStatus = Literal["playing", "paused", "won", "over"]
GuessOutcome = Literal["found", "duplicate", "invalid", "unformable", "ignored"]
ArrowKey = Literal["up", "down", "left", "right"]

TERMINAL_STATUSES = ("won", "over")


class GuessResult(BaseModel):
    """Outcome of committing a selection or guess."""
    outcome: GuessOutcome
    word: Optional[str] = None
    cells: List[Position] = Field(default_factory=list)

    @property
    def accepted(self) -> bool:
        return self.outcome == "found"


class CheckResult(BaseModel):
    """Outcome of an explicit crossword check."""
    correct: int
    total: int
    solved_clues: List[str] = Field(default_factory=list)


class Tile(BaseModel):
    """One physical letter tile in a scramble rack."""
    id: int
    char: str
    used: bool = False


class SessionSnapshot(BaseModel):
    """State common to every game, as shown to the player."""
    game: str
    status: GameStatus
    elapsed_seconds: int
    remaining_seconds: Optional[int] = None
    found: List[str] = Field(default_factory=list)


class WordSearchSnapshot(SessionSnapshot):
    grid: List[List[str]]
    words: List[str]
    selection: List[Position] = Field(default_factory=list)
    found_cells: List[Position] = Field(default_factory=list)


class CrosswordSnapshot(SessionSnapshot):
    entries: List[List[Optional[str]]]
    solved: List[List[bool]]
    active_cell: Optional[Position] = None
    direction: ClueDirection = "across"
    active_clue: Optional[str] = None
    clue_numbers: Dict[str, int] = Field(default_factory=dict)


class LetterScrambleSnapshot(SessionSnapshot):
    tiles: List[Tile]
    guess: str = ""
    possible_count: int = 0


class MazeSnapshot(SessionSnapshot):
    grid: List[List[str]]
    player: Position
    end: Position
