"""Crossword rules and session."""

from typing import Dict, List, Optional, Sequence, Tuple

from pydantic import Field

from ..engine.grid import clue_span, clue_at, clue_number_at, in_bounds, read_cells
from ..engine.models import Position, CrosswordClue, CrosswordPuzzle, ClueDirection
from .models import GuessResult, CheckResult, CrosswordSnapshot, ArrowKey
from .selection import CrosswordCursor
from .session import GameSession, PuzzleRules


def clue_key(number: int, direction: str) -> str:
    return f"{number}-{direction}"


class CrosswordRules(PuzzleRules):
    """Compares the letters entered along a clue span with its answer."""

    game = "crossword"

    def __init__(self, puzzle: CrosswordPuzzle):
        self.puzzle = puzzle
        self.answers: Dict[str, str] = {
            clue_key(clue.number, direction): clue.answer
            for direction, clue in puzzle.clues.all()
        }

    def validate_selection(self, candidate: Tuple[str, str], found: Sequence[str]) -> GuessResult:
        key, text = candidate
        if key not in self.answers:
            return GuessResult(outcome="ignored")
        if text.upper() == self.answers[key]:
            return GuessResult(outcome="found", word=key)
        return GuessResult(outcome="invalid", word=key)

    def is_win(self, found: Sequence[str]) -> bool:
        return set(self.answers) <= set(found)


class CrosswordSession(GameSession):
    """
    A crossword play-through.

    Letters are entered freely; answers are only judged when the player
    asks for a check. Cells of correct clues stay marked solved across
    checks.
    """

    puzzle: CrosswordPuzzle
    entries: List[List[Optional[str]]] = Field(default_factory=list)
    solved: List[List[bool]] = Field(default_factory=list)
    cursor: CrosswordCursor = Field(default_factory=CrosswordCursor)

    @classmethod
    def create(cls, puzzle: CrosswordPuzzle) -> "CrosswordSession":
        session = cls(puzzle=puzzle, rules=CrosswordRules(puzzle))
        session._reset_input()
        return session

    def _is_open(self, pos: Position) -> bool:
        return in_bounds(self.puzzle.grid, pos) and not self.puzzle.is_blocked(pos)

    @property
    def active_clue(self) -> Optional[CrosswordClue]:
        if self.cursor.active is None:
            return None
        return clue_at(self.puzzle.clues, self.cursor.active, self.cursor.direction)

    def click_cell(self, pos: Position) -> bool:
        """Focus a cell; clicking the focused cell flips the direction."""
        if not self.is_playing or not self._is_open(pos):
            return False
        self.cursor.click(pos)
        return True

    def select_clue(self, number: int, direction: ClueDirection) -> bool:
        """Jump to the first cell of a clue."""
        if not self.is_playing:
            return False
        clues = self.puzzle.clues.across if direction == "across" else self.puzzle.clues.down
        for clue in clues:
            if clue.number == number:
                self.cursor.active = Position(clue.row, clue.col)
                self.cursor.direction = direction
                return True
        return False

    def type_char(self, row: int, col: int, ch: str) -> bool:
        """
        Write a letter into a cell and advance the cursor.

        An empty string clears the cell without moving.
        """
        pos = Position(row, col)
        if not self.is_playing or not self._is_open(pos):
            return False
        ch = ch.strip()[-1:].upper()
        if ch and not ch.isalpha():
            return False

        self.entries[row][col] = ch
        self.cursor.active = pos
        if ch:
            self.cursor.advance(self.puzzle.grid)
        return True

    def backspace(self) -> bool:
        """Clear the active cell, or step back if it is already empty."""
        if not self.is_playing or self.cursor.active is None:
            return False
        row, col = self.cursor.active
        if self.entries[row][col]:
            self.entries[row][col] = ""
            return True
        return self.cursor.retreat(self.puzzle.grid)

    def arrow(self, key: ArrowKey) -> bool:
        if not self.is_playing:
            return False
        return self.cursor.arrow(self.puzzle.grid, key)

    def check(self) -> CheckResult:
        """
        Judge every clue against the current entries.

        Correct clues have their cells marked solved; the puzzle is won
        when every clue is correct at once.
        """
        total = len(self.rules.answers)
        correct: List[str] = []
        for direction, clue in self.puzzle.clues.all():
            key = clue_key(clue.number, direction)
            span = clue_span(clue, direction)
            result = self.rules.validate_selection((key, read_cells(self.entries, span)), self.found)
            if result.accepted:
                correct.append(key)
                if self.is_playing:
                    for r, c in span:
                        self.solved[r][c] = True

        if self.is_playing:
            for key in correct:
                if key not in self.found:
                    self.found.append(key)
            self.check_win(correct)
        return CheckResult(correct=len(correct), total=total, solved_clues=correct)

    def _reset_input(self) -> None:
        self.entries = [["" if cell is not None else None for cell in row] for row in self.puzzle.grid]
        self.solved = [[False for _ in row] for row in self.puzzle.grid]
        self.cursor = CrosswordCursor()

    def snapshot(self) -> CrosswordSnapshot:
        clue_numbers: Dict[str, int] = {}
        for _, clue in self.puzzle.clues.all():
            key = f"{clue.row},{clue.col}"
            if key not in clue_numbers:
                clue_numbers[key] = clue_number_at(self.puzzle.clues, Position(clue.row, clue.col))

        active = self.active_clue
        return CrosswordSnapshot(
            **self._snapshot_fields(),
            entries=[list(row) for row in self.entries],
            solved=[list(row) for row in self.solved],
            active_cell=self.cursor.active,
            direction=self.cursor.direction,
            active_clue=clue_key(active.number, self.cursor.direction) if active else None,
            clue_numbers=clue_numbers,
        )
