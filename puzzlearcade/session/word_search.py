"""Word search rules and session."""

from typing import Dict, List, Sequence

from pydantic import Field

from ..engine.grid import allowed_directions, placement_directions, read_cells, in_bounds, cells_between
from ..engine.models import Position, WordSearchPuzzle
from .models import GuessResult, WordSearchSnapshot
from .selection import DragSelection
from .session import GameSession, PuzzleRules


class WordSearchRules(PuzzleRules):
    """
    Matches a dragged cell path against the hidden words.

    A path counts for a word when its forward or reversed reading spells
    the word and the direction the word is written in is allowed by the
    puzzle's difficulty.
    """

    game = "word-search"

    def __init__(self, puzzle: WordSearchPuzzle):
        self.puzzle = puzzle
        self.words: List[str] = list(dict.fromkeys(puzzle.words))
        self.directions = allowed_directions(puzzle.difficulty)

    def validate_selection(self, candidate: Sequence[Position], found: Sequence[str]) -> GuessResult:
        path = [Position(*p) for p in candidate]
        if len(path) < 2 or not all(in_bounds(self.puzzle.grid, p) for p in path):
            return GuessResult(outcome="ignored", cells=path)

        if path != cells_between(path[0], path[-1]):
            return GuessResult(outcome="ignored", cells=path)

        duplicate = None
        for word in self.words:
            directions = placement_directions(self.puzzle.grid, path, word)
            if not any(d in self.directions for d in directions):
                continue
            if word in found:
                duplicate = word
                continue
            return GuessResult(outcome="found", word=word, cells=path)

        if duplicate is not None:
            return GuessResult(outcome="duplicate", word=duplicate, cells=path)
        return GuessResult(outcome="invalid", word=read_cells(self.puzzle.grid, path), cells=path)

    def is_win(self, found: Sequence[str]) -> bool:
        return set(self.words) <= set(found)


class WordSearchSession(GameSession):
    """
    A word search play-through.

    Pointer events build a DragSelection; releasing it commits the path.
    """

    puzzle: WordSearchPuzzle
    selection: DragSelection = Field(default_factory=DragSelection)
    found_paths: Dict[str, List[Position]] = Field(default_factory=dict)

    @classmethod
    def create(cls, puzzle: WordSearchPuzzle) -> "WordSearchSession":
        return cls(puzzle=puzzle, rules=WordSearchRules(puzzle))

    def select_start(self, pos: Position) -> bool:
        """Pointer down on a cell."""
        if not self.is_playing or not in_bounds(self.puzzle.grid, pos):
            return False
        self.selection.start(pos)
        return True

    def select_extend(self, pos: Position) -> bool:
        """Pointer entered a cell while dragging."""
        if not self.is_playing or not in_bounds(self.puzzle.grid, pos):
            return False
        return self.selection.extend(pos)

    def select_commit(self) -> GuessResult:
        """Pointer released: validate the dragged path, then clear it."""
        if not self.selection.active:
            return GuessResult(outcome="ignored")
        return self.commit(self.selection.release())

    def _record(self, result: GuessResult) -> None:
        super()._record(result)
        self.found_paths[result.word] = list(result.cells)

    def _reset_input(self) -> None:
        self.selection = DragSelection()
        self.found_paths = {}

    def snapshot(self) -> WordSearchSnapshot:
        found_cells: List[Position] = []
        for cells in self.found_paths.values():
            found_cells.extend(c for c in cells if c not in found_cells)
        return WordSearchSnapshot(
            **self._snapshot_fields(),
            grid=self.puzzle.grid,
            words=self.rules.words,
            selection=list(self.selection.cells),
            found_cells=found_cells,
        )
