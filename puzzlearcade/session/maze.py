"""Maze rules and session."""

from typing import Sequence

from ..engine.grid import in_bounds
from ..engine.models import MazePuzzle, Position
from ..engine.parsing import MazeLayout, parse_maze
from .models import GuessResult, MazeSnapshot
from .session import GameSession, PuzzleRules


# Minimum swipe distance, in pixels, that counts as a move
SWIPE_THRESHOLD = 30


class MazeRules(PuzzleRules):
    """A move is valid onto any in-bounds cell that is not a wall."""

    game = "maze"

    def __init__(self, layout: MazeLayout):
        self.layout = layout

    def validate_selection(self, candidate: Position, found: Sequence[str]) -> GuessResult:
        # Open cells are legal moves that answer nothing
        pos = Position(*candidate)
        if not in_bounds(self.layout.grid, pos) or self.layout.cell(pos) == "#":
            return GuessResult(outcome="invalid", cells=[pos])
        if pos == self.layout.end:
            return GuessResult(outcome="found", word="E", cells=[pos])
        return GuessResult(outcome="ignored", cells=[pos])

    def is_win(self, found: Sequence[str]) -> bool:
        return "E" in found


class MazeSession(GameSession):
    """
    A maze play-through.

    The player starts on 'S' and moves one cell at a time; walls and the
    grid edge block movement. Reaching 'E' wins.
    """

    layout: MazeLayout
    player: Position

    @classmethod
    def create(cls, puzzle: MazePuzzle) -> "MazeSession":
        """Raises MazeParseError if the maze text has no usable layout."""
        layout = parse_maze(puzzle.maze_data)
        return cls(layout=layout, player=layout.start, rules=MazeRules(layout))

    def move(self, dx: int, dy: int) -> bool:
        """
        Step by (dx, dy) where dx is columns and dy is rows.

        Returns True if the player moved.
        """
        if not self.is_playing:
            return False
        target = Position(self.player.row + dy, self.player.col + dx)
        result = self.commit(target)
        if result.outcome == "invalid":
            return False
        self.player = target
        return True

    def swipe(self, dx: float, dy: float, threshold: float = SWIPE_THRESHOLD) -> bool:
        """Turn a touch gesture into a move along its dominant axis."""
        if abs(dx) > abs(dy):
            if abs(dx) > threshold:
                return self.move(1 if dx > 0 else -1, 0)
        elif abs(dy) > threshold:
            return self.move(0, 1 if dy > 0 else -1)
        return False

    def _reset_input(self) -> None:
        self.player = self.layout.start

    def snapshot(self) -> MazeSnapshot:
        return MazeSnapshot(
            **self._snapshot_fields(),
            grid=[list(row) for row in self.layout.grid],
            player=self.player,
            end=self.layout.end,
        )
