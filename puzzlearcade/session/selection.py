"""
Selection and guess accumulators.

Each accumulator turns a stream of discrete input events into one candidate
answer. Rejected events leave the accumulator unchanged.
"""

import random
from typing import List, Optional, Sequence

from pydantic import BaseModel, Field

from ..engine.grid import cells_between, line_direction, in_bounds, CLUE_STEPS
from ..engine.models import Position, ClueDirection
from .models import Tile, ArrowKey


class DragSelection(BaseModel):
    """
    In-progress pointer drag over a word search grid.

    The path always runs in a straight line from the first cell. Once two
    cells are selected the direction is fixed and the selection cannot bend.
    """
    cells: List[Position] = Field(default_factory=list)

    @property
    def active(self) -> bool:
        return bool(self.cells)

    def start(self, pos: Position) -> None:
        self.cells = [Position(*pos)]

    def extend(self, pos: Position) -> bool:
        """
        Extend the path to `pos`.

        Returns True if the selection changed.
        """
        if not self.cells:
            return False
        pos = Position(*pos)
        if pos in self.cells:
            return False

        first = self.cells[0]
        step = line_direction(first, pos)
        if step is None:
            return False
        if len(self.cells) >= 2 and step != line_direction(first, self.cells[1]):
            return False

        self.cells = cells_between(first, pos)
        return True

    def release(self) -> List[Position]:
        """Hand back the path and clear the selection."""
        cells, self.cells = self.cells, []
        return cells


class TileRack(BaseModel):
    """Letter tiles for a scramble guess; each tile may be used once per guess."""
    tiles: List[Tile] = Field(default_factory=list)
    guess: List[int] = Field(default_factory=list)

    @classmethod
    def from_letters(cls, letters: Sequence[str]) -> "TileRack":
        return cls(tiles=[Tile(id=i, char=letter.upper()) for i, letter in enumerate(letters)])

    def _tile(self, tile_id: int) -> Optional[Tile]:
        for tile in self.tiles:
            if tile.id == tile_id:
                return tile
        return None

    @property
    def guess_text(self) -> str:
        return "".join(self._tile(tile_id).char for tile_id in self.guess)

    def tap(self, tile_id: int) -> bool:
        """Add a tile to the guess. Used or unknown tiles are ignored."""
        tile = self._tile(tile_id)
        if tile is None or tile.used:
            return False
        tile.used = True
        self.guess.append(tile_id)
        return True

    def backspace(self) -> bool:
        """Give the most recently used tile back to the rack."""
        if not self.guess:
            return False
        self._tile(self.guess.pop()).used = False
        return True

    def release(self) -> str:
        """Return the guess and make every tile available again."""
        text = self.guess_text
        self.guess = []
        for tile in self.tiles:
            tile.used = False
        return text

    def shuffle(self, rng: random.Random) -> None:
        rng.shuffle(self.tiles)


ARROW_STEPS = {
    "up": ((-1, 0), "down"),
    "down": ((1, 0), "down"),
    "left": ((0, -1), "across"),
    "right": ((0, 1), "across"),
}


class CrosswordCursor(BaseModel):
    """
    Active crossword cell plus typing direction.

    Typing advances in reading order, skipping blocked cells: past the end
    of a row (across) or column (down) it continues at the start of the
    next one, and past the last cell it wraps to the origin. Arrow keys and
    backspace step without wrapping and stop at the grid edge.
    """
    active: Optional[Position] = None
    direction: ClueDirection = "across"

    def click(self, pos: Position) -> None:
        pos = Position(*pos)
        if self.active == pos:
            self.direction = "down" if self.direction == "across" else "across"
        else:
            self.active = pos

    def advance(self, grid: Sequence[Sequence[Optional[str]]]) -> None:
        """Move to the next open cell after typing, wrapping as described."""
        if self.active is None:
            return
        rows, cols = len(grid), len(grid[0])
        row, col = self.active
        for _ in range(rows * cols):
            if self.direction == "across":
                col += 1
                if col >= cols:
                    col = 0
                    row = (row + 1) % rows
            else:
                row += 1
                if row >= rows:
                    row = 0
                    col = (col + 1) % cols
            if grid[row][col] is not None:
                self.active = Position(row, col)
                return

    def _step(self, grid: Sequence[Sequence[Optional[str]]], d_row: int, d_col: int) -> bool:
        if self.active is None:
            return False
        pos = Position(self.active.row + d_row, self.active.col + d_col)
        while in_bounds(grid, pos) and grid[pos.row][pos.col] is None:
            pos = Position(pos.row + d_row, pos.col + d_col)
        if not in_bounds(grid, pos):
            return False
        self.active = pos
        return True

    def arrow(self, grid: Sequence[Sequence[Optional[str]]], key: ArrowKey) -> bool:
        """Reorient to the arrow's axis and step one open cell that way."""
        if key not in ARROW_STEPS:
            return False
        (d_row, d_col), direction = ARROW_STEPS[key]
        self.direction = direction
        return self._step(grid, d_row, d_col)

    def retreat(self, grid: Sequence[Sequence[Optional[str]]]) -> bool:
        """Step back one open cell against the current direction."""
        d_row, d_col = CLUE_STEPS[self.direction]
        return self._step(grid, -d_row, -d_col)
