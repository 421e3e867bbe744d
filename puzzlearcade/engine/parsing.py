"""Parsing utilities for model responses and maze text."""

import json
import re
from typing import Any, Dict, List

from pydantic import BaseModel

from .models import Position


MAZE_CELLS = {"#", " ", "S", "E"}


class MazeParseError(ValueError):
    """Raised when maze text cannot be turned into a playable layout."""


class MazeLayout(BaseModel):
    """A parsed maze grid with its start and end cells."""
    grid: List[List[str]]
    start: Position
    end: Position

    @property
    def rows(self) -> int:
        return len(self.grid)

    def cell(self, pos: Position) -> str:
        return self.grid[pos.row][pos.col]


def extract_json_payload(text: str) -> Dict[str, Any]:
    """
    Decode the JSON object in a model response.

    Accepts a bare object, an object inside a ```json fenced block, or an
    object surrounded by prose. Raises ValueError if nothing decodes.
    """
    fenced = re.search(r"```(?:json)?\s*(.*?)```", text, re.DOTALL)
    if fenced:
        text = fenced.group(1)

    text = text.strip()
    first, last = text.find("{"), text.rfind("}")
    if first == -1 or last < first:
        raise ValueError("No JSON object found in response")

    try:
        payload = json.loads(text[first:last + 1])
    except json.JSONDecodeError as e:
        raise ValueError(f"Response is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise ValueError("Response JSON is not an object")
    return payload


def parse_maze(maze_data: str) -> MazeLayout:
    """
    Parse newline-delimited maze text.

    Leading and trailing blank lines are dropped; rows keep their inner
    spacing. Raises MazeParseError unless exactly one 'S' and one 'E' exist.
    """
    lines = maze_data.replace("\r", "").split("\n")
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()

    if not lines:
        raise MazeParseError("Maze data is empty")

    grid = [list(line) for line in lines]
    starts = [Position(r, c) for r, row in enumerate(grid) for c, cell in enumerate(row) if cell == "S"]
    ends = [Position(r, c) for r, row in enumerate(grid) for c, cell in enumerate(row) if cell == "E"]

    if not starts:
        raise MazeParseError("Maze has no start cell 'S'")
    if len(starts) > 1:
        raise MazeParseError(f"Maze has {len(starts)} start cells")
    if not ends:
        raise MazeParseError("Maze has no end cell 'E'")
    if len(ends) > 1:
        raise MazeParseError(f"Maze has {len(ends)} end cells")

    return MazeLayout(grid=grid, start=starts[0], end=ends[0])
