"""Plain-text rendering of session snapshots for the terminal."""

from typing import List, Optional

from ..session.models import (
    SessionSnapshot,
    WordSearchSnapshot,
    CrosswordSnapshot,
    LetterScrambleSnapshot,
    MazeSnapshot,
)


def format_time(seconds: int) -> str:
    """Format seconds as MM:SS."""
    mins, secs = divmod(max(seconds, 0), 60)
    return f"{mins:02d}:{secs:02d}"


def _column_header(cols: int) -> str:
    return "    " + "".join(f"{c % 10:>2}" for c in range(cols))


def render_word_search(snapshot: WordSearchSnapshot) -> str:
    """Found cells are lower-cased; the current selection is starred."""
    selection = set(snapshot.selection)
    found = set(snapshot.found_cells)
    lines = [_column_header(len(snapshot.grid[0]) if snapshot.grid else 0)]
    for r, row in enumerate(snapshot.grid):
        cells = []
        for c, letter in enumerate(row):
            text = letter.lower() if (r, c) in found else letter
            cells.append(f"*{text}" if (r, c) in selection else f" {text}")
        lines.append(f"{r:>3} " + "".join(cells))

    lines.append("")
    lines.append("Words: " + ", ".join(
        f"[{w}]" if w in snapshot.found else w for w in snapshot.words
    ))
    return "\n".join(lines)


def render_crossword(snapshot: CrosswordSnapshot) -> str:
    """'#' is blocked, '.' empty; the active cell is bracketed."""
    lines = [_column_header(len(snapshot.entries[0]) if snapshot.entries else 0)]
    for r, row in enumerate(snapshot.entries):
        cells = []
        for c, entry in enumerate(row):
            if entry is None:
                text = "#"
            elif snapshot.solved[r][c]:
                text = entry.lower()
            else:
                text = entry or "."
            marker = ">" if snapshot.active_cell == (r, c) else " "
            cells.append(f"{marker}{text}")
        lines.append(f"{r:>3} " + "".join(cells))

    lines.append("")
    lines.append(f"Direction: {snapshot.direction}")
    if snapshot.active_clue:
        lines.append(f"Clue: {snapshot.active_clue}")
    return "\n".join(lines)


def render_letter_scramble(snapshot: LetterScrambleSnapshot) -> str:
    rack = " ".join("_" if tile.used else tile.char for tile in snapshot.tiles)
    lines = [
        f"Rack:  {rack}",
        f"Guess: {snapshot.guess or '-'}",
        f"Found {len(snapshot.found)} / {snapshot.possible_count}: {', '.join(snapshot.found)}",
    ]
    return "\n".join(lines)


def render_maze(snapshot: MazeSnapshot) -> str:
    """The player is drawn as '@'."""
    rows: List[str] = []
    for r, row in enumerate(snapshot.grid):
        rows.append("".join("@" if snapshot.player == (r, c) else cell for c, cell in enumerate(row)))
    return "\n".join(rows)


def render_status(snapshot: SessionSnapshot) -> str:
    clock: Optional[int] = snapshot.remaining_seconds
    label = "Left" if clock is not None else "Time"
    seconds = clock if clock is not None else snapshot.elapsed_seconds
    return f"[{snapshot.game}] {snapshot.status.upper()}  {label} {format_time(seconds)}"


def render_snapshot(snapshot: SessionSnapshot) -> str:
    """Render any session snapshot with its status line."""
    if isinstance(snapshot, WordSearchSnapshot):
        body = render_word_search(snapshot)
    elif isinstance(snapshot, CrosswordSnapshot):
        body = render_crossword(snapshot)
    elif isinstance(snapshot, LetterScrambleSnapshot):
        body = render_letter_scramble(snapshot)
    elif isinstance(snapshot, MazeSnapshot):
        body = render_maze(snapshot)
    else:
        body = ""
    return f"{render_status(snapshot)}\n{body}".rstrip()
