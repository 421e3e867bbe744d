from typing import Dict, List, Optional


GRID_SIZES: Dict[str, int] = {"easy": 10, "medium": 15, "hard": 20}

WORD_COUNTS: Dict[str, str] = {"easy": "8 to 10", "medium": "10 to 15", "hard": "15 to 20"}

RACK_SIZES: Dict[str, int] = {"easy": 6, "medium": 7, "hard": 8}

WORD_SEARCH_THEMES: List[str] = ["animals", "space", "food", "sports", "nature", "technology", "movies", "music"]

CROSSWORD_THEMES: List[str] = ["science", "history", "literature", "geography", "art", "music", "sports", "food"]

WORD_SEARCH_PLACEMENT: Dict[str, str] = {
    "easy": "Words can be placed horizontally (left to right) or vertically (top to bottom) only. No diagonal or backward words.",
    "medium": "Words can be placed horizontally, vertically, or diagonally, always reading left to right or top to bottom. No backward words.",
    "hard": "Words can be placed horizontally, vertically, diagonally, and in forward or reverse order.",
}

WORD_COMPLEXITY: Dict[str, str] = {
    "easy": "simple words and clues",
    "medium": "moderately complex words and clues",
    "hard": "complex or longer words and more challenging clues",
}


def _size(difficulty: str) -> str:
    n = GRID_SIZES[difficulty]
    return f"{n}x{n}"


def build_word_search_prompt(difficulty: str, theme: str) -> str:
    """
    Build the request for a themed word search.

    Args:
        difficulty: easy, medium or hard
        theme: Topic the hidden words relate to

    Returns:
        Formatted prompt string
    """
    lines = []
    lines.append("## Word Search")
    lines.append(f"- Theme: {theme}")
    lines.append(f"- Difficulty: {difficulty}")
    lines.append(f"- Grid: {_size(difficulty)}, one uppercase letter per cell")
    lines.append(f"- Words: {WORD_COUNTS[difficulty]} words related to the theme")
    lines.append(f"- Placement: {WORD_SEARCH_PLACEMENT[difficulty]}")
    lines.append("- Fill the remaining empty cells with random uppercase letters.")
    lines.append("")
    lines.append("Return JSON with keys:")
    lines.append('- "grid": array of rows, each an array of single-letter strings')
    lines.append('- "words": array of the hidden words')
    return "\n".join(lines)


def build_crossword_prompt(difficulty: str, theme: str) -> str:
    """Build the request for a themed crossword."""
    lines = []
    lines.append("## Crossword")
    lines.append(f"- Theme: {theme}")
    lines.append(f"- Difficulty: {difficulty}, use {WORD_COMPLEXITY[difficulty]}")
    lines.append(f"- Grid: {_size(difficulty)}")
    lines.append("- Blocked cells are null. Cells that are part of a word are an empty string.")
    lines.append("- Number the clues as in a standard crossword puzzle.")
    lines.append("- Every answer must fit on open cells starting at its row and column:")
    lines.append("  across answers run to the right, down answers run downwards.")
    lines.append("")
    lines.append("Return JSON with keys:")
    lines.append('- "rows", "cols": grid dimensions')
    lines.append('- "grid": array of rows, each cell null or ""')
    lines.append('- "clues": {"across": [...], "down": [...]}, each clue {"number", "clue", "answer", "row", "col"} with 0-indexed row and col')
    return "\n".join(lines)


def build_letter_scramble_prompt(difficulty: str, theme: Optional[str] = None) -> str:
    """Build the request for a letter rack and its possible words."""
    size = RACK_SIZES[difficulty]
    lines = []
    lines.append("## Letter Scramble")
    lines.append(f"- Difficulty: {difficulty}")
    lines.append(f"- Provide {size} letters. Ensure there is at least one {size - 1}-letter word possible.")
    lines.append("- The letters should allow a good number of words, mixing common and less common ones.")
    lines.append("- Each word may use each letter of the rack at most once.")
    lines.append("")
    lines.append("Return JSON with keys:")
    lines.append('- "letters": array of single uppercase letters')
    lines.append('- "possibleWords": every valid English word that can be formed from the letters')
    return "\n".join(lines)


def build_maze_prompt(difficulty: str, theme: Optional[str] = None) -> str:
    """Build the request for a solvable maze."""
    lines = []
    lines.append("## Maze")
    lines.append(f"- Difficulty: {difficulty}")
    lines.append(f"- Dimensions: {_size(difficulty)}")
    lines.append("- 'S' is the start, 'E' is the end, '#' is a wall, ' ' is an open path.")
    lines.append("- The entire maze must be enclosed by walls ('#').")
    lines.append("- 'S' and 'E' must be on the outer edge of the maze, not in the middle.")
    lines.append("- The maze must be solvable: at least one path joins 'S' and 'E'.")
    lines.append("")
    lines.append("Return JSON with keys:")
    lines.append('- "mazeData": one string with newline characters separating the rows')
    lines.append('- "isSolvable": true or false')
    return "\n".join(lines)


PROMPT_BUILDERS = {
    "word-search": build_word_search_prompt,
    "crossword": build_crossword_prompt,
    "letter-scramble": build_letter_scramble_prompt,
    "maze": build_maze_prompt,
}

THEMES: Dict[str, List[str]] = {
    "word-search": WORD_SEARCH_THEMES,
    "crossword": CROSSWORD_THEMES,
}
