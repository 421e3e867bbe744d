"""Puzzle Arcade: LLM-generated word search, crossword, letter scramble and maze puzzles."""

__version__ = "0.1.0"
