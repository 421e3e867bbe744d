"""Prompt templates for puzzle generation."""

from .system_prompt import SYSTEM_PROMPT, get_system_prompt
from .puzzle_prompts import (
    build_word_search_prompt,
    build_crossword_prompt,
    build_letter_scramble_prompt,
    build_maze_prompt,
    PROMPT_BUILDERS,
    THEMES,
    GRID_SIZES,
    RACK_SIZES,
)

__all__ = [
    "SYSTEM_PROMPT",
    "get_system_prompt",
    "build_word_search_prompt",
    "build_crossword_prompt",
    "build_letter_scramble_prompt",
    "build_maze_prompt",
    "PROMPT_BUILDERS",
    "THEMES",
    "GRID_SIZES",
    "RACK_SIZES",
]
