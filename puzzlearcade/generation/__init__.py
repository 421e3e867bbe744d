"""LLM-backed puzzle generation for Puzzle Arcade."""

from .models import (
    Message,
    Role,
    TokenUsage,
    GeneratorConfig,
    GeneratedPuzzle,
    PUZZLE_MODELS,
)
from .llm_client import LLMClient
from .generator import PuzzleGenerator, GenerationError

__all__ = [
    "Message",
    "Role",
    "TokenUsage",
    "GeneratorConfig",
    "GeneratedPuzzle",
    "PUZZLE_MODELS",
    "LLMClient",
    "PuzzleGenerator",
    "GenerationError",
]
