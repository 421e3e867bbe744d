"""
Pydantic models for the generation layer.

Configuration loaded from YAML, messages sent to the model, and the
generated puzzle record that can be saved and replayed.
"""

import json
from pathlib import Path
from typing import Optional, Literal, Union
from pydantic import BaseModel, Field, ConfigDict

from ..engine.models import (
    Difficulty,
    GameType,
    WordSearchPuzzle,
    CrosswordPuzzle,
    LetterScramblePuzzle,
    MazePuzzle,
)


# Type aliases
Role = Literal["system", "user", "assistant"]
Puzzle = Union[WordSearchPuzzle, CrosswordPuzzle, LetterScramblePuzzle, MazePuzzle]

PUZZLE_MODELS = {
    "word-search": WordSearchPuzzle,
    "crossword": CrosswordPuzzle,
    "letter-scramble": LetterScramblePuzzle,
    "maze": MazePuzzle,
}


class Message(BaseModel):
    """Represents a single message in the conversation."""
    role: Role
    content: str


class TokenUsage(BaseModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class GeneratorConfig(BaseModel):
    """Configuration for a generation run."""
    model_config = ConfigDict(extra='allow')

    model: str = "gpt-4o"
    temperature: float = 1.0
    max_tokens: Optional[int] = None
    json_mode: bool = True
    game: GameType = "word-search"
    difficulty: Difficulty = "easy"
    theme: Optional[str] = None
    seed: Optional[int] = None
    time_limit: Optional[int] = Field(None, ge=1)
    target_count: Optional[int] = Field(None, ge=1)
    # Additional kwargs are allowed and passed to LiteLLM


class GeneratedPuzzle(BaseModel):
    """A verified puzzle together with how it was made."""
    game: GameType
    difficulty: Difficulty
    theme: Optional[str] = None
    model: str = ""
    puzzle: Puzzle
    usage: TokenUsage = Field(default_factory=TokenUsage)
    generated_at: str = ""
    # Letter scramble round settings carried from the config to `play`
    time_limit: Optional[int] = Field(None, ge=1)
    target_count: Optional[int] = Field(None, ge=1)

    @classmethod
    def from_dict(cls, data: dict) -> "GeneratedPuzzle":
        """Rebuild a saved record, decoding the puzzle by its game type."""
        data = dict(data)
        game = data.get("game")
        if game not in PUZZLE_MODELS:
            raise ValueError(f"Unknown game type: {game!r}")
        data["puzzle"] = PUZZLE_MODELS[game].model_validate(data.get("puzzle", {}))
        return cls(**data)

    def save(self, path: Union[str, Path]) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            json.dump(self.model_dump(by_alias=True), f, indent=2, default=str)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "GeneratedPuzzle":
        with open(path) as f:
            return cls.from_dict(json.load(f))
