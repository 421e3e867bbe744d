"""
Puzzle generation via a single LLM request.

The generator asks the model for one puzzle, decodes the JSON reply into a
puzzle model, and verifies it. A puzzle that fails any step is rejected
with GenerationError; it is never repaired or re-requested.
"""

import logging
import random
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError as PydanticValidationError

from ..engine.models import ValidationError
from ..engine.parsing import extract_json_payload
from ..engine.verify import verify
from .llm_client import LLMClient
from .models import GeneratorConfig, GeneratedPuzzle, TokenUsage, PUZZLE_MODELS
from .prompts import get_system_prompt, PROMPT_BUILDERS, THEMES


logger = logging.getLogger(__name__)


class GenerationError(ValueError):
    """Raised when the model's output cannot be turned into a valid puzzle."""

    def __init__(self, message: str, errors: Optional[List[ValidationError]] = None, max_errors: int = 5):
        self.errors = errors or []
        if self.errors:
            shown = [e.message for e in self.errors[:max_errors]]
            hidden = len(self.errors) - len(shown)
            if hidden:
                shown.append(f"... and {hidden} more error{'s' if hidden > 1 else ''}")
            message = f"{message}: {'; '.join(shown)}"
        super().__init__(message)


class PuzzleGenerator(BaseModel):
    """
    Produces verified puzzles from a language model.

    Attributes:
        config: Generation settings (model, game, difficulty, theme, seed)
        client: LLM client used for the request
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GeneratorConfig
    client: LLMClient
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.config.seed)

    @classmethod
    def create(cls, config: Optional[GeneratorConfig] = None, **config_kwargs) -> "PuzzleGenerator":
        """
        Factory method to create a generator with a configured LLM client.

        Args:
            config: Optional GeneratorConfig instance
            **config_kwargs: Config parameters if config not provided
        """
        if config is None:
            config = GeneratorConfig(**config_kwargs)

        llm_kwargs = {
            "temperature": config.temperature,
            "max_tokens": config.max_tokens,
            "json_mode": config.json_mode,
        }
        # Extra config keys (e.g. api_base, top_p) go straight to LiteLLM
        if config.__pydantic_extra__:
            llm_kwargs.update(config.__pydantic_extra__)

        client = LLMClient(model=config.model, **llm_kwargs)
        return cls(config=config, client=client)

    def pick_theme(self, game: str) -> Optional[str]:
        """Choose a theme at random for games that have one."""
        themes = THEMES.get(game)
        if not themes:
            return None
        return self._rng.choice(themes)

    def generate(
        self,
        game: Optional[str] = None,
        difficulty: Optional[str] = None,
        theme: Optional[str] = None,
    ) -> GeneratedPuzzle:
        """
        Generate and verify one puzzle.

        Args:
            game: Game type (defaults to the configured game)
            difficulty: easy, medium or hard (defaults to the configured difficulty)
            theme: Topic for themed games (defaults to config, then a random pick)

        Returns:
            GeneratedPuzzle holding a puzzle that passed verification

        Raises:
            GenerationError: If the request fails or the reply is not a valid puzzle
        """
        game = game or self.config.game
        difficulty = difficulty or self.config.difficulty
        if game not in PROMPT_BUILDERS:
            raise ValueError(f"Unknown game type: {game!r}")

        if game in THEMES:
            theme = theme or self.config.theme or self.pick_theme(game)
        else:
            theme = None

        prompt = PROMPT_BUILDERS[game](difficulty, theme)
        usage_before = self.client.usage.model_copy()
        logger.info("Generating %s puzzle (difficulty=%s, theme=%s) with %s", game, difficulty, theme, self.client.model)

        try:
            raw_response = self.client.ask(get_system_prompt(), prompt)
        except Exception as e:
            raise GenerationError(f"Model request failed: {e}") from e

        try:
            payload = extract_json_payload(raw_response)
        except ValueError as e:
            raise GenerationError(f"Could not read {game} puzzle: {e}") from e

        if game == "word-search":
            payload["difficulty"] = difficulty

        try:
            puzzle = PUZZLE_MODELS[game].model_validate(payload)
        except PydanticValidationError as e:
            raise GenerationError(f"Malformed {game} puzzle: {e.error_count()} field error(s)") from e

        result = verify(game, puzzle)
        for warning in result.warnings:
            logger.warning("%s puzzle: %s", game, warning.message)
        if not result.valid:
            raise GenerationError(f"Generated {game} puzzle failed verification", errors=result.errors)

        usage = TokenUsage(
            prompt_tokens=self.client.usage.prompt_tokens - usage_before.prompt_tokens,
            completion_tokens=self.client.usage.completion_tokens - usage_before.completion_tokens,
            total_tokens=self.client.usage.total_tokens - usage_before.total_tokens,
        )
        logger.info("Generated %s puzzle using %d tokens", game, usage.total_tokens)

        return GeneratedPuzzle(
            game=game,
            difficulty=difficulty,
            theme=theme,
            model=self.client.model,
            puzzle=puzzle,
            usage=usage,
            generated_at=datetime.now().isoformat(),
            time_limit=self.config.time_limit,
            target_count=self.config.target_count,
        )
