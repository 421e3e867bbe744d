import json
from unittest.mock import Mock, patch

import pytest

from puzzlearcade.engine import ValidationError, WordSearchPuzzle, LetterScramblePuzzle
from puzzlearcade.generation import (
    GeneratedPuzzle,
    GenerationError,
    GeneratorConfig,
    PuzzleGenerator,
)
from puzzlearcade.generation.prompts import THEMES

from conftest import MAZE_DATA


CAT_REPLY = json.dumps({
    "grid": [["C", "A", "T"], ["X", "X", "X"], ["X", "X", "X"]],
    "words": ["CAT"],
})


def mock_reply(content: str) -> Mock:
    """A litellm-style response carrying `content`."""
    return Mock(
        choices=[Mock(message=Mock(content=content, role="assistant"))],
        usage=Mock(prompt_tokens=5, completion_tokens=10, total_tokens=15),
    )


def make_generator(**config) -> PuzzleGenerator:
    config.setdefault("model", "gpt-4o")
    return PuzzleGenerator.create(GeneratorConfig(**config))


class TestGenerate:
    """Test turning a model reply into a verified puzzle."""

    @patch('litellm.completion')
    def test_word_search(self, mock_completion):
        mock_completion.return_value = mock_reply(CAT_REPLY)

        generator = make_generator(game="word-search", difficulty="easy", theme="animals")
        generated = generator.generate()

        assert isinstance(generated.puzzle, WordSearchPuzzle)
        assert generated.puzzle.difficulty == "easy"
        assert generated.puzzle.words == ["CAT"]
        assert generated.theme == "animals"
        assert generated.model == "gpt-4o"
        assert generated.usage.total_tokens == 15

        prompt = mock_completion.call_args[1]["messages"][1]["content"]
        assert "animals" in prompt

    @patch('litellm.completion')
    def test_arguments_override_config(self, mock_completion):
        """Difficulty injected into the puzzle is the one requested."""
        mock_completion.return_value = mock_reply(CAT_REPLY)

        generated = make_generator(difficulty="hard").generate(difficulty="easy", theme="food")

        assert generated.difficulty == "easy"
        assert generated.puzzle.difficulty == "easy"
        assert generated.theme == "food"

    @patch('litellm.completion')
    def test_fenced_maze_reply(self, mock_completion):
        reply = "```json\n" + json.dumps({"mazeData": MAZE_DATA, "isSolvable": True}) + "\n```"
        mock_completion.return_value = mock_reply(reply)

        generated = make_generator(game="maze", theme="space").generate()

        assert generated.puzzle.maze_data == MAZE_DATA
        assert generated.theme is None

    @patch('litellm.completion')
    def test_usage_is_per_puzzle(self, mock_completion):
        mock_completion.return_value = mock_reply(CAT_REPLY)

        generator = make_generator(theme="animals")
        generator.generate()
        second = generator.generate()

        assert second.usage.total_tokens == 15
        assert generator.client.usage.total_tokens == 30

    @patch('litellm.completion')
    def test_unreadable_reply(self, mock_completion):
        mock_completion.return_value = mock_reply("Sorry, I can't help with that.")

        with pytest.raises(GenerationError, match="Could not read word-search puzzle"):
            make_generator(theme="animals").generate()

    @patch('litellm.completion')
    def test_malformed_puzzle(self, mock_completion):
        mock_completion.return_value = mock_reply('{"letters": ["A", "B"]}')

        with pytest.raises(GenerationError, match="Malformed letter-scramble puzzle"):
            make_generator(game="letter-scramble").generate()

    @patch('litellm.completion')
    def test_failed_verification(self, mock_completion):
        """A puzzle whose words are not in the grid is rejected, not repaired."""
        reply = json.dumps({
            "grid": [["C", "A", "T"], ["X", "X", "X"], ["X", "X", "X"]],
            "words": ["CAT", "DOG"],
        })
        mock_completion.return_value = mock_reply(reply)

        with pytest.raises(GenerationError) as exc_info:
            make_generator(theme="animals").generate()

        assert [e.code for e in exc_info.value.errors] == ["WORD_NOT_FOUND"]
        assert "DOG" in str(exc_info.value)

    @patch('litellm.completion')
    def test_request_failure(self, mock_completion):
        mock_completion.side_effect = RuntimeError("connection refused")

        with pytest.raises(GenerationError, match="Model request failed: connection refused"):
            make_generator(theme="animals").generate()

    @patch('litellm.completion')
    def test_round_settings_carried_from_config(self, mock_completion):
        mock_completion.return_value = mock_reply('{"letters": ["A", "B"], "possibleWords": ["ab", "ba"]}')

        generated = make_generator(game="letter-scramble", time_limit=90, target_count=1).generate()

        assert generated.time_limit == 90
        assert generated.target_count == 1

    def test_unknown_game(self):
        with pytest.raises(ValueError, match="Unknown game type"):
            make_generator().generate(game="sudoku")


class TestThemes:
    """Test theme selection."""

    def test_seeded_pick_is_repeatable(self):
        first = make_generator(seed=42).pick_theme("word-search")
        second = make_generator(seed=42).pick_theme("word-search")
        assert first == second
        assert first in THEMES["word-search"]

    def test_unthemed_games(self):
        generator = make_generator()
        assert generator.pick_theme("maze") is None
        assert generator.pick_theme("letter-scramble") is None

    @patch('litellm.completion')
    def test_theme_picked_when_unset(self, mock_completion):
        mock_completion.return_value = mock_reply(CAT_REPLY)

        generated = make_generator(seed=3).generate()
        assert generated.theme in THEMES["word-search"]


class TestCreate:
    """Test building a generator from configuration."""

    def test_client_settings_from_config(self):
        generator = make_generator(temperature=0.3, max_tokens=800, json_mode=False)
        assert generator.client.temperature == 0.3
        assert generator.client.max_tokens == 800
        assert generator.client.json_mode is False

    def test_extra_config_reaches_client(self):
        generator = PuzzleGenerator.create(model="ollama/llama3", api_base="http://localhost:11434")
        assert generator.client.model == "ollama/llama3"
        assert generator.client.additional_params == {"api_base": "http://localhost:11434"}


class TestGenerationError:
    """Test error summaries."""

    def test_lists_errors(self):
        errors = [ValidationError(code="NO_PATH", message="End is unreachable")]
        error = GenerationError("Generated maze puzzle failed verification", errors=errors)
        assert str(error) == "Generated maze puzzle failed verification: End is unreachable"

    def test_truncates_long_lists(self):
        errors = [ValidationError(code="WORD_NOT_FOUND", message=f"W{i}") for i in range(7)]
        error = GenerationError("Failed", errors=errors)
        assert str(error) == "Failed: W0; W1; W2; W3; W4; ... and 2 more errors"

    def test_single_hidden_error(self):
        errors = [ValidationError(code="X", message=f"W{i}") for i in range(3)]
        error = GenerationError("Failed", errors=errors, max_errors=2)
        assert str(error).endswith("... and 1 more error")


class TestGeneratedPuzzle:
    """Test saving and loading generated puzzles."""

    def test_save_uses_wire_names(self, tmp_path, scramble_puzzle):
        path = tmp_path / "nested" / "scramble.json"
        GeneratedPuzzle(game="letter-scramble", difficulty="easy", puzzle=scramble_puzzle).save(path)

        data = json.loads(path.read_text())
        assert data["puzzle"]["possibleWords"] == ["ab", "ba", "aba", "baa"]

    def test_load(self, tmp_path, scramble_puzzle):
        path = tmp_path / "scramble.json"
        GeneratedPuzzle(game="letter-scramble", difficulty="medium", puzzle=scramble_puzzle).save(path)

        loaded = GeneratedPuzzle.load(path)
        assert isinstance(loaded.puzzle, LetterScramblePuzzle)
        assert loaded.puzzle.letters == ["A", "A", "B"]
        assert loaded.difficulty == "medium"

    def test_unknown_game(self):
        with pytest.raises(ValueError, match="Unknown game type"):
            GeneratedPuzzle.from_dict({"game": "chess", "difficulty": "easy", "puzzle": {}})
