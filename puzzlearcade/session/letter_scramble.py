"""Letter scramble rules and session."""

import random
from collections import Counter
from typing import Optional, Sequence

from pydantic import Field

from ..engine.models import LetterScramblePuzzle
from .models import GuessResult, LetterScrambleSnapshot
from .selection import TileRack
from .session import GameSession, PuzzleRules


# Seconds on the clock for one round
GAME_DURATION = 300


def can_form(word: str, letters: Sequence[str]) -> bool:
    """Check `word` uses no letter more often than the rack holds it."""
    return not (Counter(word.lower()) - Counter(letter.lower() for letter in letters))


class LetterScrambleRules(PuzzleRules):
    """
    Judges guesses spelled from a fixed rack of letters.

    A guess must first be spellable from the rack; only then is it looked
    up in the list of possible words.
    """

    game = "letter-scramble"

    def __init__(self, puzzle: LetterScramblePuzzle, target_count: Optional[int] = None):
        self.puzzle = puzzle
        self.possible = set(puzzle.possible_words)
        self.target_count = target_count

    def validate_selection(self, candidate: str, found: Sequence[str]) -> GuessResult:
        word = candidate.strip().lower()
        if not word:
            return GuessResult(outcome="ignored")
        if not can_form(word, self.puzzle.letters):
            return GuessResult(outcome="unformable", word=word)
        if word in found:
            return GuessResult(outcome="duplicate", word=word)
        if word in self.possible:
            return GuessResult(outcome="found", word=word)
        return GuessResult(outcome="invalid", word=word)

    def is_win(self, found: Sequence[str]) -> bool:
        return bool(self.possible) and self.possible <= set(found)

    def is_timeout_win(self, found: Sequence[str]) -> bool:
        if self.target_count is None:
            return False
        return len(found) >= self.target_count


class LetterScrambleSession(GameSession):
    """
    A timed letter scramble round.

    The clock counts down from `time_limit`. When it runs out the round is
    over, and counts as won if enough words were found.
    """

    puzzle: LetterScramblePuzzle
    rack: TileRack = Field(default_factory=TileRack)
    seed: Optional[int] = None
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.seed)

    @classmethod
    def create(
        cls,
        puzzle: LetterScramblePuzzle,
        time_limit: int = GAME_DURATION,
        target_count: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> "LetterScrambleSession":
        return cls(
            puzzle=puzzle,
            rules=LetterScrambleRules(puzzle, target_count=target_count),
            rack=TileRack.from_letters(puzzle.letters),
            time_limit=time_limit,
            seed=seed,
        )

    def tap_letter(self, tile_id: int) -> bool:
        if not self.is_playing:
            return False
        return self.rack.tap(tile_id)

    def backspace(self) -> bool:
        if not self.is_playing:
            return False
        return self.rack.backspace()

    def shuffle(self) -> None:
        if self.is_playing:
            self.rack.shuffle(self._rng)

    def submit(self) -> GuessResult:
        """Submit the tiles tapped so far; the rack is freed whatever the outcome."""
        guess = self.rack.release()
        return self.commit(guess)

    def submit_guess(self, text: str) -> GuessResult:
        """Submit a typed guess, bypassing the tiles."""
        self.rack.release()
        return self.commit(text)

    def _record(self, result: GuessResult) -> None:
        super()._record(result)
        self.found.sort(key=len, reverse=True)

    def _reset_input(self) -> None:
        self.rack = TileRack.from_letters(self.puzzle.letters)

    def snapshot(self) -> LetterScrambleSnapshot:
        return LetterScrambleSnapshot(
            **self._snapshot_fields(),
            tiles=[tile.model_copy() for tile in self.rack.tiles],
            guess=self.rack.guess_text,
            possible_count=len(self.rules.possible),
        )
