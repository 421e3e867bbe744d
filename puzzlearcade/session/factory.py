"""Build sessions from verified puzzles."""

from typing import Optional

from ..engine.models import (
    WordSearchPuzzle,
    CrosswordPuzzle,
    LetterScramblePuzzle,
    MazePuzzle,
)
from ..engine.verify import verify
from .session import GameSession
from .word_search import WordSearchSession
from .crossword import CrosswordSession
from .letter_scramble import LetterScrambleSession, GAME_DURATION
from .maze import MazeSession


def create_session(
    game: str,
    puzzle,
    time_limit: Optional[int] = None,
    target_count: Optional[int] = None,
    seed: Optional[int] = None,
) -> GameSession:
    """
    Start a session for a puzzle of the given game type.

    Args:
        game: One of word-search, crossword, letter-scramble, maze
        puzzle: The matching puzzle model
        time_limit: Letter scramble round length (defaults to GAME_DURATION)
        target_count: Words needed for a letter scramble round to count as won
        seed: Seed for the letter scramble shuffle

    Raises:
        ValueError: If the puzzle fails verification
    """
    result = verify(game, puzzle)
    if not result.valid:
        messages = "; ".join(e.message for e in result.errors)
        raise ValueError(f"Cannot start a {game} session: {messages}")

    if game == "word-search" and isinstance(puzzle, WordSearchPuzzle):
        return WordSearchSession.create(puzzle)
    if game == "crossword" and isinstance(puzzle, CrosswordPuzzle):
        return CrosswordSession.create(puzzle)
    if game == "letter-scramble" and isinstance(puzzle, LetterScramblePuzzle):
        return LetterScrambleSession.create(
            puzzle,
            time_limit=time_limit or GAME_DURATION,
            target_count=target_count,
            seed=seed,
        )
    if game == "maze" and isinstance(puzzle, MazePuzzle):
        return MazeSession.create(puzzle)
    raise ValueError(f"Puzzle of type {type(puzzle).__name__} does not match game {game!r}")
