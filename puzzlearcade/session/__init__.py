"""Interaction engine: selection accumulators and puzzle sessions."""

from .models import (
    GameStatus,
    GuessOutcome,
    GuessResult,
    CheckResult,
    Tile,
    SessionSnapshot,
    WordSearchSnapshot,
    CrosswordSnapshot,
    LetterScrambleSnapshot,
    MazeSnapshot,
)
from .selection import DragSelection, TileRack, CrosswordCursor
from .session import GameSession, PuzzleRules
from .word_search import WordSearchRules, WordSearchSession
from .crossword import CrosswordRules, CrosswordSession, clue_key
from .letter_scramble import LetterScrambleRules, LetterScrambleSession, GAME_DURATION, can_form
from .maze import MazeRules, MazeSession
from .clock import SecondTicker
from .factory import create_session

__all__ = [
    "GameStatus",
    "GuessOutcome",
    "GuessResult",
    "CheckResult",
    "Tile",
    "SessionSnapshot",
    "WordSearchSnapshot",
    "CrosswordSnapshot",
    "LetterScrambleSnapshot",
    "MazeSnapshot",
    "DragSelection",
    "TileRack",
    "CrosswordCursor",
    "GameSession",
    "PuzzleRules",
    "WordSearchRules",
    "WordSearchSession",
    "CrosswordRules",
    "CrosswordSession",
    "clue_key",
    "LetterScrambleRules",
    "LetterScrambleSession",
    "GAME_DURATION",
    "can_form",
    "MazeRules",
    "MazeSession",
    "SecondTicker",
    "create_session",
]
