"""
Generic puzzle session state machine.

A session owns the status, the timer and the found set. What counts as a
correct answer and when the puzzle is complete is delegated to a
PuzzleRules object, implemented once per game type.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel, Field, ConfigDict

from .models import GameStatus, GuessResult, SessionSnapshot, TERMINAL_STATUSES


logger = logging.getLogger(__name__)


class PuzzleRules(ABC):
    """Capability interface a game type supplies to GameSession."""

    game: str = ""

    @abstractmethod
    def validate_selection(self, candidate: Any, found: Sequence[str]) -> GuessResult:
        """Judge a committed candidate against the puzzle's answers."""

    @abstractmethod
    def is_win(self, found: Sequence[str]) -> bool:
        """Whether the found set completes the puzzle."""

    def is_timeout_win(self, found: Sequence[str]) -> bool:
        """Whether running out of time still counts as a win."""
        return False


class GameSession(BaseModel):
    """
    Status, timer and found set for one play-through of a puzzle.

    Attributes:
        rules: Game-specific answer checking and win condition
        status: playing, paused, won or over
        elapsed_seconds: Seconds consumed from the tick source while playing
        time_limit: Optional countdown length; reaching it ends the session
        found: Answers accepted so far, in display order
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    rules: PuzzleRules
    status: GameStatus = "playing"
    elapsed_seconds: int = 0
    time_limit: Optional[int] = Field(default=None, ge=1)
    found: List[str] = Field(default_factory=list)

    @property
    def is_playing(self) -> bool:
        return self.status == "playing"

    @property
    def is_finished(self) -> bool:
        return self.status in TERMINAL_STATUSES

    @property
    def remaining_seconds(self) -> Optional[int]:
        if self.time_limit is None:
            return None
        return max(self.time_limit - self.elapsed_seconds, 0)

    def tick(self) -> bool:
        """
        Consume one second from the tick source.

        Ticks are ignored unless the session is playing. Returns True if
        the tick was applied.
        """
        if not self.is_playing:
            return False

        self.elapsed_seconds += 1
        if self.time_limit is not None and self.elapsed_seconds >= self.time_limit:
            self._set_status("over")
            if self.rules.is_timeout_win(self.found):
                self._set_status("won")
        return True

    def toggle_pause(self) -> GameStatus:
        """Switch between playing and paused; finished sessions stay as they are."""
        if self.status == "playing":
            self._set_status("paused")
        elif self.status == "paused":
            self._set_status("playing")
        return self.status

    def commit(self, candidate: Any) -> GuessResult:
        """
        Validate a candidate answer and apply it.

        Anything committed while not playing is ignored.
        """
        if not self.is_playing:
            return GuessResult(outcome="ignored")

        result = self.rules.validate_selection(candidate, self.found)
        if result.accepted:
            self._record(result)
            self.check_win()
        return result

    def check_win(self, found: Optional[Sequence[str]] = None) -> bool:
        """Move to won if the rules say the puzzle is complete."""
        if not self.is_playing:
            return False
        if self.rules.is_win(self.found if found is None else found):
            self._set_status("won")
            return True
        return False

    def reset(self) -> None:
        """Start the same puzzle over."""
        self.status = "playing"
        self.elapsed_seconds = 0
        self.found = []
        self._reset_input()

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(**self._snapshot_fields())

    def _record(self, result: GuessResult) -> None:
        self.found.append(result.word)

    def _reset_input(self) -> None:
        """Clear game-specific input state."""

    def _snapshot_fields(self) -> Dict[str, Any]:
        return {
            "game": self.rules.game,
            "status": self.status,
            "elapsed_seconds": self.elapsed_seconds,
            "remaining_seconds": self.remaining_seconds,
            "found": list(self.found),
        }

    def _set_status(self, status: GameStatus) -> None:
        logger.debug("%s session: %s -> %s", self.rules.game, self.status, status)
        self.status = status
