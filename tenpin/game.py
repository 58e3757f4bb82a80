"""A single player's bowling game."""

from __future__ import annotations

from .frames import FRAME_COUNT, Frame, RegularFrame, TenthFrame
from .scoring import total_score

MAX_NAME_LENGTH = 100
_DISPLAY_WIDTH = 80


class BowlingGame:
    """Ten frames of rolls bowled by one named player."""

    def __init__(self, player_name: str) -> None:
        if not player_name:
            raise ValueError("Player name cannot be empty")
        if len(player_name) > MAX_NAME_LENGTH:
            raise ValueError("Player name too long (max 100 characters)")
        self._player_name = player_name
        self._frames: list[Frame] = [RegularFrame(n) for n in range(1, FRAME_COUNT)]
        self._frames.append(TenthFrame())
        self._complete = False

    @property
    def player_name(self) -> str:
        return self._player_name

    def _current_frame(self) -> Frame | None:
        return next((frame for frame in self._frames if not frame.is_complete()), None)

    def roll(self, pins: int) -> None:
        """Record a roll in the first frame that is not yet complete."""
        if self._complete:
            raise RuntimeError("Game is already complete")
        frame = self._current_frame()
        if frame is None:
            raise RuntimeError("No available frame for roll")
        frame.add_roll(pins)
        self._complete = all(f.is_complete() for f in self._frames)

    def total_score(self) -> int:
        """Score so far, including the bonuses earned so far."""
        return total_score(self._frames)

    def is_complete(self) -> bool:
        return self._complete

    def scorecard(self) -> str:
        """The printable scorecard with the player's final score."""
        rule = "=" * _DISPLAY_WIDTH
        lines = [
            "",
            rule,
            f"BOWLING SCORECARD - Player: {self._player_name}",
            rule,
            f"FINAL SCORE: {self.total_score()}",
            rule,
        ]
        return "\n".join(lines) + "\n"