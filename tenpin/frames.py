"""Frames of a ten-pin bowling game."""

from __future__ import annotations

from abc import ABC, abstractmethod

MAX_PINS = 10
FRAME_COUNT = 10


def _validate_pins(pins: int) -> None:
    if isinstance(pins, bool) or not isinstance(pins, int) or not 0 <= pins <= MAX_PINS:
        raise ValueError(f"Invalid number of pins: {pins}")


class Frame(ABC):
    """A single frame holding the rolls bowled in it."""

    def __init__(self, number: int) -> None:
        if not 1 <= number <= FRAME_COUNT:
            raise ValueError("Frame number must be between 1 and 10")
        self._number = number
        self._rolls: list[int] = []

    @property
    def number(self) -> int:
        """The frame's position in the game, 1 to 10."""
        return self._number

    @property
    def rolls(self) -> tuple[int, ...]:
        """The pins knocked down by each roll so far."""
        return tuple(self._rolls)

    def add_roll(self, pins: int) -> None:
        """Record a roll of ``pins`` knocked down."""
        _validate_pins(pins)
        self._rolls.append(pins)

    def is_strike(self) -> bool:
        return bool(self._rolls) and self._rolls[0] == MAX_PINS

    def is_spare(self) -> bool:
        if len(self._rolls) < 2:
            return False
        return self._rolls[0] + self._rolls[1] == MAX_PINS and not self.is_strike()

    @abstractmethod
    def is_complete(self) -> bool:
        """Whether no further roll belongs to this frame."""

    def score(self) -> int:
        """Sum of the pins in this frame, without bonuses."""
        return sum(self._rolls)


class RegularFrame(Frame):
    """One of frames 1 to 9: two rolls, or a single strike."""

    def __init__(self, number: int) -> None:
        super().__init__(number)
        if number >= FRAME_COUNT:
            raise ValueError("Frame number should be between 1 to 9")

    def is_complete(self) -> bool:
        return len(self._rolls) == 2 or self.is_strike()

    def add_roll(self, pins: int) -> None:
        if self.is_complete():
            raise RuntimeError(f"Current Frame {self._number} is already completed")
        _validate_pins(pins)
        if len(self._rolls) == 1 and self._rolls[0] + pins > MAX_PINS:
            raise ValueError("Two rolls cannot exceed 10 pins")
        super().add_roll(pins)


class TenthFrame(Frame):
    """The last frame, which grants a third roll after a strike or spare."""

    def __init__(self) -> None:
        super().__init__(FRAME_COUNT)

    def is_complete(self) -> bool:
        count = len(self._rolls)
        if count < 2:
            return False
        if count == 2:
            return not self.is_strike() and not self.is_spare()
        return count == 3

    def add_roll(self, pins: int) -> None:
        if self.is_complete():
            raise RuntimeError("10th frame is already complete")
        _validate_pins(pins)
        if (
            len(self._rolls) == 1
            and self._rolls[0] != MAX_PINS
            and self._rolls[0] + pins > MAX_PINS
        ):
            raise ValueError("Invalid roll as it's greater than 10")
        super().add_roll(pins)