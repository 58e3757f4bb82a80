"""Total score of a game, with strike and spare bonuses."""

from __future__ import annotations

from collections.abc import Sequence

from .frames import FRAME_COUNT, MAX_PINS, Frame


def _strike_bonus(frames: Sequence[Frame], index: int) -> int:
    if index + 1 >= len(frames):
        return 0
    following = frames[index + 1]
    rolls = following.rolls
    if following.number == FRAME_COUNT:
        return rolls[0] + rolls[1] if len(rolls) >= 2 else 0
    if following.is_strike():
        bonus = MAX_PINS
        if index + 2 < len(frames):
            after = frames[index + 2].rolls
            if after:
                bonus += after[0]
        return bonus
    return sum(rolls[:2])


def _spare_bonus(frames: Sequence[Frame], index: int) -> int:
    if index + 1 >= len(frames):
        return 0
    rolls = frames[index + 1].rolls
    return rolls[0] if rolls else 0


def total_score(frames: Sequence[Frame]) -> int:
    """Score ten frames, adding bonuses to frames 1 to 9."""
    if len(frames) != FRAME_COUNT:
        raise ValueError("Invalid number of frames")
    if any(frame is None for frame in frames):
        raise ValueError("Null frame detected")

    total = 0
    for index, frame in enumerate(frames):
        frame_score = frame.score()
        if index < FRAME_COUNT - 1:
            if frame.is_strike():
                frame_score += _strike_bonus(frames, index)
            elif frame.is_spare():
                frame_score += _spare_bonus(frames, index)
        total += frame_score
    return total