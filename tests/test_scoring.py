import pytest

from tenpin.frames import RegularFrame, TenthFrame
from tenpin.scoring import total_score


def _frames_from(rolls):
    frames = [RegularFrame(n) for n in range(1, 10)] + [TenthFrame()]
    for pins in rolls:
        frame = next(f for f in frames if not f.is_complete())
        frame.add_roll(pins)
    return frames


def test_wrong_frame_count():
    with pytest.raises(ValueError, match="Invalid number of frames"):
        total_score(_frames_from([])[:9])


def test_open_game_scores_sum_of_rolls():
    rolls = [1, 2, 3, 4, 0, 9, 2, 2, 5, 4, 1, 1, 0, 0, 8, 1, 6, 3, 2, 7]
    assert total_score(_frames_from(rolls)) == sum(rolls)


def test_spare_adds_next_roll():
    rolls = [5, 5, 3, 0]
    assert total_score(_frames_from(rolls)) == sum(rolls) + 3


def test_strike_adds_next_two_rolls():
    rolls = [10, 3, 4]
    assert total_score(_frames_from(rolls)) == sum(rolls) + 3 + 4


def test_pending_strike_has_no_bonus():
    rolls = [10]
    assert total_score(_frames_from(rolls)) == sum(rolls)


def test_strike_followed_by_single_roll():
    rolls = [10, 3]
    assert total_score(_frames_from(rolls)) == sum(rolls) + 3


def test_double_strike_bonus():
    rolls = [10, 10, 4, 2]
    assert total_score(_frames_from(rolls)) == sum(rolls) + (10 + 4) + (4 + 2)


def test_ninth_frame_strike_waits_for_two_tenth_rolls():
    rolls = [0] * 16 + [10, 5]
    assert total_score(_frames_from(rolls)) == sum(rolls)
    rolls.append(3)
    assert total_score(_frames_from(rolls)) == sum(rolls) + 5 + 3


def test_tenth_frame_gets_no_bonus():
    rolls = [0] * 18 + [10, 10, 10]
    assert total_score(_frames_from(rolls)) == sum(rolls)


def test_perfect_game():
    assert total_score(_frames_from([10] * 12)) == 300


def test_sample_game():
    rolls = [1, 4, 4, 5, 6, 4, 5, 5, 10, 0, 1, 7, 3, 6, 4, 10, 2, 8, 6]
    assert total_score(_frames_from(rolls)) == 133