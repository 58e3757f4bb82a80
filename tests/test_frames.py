import pytest

from tenpin.frames import Frame, RegularFrame, TenthFrame


@pytest.mark.parametrize("number", [0, 11])
def test_frame_number_out_of_range(number):
    with pytest.raises(ValueError, match="between 1 and 10"):
        RegularFrame(number)


def test_regular_frame_rejects_tenth_position():
    with pytest.raises(ValueError):
        RegularFrame(10)


def test_frame_base_is_abstract():
    with pytest.raises(TypeError):
        Frame(1)


def test_regular_frame_number_and_rolls():
    frame = RegularFrame(5)
    frame.add_roll(3)
    frame.add_roll(4)
    assert frame.number == 5
    assert frame.rolls == (3, 4)
    assert frame.is_complete()
    assert frame.score() == sum(frame.rolls)


def test_strike_completes_regular_frame():
    frame = RegularFrame(1)
    frame.add_roll(10)
    assert frame.is_strike()
    assert not frame.is_spare()
    assert frame.is_complete()
    with pytest.raises(RuntimeError, match="already completed"):
        frame.add_roll(0)


def test_spare_detection():
    frame = RegularFrame(2)
    frame.add_roll(3)
    assert not frame.is_complete()
    frame.add_roll(7)
    assert frame.is_spare()
    assert not frame.is_strike()


def test_zero_then_ten_is_spare_not_strike():
    frame = RegularFrame(3)
    frame.add_roll(0)
    frame.add_roll(10)
    assert frame.is_spare()
    assert not frame.is_strike()


def test_regular_frame_rejects_overflowing_pair():
    frame = RegularFrame(4)
    frame.add_roll(6)
    with pytest.raises(ValueError, match="cannot exceed 10"):
        frame.add_roll(5)
    assert frame.rolls == (6,)


@pytest.mark.parametrize("pins", [-1, 11])
def test_invalid_pin_count(pins):
    with pytest.raises(ValueError, match="Invalid number of pins"):
        RegularFrame(1).add_roll(pins)


def test_tenth_frame_number():
    assert TenthFrame().number == 10


def test_tenth_frame_open_completes_after_two():
    frame = TenthFrame()
    frame.add_roll(3)
    frame.add_roll(4)
    assert frame.is_complete()
    with pytest.raises(RuntimeError, match="already complete"):
        frame.add_roll(1)


def test_tenth_frame_spare_grants_third_roll():
    frame = TenthFrame()
    frame.add_roll(3)
    frame.add_roll(7)
    assert not frame.is_complete()
    frame.add_roll(5)
    assert frame.is_complete()
    assert frame.score() == sum(frame.rolls)


def test_tenth_frame_three_strikes():
    frame = TenthFrame()
    for _ in range(3):
        frame.add_roll(10)
    assert frame.is_complete()
    assert frame.rolls == (10, 10, 10)


def test_tenth_frame_strike_then_any_pair():
    frame = TenthFrame()
    frame.add_roll(10)
    frame.add_roll(7)
    assert not frame.is_complete()
    frame.add_roll(6)
    assert frame.is_complete()


def test_tenth_frame_rejects_overflowing_pair():
    frame = TenthFrame()
    frame.add_roll(6)
    with pytest.raises(ValueError):
        frame.add_roll(5)