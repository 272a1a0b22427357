import pytest

from spacedefender.motion import move_spaceship, scroll_background


def test_zero_velocity_keeps_position():
    assert move_spaceship((360.0, 600.0), (0.0, 0.0), 50.0) == (360.0, 600.0)


def test_zero_time_keeps_position():
    assert move_spaceship((100.0, 200.0), (0.5, -0.5), 0.0) == (100.0, 200.0)


def test_move_and_back_round_trip():
    start = (300.0, 300.0)
    moved = move_spaceship(start, (0.5, -0.5), 40.0)
    back = move_spaceship(moved, (-0.5, 0.5), 40.0)
    assert back == pytest.approx(start)
    assert moved[0] > start[0]
    assert moved[1] < start[1]


@pytest.mark.parametrize(
    "velocity, expected",
    [
        ((-0.5, 0.0), (0.0, 300.0)),
        ((0.5, 0.0), (656.0, 300.0)),
        ((0.0, -0.5), (300.0, 0.0)),
        ((0.0, 0.5), (300.0, 656.0)),
    ],
)
def test_ship_is_clamped_to_field(velocity, expected):
    assert move_spaceship((300.0, 300.0), velocity, 10_000.0) == expected


def test_background_without_wrap_keeps_gap():
    top, bottom = scroll_background(100.0, -620.0, 30.0)
    assert top - bottom == pytest.approx(720.0)
    assert top > 100.0
    assert bottom > -620.0


def test_background_top_wraps_past_screen():
    assert scroll_background(721.0, -720.0, 0.0) == (0.0, -720.0)


def test_background_bottom_wraps_when_visible():
    assert scroll_background(0.0, 1.0, 0.0) == (0.0, -720.0)


def test_background_both_move_same_amount():
    top, bottom = scroll_background(0.0, -720.0, 25.0)
    assert top - 0.0 == pytest.approx(bottom + 720.0)