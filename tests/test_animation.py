import pytest

from brickquest.animation import Animation, Frame


def _walk():
    animation = Animation(0.45)
    animation.add_frame(Frame("a", 0.15))
    animation.add_frame(Frame("b", 0.30))
    animation.add_frame(Frame("c", 0.45))
    return animation


def test_frames_follow_the_clock():
    animation = _walk()
    assert animation.update(0.1) == "a"
    assert animation.update(0.1) == "b"
    assert animation.update(0.2) == "c"


def test_clock_wraps_around():
    animation = _walk()
    animation.update(0.4)
    assert animation.update(0.1) == "a"
    assert 0.0 <= animation.current_time < animation.length


def test_reaching_length_restarts():
    animation = _walk()
    assert animation.update(0.45) == "a"


def test_large_step_wraps_several_times():
    animation = _walk()
    animation.update(10.0)
    assert 0.0 <= animation.current_time < animation.length


def test_empty_animation_returns_none():
    assert Animation(1.0).update(0.5) is None


def test_time_beyond_last_frame_returns_none():
    animation = Animation(1.0)
    animation.add_frame(Frame("x", 0.5))
    assert animation.update(0.7) is None


@pytest.mark.parametrize("length", [0.0, -1.0])
def test_non_positive_length_rejected(length):
    with pytest.raises(ValueError):
        Animation(length)