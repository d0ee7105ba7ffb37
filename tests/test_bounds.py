import numpy as np
import pytest

from gravsim import BOUNDS_PADDING, Bounds, compute_bounds, record_frames


@pytest.fixture
def frames():
    return np.array([
        [[1.0, -2.0, 0.0], [3.0, 4.0, -1.0]],
        [[-5.0, 0.5, 2.0], [2.0, 1.0, 6.0]],
    ])


def test_tight_bounds_per_axis(frames):
    b = compute_bounds(frames)

    p = BOUNDS_PADDING
    assert b.xlim == pytest.approx((p * -5.0, p * 3.0))
    assert b.ylim == pytest.approx((p * -2.0, p * 4.0))
    assert b.zlim == pytest.approx((p * -1.0, p * 6.0))


def test_cube_bounds_are_equal_and_centred(frames):
    b = compute_bounds(frames, cube=True)

    m = BOUNDS_PADDING * 6.0
    assert b.xlim == b.ylim == b.zlim
    assert b.xlim == pytest.approx((-m, m))
    assert len(set(b.widths)) == 1


def test_initial_only_ignores_later_frames(frames):
    before = compute_bounds(frames, initial_only=True)
    changed = frames.copy()
    changed[1:] *= 1000.0
    after = compute_bounds(changed, initial_only=True)

    assert before == after
    assert before.xlim == pytest.approx((BOUNDS_PADDING * 1.0, BOUNDS_PADDING * 3.0))


def test_initial_only_cube(frames):
    b = compute_bounds(frames, cube=True, initial_only=True)

    m = BOUNDS_PADDING * 4.0
    for lim in b.as_tuple():
        assert lim == pytest.approx((-m, m))


def test_single_frame_input(frames):
    assert compute_bounds(frames[0]) == compute_bounds(frames, initial_only=True)


def test_frame_sequence_input(earth_moon):
    seq = record_frames(earth_moon, 5, 60.0)
    assert compute_bounds(seq, cube=True) == compute_bounds(seq.positions, cube=True)


def test_single_body_at_origin_is_zero_width():
    b = compute_bounds(np.zeros((3, 1, 3)), cube=True)
    assert b.widths == (0.0, 0.0, 0.0)

    b = compute_bounds(np.zeros((3, 1, 3)))
    assert b == Bounds((0.0, 0.0), (0.0, 0.0), (0.0, 0.0))


def test_custom_padding(frames):
    b = compute_bounds(frames, padding=1.0)
    assert b.xlim == (-5.0, 3.0)
