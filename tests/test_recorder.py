import numpy as np
import pandas as pd
import pytest

from gravsim import (
    Body,
    FrameRecorder,
    FrameSequence,
    InvalidRunParameterError,
    record_frames,
)


@pytest.mark.parametrize("k", [0, 1, 7, 25])
def test_frame_count_and_shape(three_bodies, k):
    frames = record_frames(three_bodies, k, 60.0)

    assert len(frames) == k + 1
    assert frames.positions.shape == (k + 1, 3, 3)
    assert all(f.shape == (3, 3) for f in frames)
    assert frames.n_bodies == 3


def test_frame_zero_is_initial_configuration(three_bodies):
    initial = np.array([tuple(b.position) for b in three_bodies])

    frames = record_frames(three_bodies, 4, 60.0)

    np.testing.assert_array_equal(frames.initial, initial)
    np.testing.assert_array_equal(frames[0], initial)


def test_final_state_is_written_back(three_bodies):
    frames = FrameRecorder().record(three_bodies, 12, 90.0)

    final = np.array([tuple(b.position) for b in three_bodies])
    np.testing.assert_array_equal(frames.final, final)


def test_zero_steps_leaves_bodies_untouched(earth_moon):
    before = [b.copy() for b in earth_moon]
    frames = record_frames(earth_moon, 0, 60.0)

    assert len(frames) == 1
    assert earth_moon == before


def test_frames_are_read_only(earth_moon):
    frames = record_frames(earth_moon, 2, 60.0)
    with pytest.raises(ValueError):
        frames.positions[0, 0, 0] = 1.0


def test_dataframe_export(earth_moon):
    frames = record_frames(earth_moon, 3, 60.0)

    df = frames.to_dataframe()

    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == ["frame", "body", "x", "y", "z"]
    assert len(df) == 4 * 2
    row = df[(df["frame"] == 3) & (df["body"] == 2)].iloc[0]
    np.testing.assert_array_equal(row[["x", "y", "z"]].to_numpy(dtype=float), frames[3][1])


@pytest.mark.parametrize("k, dt", [(-1, 60.0), (3, 0.0), (3, float("nan")), (3, float("inf"))])
def test_invalid_run_parameters(earth_moon, k, dt):
    with pytest.raises(InvalidRunParameterError):
        record_frames(earth_moon, k, dt)


def test_negative_time_step_runs_backwards(earth_moon):
    forward = record_frames([b.copy() for b in earth_moon], 1, 60.0)
    backward = record_frames([b.copy() for b in earth_moon], 1, -60.0)

    assert forward[1][0][2] == pytest.approx(3000.0, rel=1e-6)
    assert backward[1][0][2] == pytest.approx(-3000.0, rel=1e-6)


def test_sequence_rejects_bad_shape():
    with pytest.raises(ValueError):
        FrameSequence(np.zeros((2, 3)))


def test_empty_body_list_is_rejected():
    with pytest.raises(InvalidRunParameterError):
        FrameRecorder().record([], 3, 60.0)


def test_masses_must_be_positive():
    with pytest.raises(InvalidRunParameterError):
        record_frames([Body(0.0, (0, 0, 0)), Body(1.0, (1, 0, 0))], 1, 1.0)
