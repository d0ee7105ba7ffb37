import math

import numpy as np
import pytest

from gravsim import (
    Body,
    DegenerateConfigurationError,
    G_NEWTON,
    force_magnitude,
    gravitational_force,
    pairwise_forces,
)


def test_force_along_x_axis():
    b1 = Body(1e24, (0.0, 0.0, 0.0))
    b2 = Body(1e20, (1e6, 0.0, 0.0))

    f = gravitational_force(b1, b2)

    expected = G_NEWTON * 1e24 * 1e20 / 1e12
    assert f.x == pytest.approx(expected, rel=1e-12)
    assert f.y == 0.0
    assert f.z == 0.0
    assert force_magnitude(b1, b2) == pytest.approx(expected, rel=1e-12)


def test_force_points_toward_other_body_in_z():
    b1 = Body(1e24, (0.0, 0.0, 0.0))
    b2 = Body(1e24, (0.0, 0.0, -2e6))

    f = gravitational_force(b1, b2)

    assert f.z < 0.0
    assert f.z == pytest.approx(-force_magnitude(b1, b2), rel=1e-12)
    assert abs(f.x) < 1e-9 * abs(f.z)
    assert abs(f.y) < 1e-9 * abs(f.z)


def test_third_law():
    b1 = Body(3e22, (1.2e7, -4.0e6, 7.5e6))
    b2 = Body(8e23, (-2.5e7, 3.3e6, -1.1e7))

    f12 = gravitational_force(b1, b2)
    f21 = gravitational_force(b2, b1)

    scale = f12.norm()
    for a, b in zip(f12, f21):
        assert a == pytest.approx(-b, abs=1e-12 * scale)


def test_magnitude_matches_projection():
    b1 = Body(3e22, (1.0e6, 2.0e6, 3.0e6))
    b2 = Body(4e22, (-2.0e6, 5.0e6, -1.0e6))

    assert gravitational_force(b1, b2).norm() == pytest.approx(force_magnitude(b1, b2), rel=1e-12)


@pytest.mark.parametrize("r", [1e5, 1e6, 3.3e7, 4e8])
def test_inverse_square(r):
    near = force_magnitude(Body(1e24, (0, 0, 0)), Body(1e22, (r, 0, 0)))
    far = force_magnitude(Body(1e24, (0, 0, 0)), Body(1e22, (2 * r, 0, 0)))

    assert far < near
    assert near / far == pytest.approx(4.0, rel=1e-12)


def test_identical_positions_are_rejected():
    b1 = Body(1.0, (5.0, 5.0, 5.0))
    b2 = Body(2.0, (5.0, 5.0, 5.0))

    with pytest.raises(DegenerateConfigurationError):
        gravitational_force(b1, b2)
    with pytest.raises(DegenerateConfigurationError):
        force_magnitude(b1, b2)


def test_pairwise_forces_match_scalar_sum(three_bodies):
    q = np.array([tuple(b.position) for b in three_bodies])
    m = np.array([b.mass for b in three_bodies])

    F = pairwise_forces(q, m)

    for i, bi in enumerate(three_bodies):
        expected = np.zeros(3)
        for j, bj in enumerate(three_bodies):
            if i != j:
                expected += gravitational_force(bi, bj).as_array()
        np.testing.assert_allclose(F[i], expected, rtol=1e-10, atol=0.0)


def test_pairwise_forces_sum_to_zero(three_bodies):
    q = np.array([tuple(b.position) for b in three_bodies])
    m = np.array([b.mass for b in three_bodies])

    F = pairwise_forces(q, m)

    scale = np.abs(F).max()
    np.testing.assert_allclose(F.sum(axis=0), 0.0, atol=1e-10 * scale)


def test_pairwise_forces_single_body_is_zero():
    F = pairwise_forces(np.array([[1.0, 2.0, 3.0]]), np.array([5.0]))
    np.testing.assert_array_equal(F, np.zeros((1, 3)))


def test_pairwise_forces_report_coincident_pair():
    q = np.array([[0.0, 0.0, 0.0], [1.0, 1.0, 1.0], [1.0, 1.0, 1.0]])
    m = np.ones(3)

    with pytest.raises(DegenerateConfigurationError) as exc:
        pairwise_forces(q, m)
    assert (exc.value.first, exc.value.second) == (2, 3)
    assert exc.value.position == (1.0, 1.0, 1.0)


def test_scalar_force_names_only_the_indices_it_was_given():
    b1 = Body(1.0, (4.0, 5.0, 6.0))
    b2 = Body(2.0, (4.0, 5.0, 6.0))

    with pytest.raises(DegenerateConfigurationError) as exc:
        force_magnitude(b1, b2)
    assert exc.value.first is None and exc.value.second is None
    assert str(exc.value).startswith("two bodies share the same position")

    with pytest.raises(DegenerateConfigurationError) as exc:
        gravitational_force(b1, b2, indices=(3, 7))
    assert (exc.value.first, exc.value.second) == (3, 7)
    assert "bodies 3 and 7" in str(exc.value)


def test_custom_gravitational_constant():
    b1 = Body(2.0, (0.0, 0.0, 0.0))
    b2 = Body(3.0, (0.0, 2.0, 0.0))

    f = gravitational_force(b1, b2, G=1.0)

    assert f.y == pytest.approx(1.5, rel=1e-12)
    assert math.isclose(f.x, 0.0, abs_tol=1e-15)
