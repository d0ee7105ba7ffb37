"""
This module implements the Newtonian gravitational force between point masses.

The gravitational_force function computes the force on one body toward another by first
taking the magnitude G*m1*m2/r^2 and then projecting it back onto the axes through the
azimuth (angle in the x-y plane) and the altitude (angle from the x-y plane toward z).
pairwise_forces applies the same projection to every pair at once with numpy and sums
the result per body, which is what the integrator uses. Both refuse coincident positions
with DegenerateConfigurationError instead of producing inf or nan.
"""

from __future__ import annotations
import math
from typing import Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .body import Body
from .constants import G_NEWTON
from .errors import DegenerateConfigurationError
from .geometry import separation_buffers, first_coincident_pair
from .vector import Vector3


def force_magnitude(
    b1: Body,
    b2: Body,
    G: float = G_NEWTON,
    indices: Optional[Tuple[int, int]] = None,
) -> float:
    a = b1.position.x - b2.position.x
    b = b1.position.y - b2.position.y
    c = b1.position.z - b2.position.z

    r2 = a * a + b * b + c * c
    if r2 == 0.0:
        first, second = indices if indices is not None else (None, None)
        raise DegenerateConfigurationError(first, second, tuple(b1.position))
    return (G * b1.mass * b2.mass) / r2


def gravitational_force(
    b1: Body,
    b2: Body,
    G: float = G_NEWTON,
    indices: Optional[Tuple[int, int]] = None,
) -> Vector3:
    dx = b2.position.x - b1.position.x
    dy = b2.position.y - b1.position.y
    dz = b2.position.z - b1.position.z

    azimuth = math.atan2(dy, dx)
    altitude = math.atan2(dz, math.hypot(dx, dy))

    F = force_magnitude(b1, b2, G, indices)

    xy = F * math.cos(altitude)
    return Vector3(xy * math.cos(azimuth), xy * math.sin(azimuth), F * math.sin(altitude))


def pairwise_forces(
    q: NDArray[np.floating],
    m: NDArray[np.floating],
    G: float = G_NEWTON,
) -> NDArray[np.floating]:

    q_arr = np.asarray(q, dtype=float)
    m_arr = np.asarray(m, dtype=float)

    if q_arr.shape[0] < 2:
        return np.zeros_like(q_arr, dtype=float)

    diff, r2 = separation_buffers(q_arr)

    pair = first_coincident_pair(r2)
    if pair is not None:
        i, j = pair
        raise DegenerateConfigurationError(i + 1, j + 1, tuple(q_arr[i]))

    r2 = r2.copy()
    np.fill_diagonal(r2, np.inf)
    F = G * (m_arr[:, None] * m_arr[None, :]) / r2

    dx, dy, dz = diff[..., 0], diff[..., 1], diff[..., 2]
    azimuth = np.arctan2(dy, dx)
    altitude = np.arctan2(dz, np.hypot(dx, dy))

    xy = F * np.cos(altitude)
    F_pair = np.stack(
        (xy * np.cos(azimuth), xy * np.sin(azimuth), F * np.sin(altitude)),
        axis=-1,
    )
    return F_pair.sum(axis=1)
