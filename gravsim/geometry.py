from __future__ import annotations
import numpy as np
from typing import Optional, Tuple

"""
This module provides the pairwise geometry shared by the force model and the diagnostics.
The separation_buffers function computes the offset from every body to every other body and
the squared distances in a single pass, using Einstein summation notation. The offsets are
oriented from row body i toward column body j, which is the direction the force on body i
points. The first_coincident_pair helper finds the first pair of distinct bodies with zero
separation so callers can reject degenerate configurations before dividing by r^2.
"""


__all__ = ["separation_buffers", "first_coincident_pair"]

def separation_buffers(pos: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    pos = np.asarray(pos, dtype=float)

    diff = pos[None, :, :] - pos[:, None, :]
    r2 = np.einsum("ijk,ijk->ij", diff, diff, optimize=True)
    return diff, r2


def first_coincident_pair(r2: np.ndarray) -> Optional[Tuple[int, int]]:
    n = r2.shape[0]
    iu = np.triu_indices(n, 1)
    hits = np.flatnonzero(r2[iu] == 0.0)
    if hits.size == 0:
        return None
    k = int(hits[0])
    return int(iu[0][k]), int(iu[1][k])
