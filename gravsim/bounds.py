from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .constants import BOUNDS_PADDING

"""
This module derives display bounds from recorded positions. compute_bounds accepts a whole
FrameSequence (or any (K, N, 3) array) or a single (N, 3) frame. With initial_only only
frame 0 contributes, so later frames never move the viewport. With cube every axis becomes
the same zero-centred interval [-M, M], M being the largest absolute coordinate; otherwise
each axis keeps its own [min, max]. In both modes the values are multiplied by the padding
factor. Degenerate input simply yields zero-width intervals.
"""

Interval = Tuple[float, float]


@dataclass(frozen=True)
class Bounds:
	xlim: Interval
	ylim: Interval
	zlim: Interval

	def as_tuple(self) -> Tuple[Interval, Interval, Interval]:
		return self.xlim, self.ylim, self.zlim

	@property
	def widths(self) -> Tuple[float, float, float]:
		return tuple(hi - lo for lo, hi in self.as_tuple())


def _as_frame_stack(frames) -> np.ndarray:
	positions = getattr(frames, "positions", frames)
	arr = np.asarray(positions, dtype=np.float64)
	if arr.ndim == 2:
		arr = arr[None, :, :]
	if arr.ndim != 3 or arr.shape[-1] != 3:
		raise ValueError(f"expected frames of shape (K, N, 3) or (N, 3), got {arr.shape}")
	return arr


def compute_bounds(
	frames,
	cube: bool = False,
	initial_only: bool = False,
	padding: float = BOUNDS_PADDING,
) -> Bounds:
	data = _as_frame_stack(frames)
	if initial_only:
		data = data[:1]

	coords = data.reshape(-1, 3)
	if coords.shape[0] == 0:
		return Bounds((0.0, 0.0), (0.0, 0.0), (0.0, 0.0))

	if cube:
		m = float(padding * np.max(np.abs(coords)))
		return Bounds((-m, m), (-m, m), (-m, m))

	lo = padding * coords.min(axis=0)
	hi = padding * coords.max(axis=0)
	return Bounds(
		(float(lo[0]), float(hi[0])),
		(float(lo[1]), float(hi[1])),
		(float(lo[2]), float(hi[2])),
	)
