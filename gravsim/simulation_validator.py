"""
This module provides validation utilities for run parameters and body lists.

The SimulationValidator class offers static methods that check the scalar run parameters
(body count, frame count, time step) and a resolved body list (positive finite masses,
finite vectors, pairwise distinct positions) before any frame is produced. Every failure
raises a GravSimError subclass describing the offending value, so a run is either fully
valid or abandoned before integration starts.
"""

from __future__ import annotations
import math
import numbers
from typing import Sequence

import numpy as np

from .body import Body
from .errors import DegenerateConfigurationError, InvalidRunParameterError
from .geometry import separation_buffers, first_coincident_pair


class SimulationValidator:

	@staticmethod
	def check_run_parameters(body_count: int, frame_count: int, dt: float) -> None:
		if isinstance(body_count, bool) or not isinstance(body_count, numbers.Integral) or body_count < 1:
			raise InvalidRunParameterError(f"body count must be a positive integer, got {body_count!r}")
		if isinstance(frame_count, bool) or not isinstance(frame_count, numbers.Integral) or frame_count < 0:
			raise InvalidRunParameterError(f"frame count must be a non-negative integer, got {frame_count!r}")
		if not isinstance(dt, numbers.Real) or not math.isfinite(dt) or dt == 0.0:
			raise InvalidRunParameterError(f"time step must be finite and non-zero, got {dt!r}")

	@staticmethod
	def check_positions_distinct(positions) -> None:
		pos = np.asarray(positions, dtype=float).reshape(-1, 3)
		if pos.shape[0] < 2:
			return
		_, r2 = separation_buffers(pos)
		pair = first_coincident_pair(r2)
		if pair is not None:
			i, j = pair
			raise DegenerateConfigurationError(i + 1, j + 1, tuple(pos[i]))

	@staticmethod
	def check_bodies(bodies: Sequence[Body]) -> None:
		if len(bodies) == 0:
			raise InvalidRunParameterError("at least one body is required")

		for i, b in enumerate(bodies, start=1):
			if not (b.mass > 0.0 and math.isfinite(b.mass)):
				raise InvalidRunParameterError(f"body {i} mass must be positive and finite, got {b.mass}")
			for name in ("position", "velocity"):
				vec = getattr(b, name)
				if not all(math.isfinite(c) for c in vec):
					raise InvalidRunParameterError(f"body {i} {name} must be finite, got {tuple(vec)}")

		SimulationValidator.check_positions_distinct([tuple(b.position) for b in bodies])
