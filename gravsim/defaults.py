"""
This module draws random values for body attributes that no directive has set.

The DefaultGenerator class samples masses as an integer multiplier times a fixed scale
(1..100 x 1e22 kg), and position and velocity components as a standard normal draw times
an integer multiplier and a scale (up to ~5e7 m and ~500 m/s per axis). The
GeneratorConfig dataclass holds those ranges. All draws come from an injected
numpy.random.Generator, so a seeded generator makes default filling reproducible while
the production default is a freshly seeded one.
"""

from __future__ import annotations

import numpy as np
from dataclasses import dataclass
from typing import Optional, Tuple

from .constants import (
	MASS_MULTIPLIER_RANGE,
	MASS_SCALE,
	POSITION_MULTIPLIER_RANGE,
	POSITION_SCALE,
	VELOCITY_MULTIPLIER_RANGE,
	VELOCITY_SCALE,
)


@dataclass
class GeneratorConfig:
	mass_multiplier_range: Tuple[int, int] = MASS_MULTIPLIER_RANGE
	mass_scale: float = MASS_SCALE
	position_multiplier_range: Tuple[int, int] = POSITION_MULTIPLIER_RANGE
	position_scale: float = POSITION_SCALE
	velocity_multiplier_range: Tuple[int, int] = VELOCITY_MULTIPLIER_RANGE
	velocity_scale: float = VELOCITY_SCALE


class DefaultGenerator:

	def __init__(self, rng: Optional[np.random.Generator] = None, config: GeneratorConfig | None = None):
		self.rng: np.random.Generator = rng if rng is not None else np.random.default_rng()
		self.config: GeneratorConfig = config or GeneratorConfig()

	def _multiplier(self, bounds: Tuple[int, int]) -> int:
		lo, hi = bounds
		return int(self.rng.integers(lo, hi + 1))

	def sample_mass(self) -> float:
		return float(self._multiplier(self.config.mass_multiplier_range) * self.config.mass_scale)

	def sample_position_component(self) -> float:
		scale = self._multiplier(self.config.position_multiplier_range) * self.config.position_scale
		return float(self.rng.standard_normal() * scale)

	def sample_velocity_component(self) -> float:
		scale = self._multiplier(self.config.velocity_multiplier_range) * self.config.velocity_scale
		return float(self.rng.standard_normal() * scale)
