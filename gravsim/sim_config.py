from __future__ import annotations
from dataclasses import dataclass, replace

from .constants import G_NEWTON, DEFAULT_DT, BOUNDS_PADDING

"""
This configuration module collects the scalar run parameters through the SimConfig
dataclass. Key parameters include the gravitational constant, the fixed time step, the
frame count, the display flags (cube, initial_only) and the bounds padding, the seed used
for random attribute defaults, and the seed_with_velocity toggle that selects the
velocity-seeded force accumulator. The class provides a copy method for configuration
inheritance and validates the obvious numeric ranges on construction.
"""


@dataclass
class SimConfig:
	G: float = G_NEWTON
	dt: float = DEFAULT_DT
	frame_count: int = 100
	cube: bool = False
	initial_only: bool = False
	bounds_padding: float = BOUNDS_PADDING
	seed: int | None = None
	seed_with_velocity: bool = False

	def __post_init__(self) -> None:
		if self.bounds_padding <= 0.0:
			raise ValueError(f"bounds_padding must be positive, got {self.bounds_padding}")
		if self.G <= 0.0:
			raise ValueError(f"G must be positive, got {self.G}")

	def copy(self, **changes) -> "SimConfig":
		return replace(self, **changes)
