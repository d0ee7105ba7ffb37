from __future__ import annotations

import math
import os
from typing import Final

"""
This module defines the physical and numerical constants shared by the engine and the
attribute resolver. It includes G_NEWTON for the gravitational force, DEFAULT_DT for the
fixed time step (with environment variable override support), BOUNDS_PADDING for the
display bounds, and the magnitude ranges used when unset body attributes are filled with
random values. The ranges were tuned by eye for solar-system scale scenes rather than
derived, so callers may override them through GeneratorConfig.
"""


def _parse_dt(default: float = 60.0) -> float:
	env_val = os.getenv("GRAVSIM_DEFAULT_DT", "")
	if env_val.strip() != "":
		try:
			val = float(env_val)
		except ValueError:
			return default
		if math.isfinite(val) and val != 0.0:
			return val
	return default


G_NEWTON: Final[float] = 6.674e-11
DEFAULT_DT: Final[float] = _parse_dt()
BOUNDS_PADDING: Final[float] = 1.05

AXES: Final = ("x", "y", "z")

# mass = randint(1, 100) * 1e22 kg
MASS_MULTIPLIER_RANGE = (1, 100)
MASS_SCALE: float = 1.0e22
# position component = N(0, 1) * randint(1, 50) * 1e6 m
POSITION_MULTIPLIER_RANGE = (1, 50)
POSITION_SCALE: float = 1.0e6
# velocity component = N(0, 1) * randint(1, 500) m/s
VELOCITY_MULTIPLIER_RANGE = (1, 500)
VELOCITY_SCALE: float = 1.0
