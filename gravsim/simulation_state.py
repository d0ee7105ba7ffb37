"""
This module manages the array representation of a body list during a run.

The SimulationState class holds numpy arrays for masses (N,), positions (N, 3) and
velocities (N, 3), is built from a list of Body objects, and writes the evolved state back
into those same objects when the run finishes. Keeping the engine on contiguous arrays lets
the integrator take an explicit read-only snapshot of the positions for the force pass,
while the Body objects stay the user-facing representation.
"""

from __future__ import annotations
import numpy as np
from typing import Sequence, TYPE_CHECKING

from .vector import Vector3

if TYPE_CHECKING:
	from .body import Body


class SimulationState:

	def __init__(self, masses, positions, velocities):
		self._mass: np.ndarray = np.asarray(masses, dtype=np.float64).ravel().copy()
		self._pos: np.ndarray = np.asarray(positions, dtype=np.float64).reshape(-1, 3).copy()
		self._vel: np.ndarray = np.asarray(velocities, dtype=np.float64).reshape(-1, 3).copy()
		if not (self._mass.shape[0] == self._pos.shape[0] == self._vel.shape[0]):
			raise ValueError(
				f"shape mismatch: {self._mass.shape[0]} masses, "
				f"{self._pos.shape[0]} positions, {self._vel.shape[0]} velocities"
			)

	@classmethod
	def from_bodies(cls, bodies: Sequence["Body"]) -> "SimulationState":
		mass_list = []
		pos_list = []
		vel_list = []
		for b in bodies:
			mass_list.append(b.mass)
			pos_list.append(tuple(b.position))
			vel_list.append(tuple(b.velocity))
		return cls(
			np.array(mass_list, dtype=np.float64),
			np.array(pos_list, dtype=np.float64).reshape(-1, 3),
			np.array(vel_list, dtype=np.float64).reshape(-1, 3),
		)

	@property
	def n_bodies(self) -> int:
		return int(self._mass.shape[0])

	@property
	def mass(self) -> np.ndarray:
		return self._mass

	@property
	def pos(self) -> np.ndarray:
		return self._pos

	@property
	def vel(self) -> np.ndarray:
		return self._vel

	def frame(self) -> np.ndarray:
		return self._pos.copy()

	def write_back(self, bodies: Sequence["Body"]) -> None:
		if len(bodies) != self.n_bodies:
			raise ValueError(f"expected {self.n_bodies} bodies, got {len(bodies)}")
		for b, p, v in zip(bodies, self._pos, self._vel):
			b.position = Vector3(*p)
			b.velocity = Vector3(*v)
