from __future__ import annotations
import numpy as np
from typing import Sequence, Tuple, Union

from .body import Body
from .constants import G_NEWTON
from .geometry import separation_buffers
from .simulation_state import SimulationState

"""
This module computes conserved quantities of a body list or a running SimulationState. The
Diagnostics class reports the centre of mass, total linear momentum, kinetic energy and
Newtonian potential energy. They are used to check the integrator (the centre of mass of an
isolated system with zero net momentum must not move) and are logged by the front end at
the start and end of a run.
"""


class Diagnostics:

	def __init__(self, system: Union[SimulationState, Sequence[Body]], G: float = G_NEWTON):
		if isinstance(system, SimulationState):
			self.state = system
		else:
			self.state = SimulationState.from_bodies(system)
		self.G = float(G)

	def total_mass(self) -> float:
		return float(np.sum(self.state.mass))

	def center_of_mass(self) -> Tuple[np.ndarray, np.ndarray]:
		m = self.state.mass
		M = float(np.sum(m))
		if M == 0.0:
			return np.zeros(3), np.zeros(3)
		com_pos = np.sum(m[:, None] * self.state.pos, axis=0) / M
		com_vel = np.sum(m[:, None] * self.state.vel, axis=0) / M
		return com_pos, com_vel

	def momentum(self) -> np.ndarray:
		return np.sum(self.state.mass[:, None] * self.state.vel, axis=0)

	def kinetic_energy(self) -> float:
		m = self.state.mass
		v = self.state.vel
		return 0.5 * float(np.sum(m * np.sum(v * v, axis=1)))

	def potential_energy(self) -> float:
		n = self.state.n_bodies
		if n < 2:
			return 0.0
		_, r2 = separation_buffers(self.state.pos)
		iu = np.triu_indices(n, 1)
		m = self.state.mass
		mprod = (m[:, None] * m[None, :])[iu]
		return -self.G * float(np.sum(mprod / np.sqrt(r2[iu])))

	def energy(self) -> float:
		return self.kinetic_energy() + self.potential_energy()
