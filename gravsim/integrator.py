from __future__ import annotations
import logging
from typing import List

import numpy as np

from .body import Body
from .constants import G_NEWTON
from .forces import pairwise_forces
from .simulation_state import SimulationState

"""
This module implements the fixed-step integrator that advances every body by one time step.
A step has two passes. The kick pass copies the positions into a read-only snapshot,
computes every pairwise force from that snapshot only and updates all velocities
(v += F*dt/m). The drift pass then moves every position by dt times its new velocity. No
position is written before all forces of the step have been read, so the result does not
depend on body order. The seed_with_velocity toggle switches to the variant in which
the force accumulator starts from the body's velocity instead of zero. Cost is O(N^2) per
step with no approximation.
"""

logger = logging.getLogger(__name__)


class Integrator:

	def __init__(self, state: SimulationState, *, G: float = G_NEWTON, seed_with_velocity: bool = False) -> None:
		self.state = state
		self.G = float(G)
		self.seed_with_velocity = bool(seed_with_velocity)
		self.steps_taken = 0

	def step(self, dt: float) -> None:
		if self.state.n_bodies == 0:
			return
		dt = float(dt)
		snapshot = self.state.pos.copy()
		snapshot.flags.writeable = False

		self.kick(snapshot, dt)
		self.drift(dt)
		self.steps_taken += 1

	def kick(self, snapshot: np.ndarray, dt: float) -> None:
		state = self.state
		acc = pairwise_forces(snapshot, state.mass, self.G)
		if self.seed_with_velocity:
			acc = acc + state.vel
		state.vel[...] += acc * dt / state.mass[:, None]

	def drift(self, dt: float) -> None:
		state = self.state
		state.pos[...] += dt * state.vel

	def run(self, n_steps: int, dt: float) -> None:
		for _ in range(int(n_steps)):
			self.step(dt)
		logger.debug("advanced %d bodies by %d steps of %g s", self.state.n_bodies, n_steps, dt)


def step(bodies: List[Body], dt: float, *, G: float = G_NEWTON, seed_with_velocity: bool = False) -> None:
	state = SimulationState.from_bodies(bodies)
	Integrator(state, G=G, seed_with_velocity=seed_with_velocity).step(dt)
	state.write_back(bodies)
