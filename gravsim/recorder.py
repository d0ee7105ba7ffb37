"""
This module drives the integrator for a fixed number of steps and records the positions.

FrameRecorder.record captures the initial positions as frame 0, then steps the system
frame_count times and stores a snapshot after every step, so the returned FrameSequence
always holds frame_count + 1 frames of N positions each. The recorder owns the body list
for the whole run and writes the final state back into it when done.

FrameSequence wraps the (K+1, N, 3) position array read-only and can export it as a long
pandas DataFrame (one row per frame and body) for downstream plotting.
"""

from __future__ import annotations
import logging
from typing import Iterator, List

import numpy as np
import pandas as pd

from .body import Body
from .constants import AXES, DEFAULT_DT, G_NEWTON
from .integrator import Integrator
from .simulation_state import SimulationState
from .simulation_validator import SimulationValidator

logger = logging.getLogger(__name__)


class FrameSequence:
    __slots__ = ("_frames",)

    def __init__(self, frames) -> None:
        arr = np.array(frames, dtype=np.float64)
        if arr.ndim != 3 or arr.shape[2] != 3:
            raise ValueError(f"frames must have shape (K, N, 3), got {arr.shape}")
        arr.flags.writeable = False
        self._frames = arr

    @property
    def positions(self) -> np.ndarray:
        return self._frames

    @property
    def n_bodies(self) -> int:
        return int(self._frames.shape[1])

    @property
    def initial(self) -> np.ndarray:
        return self._frames[0]

    @property
    def final(self) -> np.ndarray:
        return self._frames[-1]

    def __len__(self) -> int:
        return int(self._frames.shape[0])

    def __getitem__(self, idx):
        return self._frames[idx]

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self._frames)

    def to_dataframe(self) -> pd.DataFrame:
        k, n, _ = self._frames.shape
        df = pd.DataFrame(self._frames.reshape(k * n, 3), columns=list(AXES))
        df.insert(0, "body", np.tile(np.arange(1, n + 1), k))
        df.insert(0, "frame", np.repeat(np.arange(k), n))
        return df

    def __repr__(self) -> str:
        return f"FrameSequence(frames={len(self)}, bodies={self.n_bodies})"


class FrameRecorder:

    def __init__(self, *, G: float = G_NEWTON, seed_with_velocity: bool = False) -> None:
        self.G = float(G)
        self.seed_with_velocity = bool(seed_with_velocity)

    def record(self, bodies: List[Body], frame_count: int, dt: float = DEFAULT_DT) -> FrameSequence:
        SimulationValidator.check_run_parameters(len(bodies), frame_count, dt)
        SimulationValidator.check_bodies(bodies)

        state = SimulationState.from_bodies(bodies)
        integrator = Integrator(state, G=self.G, seed_with_velocity=self.seed_with_velocity)

        frames = np.empty((frame_count + 1, state.n_bodies, 3), dtype=np.float64)
        frames[0] = state.frame()
        logger.info("recording %d steps of %g s for %d bodies", frame_count, dt, state.n_bodies)
        for k in range(1, frame_count + 1):
            integrator.step(dt)
            frames[k] = state.pos

        state.write_back(bodies)
        logger.debug("recorded %d frames", frame_count + 1)
        return FrameSequence(frames)


def record_frames(
    bodies: List[Body],
    frame_count: int,
    dt: float = DEFAULT_DT,
    *,
    G: float = G_NEWTON,
    seed_with_velocity: bool = False,
) -> FrameSequence:
    return FrameRecorder(G=G, seed_with_velocity=seed_with_velocity).record(bodies, frame_count, dt)
