"""
This module ties the pieces into the boundary operation of the package.

run_simulation takes the body count, frame count, time step, the ordered attribute
directives and the display flags, resolves the bodies (AttributeResolver), records the
frames (FrameRecorder) and computes the display bounds (compute_bounds). It returns a
SimulationResult holding the frames and bounds for a renderer and a copy of the resolved
initial bodies for the reproduction command. Either every stage succeeds or the first
error propagates and nothing is returned. A time step or display flag left as None is
taken from the SimConfig, so a config alone fully describes a run.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

import numpy as np

from .body import Body
from .bounds import Bounds, compute_bounds
from .directives import Directive
from .recorder import FrameRecorder, FrameSequence
from .resolver import AttributeResolver
from .sim_config import SimConfig
from .simulation_validator import SimulationValidator

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    frames: FrameSequence
    bounds: Bounds
    bodies: List[Body]


def run_simulation(
    body_count: int,
    frame_count: int,
    directives: Iterable[Directive] = (),
    dt: Optional[float] = None,
    cube: Optional[bool] = None,
    initial_only: Optional[bool] = None,
    rng: Optional[np.random.Generator] = None,
    config: Optional[SimConfig] = None,
) -> SimulationResult:
    cfg = config.copy() if config is not None else SimConfig()
    if rng is None and cfg.seed is not None:
        rng = np.random.default_rng(cfg.seed)
    if dt is None:
        dt = cfg.dt
    if cube is None:
        cube = cfg.cube
    if initial_only is None:
        initial_only = cfg.initial_only

    SimulationValidator.check_run_parameters(body_count, frame_count, dt)

    bodies = AttributeResolver(body_count, rng=rng).resolve(directives)
    initial = [b.copy() for b in bodies]
    logger.debug("resolved %d bodies", len(bodies))

    recorder = FrameRecorder(G=cfg.G, seed_with_velocity=cfg.seed_with_velocity)
    frames = recorder.record(bodies, frame_count, dt)
    bounds = compute_bounds(frames, cube=cube, initial_only=initial_only, padding=cfg.bounds_padding)
    return SimulationResult(frames=frames, bounds=bounds, bodies=initial)


def run_from_config(
    body_count: int,
    directives: Iterable[Directive],
    config: SimConfig,
    rng: Optional[np.random.Generator] = None,
) -> SimulationResult:
    return run_simulation(
        body_count,
        config.frame_count,
        directives,
        dt=config.dt,
        cube=config.cube,
        initial_only=config.initial_only,
        rng=rng,
        config=config,
    )
