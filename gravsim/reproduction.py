"""
This module formats the command line that reproduces a resolved run.

Random defaults make two invocations of the same command differ, so after resolution the
front end logs a command in which every body's mass, position and velocity is spelled out
as explicit directives. Floats are written with repr, which round-trips exactly, so
resolving the emitted directives yields bodies identical to the logged ones.
"""

from __future__ import annotations
import logging
import shlex
from typing import List, Sequence

from .body import Body
from .directives import MassDirective, PositionDirective, VelocityDirective

logger = logging.getLogger(__name__)

PROG = "gravsim"


def body_directives(bodies: Sequence[Body]) -> List[str]:
    parts: List[str] = []
    for i, b in enumerate(bodies, start=1):
        sel = str(i)
        parts.append(str(MassDirective(sel, b.mass)))
        parts.append(str(PositionDirective(sel, values=tuple(b.position))))
        parts.append(str(VelocityDirective(sel, values=tuple(b.velocity))))
    return parts


def format_reproduction_command(
    bodies: Sequence[Body],
    frame_count: int,
    dt: float,
    cube: bool = False,
    initial_only: bool = False,
    seed_with_velocity: bool = False,
    prog: str = PROG,
) -> str:
    argv = [prog, "-n", str(len(bodies)), "-f", str(int(frame_count)), "-t", repr(float(dt))]
    for d in body_directives(bodies):
        flag, arg = d.split(" ", 1)
        argv.extend([flag, arg])
    if cube:
        argv.append("--cube")
    if initial_only:
        argv.append("--initial-bounds")
    if seed_with_velocity:
        argv.append("--seed-with-velocity")
    return " ".join(shlex.quote(a) for a in argv)


def log_reproduction_command(
    bodies: Sequence[Body],
    frame_count: int,
    dt: float,
    cube: bool = False,
    initial_only: bool = False,
    seed_with_velocity: bool = False,
    level: int = logging.INFO,
) -> str:
    cmd = format_reproduction_command(
        bodies, frame_count, dt, cube, initial_only, seed_with_velocity=seed_with_velocity
    )
    logger.log(level, "reproduce with: %s", cmd)
    return cmd
