"""
Command-line front end.

Parses the run parameters and the -m/-p/-v directives (keeping their command-line order
across flags), runs the simulation and logs the display bounds together with a command
that reproduces the run exactly. Rendering is left to other tools; --show-final prints the
last frame as a table.
"""

from __future__ import annotations
import argparse
import logging
from typing import Optional, Sequence

from .constants import DEFAULT_DT
from .diagnostics import Diagnostics
from .directives import parse_directive
from .errors import GravSimError
from .logging_config import setup_logging
from .reproduction import log_reproduction_command
from .sim_config import SimConfig
from .simulation import run_from_config

logger = logging.getLogger(__name__)


class _DirectiveAction(argparse.Action):
    def __call__(self, parser, namespace, values, option_string=None):
        items = list(getattr(namespace, self.dest, None) or [])
        items.append((option_string, values))
        setattr(namespace, self.dest, items)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gravsim",
        description="Simulate the gravitational attraction of N point masses.",
        epilog=(
            "Selectors: 'a' (all bodies), '3', '2-4', '1.3-5'. "
            "Vector values: one value for all axes, three values, or per-axis "
            "overrides such as x1e7,z-5e6."
        ),
    )
    parser.add_argument("-n", "--bodies", type=int, required=True, help="number of bodies")
    parser.add_argument("-f", "--frames", type=int, default=100, help="number of steps to record")
    parser.add_argument("-t", "--dt", type=float, default=DEFAULT_DT, help="time step in seconds")
    parser.add_argument("-m", dest="directives", action=_DirectiveAction, metavar="SEL,MASS",
                        help="set mass (kg) of the selected bodies")
    parser.add_argument("-p", dest="directives", action=_DirectiveAction, metavar="N,VALUES",
                        help="set position (m) of one body")
    parser.add_argument("-v", dest="directives", action=_DirectiveAction, metavar="SEL,VALUES",
                        help="set velocity (m/s) of the selected bodies")
    parser.add_argument("--cube", action="store_true", help="use equal, zero-centred bounds on every axis")
    parser.add_argument("--initial-bounds", action="store_true",
                        help="compute bounds from the initial positions only")
    parser.add_argument("--seed", type=int, default=None, help="seed for random attribute defaults")
    parser.add_argument("--seed-with-velocity", action="store_true",
                        help="start the force accumulator from the body velocity")
    parser.add_argument("--show-final", action="store_true", help="print the final frame")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None, help="also append log records to this file")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    config = SimConfig(
        dt=args.dt,
        frame_count=args.frames,
        cube=args.cube,
        initial_only=args.initial_bounds,
        seed=args.seed,
        seed_with_velocity=args.seed_with_velocity,
    )

    try:
        directives = [parse_directive(flag, text) for flag, text in (args.directives or [])]
        result = run_from_config(args.bodies, directives, config)
    except GravSimError as err:
        logger.error("%s", err)
        return 2

    log_reproduction_command(result.bodies, config.frame_count, config.dt,
                             config.cube, config.initial_only, config.seed_with_velocity)
    b = result.bounds
    logger.info("bounds x=%s y=%s z=%s", b.xlim, b.ylim, b.zlim)
    e0 = Diagnostics(result.bodies, G=config.G).energy()
    logger.debug("initial total energy %.6e J", e0)

    if args.show_final:
        df = result.frames.to_dataframe()
        final = df[df["frame"] == len(result.frames) - 1]
        print(final.to_string(index=False))
    return 0
