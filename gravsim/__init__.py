"""
This initialization file is the entry point of the gravsim package, a fixed-step
simulator of the mutual gravitational attraction of N point masses.

It re-exports the value types (Vector3, Body, BodyTemplate), the engine (force functions,
Integrator, FrameRecorder, FrameSequence, compute_bounds), the body-selector parser and
directive types, the AttributeResolver that turns directives into bodies, the run-level
run_simulation operation with its SimConfig, and the error hierarchy, so callers can import
any major component directly from the package root.
"""

from .constants import G_NEWTON, DEFAULT_DT, BOUNDS_PADDING
from .sim_config import SimConfig
from .errors import (
    GravSimError,
    DegenerateConfigurationError,
    InvalidRunParameterError,
    SelectorError,
    SelectorSyntaxError,
    SelectorOutOfRangeError,
    DirectiveError,
    DirectiveSyntaxError,
    InvalidDirectiveArityError,
    InvalidDirectiveValueError,
    InvalidSelectorForPositionError,
    IncompleteTemplateError,
)

from .vector import Vector3
from .body import Body, BodyTemplate
from .forces import gravitational_force, force_magnitude, pairwise_forces
from .simulation_state import SimulationState
from .integrator import Integrator, step
from .recorder import FrameRecorder, FrameSequence, record_frames
from .bounds import Bounds, compute_bounds

from .selector import parse_selector, is_single_index
from .directives import (
    MassDirective,
    PositionDirective,
    VelocityDirective,
    parse_directive,
)
from .defaults import DefaultGenerator, GeneratorConfig
from .resolver import AttributeResolver, resolve_bodies

from .simulation_validator import SimulationValidator
from .diagnostics import Diagnostics
from .simulation import SimulationResult, run_simulation, run_from_config
from .reproduction import format_reproduction_command, log_reproduction_command


__all__ = [
    "G_NEWTON",
    "DEFAULT_DT",
    "BOUNDS_PADDING",
    "SimConfig",
    "GravSimError",
    "DegenerateConfigurationError",
    "InvalidRunParameterError",
    "SelectorError",
    "SelectorSyntaxError",
    "SelectorOutOfRangeError",
    "DirectiveError",
    "DirectiveSyntaxError",
    "InvalidDirectiveArityError",
    "InvalidDirectiveValueError",
    "InvalidSelectorForPositionError",
    "IncompleteTemplateError",
    "Vector3",
    "Body",
    "BodyTemplate",
    "gravitational_force",
    "force_magnitude",
    "pairwise_forces",
    "SimulationState",
    "Integrator",
    "step",
    "FrameRecorder",
    "FrameSequence",
    "record_frames",
    "Bounds",
    "compute_bounds",
    "parse_selector",
    "is_single_index",
    "MassDirective",
    "PositionDirective",
    "VelocityDirective",
    "parse_directive",
    "DefaultGenerator",
    "GeneratorConfig",
    "AttributeResolver",
    "resolve_bodies",
    "SimulationValidator",
    "Diagnostics",
    "SimulationResult",
    "run_simulation",
    "run_from_config",
    "format_reproduction_command",
    "log_reproduction_command",
]
