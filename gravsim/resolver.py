"""
This module resolves attribute directives into concrete bodies.

The AttributeResolver keeps one BodyTemplate per declared body and applies directives
strictly in input order, so a later directive touching the same body and field overwrites
an earlier one. Mass and velocity directives accept any selector; position directives
accept only a single body index because two bodies may never share a position. Errors
raised while applying a directive are annotated with that directive's text. After all
directives, fill_defaults draws every field that is still unset from the DefaultGenerator
and materialize converts the templates into Body objects, rejecting coincident positions.
"""

from __future__ import annotations
import logging
import numbers
from typing import Iterable, List, Optional

import numpy as np

from .body import Body, BodyTemplate
from .defaults import DefaultGenerator
from .directives import Directive, MassDirective, PositionDirective, VelocityDirective
from .errors import GravSimError, InvalidRunParameterError, InvalidSelectorForPositionError
from .selector import is_single_index, parse_selector
from .simulation_validator import SimulationValidator

logger = logging.getLogger(__name__)


class AttributeResolver:

	def __init__(
		self,
		body_count: int,
		rng: Optional[np.random.Generator] = None,
		generator: Optional[DefaultGenerator] = None,
	) -> None:
		if isinstance(body_count, bool) or not isinstance(body_count, numbers.Integral) or body_count < 1:
			raise InvalidRunParameterError(f"body count must be a positive integer, got {body_count!r}")
		self.body_count = int(body_count)
		self.generator = generator if generator is not None else DefaultGenerator(rng)
		self.templates: List[BodyTemplate] = [BodyTemplate() for _ in range(self.body_count)]

	def apply(self, directive: Directive) -> None:
		try:
			self._apply(directive)
		except GravSimError as err:
			err.directive = str(directive)
			raise

	def _apply(self, directive: Directive) -> None:
		if isinstance(directive, MassDirective):
			for i in parse_selector(directive.selector, self.body_count):
				self.templates[i - 1].mass = directive.mass
			return

		if isinstance(directive, PositionDirective):
			if not is_single_index(directive.selector):
				raise InvalidSelectorForPositionError(directive.selector)
			targets = parse_selector(directive.selector, self.body_count)
			field = "position"
		elif isinstance(directive, VelocityDirective):
			targets = parse_selector(directive.selector, self.body_count)
			field = "velocity"
		else:
			raise TypeError(f"not a directive: {directive!r}")

		components = directive.components()
		for i in targets:
			vec = getattr(self.templates[i - 1], field)
			for axis, value in enumerate(components):
				if value is not None:
					vec[axis] = value

	def fill_defaults(self) -> None:
		gen = self.generator
		filled = 0
		for t in self.templates:
			if t.mass is None:
				t.mass = gen.sample_mass()
				filled += 1
			for axis in range(3):
				if t.position[axis] is None:
					t.position[axis] = gen.sample_position_component()
					filled += 1
				if t.velocity[axis] is None:
					t.velocity[axis] = gen.sample_velocity_component()
					filled += 1
		if filled:
			logger.debug("filled %d unset attributes with random defaults", filled)

	def materialize(self) -> List[Body]:
		bodies = [t.to_body(i) for i, t in enumerate(self.templates, start=1)]
		SimulationValidator.check_positions_distinct([tuple(b.position) for b in bodies])
		return bodies

	def resolve(self, directives: Iterable[Directive]) -> List[Body]:
		for d in directives:
			self.apply(d)
		self.fill_defaults()
		return self.materialize()


def resolve_bodies(
	body_count: int,
	directives: Iterable[Directive],
	rng: Optional[np.random.Generator] = None,
) -> List[Body]:
	return AttributeResolver(body_count, rng=rng).resolve(directives)
