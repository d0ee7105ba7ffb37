"""
This module defines the Body class, a simple mutable container for one point mass, and
BodyTemplate, the partially specified form a body takes while attribute directives are
being resolved.

Body stores the mass in kilograms and position/velocity as Vector3 values in metres and
metres per second. BodyTemplate keeps every field optional, per axis for the vectors, and
converts to a Body through the single fallible to_body call once every field has been set
either by a directive or by the random default generator.
"""
from __future__ import annotations
from typing import Iterable, List, Optional

from .constants import AXES
from .errors import IncompleteTemplateError
from .vector import Vector3


class Body:
	def __init__(self, mass: float, position: Iterable[float], velocity: Iterable[float] = (0.0, 0.0, 0.0)):
		self.mass = float(mass)
		self.position = Vector3.of(position)
		self.velocity = Vector3.of(velocity)

	def copy(self) -> "Body":
		return Body(self.mass, self.position, self.velocity)

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Body):
			return NotImplemented
		return (self.mass == other.mass and self.position == other.position
				and self.velocity == other.velocity)

	__hash__ = None

	def __repr__(self) -> str:
		p, v = self.position, self.velocity
		return (f"Body(mass={self.mass}, position=({p.x}, {p.y}, {p.z}), "
				f"velocity=({v.x}, {v.y}, {v.z}))")


class BodyTemplate:
	__slots__ = ("mass", "position", "velocity")

	def __init__(self) -> None:
		self.mass: Optional[float] = None
		self.position: List[Optional[float]] = [None, None, None]
		self.velocity: List[Optional[float]] = [None, None, None]

	def unset_fields(self) -> List[str]:
		missing = []
		if self.mass is None:
			missing.append("mass")
		for name in ("position", "velocity"):
			vec = getattr(self, name)
			for axis, val in zip(AXES, vec):
				if val is None:
					missing.append(f"{name}.{axis}")
		return missing

	def is_complete(self) -> bool:
		return not self.unset_fields()

	def to_body(self, index: int = 0) -> Body:
		missing = self.unset_fields()
		if missing:
			raise IncompleteTemplateError(index, missing)
		return Body(self.mass, self.position, self.velocity)

	def __repr__(self) -> str:
		return f"BodyTemplate(mass={self.mass}, position={self.position}, velocity={self.velocity})"
