"""
This module defines the attribute directives and their textual syntax.

A directive assigns one attribute (mass, position or velocity) to the bodies picked by a
selector. Vector directives carry either plain values (one value broadcast to all three
axes, or three values) or per-axis overrides keyed by axis letter, never both. The text
forms are the ones a front end passes on the command line::

    -m SEL,MASS
    -p N,X,Y,Z    -p N,V    -p N,xVAL[,yVAL][,zVAL]
    -v SEL,X,Y,Z  -v SEL,V  -v SEL,xVAL[,yVAL][,zVAL]

parse_directive turns one flag and its argument into a directive; str() on a directive
gives the flag form back, which is what error messages and the reproduction command use.
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union

from .constants import AXES
from .errors import (
	DirectiveSyntaxError,
	InvalidDirectiveArityError,
	InvalidDirectiveValueError,
)

Components = Tuple[Optional[float], Optional[float], Optional[float]]


def _fmt(value: float) -> str:
	return repr(float(value))


@dataclass(frozen=True)
class MassDirective:
	selector: str
	mass: float

	flag = "-m"

	def __post_init__(self) -> None:
		mass = float(self.mass)
		if not (math.isfinite(mass) and mass > 0.0):
			raise InvalidDirectiveValueError(f"mass must be a positive finite number, got {self.mass!r}")
		object.__setattr__(self, "mass", mass)

	def __str__(self) -> str:
		return f"{self.flag} {self.selector},{_fmt(self.mass)}"


@dataclass(frozen=True)
class VectorDirective:
	selector: str
	values: Tuple[float, ...] = ()
	axes: Dict[str, float] = field(default_factory=dict)

	flag = "-?"
	kind = "vector"

	def components(self) -> Components:
		n_values = len(self.values)
		n_axes = len(self.axes)
		if n_values and n_axes:
			raise InvalidDirectiveArityError(self.kind, n_values + n_axes)
		if n_axes:
			unknown = set(self.axes) - set(AXES)
			if unknown:
				raise DirectiveSyntaxError(f"unknown axis {sorted(unknown)[0]!r} in {self.kind} directive")
			return tuple(
				float(self.axes[a]) if a in self.axes else None for a in AXES
			)
		if n_values == 1:
			v = float(self.values[0])
			return (v, v, v)
		if n_values == 3:
			return tuple(float(v) for v in self.values)
		raise InvalidDirectiveArityError(self.kind, n_values)

	def __str__(self) -> str:
		if self.axes:
			body = ",".join(f"{a}{_fmt(self.axes[a])}" for a in AXES if a in self.axes)
		else:
			body = ",".join(_fmt(v) for v in self.values)
		return f"{self.flag} {self.selector},{body}"


@dataclass(frozen=True)
class PositionDirective(VectorDirective):
	flag = "-p"
	kind = "position"


@dataclass(frozen=True)
class VelocityDirective(VectorDirective):
	flag = "-v"
	kind = "velocity"


Directive = Union[MassDirective, PositionDirective, VelocityDirective]

_VECTOR_KINDS = {
	"p": PositionDirective,
	"position": PositionDirective,
	"v": VelocityDirective,
	"velocity": VelocityDirective,
}


def _parse_number(token: str, text: str) -> float:
	try:
		value = float(token)
	except ValueError:
		raise DirectiveSyntaxError(f"{token!r} is not a number in {text!r}") from None
	if not math.isfinite(value):
		raise InvalidDirectiveValueError(f"{token!r} is not a finite number in {text!r}")
	return value


def parse_directive(flag: str, text: str) -> Directive:
	kind = flag.lstrip("-").lower()
	tokens = [t.strip() for t in text.split(",")]
	if len(tokens) < 2 or not tokens[0]:
		raise DirectiveSyntaxError(f"expected SELECTOR,VALUE... after {flag}, got {text!r}")
	selector, raw = tokens[0], tokens[1:]

	if kind in ("m", "mass"):
		if len(raw) != 1:
			raise DirectiveSyntaxError(f"mass directive takes exactly one value, got {text!r}")
		return MassDirective(selector, _parse_number(raw[0], text))

	cls = _VECTOR_KINDS.get(kind)
	if cls is None:
		raise DirectiveSyntaxError(f"unknown directive flag {flag!r}")

	tagged = [t for t in raw if t[:1].lower() in AXES]
	if tagged and len(tagged) != len(raw):
		raise DirectiveSyntaxError(f"cannot mix per-axis and plain values in {text!r}")

	if not tagged:
		directive = cls(selector, values=tuple(_parse_number(t, text) for t in raw))
	else:
		axes: Dict[str, float] = {}
		for t in tagged:
			axis = t[0].lower()
			if axis in axes:
				raise DirectiveSyntaxError(f"axis {axis!r} given twice in {text!r}")
			axes[axis] = _parse_number(t[1:], text)
		directive = cls(selector, axes=axes)

	directive.components()
	return directive
