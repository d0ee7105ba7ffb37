"""
Exception hierarchy for gravsim.

Every user-input problem derives from GravSimError so a front end can report it and exit
with one handler. Errors raised while a directive is being applied are annotated with the
directive's flag form (see AttributeResolver.apply) so the message points at the offending
input. IncompleteTemplateError is the exception: it signals a bug in default filling, not
bad input, and therefore derives from RuntimeError instead.
"""

from __future__ import annotations
from typing import Optional, Sequence


class GravSimError(Exception):
    directive: Optional[str] = None

    def __str__(self) -> str:
        msg = super().__str__()
        if self.directive:
            return f"{msg} (in directive '{self.directive}')"
        return msg


class DegenerateConfigurationError(GravSimError):
    """Two bodies occupy the same position, so the force direction is undefined."""

    def __init__(
        self,
        first: Optional[int] = None,
        second: Optional[int] = None,
        position: Sequence[float] | None = None,
    ):
        self.first = int(first) if first is not None else None
        self.second = int(second) if second is not None else None
        self.position = tuple(position) if position is not None else None
        where = f" at {self.position}" if self.position is not None else ""
        if self.first is None or self.second is None:
            who = "two bodies"
        else:
            who = f"bodies {self.first} and {self.second}"
        super().__init__(f"{who} share the same position{where}")


class InvalidRunParameterError(GravSimError, ValueError):
    pass


class SelectorError(GravSimError):
    pass


class SelectorSyntaxError(SelectorError):

    def __init__(self, expr: str, reason: str):
        self.expr = expr
        self.reason = reason
        super().__init__(f"malformed selector {expr!r}: {reason}")


class SelectorOutOfRangeError(SelectorError):

    def __init__(self, index: int, body_count: int, expr: str | None = None):
        self.index = int(index)
        self.body_count = int(body_count)
        self.expr = expr
        src = f" in selector {expr!r}" if expr is not None else ""
        super().__init__(
            f"body index {self.index}{src} is outside 1..{self.body_count}"
        )


class DirectiveError(GravSimError):
    pass


class DirectiveSyntaxError(DirectiveError):
    pass


class InvalidDirectiveArityError(DirectiveError):

    def __init__(self, kind: str, count: int):
        self.kind = kind
        self.count = int(count)
        super().__init__(
            f"{kind} directive takes 1 or 3 values or per-axis overrides, got {self.count}"
        )


class InvalidDirectiveValueError(DirectiveError, ValueError):
    pass


class InvalidSelectorForPositionError(DirectiveError):

    def __init__(self, expr: str):
        self.expr = expr
        super().__init__(
            f"position directives need a single body index, got {expr!r}; "
            "two bodies may never share a position"
        )


class IncompleteTemplateError(RuntimeError):

    def __init__(self, index: int, fields: Sequence[str]):
        self.index = int(index)
        self.fields = tuple(fields)
        super().__init__(
            f"body {self.index} still has unset fields: {', '.join(self.fields)}"
        )
