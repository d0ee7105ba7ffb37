"""
This module parses body selectors, the small language used to address bodies by their
1-based index in mass and velocity directives.

Grammar::

    selector := "a" | group
    group    := range ("." range)*
    range    := INTEGER | INTEGER "-" INTEGER

"a" selects every body, "3" one body, "2-4" an inclusive run (no reordering, so "4-2" is
empty) and "1.3-5" the union of its dot-separated terms. Each production is a function
below; every resolved index is checked against the declared body count.
"""

from __future__ import annotations
from typing import FrozenSet, Set

from .errors import SelectorOutOfRangeError, SelectorSyntaxError

ALL = "a"


def parse_selector(expr: str, body_count: int) -> FrozenSet[int]:
    text = _normalize(expr)
    if text == ALL:
        return frozenset(range(1, int(body_count) + 1))
    return frozenset(_parse_group(text, int(body_count), text))


def is_single_index(expr: str) -> bool:
    text = expr.strip() if isinstance(expr, str) else ""
    return text.isascii() and text.isdigit()


def _normalize(expr: str) -> str:
    if not isinstance(expr, str):
        raise SelectorSyntaxError(repr(expr), "selector must be a string")
    text = expr.strip()
    if not text:
        raise SelectorSyntaxError(expr, "empty selector")
    return text


def _parse_group(text: str, body_count: int, source: str) -> Set[int]:
    selected: Set[int] = set()
    for term in text.split("."):
        if not term:
            raise SelectorSyntaxError(source, "empty term between '.' separators")
        selected |= _parse_range(term, body_count, source)
    return selected


def _parse_range(term: str, body_count: int, source: str) -> Set[int]:
    if "-" not in term:
        return {_parse_index(term, body_count, source)}

    lo_text, _, hi_text = term.partition("-")
    if not lo_text or not hi_text or "-" in hi_text:
        raise SelectorSyntaxError(source, f"bad range {term!r}")
    lo = _parse_index(lo_text, body_count, source)
    hi = _parse_index(hi_text, body_count, source)
    return set(range(lo, hi + 1))


def _parse_index(token: str, body_count: int, source: str) -> int:
    token = token.strip()
    if not (token.isascii() and token.isdigit()):
        raise SelectorSyntaxError(source, f"{token!r} is not a body index")
    index = int(token)
    if index < 1 or index > body_count:
        raise SelectorOutOfRangeError(index, body_count, source)
    return index
