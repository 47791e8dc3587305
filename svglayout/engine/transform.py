"""Translation-only parsing of SVG transform attributes.

Only ``translate(dx[, dy])`` is interpreted. Rotation, scale and matrix forms
are not modelled and read as the identity translation.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Decimal number as written in SVG attributes, no surrounding whitespace
NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"
_TRANSLATE_RE = re.compile(
    rf"^\s*translate\s*\(\s*({NUMBER})(?:\s*,\s*|\s+)?({NUMBER})?\s*\)\s*$"
)


@dataclass(frozen=True)
class Translation:
    dx: float = 0.0
    dy: float = 0.0

    def __add__(self, other: Translation) -> Translation:
        return Translation(self.dx + other.dx, self.dy + other.dy)

    @staticmethod
    def identity() -> Translation:
        return Translation()


def parse_translate(expr: str | None) -> Translation:
    """Parse ``translate(dx[, dy])``; anything else is the identity."""
    if not expr:
        return Translation.identity()
    m = _TRANSLATE_RE.match(expr)
    if m is None:
        return Translation.identity()
    dx = float(m.group(1))
    dy = float(m.group(2)) if m.group(2) is not None else 0.0
    return Translation(dx, dy)


def compose(*exprs: str | None) -> Translation:
    """Sum the translations of an ancestor chain, outermost first."""
    total = Translation.identity()
    for expr in exprs:
        total = total + parse_translate(expr)
    return total
