"""Exception types raised while extracting a layout.

Only structural and numeric failures are exceptions. Shapes without a title
and names that resolve to nothing are skipped by the extractor instead.
"""

from __future__ import annotations


class LayoutError(Exception):
    """Base class for fatal extraction errors."""


class StructuralParseError(LayoutError):
    """The input is not a well-formed SVG document."""


class MalformedCoordinate(LayoutError, ValueError):
    """A required numeric attribute is missing or not a decimal number."""

    def __init__(self, attribute: str, value: str | None, context: str = "") -> None:
        self.attribute = attribute
        self.value = value
        self.context = context
        where = f" on {context}" if context else ""
        super().__init__(f"Malformed {attribute}{where}: {value!r} is not a number")
