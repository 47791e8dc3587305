"""Canvas size of the document, converted to points."""

from __future__ import annotations

import re

from svglayout.engine.config import LayoutConfig
from svglayout.engine.transform import NUMBER
from svglayout.errors import MalformedCoordinate
from svglayout.models.layout import Dim
from svglayout.models.svg_document import SvgDocument

_LENGTH_RE = re.compile(rf"^\s*({NUMBER})\s*([a-z]*)\s*$")

# Unitless SVG lengths are user units, i.e. px
_DEFAULT_UNIT = "px"


def parse_length(value: str, config: LayoutConfig, attribute: str = "length") -> float:
    """Parse ``"210mm"``, ``"595pt"``, ``"800"`` ... into points."""
    m = _LENGTH_RE.match(value or "")
    if m is None:
        raise MalformedCoordinate(attribute, value, "svg root")
    unit = m.group(2) or _DEFAULT_UNIT
    if unit not in config.unit_scale:
        raise MalformedCoordinate(attribute, value, "svg root")
    return float(m.group(1)) * config.unit_scale[unit]


def get_ladder_dim(doc: SvgDocument, config: LayoutConfig) -> Dim:
    return Dim(
        w=parse_length(doc.width, config, "width"),
        h=parse_length(doc.height, config, "height"),
    )
