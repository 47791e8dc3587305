"""Extraction configuration: thresholds, the unit table and reserved names."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# Points per document unit.
PPMM = 72.0 / 25.4
PPPX = 0.75  # 96 px per inch
PPPT = 1.0
PPIN = 72.0

UNIT_SCALE: Mapping[str, float] = MappingProxyType({
    "mm": PPMM,
    "px": PPPX,
    "pt": PPPT,
    "in": PPIN,
})


@dataclass(frozen=True)
class LayoutConfig:
    """Controls how layers are recognised and how coordinates are scaled."""

    # Raw (unscaled) sizes below this are dynamic on that axis
    dynamic_dim_threshold: float = 5.0

    # Document unit token -> points per unit
    unit_scale: Mapping[str, float] = field(default_factory=lambda: UNIT_SCALE)

    # Reserved inkscape:label values
    anchors_label: str = "anchors"
    pages_label: str = "pages"
    images_label: str = "images"

    # Title of the anchor that sets the layout origin
    reference_title: str = "reference"

    def scale_for(self, units: str | None) -> float:
        """Points per unit for ``units``; 1.0 when absent or unrecognised."""
        if not units:
            return 1.0
        return self.unit_scale.get(units, 1.0)


DEFAULT_CONFIG = LayoutConfig()
