"""Layout extraction entry point."""

from __future__ import annotations

import logging
import time

from svglayout.engine.classifier import classify_layers
from svglayout.engine.config import DEFAULT_CONFIG, LayoutConfig
from svglayout.engine.ladder import get_ladder_dim
from svglayout.engine.normalizer import apply_document_units_scale
from svglayout.models.layout import Layout, Point
from svglayout.svg.parser import parse_svg

logger = logging.getLogger(__name__)


def define_layout_from_svg(data: bytes | str, config: LayoutConfig = DEFAULT_CONFIG) -> Layout:
    """Extract the page layout described by an Inkscape SVG document.

    Raises StructuralParseError for unreadable markup and MalformedCoordinate
    for non-numeric sizes or coordinates. No partial layout is returned.
    """
    start = time.perf_counter()

    doc = parse_svg(data)

    layout = Layout(id=doc.title, anchor=Point(x=0.0, y=0.0))
    layout.dim = get_ladder_dim(doc, config)

    classify_layers(doc, layout, config)
    apply_document_units_scale(doc.document_units, layout, config)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Layout %r: %d anchors, %d/%d pages, %d/%d previous images in %.1fms",
        layout.id,
        len(layout.anchors),
        len(layout.page_dim_static),
        len(layout.page_dim_dynamic),
        len(layout.previous_image_static),
        len(layout.previous_image_dynamic),
        elapsed,
    )
    return layout
