"""Convert document units to points and flip the Y axis.

Runs exactly once per layout; a second pass would scale twice.
"""

from __future__ import annotations

import logging

from svglayout.engine.config import LayoutConfig
from svglayout.models.layout import Dim, Layout

logger = logging.getLogger(__name__)


def apply_document_units_scale(units: str, layout: Layout, config: LayoutConfig) -> None:
    """Scale every collected coordinate and size in place.

    ``layout.dim`` already carries its own units and is left alone. The
    reference anchor is scaled but not flipped; named anchors are flipped
    about ``ytop = dim.h - anchor.y`` using the scaled anchor.
    """
    sf = config.scale_for(units)
    logger.debug("Document units %r -> scale factor %g", units, sf)

    layout.anchor.x = sf * layout.anchor.x
    layout.anchor.y = sf * layout.anchor.y

    # Flip is measured down from the canvas top, offset by the origin
    ytop = layout.dim.h - layout.anchor.y

    for point in layout.anchors.values():
        point.x = sf * point.x
        point.y = ytop - sf * point.y

    for dims in (layout.page_dim_static, layout.previous_image_static):
        for dim in dims.values():
            _scale_dim(dim, sf)

    for dyn_dims in (layout.page_dim_dynamic, layout.previous_image_dynamic):
        for dyn in dyn_dims.values():
            _scale_dim(dyn.dim, sf)


def _scale_dim(dim: Dim, sf: float) -> None:
    dim.w = sf * dim.w
    dim.h = sf * dim.h

