"""Dispatch top-level groups by label and extract their entries.

Values written here are raw document units; scaling and the Y flip happen
afterwards in the normalizer.
"""

from __future__ import annotations

import logging
import re

from svgpathtools import parse_path

from svglayout.engine.config import LayoutConfig
from svglayout.engine.names import Role, resolve_name
from svglayout.engine.transform import NUMBER, compose
from svglayout.errors import MalformedCoordinate
from svglayout.models.layout import Dim, DynamicDim, Layout, Point
from svglayout.models.svg_document import SvgDocument, SvgGroup, SvgPath, SvgRect

logger = logging.getLogger(__name__)

_DECIMAL_RE = re.compile(NUMBER)


def classify_layers(doc: SvgDocument, layout: Layout, config: LayoutConfig) -> None:
    """Run the matching extractor for every labelled layer, in document order.

    Later layers overwrite earlier entries with the same name.
    """
    for group in doc.groups:
        if group.label == config.anchors_label:
            extract_anchors(group, layout, config)
        elif group.label == config.pages_label:
            extract_dims(group, Role.PAGE, layout, config)
        elif group.label == config.images_label:
            extract_dims(group, Role.PREVIOUS_IMAGE, layout, config)


def extract_anchors(group: SvgGroup, layout: Layout, config: LayoutConfig) -> None:
    for path in group.paths:
        x, y = _path_point(path)
        offset = compose(group.transform, path.transform)
        point = Point(x=x + offset.dx, y=y + offset.dy)

        if not path.title:
            logger.warning("Anchor at (%f,%f) has no title, so ignoring", point.x, point.y)
            continue

        if path.title == config.reference_title:
            layout.anchor = point
            continue

        layout.anchors[path.title] = point
        if path.desc is not None:
            layout.filenames[path.title] = path.desc


def extract_dims(group: SvgGroup, role: Role, layout: Layout, config: LayoutConfig) -> None:
    if role is Role.PAGE:
        static, dynamic = layout.page_dim_static, layout.page_dim_dynamic
    else:
        static, dynamic = layout.previous_image_static, layout.previous_image_dynamic

    for rect in group.rects:
        w = _to_float(rect.width, "width", rect)
        h = _to_float(rect.height, "height", rect)

        if not rect.title:
            logger.warning(
                "%s with size (%f,%f) has no title, so ignoring",
                "Page" if role is Role.PAGE else "Previous image",
                w,
                h,
            )
            continue

        name, is_dynamic = resolve_name(rect.title, role)
        if not name:
            continue

        # A name lives in exactly one of the two maps
        if is_dynamic:
            static.pop(name, None)
            dynamic[name] = DynamicDim(
                dim=Dim(w=w, h=h),
                width_is_dynamic=w < config.dynamic_dim_threshold,
                height_is_dynamic=h < config.dynamic_dim_threshold,
            )
        else:
            dynamic.pop(name, None)
            static[name] = Dim(w=w, h=h)


def _path_point(path: SvgPath) -> tuple[float, float]:
    """Representative point of an anchor path.

    ``sodipodi:cx``/``sodipodi:cy`` when present, otherwise the start of the
    path data.
    """
    if path.cx is not None or path.cy is not None:
        return _to_float(path.cx, "sodipodi:cx", path), _to_float(path.cy, "sodipodi:cy", path)

    if not path.d.strip():
        raise MalformedCoordinate("d", path.d, _describe(path))
    try:
        start = parse_path(path.d).start
    except (ValueError, IndexError) as e:
        raise MalformedCoordinate("d", path.d, _describe(path)) from e
    # Empty paths report no start point rather than raising
    if start is None:
        raise MalformedCoordinate("d", path.d, _describe(path))
    return float(start.real), float(start.imag)


def _to_float(value: str | None, attribute: str, shape: SvgRect | SvgPath) -> float:
    if value is None or _DECIMAL_RE.fullmatch(value) is None:
        raise MalformedCoordinate(attribute, value, _describe(shape))
    return float(value)


def _describe(shape: SvgRect | SvgPath) -> str:
    kind = "rect" if isinstance(shape, SvgRect) else "path"
    ident = shape.attributes.get("id")
    if shape.title:
        return f"{kind} {shape.title!r}"
    if ident:
        return f"{kind} #{ident}"
    return kind
