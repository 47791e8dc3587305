"""SVG parser — ElementTree walk over an Inkscape document.

Converts raw SVG bytes/text → SvgDocument with the layer groups, their
rect/path children and the metadata layout extraction relies on.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from svglayout.errors import StructuralParseError
from svglayout.models.svg_document import SvgDocument, SvgGroup, SvgPath, SvgRect
from svglayout.utils.xml_helpers import find_child, local_name, qualified, short_name, text_at

logger = logging.getLogger(__name__)

_LABEL = qualified("inkscape", "label")
_DOCUMENT_UNITS = qualified("inkscape", "document-units")
_SODIPODI_CX = qualified("sodipodi", "cx")
_SODIPODI_CY = qualified("sodipodi", "cy")


def parse_svg(data: bytes | str) -> SvgDocument:
    """Parse an SVG document into the tree consumed by the layout extractor."""
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise StructuralParseError(f"Invalid SVG markup: {e}") from e

    if local_name(root.tag) != "svg":
        raise StructuralParseError(f"No <svg> root element found (got <{local_name(root.tag)}>)")

    doc = SvgDocument(
        width=root.get("width", ""),
        height=root.get("height", ""),
        title=text_at(root, "metadata", "rdf:RDF", "cc:Work", "dc:title"),
        document_units=_document_units(root),
        groups=[_parse_group(el) for el in root if local_name(el.tag) == "g"],
    )

    logger.info(
        "Parsed SVG: %d top-level groups, units=%r, size %s×%s",
        len(doc.groups),
        doc.document_units,
        doc.width or "?",
        doc.height or "?",
    )
    return doc


def _document_units(root: ET.Element) -> str:
    namedview = find_child(root, "namedview")
    if namedview is None:
        return ""
    return namedview.get(_DOCUMENT_UNITS, "")


def _parse_group(element: ET.Element) -> SvgGroup:
    group = SvgGroup(
        label=element.get(_LABEL, ""),
        transform=element.get("transform", ""),
    )
    for child in element:
        tag = local_name(child.tag)
        if tag == "rect":
            group.rects.append(
                SvgRect(
                    width=child.get("width", ""),
                    height=child.get("height", ""),
                    **_common(child),
                )
            )
        elif tag == "path":
            group.paths.append(
                SvgPath(
                    cx=child.get(_SODIPODI_CX),
                    cy=child.get(_SODIPODI_CY),
                    d=child.get("d", ""),
                    **_common(child),
                )
            )
    return group


def _common(element: ET.Element) -> dict:
    """Title, description, transform and attributes shared by all shapes."""
    title = find_child(element, "title")
    desc = find_child(element, "desc")
    return {
        "title": None if title is None else (title.text or ""),
        "desc": None if desc is None else (desc.text or ""),
        "transform": element.get("transform", ""),
        "attributes": {short_name(k): v for k, v in element.attrib.items()},
    }
