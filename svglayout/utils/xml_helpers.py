"""XML helpers — namespaces and safe traversal. No engine imports."""

from __future__ import annotations

import xml.etree.ElementTree as ET

NAMESPACES = {
    "svg": "http://www.w3.org/2000/svg",
    "inkscape": "http://www.inkscape.org/namespaces/inkscape",
    "sodipodi": "http://sodipodi.sourceforge.net/DTD/sodipodi-0.0.dtd",
    "rdf": "http://www.w3.org/1999/02/22-rdf-syntax-ns#",
    "cc": "http://creativecommons.org/ns#",
    "dc": "http://purl.org/dc/elements/1.1/",
}

_PREFIXES = {uri: prefix for prefix, uri in NAMESPACES.items()}


def local_name(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def qualified(prefix: str, name: str) -> str:
    """Clark-notation name, e.g. ``qualified("inkscape", "label")``."""
    return f"{{{NAMESPACES[prefix]}}}{name}"


def short_name(tag: str) -> str:
    """``{uri}name`` -> ``prefix:name`` for known namespaces, svg stays bare."""
    if "}" not in tag:
        return tag
    uri, name = tag[1:].split("}", 1)
    prefix = _PREFIXES.get(uri)
    if prefix is None or prefix == "svg":
        return name
    return f"{prefix}:{name}"


def find_child(element: ET.Element | None, name: str) -> ET.Element | None:
    """First direct child whose local name is ``name`` (any namespace)."""
    if element is None:
        return None
    for child in element:
        if local_name(child.tag) == name:
            return child
    return None


def find_path(element: ET.Element | None, *names: str) -> ET.Element | None:
    """Follow a chain of child names; None as soon as a link is missing.

    Names may carry a ``prefix:`` which is ignored for matching, so
    ``find_path(root, "metadata", "rdf:RDF", "cc:Work", "dc:title")`` works
    whether or not the document declares the usual namespaces.
    """
    node = element
    for name in names:
        node = find_child(node, name.split(":")[-1])
        if node is None:
            return None
    return node


def text_at(element: ET.Element | None, *names: str) -> str:
    node = find_path(element, *names)
    if node is None or node.text is None:
        return ""
    return node.text
