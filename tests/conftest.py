"""Shared test fixtures."""

from __future__ import annotations

import pytest

_NS = (
    'xmlns="http://www.w3.org/2000/svg" '
    'xmlns:inkscape="http://www.inkscape.org/namespaces/inkscape" '
    'xmlns:sodipodi="http://sodipodi.sourceforge.net/DTD/sodipodi-0.0.dtd" '
    'xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#" '
    'xmlns:cc="http://creativecommons.org/ns#" '
    'xmlns:dc="http://purl.org/dc/elements/1.1/"'
)

# Points per millimetre
MM = 72.0 / 25.4


def make_svg(
    *layers: str,
    units: str | None = "pt",
    width: str = "300pt",
    height: str = "300pt",
    title: str | None = None,
) -> str:
    """Wrap layer markup in an Inkscape-style document."""
    parts = [f'<svg {_NS} width="{width}" height="{height}">']
    if title is not None:
        parts.append(
            "  <metadata><rdf:RDF><cc:Work rdf:about=\"\">"
            f"<dc:title>{title}</dc:title>"
            "</cc:Work></rdf:RDF></metadata>"
        )
    if units is not None:
        parts.append(f'  <sodipodi:namedview id="base" inkscape:document-units="{units}"/>')
    parts.extend(layers)
    parts.append("</svg>")
    return "\n".join(parts)


def layer(label: str, *children: str, transform: str | None = None) -> str:
    attrs = f'inkscape:label="{label}" inkscape:groupmode="layer"'
    if transform is not None:
        attrs += f' transform="{transform}"'
    return f"  <g {attrs}>\n" + "\n".join(children) + "\n  </g>"


def anchor(
    title: str | None,
    cx: float | str,
    cy: float | str,
    desc: str | None = None,
    transform: str | None = None,
) -> str:
    attrs = f'sodipodi:type="arc" sodipodi:cx="{cx}" sodipodi:cy="{cy}" sodipodi:rx="1" sodipodi:ry="1"'
    if transform is not None:
        attrs += f' transform="{transform}"'
    inner = ""
    if title is not None:
        inner += f"<title>{title}</title>"
    if desc is not None:
        inner += f"<desc>{desc}</desc>"
    return f"    <path {attrs}>{inner}</path>"


def rect(title: str | None, width: float | str, height: float | str) -> str:
    inner = "" if title is None else f"<title>{title}</title>"
    return f'    <rect x="0" y="0" width="{width}" height="{height}">{inner}</rect>'


# A4 template in millimetres with every layer kind
A4_LAYOUT_SVG = make_svg(
    layer(
        "anchors",
        anchor("reference", 0, 0),
        anchor("header", 5, 5, desc="header.pdf", transform="translate(1,2)"),
        anchor("ladder", 30, 40),
        anchor(None, 1, 1),
        transform="translate(10,20)",
    ),
    layer(
        "pages",
        rect("page-static-cover", 210, 297),
        rect("page-dynamic-side", 3, 297),
        rect("page-", 100, 50),
    ),
    layer(
        "images",
        rect("image-previous-dynamic-mark", 150, 4),
        rect("image-previous-thumb", 150, 100),
    ),
    layer("notes", rect("page-ignored", 1, 1)),
    units="mm",
    width="210mm",
    height="297mm",
    title="a4-portrait",
)

EMPTY_SVG = make_svg()


@pytest.fixture
def a4_layout_svg() -> str:
    return A4_LAYOUT_SVG


@pytest.fixture
def empty_svg() -> str:
    return EMPTY_SVG
