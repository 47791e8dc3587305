"""Parsed SVG document model.

Only what layout extraction consults is kept: top-level groups with their
direct rect and path children, the metadata title, the document units and
the root size. Numeric attributes stay as raw strings so the extractor can
report malformed values precisely.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class SvgShape(BaseModel):
    title: str | None = None
    desc: str | None = None
    transform: str = ""
    attributes: dict[str, str] = Field(default_factory=dict)


class SvgRect(SvgShape):
    width: str = ""
    height: str = ""


class SvgPath(SvgShape):
    # sodipodi:cx / sodipodi:cy
    cx: str | None = None
    cy: str | None = None
    d: str = ""


class SvgGroup(BaseModel):
    label: str = ""
    transform: str = ""
    rects: list[SvgRect] = Field(default_factory=list)
    paths: list[SvgPath] = Field(default_factory=list)


class SvgDocument(BaseModel):
    """Represents a parsed SVG file."""

    width: str = ""
    height: str = ""
    title: str = ""
    document_units: str = ""
    groups: list[SvgGroup] = Field(default_factory=list)
