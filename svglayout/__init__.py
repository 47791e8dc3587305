"""Page layout extraction from Inkscape SVG documents."""

from svglayout.engine.pipeline import define_layout_from_svg
from svglayout.errors import LayoutError, MalformedCoordinate, StructuralParseError
from svglayout.formatter import pretty_print_layout, print_layout
from svglayout.models.layout import Dim, DynamicDim, Layout, Point

__version__ = "0.1.0"

__all__ = [
    "define_layout_from_svg",
    "LayoutError",
    "MalformedCoordinate",
    "StructuralParseError",
    "print_layout",
    "pretty_print_layout",
    "Dim",
    "DynamicDim",
    "Layout",
    "Point",
]
