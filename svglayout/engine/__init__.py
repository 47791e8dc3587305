"""Layout extraction engine."""

from svglayout.engine.config import DEFAULT_CONFIG, LayoutConfig
from svglayout.engine.names import Role, resolve_name
from svglayout.engine.pipeline import define_layout_from_svg
from svglayout.engine.transform import Translation, compose, parse_translate

__all__ = [
    "DEFAULT_CONFIG",
    "LayoutConfig",
    "Role",
    "resolve_name",
    "define_layout_from_svg",
    "Translation",
    "compose",
    "parse_translate",
]
