"""Recover a logical name and a static/dynamic flag from a shape title."""

from __future__ import annotations

import enum


class Role(enum.Enum):
    """Dimension roles and their (dynamic, static, bare) title prefixes."""

    PAGE = ("page-dynamic-", "page-static-", "page-")
    PREVIOUS_IMAGE = ("image-previous-dynamic-", "image-previous-static-", "image-previous-")

    @property
    def dynamic_prefix(self) -> str:
        return self.value[0]

    @property
    def static_prefix(self) -> str:
        return self.value[1]

    @property
    def bare_prefix(self) -> str:
        return self.value[2]


def resolve_name(title: str, role: Role) -> tuple[str, bool]:
    """Return ``(name, is_dynamic)`` for a shape title.

    Unprefixed titles are accepted as-is and treated as static. An empty
    name means the entry should be dropped.
    """
    if title.startswith(role.dynamic_prefix):
        return title[len(role.dynamic_prefix):], True
    if title.startswith(role.static_prefix):
        return title[len(role.static_prefix):], False
    return title.removeprefix(role.bare_prefix), False
