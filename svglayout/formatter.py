"""Layout → JSON text, compact or tab-indented."""

from __future__ import annotations

import json
import sys
from typing import TextIO

from svglayout.models.layout import Layout


def layout_to_json(layout: Layout, pretty: bool = False) -> str:
    data = layout.model_dump(mode="json", by_alias=True)
    if pretty:
        return json.dumps(data, indent="\t", ensure_ascii=False)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def print_layout(layout: Layout, stream: TextIO | None = None) -> None:
    """Write the layout as a single line of JSON."""
    out = stream if stream is not None else sys.stdout
    out.write(layout_to_json(layout) + "\n")


def pretty_print_layout(layout: Layout, stream: TextIO | None = None) -> None:
    """Write the layout as tab-indented JSON."""
    out = stream if stream is not None else sys.stdout
    out.write(layout_to_json(layout, pretty=True) + "\n")
