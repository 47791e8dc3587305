"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LayoutRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
