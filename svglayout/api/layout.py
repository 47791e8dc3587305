"""POST /api/layout — extract a Layout from an SVG template."""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends, Request

from svglayout.dependencies import get_layout_config
from svglayout.engine.config import LayoutConfig
from svglayout.engine.pipeline import define_layout_from_svg
from svglayout.models.layout import Layout
from svglayout.models.requests import LayoutRequest

router = APIRouter()


async def _extract(data: bytes | str, config: LayoutConfig) -> Layout:
    """Run the sync extractor in a thread so the event loop stays free."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, define_layout_from_svg, data, config)


@router.post("/layout", response_model=Layout)
async def layout(
    req: LayoutRequest,
    config: LayoutConfig = Depends(get_layout_config),
) -> Layout:
    return await _extract(req.svg, config)


@router.post("/layout/raw", response_model=Layout)
async def layout_raw(
    request: Request,
    config: LayoutConfig = Depends(get_layout_config),
) -> Layout:
    """Same as /layout, with the SVG document as the request body."""
    body = await request.body()
    return await _extract(body, config)
