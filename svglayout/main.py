"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from svglayout import __version__
from svglayout.config import settings
from svglayout.errors import LayoutError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.svglayout_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="svglayout",
        description="Page layout extraction from Inkscape SVG templates",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(LayoutError)
    async def _layout_error(request: Request, exc: LayoutError) -> JSONResponse:
        logger.warning("%s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    from svglayout.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
