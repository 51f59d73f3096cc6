"""
FastAPI application factory for the PlanSight web service.

Creates the app with:
- API routes (JSON, /api/v1/*)
- Web routes (HTML, /)
- Static files
- Jinja2 templates
- Exception handlers mapping PlanSight errors to HTTP responses
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from plansight import __version__
from plansight.config import Config
from plansight.engine import AnalysisService
from plansight.exceptions import ParseError, PayloadTooLargeError, PlanSightError
from plansight.web.settings import WebSettings, get_web_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings: WebSettings = app.state.settings
    logger.info("PlanSight started on %s:%s", settings.host, settings.port)
    yield
    logger.info("PlanSight shut down")


def _error_response(status_code: int, exc: PlanSightError) -> JSONResponse:
    # "message" holds the summary; "detail" keeps the diagnostic when there is one
    content = exc.to_dict()
    if content.get("detail") is None:
        content["detail"] = exc.message
    return JSONResponse(status_code=status_code, content=content)


def create_app(
    settings: WebSettings | None = None,
    config: Config | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Optional web settings override (uses env vars if None).
        config: Optional analysis config override (uses env vars if None).

    Returns:
        Configured FastAPI app.
    """
    settings = settings or get_web_settings()

    app = FastAPI(
        title="PlanSight",
        description="Heuristic advice and tree view for EXPLAIN (FORMAT JSON) plans.",
        version=__version__,
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        debug=settings.debug,
    )

    app.state.settings = settings
    app.state.service = AnalysisService(config=config)
    app.state.templates = Jinja2Templates(directory=str(settings.templates_dir))

    # ── Mount static files ──────────────────────────────────────────────
    if settings.static_dir.exists():
        app.mount("/static", StaticFiles(directory=str(settings.static_dir)), name="static")

    # ── API routes ──────────────────────────────────────────────────────
    from plansight.web.api import api_router

    app.include_router(api_router)

    # ── Web routes ──────────────────────────────────────────────────────
    from plansight.web.routes import web_router

    app.include_router(web_router)

    # ── Exception handlers ──────────────────────────────────────────────

    @app.exception_handler(ParseError)
    async def parse_error_handler(request: Request, exc: ParseError) -> JSONResponse:
        logger.info("Rejected payload on %s: %s", request.url.path, exc.message)
        return _error_response(400, exc)

    @app.exception_handler(PayloadTooLargeError)
    async def too_large_handler(request: Request, exc: PayloadTooLargeError) -> JSONResponse:
        logger.info("Rejected payload on %s: %s", request.url.path, exc.message)
        return _error_response(413, exc)

    return app
