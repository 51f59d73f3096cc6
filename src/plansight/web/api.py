"""
JSON API for plan analysis.

POST /api/v1/analyze: analyze a plan payload (nothing is stored).
GET  /api/v1/example: the canned example plan.
GET  /healthz       : liveness probe.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request

from plansight import __version__
from plansight.engine import EXAMPLE_PLAN, AnalysisReport, AnalysisService
from plansight.exceptions import PayloadTooLargeError
from plansight.web.settings import WebSettings

api_router = APIRouter()


def get_service(request: Request) -> AnalysisService:
    return request.app.state.service


def get_settings(request: Request) -> WebSettings:
    return request.app.state.settings


async def read_limited_body(request: Request, limit: int) -> bytes:
    """
    Read the request body, enforcing the byte ceiling.

    The declared Content-Length is checked first so oversized uploads are
    refused before they are buffered.

    Raises:
        PayloadTooLargeError: If the body exceeds limit
    """
    declared = request.headers.get("content-length")
    if declared is not None and declared.isdigit() and int(declared) > limit:
        raise PayloadTooLargeError(int(declared), limit)

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise PayloadTooLargeError(len(body), limit)
    return bytes(body)


@api_router.post(
    "/api/v1/analyze",
    response_model=AnalysisReport,
    summary="Analyze an EXPLAIN plan",
    tags=["analyze"],
)
async def analyze(
    request: Request,
    service: AnalysisService = Depends(get_service),
    settings: WebSettings = Depends(get_settings),
) -> AnalysisReport:
    """
    Return advice and an HTML tree for a plan.

    The body may be raw EXPLAIN output (`[{"Plan": {...}}]`), an object
    with a `Plan` or `plan` field, or a bare plan node.
    """
    body = await read_limited_body(request, settings.max_payload_bytes)
    return service.analyze_text(body)


@api_router.get("/api/v1/example", summary="Example plan", tags=["analyze"])
async def example() -> dict[str, Any]:
    return EXAMPLE_PLAN


@api_router.get("/healthz", include_in_schema=False)
async def healthz() -> dict[str, str]:
    return {"status": "ok", "version": __version__}
