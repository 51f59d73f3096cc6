"""
Server-rendered page for PlanSight.

A single Jinja2 page: paste plan JSON, analyze it through the API, or
load the canned example. All rendering of results happens in the
browser from the API response.
"""

from __future__ import annotations

import json

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from plansight import __version__
from plansight.engine import EXAMPLE_PLAN

web_router = APIRouter()


@web_router.get("/", response_class=HTMLResponse)
async def index(request: Request) -> HTMLResponse:
    """Plan input page."""
    templates = request.app.state.templates
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "version": __version__,
            "example_json": json.dumps(EXAMPLE_PLAN, indent=2),
        },
    )
