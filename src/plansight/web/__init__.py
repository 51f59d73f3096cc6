"""HTTP boundary: FastAPI app, JSON API, and the plan input page."""

from plansight.web.app import create_app
from plansight.web.settings import WebSettings, get_web_settings

__all__ = ["create_app", "WebSettings", "get_web_settings"]
