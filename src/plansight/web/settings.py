"""
Web settings for the PlanSight HTTP service.

Settings are loaded from environment variables with the PLANSIGHT_WEB_
prefix. The conventional HOST and PORT variables are accepted as
fallbacks, so platform-assigned ports work without extra wiring.

Examples:
    PLANSIGHT_WEB_PORT=8080
    PLANSIGHT_WEB_MAX_PAYLOAD_BYTES=1048576

    # Fallback (used only when the prefixed variable is unset):
    PORT=8080
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from plansight.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

WEB_ROOT = Path(__file__).resolve().parent

_ENV_PREFIX = "PLANSIGHT_WEB_"
# Unprefixed fallbacks, per field
_FALLBACK_KEYS = {"host": "HOST", "port": "PORT"}


class WebSettings(BaseModel):
    """Configuration for the PlanSight web service."""

    # ── Server ──────────────────────────────────────────────────────────
    host: str = Field(default="127.0.0.1", description="Bind address")
    port: int = Field(default=8000, gt=0, lt=65536, description="Bind port")
    debug: bool = Field(default=False, description="Enable debug mode")

    # ── Paths ───────────────────────────────────────────────────────────
    templates_dir: Path = Field(
        default=WEB_ROOT / "templates",
        description="Jinja2 templates directory",
    )
    static_dir: Path = Field(
        default=WEB_ROOT / "static",
        description="Static files directory",
    )

    # ── Limits ──────────────────────────────────────────────────────────
    max_payload_bytes: int = Field(
        default=10 * 1024 * 1024,
        gt=0,
        description="Max request body size (10 MB)",
    )


def get_web_settings() -> WebSettings:
    """
    Load web settings from environment variables.

    Lookup order per field:
    1. PLANSIGHT_WEB_<FIELD>
    2. HOST / PORT (host and port only)

    Raises:
        ConfigurationError: If a variable holds an invalid value
    """
    overrides: dict[str, str] = {}
    for field_name in WebSettings.model_fields:
        canonical_key = f"{_ENV_PREFIX}{field_name.upper()}"
        fallback_key = _FALLBACK_KEYS.get(field_name)

        if canonical_key in os.environ:
            overrides[field_name] = os.environ[canonical_key]
        elif fallback_key and fallback_key in os.environ:
            logger.debug("Using %s for %s", fallback_key, field_name)
            overrides[field_name] = os.environ[fallback_key]

    try:
        return WebSettings(**overrides)  # type: ignore[arg-type]
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first["loc"])
        raise ConfigurationError(
            f"Invalid web setting {key}: {first['msg']}",
            config_key=key,
        ) from e
