"""
Configuration system for PlanSight.

Implements 12-factor config principles:
- Environment variables as primary config source
- Optional JSON config file for local development
- Per-rule enable/disable switches

Usage:
    from plansight.config import get_config

    config = get_config()

    # Traversal limits for the advisor and renderer
    limits = config.limits
"""

from __future__ import annotations

import json
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from plansight.exceptions import ConfigurationError
from plansight.parser.config import TraversalLimits

logger = logging.getLogger(__name__)

_ENV_PREFIX = "PLANSIGHT_"


class Config(BaseModel):
    """
    PlanSight configuration.

    Loaded from environment variables and optional config file.
    """

    model_config = ConfigDict(frozen=True)

    max_depth: int = Field(
        default=100,
        gt=0,
        description="Maximum plan depth walked before truncating",
    )
    max_nodes: int = Field(
        default=50_000,
        gt=0,
        description="Maximum plan nodes visited before truncating",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level name for the CLI process",
    )
    disabled_rules: frozenset[str] = Field(
        default_factory=frozenset,
        description="Rule IDs that are skipped by the advisor",
    )

    @property
    def limits(self) -> TraversalLimits:
        """Traversal limits derived from this configuration."""
        return TraversalLimits(max_depth=self.max_depth, max_nodes=self.max_nodes)


def _parse_env_int(key: str, default: int) -> int:
    """Parse integer from environment variable."""
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("Could not parse %s=%s, using %s", key, value, default)
        return default


def _parse_env_list(key: str) -> frozenset[str]:
    """Parse a comma-separated list from environment variable."""
    value = os.environ.get(key, "")
    return frozenset(item.strip().upper() for item in value.split(",") if item.strip())


def _build_config(values: dict[str, Any]) -> Config:
    try:
        return Config(**values)
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first["loc"])
        raise ConfigurationError(
            f"Invalid configuration for {key}: {first['msg']}",
            config_key=key,
        ) from e


def load_config_from_env() -> Config:
    """
    Load configuration from environment variables.

    - PLANSIGHT_MAX_DEPTH=100
    - PLANSIGHT_MAX_NODES=50000
    - PLANSIGHT_LOG_LEVEL=DEBUG
    - PLANSIGHT_DISABLED_RULES=SORT_KEYS,HASH_JOIN

    Raises:
        ConfigurationError: If a value parses but is out of range
    """
    return _build_config({
        "max_depth": _parse_env_int(f"{_ENV_PREFIX}MAX_DEPTH", 100),
        "max_nodes": _parse_env_int(f"{_ENV_PREFIX}MAX_NODES", 50_000),
        "log_level": os.environ.get(f"{_ENV_PREFIX}LOG_LEVEL", "INFO").upper(),
        "disabled_rules": _parse_env_list(f"{_ENV_PREFIX}DISABLED_RULES"),
    })


def load_config_from_file(path: Path) -> Config:
    """
    Load configuration from a JSON file.

    Falls back to environment variables if the file is missing or invalid.
    """
    if not path.exists():
        logger.warning("Config file not found: %s, using environment", path)
        return load_config_from_env()

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if "disabled_rules" in data:
            data["disabled_rules"] = frozenset(r.upper() for r in data["disabled_rules"])
        return _build_config(data)
    except (OSError, ValueError, TypeError, ConfigurationError) as e:
        logger.error("Failed to load config from %s: %s", path, e)
        return load_config_from_env()


@lru_cache(maxsize=1)
def get_config() -> Config:
    """
    Get the global configuration instance.

    Loads from:
    1. PLANSIGHT_CONFIG_FILE environment variable (if set)
    2. Environment variables (default)

    Result is cached for the lifetime of the process.
    """
    config_file = os.environ.get(f"{_ENV_PREFIX}CONFIG_FILE")

    if config_file:
        return load_config_from_file(Path(config_file))

    return load_config_from_env()


def reset_config() -> None:
    """Reset the cached configuration (mainly for testing)."""
    get_config.cache_clear()


def get_config_or_default() -> Config:
    """
    Get the global configuration, or the defaults if it is invalid.

    Used by the advise() and render() entry points, which must not raise
    because of a bad environment value.
    """
    try:
        return get_config()
    except ConfigurationError as e:
        logger.warning("Invalid configuration (%s), using defaults", e.message)
        return Config()
