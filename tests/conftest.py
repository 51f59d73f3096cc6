"""Shared fixtures: environment isolation and plan fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from plansight.config import reset_config

FIXTURES_DIR = Path(__file__).parent / "fixtures"

MANAGED_ENV_VARS = (
    "PLANSIGHT_CONFIG_FILE",
    "PLANSIGHT_MAX_DEPTH",
    "PLANSIGHT_MAX_NODES",
    "PLANSIGHT_LOG_LEVEL",
    "PLANSIGHT_DISABLED_RULES",
    "PLANSIGHT_WEB_HOST",
    "PLANSIGHT_WEB_PORT",
    "PLANSIGHT_WEB_DEBUG",
    "PLANSIGHT_WEB_MAX_PAYLOAD_BYTES",
    "HOST",
    "PORT",
)


def load_fixture(name: str) -> Any:
    """Load a JSON fixture file."""
    path = FIXTURES_DIR / f"{name}.json"
    return json.loads(path.read_text())


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> Any:
    """
    Clear PlanSight environment variables and the cached config.

    setenv before delenv makes monkeypatch restore the original state even
    when code under test writes these variables itself.
    """
    for name in MANAGED_ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def scenario_plan() -> dict[str, Any]:
    """Aggregate over a Seq Scan on orders and an Index Scan on users."""
    return load_fixture("aggregate_seq_index")["Plan"]


@pytest.fixture
def analyze_output() -> list[Any]:
    """Raw EXPLAIN (ANALYZE, FORMAT JSON) output: Sort over a Hash Join."""
    return load_fixture("hash_join_sort_analyze")


@pytest.fixture
def camel_case_payload() -> dict[str, Any]:
    """Plan using camelCase keys under a lowercase 'plan' field."""
    return load_fixture("camel_case_plan")


def make_chain(depth: int, leaf: dict[str, Any] | None = None) -> dict[str, Any]:
    """Build a single-child chain of `depth` nodes without recursion."""
    root: dict[str, Any] = {"Node Type": "Result"}
    node = root
    for _ in range(depth - 2):
        child: dict[str, Any] = {"Node Type": "Result"}
        node["Plans"] = [child]
        node = child
    if depth > 1:
        node["Plans"] = [leaf or {"Node Type": "Result"}]
    return root


def make_nested_list(depth: int, leaf: Any = "created_at") -> Any:
    """Wrap `leaf` in `depth` single-item lists."""
    value = leaf
    for _ in range(depth):
        value = [value]
    return value


def make_nested_dict(depth: int, leaf: Any = "orders") -> Any:
    """Wrap `leaf` in `depth` single-key objects."""
    value = leaf
    for _ in range(depth):
        value = {"inner": value}
    return value
