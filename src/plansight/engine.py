"""
AnalysisService - orchestration layer for PlanSight.

Single entry point for analyzing a plan payload: the web API and any
other delivery mechanism call this rather than wiring the advisor and
renderer themselves.

Usage:
    from plansight.engine import AnalysisService

    service = AnalysisService()

    # From an already-decoded payload
    report = service.analyze({"Plan": {...}})

    # From raw JSON text
    report = service.analyze_text('{"Plan": {...}}')

    report.advice   # ["Sequential scan on orders: ...", ...]
    report.html     # '<ul class="plan-tree">...</ul>'
"""

from __future__ import annotations

import logging
import time
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from plansight.analyzer.advisor import Advisor
from plansight.config import Config, get_config
from plansight.output.html_tree import TreeRenderer
from plansight.parser.parser import extract_plan_root, load_payload

logger = logging.getLogger(__name__)

# Canned example shown by the web page's "Load example" button.
EXAMPLE_PLAN: dict[str, Any] = {
    "Plan": {
        "Node Type": "Aggregate",
        "Total Cost": 1210,
        "Plans": [
            {
                "Node Type": "Seq Scan",
                "Relation Name": "orders",
                "Filter": "status = 'open'",
                "Total Cost": 1200,
            },
            {
                "Node Type": "Index Scan",
                "Relation Name": "users",
                "Index Name": "users_pkey",
                "Total Cost": 10,
            },
        ],
    }
}


class AnalysisReport(BaseModel):
    """Advice and rendered tree for one plan."""

    model_config = ConfigDict(frozen=True)

    advice: list[str] = Field(
        default_factory=list,
        description="Ordered, deduplicated advice messages",
    )
    html: str = Field(..., description="Collapsible HTML rendering of the plan tree")


class AnalysisService:
    """
    Runs the advisor and the renderer on the same plan root.

    Stateless apart from its configuration; safe to share across requests.
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or get_config()
        self._advisor = Advisor(config=self.config)
        self._renderer = TreeRenderer(limits=self.config.limits)

    def analyze(self, payload: Any) -> AnalysisReport:
        """
        Analyze a decoded payload.

        The plan root is payload["Plan"], else payload["plan"], else the
        payload itself. Never raises on payload shape.
        """
        started = time.perf_counter()
        root = extract_plan_root(payload)

        report = AnalysisReport(
            advice=self._advisor.advise(root),
            html=self._renderer.render(root),
        )

        logger.debug(
            "Analyzed plan: %d advice item(s) in %.1fms",
            len(report.advice),
            (time.perf_counter() - started) * 1000,
        )
        return report

    def analyze_text(self, content: str | bytes) -> AnalysisReport:
        """
        Decode JSON text and analyze it.

        Raises:
            ParseError: If content is not valid JSON
        """
        return self.analyze(load_payload(content))
