"""
Advisory engine: walk a plan and collect heuristic advice.

For each visited node every enabled rule is evaluated, in registration
order. Messages from the whole walk are then deduplicated, keeping the
first occurrence. The engine never raises on plan content: nodes that
are missing or not objects contribute nothing, and a rule that fails on
a node is logged and skipped.
"""

from __future__ import annotations

import logging
from typing import Any

from plansight.analyzer.models import TRUNCATION_RULE_ID, Advice, dedupe_messages
from plansight.analyzer.registry import get_registry
from plansight.analyzer.rules.base import Rule
from plansight.analyzer.traversal import TruncationReason, WalkEvent, WalkEventKind, walk_plan
from plansight.config import Config, get_config_or_default
from plansight.parser.config import TraversalLimits

# Importing the package registers the built-in rules.
import plansight.analyzer.rules  # noqa: F401

logger = logging.getLogger(__name__)


def truncation_message(event: WalkEvent, limits: TraversalLimits) -> str:
    """Advice text for a truncated walk."""
    if event.reason is TruncationReason.MAX_DEPTH:
        return (
            f"Plan truncated: nodes nested deeper than {limits.max_depth} "
            "levels were not analyzed."
        )
    return f"Plan truncated: only the first {limits.max_nodes} nodes were analyzed."


class Advisor:
    """
    Runs advisory rules over a plan tree.

    Usage:
        advisor = Advisor()
        advisor.advise(plan)            # ["Sequential scan on orders: ...", ...]
        advisor.collect(plan)           # [Advice(rule_id="SEQ_SCAN", ...), ...]

        # Only some rules, tighter limits
        advisor = Advisor(rules=[SeqScan()], limits=TraversalLimits(max_depth=10))
    """

    def __init__(
        self,
        rules: list[Rule] | None = None,
        limits: TraversalLimits | None = None,
        config: Config | None = None,
    ) -> None:
        config = config or get_config_or_default()
        if rules is None:
            rules = [
                rule_cls()
                for rule_cls in get_registry().filter(exclude=config.disabled_rules)
            ]
        self.rules = rules
        self.limits = limits or config.limits

    def collect(self, root: Any) -> list[Advice]:
        """
        Collect every advice record raised on the plan, in walk order.

        Not deduplicated; use advise() for the public message list.
        """
        collected: list[Advice] = []

        for event in walk_plan(root, self.limits):
            if event.kind is WalkEventKind.TRUNCATED:
                collected.append(Advice(
                    rule_id=TRUNCATION_RULE_ID,
                    path=str(event.path),
                    message=truncation_message(event, self.limits),
                ))
                continue
            if event.kind is not WalkEventKind.ENTER:
                continue

            for rule in self.rules:
                try:
                    message = rule.check(event.node)
                except Exception as e:
                    logger.warning(
                        "Rule %s failed at %s: %s: %s",
                        rule.rule_id, event.path, type(e).__name__, e,
                    )
                    continue
                if message:
                    collected.append(Advice(
                        rule_id=rule.rule_id,
                        path=str(event.path),
                        message=message,
                    ))

        return collected

    def advise(self, root: Any) -> list[str]:
        """Deduplicated advice messages in first-occurrence order."""
        return dedupe_messages(self.collect(root))


def advise(root: Any, limits: TraversalLimits | None = None) -> list[str]:
    """
    Produce heuristic advice for a plan tree.

    Args:
        root: Root plan node (any JSON value)
        limits: Traversal limits; defaults to the configured limits, or
            DEFAULT_LIMITS when the configuration is invalid

    Returns:
        Ordered, deduplicated advice strings. Empty for absent or
        non-object roots.

    Example:
        >>> advise({"Node Type": "Seq Scan", "Relation Name": "orders", "Filter": "x > 1"})
        ['Sequential scan on orders: consider an index supporting the filter x > 1.']
    """
    return Advisor(limits=limits).advise(root)
