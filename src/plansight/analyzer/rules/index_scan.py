"""
Rule: Index Scan

Notes index and index-only scans. These are usually the access path you
want, so the advice is informational: it confirms which index served
which relation.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from plansight.analyzer.registry import register_rule
from plansight.analyzer.rules.base import Rule
from plansight.parser.models import display_text

if TYPE_CHECKING:
    from plansight.parser.models import PlanNode


@register_rule
class IndexScan(Rule):
    """Report the index used by an index or index-only scan."""

    rule_id = "INDEX_SCAN"
    description = "Index scans are generally efficient"
    node_type_pattern = re.compile(r"index (only )?scan", re.IGNORECASE)

    def check(self, node: "PlanNode") -> str | None:
        if not self.matches_type(node):
            return None

        relation = display_text(node.relation_name) if node.relation_name is not None else "<table>"
        index = display_text(node.index_name) if node.index_name is not None else "<index>"
        return f"Index scan on {relation} using {index}: this is generally efficient."
