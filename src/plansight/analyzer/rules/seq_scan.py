"""
Rule: Sequential Scan

Flags sequential scans, which read every row of the relation. When the
scan carries a filter, an index on the filtered columns usually lets the
planner read only the matching rows instead.
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
class SeqScan(Rule):
    """Suggest an index for the filter of a sequential scan."""

    rule_id = "SEQ_SCAN"
    description = "Sequential scans read the whole relation; index the filter predicate"
    node_type_pattern = re.compile(r"seq scan", re.IGNORECASE)

    def check(self, node: "PlanNode") -> str | None:
        if not self.matches_type(node):
            return None

        relation = display_text(node.relation_name) if node.relation_name is not None else "table"
        predicate = display_text(node.filter) if node.filter is not None else "<unknown>"
        return (
            f"Sequential scan on {relation}: consider an index supporting "
            f"the filter {predicate}."
        )
