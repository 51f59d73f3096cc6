"""
Rule: Hash Join

Hash joins build an in-memory hash table over one input. If the table
does not fit in work_mem it is split into batches written to disk.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from plansight.analyzer.registry import register_rule
from plansight.analyzer.rules.base import Rule

if TYPE_CHECKING:
    from plansight.parser.models import PlanNode

HASH_JOIN_ADVICE = (
    "Hash join detected: check that work_mem is large enough for the hash "
    "table so it does not spill to disk in batches."
)


@register_rule
class HashJoin(Rule):
    """Remind to check hash table memory sizing."""

    rule_id = "HASH_JOIN"
    description = "Hash joins need the hash table to fit in work_mem"
    node_type_pattern = re.compile(r"hash join", re.IGNORECASE)

    def check(self, node: "PlanNode") -> str | None:
        if node.hash_join is not None or self.matches_type(node):
            return HASH_JOIN_ADVICE
        return None
