"""
Base class for advisory rules.

All rules inherit from Rule and implement check(). A rule looks at one
normalized plan node and returns an advice message or None. Rules are
evaluated independently: several may fire on the same node.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from plansight.parser.models import PlanNode


class Rule(ABC):
    """
    Abstract base class for advisory rules.

    Rules should be:
    - Deterministic: Same node always produces the same message
    - Total: Any PlanNode, however sparse, is acceptable input
    - Focused: One rule, one pattern

    Attributes:
        rule_id: Unique identifier, UPPER_SNAKE_CASE (e.g., "SEQ_SCAN")
        description: One-line description for documentation

    Example:
        @register_rule
        class SeqScan(Rule):
            rule_id = "SEQ_SCAN"
            node_type_pattern = re.compile(r"seq scan", re.IGNORECASE)

            def check(self, node):
                if not self.matches_type(node):
                    return None
                return f"Sequential scan on {node.relation_name}"
    """

    rule_id: str
    description: str = ""

    # Case-insensitive pattern searched within the node type, if any
    node_type_pattern: re.Pattern[str] | None = None

    def matches_type(self, node: "PlanNode") -> bool:
        """Check the node type against node_type_pattern."""
        if self.node_type_pattern is None:
            return False
        return self.node_type_pattern.search(node.type_name) is not None

    @abstractmethod
    def check(self, node: "PlanNode") -> str | None:
        """
        Evaluate the rule on one node.

        Args:
            node: Normalized plan node

        Returns:
            Advice message, or None if the rule does not apply
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rule_id={self.rule_id!r})"
