"""
Rule: Sort Keys

Any node carrying sort keys performs an explicit ordering step. An index
whose column order matches the keys can deliver rows pre-sorted.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from plansight.analyzer.registry import register_rule
from plansight.analyzer.rules.base import Rule
from plansight.parser.models import UNPRINTABLE

if TYPE_CHECKING:
    from plansight.parser.models import PlanNode


def _keys_text(keys: Any) -> str:
    try:
        return json.dumps(keys, default=str, ensure_ascii=False)
    except RecursionError:
        return UNPRINTABLE


@register_rule
class SortKeys(Rule):
    """Suggest index-assisted ordering for nodes with sort keys."""

    rule_id = "SORT_KEYS"
    description = "Explicit sorts may be avoidable with a matching index"

    def check(self, node: "PlanNode") -> str | None:
        if not node.sort_key:
            return None

        return (
            f"Sort on {_keys_text(node.sort_key)}: an index matching this "
            "ordering can avoid the explicit sort."
        )
