"""
Plan node record for EXPLAIN (FORMAT JSON) trees.

PostgreSQL emits "Title Case" keys ("Node Type", "Relation Name"), while
hand-written or tool-converted plans often use camelCase ("nodeType",
"relation"). Each logical field has an explicit, ordered list of
candidate keys; the first one holding a present value wins.

A value is present when the key exists and the value is neither None
nor the empty string. Zero and False are present.

PlanNode is a flat record: children stay raw in `plans` and are walked
by plansight.analyzer.traversal, so building a node never recurses into
its subtree.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Ordered candidate keys per logical field.
FIELD_SYNONYMS: dict[str, tuple[str, ...]] = {
    "node_type": ("Node Type", "nodeType", "node_type"),
    "relation_name": ("Relation Name", "relation", "relationName"),
    "filter": ("Filter", "filter"),
    "index_name": ("Index Name", "indexName", "index"),
    "sort_key": ("Sort Key", "Sort Keys", "sortKey", "sortKeys"),
    "total_cost": ("Total Cost", "Cost", "cost"),
    "actual_rows": ("Actual Rows", "actualRows"),
    "actual_time": ("Actual Time", "Actual Total Time", "actualTime"),
    "hash_join": ("Hash Join", "hashJoin"),
    "plans": ("Plans", "plans"),
}


# Shown in place of a value that nests too deeply to convert to text.
UNPRINTABLE = "<value>"


def display_text(value: Any) -> str:
    """
    Convert a raw plan value to text without letting deep nesting escape.

    A JSON value nested a few thousand levels deep makes str() raise
    RecursionError; such values become UNPRINTABLE.
    """
    try:
        return str(value)
    except RecursionError:
        return UNPRINTABLE


def is_present(value: Any) -> bool:
    """Check whether a raw value counts as present."""
    return value is not None and value != ""


def resolve_field(raw: Mapping[str, Any], field_name: str, default: Any = None) -> Any:
    """
    Resolve a logical field against its candidate keys.

    Args:
        raw: A plan node mapping
        field_name: Logical field name (a key of FIELD_SYNONYMS)
        default: Returned when no candidate key holds a present value

    Returns:
        The first present value, or default
    """
    for key in FIELD_SYNONYMS[field_name]:
        value = raw.get(key)
        if is_present(value):
            return value
    return default


def child_nodes(raw: Any) -> list[Any]:
    """
    Get the raw children sequence of a plan node.

    Anything other than a list (including a missing key) means no children.
    """
    if not isinstance(raw, Mapping):
        return []
    plans = resolve_field(raw, "plans")
    if isinstance(plans, list):
        return plans
    return []


class PlanNode(BaseModel):
    """
    One operator in a query plan, with every field optional.

    Unknown keys are kept in model_extra under their original names, so
    genuinely unfamiliar plan shapes pass through without failure.

    Usage:
        node = PlanNode.from_raw({"nodeType": "Seq Scan", "relation": "orders"})
        node.node_type        # "Seq Scan"
        node.relation_name    # "orders"
    """

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
    )

    node_type: Any = Field(
        default=None,
        description="Operator kind (e.g., 'Seq Scan', 'Hash Join')",
    )

    relation_name: Any = Field(
        default=None,
        description="Table name for scan nodes",
    )

    filter: Any = Field(
        default=None,
        description="Filter condition applied to rows",
    )

    index_name: Any = Field(
        default=None,
        description="Index name for index scan nodes",
    )

    sort_key: Any = Field(
        default=None,
        description="Sort key(s), a string or a list of strings",
    )

    total_cost: Any = Field(
        default=None,
        description="Estimated total cost",
    )

    actual_rows: Any = Field(
        default=None,
        description="Actual number of rows returned (ANALYZE only)",
    )

    actual_time: Any = Field(
        default=None,
        description="Actual time in ms (ANALYZE only)",
    )

    hash_join: Any = Field(
        default=None,
        description="Hash join marker field",
    )

    plans: list[Any] = Field(
        default_factory=list,
        description="Raw child plan nodes (not validated here)",
    )

    @model_validator(mode="before")
    @classmethod
    def _resolve_synonyms(cls, data: Any) -> Any:
        """Map candidate keys onto canonical field names."""
        if not isinstance(data, Mapping):
            return {}

        consumed = {key for keys in FIELD_SYNONYMS.values() for key in keys}
        consumed.update(FIELD_SYNONYMS)
        resolved: dict[str, Any] = {
            str(key): value for key, value in data.items() if key not in consumed
        }
        for field_name in FIELD_SYNONYMS:
            value = resolve_field(data, field_name)
            if value is not None:
                resolved[field_name] = value
        resolved["plans"] = child_nodes(data)
        return resolved

    @classmethod
    def from_raw(cls, raw: Any) -> "PlanNode":
        """Build a node from any JSON-shaped value; non-mappings become empty nodes."""
        return cls.model_validate(raw if isinstance(raw, Mapping) else {})

    @property
    def type_name(self) -> str:
        """Node type as a string, empty when absent."""
        if self.node_type is None:
            return ""
        return display_text(self.node_type)

    @property
    def extras(self) -> dict[str, Any]:
        """Fields with no logical mapping, under their original keys."""
        return dict(self.model_extra or {})
