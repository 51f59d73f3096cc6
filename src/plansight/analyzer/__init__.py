"""Advisory engine: plan walking, rules, and advice collection."""

from plansight.analyzer.advisor import Advisor, advise
from plansight.analyzer.models import TRUNCATION_RULE_ID, Advice, dedupe_messages
from plansight.analyzer.path import NodePath
from plansight.analyzer.registry import RuleRegistry, get_registry, register_rule
from plansight.analyzer.rules import HashJoin, IndexScan, Rule, SeqScan, SortKeys
from plansight.analyzer.traversal import (
    TruncationReason,
    WalkEvent,
    WalkEventKind,
    iter_nodes,
    walk_plan,
)

__all__ = [
    "Advisor",
    "advise",
    "Advice",
    "dedupe_messages",
    "TRUNCATION_RULE_ID",
    "NodePath",
    "RuleRegistry",
    "get_registry",
    "register_rule",
    "Rule",
    "SeqScan",
    "IndexScan",
    "SortKeys",
    "HashJoin",
    "TruncationReason",
    "WalkEvent",
    "WalkEventKind",
    "iter_nodes",
    "walk_plan",
]
