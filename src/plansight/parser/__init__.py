"""Plan payload parsing and plan node normalization."""

from plansight.exceptions import ParseError
from plansight.parser.config import DEFAULT_LIMITS, TraversalLimits
from plansight.parser.models import (
    FIELD_SYNONYMS,
    UNPRINTABLE,
    PlanNode,
    child_nodes,
    display_text,
    resolve_field,
)
from plansight.parser.parser import extract_plan_root, load_payload

__all__ = [
    "PlanNode",
    "FIELD_SYNONYMS",
    "UNPRINTABLE",
    "display_text",
    "resolve_field",
    "child_nodes",
    "extract_plan_root",
    "load_payload",
    "ParseError",
    "TraversalLimits",
    "DEFAULT_LIMITS",
]
