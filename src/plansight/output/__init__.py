"""
Output module - separates rendering from analysis.

Design principle: Presentation ≠ domain logic.

Usage:
    from plansight.output import render

    html = render(plan)
"""

from plansight.output.html_tree import (
    METADATA_FIELDS,
    TreeRenderer,
    format_value,
    node_label,
    render,
)

__all__ = [
    "METADATA_FIELDS",
    "TreeRenderer",
    "format_value",
    "node_label",
    "render",
]
