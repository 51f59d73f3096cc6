"""
HTML tree renderer for plan trees.

Produces nested, collapsible markup:

    <ul class="plan-tree">
      <li class="plan-node">
        <details open>
          <summary>Aggregate (cost: 1210)</summary>
          <div class="plan-meta">...</div>
          <ul class="plan-children"> ...child <li> entries... </ul>
        </details>
      </li>
    </ul>

Every piece of plan text goes through markupsafe escaping (& < > " '),
so plan content can never inject markup. The renderer never raises:
an absent or non-object root renders as an empty tree.
"""

from __future__ import annotations

from typing import Any

from markupsafe import Markup

from plansight.analyzer.traversal import TruncationReason, WalkEvent, WalkEventKind, walk_plan
from plansight.config import get_config_or_default
from plansight.parser.config import TraversalLimits
from plansight.parser.models import PlanNode, display_text

# Display name and PlanNode attribute, in display order.
METADATA_FIELDS: tuple[tuple[str, str], ...] = (
    ("Relation Name", "relation_name"),
    ("Index Name", "index_name"),
    ("Filter", "filter"),
    ("Sort Key", "sort_key"),
    ("Actual Rows", "actual_rows"),
    ("Actual Time", "actual_time"),
)

DEFAULT_LABEL = "Node"

_TREE_OPEN = Markup('<ul class="plan-tree">')
_TREE_CLOSE = Markup("</ul>")
_CHILDREN_OPEN = Markup('<ul class="plan-children">')
_CHILDREN_CLOSE = Markup("</ul>")
_NODE_OPEN = Markup('<li class="plan-node"><details open><summary>{}</summary>')
_NODE_CLOSE = Markup("</details></li>")
_FIELD_LINE = Markup('<div class="plan-field"><span class="plan-field-name">{}</span>: {}</div>')
_TRUNCATED_LINE = Markup('<li class="plan-truncated">{}</li>')


def format_value(value: Any) -> str:
    """
    Coerce a plan value to display text.

    Integral floats drop the fractional part (1210.0 -> "1210"); the
    items of a top-level list are joined with ", ". Nested values are
    converted whole, and one nested too deeply to print shows as
    UNPRINTABLE.
    """
    if isinstance(value, (list, tuple)):
        return ", ".join(_scalar_text(item) for item in value)
    return _scalar_text(value)


def _scalar_text(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return display_text(value)


def node_label(node: PlanNode) -> str:
    """Summary label: node type plus a cost suffix when cost is known."""
    label = node.type_name or DEFAULT_LABEL
    if node.total_cost is not None:
        label = f"{label} (cost: {format_value(node.total_cost)})"
    return label


def render_metadata(node: PlanNode) -> Markup:
    """Metadata block with one line per truthy display field."""
    lines: list[Markup] = []
    for name, attr in METADATA_FIELDS:
        value = getattr(node, attr)
        if value:
            lines.append(_FIELD_LINE.format(name, format_value(value)))
    return Markup('<div class="plan-meta">{}</div>').format(Markup("").join(lines))


def _truncation_text(event: WalkEvent, limits: TraversalLimits) -> str:
    if event.reason is TruncationReason.MAX_DEPTH:
        return (
            f"{event.skipped} child node(s) not shown: "
            f"depth limit of {limits.max_depth} reached"
        )
    return f"Node limit of {limits.max_nodes} reached: remaining nodes not shown"


class TreeRenderer:
    """
    Renders plan trees as nested collapsible HTML.

    Usage:
        renderer = TreeRenderer(limits=TraversalLimits(max_depth=20))
        html = renderer.render(plan)
    """

    def __init__(self, limits: TraversalLimits | None = None) -> None:
        self.limits = limits or get_config_or_default().limits

    def render(self, root: Any) -> str:
        parts: list[Markup] = [_TREE_OPEN]
        # One flag per open node: has its children <ul> been opened yet
        children_open: list[bool] = []

        def open_children() -> None:
            if children_open and not children_open[-1]:
                parts.append(_CHILDREN_OPEN)
                children_open[-1] = True

        for event in walk_plan(root, self.limits):
            if event.kind is WalkEventKind.ENTER:
                open_children()
                parts.append(_NODE_OPEN.format(node_label(event.node)))
                parts.append(render_metadata(event.node))
                children_open.append(False)
            elif event.kind is WalkEventKind.TRUNCATED:
                open_children()
                parts.append(_TRUNCATED_LINE.format(_truncation_text(event, self.limits)))
            else:
                if children_open.pop():
                    parts.append(_CHILDREN_CLOSE)
                parts.append(_NODE_CLOSE)

        parts.append(_TREE_CLOSE)
        return str(Markup("").join(parts))


def render(root: Any, limits: TraversalLimits | None = None) -> str:
    """
    Render a plan tree as nested collapsible HTML.

    Args:
        root: Root plan node (any JSON value)
        limits: Traversal limits; defaults to the configured limits, or
            DEFAULT_LIMITS when the configuration is invalid

    Returns:
        Markup string wrapped in a single <ul class="plan-tree">
    """
    return TreeRenderer(limits=limits).render(root)
