"""
Depth-first plan walker shared by the advisor and the tree renderer.

The walk is iterative (explicit stack) so a 10,000-level chain cannot
exhaust the interpreter stack. It emits a flat event stream:

    ENTER      a node is visited (pre-order)
    TRUNCATED  a limit stopped the walk below or beside the current node
    EXIT       all of a node's visited children have been emitted

Events are balanced: every ENTER has a matching EXIT, even when the node
limit ends the walk early. Values that are not mappings (the root or any
child) are skipped without an event.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from plansight.analyzer.path import NodePath
from plansight.parser.config import DEFAULT_LIMITS, TraversalLimits
from plansight.parser.models import PlanNode

logger = logging.getLogger(__name__)


class WalkEventKind(str, Enum):
    ENTER = "enter"
    EXIT = "exit"
    TRUNCATED = "truncated"


class TruncationReason(str, Enum):
    """Which limit stopped the walk."""

    MAX_DEPTH = "max_depth"
    MAX_NODES = "max_nodes"


@dataclass(frozen=True)
class WalkEvent:
    """
    One step of a plan walk.

    For TRUNCATED events, `path` and `node` identify the node whose
    children were cut off and `skipped` counts the direct children that
    were not visited.
    """

    kind: WalkEventKind
    path: NodePath
    node: PlanNode
    depth: int
    reason: TruncationReason | None = None
    skipped: int = 0


@dataclass
class _Frame:
    path: NodePath
    node: PlanNode
    depth: int
    next_child: int = 0


def _count_nodes(children: list[Any]) -> int:
    return sum(1 for child in children if isinstance(child, Mapping))


def walk_plan(root: Any, limits: TraversalLimits | None = None) -> Iterator[WalkEvent]:
    """
    Walk a raw plan tree depth-first, pre-order.

    Args:
        root: Root plan node (any JSON value; non-mappings yield nothing)
        limits: Depth and node-count ceilings (default DEFAULT_LIMITS)

    Yields:
        WalkEvent instances in document order

    Example:
        for event in walk_plan(plan):
            if event.kind is WalkEventKind.ENTER:
                print(event.path, event.node.type_name)
    """
    limits = limits or DEFAULT_LIMITS
    if not isinstance(root, Mapping):
        return

    stack: list[_Frame] = []
    visited = 0

    def push(raw: Mapping[str, Any], path: NodePath, depth: int) -> Iterator[WalkEvent]:
        nonlocal visited
        visited += 1
        frame = _Frame(path, PlanNode.from_raw(raw), depth)
        stack.append(frame)
        yield WalkEvent(WalkEventKind.ENTER, frame.path, frame.node, depth)

        if depth >= limits.max_depth:
            hidden = _count_nodes(frame.node.plans)
            frame.next_child = len(frame.node.plans)
            if hidden:
                logger.warning(
                    "Plan truncated at %s: depth limit %d reached, %d child node(s) skipped",
                    path, limits.max_depth, hidden,
                )
                yield WalkEvent(
                    WalkEventKind.TRUNCATED, frame.path, frame.node, depth,
                    reason=TruncationReason.MAX_DEPTH, skipped=hidden,
                )

    yield from push(root, NodePath.root(), 1)

    while stack:
        frame = stack[-1]
        children = frame.node.plans

        if frame.next_child >= len(children):
            stack.pop()
            yield WalkEvent(WalkEventKind.EXIT, frame.path, frame.node, frame.depth)
            continue

        index = frame.next_child
        frame.next_child += 1
        raw = children[index]
        if not isinstance(raw, Mapping):
            continue

        if visited >= limits.max_nodes:
            hidden = _count_nodes(children[index:])
            logger.warning(
                "Plan truncated at %s: node limit %d reached",
                frame.path, limits.max_nodes,
            )
            yield WalkEvent(
                WalkEventKind.TRUNCATED, frame.path, frame.node, frame.depth,
                reason=TruncationReason.MAX_NODES, skipped=hidden,
            )
            while stack:
                closing = stack.pop()
                yield WalkEvent(WalkEventKind.EXIT, closing.path, closing.node, closing.depth)
            return

        yield from push(raw, frame.path.child(index), frame.depth + 1)


def iter_nodes(root: Any, limits: TraversalLimits | None = None) -> Iterator[tuple[NodePath, PlanNode]]:
    """Iterate (path, node) pairs in pre-order, honoring the limits."""
    for event in walk_plan(root, limits):
        if event.kind is WalkEventKind.ENTER:
            yield event.path, event.node
