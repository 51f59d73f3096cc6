"""
Rule registry for centralized rule management.

The registry pattern provides:
- Explicit, ordered control over which rules run
- Testing isolation (register only specific rules)

Rules run in registration order; the order of advice for a single node
follows it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from plansight.analyzer.rules.base import Rule

T = TypeVar("T", bound="Rule")


class RuleRegistry:
    """
    Registry of advisory rules.

    Example:
        # In a rule module:
        @register_rule
        class MyRule(Rule):
            rule_id = "MY_RULE"
            ...

        # In the advisor:
        rules = get_registry().filter(exclude={"SORT_KEYS"})
    """

    def __init__(self) -> None:
        self._rules: dict[str, type[Rule]] = {}

    def register(self, rule_cls: type[T]) -> type[T]:
        """
        Register a rule class. Usable as a decorator.

        Raises:
            ValueError: If a rule with the same ID is already registered
        """
        rule_id = rule_cls.rule_id

        if rule_id in self._rules:
            existing = self._rules[rule_id]
            raise ValueError(
                f"Rule '{rule_id}' already registered by {existing.__module__}.{existing.__name__}. "
                f"Cannot register {rule_cls.__module__}.{rule_cls.__name__}"
            )

        self._rules[rule_id] = rule_cls
        return rule_cls

    def all_ids(self) -> list[str]:
        return list(self._rules.keys())

    def filter(self, exclude: set[str] | frozenset[str] | None = None) -> list[type[Rule]]:
        """
        Get rule classes in registration order.

        Args:
            exclude: Rule IDs to leave out
        """
        return [
            rule_cls
            for rule_id, rule_cls in self._rules.items()
            if exclude is None or rule_id not in exclude
        ]


_registry = RuleRegistry()


def get_registry() -> RuleRegistry:
    """Get the global rule registry."""
    return _registry


def register_rule(rule_cls: type[T]) -> type[T]:
    """Decorator registering a rule with the global registry."""
    return _registry.register(rule_cls)
