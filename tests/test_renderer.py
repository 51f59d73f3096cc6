"""
Tests for the HTML tree renderer.

Test categories:
- Labels and metadata lines
- Nesting structure (root wrapper vs per-node child lists)
- Escaping of markup-significant characters
- Totality and truncation markers
"""

from __future__ import annotations

import re
from typing import Any

import pytest

from conftest import make_chain, make_nested_dict, make_nested_list
from plansight.output import format_value, node_label, render
from plansight.parser import UNPRINTABLE
from plansight.parser import PlanNode, TraversalLimits

EMPTY_TREE = '<ul class="plan-tree"></ul>'


def summaries(html: str) -> list[str]:
    return re.findall(r"<summary>(.*?)</summary>", html)


def field_lines(html: str) -> list[str]:
    return re.findall(
        r'<div class="plan-field"><span class="plan-field-name">(.*?)</span>: (.*?)</div>',
        html,
    )


class TestLabels:

    def test_type_and_cost(self) -> None:
        assert node_label(PlanNode.from_raw({"Node Type": "Aggregate", "Total Cost": 1210})) == "Aggregate (cost: 1210)"

    def test_integral_float_cost(self) -> None:
        assert node_label(PlanNode.from_raw({"Node Type": "Sort", "Total Cost": 2342.0})) == "Sort (cost: 2342)"

    def test_fractional_cost(self) -> None:
        assert node_label(PlanNode.from_raw({"Node Type": "Sort", "Total Cost": 2342.42})) == "Sort (cost: 2342.42)"

    def test_cost_fallback_keys(self) -> None:
        assert node_label(PlanNode.from_raw({"Node Type": "Hash", "Cost": 18})) == "Hash (cost: 18)"
        assert node_label(PlanNode.from_raw({"nodeType": "Hash", "cost": "18.5"})) == "Hash (cost: 18.5)"

    def test_zero_cost_is_shown(self) -> None:
        assert node_label(PlanNode.from_raw({"Node Type": "Result", "Total Cost": 0})) == "Result (cost: 0)"

    def test_default_label(self) -> None:
        assert node_label(PlanNode.from_raw({})) == "Node"


class TestFormatValue:

    @pytest.mark.parametrize("value, expected", [
        (3, "3"),
        (2.75, "2.75"),
        (10.0, "10"),
        ("orders", "orders"),
        (["a", "b"], "a, b"),
        (True, "True"),
    ])
    def test_format(self, value: Any, expected: str) -> None:
        assert format_value(value) == expected


class TestRender:

    def test_scenario(self, scenario_plan: dict[str, Any]) -> None:
        html = render(scenario_plan)

        assert summaries(html) == [
            "Aggregate (cost: 1210)",
            "Seq Scan (cost: 1200)",
            "Index Scan (cost: 10)",
        ]
        assert html.count("<details open>") == 3
        assert html.count('<ul class="plan-children">') == 1
        assert html.startswith('<ul class="plan-tree"><li class="plan-node">')
        assert html.endswith("</details></li></ul>")

    def test_children_nested_inside_parent(self, scenario_plan: dict[str, Any]) -> None:
        html = render(scenario_plan)

        children_start = html.index('<ul class="plan-children">')
        assert html.index("Aggregate (cost: 1210)") < children_start
        assert children_start < html.index("Seq Scan (cost: 1200)")
        assert html.index("Seq Scan (cost: 1200)") < html.index("Index Scan (cost: 10)")

    def test_metadata_order_and_values(self) -> None:
        html = render({
            "Node Type": "Sort",
            "Actual Time": 2.5,
            "Sort Key": ["a", "b"],
            "Filter": "x > 1",
            "Index Name": "idx",
            "Relation Name": "t",
            "Actual Rows": 12,
            "Plan Width": 44,
        })

        assert field_lines(html) == [
            ("Relation Name", "t"),
            ("Index Name", "idx"),
            ("Filter", "x &gt; 1"),
            ("Sort Key", "a, b"),
            ("Actual Rows", "12"),
            ("Actual Time", "2.5"),
        ]

    def test_falsy_metadata_is_omitted(self) -> None:
        html = render({"Node Type": "Seq Scan", "Actual Rows": 0, "Filter": "", "Sort Key": []})
        assert field_lines(html) == []

    def test_camel_case_metadata(self, camel_case_payload: dict[str, Any]) -> None:
        html = render(camel_case_payload["plan"])

        assert summaries(html) == [
            "Nested Loop (cost: 88.5)",
            "Index Only Scan (cost: 4.2)",
            "Seq Scan (cost: 80.1)",
        ]
        assert ("Actual Rows", "3") in field_lines(html)
        assert ("Actual Time", "2.75") in field_lines(html)

    def test_analyze_total_time_fallback(self, analyze_output: list[Any]) -> None:
        html = render(analyze_output[0]["Plan"])
        assert ("Actual Time", "39.912") in field_lines(html)

    def test_bare_node(self) -> None:
        html = render({"Something Else": 1})

        assert summaries(html) == ["Node"]
        assert field_lines(html) == []
        assert '<div class="plan-meta"></div>' in html
        assert "plan-children" not in html

    def test_idempotent(self, analyze_output: list[Any]) -> None:
        root = analyze_output[0]["Plan"]
        assert render(root) == render(root)


class TestEscaping:

    def test_filter_characters_are_escaped(self) -> None:
        html = render({
            "Node Type": "Seq Scan",
            "Relation Name": "orders",
            "Filter": "status = 'open' AND note <> \"<b>&x</b>\"",
        })

        assert "<b>" not in html
        assert "'open'" not in html
        assert '"<b>' not in html
        assert "&#39;open&#39;" in html
        assert "&lt;&gt;" in html
        assert "&#34;&lt;b&gt;&amp;x&lt;/b&gt;&#34;" in html

    def test_label_is_escaped(self) -> None:
        html = render({"Node Type": "<script>alert(1)</script>", "Total Cost": "1 & 2"})

        assert "<script>" not in html
        assert summaries(html) == ["&lt;script&gt;alert(1)&lt;/script&gt; (cost: 1 &amp; 2)"]

    def test_sort_key_items_are_escaped(self) -> None:
        html = render({"Node Type": "Sort", "Sort Key": ["a<b", "c'd"]})
        assert ("Sort Key", "a&lt;b, c&#39;d") in field_lines(html)


class TestRenderTotality:

    @pytest.mark.parametrize("root", [None, [], "Seq Scan", 0, 1.5, False])
    def test_absent_root(self, root: Any) -> None:
        assert render(root) == EMPTY_TREE

    def test_empty_object_renders_default_node(self) -> None:
        assert summaries(render({})) == ["Node"]

    def test_odd_children_are_skipped(self) -> None:
        html = render({"Node Type": "Append", "Plans": [None, 3, {"Node Type": "Result"}]})
        assert summaries(html) == ["Append", "Result"]

    def test_empty_children_list(self) -> None:
        assert "plan-children" not in render({"Node Type": "Append", "Plans": []})

    def test_deep_chain_is_truncated(self) -> None:
        html = render(make_chain(10_000))

        assert html.count("<details open>") == 100
        assert html.count('<li class="plan-truncated">') == 1
        assert "1 child node(s) not shown: depth limit of 100 reached" in html
        assert html.count("<li") == html.count("</li>")
        assert html.count("<ul") == html.count("</ul>")

    def test_deep_chain_within_raised_limit(self) -> None:
        limits = TraversalLimits(max_depth=10_000, max_nodes=10_000)
        html = render(make_chain(10_000), limits=limits)

        assert html.count("<details open>") == 10_000
        assert "plan-truncated" not in html

    def test_wide_fan_out(self) -> None:
        root = {"Node Type": "Append", "Plans": [{"Node Type": "Result"}] * 10_000}
        html = render(root)

        assert html.count("<details open>") == 10_001
        assert html.count('<ul class="plan-children">') == 1

    def test_node_limit_marker(self) -> None:
        root = {"Node Type": "Append", "Plans": [{"Node Type": "Result"}] * 10}
        html = render(root, limits=TraversalLimits(max_nodes=4))

        assert html.count("<details open>") == 4
        assert "Node limit of 4 reached: remaining nodes not shown" in html
        assert html.count("<ul") == html.count("</ul>")

    def test_invalid_env_config_uses_default_limits(
        self, scenario_plan: dict[str, Any], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PLANSIGHT_MAX_DEPTH", "0")
        assert len(summaries(render(scenario_plan))) == 3


class TestDeeplyNestedValues:
    """Field values nested far deeper than the interpreter stack."""

    def test_nested_list_is_not_flattened(self) -> None:
        assert format_value([["a", "b"], "c"]) == "['a', 'b'], c"

    def test_deep_sort_key(self) -> None:
        html = render({"Node Type": "Sort", "Sort Key": make_nested_list(5_000)})

        assert summaries(html) == ["Sort"]
        assert [name for name, _value in field_lines(html)] == ["Sort Key"]

    def test_deep_relation_name(self) -> None:
        html = render({"Node Type": "Seq Scan", "Relation Name": make_nested_dict(100_000)})

        assert summaries(html) == ["Seq Scan"]
        assert [name for name, _value in field_lines(html)] == ["Relation Name"]

    def test_deep_node_type(self) -> None:
        html = render({"Node Type": make_nested_dict(100_000), "Total Cost": 5})
        assert len(summaries(html)) == 1

    def test_unprintable_placeholder(self) -> None:
        value = format_value(make_nested_dict(100_000))
        assert value == UNPRINTABLE or value.startswith("{'inner': ")
