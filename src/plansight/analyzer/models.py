"""
Data models for advisory output.

Advice is what rules produce: a message tied to the rule that raised it
and the plan location that triggered it. The public advise() contract
returns only the messages; the records are kept for callers that want
to show where each message came from.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Rule ID used for truncation markers (no rule class backs it).
TRUNCATION_RULE_ID = "PLAN_TRUNCATED"


class Advice(BaseModel):
    """
    A single advisory raised on a plan node.

    Example:
        Advice(
            rule_id="SEQ_SCAN",
            path="Plan → Plans[0]",
            message="Sequential scan on orders: consider an index ...",
        )
    """

    model_config = ConfigDict(frozen=True)

    rule_id: str = Field(..., description="Rule that produced the advice (UPPER_SNAKE_CASE)")
    path: str = Field(..., description="Location of the triggering node")
    message: str = Field(..., min_length=1, description="Human-readable advice")


def dedupe_messages(advice: list[Advice]) -> list[str]:
    """
    Collapse advice to unique messages, keeping first-occurrence order.

    Equality is exact string equality: two nodes producing identical text
    yield a single entry.
    """
    return list(dict.fromkeys(item.message for item in advice))
