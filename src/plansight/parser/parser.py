"""
Payload handling for plan analysis requests.

This module handles:
- Decoding JSON text into Python values
- Unwrapping the single-element array EXPLAIN (FORMAT JSON) returns
- Locating the plan root inside a payload

Error handling philosophy: only undecodable text is an error. Once the
payload is JSON, any shape is accepted and odd shapes simply yield an
empty plan downstream.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from plansight.exceptions import ParseError


def load_payload(content: str | bytes) -> Any:
    """
    Decode a JSON payload.

    Args:
        content: JSON text (str or UTF-8 bytes)

    Returns:
        The decoded value (any JSON type)

    Raises:
        ParseError: If the text is not valid JSON or nests deeper than
            the decoder can handle

    Example:
        >>> load_payload('{"Plan": {"Node Type": "Seq Scan"}}')
        {'Plan': {'Node Type': 'Seq Scan'}}
    """
    if isinstance(content, bytes):
        try:
            content = content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(
                "Payload is not valid UTF-8",
                detail=str(e),
                source="decode",
            ) from e

    if not content.strip():
        raise ParseError("Payload is empty", source="json_decode")

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ParseError(
            "Invalid JSON format",
            detail=f"Line {e.lineno}, column {e.colno}: {e.msg}",
            source="json_decode",
        ) from e
    except RecursionError as e:
        raise ParseError(
            "JSON nested too deeply to decode",
            source="resource_limit",
        ) from e


def _unwrap_array(data: Any) -> Any:
    """
    Unwrap the single-element array that PostgreSQL EXPLAIN returns.

    EXPLAIN (FORMAT JSON) returns: [{"Plan": {...}}]
    We want just: {"Plan": {...}}

    Other lists are returned unchanged.
    """
    if isinstance(data, list) and len(data) == 1 and isinstance(data[0], Mapping):
        return data[0]
    return data


def extract_plan_root(payload: Any) -> Any:
    """
    Locate the plan root inside a payload.

    Lookup order:
    1. payload["Plan"]
    2. payload["plan"]
    3. the payload itself

    Args:
        payload: Decoded JSON payload

    Returns:
        The root plan node candidate. May be any JSON value; the advisor
        and renderer treat non-objects as an empty plan.
    """
    data = _unwrap_array(payload)
    if isinstance(data, Mapping):
        for key in ("Plan", "plan"):
            if key in data:
                return data[key]
    return data
