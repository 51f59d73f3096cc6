"""
Package-level exception hierarchy for PlanSight.

All exceptions inherit from PlanSightError, enabling:
- Catching all PlanSight errors with a single except clause
- Context fields for debugging (source, config_key, size limits)
- Structured serialization via to_dict() for JSON error responses

The advisory engine and the tree renderer never raise: malformed plan
nodes simply contribute nothing. These exceptions belong to the edges
(payload decoding, configuration, the HTTP boundary).

Hierarchy:
    PlanSightError
    ├── ParseError            – Payload text is not usable JSON
    ├── PayloadTooLargeError  – Request body exceeds the size ceiling
    └── ConfigurationError    – Invalid configuration value
"""

from __future__ import annotations

from typing import Any


class PlanSightError(Exception):
    """
    Base exception for all PlanSight errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON error responses."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
        }


# ── Parse Errors ─────────────────────────────────────────────────────────


class ParseError(PlanSightError):
    """
    Failed to decode a plan payload.

    Attributes:
        detail: Technical details for debugging (optional).
        source: Where the error occurred (e.g., "json_decode", "type_check").
    """

    def __init__(
        self,
        message: str,
        *,
        detail: str | None = None,
        source: str = "unknown",
    ) -> None:
        self.detail = detail
        self.source = source
        super().__init__(message)

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message}\n\nDetails: {self.detail}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["detail"] = self.detail
        result["source"] = self.source
        return result


class PayloadTooLargeError(PlanSightError):
    """
    Request body exceeds the configured size ceiling.

    Raised at the transport boundary, before the payload is decoded.
    """

    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(f"Payload too large: {size:,} bytes (max {limit:,})")

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["size"] = self.size
        result["limit"] = self.limit
        return result


# ── Configuration Errors ─────────────────────────────────────────────────


class ConfigurationError(PlanSightError):
    """
    Error in PlanSight configuration.

    Attributes:
        config_key: The configuration key that caused the error (if known).
    """

    def __init__(self, message: str, config_key: str | None = None) -> None:
        self.config_key = config_key
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["config_key"] = self.config_key
        return result
