"""PlanSight - heuristic advice and tree view for query execution plans."""

__version__ = "0.1.0"
__license__ = "MIT"

# Exception hierarchy (import first so other modules can use it)
from plansight.exceptions import (
    PlanSightError,
    ParseError,
    PayloadTooLargeError,
    ConfigurationError,
)

# Public API exports
from plansight.analyzer import Advice, Advisor, advise
from plansight.config import Config, get_config
from plansight.engine import AnalysisReport, AnalysisService
from plansight.output import render
from plansight.parser import PlanNode, TraversalLimits, extract_plan_root, load_payload

__all__ = [
    # Exception hierarchy
    "PlanSightError",
    "ParseError",
    "PayloadTooLargeError",
    "ConfigurationError",
    # Core transforms
    "advise",
    "render",
    "Advisor",
    "Advice",
    # Payload handling
    "PlanNode",
    "TraversalLimits",
    "extract_plan_root",
    "load_payload",
    # Orchestration
    "AnalysisReport",
    "AnalysisService",
    # Configuration
    "Config",
    "get_config",
    # Metadata
    "__version__",
    "__license__",
]
