"""Command-line interface."""

from plansight.cli.main import app

__all__ = ["app"]
