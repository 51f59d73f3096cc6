"""
Entry point for running PlanSight directly.

Usage:
    python -m plansight serve --port 8080
"""

from plansight.cli.main import app

if __name__ == "__main__":
    app()
