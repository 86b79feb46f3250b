"""Gaming Optimizer MCP App Server.

Inspect and toggle simulated startup programs and gaming tweaks on a mock
machine, and track the resulting optimization score. Nothing is applied to
the real operating system.
"""

__version__ = "0.1.0"

from .app_definition import GamingOptimizerApp


def get_app_html(api_base: str = "/api") -> str:
    """Return the dashboard HTML. Re-renders each call for hot reload."""
    return GamingOptimizerApp(api_base=api_base).render()
