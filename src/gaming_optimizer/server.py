"""Gaming Optimizer MCP App Server.

FastMCP server exposing the catalog as MCP tools, the dashboard as an MCP
Apps UI resource, and the same dashboard plus its JSON API over HTTP.
Run: gaming-optimizer
"""

from __future__ import annotations

import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from . import get_app_html
from .config import LOG_FORMAT, Settings
from .core.models import to_payload
from .core.store import CatalogStore
from .http_routes import register_routes

logger = logging.getLogger(__name__)

MCP_APP_MIME = "text/html;profile=mcp-app"
APP_RESOURCE_URI = "ui://gaming-optimizer/app"

READ_ONLY = ToolAnnotations(readOnlyHint=True, destructiveHint=False, idempotentHint=True, openWorldHint=False)
TOGGLE = ToolAnnotations(readOnlyHint=False, destructiveHint=False, idempotentHint=False, openWorldHint=False)
BULK = ToolAnnotations(readOnlyHint=False, destructiveHint=False, idempotentHint=True, openWorldHint=False)
RESET = ToolAnnotations(readOnlyHint=False, destructiveHint=True, idempotentHint=True, openWorldHint=False)


def create_server(store: Optional[CatalogStore] = None, settings: Optional[Settings] = None) -> FastMCP:
    """Build a server bound to ``store`` (a freshly seeded one by default)."""
    settings = settings or Settings()
    if store is None:
        store = CatalogStore(protect_essential=settings.protect_essential)

    mcp = FastMCP(
        "Gaming Optimizer",
        instructions="Inspect and toggle simulated startup programs and gaming optimization settings, "
        "and check the resulting optimization score. Changes only affect a mock machine.",
        host=settings.host,
        port=settings.port,
    )

    # ─── MCP Apps UI Resource ────────────────────────────────────────────

    @mcp.resource(APP_RESOURCE_URI, mime_type=MCP_APP_MIME)
    def app_ui() -> str:
        """Gaming Optimizer — score, startup programs, and gaming tweaks."""
        return get_app_html(settings.api_prefix)

    @mcp.tool(annotations=READ_ONLY, meta={"ui": {"resourceUri": APP_RESOURCE_URI}})
    def open_optimizer_app() -> dict:
        """Open the Gaming Optimizer app — score gauge, startup programs, and optimization settings."""
        summary = store.summary()
        return {
            "title": "Gaming Optimizer",
            **to_payload(summary),
            "system_info": to_payload(store.system_info()),
            "assessment": f"Your system is {summary.score.assessment} for gaming ({summary.score.score}%).",
        }

    # ─── Startup programs ────────────────────────────────────────────────

    @mcp.tool(annotations=READ_ONLY)
    def list_startup_programs() -> dict:
        """All simulated startup programs with category, boot impact, and enabled state."""
        programs = store.list_startup_programs()
        enabled = sum(1 for p in programs if p.enabled)
        return {
            "programs": [to_payload(p) for p in programs],
            "count": len(programs),
            "summary": f"{enabled} of {len(programs)} startup programs are enabled.",
        }

    @mcp.tool(annotations=TOGGLE)
    def toggle_startup_program(program_id: str) -> dict:
        """Enable or disable one startup program.

        Args:
            program_id: Program id from list_startup_programs (e.g. '2' for Spotify).
        """
        program = store.toggle_startup_program(program_id)
        if program is None:
            return {"success": False, "error": "Program not found", "program_id": program_id}
        return {"success": True, "program": to_payload(program)}

    @mcp.tool(annotations=BULK)
    def disable_bloatware() -> dict:
        """Disable every startup program classified as bloatware."""
        disabled = store.disable_all_bloatware()
        return {
            "success": True,
            "disabled": [to_payload(p) for p in disabled],
            "summary": f"Disabled {len(disabled)} bloatware startup programs.",
        }

    # ─── Optimization settings ───────────────────────────────────────────

    @mcp.tool(annotations=READ_ONLY)
    def list_optimization_settings() -> dict:
        """All simulated gaming optimization settings, with recommendation flags."""
        settings_list = store.list_optimization_settings()
        pending = sum(1 for s in settings_list if s.recommended and not s.enabled)
        return {
            "settings": [to_payload(s) for s in settings_list],
            "count": len(settings_list),
            "summary": f"{pending} recommended settings are not enabled yet.",
        }

    @mcp.tool(annotations=TOGGLE)
    def toggle_optimization_setting(setting_id: str) -> dict:
        """Enable or disable one optimization setting.

        Args:
            setting_id: Setting id from list_optimization_settings (e.g. 'game-mode').
        """
        return to_payload(store.toggle_optimization_setting(setting_id))

    @mcp.tool(annotations=BULK)
    def apply_recommended_settings() -> dict:
        """Enable every recommended optimization setting that is still off."""
        results = store.apply_recommended_settings()
        return {
            "success": True,
            "results": [to_payload(r) for r in results],
            "summary": f"Enabled {len(results)} recommended settings." if results else "All recommended settings were already enabled.",
        }

    # ─── System & score ──────────────────────────────────────────────────

    @mcp.tool(annotations=READ_ONLY)
    def get_system_info() -> dict:
        """Hardware and OS description of the mock machine."""
        return to_payload(store.system_info())

    @mcp.tool(annotations=READ_ONLY)
    def get_optimization_score() -> dict:
        """Optimization score (0-100): half recommended-settings adoption, half bloatware disabled."""
        breakdown = store.score_breakdown()
        return {**to_payload(breakdown), "summary": f"Score {breakdown.score}%: {breakdown.assessment}."}

    @mcp.tool(annotations=RESET)
    def reset_catalog() -> dict:
        """Restore every startup program and setting to its initial state."""
        store.reset()
        return {"success": True, "score": store.optimization_score()}

    register_routes(mcp, store, settings.api_prefix)
    return mcp

def main():
    """Entry point for the CLI command."""
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    mcp = create_server(settings=settings)
    if settings.transport != "stdio":
        logger.info("Gaming Optimizer dashboard at http://%s:%d/", settings.host, settings.port)
    mcp.run(transport=settings.transport)

if __name__ == "__main__":
    main()
