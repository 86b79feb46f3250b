"""Tests for the FastMCP server wiring."""

from __future__ import annotations

import asyncio
import json

from mcp.server.fastmcp import FastMCP

from gaming_optimizer.config import Settings
from gaming_optimizer.core.store import CatalogStore
from gaming_optimizer.server import create_server

EXPECTED_TOOLS = {
    "open_optimizer_app",
    "list_startup_programs",
    "toggle_startup_program",
    "disable_bloatware",
    "list_optimization_settings",
    "toggle_optimization_setting",
    "apply_recommended_settings",
    "get_system_info",
    "get_optimization_score",
    "reset_catalog",
}


def _call(server: FastMCP, name: str, arguments: dict | None = None) -> dict:
    """Run a tool and decode its JSON payload."""
    result = asyncio.run(server.call_tool(name, arguments or {}))
    if isinstance(result, dict):
        return result["result"] if set(result) == {"result"} else result
    content = result[0] if isinstance(result, tuple) else result
    return json.loads(content[0].text)


def test_all_tools_registered() -> None:
    tools = asyncio.run(create_server(CatalogStore()).list_tools())

    assert {t.name for t in tools} == EXPECTED_TOOLS


def test_read_only_annotations() -> None:
    tools = {t.name: t for t in asyncio.run(create_server(CatalogStore()).list_tools())}

    assert tools["list_startup_programs"].annotations.readOnlyHint is True
    assert tools["get_optimization_score"].annotations.readOnlyHint is True
    assert tools["toggle_startup_program"].annotations.readOnlyHint is False
    assert tools["reset_catalog"].annotations.destructiveHint is True


def test_app_resource_registered() -> None:
    resources = asyncio.run(create_server(CatalogStore()).list_resources())

    assert [str(r.uri) for r in resources] == ["ui://gaming-optimizer/app"]


def test_server_uses_configured_host_and_port() -> None:
    server = create_server(settings=Settings(host="0.0.0.0", port=8123))

    assert server.settings.host == "0.0.0.0"
    assert server.settings.port == 8123


def test_toggle_unknown_program_tool_reports_not_found() -> None:
    store = CatalogStore()
    server = create_server(store)

    payload = _call(server, "toggle_startup_program", {"program_id": "999"})

    assert payload == {"success": False, "error": "Program not found", "program_id": "999"}
    assert all(p.enabled for p in store.list_startup_programs())


def test_toggle_program_tool_returns_updated_entry() -> None:
    server = create_server(CatalogStore())

    payload = _call(server, "toggle_startup_program", {"program_id": "2"})

    assert payload["success"] is True
    assert payload["program"]["id"] == "2"
    assert payload["program"]["enabled"] is False


def test_toggle_setting_tool_uses_wire_field_names() -> None:
    server = create_server(CatalogStore())

    payload = _call(server, "toggle_optimization_setting", {"setting_id": "game-mode"})

    assert payload == {"success": True, "message": "Windows Game Mode has been enabled", "settingId": "game-mode"}


def test_apply_recommended_tool_reports_when_nothing_is_left() -> None:
    store = CatalogStore()
    server = create_server(store)

    first = _call(server, "apply_recommended_settings")
    second = _call(server, "apply_recommended_settings")

    assert len(first["results"]) == 8
    assert first["summary"] == "Enabled 8 recommended settings."
    assert second == {
        "success": True,
        "results": [],
        "summary": "All recommended settings were already enabled.",
    }


def test_reset_catalog_tool_restores_seed_state() -> None:
    store = CatalogStore()
    server = create_server(store)
    store.disable_all_bloatware()
    store.apply_recommended_settings()
    assert store.optimization_score() == 100

    payload = _call(server, "reset_catalog")

    assert payload == {"success": True, "score": 0}
    assert store.optimization_score() == 0
    assert all(p.enabled for p in store.list_startup_programs())


def test_open_app_tool_aggregates_summary_and_system_info() -> None:
    store = CatalogStore()
    server = create_server(store)
    store.disable_all_bloatware()

    payload = _call(server, "open_optimizer_app")

    assert payload["title"] == "Gaming Optimizer"
    assert payload["active_bloatware"] == 0
    assert payload["recommended_pending"] == 8
    assert payload["score"]["score"] == 50
    assert payload["system_info"]["gpu"] == "NVIDIA GeForce RTX 3070"
    assert payload["assessment"] == "Your system is partially optimized for gaming (50%)."
