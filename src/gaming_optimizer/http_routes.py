"""JSON API for the dashboard.

Maps HTTP verbs and paths onto :class:`CatalogStore` operations. The same
handlers can be mounted on a plain Starlette app (see :func:`build_routes`)
or attached to the FastMCP server's HTTP transport (see
:func:`register_routes`).
"""

from __future__ import annotations

import functools
import logging
from typing import Awaitable, Callable

from mcp.server.fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, Response
from starlette.routing import Route

from .app_definition import GamingOptimizerApp
from .core.models import to_payload
from .core.store import CatalogStore

logger = logging.getLogger(__name__)

Endpoint = Callable[[Request], Awaitable[Response]]

PROGRAM_NOT_FOUND = "Program not found"


def _guarded(handler: Endpoint, action: str) -> Endpoint:
    """Turn any unexpected fault in ``handler`` into a logged 500."""

    @functools.wraps(handler)
    async def endpoint(request: Request) -> Response:
        try:
            return await handler(request)
        except Exception as exc:
            logger.error("Failed to %s: %s", action, exc, exc_info=True)
            return JSONResponse({"error": f"Failed to {action}"}, status_code=500)

    return endpoint


class OptimizerApi:
    """Request handlers bound to one catalog store."""

    def __init__(self, store: CatalogStore, prefix: str = "/api"):
        self.store = store
        self.prefix = prefix

    async def dashboard(self, request: Request) -> Response:
        return HTMLResponse(GamingOptimizerApp(api_base=self.prefix).render())

    async def list_startup_programs(self, request: Request) -> Response:
        return JSONResponse([to_payload(p) for p in self.store.list_startup_programs()])

    async def toggle_startup_program(self, request: Request) -> Response:
        program = self.store.toggle_startup_program(request.path_params["program_id"])
        if program is None:
            return JSONResponse({"error": PROGRAM_NOT_FOUND}, status_code=404)
        return JSONResponse(to_payload(program))

    async def disable_bloatware(self, request: Request) -> Response:
        disabled = self.store.disable_all_bloatware()
        return JSONResponse({"success": True, "disabled": [to_payload(p) for p in disabled]})

    async def list_optimization_settings(self, request: Request) -> Response:
        return JSONResponse([to_payload(s) for s in self.store.list_optimization_settings()])

    async def toggle_optimization_setting(self, request: Request) -> Response:
        result = self.store.toggle_optimization_setting(request.path_params["setting_id"])
        return JSONResponse(to_payload(result), status_code=200 if result.success else 404)

    async def apply_recommended(self, request: Request) -> Response:
        results = self.store.apply_recommended_settings()
        return JSONResponse({"success": True, "results": [to_payload(r) for r in results]})

    async def system_info(self, request: Request) -> Response:
        return JSONResponse(to_payload(self.store.system_info()))

    async def optimization_score(self, request: Request) -> Response:
        return JSONResponse({"score": self.store.optimization_score()})

    async def summary(self, request: Request) -> Response:
        return JSONResponse(to_payload(self.store.summary()))

    def endpoints(self) -> list[tuple[str, list[str], Endpoint]]:
        """(path, methods, handler) for every route, API paths prefixed."""
        p = self.prefix
        return [
            ("/", ["GET"], _guarded(self.dashboard, "render dashboard")),
            (f"{p}/startup-programs", ["GET"], _guarded(self.list_startup_programs, "fetch startup programs")),
            (f"{p}/startup-programs/disable-bloatware", ["POST"], _guarded(self.disable_bloatware, "disable bloatware")),
            (f"{p}/startup-programs/{{program_id}}/toggle", ["POST"], _guarded(self.toggle_startup_program, "toggle startup program")),
            (f"{p}/optimization-settings", ["GET"], _guarded(self.list_optimization_settings, "fetch optimization settings")),
            (f"{p}/optimization-settings/apply-recommended", ["POST"], _guarded(self.apply_recommended, "apply recommended settings")),
            (f"{p}/optimization-settings/{{setting_id}}/toggle", ["POST"], _guarded(self.toggle_optimization_setting, "toggle optimization setting")),
            (f"{p}/system-info", ["GET"], _guarded(self.system_info, "fetch system info")),
            (f"{p}/optimization-score", ["GET"], _guarded(self.optimization_score, "calculate optimization score")),
            (f"{p}/summary", ["GET"], _guarded(self.summary, "build catalog summary")),
        ]


def build_routes(store: CatalogStore, prefix: str = "/api") -> list[Route]:
    """Starlette routes for ``store``, for mounting on any Starlette app."""
    return [Route(path, endpoint, methods=methods) for path, methods, endpoint in OptimizerApi(store, prefix).endpoints()]


def register_routes(mcp: FastMCP, store: CatalogStore, prefix: str = "/api") -> None:
    """Attach the dashboard and JSON API to the FastMCP HTTP transports."""
    for path, methods, endpoint in OptimizerApi(store, prefix).endpoints():
        mcp.custom_route(path, methods=methods)(endpoint)
    logger.info("Dashboard API mounted under %s", prefix or "/")
