"""Runtime configuration from environment variables.

Read once at startup by :func:`Settings.from_env`; everything else takes a
``Settings`` instance so tests never depend on the process environment.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
DEFAULT_API_PREFIX = "/api"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_TRANSPORT = "streamable-http"

TRANSPORTS = ("streamable-http", "sse", "stdio")
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class Settings(BaseModel):
    """Server settings."""

    host: str = DEFAULT_HOST
    port: int = Field(DEFAULT_PORT, ge=1, le=65535)
    api_prefix: str = DEFAULT_API_PREFIX
    log_level: str = DEFAULT_LOG_LEVEL
    transport: str = DEFAULT_TRANSPORT
    protect_essential: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        env = os.environ if environ is None else environ

        port_raw = env.get("PORT", str(DEFAULT_PORT))
        try:
            port = int(port_raw)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {port_raw!r}") from None
        if not 1 <= port <= 65535:
            raise ValueError(f"PORT must be between 1 and 65535, got {port}")

        log_level = env.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"LOG_LEVEL {log_level!r} is not a logging level")

        transport = env.get("MCP_TRANSPORT", DEFAULT_TRANSPORT).lower()
        if transport not in TRANSPORTS:
            raise ValueError(f"MCP_TRANSPORT must be one of {', '.join(TRANSPORTS)}, got {transport!r}")

        return cls(
            host=env.get("HOST", DEFAULT_HOST),
            port=port,
            api_prefix=_normalize_prefix(env.get("API_PREFIX", DEFAULT_API_PREFIX)),
            log_level=log_level,
            transport=transport,
            protect_essential=_parse_bool("PROTECT_ESSENTIAL", env.get("PROTECT_ESSENTIAL", "true")),
        )


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got {raw!r}")


def _normalize_prefix(prefix: str) -> str:
    """'/api/', 'api' and '/api' all become '/api'; '' and '/' mean no prefix."""
    prefix = prefix.strip().strip("/")
    return f"/{prefix}" if prefix else ""
