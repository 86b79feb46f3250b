"""Core business logic — catalog models, seed data, store, and scoring.

This module is framework-agnostic. It has no dependency on MCP, Starlette,
or any server framework. The FastMCP tools and the JSON API both import
from here.
"""
