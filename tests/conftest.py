"""Shared pytest fixtures."""

from __future__ import annotations

import pytest
from starlette.applications import Starlette
from starlette.testclient import TestClient

from gaming_optimizer.core.models import (
    Impact,
    OptimizationSetting,
    ProgramCategory,
    SettingCategory,
    StartupProgram,
)
from gaming_optimizer.core.store import CatalogStore
from gaming_optimizer.http_routes import build_routes


@pytest.fixture
def store() -> CatalogStore:
    """A freshly seeded store with essential protection on."""
    return CatalogStore()


@pytest.fixture
def client(store: CatalogStore) -> TestClient:
    return TestClient(Starlette(routes=build_routes(store)))


def make_program(
    program_id: str,
    category: ProgramCategory = ProgramCategory.UTILITY,
    *,
    enabled: bool = True,
    impact: Impact = Impact.LOW,
) -> StartupProgram:
    return StartupProgram(
        id=program_id,
        name=f"Program {program_id}",
        publisher="Test Publisher",
        path=f"C:\\Program Files\\Test\\{program_id}.exe",
        enabled=enabled,
        impact=impact,
        category=category,
        description="Test startup entry",
    )


def make_setting(
    setting_id: str,
    *,
    recommended: bool = True,
    enabled: bool = False,
    category: SettingCategory = SettingCategory.PERFORMANCE,
) -> OptimizationSetting:
    return OptimizationSetting(
        id=setting_id,
        name=f"Setting {setting_id}",
        description="Test optimization",
        category=category,
        enabled=enabled,
        recommended=recommended,
        impact="Test impact",
    )
