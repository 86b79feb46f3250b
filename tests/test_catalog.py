"""Tests for the seed catalog."""

from __future__ import annotations

from gaming_optimizer.core.catalog import (
    OPTIMIZATION_SETTING_CATALOG,
    STARTUP_PROGRAM_CATALOG,
    seed_optimization_settings,
    seed_startup_programs,
    system_info,
)
from gaming_optimizer.core.models import ProgramCategory


def test_startup_programs_seed_in_catalog_order() -> None:
    programs = seed_startup_programs()

    assert [p.id for p in programs] == [str(i) for i in range(1, 16)]
    assert all(p.enabled for p in programs)


def test_bloatware_and_essential_ids() -> None:
    programs = seed_startup_programs()

    bloatware = [p.id for p in programs if p.category is ProgramCategory.BLOATWARE]
    essential = [p.id for p in programs if p.category is ProgramCategory.ESSENTIAL]
    assert bloatware == ["2", "6", "7", "8", "13", "14", "15"]
    assert essential == ["9", "10"]


def test_optimization_settings_seed_disabled_with_eight_recommended() -> None:
    settings = seed_optimization_settings()

    assert len(settings) == 12
    assert not any(s.enabled for s in settings)
    assert [s.id for s in settings if s.recommended] == [
        "game-mode",
        "hardware-accel",
        "disable-fullscreen-opt",
        "high-perf-power",
        "disable-nagle",
        "disable-auto-update",
        "disable-dvr",
        "clean-temp",
    ]


def test_ids_are_unique() -> None:
    assert len({e["id"] for e in STARTUP_PROGRAM_CATALOG}) == len(STARTUP_PROGRAM_CATALOG)
    assert len({e["id"] for e in OPTIMIZATION_SETTING_CATALOG}) == len(OPTIMIZATION_SETTING_CATALOG)


def test_each_seed_call_returns_fresh_instances() -> None:
    first = seed_startup_programs()
    first[0].enabled = False

    assert seed_startup_programs()[0].enabled is True


def test_system_info_is_static() -> None:
    info = system_info()

    assert info.os == "Windows 11 Pro (Build 22621)"
    assert info.gpu == "NVIDIA GeForce RTX 3070"
    assert info == system_info()
