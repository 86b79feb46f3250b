"""In-memory catalog of startup programs and optimization settings.

The store is the only place ``enabled`` flags change. It is built
explicitly (seeded from :mod:`.catalog` by default) and handed to the
server, so tests can run against isolated instances. Nothing is persisted:
a restart brings every entry back to its seed value.

All operations take the same lock, so a bulk update is never observed
half-applied. Reads return copies; callers cannot mutate stored entries.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, Optional

from .catalog import seed_optimization_settings, seed_startup_programs, system_info
from .models import (
    CatalogSummary,
    Impact,
    OptimizationResult,
    OptimizationScore,
    OptimizationSetting,
    StartupProgram,
    SystemInfo,
)
from .scoring import score_optimization

logger = logging.getLogger(__name__)

SETTING_NOT_FOUND = "Setting not found"


class CatalogStore:
    """Owns both entry collections and every mutation of them."""

    def __init__(
        self,
        startup_programs: Optional[Iterable[StartupProgram]] = None,
        optimization_settings: Optional[Iterable[OptimizationSetting]] = None,
        *,
        protect_essential: bool = True,
    ):
        self._lock = threading.RLock()
        self._seed_programs = [p.model_copy() for p in startup_programs] if startup_programs is not None else None
        self._seed_settings = [s.model_copy() for s in optimization_settings] if optimization_settings is not None else None
        self.protect_essential = protect_essential
        self._programs: list[StartupProgram] = []
        self._settings: list[OptimizationSetting] = []
        self.reset()

    def reset(self) -> None:
        """Restore every entry to its seed state."""
        with self._lock:
            if self._seed_programs is None:
                self._programs = seed_startup_programs()
            else:
                self._programs = [p.model_copy() for p in self._seed_programs]
            if self._seed_settings is None:
                self._settings = seed_optimization_settings()
            else:
                self._settings = [s.model_copy() for s in self._seed_settings]
        logger.info(
            "Catalog seeded with %d startup programs and %d optimization settings",
            len(self._programs), len(self._settings),
        )

    # ─── Startup programs ────────────────────────────────────────────────

    def list_startup_programs(self) -> list[StartupProgram]:
        with self._lock:
            return [p.model_copy() for p in self._programs]

    def _find_program(self, program_id: str) -> Optional[StartupProgram]:
        return next((p for p in self._programs if p.id == program_id), None)

    def get_startup_program(self, program_id: str) -> Optional[StartupProgram]:
        with self._lock:
            program = self._find_program(program_id)
            return program.model_copy() if program else None

    def toggle_startup_program(self, program_id: str) -> Optional[StartupProgram]:
        """Flip ``enabled`` on one program.

        Returns ``None`` when no program has ``program_id``. With
        ``protect_essential`` on, an enabled essential program is returned
        unchanged instead of being disabled.
        """
        with self._lock:
            program = self._find_program(program_id)
            if program is None:
                logger.debug("Startup program %s not found", program_id)
                return None
            if self.protect_essential and program.is_essential and program.enabled:
                logger.warning("Refusing to disable essential startup program %s (%s)", program.id, program.name)
                return program.model_copy()
            program.enabled = not program.enabled
            logger.debug("Startup program %s (%s) enabled=%s", program.id, program.name, program.enabled)
            return program.model_copy()

    def disable_all_bloatware(self) -> list[StartupProgram]:
        """Disable every bloatware entry and return them in catalog order."""
        with self._lock:
            affected = []
            for program in self._programs:
                if program.is_bloatware:
                    program.enabled = False
                    affected.append(program.model_copy())
        logger.info("Disabled %d bloatware startup programs", len(affected))
        return affected

    # ─── Optimization settings ───────────────────────────────────────────

    def list_optimization_settings(self) -> list[OptimizationSetting]:
        with self._lock:
            return [s.model_copy() for s in self._settings]

    def _find_setting(self, setting_id: str) -> Optional[OptimizationSetting]:
        return next((s for s in self._settings if s.id == setting_id), None)

    def get_optimization_setting(self, setting_id: str) -> Optional[OptimizationSetting]:
        with self._lock:
            setting = self._find_setting(setting_id)
            return setting.model_copy() if setting else None

    def toggle_optimization_setting(self, setting_id: str) -> OptimizationResult:
        """Flip ``enabled`` on one setting.

        An unknown id is reported through ``success=False`` rather than an
        exception.
        """
        with self._lock:
            setting = self._find_setting(setting_id)
            if setting is None:
                logger.debug("Optimization setting %s not found", setting_id)
                return OptimizationResult(success=False, message=SETTING_NOT_FOUND, setting_id=setting_id)
            setting.enabled = not setting.enabled
            state = "enabled" if setting.enabled else "disabled"
        logger.debug("Optimization setting %s %s", setting_id, state)
        return OptimizationResult(
            success=True,
            message=f"{setting.name} has been {state}",
            setting_id=setting_id,
        )

    def apply_recommended_settings(self) -> list[OptimizationResult]:
        """Enable every recommended setting that is still off.

        Settings that are already on, or not recommended, are left alone and
        produce no result, so a second call returns an empty list.
        """
        results = []
        with self._lock:
            for setting in self._settings:
                if setting.recommended and not setting.enabled:
                    setting.enabled = True
                    results.append(OptimizationResult(
                        success=True,
                        message=f"{setting.name} has been enabled",
                        setting_id=setting.id,
                    ))
        logger.info("Applied %d recommended optimization settings", len(results))
        return results

    # ─── Derived views ───────────────────────────────────────────────────

    def system_info(self) -> SystemInfo:
        return system_info()

    def score_breakdown(self) -> OptimizationScore:
        with self._lock:
            return score_optimization(self._programs, self._settings)

    def optimization_score(self) -> int:
        return self.score_breakdown().score

    def summary(self) -> CatalogSummary:
        with self._lock:
            return CatalogSummary(
                active_bloatware=sum(1 for p in self._programs if p.is_bloatware and p.enabled),
                high_impact_enabled=sum(1 for p in self._programs if p.impact is Impact.HIGH and p.enabled),
                recommended_pending=sum(1 for s in self._settings if s.recommended and not s.enabled),
                score=score_optimization(self._programs, self._settings),
            )
