"""Optimization score engine.

Combines recommended-settings adoption and bloatware suppression into a
single 0-100 percentage, each half weighted 50 points. The score is never
stored; it is recomputed from whatever entries it is handed.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable

from .models import OptimizationScore, OptimizationSetting, StartupProgram

logger = logging.getLogger(__name__)

HALF_WEIGHT = 50.0

WELL_OPTIMIZED_THRESHOLD = 70
PARTIALLY_OPTIMIZED_THRESHOLD = 40


def _half_score(achieved: int, total: int) -> float:
    """Scale ``achieved / total`` to 0-50. An empty half counts as the midpoint."""
    if total == 0:
        return HALF_WEIGHT
    return (achieved / total) * HALF_WEIGHT


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def assess_score(score: int) -> str:
    if score >= WELL_OPTIMIZED_THRESHOLD:
        return "well optimized"
    if score >= PARTIALLY_OPTIMIZED_THRESHOLD:
        return "partially optimized"
    return "not optimized"


def score_optimization(
    programs: Iterable[StartupProgram],
    settings: Iterable[OptimizationSetting],
) -> OptimizationScore:
    """Score a catalog snapshot.

    The settings half is the share of recommended settings that are enabled;
    the startup half is the share of bloatware that is disabled. A catalog
    with no recommended settings (or no bloatware) earns the full 50 for that
    half rather than dropping it, so a machine with nothing to clean up is
    never penalised.
    """
    settings = list(settings)
    programs = list(programs)

    recommended = [s for s in settings if s.recommended]
    recommended_enabled = sum(1 for s in recommended if s.enabled)
    bloatware = [p for p in programs if p.is_bloatware]
    bloatware_disabled = sum(1 for p in bloatware if not p.enabled)

    settings_score = _half_score(recommended_enabled, len(recommended))
    startup_score = _half_score(bloatware_disabled, len(bloatware))
    score = _round_half_up(settings_score + startup_score)

    logger.debug(
        "Score %d (settings %.2f from %d/%d, startup %.2f from %d/%d)",
        score, settings_score, recommended_enabled, len(recommended),
        startup_score, bloatware_disabled, len(bloatware),
    )

    return OptimizationScore(
        score=score,
        settings_score=settings_score,
        startup_score=startup_score,
        recommended_enabled=recommended_enabled,
        recommended_total=len(recommended),
        bloatware_disabled=bloatware_disabled,
        bloatware_total=len(bloatware),
        assessment=assess_score(score),
    )


def compute_optimization_score(
    programs: Iterable[StartupProgram],
    settings: Iterable[OptimizationSetting],
) -> int:
    """Return just the 0-100 score for a catalog snapshot."""
    return score_optimization(programs, settings).score
