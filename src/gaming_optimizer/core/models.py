"""Pydantic data models — the shared business objects.

The FastMCP tools, the JSON API, and the dashboard all serialize these
models, so their JSON field names are the wire format.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Impact(str, Enum):
    """Boot-time impact of a startup program."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ProgramCategory(str, Enum):
    """Startup program classification."""

    ESSENTIAL = "essential"
    BLOATWARE = "bloatware"
    GAMING = "gaming"
    UTILITY = "utility"
    UNKNOWN = "unknown"


class SettingCategory(str, Enum):
    """Optimization setting area."""

    PERFORMANCE = "performance"
    VISUAL = "visual"
    NETWORK = "network"
    POWER = "power"
    STORAGE = "storage"


class StartupProgram(BaseModel):
    """A simulated startup entry. Only ``enabled`` changes at runtime."""

    id: str
    name: str
    publisher: str
    path: str
    enabled: bool
    impact: Impact
    category: ProgramCategory
    description: str

    @property
    def is_essential(self) -> bool:
        return self.category is ProgramCategory.ESSENTIAL

    @property
    def is_bloatware(self) -> bool:
        return self.category is ProgramCategory.BLOATWARE


class OptimizationSetting(BaseModel):
    """A simulated gaming tweak. ``impact`` is free text describing the effect."""

    id: str
    name: str
    description: str
    category: SettingCategory
    enabled: bool
    recommended: bool
    impact: str


class OptimizationResult(BaseModel):
    """Outcome of enabling or disabling a single setting."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    message: str
    setting_id: str = Field(alias="settingId")


class SystemInfo(BaseModel):
    """Static description of the mock machine."""

    os: str
    cpu: str
    ram: str
    gpu: str
    storage: str


class OptimizationScore(BaseModel):
    """Overall optimization score with the two halves it is built from."""

    score: int = Field(ge=0, le=100, description="Rounded sum of both halves")
    settings_score: float = Field(ge=0.0, le=50.0, description="Recommended settings adoption, 0-50")
    startup_score: float = Field(ge=0.0, le=50.0, description="Bloatware suppression, 0-50")
    recommended_enabled: int
    recommended_total: int
    bloatware_disabled: int
    bloatware_total: int
    assessment: str = Field(description="Human-readable assessment")


class CatalogSummary(BaseModel):
    """Dashboard header counters."""

    active_bloatware: int = Field(description="Bloatware entries still enabled")
    high_impact_enabled: int = Field(description="Enabled programs with high boot impact")
    recommended_pending: int = Field(description="Recommended settings not yet enabled")
    score: OptimizationScore


def to_payload(model: BaseModel) -> dict:
    """JSON-ready dict using wire field names (``settingId``)."""
    return model.model_dump(mode="json", by_alias=True)
