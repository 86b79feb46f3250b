"""Gaming Optimizer MCP App — Python config plus a small REST-driven script."""

from __future__ import annotations

import json
from pathlib import Path

from mcpbundles_app_ui import App, Card, DarkTheme, Raw, Section, Stat, Stats

from .core.models import Impact, ProgramCategory, SettingCategory

ASSETS = Path(__file__).parent / "assets"


class GamingOptimizerApp(App):
    """Score, startup programs, and gaming tweaks, kept in sync with the JSON API."""

    name = "Gaming Optimizer"
    subtitle = "Maximize your gaming performance"
    theme = DarkTheme(
        accent="#8b5cf6",
        bg_page="#0f172a",
        bg_card="#1e293b",
        bg_hover="#253048",
        text_primary="#f1f5f9",
        text_secondary="#e2e8f0",
        text_muted="#94a3b8",
        border="#334155",
        success="#10b981",
        warning="#f59e0b",
        error="#ef4444",
        chart_colors=["#8b5cf6", "#06b6d4", "#10b981", "#f59e0b", "#ef4444", "#3b82f6"],
    )

    # Stat binds are CatalogSummary field paths, filled by the library's renderDashboard.
    layout = [
        Stats(
            Stat("score.score", "Optimization Score", primary=True),
            Stat("active_bloatware", "Active bloatware"),
            Stat("high_impact_enabled", "High impact at startup"),
            Stat("recommended_pending", "Recommended pending"),
        ),
        Raw('<p id="assessment" class="card-subtitle"></p>'),
        Card(title="System")(Raw('<dl id="system-info" class="optimizer-info"></dl>')),
        Section("Startup Programs", children=[
            Raw('<div class="optimizer-toolbar"><button id="disable-bloatware" class="optimizer-btn">Disable all bloatware</button></div>'),
            Raw('<div id="programs"></div>'),
        ]),
        Section("Gaming Optimizations", children=[
            Raw('<div class="optimizer-toolbar"><button id="apply-recommended" class="optimizer-btn">Apply recommended</button></div>'),
            Raw('<div id="settings"></div>'),
        ]),
        Raw('<footer class="optimizer-footer">Simulated machine · changes are not applied to your system</footer>'),
    ]

    custom_scripts = ASSETS / "dashboard.js"

    # Every enum member must have an entry; tests hold these maps exhaustive.
    program_category_colors = {
        ProgramCategory.ESSENTIAL: "#3b82f6",
        ProgramCategory.BLOATWARE: "#ef4444",
        ProgramCategory.GAMING: "#a855f7",
        ProgramCategory.UTILITY: "#64748b",
        ProgramCategory.UNKNOWN: "#6b7280",
    }
    impact_colors = {
        Impact.LOW: "#10b981",
        Impact.MEDIUM: "#f59e0b",
        Impact.HIGH: "#ef4444",
    }
    setting_category_icons = {
        SettingCategory.PERFORMANCE: "⚡",
        SettingCategory.NETWORK: "\U0001f4f6",
        SettingCategory.VISUAL: "\U0001f5a5️",
        SettingCategory.POWER: "\U0001f50b",
        SettingCategory.STORAGE: "\U0001f4be",
    }
    setting_category_order = [
        SettingCategory.PERFORMANCE,
        SettingCategory.NETWORK,
        SettingCategory.VISUAL,
        SettingCategory.POWER,
        SettingCategory.STORAGE,
    ]
    protected_categories = [ProgramCategory.ESSENTIAL]

    def __init__(self, api_base: str = "/api"):
        super().__init__()
        self.api_base = api_base
        # "</" would end the script element early.
        config = json.dumps(self.client_config()).replace("</", "<\\/")
        self.custom_head = (
            f"<style>\n{(ASSETS / 'dashboard.css').read_text(encoding='utf-8')}</style>\n"
            f"  <script>window.__OPTIMIZER_CONFIG__ = {config};</script>"
        )

    def client_config(self) -> dict:
        """Values the page script needs, keyed by plain enum strings."""
        return {
            "apiBase": self.api_base,
            "programCategoryColors": {k.value: v for k, v in self.program_category_colors.items()},
            "impactColors": {k.value: v for k, v in self.impact_colors.items()},
            "settingCategoryIcons": {k.value: v for k, v in self.setting_category_icons.items()},
            "settingCategoryOrder": [c.value for c in self.setting_category_order],
            "protectedCategories": [c.value for c in self.protected_categories],
        }
