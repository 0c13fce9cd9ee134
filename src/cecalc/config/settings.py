from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    # ---------- App ----------
    APP_TITLE: str = "Compliance Efficiency Calculator"
    LOG_LEVEL: str = os.getenv("CECALC_LOG_LEVEL", "INFO")

    # ---------- Working-time model ----------
    WORKING_DAYS_PER_YEAR: int = 250
    HOURS_PER_DAY: int = 8
    PROJECTION_YEARS: int = 3

    # ---------- Fixed initiative assumptions ----------
    TOOL_EFFICIENCY_GAIN: float = 0.10
    AI_MINUTES_SAVED_PER_CASE: int = 8
    CONTINUOUS_LEARNING_GAIN: float = 0.20
    IMPLEMENTATION_COST_RATE: float = 0.1

    # ---------- Project paths ----------
    PROJECT_ROOT: Path = Path(__file__).resolve().parents[3]
    REPORTS_DIR: Path = PROJECT_ROOT / "reports"


settings = Settings()
