"""Configuration models for the responsive layout audit."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class CaptureConfig(BaseModel):
    viewport_height: int = 1080
    settle_delay_ms: int = 500
    navigation_timeout_ms: int = 30000
    headless: bool = True
    stealth: bool = True
    user_agent: Optional[str] = None

    @field_validator("viewport_height", "navigation_timeout_ms")
    @classmethod
    def must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("must be greater than zero")
        return v

    @field_validator("settle_delay_ms")
    @classmethod
    def must_not_be_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("must not be negative")
        return v


class AuditConfig(BaseModel):
    # Inputs and intermediate artifacts
    urls_file: str = "urls.txt"
    screenshots_dir: str = "screenshots"
    capture_results_path: str = "capture-results.json"
    tasks_path: str = "analysis-tasks.json"
    results_path: str = "analysis-results.json"

    # Capture settings
    capture: CaptureConfig = Field(default_factory=CaptureConfig)

    # AI settings (only used by the bundled analyzer)
    ai_model: str = "claude-opus-4-6"
    ai_max_tokens: int = 4096
    debug_dir: str = ".responsive-audit/debug"

    # Reporting
    report_formats: list[str] = Field(default_factory=lambda: ["html", "json"])
    report_output_dir: str = "reports"

    @classmethod
    def load(cls, path: str | Path) -> "AuditConfig":
        """Load config from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path) as f:
            data = json.load(f)
        return cls(**data)

    @classmethod
    def load_or_default(cls, path: str | Path) -> "AuditConfig":
        """Load config from a JSON file, falling back to defaults when it is absent."""
        if Path(path).exists():
            return cls.load(path)
        return cls()

    def save(self, path: str | Path) -> None:
        """Save config to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=2)
