"""Analysis verdict and summary data structures."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    CRITICAL = "critical"
    MAJOR = "major"
    MINOR = "minor"


class BaselineComparison(BaseModel):
    desktop: str  # 1400px screenshot path
    mobile: str  # 375px screenshot path


class LayoutIssue(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str
    slug: str
    width: int
    severity: str  # critical, major, minor; anything else is reported as unknown
    description: str
    screenshot_path: str = Field(alias="screenshotPath")
    baseline_comparison: Optional[BaselineComparison] = Field(default=None, alias="baselineComparison")


class AnalysisVerdict(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str
    slug: str
    issues: list[LayoutIssue] = Field(default_factory=list)
    analyzed_at: datetime = Field(alias="analyzedAt")


class AuditSummary(BaseModel):
    total_urls: int = 0
    urls_with_issues: int = 0
    total_issues: int = 0
    critical_issues: int = 0
    major_issues: int = 0
    minor_issues: int = 0
    unknown_issues: int = 0
    verdicts_with_issues: list[AnalysisVerdict] = Field(default_factory=list)
