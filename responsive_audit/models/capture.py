"""Capture and pairing data structures."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# Ordered wide -> narrow. Pairing and capture both rely on this order.
VIEWPORT_WIDTHS: tuple[int, ...] = (1920, 1600, 1400, 1200, 1000, 950, 800, 600, 400, 375)

DESKTOP_BASELINE_WIDTH = 1400
MOBILE_BASELINE_WIDTH = 375
BASELINE_WIDTHS: tuple[int, ...] = (DESKTOP_BASELINE_WIDTH, MOBILE_BASELINE_WIDTH)

TARGET_WIDTHS: tuple[int, ...] = tuple(w for w in VIEWPORT_WIDTHS if w not in BASELINE_WIDTHS)


class ScreenshotArtifact(BaseModel):
    width: int
    path: str


class WidthFailure(BaseModel):
    """A single width that could not be captured for an otherwise reachable URL."""
    width: int
    error: str


class CaptureOutcome(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str
    slug: str
    screenshots: list[ScreenshotArtifact] = Field(default_factory=list)
    error: Optional[str] = None  # navigation / page-level failure
    width_failures: list[WidthFailure] = Field(default_factory=list, alias="widthFailures")

    @property
    def succeeded(self) -> bool:
        return self.error is None and len(self.screenshots) > 0

    def screenshot_for(self, width: int) -> ScreenshotArtifact | None:
        for shot in self.screenshots:
            if shot.width == width:
                return shot
        return None


class ComparisonTask(BaseModel):
    """One target width to be judged against the desktop and mobile baselines."""
    model_config = ConfigDict(populate_by_name=True)

    url: str
    slug: str
    target_width: int = Field(alias="targetWidth")
    target_screenshot: str = Field(alias="targetScreenshot")
    desktop_baseline: str = Field(alias="baseline1400")
    mobile_baseline: str = Field(alias="baseline375")
