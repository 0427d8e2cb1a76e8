"""Viewport capturer: full-page screenshots of one URL at every audit width."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from playwright.async_api import Page

from responsive_audit.models.capture import (
    VIEWPORT_WIDTHS,
    CaptureOutcome,
    ScreenshotArtifact,
    WidthFailure,
)
from responsive_audit.models.config import CaptureConfig
from responsive_audit.url_utils import slug_from_url

logger = logging.getLogger(__name__)


@dataclass
class WidthCaptureResult:
    screenshots: list[ScreenshotArtifact] = field(default_factory=list)
    failures: list[WidthFailure] = field(default_factory=list)


def screenshot_path(output_dir: Path, slug: str, width: int) -> Path:
    """Return the file path for a slug's screenshot at a given width."""
    return output_dir / slug / f"{width}px.png"


class ViewportCapturer:
    """Drives a single page through the audit widths.

    Navigation happens once per URL and is the only step whose failure
    aborts the URL. Each width is captured independently; a failed width is
    logged, recorded as a WidthFailure, and skipped.
    """

    def __init__(
        self,
        output_dir: Path,
        config: CaptureConfig | None = None,
        widths: tuple[int, ...] = VIEWPORT_WIDTHS,
    ):
        self.output_dir = output_dir
        self.config = config or CaptureConfig()
        self.widths = widths

    async def navigate(self, page: Page, url: str) -> None:
        """Load the URL and wait for the network to go idle."""
        timeout = self.config.navigation_timeout_ms
        page.set_default_timeout(timeout)
        await page.goto(url, wait_until="networkidle", timeout=timeout)

    async def capture_widths(self, page: Page, slug: str) -> WidthCaptureResult:
        """Resize, settle and screenshot the already-loaded page at every width."""
        url_dir = self.output_dir / slug
        url_dir.mkdir(parents=True, exist_ok=True)

        result = WidthCaptureResult()
        for width in self.widths:
            path = screenshot_path(self.output_dir, slug, width)
            try:
                await page.set_viewport_size(
                    {"width": width, "height": self.config.viewport_height}
                )
                await page.wait_for_timeout(self.config.settle_delay_ms)
                await page.screenshot(path=str(path), full_page=True)
            except Exception as e:
                logger.warning("  ✗ %dpx: %s", width, e)
                result.failures.append(WidthFailure(width=width, error=str(e) or type(e).__name__))
                continue

            result.screenshots.append(ScreenshotArtifact(width=width, path=str(path)))
            logger.info("  ✓ %dpx", width)

        return result

    async def capture(self, page: Page, url: str) -> CaptureOutcome:
        """Navigate to ``url`` and capture every width.

        Never raises for page-level faults: a navigation failure is returned
        as the outcome's error with no screenshots.
        """
        slug = slug_from_url(url)
        try:
            await self.navigate(page, url)
        except Exception as e:
            message = str(e) or type(e).__name__
            logger.error("  Error: %s", message)
            return CaptureOutcome(url=url, slug=slug, error=message)

        widths = await self.capture_widths(page, slug)
        return CaptureOutcome(
            url=url,
            slug=slug,
            screenshots=widths.screenshots,
            width_failures=widths.failures,
        )
