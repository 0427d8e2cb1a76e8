"""Capture runner: sequences URL captures over one shared Chromium instance."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from playwright.async_api import Browser, async_playwright

from responsive_audit.errors import BrowserLaunchError
from responsive_audit.models.capture import CaptureOutcome
from responsive_audit.models.config import CaptureConfig
from responsive_audit.url_utils import slug_from_url
from responsive_audit.utils.browser_stealth import create_capture_context, launch_browser

from .viewport_capturer import ViewportCapturer

logger = logging.getLogger(__name__)


class CaptureRunner:
    """Captures every URL in input order and returns one outcome per URL."""

    def __init__(self, output_dir: Path, config: CaptureConfig | None = None):
        self.output_dir = output_dir
        self.config = config or CaptureConfig()
        self.capturer = ViewportCapturer(output_dir, self.config)

    async def run(self, urls: list[str]) -> list[CaptureOutcome]:
        """Launch the browser once and capture all URLs sequentially.

        Raises BrowserLaunchError if Chromium cannot be started. Failures on
        individual URLs are recorded on their outcome and never raised.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        logger.info("Starting screenshot capture for %d URLs...", len(urls))

        async with async_playwright() as p:
            try:
                browser = await launch_browser(
                    p, headless=self.config.headless, stealth=self.config.stealth,
                )
            except Exception as e:
                raise BrowserLaunchError(f"Failed to launch Chromium: {e}") from e

            outcomes: list[CaptureOutcome] = []
            try:
                for index, url in enumerate(urls):
                    logger.info("[%d/%d] %s", index + 1, len(urls), url)
                    outcomes.append(await self._capture_url(browser, url))
            finally:
                logger.debug("Closing shared browser")
                await browser.close()

        success_count = sum(1 for o in outcomes if o.error is None)
        logger.info("Capture complete: %d/%d successful", success_count, len(urls))
        return outcomes

    async def _capture_url(self, browser: Browser, url: str) -> CaptureOutcome:
        """Capture one URL in its own context; the context is always closed."""
        try:
            context = await create_capture_context(
                browser,
                viewport={"width": 1280, "height": self.config.viewport_height},
                user_agent=self.config.user_agent,
                stealth=self.config.stealth,
            )
        except Exception as e:
            logger.error("  Error opening page: %s", e)
            return CaptureOutcome(url=url, slug=slug_from_url(url), error=str(e) or type(e).__name__)

        try:
            page = await context.new_page()
            return await self.capturer.capture(page, url)
        except Exception as e:
            logger.error("  Error: %s", e)
            return CaptureOutcome(url=url, slug=slug_from_url(url), error=str(e) or type(e).__name__)
        finally:
            try:
                await context.close()
            except Exception as e:
                logger.warning("  Failed to close page for %s: %s", url, e)


def save_capture_results(outcomes: list[CaptureOutcome], output_path: Path) -> None:
    """Persist capture outcomes so pairing can run in a later invocation."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump([o.model_dump(by_alias=True) for o in outcomes], f, indent=2)
    logger.debug("Saved %d capture outcomes to %s", len(outcomes), output_path)


def load_capture_results(input_path: Path) -> list[CaptureOutcome]:
    """Read capture outcomes written by save_capture_results."""
    with open(input_path, encoding="utf-8") as f:
        data = json.load(f)
    return [CaptureOutcome.model_validate(item) for item in data]
