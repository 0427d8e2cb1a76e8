"""Browser launch helpers: one shared Chromium, one context per audited URL."""

from __future__ import annotations

from typing import Optional

from playwright.async_api import Browser, BrowserContext, Playwright

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/122.0.0.0 Safari/537.36"
)

# Some sites serve a bot wall or a stripped layout to obvious headless clients,
# which would make every width look identical.
_STEALTH_INIT_SCRIPT = """
Object.defineProperty(navigator, 'webdriver', { get: () => false });
Object.defineProperty(navigator, 'languages', { get: () => ['en-US', 'en'] });
if (!window.chrome) {
    window.chrome = { runtime: {} };
}
"""


async def launch_browser(
    playwright: Playwright, headless: bool = True, stealth: bool = True,
) -> Browser:
    """Launch the Chromium instance shared by every URL in a run."""
    args = ["--disable-blink-features=AutomationControlled"] if stealth else []
    return await playwright.chromium.launch(headless=headless, args=args)


async def create_capture_context(
    browser: Browser,
    viewport: dict,
    user_agent: Optional[str] = None,
    stealth: bool = True,
) -> BrowserContext:
    """Create an isolated context for a single URL.

    The viewport passed here is only the starting size; the capturer resizes
    the page for every width.
    """
    context_kwargs: dict = {"viewport": viewport}
    if stealth or user_agent:
        context_kwargs["user_agent"] = user_agent or DEFAULT_USER_AGENT
    if stealth:
        context_kwargs["locale"] = "en-US"
        context_kwargs["extra_http_headers"] = {"Accept-Language": "en-US,en;q=0.9"}

    context = await browser.new_context(**context_kwargs)
    if stealth:
        await context.add_init_script(_STEALTH_INIT_SCRIPT)
    return context
