"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest

from responsive_audit.models.analysis import (
    AnalysisVerdict,
    BaselineComparison,
    LayoutIssue,
)
from responsive_audit.models.capture import (
    VIEWPORT_WIDTHS,
    CaptureOutcome,
    ScreenshotArtifact,
)
from responsive_audit.models.config import AuditConfig, CaptureConfig


# ============================================================================
# Builders
# ============================================================================


def _build_outcome(
    url: str = "https://example.com/",
    slug: str = "example-com",
    widths=VIEWPORT_WIDTHS,
    error: str | None = None,
    root: str = "screenshots",
) -> CaptureOutcome:
    """Create a CaptureOutcome with one screenshot per given width."""
    return CaptureOutcome(
        url=url,
        slug=slug,
        screenshots=[
            ScreenshotArtifact(width=w, path=f"{root}/{slug}/{w}px.png") for w in widths
        ],
        error=error,
    )


def _build_issue(severity: str = "major", width: int = 800, url: str = "https://example.com/") -> LayoutIssue:
    return LayoutIssue(
        url=url,
        slug="example-com",
        width=width,
        severity=severity,
        description=f"{severity} problem at {width}px",
        screenshot_path=f"screenshots/example-com/{width}px.png",
        baseline_comparison=BaselineComparison(
            desktop="screenshots/example-com/1400px.png",
            mobile="screenshots/example-com/375px.png",
        ),
    )


def _build_verdict(url: str = "https://example.com/", severities=()) -> AnalysisVerdict:
    return AnalysisVerdict(
        url=url,
        slug="example-com",
        issues=[_build_issue(s, url=url) for s in severities],
        analyzed_at=datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc),
    )


def _build_mock_page(fail_widths=(), goto_error: Exception | None = None) -> AsyncMock:
    """Create a mocked Playwright page.

    Screenshots raise for any width in ``fail_widths``; ``goto`` raises
    ``goto_error`` when given.
    """
    page = AsyncMock()
    page.set_default_timeout = Mock()
    page.goto = AsyncMock(side_effect=goto_error)
    state = {"width": None}

    async def _set_viewport(size):
        state["width"] = size["width"]

    async def _screenshot(path, full_page):
        if state["width"] in fail_widths:
            raise RuntimeError(f"capture failed at {state['width']}")

    page.set_viewport_size = AsyncMock(side_effect=_set_viewport)
    page.screenshot = AsyncMock(side_effect=_screenshot)
    return page


def _build_mock_context(page: AsyncMock) -> AsyncMock:
    context = AsyncMock()
    context.new_page = AsyncMock(return_value=page)
    return context


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def capture_config() -> CaptureConfig:
    """Capture settings with no settle delay for fast tests."""
    return CaptureConfig(settle_delay_ms=0, navigation_timeout_ms=30000)


@pytest.fixture
def audit_config(tmp_path: Path) -> AuditConfig:
    """An AuditConfig whose artifacts all live under tmp_path."""
    return AuditConfig(
        urls_file=str(tmp_path / "urls.txt"),
        screenshots_dir=str(tmp_path / "screenshots"),
        capture_results_path=str(tmp_path / "capture-results.json"),
        tasks_path=str(tmp_path / "analysis-tasks.json"),
        results_path=str(tmp_path / "analysis-results.json"),
        report_output_dir=str(tmp_path / "reports"),
        debug_dir=str(tmp_path / "debug"),
        capture=CaptureConfig(settle_delay_ms=0),
    )


@pytest.fixture
def full_outcome() -> CaptureOutcome:
    return _build_outcome()


# ============================================================================
# Builder Fixtures
# ============================================================================


@pytest.fixture
def make_outcome():
    """Factory for CaptureOutcome records."""
    return _build_outcome


@pytest.fixture
def make_issue():
    """Factory for LayoutIssue records."""
    return _build_issue


@pytest.fixture
def make_verdict():
    """Factory for AnalysisVerdict records."""
    return _build_verdict


@pytest.fixture
def make_mock_page():
    """Factory for mocked Playwright pages."""
    return _build_mock_page


@pytest.fixture
def make_mock_context():
    """Factory for mocked browser contexts wrapping a page."""
    return _build_mock_context
