"""Task pairing: turns capture outcomes into baseline comparison tasks."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from responsive_audit.errors import TaskListError
from responsive_audit.models.capture import (
    DESKTOP_BASELINE_WIDTH,
    MOBILE_BASELINE_WIDTH,
    TARGET_WIDTHS,
    CaptureOutcome,
    ComparisonTask,
)

logger = logging.getLogger(__name__)


def build_analysis_tasks(outcomes: list[CaptureOutcome]) -> list[ComparisonTask]:
    """Pair every captured target width with the desktop and mobile baselines.

    A URL without both baseline screenshots yields no tasks at all; a missing
    target width is simply skipped. Output follows outcome order, then the
    fixed width order, so the same outcomes always produce the same list.
    """
    tasks: list[ComparisonTask] = []

    for outcome in outcomes:
        if not outcome.succeeded:
            logger.debug("Skipping %s: capture failed", outcome.url)
            continue

        desktop = outcome.screenshot_for(DESKTOP_BASELINE_WIDTH)
        mobile = outcome.screenshot_for(MOBILE_BASELINE_WIDTH)
        if desktop is None or mobile is None:
            logger.debug("Skipping %s: missing baseline screenshot", outcome.url)
            continue

        for width in TARGET_WIDTHS:
            shot = outcome.screenshot_for(width)
            if shot is None:
                continue
            tasks.append(ComparisonTask(
                url=outcome.url,
                slug=outcome.slug,
                target_width=width,
                target_screenshot=shot.path,
                desktop_baseline=desktop.path,
                mobile_baseline=mobile.path,
            ))

    return tasks


def save_analysis_tasks(tasks: list[ComparisonTask], output_path: Path) -> None:
    """Write the task list read by the analysis agent."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump([t.model_dump(by_alias=True) for t in tasks], f, indent=2)
    logger.info("Analysis tasks saved: %s (%d tasks)", output_path, len(tasks))


def load_analysis_tasks(input_path: Path) -> list[ComparisonTask]:
    """Read a task list written by save_analysis_tasks."""
    try:
        with open(input_path, encoding="utf-8") as f:
            data = json.load(f)
        return [ComparisonTask.model_validate(item) for item in data]
    except (OSError, json.JSONDecodeError, ValidationError, TypeError) as e:
        raise TaskListError(f"Failed to load analysis tasks from {input_path}: {e}") from e
