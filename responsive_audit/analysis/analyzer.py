"""Built-in layout analyzer: asks Claude to review each comparison task.

Any agent that reads analysis-tasks.json and writes analysis-results.json can
replace this module; the rest of the pipeline only depends on those files.
"""

from __future__ import annotations

import base64
import logging
from datetime import datetime, timezone

import anthropic

from responsive_audit.ai.client import AIClient
from responsive_audit.ai.prompts.layout import (
    LAYOUT_REVIEW_SYSTEM_PROMPT,
    build_layout_review_prompt,
)
from responsive_audit.models.analysis import (
    AnalysisVerdict,
    BaselineComparison,
    LayoutIssue,
)
from responsive_audit.models.capture import ComparisonTask

logger = logging.getLogger(__name__)


def _encode_image(path: str) -> str:
    with open(path, "rb") as f:
        return base64.b64encode(f.read()).decode()


class LayoutAnalyzer:
    """Produces one AnalysisVerdict per URL from a list of comparison tasks."""

    def __init__(self, ai_client: AIClient):
        self.ai_client = ai_client

    def analyze(self, tasks: list[ComparisonTask]) -> list[AnalysisVerdict]:
        """Review every task; URLs keep their first-seen order."""
        grouped: dict[str, list[ComparisonTask]] = {}
        for task in tasks:
            grouped.setdefault(task.url, []).append(task)

        verdicts = []
        for index, (url, url_tasks) in enumerate(grouped.items()):
            logger.info("[%d/%d] Analyzing %s (%d widths)",
                        index + 1, len(grouped), url, len(url_tasks))
            issues: list[LayoutIssue] = []
            for task in url_tasks:
                issues.extend(self.analyze_task(task))
            verdicts.append(AnalysisVerdict(
                url=url,
                slug=url_tasks[0].slug,
                issues=issues,
                analyzed_at=datetime.now(timezone.utc),
            ))
        return verdicts

    def analyze_task(self, task: ComparisonTask) -> list[LayoutIssue]:
        """Review one target width. A failed review yields no issues."""
        try:
            images = [
                _encode_image(task.target_screenshot),
                _encode_image(task.desktop_baseline),
                _encode_image(task.mobile_baseline),
            ]
        except OSError as e:
            logger.warning("  %dpx: cannot read screenshot: %s", task.target_width, e)
            return []

        try:
            data = self.ai_client.complete_json_with_images(
                system_prompt=LAYOUT_REVIEW_SYSTEM_PROMPT,
                user_message=build_layout_review_prompt(task.url, task.target_width),
                images_base64=images,
            )
        except (anthropic.APIError, ValueError) as e:
            logger.warning("  %dpx: analysis failed: %s", task.target_width, e)
            return []

        if not isinstance(data, dict):
            logger.warning("  %dpx: unexpected analysis reply, ignoring", task.target_width)
            return []

        issues = []
        for raw in data.get("issues") or []:
            if not isinstance(raw, dict) or not raw.get("description"):
                continue
            issues.append(LayoutIssue(
                url=task.url,
                slug=task.slug,
                width=task.target_width,
                severity=str(raw.get("severity", "minor")).lower(),
                description=str(raw["description"]),
                screenshot_path=task.target_screenshot,
                baseline_comparison=BaselineComparison(
                    desktop=task.desktop_baseline,
                    mobile=task.mobile_baseline,
                ),
            ))
        logger.info("  %dpx: %d issue(s)", task.target_width, len(issues))
        return issues
