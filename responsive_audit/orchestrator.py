"""Pipeline orchestrator — coordinates capture, analysis, and report stages."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

from responsive_audit.ai.client import AIClient, set_debug_dir
from responsive_audit.analysis.analyzer import LayoutAnalyzer
from responsive_audit.analysis.verdicts import load_analysis_results, save_analysis_results
from responsive_audit.capture.capture_runner import CaptureRunner, save_capture_results
from responsive_audit.errors import UrlListError
from responsive_audit.models.analysis import AnalysisVerdict, AuditSummary
from responsive_audit.models.capture import CaptureOutcome, ComparisonTask
from responsive_audit.models.config import AuditConfig
from responsive_audit.pairing.task_pairing import (
    build_analysis_tasks,
    load_analysis_tasks,
    save_analysis_tasks,
)
from responsive_audit.reporter.aggregator import aggregate_results
from responsive_audit.reporter.reporter import Reporter
from responsive_audit.url_utils import read_url_list

logger = logging.getLogger(__name__)


@dataclass
class CaptureStageResult:
    outcomes: list[CaptureOutcome] = field(default_factory=list)
    tasks: list[ComparisonTask] = field(default_factory=list)
    capture_results_path: str = ""
    tasks_path: str = ""

    @property
    def successful(self) -> list[CaptureOutcome]:
        return [o for o in self.outcomes if o.error is None]


class AuditPipeline:
    """Coordinates the responsive audit stages."""

    def __init__(self, config: AuditConfig):
        self.config = config

    def run_capture(self, urls_file: str | Path | None = None) -> CaptureStageResult:
        """Read URLs, capture every width, and write the analysis task list."""
        return asyncio.run(self._capture(Path(urls_file or self.config.urls_file)))

    async def _capture(self, urls_file: Path) -> CaptureStageResult:
        start = time.time()
        logger.info("--- Stage 1: Read URLs from %s ---", urls_file)
        urls = read_url_list(urls_file)
        if not urls:
            raise UrlListError(f"No URLs found in {urls_file}")
        logger.info("Found %d URLs", len(urls))

        logger.info("--- Stage 2: Capture screenshots ---")
        runner = CaptureRunner(Path(self.config.screenshots_dir), self.config.capture)
        outcomes = await runner.run(urls)
        capture_path = Path(self.config.capture_results_path)
        save_capture_results(outcomes, capture_path)

        logger.info("--- Stage 3: Save analysis tasks ---")
        tasks = build_analysis_tasks(outcomes)
        tasks_path = Path(self.config.tasks_path)
        save_analysis_tasks(tasks, tasks_path)

        logger.info("=== Capture complete in %.1fs ===", time.time() - start)
        return CaptureStageResult(
            outcomes=outcomes,
            tasks=tasks,
            capture_results_path=str(capture_path),
            tasks_path=str(tasks_path),
        )

    def run_analyze(self) -> list[AnalysisVerdict]:
        """Review the saved task list with Claude and write the verdicts.

        Raises EnvironmentError when no API key is configured.
        """
        set_debug_dir(Path(self.config.debug_dir))
        ai_client = AIClient(model=self.config.ai_model, max_tokens=self.config.ai_max_tokens)

        tasks = load_analysis_tasks(Path(self.config.tasks_path))
        logger.info("--- Analyze: %d tasks ---", len(tasks))
        verdicts = LayoutAnalyzer(ai_client).analyze(tasks)
        save_analysis_results(verdicts, Path(self.config.results_path))
        return verdicts

    def run_report(self) -> tuple[AuditSummary, dict[str, str]]:
        """Aggregate saved verdicts and render the reports."""
        logger.info("--- Report: loading analysis results ---")
        verdicts = load_analysis_results(Path(self.config.results_path))
        summary = aggregate_results(verdicts)
        reports = Reporter(self.config).generate_reports(summary)
        return summary, reports
