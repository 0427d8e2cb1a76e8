"""Report generation orchestration."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from responsive_audit.models.analysis import AuditSummary
from responsive_audit.models.config import AuditConfig

from .html_report import generate_html_report
from .json_report import generate_json_report

logger = logging.getLogger(__name__)


class Reporter:
    """Renders the aggregated summary in every configured format."""

    def __init__(self, config: AuditConfig):
        self.config = config

    def generate_reports(
        self, summary: AuditSummary, output_dir: Path | None = None,
    ) -> dict[str, str]:
        """Generate all configured report formats. Returns format -> file path."""
        out_dir = output_dir or Path(self.config.report_output_dir)
        out_dir.mkdir(parents=True, exist_ok=True)
        generated_at = time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())
        stamp = time.strftime("%Y-%m-%dT%H-%M-%S", time.gmtime())
        generated = {}
        logger.debug("Report output directory: %s", out_dir)

        if "html" in self.config.report_formats:
            path = out_dir / f"report-{stamp}.html"
            generate_html_report(summary, path, generated_at)
            generated["html"] = str(path)
            logger.info("HTML report: %s", path)

        if "json" in self.config.report_formats:
            path = out_dir / f"report-{stamp}.json"
            generate_json_report(summary, path, generated_at)
            generated["json"] = str(path)
            logger.info("JSON report: %s", path)

        return generated
