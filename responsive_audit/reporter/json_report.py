"""JSON report output."""

from __future__ import annotations

import json
from pathlib import Path

from responsive_audit.models.analysis import AuditSummary


def generate_json_report(summary: AuditSummary, output_path: Path, generated_at: str = "") -> None:
    """Write a machine-readable JSON report."""
    report = {
        "generated_at": generated_at,
        "total_urls": summary.total_urls,
        "urls_with_issues": summary.urls_with_issues,
        "total_issues": summary.total_issues,
        "issues_by_severity": {
            "critical": summary.critical_issues,
            "major": summary.major_issues,
            "minor": summary.minor_issues,
            "unknown": summary.unknown_issues,
        },
        "results": [
            v.model_dump(mode="json", by_alias=True) for v in summary.verdicts_with_issues
        ],
    }

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(report, f, indent=2, default=str)
