"""Result aggregation: summary counts over analysis verdicts."""

from __future__ import annotations

from responsive_audit.models.analysis import AnalysisVerdict, AuditSummary, Severity


def aggregate_results(verdicts: list[AnalysisVerdict]) -> AuditSummary:
    """Count URLs and issues by severity.

    Severities outside critical/major/minor land in the unknown bucket, so the
    four buckets always add up to total_issues.
    """
    buckets = {s.value: 0 for s in Severity}
    unknown = 0
    for verdict in verdicts:
        for issue in verdict.issues:
            if issue.severity in buckets:
                buckets[issue.severity] += 1
            else:
                unknown += 1

    with_issues = [v for v in verdicts if v.issues]
    return AuditSummary(
        total_urls=len(verdicts),
        urls_with_issues=len(with_issues),
        total_issues=sum(len(v.issues) for v in verdicts),
        critical_issues=buckets[Severity.CRITICAL.value],
        major_issues=buckets[Severity.MAJOR.value],
        minor_issues=buckets[Severity.MINOR.value],
        unknown_issues=unknown,
        verdicts_with_issues=with_issues,
    )
