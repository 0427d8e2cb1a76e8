"""Tests for result aggregation."""

import pytest

from responsive_audit.reporter.aggregator import aggregate_results


class TestAggregateResults:
    """Tests for aggregate_results."""

    def test_empty_input(self):
        summary = aggregate_results([])
        assert summary.total_urls == 0
        assert summary.total_issues == 0
        assert summary.verdicts_with_issues == []

    def test_counts_by_severity_across_targets(self, make_verdict):
        verdicts = [
            make_verdict("https://a.example/", ["critical", "major", "minor"]),
            make_verdict("https://b.example/", []),
            make_verdict("https://c.example/", ["critical", "minor", "minor"]),
        ]

        summary = aggregate_results(verdicts)

        assert summary.total_urls == 3
        assert summary.urls_with_issues == 2
        assert summary.total_issues == 6
        assert summary.critical_issues == 2
        assert summary.major_issues == 1
        assert summary.minor_issues == 3
        assert summary.unknown_issues == 0

    def test_unrecognized_severity_goes_to_unknown(self, make_verdict):
        summary = aggregate_results([make_verdict(severities=["blocker", "CRITICAL", "minor"])])

        assert summary.unknown_issues == 2
        assert summary.minor_issues == 1
        assert summary.total_issues == 3

    @pytest.mark.parametrize("severities", [
        [],
        ["critical"],
        ["major", "major", "weird"],
        ["minor", "critical", "", "major", "minor"],
    ])
    def test_buckets_sum_to_total(self, severities, make_verdict):
        summary = aggregate_results([make_verdict(severities=severities), make_verdict(severities=["minor"])])

        assert (
            summary.critical_issues + summary.major_issues
            + summary.minor_issues + summary.unknown_issues
        ) == summary.total_issues

    def test_filtered_verdicts_preserve_input_order(self, make_verdict):
        verdicts = [
            make_verdict("https://z.example/", ["minor"]),
            make_verdict("https://y.example/", []),
            make_verdict("https://a.example/", ["major"]),
        ]

        summary = aggregate_results(verdicts)

        assert [v.url for v in summary.verdicts_with_issues] == ["https://z.example/", "https://a.example/"]
        assert summary.urls_with_issues == len(summary.verdicts_with_issues)

    def test_does_not_mutate_input(self, make_verdict):
        verdicts = [make_verdict(severities=["major"]), make_verdict(severities=[])]
        before = [v.model_copy(deep=True) for v in verdicts]

        aggregate_results(verdicts)

        assert verdicts == before
