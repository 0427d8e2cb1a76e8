"""Tests for configuration and capture models."""

import json

import pytest
from pydantic import ValidationError

from responsive_audit.models.capture import ComparisonTask
from responsive_audit.models.config import AuditConfig, CaptureConfig


class TestCaptureConfig:
    def test_defaults(self):
        cfg = CaptureConfig()
        assert cfg.viewport_height == 1080
        assert cfg.settle_delay_ms == 500
        assert cfg.navigation_timeout_ms == 30000
        assert cfg.headless is True

    @pytest.mark.parametrize("field", ["viewport_height", "navigation_timeout_ms"])
    def test_rejects_non_positive(self, field):
        with pytest.raises(ValidationError):
            CaptureConfig(**{field: 0})

    def test_rejects_negative_settle_delay(self):
        with pytest.raises(ValidationError):
            CaptureConfig(settle_delay_ms=-1)

    def test_zero_settle_delay_allowed(self):
        assert CaptureConfig(settle_delay_ms=0).settle_delay_ms == 0


class TestAuditConfig:
    """Tests for loading and saving AuditConfig."""

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "nested" / "audit-config.json"
        cfg = AuditConfig(urls_file="sites.txt", capture=CaptureConfig(headless=False))

        cfg.save(path)
        loaded = AuditConfig.load(path)

        assert loaded == cfg
        assert json.loads(path.read_text())["capture"]["headless"] is False

    def test_load_missing_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            AuditConfig.load(tmp_path / "missing.json")

    def test_load_or_default_without_file(self, tmp_path):
        assert AuditConfig.load_or_default(tmp_path / "missing.json") == AuditConfig()

    def test_load_or_default_with_file(self, tmp_path):
        path = tmp_path / "audit-config.json"
        path.write_text(json.dumps({"report_formats": ["json"]}))
        assert AuditConfig.load_or_default(path).report_formats == ["json"]


class TestCaptureOutcome:
    def test_succeeded_requires_no_error_and_screenshots(self, make_outcome):
        assert make_outcome().succeeded
        assert not make_outcome(error="boom").succeeded
        assert not make_outcome(widths=()).succeeded

    def test_screenshot_for_exact_width(self, make_outcome):
        outcome = make_outcome(widths=(1400, 375))
        assert outcome.screenshot_for(1400).path.endswith("1400px.png")
        assert outcome.screenshot_for(1401) is None


class TestComparisonTask:
    def test_accepts_python_and_wire_names(self):
        by_name = ComparisonTask(
            url="u", slug="s", target_width=800, target_screenshot="t",
            desktop_baseline="d", mobile_baseline="m",
        )
        by_alias = ComparisonTask.model_validate({
            "url": "u", "slug": "s", "targetWidth": 800, "targetScreenshot": "t",
            "baseline1400": "d", "baseline375": "m",
        })
        assert by_name == by_alias
