"""Reading and writing analysis verdicts."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from responsive_audit.errors import VerdictLoadError
from responsive_audit.models.analysis import AnalysisVerdict

logger = logging.getLogger(__name__)


def load_analysis_results(input_path: Path) -> list[AnalysisVerdict]:
    """Load verdicts produced by the analysis agent.

    ``analyzedAt`` must parse as a timestamp; severities are not checked here.
    """
    if not input_path.exists():
        raise VerdictLoadError(f"Analysis results not found: {input_path}")
    try:
        with open(input_path, encoding="utf-8") as f:
            data = json.load(f)
        return [AnalysisVerdict.model_validate(item) for item in data]
    except (OSError, json.JSONDecodeError, ValidationError, TypeError) as e:
        raise VerdictLoadError(f"Failed to load analysis results: {e}") from e


def save_analysis_results(verdicts: list[AnalysisVerdict], output_path: Path) -> None:
    """Write verdicts in the format load_analysis_results reads."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(
            [v.model_dump(mode="json", by_alias=True) for v in verdicts],
            f, indent=2,
        )
    logger.info("Analysis results saved: %s", output_path)
