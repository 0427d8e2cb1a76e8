"""HTML report generator: produces a self-contained responsive layout report."""

from __future__ import annotations

import base64
import html
import logging
from pathlib import Path

from responsive_audit.models.analysis import AnalysisVerdict, AuditSummary, LayoutIssue
from responsive_audit.models.capture import DESKTOP_BASELINE_WIDTH, MOBILE_BASELINE_WIDTH

logger = logging.getLogger(__name__)

SEVERITY_COLORS = {
    "critical": "#dc2626",
    "major": "#ea580c",
    "minor": "#d97706",
}
SEVERITY_LABELS = {
    "critical": "Critical",
    "major": "Major",
    "minor": "Minor",
}
UNKNOWN_COLOR = "#6b7280"
UNKNOWN_LABEL = "Unknown"


def _embed_image(path: str) -> str:
    """Read an image file and return a base64 data URI, or empty string on failure."""
    try:
        p = Path(path)
        if not p.exists() or p.stat().st_size == 0:
            return ""
        with open(p, "rb") as f:
            data = base64.b64encode(f.read()).decode()
        return f"data:image/png;base64,{data}"
    except OSError:
        return ""


def severity_color(severity: str) -> str:
    return SEVERITY_COLORS.get(severity, UNKNOWN_COLOR)


def severity_label(severity: str) -> str:
    return SEVERITY_LABELS.get(severity, UNKNOWN_LABEL)


def _screenshot_item(label: str, path: str | None, alt: str) -> str:
    uri = _embed_image(path) if path else ""
    image = f'<img src="{uri}" alt="{html.escape(alt)}">' if uri else '<p class="missing">Image not found</p>'
    return f'''
          <div class="screenshot-item">
            <div class="screenshot-label">{html.escape(label)}</div>
            {image}
          </div>'''


def _build_issue_card(issue: LayoutIssue) -> str:
    """Build the card for one issue: badge, description, and the three screenshots."""
    baseline = issue.baseline_comparison
    items = _screenshot_item(
        f"Affected layout ({issue.width}px)", issue.screenshot_path, f"{issue.width}px screenshot",
    )
    items += _screenshot_item(
        f"Desktop baseline ({DESKTOP_BASELINE_WIDTH}px)",
        baseline.desktop if baseline else None,
        f"{DESKTOP_BASELINE_WIDTH}px baseline",
    )
    items += _screenshot_item(
        f"Mobile baseline ({MOBILE_BASELINE_WIDTH}px)",
        baseline.mobile if baseline else None,
        f"{MOBILE_BASELINE_WIDTH}px baseline",
    )

    return f'''
      <div class="issue-detail">
        <div class="issue-header">
          <span class="issue-severity" style="background-color: {severity_color(issue.severity)}">{severity_label(issue.severity)}</span>
          <span class="issue-width">{issue.width}px</span>
        </div>
        <div class="issue-description">{html.escape(issue.description)}</div>
        <div class="screenshot-comparison">{items}
        </div>
      </div>'''


def _build_url_section(verdict: AnalysisVerdict) -> str:
    url = html.escape(verdict.url)
    cards = "".join(_build_issue_card(issue) for issue in verdict.issues)
    return f'''
    <div class="url-section">
      <h2 class="url-title"><a href="{url}" target="_blank">{url}</a></h2>
      <div class="issue-count">Issues found: {len(verdict.issues)}</div>
      {cards}
    </div>'''


def generate_html_report(summary: AuditSummary, output_path: Path, generated_at: str = "") -> None:
    """Generate a self-contained HTML report with embedded screenshots."""
    if summary.verdicts_with_issues:
        details = "".join(_build_url_section(v) for v in summary.verdicts_with_issues)
    else:
        details = '''
    <div class="no-issues">
      <h2>&#127881; No layout issues detected</h2>
      <p>No obvious layout breakage was found at any width for any URL.</p>
    </div>'''

    unknown_stat = ""
    if summary.unknown_issues:
        unknown_stat = f'<div class="stat unknown"><div class="label">Unknown Severity</div><div class="value">{summary.unknown_issues}</div></div>'

    report_html = f'''<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>Responsive Layout Report</title>
<style>
  :root {{ --critical: #dc2626; --major: #ea580c; --minor: #d97706; --bg: #f9fafb; --card: white; --border: #e5e7eb; --text: #1f2937; --muted: #6b7280; --accent: #4f46e5; }}
  * {{ margin: 0; padding: 0; box-sizing: border-box; }}
  body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif; line-height: 1.6; color: var(--text); background: var(--bg); padding: 2rem; }}
  .container {{ max-width: 1400px; margin: 0 auto; background: var(--card); border-radius: 12px; box-shadow: 0 1px 3px rgba(0,0,0,0.1); overflow: hidden; }}
  .header {{ background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: white; padding: 3rem 2rem; }}
  .header h1 {{ font-size: 2.2rem; margin-bottom: 0.5rem; }}
  .header .subtitle {{ opacity: 0.9; }}
  /* Summary cards */
  .summary {{ display: grid; grid-template-columns: repeat(auto-fit, minmax(180px, 1fr)); gap: 1.2rem; padding: 2rem; border-bottom: 1px solid var(--border); }}
  .stat {{ background: var(--card); padding: 1.2rem; border-radius: 8px; box-shadow: 0 1px 2px rgba(0,0,0,0.05); }}
  .stat .label {{ font-size: 0.85rem; color: var(--muted); margin-bottom: 0.4rem; }}
  .stat .value {{ font-size: 2rem; font-weight: 700; }}
  .stat.critical .value {{ color: var(--critical); }}
  .stat.major .value {{ color: var(--major); }}
  .stat.minor .value {{ color: var(--minor); }}
  .stat.unknown .value {{ color: var(--muted); }}
  /* URL sections */
  .content {{ padding: 2rem; }}
  .url-section {{ margin-bottom: 3rem; border: 1px solid var(--border); border-radius: 8px; overflow: hidden; }}
  .url-title {{ background: #f3f4f6; padding: 1rem 1.5rem; font-size: 1.2rem; border-bottom: 1px solid var(--border); word-break: break-all; }}
  .url-title a {{ color: var(--accent); text-decoration: none; }}
  .url-title a:hover {{ text-decoration: underline; }}
  .issue-count {{ padding: 0.75rem 1.5rem; background: #fef3c7; border-bottom: 1px solid #fcd34d; font-weight: 600; color: #92400e; }}
  /* Issues */
  .issue-detail {{ padding: 1.5rem; border-bottom: 1px solid var(--border); }}
  .issue-detail:last-child {{ border-bottom: none; }}
  .issue-header {{ display: flex; align-items: center; gap: 0.8rem; margin-bottom: 0.8rem; }}
  .issue-severity {{ color: white; padding: 0.2rem 0.75rem; border-radius: 9999px; font-size: 0.8rem; font-weight: 600; }}
  .issue-width {{ font-family: monospace; font-weight: 600; background: #f3f4f6; padding: 0.15rem 0.5rem; border-radius: 4px; }}
  .issue-description {{ margin-bottom: 1rem; }}
  /* Screenshots */
  .screenshot-comparison {{ display: grid; grid-template-columns: repeat(auto-fit, minmax(280px, 1fr)); gap: 1rem; }}
  .screenshot-item {{ border: 1px solid var(--border); border-radius: 6px; padding: 0.6rem; background: #fafafa; }}
  .screenshot-item img {{ width: 100%; max-height: 800px; object-fit: contain; object-position: top; cursor: pointer; }}
  .screenshot-item img.zoomed {{ position: fixed; top: 5%; left: 5%; width: 90%; height: 90%; max-height: none; z-index: 1000; background: rgba(0,0,0,0.85); padding: 1rem; border-radius: 8px; }}
  .screenshot-label {{ font-size: 0.8rem; color: var(--muted); margin-bottom: 0.4rem; font-weight: 600; }}
  .missing {{ color: var(--muted); font-style: italic; }}
  .no-issues {{ text-align: center; padding: 4rem 2rem; }}
  .no-issues h2 {{ color: #16a34a; margin-bottom: 0.5rem; }}
  .footer {{ text-align: center; padding: 1.5rem; color: var(--muted); font-size: 0.85rem; border-top: 1px solid var(--border); }}
</style>
</head>
<body>
<div class="container">
  <div class="header">
    <h1>Responsive Layout Report</h1>
    <p class="subtitle">Generated {html.escape(generated_at)}</p>
  </div>

  <div class="summary">
    <div class="stat"><div class="label">URLs Checked</div><div class="value">{summary.total_urls}</div></div>
    <div class="stat"><div class="label">URLs With Issues</div><div class="value">{summary.urls_with_issues}</div></div>
    <div class="stat"><div class="label">Total Issues</div><div class="value">{summary.total_issues}</div></div>
    <div class="stat critical"><div class="label">Critical</div><div class="value">{summary.critical_issues}</div></div>
    <div class="stat major"><div class="label">Major</div><div class="value">{summary.major_issues}</div></div>
    <div class="stat minor"><div class="label">Minor</div><div class="value">{summary.minor_issues}</div></div>
    {unknown_stat}
  </div>

  <div class="content">
    {details}
  </div>

  <div class="footer">Generated by responsive-audit</div>
</div>
<script>
document.querySelectorAll('.screenshot-item img').forEach(img => {{
  img.addEventListener('click', () => img.classList.toggle('zoomed'));
}});
</script>
</body>
</html>'''

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(report_html)
    logger.debug("Wrote HTML report with %d URL sections", len(summary.verdicts_with_issues))
