"""CLI entry point for the responsive layout audit."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from responsive_audit.errors import AuditError
from responsive_audit.models.config import AuditConfig
from responsive_audit.orchestrator import AuditPipeline

console = Console()


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def _load_config(path: str) -> AuditConfig:
    try:
        return AuditConfig.load_or_default(path)
    except ValueError as e:
        console.print(f"[red]Invalid config file {path}: {e}[/red]")
        sys.exit(1)


def _capture(cfg: AuditConfig, urls: str | None) -> None:
    try:
        result = AuditPipeline(cfg).run_capture(urls)
    except AuditError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    if not result.successful:
        console.print("[red]No successful screenshot captures[/red]")
        sys.exit(1)

    console.print("\n[bold green]Screenshots Captured[/bold green]")
    console.print(f"  Successful: {len(result.successful)}/{len(result.outcomes)}")
    console.print(f"  Tasks:      {len(result.tasks)} -> [blue]{result.tasks_path}[/blue]")


def _analyze(cfg: AuditConfig) -> None:
    try:
        verdicts = AuditPipeline(cfg).run_analyze()
    except EnvironmentError as e:
        console.print(f"[red]{e}[/red]")
        console.print("Alternatively, have your own agent write "
                      f"[blue]{cfg.results_path}[/blue] from [blue]{cfg.tasks_path}[/blue].")
        sys.exit(1)
    except AuditError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    issues = sum(len(v.issues) for v in verdicts)
    console.print(f"[green]Analysis complete:[/green] {len(verdicts)} URLs, {issues} issues")


def _report(cfg: AuditConfig, open_report: bool) -> None:
    try:
        summary, reports = AuditPipeline(cfg).run_report()
    except AuditError as e:
        console.print(f"[red]{e}[/red]")
        console.print("Run the analysis first so that the results file exists.")
        sys.exit(1)

    table = Table(title="Responsive Layout Summary")
    table.add_column("Metric", style="bold")
    table.add_column("Value")
    table.add_row("URLs checked", str(summary.total_urls))
    table.add_row("URLs with issues", str(summary.urls_with_issues))
    table.add_row("Total issues", str(summary.total_issues))
    table.add_row("Critical", f"[red]{summary.critical_issues}[/red]")
    table.add_row("Major", f"[yellow]{summary.major_issues}[/yellow]")
    table.add_row("Minor", str(summary.minor_issues))
    if summary.unknown_issues:
        table.add_row("Unknown severity", str(summary.unknown_issues))
    console.print(table)

    for fmt, path in reports.items():
        console.print(f"  {fmt.upper()} report: [blue]{path}[/blue]")

    if open_report and "html" in reports:
        try:
            click.launch(reports["html"])
        except OSError as e:
            console.print(f"[yellow]Could not open the report ({e}). Open it manually: {reports['html']}[/yellow]")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Responsive layout audit: capture, compare, report."""
    setup_logging(verbose)


@cli.command()
@click.option("--urls", "-u", default=None, help="URL list file (defaults to urls_file in config)")
@click.option("--config", "-c", default="audit-config.json", help="Config file path")
def capture(urls: str | None, config: str) -> None:
    """Capture screenshots at every width and write the analysis task list."""
    _capture(_load_config(config), urls)


@cli.command()
@click.option("--config", "-c", default="audit-config.json", help="Config file path")
def analyze(config: str) -> None:
    """Review the analysis tasks with Claude and write the analysis results."""
    _analyze(_load_config(config))


@cli.command()
@click.option("--open/--no-open", "open_report", default=True, help="Open the HTML report when done")
@click.option("--config", "-c", default="audit-config.json", help="Config file path")
def report(open_report: bool, config: str) -> None:
    """Aggregate the analysis results into HTML/JSON reports."""
    _report(_load_config(config), open_report)


@cli.command()
@click.option("--urls", "-u", default=None, help="URL list file (defaults to urls_file in config)")
@click.option("--open/--no-open", "open_report", default=False, help="Open the HTML report when done")
@click.option("--config", "-c", default="audit-config.json", help="Config file path")
def run(urls: str | None, open_report: bool, config: str) -> None:
    """Run capture, AI analysis and reporting in one go."""
    cfg = _load_config(config)
    _capture(cfg, urls)
    _analyze(cfg)
    _report(cfg, open_report)


@cli.command()
@click.option("--config", "-c", default="audit-config.json", help="Config file path")
def init(config: str) -> None:
    """Create a default configuration file and an example URL list."""
    config_path = Path(config)
    if config_path.exists():
        if not click.confirm(f"{config_path} already exists. Overwrite?"):
            return

    cfg = AuditConfig()
    cfg.save(config_path)
    console.print(f"[green]Created {config_path}[/green]")

    urls_path = Path(cfg.urls_file)
    if not urls_path.exists():
        urls_path.write_text("# One URL per line; lines starting with # are ignored\nhttps://example.com/\n",
                             encoding="utf-8")
        console.print(f"[green]Created {urls_path}[/green]")

    console.print("\nAdd your URLs and run:")
    console.print("  [blue]responsive-audit capture[/blue]")


if __name__ == "__main__":
    cli()
