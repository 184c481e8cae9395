"""Rich terminal reporter: colour, icons, severity pills."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from hardcoded_detector.findings.models import Finding, ScanResult
from hardcoded_detector.findings.redactor import redact

_SEVERITY_STYLE = {
    "critical": "bold white on red",
    "high": "bold white on dark_orange",
    "medium": "bold black on yellow",
    "low": "bold black on bright_cyan",
}

_SEVERITY_ICON = {
    "critical": "🔴",
    "high": "🟠",
    "medium": "🟡",
    "low": "🔵",
}


def _severity_pill(severity: str) -> Text:
    style = _SEVERITY_STYLE.get(severity, "")
    icon = _SEVERITY_ICON.get(severity, "")
    return Text(f" {icon} {severity.upper()} ", style=style)


def render(
    result: ScanResult,
    *,
    console: Optional[Console] = None,
    show_context: bool = False,
) -> None:
    """Print scan results to the terminal using Rich."""
    console = console or Console(stderr=True)

    if not result.findings:
        console.print()
        console.print("[bold green]✅ No hardcoded credentials detected.[/bold green]")
        _print_summary(console, result)
        return

    console.print()
    table = Table(
        title="Hardcoded Credential Findings",
        show_lines=True,
        title_style="bold",
        border_style="dim",
    )
    table.add_column("Severity", justify="center", width=12)
    table.add_column("Pattern", style="cyan", min_width=20)
    table.add_column("Location", style="magenta")
    table.add_column("Match", min_width=15)

    for finding in result.findings:
        table.add_row(
            _severity_pill(finding.severity),
            finding.name,
            f"{finding.file_path}:{finding.line}:{finding.column}",
            redact(finding.matched_text),
        )

    console.print(table)

    if show_context:
        for finding in result.findings:
            _print_context(console, finding)

    _print_summary(console, result)

    console.print()
    if result.blocked:
        console.print(
            "[bold red]❌ Critical or high severity credentials found.[/bold red]"
        )
    else:
        console.print(
            "[bold yellow]⚠️  Findings detected below high severity.[/bold yellow]"
        )


def _print_context(console: Console, finding: Finding) -> None:
    console.print()
    console.print(f"[bold]{finding.file_path}:{finding.line}[/bold] [dim]{finding.pattern_id}[/dim]")
    secret = finding.matched_text
    for ctx in finding.context:
        text = ctx.content.replace(secret, redact(secret)) if secret else ctx.content
        prefix = ">>>" if ctx.is_target else "   "
        style = "red" if ctx.is_target else "dim"
        console.print(Text(f"{prefix} {ctx.line_number:>5} | {text}", style=style))


def _print_summary(console: Console, result: ScanResult) -> None:
    counts = result.severity_counts
    console.print()
    console.print(f"[dim]Files scanned:[/dim]     {result.total_files}")
    console.print(f"[dim]Files with issues:[/dim] {result.files_with_issues}")
    console.print(f"[dim]Findings:[/dim]          {result.total_findings}")
    console.print(
        f"[dim]By severity:[/dim]       "
        f"critical {counts.get('critical', 0)}, high {counts.get('high', 0)}, "
        f"medium {counts.get('medium', 0)}, low {counts.get('low', 0)}"
    )
    if result.errors:
        console.print(f"[dim]Failed files:[/dim]      {len(result.errors)}")
    console.print(f"[dim]Duration:[/dim]          {result.scan_duration_ms:.0f}ms")
