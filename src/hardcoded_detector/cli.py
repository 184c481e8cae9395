"""hardcoded-detector CLI: Typer application with scan, baseline, patterns, init and hook commands."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from hardcoded_detector import __version__
from hardcoded_detector.config.loader import CONFIG_FILENAME, ConfigError, load_config
from hardcoded_detector.config.schema import OUTPUT_FORMATS, SEVERITY_LEVELS, DetectorConfig
from hardcoded_detector.git.adapter import GitError, get_repo_root, get_staged_files
from hardcoded_detector.log import configure_logging
from hardcoded_detector.scanner.discovery import ScanRootError, is_excluded

app = typer.Typer(
    name="hardcoded-detector",
    help="Find hardcoded API keys and credentials in source code.",
    add_completion=False,
    no_args_is_help=True,
)
baseline_app = typer.Typer(help="Manage the findings baseline.", no_args_is_help=True)
app.add_typer(baseline_app, name="baseline")

console = Console(stderr=True)


def _fail(label: str, exc: Exception) -> typer.Exit:
    console.print(f"[bold red]{label}:[/bold red] {exc}")
    return typer.Exit(code=2)


def _load(root: Path, config: Optional[str]) -> DetectorConfig:
    """Load config for *root*, exit 2 on failure."""
    try:
        return load_config(root if root.is_dir() else Path.cwd(), config)
    except ConfigError as exc:
        raise _fail("Config error", exc) from exc


def _resolve_repo_root(cwd: Optional[Path] = None) -> Path:
    """Find the git repo root, exit 2 on failure."""
    try:
        return get_repo_root(cwd)
    except GitError as exc:
        raise _fail("Git error", exc) from exc


def _build_settings(
    root: Path,
    cfg: DetectorConfig,
    *,
    severity: Optional[str] = None,
    workers: Optional[bool] = None,
    baseline: Optional[bool] = None,
    entropy_filter: Optional[bool] = None,
):
    from hardcoded_detector.scanner.engine import ScanSettings

    if severity is not None:
        if severity not in SEVERITY_LEVELS:
            console.print(f"[bold red]Invalid severity:[/bold red] {severity}")
            raise typer.Exit(code=2)
        cfg.scan.min_severity = severity  # type: ignore[assignment]

    settings = ScanSettings.from_config(cfg, root if root.is_dir() else None)
    if workers is not None:
        settings.use_workers = workers
    if baseline is not None:
        settings.use_baseline = baseline
    if entropy_filter is not None:
        settings.use_entropy_filter = entropy_filter
    return settings


# ── scan ──────────────────────────────────────────────────────────────────────


@app.command()
def scan(
    path: Path = typer.Argument(Path("."), help="Directory to scan"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help=f"Path to {CONFIG_FILENAME}"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json | sarif | csv | junit"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write report to file"),
    severity: Optional[str] = typer.Option(None, "--severity", "-s", help="Minimum severity: low | medium | high | critical"),
    staged: bool = typer.Option(False, "--staged", help="Scan only files staged in git"),
    exclude: Optional[List[str]] = typer.Option(None, "--exclude", "-e", help="Extra exclude glob (repeatable)"),
    workers: Optional[bool] = typer.Option(None, "--workers/--no-workers", help="Toggle parallel analysis"),
    baseline: Optional[bool] = typer.Option(None, "--baseline/--no-baseline", help="Filter findings through the baseline"),
    entropy_filter: Optional[bool] = typer.Option(None, "--entropy-filter/--no-entropy-filter", help="Drop low-entropy generic matches"),
    context: bool = typer.Option(False, "--context", help="Show surrounding lines (terminal format)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output"),
) -> None:
    """Scan a directory (or the staged files) for hardcoded credentials."""
    from hardcoded_detector.output import csv_report, json_report, junit, sarif, terminal
    from hardcoded_detector.scanner.engine import Scanner

    configure_logging(verbose, debug)

    if staged:
        path = _resolve_repo_root(path if path.is_dir() else None)

    cfg = _load(path, config)
    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]

    settings = _build_settings(
        path, cfg,
        severity=severity, workers=workers, baseline=baseline, entropy_filter=entropy_filter,
    )
    if exclude:
        settings.exclude.extend(exclude)
    scanner = Scanner(settings)

    try:
        if staged:
            globs = scanner.exclude_globs()
            files = [
                f for f in get_staged_files(path)
                if f.is_file() and not is_excluded(f.relative_to(path).as_posix(), globs)
            ]
            result = scanner.scan([str(f) for f in files])
        else:
            result = scanner.scan_directory(path)
    except GitError as exc:
        raise _fail("Git error", exc) from exc
    except ScanRootError as exc:
        raise _fail("Error", exc) from exc

    renderers = {
        "json": json_report.render,
        "sarif": sarif.render,
        "csv": csv_report.render,
        "junit": junit.render,
    }
    report_text: Optional[str] = None
    if cfg.output.format == "terminal":
        terminal.render(result, show_context=context)
    else:
        report_text = renderers[cfg.output.format](result)
        typer.echo(report_text, nl=not report_text.endswith("\n"))

    if output:
        Path(output).write_text(report_text or json_report.render(result), encoding="utf-8")
        if verbose:
            console.print(f"[dim]Report written to {output}[/dim]")

    raise typer.Exit(code=1 if result.blocked else 0)


# ── baseline ──────────────────────────────────────────────────────────────────


def _baseline_manager(config: Optional[str], baseline_file: Optional[str]):
    from hardcoded_detector.baseline.manager import BaselineManager

    root = Path.cwd()
    if baseline_file:
        return BaselineManager(baseline_file)
    cfg = _load(root, config)
    return BaselineManager(root / cfg.baseline.path)


@baseline_app.command("generate")
def baseline_generate(
    path: Path = typer.Argument(Path("."), help="Directory to scan"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help=f"Path to {CONFIG_FILENAME}"),
    reason: Optional[str] = typer.Option(None, "--reason", help="Reason recorded on every entry"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Scan PATH and record every finding as an accepted baseline entry."""
    from hardcoded_detector.scanner.engine import Scanner

    configure_logging(verbose)
    cfg = _load(path, config)
    scanner = Scanner(_build_settings(path, cfg))
    try:
        files = scanner.discover(path)
    except ScanRootError as exc:
        raise _fail("Error", exc) from exc

    kwargs = {"reason": reason} if reason else {}
    baseline = scanner.generate_baseline([str(f) for f in files], **kwargs)
    console.print(
        f"[green]✓[/green] Baselined {baseline['totalFindings']} findings "
        f"in {scanner.settings.baseline_path}"
    )


@baseline_app.command("review")
def baseline_review(
    key: str = typer.Argument(..., help="Entry key, <file>:<line>"),
    reviewed_by: str = typer.Option(..., "--by", help="Reviewer name"),
    reason: str = typer.Option(..., "--reason", help="Why the finding is accepted"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help=f"Path to {CONFIG_FILENAME}"),
    baseline_file: Optional[str] = typer.Option(None, "--file", help="Baseline file path"),
) -> None:
    """Mark a baseline entry as reviewed."""
    from hardcoded_detector.baseline.manager import BaselineEntryNotFound

    manager = _baseline_manager(config, baseline_file)
    manager.load()
    try:
        manager.update_review(key, reviewed_by, reason)
    except BaselineEntryNotFound as exc:
        console.print(f"[red]✗[/red] {exc.args[0]}")
        raise typer.Exit(code=1) from exc
    console.print(f"[green]✓[/green] Marked {key} as reviewed")


@baseline_app.command("stats")
def baseline_stats(
    config: Optional[str] = typer.Option(None, "--config", "-c", help=f"Path to {CONFIG_FILENAME}"),
    baseline_file: Optional[str] = typer.Option(None, "--file", help="Baseline file path"),
) -> None:
    """Show baseline review progress."""
    manager = _baseline_manager(config, baseline_file)
    manager.load()
    stats = manager.stats()
    console.print(f"[dim]Total:[/dim]      {stats['total']}")
    console.print(f"[dim]Reviewed:[/dim]   {stats['reviewed']}")
    console.print(f"[dim]Unreviewed:[/dim] {stats['unreviewed']}")
    for sev, count in sorted(stats["by_severity"].items()):
        console.print(f"[dim]  {sev}:[/dim] {count}")


# ── patterns ──────────────────────────────────────────────────────────────────


@app.command()
def patterns(
    category: Optional[str] = typer.Option(None, "--category", help="Only this category"),
    service: Optional[str] = typer.Option(None, "--service", help="Only this service"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help=f"Path to {CONFIG_FILENAME}"),
) -> None:
    """List the active detection patterns."""
    from hardcoded_detector.patterns.catalog import PatternCatalog

    cfg = _load(Path.cwd(), config)
    catalog = PatternCatalog.load(cfg.patterns.custom_patterns)
    selected = catalog.by_category(category) if category else list(catalog)
    if service:
        selected = [s for s in catalog.by_service(service) if s in selected]

    table = Table(title=f"Patterns ({len(selected)})", border_style="dim")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Severity")
    table.add_column("Category", style="magenta")
    table.add_column("Service")
    for sig in selected:
        table.add_row(sig.id, sig.name, sig.severity, sig.category, sig.service)
    Console().print(table)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init(
    path: Path = typer.Argument(Path("."), help="Directory to write the config into"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config file"),
) -> None:
    """Generate a starter .hardcoded-detector.toml."""
    from hardcoded_detector.config.defaults import DEFAULT_TOML

    config_path = path / CONFIG_FILENAME
    if config_path.exists() and not force:
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── install / uninstall ───────────────────────────────────────────────────────


@app.command()
def install(
    force: bool = typer.Option(False, "--force", help="Overwrite existing pre-commit hook"),
) -> None:
    """Install a git pre-commit hook that scans staged files."""
    from hardcoded_detector.hooks.installer import install_hook

    success, msg = install_hook(_resolve_repo_root(), force=force)
    if success:
        console.print(f"[green]✓[/green] {msg}")
    else:
        console.print(f"[red]✗[/red] {msg}")
        raise typer.Exit(code=1)


@app.command()
def uninstall() -> None:
    """Remove the pre-commit hook."""
    from hardcoded_detector.hooks.installer import uninstall_hook

    success, msg = uninstall_hook(_resolve_repo_root())
    if success:
        console.print(f"[green]✓[/green] {msg}")
    else:
        console.print(f"[red]✗[/red] {msg}")
        raise typer.Exit(code=1)


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"hardcoded-detector {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """hardcoded-detector: find hardcoded API keys and credentials in source code."""
