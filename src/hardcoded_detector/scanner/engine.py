"""Scan orchestration: pick a strategy, analyse files, filter, aggregate."""

from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Literal, Optional, Sequence, Union

from hardcoded_detector.baseline.manager import DEFAULT_BASELINE_PATH, Baseline, BaselineManager
from hardcoded_detector.config.schema import DEFAULT_EXCLUDE, DetectorConfig
from hardcoded_detector.findings.aggregator import aggregate
from hardcoded_detector.findings.models import FileResult, ScanResult
from hardcoded_detector.patterns.catalog import PatternCatalog
from hardcoded_detector.scanner.analyzer import MAX_FILE_SIZE, AnalysisOptions, ContentAnalyzer
from hardcoded_detector.scanner.discovery import discover_files, validate_root
from hardcoded_detector.scanner.pool import AnalysisTask, WorkerPool
from hardcoded_detector.scanner.stream import StreamAnalyzer

logger = logging.getLogger(__name__)

PARALLEL_THRESHOLD = 10


@dataclass
class ScanSettings:
    """Everything the orchestrator needs, independent of where it came from."""

    min_severity: str = "medium"
    disabled_patterns: List[str] = field(default_factory=list)
    excluded_categories: List[str] = field(default_factory=list)
    use_entropy_filter: bool = False
    custom_patterns: Optional[str] = None
    include: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE))
    use_workers: bool = True
    worker_count: Optional[int] = None
    executor: Literal["process", "thread"] = "process"
    use_baseline: bool = False
    baseline_path: str = DEFAULT_BASELINE_PATH
    stream_large_files: bool = False
    max_findings: int = 1000

    @classmethod
    def from_config(cls, cfg: DetectorConfig, root: Optional[Path] = None) -> "ScanSettings":
        """Convert loaded config; relative file paths are resolved against *root*."""

        def _resolve(p: Optional[str]) -> Optional[str]:
            if p is None or root is None or Path(p).is_absolute():
                return p
            return str(root / p)

        return cls(
            min_severity=cfg.scan.min_severity,
            disabled_patterns=list(cfg.patterns.disabled),
            excluded_categories=list(cfg.patterns.exclude_categories),
            use_entropy_filter=cfg.entropy.filter,
            custom_patterns=_resolve(cfg.patterns.custom_patterns),
            include=list(cfg.scan.include),
            exclude=list(cfg.scan.exclude),
            use_workers=cfg.workers.enabled,
            worker_count=cfg.workers.count,
            executor=cfg.workers.executor,
            use_baseline=cfg.baseline.enabled,
            baseline_path=_resolve(cfg.baseline.path) or DEFAULT_BASELINE_PATH,
            stream_large_files=cfg.scan.stream_large_files,
        )

    def analysis_options(self) -> AnalysisOptions:
        return AnalysisOptions.build(
            min_severity=self.min_severity,
            disabled_patterns=self.disabled_patterns,
            excluded_categories=self.excluded_categories,
            use_entropy_filter=self.use_entropy_filter,
            max_findings=self.max_findings,
        )


class Scanner:
    """Run a scan over a list of files or a directory tree."""

    def __init__(
        self,
        settings: Optional[ScanSettings] = None,
        *,
        catalog: Optional[PatternCatalog] = None,
        logger: logging.Logger = logger,
    ) -> None:
        self.settings = settings or ScanSettings()
        self.log = logger
        self.catalog = catalog or PatternCatalog.load(self.settings.custom_patterns)
        self.analyzer = ContentAnalyzer(self.catalog)
        self.stream_analyzer = StreamAnalyzer(self.catalog)

    # ---- public API ----

    def scan(self, file_paths: Sequence[Union[str, Path]]) -> ScanResult:
        """Scan *file_paths*. Paths are reported resolved to absolute form."""
        return self._scan(file_paths, use_baseline=self.settings.use_baseline)

    def scan_directory(self, root: Union[str, Path]) -> ScanResult:
        """Discover files under *root* and scan them. Raises ScanRootError first."""
        return self.scan(self.discover(root))

    def exclude_globs(self) -> List[str]:
        exclude = list(self.settings.exclude)
        baseline_name = Path(self.settings.baseline_path).name
        if baseline_name not in exclude:
            # The baseline stores match prefixes and would flag itself.
            exclude.append(baseline_name)
        return exclude

    def discover(self, root: Union[str, Path]) -> List[Path]:
        root = validate_root(Path(root))
        return discover_files(root, self.settings.include, self.exclude_globs())

    def generate_baseline(
        self,
        file_paths: Sequence[Union[str, Path]],
        **kwargs: str,
    ) -> Baseline:
        """Scan without baseline filtering and persist every finding as a new baseline."""
        self.log.info("Generating baseline from current scan...")
        result = self._scan(file_paths, use_baseline=False)
        baseline = BaselineManager(self.settings.baseline_path, logger=self.log).generate(result, **kwargs)
        self.log.info("Baseline generated: %d findings baselined", baseline["totalFindings"])
        return baseline

    # ---- internals ----

    def _tasks(self, file_paths: Iterable[Union[str, Path]]) -> List[AnalysisTask]:
        options = self.settings.analysis_options()
        return [
            AnalysisTask(str(path), options, stream=self._wants_stream(path))
            for path in (Path(p).resolve() for p in file_paths)
        ]

    def _wants_stream(self, path: Path) -> bool:
        if not self.settings.stream_large_files:
            return False
        try:
            return os.stat(path).st_size > MAX_FILE_SIZE
        except OSError:
            return False

    def _scan(self, file_paths: Sequence[Union[str, Path]], *, use_baseline: bool) -> ScanResult:
        start = time.perf_counter()
        tasks = self._tasks(file_paths)

        if self.settings.use_workers and len(tasks) >= PARALLEL_THRESHOLD:
            self.log.info("Using parallel processing for %d files", len(tasks))
            results = self._run_parallel(tasks)
        else:
            self.log.info("Using single-threaded scanning for %d files", len(tasks))
            results = self._run_sequential(tasks)

        failed = [r for r in results if r.error is not None]
        if failed:
            self.log.warning("%d files failed to analyze", len(failed))

        if use_baseline:
            results = BaselineManager(self.settings.baseline_path, logger=self.log).filter(results)

        elapsed = (time.perf_counter() - start) * 1000
        return aggregate(results, total_files=len(tasks), scan_duration_ms=elapsed)

    def _run_sequential(self, tasks: Sequence[AnalysisTask]) -> List[FileResult]:
        results: List[FileResult] = []
        for task in tasks:
            analyzer = self.stream_analyzer if task.stream else self.analyzer
            try:
                findings = analyzer.analyze(task.file_path, task.options)
            except Exception as exc:
                self.log.warning("Analysis failed on %s: %s", task.file_path, exc)
                results.append(FileResult(file=task.file_path, error=f"{type(exc).__name__}: {exc}"))
                continue
            results.append(FileResult(file=task.file_path, findings=tuple(findings)))
        return results

    def _run_parallel(self, tasks: Sequence[AnalysisTask]) -> List[FileResult]:
        with WorkerPool(
            self.settings.worker_count,
            custom_patterns=self.settings.custom_patterns,
            signatures=tuple(self.catalog),
            executor=self.settings.executor,
            logger=self.log,
        ) as pool:
            return pool.run(tasks)
