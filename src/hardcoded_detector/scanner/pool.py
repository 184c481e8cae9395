"""Bounded worker pool over concurrent.futures.

Each worker builds its own PatternCatalog in the executor initializer, either
from signatures handed over once at start-up or by loading the catalog
itself. After that only tasks and results cross the worker boundary.
"""

from __future__ import annotations

import logging
import os
import threading
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Dict, List, Literal, Optional, Sequence, Tuple

from hardcoded_detector.findings.models import FileResult
from hardcoded_detector.patterns.catalog import PatternCatalog
from hardcoded_detector.patterns.models import Signature
from hardcoded_detector.scanner.analyzer import AnalysisOptions, ContentAnalyzer
from hardcoded_detector.scanner.stream import StreamAnalyzer

logger = logging.getLogger(__name__)

ExecutorKind = Literal["process", "thread"]

_worker = threading.local()


@dataclass(frozen=True)
class AnalysisTask:
    file_path: str
    options: AnalysisOptions
    stream: bool = False


def init_worker(
    custom_patterns: Optional[str],
    signatures: Optional[Tuple[Signature, ...]] = None,
) -> None:
    """Executor initializer: build this worker's private catalog.

    *signatures* are already validated and are used as given; otherwise the
    built-in catalog is loaded with *custom_patterns* overlaid.
    """
    if signatures is not None:
        catalog = PatternCatalog(signatures)
    else:
        catalog = PatternCatalog.load(custom_patterns)
    _worker.analyzer = ContentAnalyzer(catalog)
    _worker.stream = StreamAnalyzer(catalog)


def run_task(task: AnalysisTask) -> FileResult:
    analyzer = _worker.stream if task.stream else _worker.analyzer
    findings = analyzer.analyze(task.file_path, task.options)
    return FileResult(file=task.file_path, findings=tuple(findings))


class WorkerPool:
    """Context manager around a process or thread executor.

    Usage::

        with WorkerPool(size=4, custom_patterns=None) as pool:
            results = pool.run(tasks)
    """

    def __init__(
        self,
        size: Optional[int] = None,
        *,
        custom_patterns: Optional[str] = None,
        signatures: Optional[Sequence[Signature]] = None,
        executor: ExecutorKind = "process",
        logger: logging.Logger = logger,
    ) -> None:
        self.size = max(1, size or os.cpu_count() or 1)
        self.custom_patterns = custom_patterns
        self.signatures = tuple(signatures) if signatures is not None else None
        self.kind = executor
        self.log = logger
        self._executor: Optional[Executor] = None

    def __enter__(self) -> "WorkerPool":
        cls = ProcessPoolExecutor if self.kind == "process" else ThreadPoolExecutor
        self._executor = cls(
            max_workers=self.size,
            initializer=init_worker,
            initargs=(self.custom_patterns, self.signatures),
        )
        self.log.debug("Started %s pool with %d workers", self.kind, self.size)
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True, cancel_futures=True)
            self._executor = None

    def run(self, tasks: Sequence[AnalysisTask]) -> List[FileResult]:
        """Run *tasks*; results come back in task order.

        A task that raises (or whose worker died) yields an empty FileResult
        carrying the error instead of aborting the batch.
        """
        if self._executor is None:
            raise RuntimeError("WorkerPool must be used as a context manager")

        futures = {self._executor.submit(run_task, task): i for i, task in enumerate(tasks)}
        results: Dict[int, FileResult] = {}
        for future in as_completed(futures):
            i = futures[future]
            try:
                results[i] = future.result()
            except Exception as exc:
                self.log.warning("Worker failed on %s: %s", tasks[i].file_path, exc)
                results[i] = FileResult(file=tasks[i].file_path, error=f"{type(exc).__name__}: {exc}")
        return [results[i] for i in range(len(tasks))]
