"""Fold per-file results into a ScanResult."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Optional

from hardcoded_detector.findings.models import FileResult, ScanResult


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def aggregate(
    file_results: Iterable[FileResult],
    total_files: int,
    *,
    scan_duration_ms: float = 0.0,
    scan_timestamp: Optional[str] = None,
) -> ScanResult:
    """Build a ScanResult from ordered per-file results.

    Only files with at least one finding are kept in ``files``; failed
    analyses are collected in ``errors``. Order is preserved.
    """
    result = ScanResult(
        scan_timestamp=scan_timestamp or utc_timestamp(),
        total_files=total_files,
        scan_duration_ms=round(scan_duration_ms, 2),
    )
    for fr in file_results:
        if fr.error is not None:
            result.errors.append(fr)
        if not fr.findings:
            continue
        result.files.append(fr)
        for finding in fr.findings:
            if finding.severity in result.severity_counts:
                result.severity_counts[finding.severity] += 1
    result.files_with_issues = len(result.files)
    return result
