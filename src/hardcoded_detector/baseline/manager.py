"""Baseline snapshots of accepted findings.

Entries are keyed by ``<file>:<line>`` for lookup, but a finding is only
treated as baselined when the stored SHA-256 hash also matches the finding
currently at that position. A different credential on the same line
therefore surfaces again.
"""

from __future__ import annotations

import hashlib
import json
import logging
from collections import Counter
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from hardcoded_detector.findings.aggregator import utc_timestamp
from hardcoded_detector.findings.models import FileResult, Finding, ScanResult

logger = logging.getLogger(__name__)

BASELINE_VERSION = "1.0.0"
DEFAULT_BASELINE_PATH = ".hardcoded-detector-baseline.json"
DEFAULT_REASON = "Baselined during initial scan"
DEFAULT_GENERATED_BY = "hardcoded-api-detector"
MATCH_PREFIX_LENGTH = 50

Baseline = Dict[str, Any]


class BaselineEntryNotFound(KeyError):
    """Raised by update_review for a key absent from the baseline."""


def finding_hash(finding: Finding) -> str:
    """SHA-256 over compact JSON of (file, line, pattern id, matched text)."""
    data = json.dumps(
        {
            "file": finding.file_path,
            "line": finding.line,
            "id": finding.pattern_id,
            "match": finding.matched_text,
        },
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return hashlib.sha256(data.encode("utf-8")).hexdigest()


def finding_key(finding: Finding) -> str:
    return f"{finding.file_path}:{finding.line}"


def empty_baseline() -> Baseline:
    return {"version": BASELINE_VERSION, "generatedAt": utc_timestamp(), "files": {}}


class BaselineManager:
    """Load, save, generate and apply a baseline file."""

    def __init__(
        self,
        path: Union[str, Path] = DEFAULT_BASELINE_PATH,
        *,
        logger: logging.Logger = logger,
    ) -> None:
        self.path = Path(path)
        self.log = logger
        self.baseline: Optional[Baseline] = None

    def load(self) -> Baseline:
        """Read the baseline file. Missing or corrupt files yield an empty baseline."""
        if self.path.is_file():
            try:
                with open(self.path, encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, ValueError) as exc:
                self.log.warning("Failed to load baseline %s: %s", self.path, exc)
            else:
                if isinstance(data, dict) and isinstance(data.get("files"), dict):
                    self.baseline = data
                    self.log.info("Loaded baseline from %s", self.path)
                    return data
                self.log.warning("Ignoring malformed baseline %s", self.path)
        else:
            self.log.info("No baseline at %s, starting fresh", self.path)

        self.baseline = empty_baseline()
        return self.baseline

    def save(self, baseline: Baseline) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(baseline, f, indent=2, ensure_ascii=False)
            f.write("\n")
        self.baseline = baseline
        self.log.info("Saved baseline to %s", self.path)

    def generate(
        self,
        scan_result: ScanResult,
        *,
        reason: str = DEFAULT_REASON,
        generated_by: str = DEFAULT_GENERATED_BY,
    ) -> Baseline:
        """Snapshot every finding in *scan_result* as an unreviewed entry and persist it."""
        files: Dict[str, Dict[str, Any]] = {}
        for finding in scan_result.findings:
            key = finding_key(finding)
            if key in files:
                # One entry per line; the later finding replaces the earlier.
                self.log.warning(
                    "Baseline key %s already holds %s; %s replaces it",
                    key, files[key]["type"], finding.pattern_id,
                )
            files[key] = {
                "type": finding.pattern_id,
                "name": finding.name,
                "severity": finding.severity,
                "hash": finding_hash(finding),
                "reviewed": False,
                "reviewedBy": None,
                "reviewDate": None,
                "reason": reason,
                "line": finding.line,
                "match": finding.matched_text[:MATCH_PREFIX_LENGTH],
            }
        baseline: Baseline = {
            "version": BASELINE_VERSION,
            "generatedAt": utc_timestamp(),
            "generatedBy": generated_by,
            "totalFindings": len(scan_result.findings),
            "files": files,
        }
        self.save(baseline)
        return baseline

    def is_baselined(self, finding: Finding) -> bool:
        if not self.baseline:
            return False
        entry = self.baseline.get("files", {}).get(finding_key(finding))
        if not entry:
            return False
        return entry.get("hash") == finding_hash(finding)

    def filter(self, file_results: List[FileResult]) -> List[FileResult]:
        """Drop baselined findings; files left without findings are dropped too.

        Results carrying an error are kept as-is so failures stay visible.
        """
        if self.baseline is None:
            self.load()

        kept: List[FileResult] = []
        suppressed = 0
        for fr in file_results:
            remaining = tuple(f for f in fr.findings if not self.is_baselined(f))
            suppressed += len(fr.findings) - len(remaining)
            if remaining or fr.error is not None:
                kept.append(FileResult(file=fr.file, findings=remaining, error=fr.error))
        if suppressed:
            self.log.info("Filtered %d baselined findings", suppressed)
        return kept

    def update_review(self, key: str, reviewed_by: str, reason: str) -> None:
        """Mark entry *key* reviewed and re-persist the baseline."""
        if self.baseline is None:
            self.load()
        assert self.baseline is not None
        files = self.baseline.get("files", {})
        if key not in files:
            raise BaselineEntryNotFound(f"Finding not found in baseline: {key}")
        files[key] = {
            **files[key],
            "reviewed": True,
            "reviewedBy": reviewed_by,
            "reviewDate": utc_timestamp(),
            "reason": reason,
        }
        self.save(self.baseline)

    def stats(self) -> Dict[str, Any]:
        if self.baseline is None:
            self.load()
        entries = list((self.baseline or {}).get("files", {}).values())
        reviewed = sum(1 for e in entries if e.get("reviewed"))
        return {
            "total": len(entries),
            "reviewed": reviewed,
            "unreviewed": len(entries) - reviewed,
            "by_severity": dict(Counter(e.get("severity", "unknown") for e in entries)),
        }
