"""JSON reporter for CI pipelines."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from hardcoded_detector.findings.models import Finding, ScanResult
from hardcoded_detector.findings.redactor import redact


def _scrub(text: str, secret: str) -> str:
    return text.replace(secret, redact(secret)) if secret else text


def finding_to_dict(finding: Finding) -> Dict[str, Any]:
    """Serialise *finding* with the matched value masked everywhere it appears."""
    data = finding.to_dict()
    secret = finding.matched_text
    data["matchedText"] = redact(secret)
    data["lineContent"] = _scrub(finding.line_content, secret)
    for ctx in data["context"]:
        ctx["content"] = _scrub(ctx["content"], secret)
    return data


def to_dict(result: ScanResult) -> Dict[str, Any]:
    """Convert ScanResult to a JSON-serialisable dict."""
    findings: List[Dict[str, Any]] = [
        {"file": fr.file, "findings": [finding_to_dict(f) for f in fr.findings]}
        for fr in result.files
    ]
    return {
        "scanTime": result.scan_timestamp,
        "totalFiles": result.total_files,
        "filesWithIssues": result.files_with_issues,
        "summary": dict(result.severity_counts),
        "findings": findings,
        "errors": [{"file": fr.file, "error": fr.error} for fr in result.errors],
        "scanDurationMs": result.scan_duration_ms,
    }


def render(result: ScanResult) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(result), indent=2, ensure_ascii=False)
