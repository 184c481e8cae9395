"""SARIF v2.1.0 reporter for GitHub Code Scanning.

Matched values are always redacted in SARIF output.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List

from hardcoded_detector import __version__
from hardcoded_detector.findings.models import ScanResult

_SEVERITY_MAP = {
    "critical": "error",
    "high": "error",
    "medium": "warning",
    "low": "note",
}

_SECURITY_SEVERITY = {
    "critical": "9.5",
    "high": "7.5",
    "medium": "5.0",
    "low": "2.0",
}


def to_dict(result: ScanResult) -> Dict[str, Any]:
    """Convert ScanResult to a SARIF v2.1.0 dict."""
    rules: List[Dict[str, Any]] = []
    seen_rules: set[str] = set()
    results: List[Dict[str, Any]] = []

    for f in result.findings:
        level = _SEVERITY_MAP.get(f.severity, "warning")
        if f.pattern_id not in seen_rules:
            seen_rules.add(f.pattern_id)
            rules.append({
                "id": f.pattern_id,
                "name": f.name,
                "shortDescription": {"text": f.name},
                "fullDescription": {"text": f.description or f.name},
                "defaultConfiguration": {"level": level},
                "properties": {
                    "category": f.category,
                    "service": f.service,
                    "security-severity": _SECURITY_SEVERITY.get(f.severity, "5.0"),
                },
            })

        results.append({
            "ruleId": f.pattern_id,
            "level": level,
            "message": {"text": f"{f.name} detected [REDACTED]"},
            "locations": [
                {
                    "physicalLocation": {
                        "artifactLocation": {"uri": f.file_path},
                        "region": {
                            "startLine": f.line,
                            "startColumn": f.column,
                            "snippet": {"text": "[REDACTED]"},
                        },
                    }
                }
            ],
            "properties": {"confidence": f.confidence},
        })

    return {
        "$schema": "https://raw.githubusercontent.com/oasis-tcs/sarif-spec/main/sarif-2.1/schema/sarif-schema-2.1.0.json",
        "version": "2.1.0",
        "runs": [
            {
                "tool": {
                    "driver": {
                        "name": "hardcoded-detector",
                        "version": __version__,
                        "rules": rules,
                    }
                },
                "results": results,
            }
        ],
    }


def render(result: ScanResult) -> str:
    """Return SARIF JSON string."""
    return json.dumps(to_dict(result), indent=2)
