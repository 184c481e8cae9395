"""Finding data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from hardcoded_detector.config.schema import SEVERITY_LEVELS


@dataclass(frozen=True)
class ContextLine:
    line_number: int
    content: str
    is_target: bool = False


@dataclass(frozen=True)
class EntropyInfo:
    value: float
    level: str


@dataclass(frozen=True)
class Finding:
    """A single signature match in a file. Never mutated after creation."""

    pattern_id: str
    name: str
    category: str
    severity: str
    confidence: str
    service: str
    description: str
    matched_text: str
    file_path: str
    line: int  # 1-based
    column: int  # 1-based
    line_content: str
    context: Tuple[ContextLine, ...] = ()
    entropy: Optional[EntropyInfo] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "patternId": self.pattern_id,
            "name": self.name,
            "category": self.category,
            "severity": self.severity,
            "confidence": self.confidence,
            "service": self.service,
            "description": self.description,
            "matchedText": self.matched_text,
            "filePath": self.file_path,
            "line": self.line,
            "column": self.column,
            "lineContent": self.line_content,
            "context": [
                {"lineNumber": c.line_number, "content": c.content, "isTarget": c.is_target}
                for c in self.context
            ],
            "entropy": (
                {"value": round(self.entropy.value, 4), "level": self.entropy.level}
                if self.entropy is not None
                else None
            ),
        }


@dataclass(frozen=True)
class FileResult:
    """Outcome of analysing one file. *error* is set when analysis failed."""

    file: str
    findings: Tuple[Finding, ...] = ()
    error: Optional[str] = None


def _empty_counts() -> Dict[str, int]:
    return {level: 0 for level in reversed(SEVERITY_LEVELS)}


@dataclass
class ScanResult:
    """Complete result of a scan run."""

    scan_timestamp: str
    total_files: int = 0
    files_with_issues: int = 0
    files: List[FileResult] = field(default_factory=list)
    severity_counts: Dict[str, int] = field(default_factory=_empty_counts)
    errors: List[FileResult] = field(default_factory=list)
    scan_duration_ms: float = 0.0

    @property
    def total_findings(self) -> int:
        return sum(len(fr.findings) for fr in self.files)

    @property
    def findings(self) -> List[Finding]:
        return [f for fr in self.files for f in fr.findings]

    @property
    def blocked(self) -> bool:
        """True when any critical or high finding is present."""
        return self.severity_counts.get("critical", 0) + self.severity_counts.get("high", 0) > 0
