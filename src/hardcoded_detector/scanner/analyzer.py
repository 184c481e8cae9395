"""Whole-file content analysis.

Reads a file into memory, runs every active signature over the full text
through the safe regex executor and turns matches into findings.
"""

from __future__ import annotations

import logging
import os
from bisect import bisect_left
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, FrozenSet, Iterable, List, Optional, Sequence, Union

from hardcoded_detector.config.schema import severity_at_or_above
from hardcoded_detector.findings.models import ContextLine, EntropyInfo, Finding
from hardcoded_detector.patterns.models import Signature
from hardcoded_detector.scanner.entropy import classify_entropy
from hardcoded_detector.scanner.safe_regex import DEFAULT_TIMEOUT_MS, SafeRegexError, execute
from hardcoded_detector.scanner.suppression import compute_ignored_lines

if TYPE_CHECKING:
    from hardcoded_detector.patterns.catalog import PatternCatalog

logger = logging.getLogger(__name__)

MAX_FILE_SIZE = 10 * 1024 * 1024
MAX_LINES = 100_000
BINARY_SNIFF_BYTES = 512
CONTEXT_LINES = 2


@dataclass(frozen=True)
class AnalysisOptions:
    """Per-scan filtering options, shipped to workers with every task."""

    min_severity: str = "low"
    disabled_patterns: FrozenSet[str] = field(default_factory=frozenset)
    excluded_categories: FrozenSet[str] = field(default_factory=frozenset)
    use_entropy_filter: bool = False
    max_findings: int = 1000  # streaming only

    @classmethod
    def build(
        cls,
        min_severity: str = "low",
        disabled_patterns: Iterable[str] = (),
        excluded_categories: Iterable[str] = (),
        use_entropy_filter: bool = False,
        max_findings: int = 1000,
    ) -> "AnalysisOptions":
        return cls(
            min_severity=min_severity,
            disabled_patterns=frozenset(disabled_patterns),
            excluded_categories=frozenset(excluded_categories),
            use_entropy_filter=use_entropy_filter,
            max_findings=max_findings,
        )


def should_skip_pattern(signature: Signature, options: AnalysisOptions) -> bool:
    """True if *signature* is disabled, below the severity floor, or in an excluded category."""
    if signature.id in options.disabled_patterns:
        return True
    if not severity_at_or_above(signature.severity, options.min_severity):
        return True
    return signature.category in options.excluded_categories


def looks_binary(sample: bytes) -> bool:
    return b"\x00" in sample


def build_finding(
    signature: Signature,
    matched_text: str,
    file_path: str,
    line: int,
    column: int,
    line_text: str,
    context: Sequence[ContextLine],
    entropy: EntropyInfo,
) -> Finding:
    return Finding(
        pattern_id=signature.id,
        name=signature.name,
        category=signature.category,
        severity=signature.severity,
        confidence=signature.confidence,
        service=signature.service,
        description=signature.description,
        matched_text=matched_text,
        file_path=file_path,
        line=line,
        column=column,
        line_content=line_text.strip(),
        context=tuple(context),
        entropy=entropy,
    )


def context_for(lines: Sequence[str], line: int) -> List[ContextLine]:
    """±CONTEXT_LINES lines around 1-based *line*, clamped to the file."""
    start = max(1, line - CONTEXT_LINES)
    end = min(len(lines), line + CONTEXT_LINES)
    return [ContextLine(n, lines[n - 1], n == line) for n in range(start, end + 1)]


class ContentAnalyzer:
    """Analyze a whole file against a pattern catalog."""

    def __init__(
        self,
        catalog: "PatternCatalog",
        *,
        timeout_ms: float = DEFAULT_TIMEOUT_MS,
        logger: logging.Logger = logger,
    ) -> None:
        self.catalog = catalog
        self.timeout_ms = timeout_ms
        self.log = logger

    def read_text(self, file_path: Union[str, Path]) -> Optional[str]:
        """Return the file's text, or None if a guard rejects it."""
        path = Path(file_path)
        try:
            size = os.stat(path).st_size
            if not path.is_file():
                self.log.warning("Skipping %s: not a regular file", path)
                return None
            if size > MAX_FILE_SIZE:
                self.log.warning("Skipping %s: larger than %d bytes", path, MAX_FILE_SIZE)
                return None
            with open(path, "rb") as f:
                data = f.read()
        except OSError as exc:
            self.log.warning("Skipping %s: %s", path, exc.strerror or exc)
            return None

        if looks_binary(data[:BINARY_SNIFF_BYTES]):
            self.log.debug("Skipping %s: binary content", path)
            return None
        return data.decode("utf-8", errors="replace")

    def analyze(
        self,
        file_path: Union[str, Path],
        options: Optional[AnalysisOptions] = None,
    ) -> List[Finding]:
        """Return findings for *file_path* in catalog order. Never raises on bad input."""
        options = options or AnalysisOptions()
        content = self.read_text(file_path)
        if content is None or not content.strip():
            return []

        lines = content.split("\n")
        if len(lines) > MAX_LINES:
            self.log.warning("Skipping %s: more than %d lines", file_path, MAX_LINES)
            return []

        return self.analyze_text(content, str(file_path), options, lines=lines)

    def analyze_text(
        self,
        content: str,
        file_path: str,
        options: AnalysisOptions,
        *,
        lines: Optional[List[str]] = None,
    ) -> List[Finding]:
        if lines is None:
            lines = content.split("\n")
        ignored = compute_ignored_lines(lines)
        newlines: List[int] = []
        pos = -1
        for text in lines[:-1]:
            pos += len(text) + 1
            newlines.append(pos)

        findings: List[Finding] = []
        for signature in self.catalog:
            if should_skip_pattern(signature, options):
                continue
            try:
                matches = execute(signature.compiled, content, self.timeout_ms)
            except SafeRegexError as exc:
                self.log.warning("Pattern %s failed on %s: %s", signature.id, file_path, exc)
                continue

            for m in matches:
                offset = m.start()
                preceding = bisect_left(newlines, offset)
                line = preceding + 1
                if line in ignored:
                    continue
                column = offset - newlines[preceding - 1] if preceding else offset + 1

                matched_text = m.group(0)
                entropy = classify_entropy(matched_text)
                if (
                    options.use_entropy_filter
                    and signature.use_entropy_filter
                    and not entropy.is_secret
                ):
                    continue

                findings.append(
                    build_finding(
                        signature,
                        matched_text,
                        file_path,
                        line,
                        column,
                        lines[line - 1],
                        context_for(lines, line),
                        EntropyInfo(entropy.value, entropy.level),
                    )
                )
        return findings
