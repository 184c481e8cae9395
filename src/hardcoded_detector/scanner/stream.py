"""Line-by-line analysis for files too large to hold in memory."""

from __future__ import annotations

import logging
import os
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Deque, List, Optional, Tuple, Union

from hardcoded_detector.findings.models import ContextLine, EntropyInfo, Finding
from hardcoded_detector.patterns.models import Signature
from hardcoded_detector.scanner.analyzer import (
    BINARY_SNIFF_BYTES,
    CONTEXT_LINES,
    AnalysisOptions,
    build_finding,
    looks_binary,
    should_skip_pattern,
)
from hardcoded_detector.scanner.entropy import classify_entropy
from hardcoded_detector.scanner.safe_regex import STREAM_TIMEOUT_MS, SafeRegexError, execute
from hardcoded_detector.scanner.suppression import InlineIgnoreTracker

if TYPE_CHECKING:
    from hardcoded_detector.patterns.catalog import PatternCatalog

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


@dataclass
class _Pending:
    """A match waiting for its trailing context lines."""

    signature: Signature
    matched_text: str
    line: int
    column: int
    line_text: str
    entropy: EntropyInfo


class StreamAnalyzer:
    """Analyze a file one line at a time with bounded memory."""

    def __init__(
        self,
        catalog: "PatternCatalog",
        *,
        timeout_ms: float = STREAM_TIMEOUT_MS,
        logger: logging.Logger = logger,
    ) -> None:
        self.catalog = catalog
        self.timeout_ms = timeout_ms
        self.log = logger

    def _readable(self, path: Path) -> bool:
        try:
            if not path.is_file():
                self.log.warning("Skipping %s: not a regular file", path)
                return False
            if os.stat(path).st_size == 0:
                return False
            with open(path, "rb") as f:
                sample = f.read(BINARY_SNIFF_BYTES)
        except OSError as exc:
            self.log.warning("Skipping %s: %s", path, exc.strerror or exc)
            return False
        if looks_binary(sample):
            self.log.debug("Skipping %s: binary content", path)
            return False
        return True

    def analyze(
        self,
        file_path: Union[str, Path],
        options: Optional[AnalysisOptions] = None,
    ) -> List[Finding]:
        """Return up to ``options.max_findings`` findings, in line order."""
        options = options or AnalysisOptions()
        path = Path(file_path)
        if not self._readable(path):
            return []

        active = [s for s in self.catalog if not should_skip_pattern(s, options)]
        tracker = InlineIgnoreTracker()
        window: Deque[Tuple[int, str]] = deque(maxlen=2 * CONTEXT_LINES + 1)
        pending: List[_Pending] = []
        findings: List[Finding] = []
        name = str(file_path)
        line_no = 0

        def flush(upto: Optional[int]) -> None:
            # Emit pending matches whose trailing context is complete.
            while pending and (upto is None or pending[0].line <= upto):
                p = pending.pop(0)
                context = [
                    ContextLine(n, text, n == p.line)
                    for n, text in window
                    if abs(n - p.line) <= CONTEXT_LINES
                ]
                findings.append(
                    build_finding(
                        p.signature, p.matched_text, name, p.line, p.column,
                        p.line_text, context, p.entropy,
                    )
                )

        try:
            with open(path, encoding="utf-8", errors="replace", newline="\n", buffering=CHUNK_SIZE) as f:
                for raw in f:
                    line_no += 1
                    text = raw[:-1] if raw.endswith("\n") else raw
                    window.append((line_no, text))
                    flush(line_no - CONTEXT_LINES)

                    if tracker.feed(text):
                        continue
                    for signature in active:
                        if len(findings) + len(pending) >= options.max_findings:
                            break
                        pending.extend(self._match_line(signature, text, line_no, name, options))
                    if len(findings) + len(pending) >= options.max_findings:
                        self.log.info("Stopping %s at %d findings", name, options.max_findings)
                        break
        except OSError as exc:
            self.log.warning("Error reading %s: %s", name, exc)

        flush(None)
        return findings[: options.max_findings]

    def _match_line(
        self,
        signature: Signature,
        text: str,
        line_no: int,
        name: str,
        options: AnalysisOptions,
    ) -> List[_Pending]:
        try:
            matches = execute(signature.compiled, text, self.timeout_ms)
        except SafeRegexError as exc:
            self.log.warning("Pattern %s failed on %s:%d: %s", signature.id, name, line_no, exc)
            return []

        out: List[_Pending] = []
        for m in matches:
            matched_text = m.group(0)
            entropy = classify_entropy(matched_text)
            if options.use_entropy_filter and signature.use_entropy_filter and not entropy.is_secret:
                continue
            out.append(
                _Pending(
                    signature=signature,
                    matched_text=matched_text,
                    line=line_no,
                    column=m.start() + 1,
                    line_text=text,
                    entropy=EntropyInfo(entropy.value, entropy.level),
                )
            )
        return out
