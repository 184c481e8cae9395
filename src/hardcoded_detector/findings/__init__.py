"""Finding models, aggregation, and redaction."""

from hardcoded_detector.findings.aggregator import aggregate
from hardcoded_detector.findings.models import (
    ContextLine,
    EntropyInfo,
    FileResult,
    Finding,
    ScanResult,
)
from hardcoded_detector.findings.redactor import redact

__all__ = [
    "ContextLine",
    "EntropyInfo",
    "FileResult",
    "Finding",
    "ScanResult",
    "aggregate",
    "redact",
]
