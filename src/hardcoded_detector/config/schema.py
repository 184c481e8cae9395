"""Configuration schema: dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional

Severity = Literal["low", "medium", "high", "critical"]

SEVERITY_LEVELS = ("low", "medium", "high", "critical")

SEVERITY_RANK: dict[str, int] = {
    "low": 1,
    "medium": 2,
    "high": 3,
    "critical": 4,
}

OUTPUT_FORMATS = ("terminal", "json", "sarif", "csv", "junit")

DEFAULT_EXCLUDE = [
    ".git/**",
    "node_modules/**",
    "dist/**",
    "build/**",
    "coverage/**",
    ".venv/**",
    "venv/**",
    "__pycache__/**",
    ".tox/**",
]


def severity_rank(severity: str) -> int:
    """Rank of *severity*; unknown levels rank as ``medium``."""
    return SEVERITY_RANK.get(severity, SEVERITY_RANK["medium"])


def severity_at_or_above(severity: str, threshold: str) -> bool:
    """Return True if *severity* is at or above *threshold*."""
    return severity_rank(severity) >= severity_rank(threshold)


@dataclass
class ScanConfig:
    min_severity: Severity = "medium"
    include: List[str] = field(default_factory=list)  # empty = every text file
    exclude: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE))
    stream_large_files: bool = False  # stream files above 10 MiB instead of skipping


@dataclass
class PatternsConfig:
    custom_patterns: Optional[str] = None
    disabled: List[str] = field(default_factory=list)
    exclude_categories: List[str] = field(default_factory=list)


@dataclass
class EntropyConfig:
    filter: bool = False  # drop low-entropy matches of generic patterns


@dataclass
class WorkersConfig:
    enabled: bool = True
    count: Optional[int] = None  # None = os.cpu_count()
    executor: Literal["process", "thread"] = "process"


@dataclass
class BaselineConfig:
    enabled: bool = False
    path: str = ".hardcoded-detector-baseline.json"


@dataclass
class OutputConfig:
    format: Literal["terminal", "json", "sarif", "csv", "junit"] = "terminal"


@dataclass
class DetectorConfig:
    version: str = "1.0"
    scan: ScanConfig = field(default_factory=ScanConfig)
    patterns: PatternsConfig = field(default_factory=PatternsConfig)
    entropy: EntropyConfig = field(default_factory=EntropyConfig)
    workers: WorkersConfig = field(default_factory=WorkersConfig)
    baseline: BaselineConfig = field(default_factory=BaselineConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
