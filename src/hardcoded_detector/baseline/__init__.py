"""Baseline snapshots for suppressing previously accepted findings."""

from hardcoded_detector.baseline.manager import (
    BaselineEntryNotFound,
    BaselineManager,
    finding_hash,
)

__all__ = ["BaselineEntryNotFound", "BaselineManager", "finding_hash"]
