"""Configuration loading, schema, and defaults."""

from hardcoded_detector.config.loader import ConfigError, load_config
from hardcoded_detector.config.schema import (
    DetectorConfig,
    Severity,
    severity_at_or_above,
    severity_rank,
)

__all__ = [
    "ConfigError",
    "DetectorConfig",
    "Severity",
    "load_config",
    "severity_at_or_above",
    "severity_rank",
]
