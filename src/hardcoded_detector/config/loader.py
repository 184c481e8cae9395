"""Load and merge configuration from .hardcoded-detector.toml and env vars."""

from __future__ import annotations

import dataclasses
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from hardcoded_detector.config.schema import (
    OUTPUT_FORMATS,
    SEVERITY_LEVELS,
    BaselineConfig,
    DetectorConfig,
    EntropyConfig,
    OutputConfig,
    PatternsConfig,
    ScanConfig,
    WorkersConfig,
)

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".hardcoded-detector.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: DetectorConfig) -> None:
    if cfg.scan.min_severity not in SEVERITY_LEVELS:
        raise ConfigError(f"Invalid scan.min_severity: {cfg.scan.min_severity!r}")
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(f"Invalid output.format: {cfg.output.format!r}")
    if cfg.workers.executor not in ("process", "thread"):
        raise ConfigError(f"Invalid workers.executor: {cfg.workers.executor!r}")
    if cfg.workers.count is not None and cfg.workers.count < 1:
        raise ConfigError("workers.count must be at least 1")


def _merge_env_overrides(cfg: DetectorConfig) -> None:
    """Apply HARDCODED_DETECTOR_* environment variable overrides."""
    if val := os.environ.get("HARDCODED_DETECTOR_SEVERITY"):
        if val in SEVERITY_LEVELS:
            cfg.scan.min_severity = val  # type: ignore[assignment]
    if val := os.environ.get("HARDCODED_DETECTOR_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("HARDCODED_DETECTOR_DISABLE_PATTERNS"):
        cfg.patterns.disabled.extend(p.strip() for p in val.split(",") if p.strip())
    if val := os.environ.get("HARDCODED_DETECTOR_WORKERS"):
        try:
            count = int(val)
        except ValueError:
            logger.warning("Ignoring non-integer HARDCODED_DETECTOR_WORKERS=%r", val)
        else:
            if count <= 0:
                cfg.workers.enabled = False
            else:
                cfg.workers.enabled = True
                cfg.workers.count = count


def load_config(
    root: Path,
    config_override: Optional[str] = None,
) -> DetectorConfig:
    """Load, validate, and return a DetectorConfig."""
    config_path = find_config_file(root, config_override)

    if config_path is None:
        cfg = DetectorConfig()
    else:
        raw = _parse_toml(config_path)
        try:
            cfg = DetectorConfig(
                version=str(raw.get("version", "1.0")),
                scan=_build_section(raw, ScanConfig, "scan"),
                patterns=_build_section(raw, PatternsConfig, "patterns"),
                entropy=_build_section(raw, EntropyConfig, "entropy"),
                workers=_build_section(raw, WorkersConfig, "workers"),
                baseline=_build_section(raw, BaselineConfig, "baseline"),
                output=_build_section(raw, OutputConfig, "output"),
            )
        except TypeError as exc:
            raise ConfigError(f"Invalid configuration in {config_path}: {exc}") from exc
        logger.debug("Loaded configuration from %s", config_path)

    _merge_env_overrides(cfg)
    _validate(cfg)
    return cfg
