"""Pattern catalog: built-in signatures overlaid with a custom file."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

import yaml

from hardcoded_detector.patterns.builtin import ALL_BUILTIN_SIGNATURES
from hardcoded_detector.patterns.models import Signature
from hardcoded_detector.scanner.safe_regex import test_pattern_safety, validate_pattern

logger = logging.getLogger(__name__)


class PatternCatalog:
    """Ordered, validated set of active signatures."""

    def __init__(self, signatures: Iterable[Signature] = ()) -> None:
        self._signatures: Dict[str, Signature] = {}
        for sig in signatures:
            self._signatures[sig.id] = sig

    # ---- construction ----

    @classmethod
    def load(
        cls,
        custom_path: Optional[Union[str, Path]] = None,
        *,
        logger: logging.Logger = logger,
    ) -> "PatternCatalog":
        """Built-in catalog merged with *custom_path*, with unsafe patterns removed.

        A custom file that is missing or malformed is logged and ignored;
        the built-in catalog is still returned.
        """
        merged: Dict[str, Signature] = {s.id: s for s in ALL_BUILTIN_SIGNATURES}

        if custom_path:
            custom = _read_custom_file(Path(custom_path), logger)
            if custom is not None:
                _overlay(merged, custom, logger)

        safe = [sig for sig in merged.values() if _is_usable(sig, logger)]
        logger.debug("Loaded %d patterns (%d rejected)", len(safe), len(merged) - len(safe))
        return cls(safe)

    # ---- queries ----

    def get(self, signature_id: str) -> Optional[Signature]:
        return self._signatures.get(signature_id)

    def by_category(self, category: str) -> List[Signature]:
        return [s for s in self._signatures.values() if s.category == category]

    def by_service(self, service: str) -> List[Signature]:
        return [s for s in self._signatures.values() if s.service == service]

    def categories(self) -> List[str]:
        return sorted({s.category for s in self._signatures.values()})

    def __len__(self) -> int:
        return len(self._signatures)

    def __iter__(self) -> Iterator[Signature]:
        return iter(self._signatures.values())

    def __contains__(self, signature_id: object) -> bool:
        return signature_id in self._signatures


def _read_custom_file(path: Path, log: logging.Logger) -> Optional[Dict[str, Any]]:
    """Parse a YAML or JSON custom pattern file. JSON is valid YAML."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        log.warning("Could not load custom patterns from %s: %s", path, exc)
        return None
    if data is None:
        return {}
    if not isinstance(data, dict):
        log.warning("Ignoring custom patterns file %s: top level must be a mapping", path)
        return None
    return data


def _overlay(merged: Dict[str, Signature], custom: Dict[str, Any], log: logging.Logger) -> None:
    patterns = custom.get("patterns") or {}
    if not isinstance(patterns, dict):
        log.warning("Ignoring custom 'patterns': expected a mapping of id to pattern")
        patterns = {}
    for sig_id, entry in patterns.items():
        try:
            sig = Signature.from_dict(str(sig_id), entry)
        except ValueError as exc:
            log.warning("Skipping custom pattern: %s", exc)
            continue
        if sig.id in merged:
            log.debug("Custom pattern %s overrides built-in", sig.id)
        merged[sig.id] = sig

    disabled = custom.get("disabled") or []
    if isinstance(disabled, str):
        disabled = [disabled]
    for sig_id in disabled:
        if merged.pop(str(sig_id), None) is not None:
            log.debug("Pattern %s disabled by custom file", sig_id)


def _is_usable(sig: Signature, log: logging.Logger) -> bool:
    try:
        compiled = sig.compiled
    except (re.error, ValueError) as exc:
        log.warning("Pattern %s does not compile: %s", sig.id, exc)
        return False

    result = validate_pattern(sig.pattern)
    if not result.safe:
        log.warning("Unsafe pattern %s rejected: %s", sig.id, "; ".join(result.warnings))
        return False
    for warning in result.warnings:
        log.debug("Pattern %s: %s", sig.id, warning)

    if not test_pattern_safety(compiled):
        log.warning("Pattern %s failed the safety test", sig.id)
        return False
    return True
