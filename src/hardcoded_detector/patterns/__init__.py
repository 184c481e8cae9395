"""Signature model, built-in catalog and catalog loader."""

from hardcoded_detector.patterns.catalog import PatternCatalog
from hardcoded_detector.patterns.models import Signature, parse_flags

__all__ = ["PatternCatalog", "Signature", "parse_flags"]
