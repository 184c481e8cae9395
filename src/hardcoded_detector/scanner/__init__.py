"""Scanner: entropy, safe regex execution, inline ignores, analysis and orchestration.

Only the dependency-free building blocks are re-exported here; import the
analyzers and the orchestrator from their modules.
"""

from hardcoded_detector.scanner.entropy import EntropyResult, classify_entropy, shannon_entropy
from hardcoded_detector.scanner.safe_regex import (
    RegexExecutionError,
    RegexTimeoutError,
    SafeRegexError,
    TooManyMatchesError,
    ValidationResult,
    execute,
    validate_pattern,
)
from hardcoded_detector.scanner.suppression import InlineIgnoreTracker, compute_ignored_lines

__all__ = [
    "EntropyResult",
    "InlineIgnoreTracker",
    "RegexExecutionError",
    "RegexTimeoutError",
    "SafeRegexError",
    "TooManyMatchesError",
    "ValidationResult",
    "classify_entropy",
    "compute_ignored_lines",
    "execute",
    "shannon_entropy",
    "validate_pattern",
]
