"""Bounded regex execution and static ReDoS heuristics.

Python's ``re`` engine cannot be interrupted mid-match, so the timeout is
polled between successive matches: a pattern that finds many matches slowly
is stopped, but a single catastrophic backtracking step runs to completion.
The static validator and the stress test in ``test_pattern_safety`` exist to
keep such patterns out of the catalog in the first place.
"""

from __future__ import annotations

import re
import time
from dataclasses import dataclass, field
from typing import List, Union

MAX_MATCHES = 10_000
DEFAULT_TIMEOUT_MS = 2000
STREAM_TIMEOUT_MS = 500
SAFETY_TIMEOUT_MS = 1000
SAFETY_TEST_INPUT = "a" * 1000

_NESTED_QUANTIFIER_RE = re.compile(r"\([^)]*[+*]\)[+*]")
_ALTERNATION_RE = re.compile(r"\|.*\|.*\|")
_QUANTIFIER_RE = re.compile(r"[+*]")
_WILDCARD_RUN_RE = re.compile(r"(\.\*){2,}|(\.\+){2,}")
_ANCHORED_GROUP_REPEAT_RE = re.compile(r"\(\\w\+\){2,}\$")
_BACKREFERENCE_RE = re.compile(r"\\[1-9]")
_LARGE_CLASS_RE = re.compile(r"\[[^\]]{50,}\]")


class SafeRegexError(Exception):
    """Base class for bounded-execution failures."""


class RegexTimeoutError(SafeRegexError, TimeoutError):
    """Matching exceeded its wall-clock limit."""


class TooManyMatchesError(SafeRegexError):
    """Matching produced more than MAX_MATCHES results."""


class RegexExecutionError(SafeRegexError):
    """The regex engine raised while compiling or matching."""


@dataclass(frozen=True)
class ValidationResult:
    safe: bool
    warnings: List[str] = field(default_factory=list)


def execute(
    pattern: Union[re.Pattern[str], str],
    content: str,
    timeout_ms: float = DEFAULT_TIMEOUT_MS,
) -> List[re.Match[str]]:
    """Return every match of *pattern* in *content*, bounded in time and count.

    Raises:
        RegexTimeoutError: elapsed time exceeded *timeout_ms*.
        TooManyMatchesError: more than ``MAX_MATCHES`` matches.
        RegexExecutionError: any other engine failure.
    """
    start = time.perf_counter()
    limit = timeout_ms / 1000.0
    matches: List[re.Match[str]] = []
    try:
        compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
        # finditer steps past empty matches on its own.
        for m in compiled.finditer(content):
            matches.append(m)
            if len(matches) > MAX_MATCHES:
                raise TooManyMatchesError(
                    f"pattern produced more than {MAX_MATCHES} matches"
                )
            if time.perf_counter() - start > limit:
                raise RegexTimeoutError(f"regex execution exceeded {timeout_ms}ms")
    except SafeRegexError:
        raise
    except (re.error, RecursionError, MemoryError, TypeError) as exc:
        raise RegexExecutionError(f"regex execution failed: {exc}") from exc
    return matches


def validate_pattern(source: str) -> ValidationResult:
    """Statically inspect a regex source for ReDoS-prone constructs.

    Heuristic only: ``safe=False`` for nested quantifiers or chained
    wildcards, advisory warnings for the rest.
    """
    warnings: List[str] = []
    safe = True

    if _NESTED_QUANTIFIER_RE.search(source):
        warnings.append("Nested quantifiers detected (e.g. (a+)+), catastrophic backtracking risk")
        safe = False

    if _ALTERNATION_RE.search(source) and _QUANTIFIER_RE.search(source):
        warnings.append("Multiple alternations combined with quantifiers")

    if _WILDCARD_RUN_RE.search(source):
        warnings.append("Multiple consecutive wildcards (.*.* or .+.+)")
        safe = False

    if _ANCHORED_GROUP_REPEAT_RE.search(source):
        warnings.append("Repeated (\\w+) groups anchored at end of input")

    if _BACKREFERENCE_RE.search(source):
        warnings.append("Backreferences can be slow on long inputs")

    if _LARGE_CLASS_RE.search(source):
        warnings.append("Very large character class")

    return ValidationResult(safe=safe, warnings=warnings)


def test_pattern_safety(
    pattern: Union[re.Pattern[str], str],
    timeout_ms: float = SAFETY_TIMEOUT_MS,
) -> bool:
    """Run *pattern* against a stress string; False if it times out or fails."""
    try:
        execute(pattern, SAFETY_TEST_INPUT, timeout_ms)
    except SafeRegexError:
        return False
    return True


# Not a pytest test despite the name.
test_pattern_safety.__test__ = False  # type: ignore[attr-defined]
