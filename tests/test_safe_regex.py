"""Tests for bounded regex execution and the ReDoS heuristics."""

import re
import time

import pytest

from hardcoded_detector.scanner import safe_regex
from hardcoded_detector.scanner.safe_regex import (
    MAX_MATCHES,
    RegexExecutionError,
    RegexTimeoutError,
    SafeRegexError,
    TooManyMatchesError,
    execute,
    validate_pattern,
)


class TestExecute:
    def test_returns_all_matches(self):
        matches = execute(re.compile(r"\d+"), "a1b22c333")
        assert [m.group(0) for m in matches] == ["1", "22", "333"]

    def test_accepts_source_string(self):
        assert len(execute(r"ab", "abab")) == 2

    def test_no_matches(self):
        assert execute(re.compile(r"xyz"), "abc") == []

    def test_empty_content(self):
        assert execute(re.compile(r"a"), "") == []

    def test_zero_length_matches_terminate(self):
        matches = execute(re.compile(r"x*"), "abc")
        assert len(matches) == 4  # one empty match per position, including the end

    def test_match_ceiling(self):
        with pytest.raises(TooManyMatchesError):
            execute(re.compile(r"."), "a" * (MAX_MATCHES * 2))

    def test_exactly_at_ceiling_is_allowed(self):
        assert len(execute(re.compile(r"."), "a" * MAX_MATCHES)) == MAX_MATCHES

    def test_pathological_pattern_times_out(self):
        # Each match scans the rest of the input before falling back, so
        # total work is quadratic and the deadline is hit between matches.
        pattern = re.compile(r"[a-z]*?Z|[a-z]")
        start = time.perf_counter()
        with pytest.raises(RegexTimeoutError):
            execute(pattern, "a" * 20000, timeout_ms=1)
        assert time.perf_counter() - start < 5

    def test_timeout_is_a_timeout_error(self):
        assert issubclass(RegexTimeoutError, TimeoutError)
        assert issubclass(RegexTimeoutError, SafeRegexError)

    def test_invalid_source_wrapped(self):
        with pytest.raises(RegexExecutionError):
            execute("([", "abc")


class TestValidatePattern:
    def test_plain_pattern_is_safe(self):
        result = validate_pattern(r"\bAKIA[0-9A-Z]{16}\b")
        assert result.safe is True
        assert result.warnings == []

    @pytest.mark.parametrize("source", [r"(a+)+", r"(a+)*b", r"(\w*)+$"])
    def test_nested_quantifiers_unsafe(self, source):
        assert validate_pattern(source).safe is False

    @pytest.mark.parametrize("source", [r"key.*.*value", r"a.+.+b"])
    def test_consecutive_wildcards_unsafe(self, source):
        assert validate_pattern(source).safe is False

    def test_backreference_warns(self):
        result = validate_pattern(r"(['\"])secret\1")
        assert result.safe is True
        assert any("Backreference" in w for w in result.warnings)

    def test_alternation_with_quantifier_warns(self):
        result = validate_pattern(r"(a|b|c|d)+")
        assert result.safe is True
        assert result.warnings

    def test_large_character_class_warns(self):
        result = validate_pattern("[" + "abcdefghij" * 6 + "]")
        assert result.safe is True
        assert any("character class" in w for w in result.warnings)


class TestPatternSafety:
    def test_safe_pattern_passes(self):
        assert safe_regex.test_pattern_safety(re.compile(r"a+")) is True

    def test_uncompilable_fails(self):
        assert safe_regex.test_pattern_safety("([") is False

    def test_many_short_matches_pass(self):
        assert safe_regex.test_pattern_safety(re.compile(r"a"), timeout_ms=1000) is True
