"""Tests for output reporters and the redactor."""

import csv
import io
import json
import xml.etree.ElementTree as ET

from rich.console import Console

from conftest import AWS_KEY
from hardcoded_detector.findings.aggregator import aggregate
from hardcoded_detector.findings.models import FileResult, ScanResult
from hardcoded_detector.findings.redactor import REDACTED, redact
from hardcoded_detector.output import csv_report, json_report, junit, sarif, terminal


def _make_result(make_finding, *findings) -> ScanResult:
    findings = findings or (make_finding(),)
    return aggregate(
        [FileResult("src/config.py", tuple(findings)), FileResult("src/clean.py")],
        total_files=2,
        scan_duration_ms=15.3,
    )


class TestRedactor:
    def test_partial_reveal(self):
        assert redact(AWS_KEY) == "AKIA************3456"

    def test_short_string(self):
        assert redact("short") == REDACTED

    def test_full(self):
        assert redact(AWS_KEY, full=True) == REDACTED

    def test_mask_is_capped(self):
        masked = redact("x" * 200)
        assert len(masked) == 4 + 12 + 4


class TestAggregate:
    def test_counts(self, make_finding):
        result = _make_result(make_finding, make_finding(), make_finding(line=9, severity="critical"))
        assert result.total_files == 2
        assert result.files_with_issues == 1
        assert result.severity_counts == {"critical": 1, "high": 1, "medium": 0, "low": 0}
        assert result.total_findings == 2
        assert result.blocked is True

    def test_medium_only_not_blocked(self, make_finding):
        result = _make_result(make_finding, make_finding(severity="medium"))
        assert result.blocked is False

    def test_errors_collected(self):
        result = aggregate([FileResult("a.py", error="boom")], total_files=1)
        assert result.files == []
        assert [fr.file for fr in result.errors] == ["a.py"]


class TestJsonReport:
    def test_structure(self, make_finding):
        data = json.loads(json_report.render(_make_result(make_finding)))
        assert data["totalFiles"] == 2
        assert data["filesWithIssues"] == 1
        assert data["summary"] == {"critical": 0, "high": 1, "medium": 0, "low": 0}
        assert data["findings"][0]["file"] == "src/config.py"
        finding = data["findings"][0]["findings"][0]
        assert finding["patternId"] == "aws_access_key"
        assert finding["line"] == 3
        assert finding["context"][0]["isTarget"] is True

    def test_secret_never_in_output(self, make_finding):
        output = json_report.render(_make_result(make_finding))
        assert AWS_KEY not in output
        assert "AKIA************3456" in output


class TestSarif:
    def test_valid_sarif(self, make_finding):
        data = json.loads(sarif.render(_make_result(make_finding)))
        assert data["version"] == "2.1.0"
        run = data["runs"][0]
        assert run["tool"]["driver"]["name"] == "hardcoded-detector"
        assert run["tool"]["driver"]["rules"][0]["id"] == "aws_access_key"
        region = run["results"][0]["locations"][0]["physicalLocation"]["region"]
        assert region["startLine"] == 3
        assert region["startColumn"] == 12

    def test_severity_levels(self, make_finding):
        result = _make_result(
            make_finding,
            make_finding(severity="critical", pattern_id="a"),
            make_finding(severity="medium", pattern_id="b", line=5),
            make_finding(severity="low", pattern_id="c", line=6),
        )
        levels = [r["level"] for r in sarif.to_dict(result)["runs"][0]["results"]]
        assert levels == ["error", "warning", "note"]

    def test_always_redacted(self, make_finding):
        assert AWS_KEY not in sarif.render(_make_result(make_finding))


class TestCsvReport:
    def test_rows(self, make_finding):
        result = _make_result(make_finding, make_finding(), make_finding(line=9, severity="low"))
        rows = list(csv.reader(io.StringIO(csv_report.render(result))))
        assert rows[0] == csv_report.HEADERS
        assert len(rows) == 3
        assert rows[1][:3] == ["src/config.py", "3", "12"]
        assert rows[1][4] == "high"
        assert rows[2][1] == "9"
        assert rows[1][8] == "AKIA************3456"

    def test_quotes_and_redaction(self, make_finding):
        finding = make_finding(line_content=f'key = "{AWS_KEY}", other')
        text = csv_report.render(_make_result(make_finding, finding))
        assert AWS_KEY not in text
        row = list(csv.reader(io.StringIO(text)))[1]
        assert row[9] == 'key = "AKIA************3456", other'

    def test_empty(self):
        text = csv_report.render(aggregate([], total_files=1))
        assert text.splitlines() == [",".join(csv_report.HEADERS)]


class TestJunitReport:
    def test_structure(self, make_finding):
        result = _make_result(make_finding, make_finding(), make_finding(line=9, severity="medium"))
        root = ET.fromstring(junit.render(result).encode("utf-8"))
        assert root.tag == "testsuites"
        assert root.get("tests") == "2"
        assert root.get("failures") == "1"
        suite = root.find("testsuite")
        assert suite.get("name") == "src/config.py"
        cases = suite.findall("testcase")
        assert len(cases) == 2
        assert cases[0].find("failure") is not None
        assert cases[0].find("failure").get("message").endswith("detected")
        assert cases[1].find("failure") is None

    def test_redacted(self, make_finding):
        text = junit.render(_make_result(make_finding))
        assert AWS_KEY not in text
        assert "Match: AKIA************3456" in text

    def test_clean(self):
        root = ET.fromstring(junit.render(aggregate([], total_files=3)).encode("utf-8"))
        assert root.get("tests") == "0"
        assert root.findall("testsuite") == []

class TestTerminal:
    def _render(self, result, **kwargs) -> str:
        console = Console(record=True, width=160)
        terminal.render(result, console=console, **kwargs)
        return console.export_text()

    def test_findings_table(self, make_finding):
        text = self._render(_make_result(make_finding))
        assert "src/config.py:3:12" in text
        assert AWS_KEY not in text
        assert "Critical or high severity" in text

    def test_clean(self):
        text = self._render(aggregate([], total_files=4))
        assert "No hardcoded credentials detected" in text
        assert "4" in text

    def test_context(self, make_finding):
        text = self._render(_make_result(make_finding), show_context=True)
        assert ">>>" in text
        assert AWS_KEY not in text
