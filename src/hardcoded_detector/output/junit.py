"""JUnit XML reporter for CI test dashboards.

Each scanned file with findings is a ``<testsuite>``, each finding a
``<testcase>``. Critical and high findings carry a ``<failure>``.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from hardcoded_detector.findings.models import Finding, ScanResult
from hardcoded_detector.output.json_report import finding_to_dict

_FAILING = ("critical", "high")


def _failure_text(finding: Finding) -> str:
    d = finding_to_dict(finding)
    return (
        f"{d['description']}\n"
        f"File: {d['filePath']}\n"
        f"Line: {d['line']}\n"
        f"Match: {d['matchedText']}"
    )


def to_element(result: ScanResult) -> ET.Element:
    counts = result.severity_counts
    root = ET.Element(
        "testsuites",
        name="hardcoded-detector",
        tests=str(result.total_findings),
        failures=str(counts.get("critical", 0) + counts.get("high", 0)),
        time=f"{result.scan_duration_ms / 1000:.3f}",
    )
    for fr in result.files:
        failing = [f for f in fr.findings if f.severity in _FAILING]
        suite = ET.SubElement(
            root, "testsuite",
            name=fr.file, tests=str(len(fr.findings)), failures=str(len(failing)),
        )
        for finding in fr.findings:
            case = ET.SubElement(
                suite, "testcase",
                name=f"{finding.name} (line {finding.line})",
                classname=finding.service,
            )
            if finding.severity in _FAILING:
                failure = ET.SubElement(
                    case, "failure",
                    message=f"{finding.name} detected", type=finding.severity,
                )
                failure.text = _failure_text(finding)
    return root


def render(result: ScanResult) -> str:
    """Return the report as an indented JUnit XML document."""
    root = to_element(result)
    ET.indent(root)
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + ET.tostring(root, encoding="unicode") + "\n"
