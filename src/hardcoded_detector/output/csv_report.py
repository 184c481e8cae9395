"""CSV reporter: one row per finding, matched values redacted."""

from __future__ import annotations

import csv
import io

from hardcoded_detector.findings.models import ScanResult
from hardcoded_detector.output.json_report import finding_to_dict

HEADERS = ["File", "Line", "Column", "Name", "Severity", "Service", "Category", "Description", "Match", "LineContent"]


def render(result: ScanResult) -> str:
    """Return the report as CSV text with a header row."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(HEADERS)
    for fr in result.files:
        for finding in fr.findings:
            d = finding_to_dict(finding)
            writer.writerow([
                fr.file,
                d["line"],
                d["column"],
                d["name"],
                d["severity"],
                d["service"],
                d["category"],
                d["description"],
                d["matchedText"],
                d["lineContent"],
            ])
    return buf.getvalue()
