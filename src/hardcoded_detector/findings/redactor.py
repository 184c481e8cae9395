"""Matched-value redaction for reports."""

from __future__ import annotations

REDACTED = "[REDACTED]"


def redact(value: str, *, full: bool = False) -> str:
    """Mask a matched credential, keeping the first and last 4 chars.

    Short values and *full* mode reveal nothing. The mask is capped so
    long matches (private key headers, URIs) stay readable in a table.

    Example: ``AKIA1234567890123456`` → ``AKIA************3456``
    """
    if full or len(value) <= 12:
        return REDACTED
    hidden = min(len(value) - 8, 12)
    return f"{value[:4]}{'*' * hidden}{value[-4:]}"
