"""Signature data model. The regex is stored as source and compiled on first use."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from hardcoded_detector.config.schema import Severity

_FLAG_MAP = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
}


def parse_flags(flags: str) -> int:
    """Translate a ``"gi"``-style flag string into ``re`` flags.

    ``g`` is accepted and ignored: every match is always collected.
    """
    value = 0
    for ch in flags:
        if ch == "g":
            continue
        try:
            value |= _FLAG_MAP[ch]
        except KeyError:
            raise ValueError(f"Unsupported regex flag: {ch!r}") from None
    return value


@dataclass(frozen=True)
class Signature:
    """A named credential signature.

    ``pattern`` is kept as the raw source so the catalog stays serialisable;
    the compiled regex is built lazily via ``compiled``.
    """

    id: str
    name: str
    pattern: str
    severity: Severity = "medium"
    category: str = "unknown"
    service: str = "unknown"
    description: str = ""
    confidence: str = "medium"
    flags: str = "gi"
    use_entropy_filter: bool = False
    references: Tuple[str, ...] = ()

    _compiled: Optional[re.Pattern[str]] = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def compiled(self) -> re.Pattern[str]:
        if self._compiled is None:
            object.__setattr__(
                self, "_compiled", re.compile(self.pattern, parse_flags(self.flags))
            )
        assert self._compiled is not None
        return self._compiled

    @classmethod
    def from_dict(cls, signature_id: str, data: Mapping[str, Any]) -> "Signature":
        """Build a signature from a catalog entry. Raises ValueError if malformed."""
        if not isinstance(data, Mapping):
            raise ValueError(f"pattern {signature_id!r} must be a mapping")
        source = data.get("pattern")
        if not isinstance(source, str) or not source:
            raise ValueError(f"pattern {signature_id!r} has no regex 'pattern'")
        references = data.get("references") or ()
        if isinstance(references, str):
            references = (references,)
        return cls(
            id=signature_id,
            name=str(data.get("name", signature_id)),
            pattern=source,
            severity=data.get("severity", "medium"),
            category=str(data.get("category", "unknown")),
            service=str(data.get("service", "unknown")),
            description=str(data.get("description", "")),
            confidence=str(data.get("confidence", "medium")),
            flags=str(data.get("flags", "gi")),
            use_entropy_filter=bool(data.get("useEntropyFilter", data.get("use_entropy_filter", False))),
            references=tuple(str(r) for r in references),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "pattern": self.pattern,
            "severity": self.severity,
            "category": self.category,
            "service": self.service,
            "description": self.description,
            "confidence": self.confidence,
            "flags": self.flags,
            "useEntropyFilter": self.use_entropy_filter,
            "references": list(self.references),
        }

