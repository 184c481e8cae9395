"""Shannon entropy calculator and secret-likeness classification."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import Literal

EntropyLevel = Literal["low", "medium", "high"]

HIGH_THRESHOLD = 5.0
SECRET_THRESHOLD = 4.0
MEDIUM_THRESHOLD = 3.5



@dataclass(frozen=True)
class EntropyResult:
    value: float
    level: EntropyLevel
    is_secret: bool


def shannon_entropy(s: str) -> float:
    """Compute Shannon entropy (bits per character) of string *s*.

    H = -Σ p(c) · log₂(p(c))  over unique characters c.
    """
    if not s:
        return 0.0
    counts = Counter(s)
    total = len(s)
    return -sum((c / total) * math.log2(c / total) for c in counts.values())


def classify_entropy(s: str) -> EntropyResult:
    """Classify *s* as low / medium / high entropy.

    Only values at or above 4.0 bits/char are treated as secret-like; the
    [3.5, 4.0) band is reported as medium but not secret.
    """
    h = shannon_entropy(s)
    if h >= HIGH_THRESHOLD:
        return EntropyResult(h, "high", True)
    if h >= SECRET_THRESHOLD:
        return EntropyResult(h, "medium", True)
    if h >= MEDIUM_THRESHOLD:
        return EntropyResult(h, "medium", False)
    return EntropyResult(h, "low", False)
