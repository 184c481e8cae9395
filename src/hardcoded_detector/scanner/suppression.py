"""Inline ignore comments.

Directives are matched by substring, so any comment syntax works:

  - ``hardcoded-detector:disable`` starts an ignored block (the line itself
    is ignored too).
  - ``hardcoded-detector:enable`` ends the block. The enable line is
    scanned unless it also carries a line directive.
  - ``hardcoded-detector:disable-next-line`` ignores the following line.
  - ``hardcoded-detector:disable-line`` ignores the line it sits on.

Directives inside string literals are honoured as well; there is no parser
to tell the difference.
"""

from __future__ import annotations

import re
from typing import Iterable, Set

DISABLE = "hardcoded-detector:disable"
ENABLE = "hardcoded-detector:enable"
DISABLE_NEXT_LINE = "hardcoded-detector:disable-next-line"
DISABLE_LINE = "hardcoded-detector:disable-line"

# The block directive is a prefix of the two line directives.
_BLOCK_DISABLE_RE = re.compile(re.escape(DISABLE) + r"(?!-)")


class InlineIgnoreTracker:
    """Line-at-a-time ignore state machine.

    Feed lines in order with :meth:`feed`; it returns True when that line
    must not produce findings.
    """

    def __init__(self) -> None:
        self.block_disabled = False
        self.skip_next = False

    def feed(self, line: str) -> bool:
        ignored = False

        if self.skip_next:
            ignored = True
            self.skip_next = False

        if _BLOCK_DISABLE_RE.search(line):
            self.block_disabled = True
            ignored = True
        elif ENABLE in line:
            self.block_disabled = False
        elif self.block_disabled:
            ignored = True

        if DISABLE_NEXT_LINE in line:
            self.skip_next = True
        if DISABLE_LINE in line:
            ignored = True

        return ignored


def compute_ignored_lines(lines: Iterable[str]) -> Set[int]:
    """Return the 1-based numbers of lines that must not produce findings."""
    tracker = InlineIgnoreTracker()
    return {no for no, line in enumerate(lines, 1) if tracker.feed(line)}
