# ai/segmenter.py

from __future__ import annotations

import re
from typing import List

# "**Day 3 (June 3, 2025):** ..." at the start of a line, possibly behind a
# markdown heading, bullet or quote marker ("### ", "* ", "- ", "> ")
_DAY_HEADING = re.compile(
    r"^[ \t#>*\-]*(\*\*Day \d+ \([^)\n]+\):)", re.MULTILINE
)


def parse_itinerary(text: str) -> List[str]:
    """
    Split generated text into one block per day.

    A block starts at its `**Day` text and runs up to the line holding the
    next heading (or the end of the text), then is stripped. Text without any
    heading comes back whole as a single block.
    """
    matches = list(_DAY_HEADING.finditer(text))
    if not matches:
        return [text.strip()]

    starts = [m.start(1) for m in matches]
    ends = [m.start() for m in matches[1:]] + [len(text)]
    return [text[s:e].strip() for s, e in zip(starts, ends)]
