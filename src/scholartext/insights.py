"""Article summary helpers: reading time and key points."""

from __future__ import annotations

import math
import re

from scholartext.parser.emphasis import strip_emphasis

WORDS_PER_MINUTE = 200

_NUMBERED_LINE_RE = re.compile(r"^\d+\.\s*(.*)$")
_BOLD_RE = re.compile(r"\*\*(.+?)\*\*")


def reading_time(text: str, words_per_minute: int = WORDS_PER_MINUTE) -> str:
    """Estimate reading time, e.g. ``"3 min read"``. Never less than one minute."""
    words = len(text.split()) if text else 0
    minutes = max(1, math.ceil(words / max(1, words_per_minute)))
    return f"{minutes} min read"


def key_points(text: str, limit: int = 5) -> list[str]:
    """Pull the most prominent points out of an article body.

    Numbered items, bullets longer than 20 characters, and the first bold
    phrase of any other line qualify, in document order.
    """
    if not text:
        return []

    points: list[str] = []
    for line in text.splitlines():
        stripped = line.strip()
        numbered = _NUMBERED_LINE_RE.match(stripped)
        if numbered:
            if numbered.group(1):
                points.append(strip_emphasis(numbered.group(1)))
        elif stripped.startswith("- ") and len(stripped) > 20:
            points.append(strip_emphasis(stripped[2:].strip()))
        else:
            bold = _BOLD_RE.search(stripped)
            if bold:
                points.append(bold.group(1))
        if len(points) >= limit:
            break

    return points[:limit]
