"""Line cleanup and leading-marker detection for section candidates."""

from __future__ import annotations

import re

from .base import Marker, NormalizedLine, SectionCandidate

# Known corruption patterns in ingested scholarship text. Applied in order.
ARTIFACT_REPLACEMENTS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"[ \t]*\bnest\b[ \t]*", re.IGNORECASE), "\n"),
    (re.compile(r"[ \t]*\bstop\b[ \t]*", re.IGNORECASE), "\n\n"),
    (re.compile(r"[ \t]*–bulletin\b[ \t]*", re.IGNORECASE), "\n• "),
)

_BULLET_RE = re.compile(r"^(?:•\s*|[-*]\s+)(.*)$")
_NUMBERED_RE = re.compile(r"^(\d+)\.\s+(.*)$")
_COLON_HEADER_RE = re.compile(r"^[^:]+:$")
_WHITESPACE_RE = re.compile(r"\s+")


def repair_artifacts(text: str) -> str:
    for pattern, replacement in ARTIFACT_REPLACEMENTS:
        text = pattern.sub(replacement, text)
    return text


def normalize(candidate: SectionCandidate, *, repair: bool = True) -> tuple[NormalizedLine, ...]:
    """Break a candidate into cleaned lines tagged with their leading marker."""
    text = repair_artifacts(candidate.text) if repair else candidate.text

    lines: list[NormalizedLine] = []
    for raw_line in text.splitlines():
        cleaned = _WHITESPACE_RE.sub(" ", raw_line).strip()
        if not cleaned:
            continue
        lines.append(normalize_line(cleaned, first=not lines))
    return tuple(lines)


def normalize_line(text: str, *, first: bool = False) -> NormalizedLine:
    bullet = _BULLET_RE.match(text)
    if bullet:
        return NormalizedLine(text=bullet.group(1).strip(), marker=Marker.BULLET)

    numbered = _NUMBERED_RE.match(text)
    if numbered:
        return NormalizedLine(
            text=numbered.group(2).strip(),
            marker=Marker.NUMBERED,
            number=int(numbered.group(1)),
        )

    if first and _COLON_HEADER_RE.match(text):
        return NormalizedLine(text=text, marker=Marker.COLON_HEADER)

    return NormalizedLine(text=text)
