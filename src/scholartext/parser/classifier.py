"""Ordered rule table that turns normalized lines into one typed block."""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass
from functools import reduce
from typing import Callable

from scholartext.utils import get_logger

from .base import (
    Block,
    BulletList,
    ClassifierSettings,
    DocumentList,
    GroupedList,
    Heading,
    ListGroup,
    Marker,
    NormalizedLine,
    NumberedItem,
    NumberedList,
    Paragraph,
    ParagraphLine,
    StepList,
)
from .emphasis import inline

logger = get_logger("classifier")

Lines = tuple[NormalizedLine, ...]

HEADING_RE = re.compile(r"^(#{1,3})\s+(.+)$")
DOCUMENT_HEADER_RE = re.compile(r"document|requirement|certificate|proof|prepare|submit|following", re.IGNORECASE)
STEP_RE = re.compile(r"\b(step|click|visit|choose|apply|prepare|submit)\b", re.IGNORECASE)
STEP_LINE_RE = re.compile(r"^(?:step|click|visit|choose|apply|prepare|submit)\b", re.IGNORECASE)
_BOLD_LEAD_RE = re.compile(r"^(\*\*[^*]+\*\*:?)\s+(.+)$")


@dataclass(frozen=True, slots=True)
class Rule:
    name: str
    matches: Callable[[Lines], bool]
    build: Callable[[Lines, ClassifierSettings], Block]


def classify(
    lines: Lines,
    is_first_candidate: bool = False,
    settings: ClassifierSettings | None = None,
) -> Block:
    """Return the block built by the first rule in ``RULES`` that matches."""
    settings = settings or ClassifierSettings()
    rule = match_rule(lines)
    block = rule.build(lines, settings)
    logger.debug(f"Classified {len(lines)} line(s) as {block.kind} by rule '{rule.name}'")
    if is_first_candidate:
        block = dataclasses.replace(block, is_callout=True)
    return block


def match_rule(lines: Lines) -> Rule:
    for rule in RULES:
        if rule.matches(lines):
            return rule
    return RULES[-1]


# ---------------------------------------------------------------------------
# Heading
# ---------------------------------------------------------------------------

def _is_heading(lines: Lines) -> bool:
    return (
        len(lines) == 1
        and lines[0].marker in (Marker.NONE, Marker.COLON_HEADER)
        and bool(HEADING_RE.match(lines[0].text))
    )


def _build_heading(lines: Lines, settings: ClassifierSettings) -> Block:
    m = HEADING_RE.match(lines[0].text)
    if m is None:
        return _build_paragraph(lines, settings)
    return Heading(level=len(m.group(1)), title=inline(m.group(2).strip()))


# ---------------------------------------------------------------------------
# "Header:" followed by items
# ---------------------------------------------------------------------------

def _is_colon_header_list(lines: Lines) -> bool:
    return len(lines) > 1 and lines[0].marker is Marker.COLON_HEADER


def _build_colon_header_list(lines: Lines, settings: ClassifierSettings) -> Block:
    header = lines[0].text
    items = tuple(inline(line.text) for line in lines[1:])
    if DOCUMENT_HEADER_RE.search(header):
        return DocumentList(header=inline(header), items=items)
    return BulletList(items=items, header=inline(header))


# ---------------------------------------------------------------------------
# Titles with bulleted details
# ---------------------------------------------------------------------------

_RawGroup = tuple[str, tuple[str, ...]]


def fold_groups(lines: Lines) -> tuple[_RawGroup, ...] | None:
    """Group bulleted lines under the title line before them.

    Returns ``None`` when a bullet appears before any title.
    """

    def step(acc: tuple[_RawGroup, ...] | None, line: NormalizedLine) -> tuple[_RawGroup, ...] | None:
        if acc is None:
            return None
        if line.marker is not Marker.BULLET:
            return (*acc, (line.text, ()))
        if not acc:
            return None
        title, items = acc[-1]
        return (*acc[:-1], (title, (*items, line.text)))

    return reduce(step, lines, ())


def _is_grouped_list(lines: Lines) -> bool:
    groups = fold_groups(lines)
    return groups is not None and len(groups) >= 2 and all(items for _, items in groups)


def _build_grouped_list(lines: Lines, settings: ClassifierSettings) -> Block:
    groups = fold_groups(lines) or ()
    return GroupedList(
        groups=tuple(
            ListGroup(title=inline(title), items=tuple(inline(item) for item in items))
            for title, items in groups
        )
    )


# ---------------------------------------------------------------------------
# Numbered items
# ---------------------------------------------------------------------------

_RawItem = tuple[int, str, tuple[str, ...]]
_NumberedAcc = tuple[tuple[str, ...], tuple[_RawItem, ...]]


def fold_numbered(lines: Lines) -> _NumberedAcc:
    """Collect ``(header lines, items)``; unnumbered lines after an item extend its body."""

    def step(acc: _NumberedAcc, line: NormalizedLine) -> _NumberedAcc:
        header, items = acc
        if line.marker is Marker.NUMBERED:
            return header, (*items, (line.number or 0, line.text, ()))
        if not items:
            return (*header, line.text), items
        number, text, extra = items[-1]
        return header, (*items[:-1], (number, text, (*extra, line.text)))

    return reduce(step, lines, ((), ()))


def split_title(text: str, settings: ClassifierSettings) -> tuple[str, str]:
    """Split a numbered item into a short title and the description after it.

    A break point inside a ``**`` or ``*`` pair is never used.
    """
    words = text.split()
    if len(words) <= settings.title_split_min_words:
        return text, ""

    lead = _BOLD_LEAD_RE.match(text)
    if lead:
        return lead.group(1), lead.group(2)

    for count in range(settings.title_min_words, settings.title_max_words + 1):
        title = " ".join(words[:count])
        rest = " ".join(words[count:])
        if _has_open_emphasis(title):
            continue
        if len(rest) >= len(title) * settings.title_body_ratio:
            return title, rest
    return text, ""


def _has_open_emphasis(text: str) -> bool:
    bold = text.count("**")
    return bold % 2 == 1 or text.replace("**", "").count("*") % 2 == 1


def _is_numbered_list(lines: Lines) -> bool:
    return any(line.marker is Marker.NUMBERED for line in lines)


def _build_numbered_list(lines: Lines, settings: ClassifierSettings) -> Block:
    header, raw_items = fold_numbered(lines)
    items: list[NumberedItem] = []
    for number, text, extra in raw_items:
        title, body = split_title(text, settings)
        body = " ".join(part for part in (body, *extra) if part)
        items.append(NumberedItem(index=number, title=inline(title), body=inline(body)))
    return NumberedList(items=tuple(items), header=inline(" ".join(header)))


# ---------------------------------------------------------------------------
# Step-by-step instructions
# ---------------------------------------------------------------------------

def _is_step_list(lines: Lines) -> bool:
    return len(lines) > 3 and bool(STEP_RE.search(" ".join(line.text for line in lines)))


def _build_step_list(lines: Lines, settings: ClassifierSettings) -> Block:
    return StepList(items=tuple(inline(line.text) for line in lines))


# ---------------------------------------------------------------------------
# Plain bullets
# ---------------------------------------------------------------------------

def _is_bullet_list(lines: Lines) -> bool:
    return any(line.marker is Marker.BULLET for line in lines)


def _build_bullet_list(lines: Lines, settings: ClassifierSettings) -> Block:
    if lines[0].marker is Marker.BULLET:
        return BulletList(items=tuple(inline(line.text) for line in lines))
    return BulletList(
        items=tuple(inline(line.text) for line in lines[1:]),
        header=inline(lines[0].text),
    )


# ---------------------------------------------------------------------------
# Paragraph (fallback)
# ---------------------------------------------------------------------------

def _build_paragraph(lines: Lines, settings: ClassifierSettings) -> Block:
    return Paragraph(
        lines=tuple(
            ParagraphLine(spans=inline(line.text), is_step=bool(STEP_LINE_RE.match(line.text)))
            for line in lines
        )
    )


RULES: tuple[Rule, ...] = (
    Rule("heading", _is_heading, _build_heading),
    Rule("colon-header-list", _is_colon_header_list, _build_colon_header_list),
    Rule("grouped-list", _is_grouped_list, _build_grouped_list),
    Rule("numbered-list", _is_numbered_list, _build_numbered_list),
    Rule("step-list", _is_step_list, _build_step_list),
    Rule("bullet-list", _is_bullet_list, _build_bullet_list),
    Rule("paragraph", lambda lines: True, _build_paragraph),
)
