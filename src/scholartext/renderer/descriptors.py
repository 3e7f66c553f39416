"""Render-ready descriptors for article mode and requirement mode."""

from __future__ import annotations

import re
from typing import Any

from scholartext.parser.base import (
    Block,
    BulletList,
    DocumentList,
    GroupedList,
    Heading,
    NumberedList,
    Paragraph,
    RequirementItem,
    Span,
    SpanRun,
    StepList,
)
from scholartext.parser.callouts import is_conclusion
from scholartext.parser.classifier import STEP_RE
from scholartext.parser.emphasis import inline
from scholartext.parser.normalizer import repair_artifacts
from scholartext.parser.prose_parser import ProseParser

BULLET_MARKER = "•"
DOCUMENT_MARKER = "📄"
STEP_MARKER = "▶"
CALLOUT_ICON = "💡"
CONCLUSION_FOLLOW_UP = (
    "Ready to start your scholarship journey? Browse our latest opportunities "
    "and take the first step toward your educational goals!"
)
STEPS_LABEL = "Application Steps"

_WHITESPACE_RE = re.compile(r"\s+")


def follow_up_for(block: Block) -> str | None:
    return CONCLUSION_FOLLOW_UP if is_conclusion(block) else None


def shows_callout_icon(block: Block) -> bool:
    return block.is_callout and sum(1 for run in block.fields() if run) > 1


def heading_tag(level: int) -> int:
    return min(level + 1, 6)


# ---------------------------------------------------------------------------
# Article mode
# ---------------------------------------------------------------------------

def article_descriptors(blocks: tuple[Block, ...] | list[Block]) -> list[dict[str, Any]]:
    return [block_descriptor(block) for block in blocks]


def block_descriptor(block: Block, *, callouts: bool = True) -> dict[str, Any]:
    is_callout = callouts and block.is_callout
    data: dict[str, Any] = {"kind": block.kind, "is_callout": is_callout}

    if isinstance(block, Heading):
        data.update(level=block.level, heading_tag=heading_tag(block.level), title=_spans(block.title))
    elif isinstance(block, Paragraph):
        data["lines"] = [{"spans": _spans(line.spans), "is_step": line.is_step} for line in block.lines]
    elif isinstance(block, DocumentList):
        data.update(marker=DOCUMENT_MARKER, header=_spans(block.header), items=_items(block.items))
    elif isinstance(block, BulletList):
        data.update(marker=BULLET_MARKER, header=_spans(block.header), items=_items(block.items))
    elif isinstance(block, StepList):
        data.update(marker=STEP_MARKER, items=_items(block.items))
    elif isinstance(block, NumberedList):
        data["header"] = _spans(block.header)
        data["items"] = [
            {"index": item.index, "title": _spans(item.title), "body": _spans(item.body)}
            for item in block.items
        ]
    elif isinstance(block, GroupedList):
        data["groups"] = [
            {"title": _spans(group.title), "items": _items(group.items)}
            for group in block.groups
        ]

    if is_callout:
        data["icon"] = CALLOUT_ICON if shows_callout_icon(block) else None
        data["follow_up"] = follow_up_for(block)
    return data


def _spans(spans: SpanRun) -> list[dict[str, str]]:
    return [_span(span) for span in spans]


def _span(span: Span) -> dict[str, str]:
    return {"text": span.text, "emphasis": span.emphasis.value}


def _items(items: tuple[SpanRun, ...]) -> list[list[dict[str, str]]]:
    return [_spans(item) for item in items]


# ---------------------------------------------------------------------------
# Requirement mode
# ---------------------------------------------------------------------------

def build_requirement_item(text: str, index: int, parser: ProseParser | None = None) -> RequirementItem:
    """Classify one eligibility/requirement line.

    Anything other than a single one-line paragraph is structured and keeps
    its nested blocks; otherwise the item is a plain numbered line.
    """
    parser = parser or ProseParser()
    text = text or ""
    blocks = parser.parse(text)

    plain_line = not blocks or (
        len(blocks) == 1 and isinstance(blocks[0], Paragraph) and len(blocks[0].lines) <= 1
    )
    step_by_step = bool(STEP_RE.search(text)) and len(text.split("\n")) > 3

    if plain_line:
        source = repair_artifacts(text) if parser.settings.repair_artifacts else text
        return RequirementItem(
            index=index,
            badge=str(index + 1),
            plain=inline(_WHITESPACE_RE.sub(" ", source).strip()),
            is_step_by_step=step_by_step,
        )

    return RequirementItem(
        index=index,
        badge=str(index + 1),
        blocks=blocks,
        is_structured=True,
        is_step_by_step=step_by_step,
    )


def requirement_descriptor(item: RequirementItem) -> dict[str, Any]:
    return {
        "index": item.index,
        "badge": item.badge,
        "is_structured": item.is_structured,
        "is_step_by_step": item.is_step_by_step,
        "label": STEPS_LABEL if item.is_structured and item.is_step_by_step else None,
        "plain": _spans(item.plain),
        "blocks": [block_descriptor(block, callouts=False) for block in item.blocks],
    }
