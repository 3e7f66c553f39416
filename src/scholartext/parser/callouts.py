"""Mark introduction and conclusion blocks as callouts."""

from __future__ import annotations

import dataclasses
import re

from .base import Block

CALLOUT_RE = re.compile(r"conclusion|in summary|to conclude|start your journey|transform your", re.IGNORECASE)
CONCLUSION_RE = re.compile(r"conclusion", re.IGNORECASE)


def flag_callouts(blocks: tuple[Block, ...] | list[Block]) -> tuple[Block, ...]:
    """Return *blocks* with ``is_callout`` set on the first block and on summary blocks."""
    flagged: list[Block] = []
    for position, block in enumerate(blocks):
        if position == 0 or CALLOUT_RE.search(block.text):
            block = dataclasses.replace(block, is_callout=True)
        flagged.append(block)
    return tuple(flagged)


def is_conclusion(block: Block) -> bool:
    return block.is_callout and bool(CONCLUSION_RE.search(block.text))
