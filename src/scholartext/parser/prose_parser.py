"""Classify loosely authored scholarship prose into structural blocks."""

from __future__ import annotations

from pathlib import Path

from scholartext.utils import get_logger

from .base import Block, ClassifierSettings
from .callouts import flag_callouts
from .classifier import classify
from .normalizer import normalize, repair_artifacts
from .splitter import split

logger = get_logger("parser")


class ProseParser:
    """Run split -> normalize -> classify -> flag callouts over one string.

    Instances hold only immutable settings and can be shared between threads.
    """

    def __init__(self, settings: ClassifierSettings | None = None) -> None:
        self.settings = settings or ClassifierSettings()

    def parse(self, text: str) -> tuple[Block, ...]:
        if not text or not text.strip():
            return ()

        repair = self.settings.repair_artifacts
        if repair:
            text = repair_artifacts(text)

        blocks: list[Block] = []
        for candidate in split(text, self.settings):
            lines = normalize(candidate, repair=repair)
            if not lines:
                logger.debug(f"Dropped empty candidate {candidate.index}")
                continue
            blocks.append(classify(lines, is_first_candidate=not blocks, settings=self.settings))

        return flag_callouts(blocks)

    def parse_file(self, input_path: Path) -> tuple[Block, ...]:
        raw = Path(input_path).read_text(encoding="utf-8", errors="ignore")
        return self.parse(raw)
