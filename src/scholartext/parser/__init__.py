"""Parser package."""

from .base import (
    Block,
    BulletList,
    ClassifierSettings,
    DocumentList,
    Emphasis,
    GroupedList,
    Heading,
    ListGroup,
    Marker,
    NormalizedLine,
    NumberedItem,
    NumberedList,
    Paragraph,
    ParagraphLine,
    RequirementItem,
    SectionCandidate,
    Span,
    StepList,
)
from .callouts import flag_callouts
from .classifier import classify
from .emphasis import inline
from .normalizer import normalize, repair_artifacts
from .prose_parser import ProseParser
from .splitter import split

__all__ = [
    "Block",
    "BulletList",
    "ClassifierSettings",
    "DocumentList",
    "Emphasis",
    "GroupedList",
    "Heading",
    "ListGroup",
    "Marker",
    "NormalizedLine",
    "NumberedItem",
    "NumberedList",
    "Paragraph",
    "ParagraphLine",
    "RequirementItem",
    "SectionCandidate",
    "Span",
    "StepList",
    "ProseParser",
    "classify",
    "flag_callouts",
    "inline",
    "normalize",
    "repair_artifacts",
    "split",
]
