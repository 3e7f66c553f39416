"""Core intermediate representation (IR) for classified prose."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar


class Emphasis(str, Enum):
    NONE = "none"
    BOLD = "bold"
    ITALIC = "italic"


class Marker(str, Enum):
    NONE = "none"
    BULLET = "bullet"
    NUMBERED = "numbered"
    COLON_HEADER = "colon-header"


@dataclass(frozen=True, slots=True)
class Span:
    text: str
    emphasis: Emphasis = Emphasis.NONE


SpanRun = tuple[Span, ...]


def join_spans(spans: SpanRun) -> str:
    return "".join(span.text for span in spans)


@dataclass(frozen=True, slots=True)
class SectionCandidate:
    text: str
    index: int


@dataclass(frozen=True, slots=True)
class NormalizedLine:
    text: str
    marker: Marker = Marker.NONE
    number: int | None = None


@dataclass(frozen=True, slots=True)
class ClassifierSettings:
    """Tuning values for splitting and classification.

    The numbered-item thresholds were fitted to sample blog content rather
    than derived from a rule, so they stay adjustable here.
    """

    title_split_min_words: int = 5
    title_min_words: int = 2
    title_max_words: int = 4
    title_body_ratio: float = 2.0
    noise_max_length: int = 10
    sentence_group_size: int = 2
    repair_artifacts: bool = True


class _TextFields:
    __slots__ = ()

    def fields(self) -> tuple[SpanRun, ...]:  # pragma: no cover - overridden by every block
        raise NotImplementedError

    @property
    def spans(self) -> SpanRun:
        return tuple(span for run in self.fields() for span in run)

    @property
    def text(self) -> str:
        return " ".join(join_spans(run) for run in self.fields() if run)


@dataclass(frozen=True, slots=True)
class Heading(_TextFields):
    kind: ClassVar[str] = "heading"

    level: int
    title: SpanRun = ()
    is_callout: bool = False

    def fields(self) -> tuple[SpanRun, ...]:
        return (self.title,)


@dataclass(frozen=True, slots=True)
class ParagraphLine:
    spans: SpanRun
    is_step: bool = False


@dataclass(frozen=True, slots=True)
class Paragraph(_TextFields):
    kind: ClassVar[str] = "paragraph"

    lines: tuple[ParagraphLine, ...] = ()
    is_callout: bool = False

    def fields(self) -> tuple[SpanRun, ...]:
        return tuple(line.spans for line in self.lines)


@dataclass(frozen=True, slots=True)
class BulletList(_TextFields):
    kind: ClassVar[str] = "bulletList"

    items: tuple[SpanRun, ...] = ()
    header: SpanRun = ()
    is_callout: bool = False

    def fields(self) -> tuple[SpanRun, ...]:
        return (self.header, *self.items)


@dataclass(frozen=True, slots=True)
class NumberedItem:
    index: int
    title: SpanRun = ()
    body: SpanRun = ()


@dataclass(frozen=True, slots=True)
class NumberedList(_TextFields):
    kind: ClassVar[str] = "numberedList"

    items: tuple[NumberedItem, ...] = ()
    header: SpanRun = ()
    is_callout: bool = False

    def fields(self) -> tuple[SpanRun, ...]:
        runs: list[SpanRun] = [self.header]
        for item in self.items:
            runs.extend((item.title, item.body))
        return tuple(runs)


@dataclass(frozen=True, slots=True)
class ListGroup:
    title: SpanRun
    items: tuple[SpanRun, ...] = ()


@dataclass(frozen=True, slots=True)
class GroupedList(_TextFields):
    kind: ClassVar[str] = "groupedList"

    groups: tuple[ListGroup, ...] = ()
    is_callout: bool = False

    def fields(self) -> tuple[SpanRun, ...]:
        runs: list[SpanRun] = []
        for group in self.groups:
            runs.append(group.title)
            runs.extend(group.items)
        return tuple(runs)


@dataclass(frozen=True, slots=True)
class StepList(_TextFields):
    kind: ClassVar[str] = "stepList"

    items: tuple[SpanRun, ...] = ()
    is_callout: bool = False

    def fields(self) -> tuple[SpanRun, ...]:
        return self.items


@dataclass(frozen=True, slots=True)
class DocumentList(_TextFields):
    kind: ClassVar[str] = "documentList"

    header: SpanRun = ()
    items: tuple[SpanRun, ...] = ()
    is_callout: bool = False

    def fields(self) -> tuple[SpanRun, ...]:
        return (self.header, *self.items)


Block = Heading | Paragraph | BulletList | NumberedList | GroupedList | StepList | DocumentList


@dataclass(frozen=True, slots=True)
class RequirementItem:
    """One eligibility or requirement line, ready for the requirement list."""

    index: int
    badge: str
    plain: SpanRun = ()
    blocks: tuple[Block, ...] = field(default_factory=tuple)
    is_structured: bool = False
    is_step_by_step: bool = False
