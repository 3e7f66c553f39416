"""Break raw prose into section candidates."""

from __future__ import annotations

import re

from scholartext.utils import get_logger

from .base import ClassifierSettings, SectionCandidate

logger = get_logger("splitter")

_BLANK_LINE_RE = re.compile(r"\n\s*\n")
_DOCUMENT_INTRO_RE = re.compile(
    r"\b(?:documents?|following|requirements?|submit|include|provide)\s*[:;]",
    re.IGNORECASE,
)
# A list number such as "1." or "12." is not a sentence end.
_NOT_LIST_NUMBER = r"(?<!\b\d\.)(?<!\b\d\d\.)"
_DOCUMENT_ITEM_RE = re.compile(rf"(?<=[.)]){_NOT_LIST_NUMBER}\s+(?=[A-Z])|;\s*(?=[A-Z])")
_CLAUSE_BOUNDARY_RE = re.compile(
    rf"(?<=[.;]){_NOT_LIST_NUMBER}\s+(?=[A-Z])|(?<=\.)\s*-\s*(?i:advertisement)\s*-\s*"
)
_SENTENCE_RE = re.compile(rf"(?<=[.!?]){_NOT_LIST_NUMBER}\s+(?=[A-Z])")
_ADVERTISEMENT_RE = re.compile(r"^\s*-\s*advertisement\s*-\s*", re.IGNORECASE)

DOCUMENT_LIST_HEADER = "Required documents:"


def split(raw: str, settings: ClassifierSettings | None = None) -> list[SectionCandidate]:
    """Split *raw* into ordered section candidates.

    Blank lines are the primary separator. Text written as one single line
    falls back to punctuation heuristics: a document-list introduction first,
    then clause boundaries, then sentences regrouped in pairs.
    """
    settings = settings or ClassifierSettings()
    text = raw.strip()
    if not text:
        return []

    if _BLANK_LINE_RE.search(text):
        pieces = _BLANK_LINE_RE.split(text)
        strategy = "blank-line"
    elif "\n" in text:
        pieces = [text]
        strategy = "single-block"
    else:
        pieces, strategy = _split_single_run(text, settings)

    candidates: list[SectionCandidate] = []
    for piece in pieces:
        cleaned = _ADVERTISEMENT_RE.sub("", piece, count=1).strip()
        if len(cleaned) <= settings.noise_max_length:
            continue
        candidates.append(SectionCandidate(text=cleaned, index=len(candidates)))

    logger.debug(f"Split {len(text)} chars into {len(candidates)} candidates ({strategy})")
    return candidates


def _split_single_run(text: str, settings: ClassifierSettings) -> tuple[list[str], str]:
    intro = _DOCUMENT_INTRO_RE.search(text)
    if intro:
        return _split_document_list(text, intro.end()), "document-list"

    pieces = _split_clauses(text)
    if len(pieces) > 1:
        return pieces, "clause"

    sentences = [s for s in _SENTENCE_RE.split(text) if s.strip()]
    size = max(1, settings.sentence_group_size)
    grouped = [" ".join(sentences[i:i + size]) for i in range(0, len(sentences), size)]
    return grouped, "sentence-group"


def _split_clauses(text: str) -> list[str]:
    return [piece for piece in _CLAUSE_BOUNDARY_RE.split(text) if piece.strip()]


def _split_document_list(text: str, intro_end: int) -> list[str]:
    """Isolate the introductory sentence from the list that follows it.

    Sentences before the introduction keep their clause boundaries. Two or
    more items are emitted under a ``Required documents:`` header so they
    classify as a document list.
    """
    pieces = _split_clauses(text[:intro_end])
    body = text[intro_end:].strip()
    if not body:
        return pieces

    items = [item.strip() for item in _DOCUMENT_ITEM_RE.split(body) if item.strip()]
    if len(items) > 1:
        pieces.append("\n".join([DOCUMENT_LIST_HEADER, *(f"• {item}" for item in items)]))
    else:
        pieces.extend(s for s in _SENTENCE_RE.split(body) if s.strip())
    return pieces
