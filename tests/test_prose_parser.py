"""End-to-end tests for the prose pipeline.

Covers:
- Empty and malformed input
- Determinism and order preservation
- Coverage of input text in the output
- Artifact repair on and off
- First-block and conclusion callouts
"""

from __future__ import annotations

from pathlib import Path

import pytest

from scholartext.parser.base import (
    BulletList,
    ClassifierSettings,
    DocumentList,
    Heading,
    NumberedList,
    Paragraph,
    Span,
    join_spans,
)
from scholartext.parser.callouts import is_conclusion
from scholartext.parser.prose_parser import ProseParser

ARTICLE = """\
## Eligibility

Applicants must be enrolled full time at an accredited university.

Required documents:
- Transcript
- Passport photo

1. Start early Begin your research at least six months before the deadline.
2. Ask for feedback

In conclusion, a little planning goes a long way.
"""


def test_empty_input_yields_no_blocks() -> None:
    parser = ProseParser()

    assert parser.parse("") == ()
    assert parser.parse("   \n\n ") == ()


def test_article_kinds_in_order() -> None:
    blocks = ProseParser().parse(ARTICLE)

    assert [block.kind for block in blocks] == [
        "heading",
        "paragraph",
        "documentList",
        "numberedList",
        "paragraph",
    ]


def test_parse_is_deterministic() -> None:
    parser = ProseParser()

    assert parser.parse(ARTICLE) == parser.parse(ARTICLE)


def test_first_block_and_conclusion_are_callouts() -> None:
    blocks = ProseParser().parse(ARTICLE)

    assert isinstance(blocks[0], Heading)
    assert blocks[0].is_callout is True
    assert [block.is_callout for block in blocks[1:4]] == [False, False, False]
    assert blocks[-1].is_callout is True
    assert is_conclusion(blocks[-1])


def test_output_covers_input_text() -> None:
    blocks = ProseParser().parse(ARTICLE)
    combined = " ".join(block.text for block in blocks)

    for fragment in (
        "Eligibility",
        "Applicants must be enrolled full time at an accredited university.",
        "Required documents:",
        "Transcript",
        "Passport photo",
        "Begin your research at least six months before the deadline.",
        "Ask for feedback",
        "In conclusion, a little planning goes a long way.",
    ):
        assert fragment in combined


def test_bullet_list_input() -> None:
    blocks = ProseParser().parse("- Item A\n- Item B")

    assert len(blocks) == 1
    assert isinstance(blocks[0], BulletList)
    assert [join_spans(item) for item in blocks[0].items] == ["Item A", "Item B"]
    assert blocks[0].is_callout is True


def test_document_list_input() -> None:
    blocks = ProseParser().parse("Required documents:\n- Transcript\n- Passport photo")

    assert isinstance(blocks[0], DocumentList)


def test_one_line_document_list_input() -> None:
    blocks = ProseParser().parse(
        "Applicants must submit the following documents: Academic transcripts. Passport photo. Recommendation letter."
    )

    assert [block.kind for block in blocks] == ["paragraph", "documentList"]
    assert join_spans(blocks[1].header) == "Required documents:"
    assert [join_spans(item) for item in blocks[1].items] == [
        "Academic transcripts.",
        "Passport photo.",
        "Recommendation letter.",
    ]


def test_numbered_list_input() -> None:
    blocks = ProseParser().parse("1. Financial Stability Working for a year or two can help you save money...")

    assert isinstance(blocks[0], NumberedList)
    assert join_spans(blocks[0].items[0].title) == "Financial Stability"
    assert blocks[0].items[0].body


def test_unclosed_emphasis_is_kept_literally() -> None:
    blocks = ProseParser().parse("**bold without closing")

    assert len(blocks) == 1
    assert isinstance(blocks[0], Paragraph)
    assert blocks[0].spans == (Span("**bold without closing"),)


def test_artifact_tokens_are_repaired() -> None:
    raw = "Eligibility criteria nest Must be a citizen stop Applicants apply online before June."

    blocks = ProseParser().parse(raw)

    assert len(blocks) == 2
    assert isinstance(blocks[0], Paragraph)
    assert [join_spans(line.spans) for line in blocks[0].lines] == ["Eligibility criteria", "Must be a citizen"]
    assert blocks[1].text == "Applicants apply online before June."


def test_artifact_repair_can_be_disabled() -> None:
    raw = "Eligibility criteria nest Must be a citizen stop Applicants apply online before June."

    blocks = ProseParser(ClassifierSettings(repair_artifacts=False)).parse(raw)

    assert len(blocks) == 1
    assert blocks[0].text == raw


@pytest.mark.parametrize(
    "raw",
    [
        "*",
        "**",
        "#",
        "::::::::::::",
        "–bulletin",
        "stop stop stop stop",
        "\n\n\n",
        "1. \n2. \n- \n* ",
        "- Advertisement -",
        "a" * 5000,
        "Required documents: ",
    ],
)
def test_malformed_input_never_raises(raw: str) -> None:
    blocks = ProseParser().parse(raw)

    assert isinstance(blocks, tuple)


def test_parse_file(tmp_path: Path) -> None:
    path = tmp_path / "post.md"
    path.write_text(ARTICLE, encoding="utf-8")

    assert ProseParser().parse_file(path) == ProseParser().parse(ARTICLE)
