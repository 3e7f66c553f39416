from scholartext.parser.base import Heading, Paragraph, ParagraphLine, Span
from scholartext.parser.callouts import flag_callouts, is_conclusion


def _para(text: str) -> Paragraph:
    return Paragraph(lines=(ParagraphLine(spans=(Span(text),)),))


def test_first_block_is_callout_regardless_of_kind() -> None:
    blocks = flag_callouts([Heading(level=2, title=(Span("Eligibility"),)), _para("Plain body text here.")])

    assert blocks[0].is_callout is True
    assert blocks[1].is_callout is False


def test_summary_keywords_flag_callouts() -> None:
    blocks = flag_callouts(
        [
            _para("Opening paragraph."),
            _para("In Summary, apply early."),
            _para("Ready to TRANSFORM YOUR future?"),
            _para("Nothing special here."),
        ]
    )

    assert [block.is_callout for block in blocks] == [True, True, True, False]


def test_conclusion_detection() -> None:
    blocks = flag_callouts([_para("Intro text."), _para("In conclusion, start preparing today.")])

    assert is_conclusion(blocks[1])
    assert not is_conclusion(blocks[0])


def test_input_blocks_are_not_modified() -> None:
    original = _para("Opening paragraph.")

    flagged = flag_callouts([original])

    assert original.is_callout is False
    assert flagged[0].is_callout is True


def test_no_blocks() -> None:
    assert flag_callouts([]) == ()
