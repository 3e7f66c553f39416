from scholartext.parser.base import DocumentList, Emphasis, Span
from scholartext.parser.prose_parser import ProseParser
from scholartext.renderer.descriptors import (
    BULLET_MARKER,
    CALLOUT_ICON,
    CONCLUSION_FOLLOW_UP,
    DOCUMENT_MARKER,
    STEP_MARKER,
    STEPS_LABEL,
    article_descriptors,
    build_requirement_item,
    requirement_descriptor,
)

STEPS = "To apply:\nVisit the website\nClick the portal\nComplete the form\nSubmit documents"


# ---------------------------------------------------------------------------
# Article mode
# ---------------------------------------------------------------------------

def test_heading_descriptor() -> None:
    blocks = ProseParser().parse("## Eligibility\n\nApplicants must be enrolled full time.")

    heading, paragraph = article_descriptors(blocks)

    assert heading["kind"] == "heading"
    assert heading["level"] == 2
    assert heading["heading_tag"] == 3
    assert heading["title"] == [{"text": "Eligibility", "emphasis": "none"}]
    assert heading["is_callout"] is True
    assert heading["icon"] is None
    assert heading["follow_up"] is None
    assert paragraph["is_callout"] is False
    assert "follow_up" not in paragraph


def test_list_markers_differ_by_kind() -> None:
    raw = (
        "Opening paragraph for the article.\n\n"
        "Required documents:\n- Transcript\n- Passport photo\n\n"
        "- Full tuition\n- Monthly stipend\n\n"
        "Visit the website\nClick the portal\nComplete the form\nSubmit it"
    )

    descriptors = article_descriptors(ProseParser().parse(raw))

    assert [d["kind"] for d in descriptors] == ["paragraph", "documentList", "bulletList", "stepList"]
    assert descriptors[1]["marker"] == DOCUMENT_MARKER
    assert descriptors[2]["marker"] == BULLET_MARKER
    assert descriptors[3]["marker"] == STEP_MARKER
    assert descriptors[1]["items"][0] == [{"text": "Transcript", "emphasis": "none"}]


def test_conclusion_callout_gets_follow_up() -> None:
    raw = "Scholarships can be life-changing.\n\nIn conclusion, start preparing your documents today."

    descriptors = article_descriptors(ProseParser().parse(raw))

    assert descriptors[1]["is_callout"] is True
    assert descriptors[1]["follow_up"] == CONCLUSION_FOLLOW_UP


def test_multi_line_callout_shows_icon() -> None:
    descriptors = article_descriptors(ProseParser().parse("Welcome to the guide\nRead every section carefully"))

    assert descriptors[0]["icon"] == CALLOUT_ICON


def test_numbered_and_grouped_descriptors() -> None:
    raw = (
        "1. **Apply early:** Most funds are awarded on a first come basis\n\n"
        "University of Oslo\n- Tuition free\nUniversity of Bergen\n- Research focus"
    )

    numbered, grouped = article_descriptors(ProseParser().parse(raw))

    assert numbered["items"][0]["index"] == 1
    assert numbered["items"][0]["title"] == [{"text": "Apply early:", "emphasis": "bold"}]
    assert [g["title"][0]["text"] for g in grouped["groups"]] == ["University of Oslo", "University of Bergen"]


# ---------------------------------------------------------------------------
# Requirement mode
# ---------------------------------------------------------------------------

def test_simple_requirement_is_plain_line() -> None:
    item = build_requirement_item("Must be under **25** years old", 0)

    assert item.badge == "1"
    assert item.is_structured is False
    assert item.blocks == ()
    assert item.plain == (Span("Must be under "), Span("25", Emphasis.BOLD), Span(" years old"))


def test_short_requirement_survives_noise_filter() -> None:
    item = build_requirement_item("Age 18-25", 4)

    assert item.badge == "5"
    assert item.plain == (Span("Age 18-25"),)


def test_structured_requirement_keeps_blocks() -> None:
    item = build_requirement_item("Required documents:\n- Transcript\n- Passport photo", 2)

    assert item.is_structured is True
    assert item.badge == "3"
    assert isinstance(item.blocks[0], DocumentList)
    assert item.is_step_by_step is False


def test_one_line_document_list_requirement() -> None:
    item = build_requirement_item(
        "Applicants must submit the following documents: Academic transcripts. Passport photo. Recommendation letter.",
        0,
    )

    assert item.is_structured is True
    assert [block.kind for block in item.blocks] == ["paragraph", "documentList"]
    assert requirement_descriptor(item)["blocks"][1]["marker"] == DOCUMENT_MARKER


def test_step_by_step_requirement() -> None:
    item = build_requirement_item(STEPS, 0)

    assert item.is_structured is True
    assert item.is_step_by_step is True


def test_requirement_descriptor_drops_callouts() -> None:
    data = requirement_descriptor(build_requirement_item(STEPS, 0))

    assert data["label"] == STEPS_LABEL
    assert data["blocks"][0]["is_callout"] is False
    assert data["plain"] == []


def test_empty_requirement() -> None:
    item = build_requirement_item("", 0)

    assert item.plain == ()
    assert item.blocks == ()
    assert item.is_structured is False
