"""Render classified blocks into a self-contained HTML page."""

from __future__ import annotations

import html
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from scholartext.parser.base import (
    Block,
    BulletList,
    DocumentList,
    Emphasis,
    GroupedList,
    Heading,
    NumberedList,
    Paragraph,
    RequirementItem,
    SpanRun,
    StepList,
)

from .descriptors import (
    BULLET_MARKER,
    CALLOUT_ICON,
    DOCUMENT_MARKER,
    STEP_MARKER,
    STEPS_LABEL,
    follow_up_for,
    heading_tag,
    shows_callout_icon,
)


class HTMLRenderer:
    """Render blocks in article mode or requirement-list mode."""

    def __init__(self, template_path: Path | None = None) -> None:
        if template_path is None:
            template_path = Path(__file__).resolve().parent.parent / "template" / "page.html"

        loader = FileSystemLoader(str(template_path.parent))
        self._env = Environment(loader=loader, autoescape=True, trim_blocks=True, lstrip_blocks=True)
        self._template_name = template_path.name

    def render_article(
        self,
        blocks: tuple[Block, ...] | list[Block],
        *,
        title: str | None = None,
        reading_time: str | None = None,
        key_points: list[str] | None = None,
    ) -> str:
        template = self._env.get_template(self._template_name)
        return template.render(
            mode="article",
            page_title=title or "Untitled",
            reading_time=reading_time,
            key_points=key_points or [],
            body_html=self.render_blocks(blocks),
        )

    def render_requirements(self, items: list[RequirementItem], *, title: str | None = None) -> str:
        template = self._env.get_template(self._template_name)
        return template.render(
            mode="requirements",
            page_title=title or "Requirements",
            reading_time=None,
            key_points=[],
            body_html=self.render_requirement_list(items),
        )

    def render_blocks(self, blocks: tuple[Block, ...] | list[Block], *, callouts: bool = True) -> str:
        parts = [self._render_block(block, callouts=callouts) for block in blocks]
        return "\n".join(part for part in parts if part)

    def render_requirement_list(self, items: list[RequirementItem]) -> str:
        rows = [self.render_requirement(item) for item in items]
        rows = [row for row in rows if row]
        if not rows:
            return ""
        return '<ol class="st-requirements">' + "".join(rows) + "</ol>"

    def render_requirement(self, item: RequirementItem) -> str:
        badge = f'<span class="st-badge">{html.escape(item.badge)}</span>'

        if item.is_structured:
            inset_class = "st-inset st-inset-steps" if item.is_step_by_step else "st-inset"
            label = (
                f'<div class="st-inset-label">{html.escape(STEPS_LABEL)}</div>' if item.is_step_by_step else ""
            )
            inner = self.render_blocks(item.blocks, callouts=False)
            return (
                f'<li class="st-requirement st-requirement-structured">{badge}'
                f'<div class="{inset_class}">{label}{inner}</div></li>'
            )

        if not item.plain:
            return ""
        return f'<li class="st-requirement">{badge}<span class="st-requirement-text">{_render_spans(item.plain)}</span></li>'

    def _render_block(self, block: Block, *, callouts: bool) -> str:
        inner = self._render_block_body(block)
        if not callouts or not block.is_callout:
            return inner

        icon = (
            f'<span class="st-callout-icon">{CALLOUT_ICON}</span>' if shows_callout_icon(block) else ""
        )
        follow_up = follow_up_for(block)
        follow_up_html = (
            f'<div class="st-callout-follow-up">{CALLOUT_ICON} {html.escape(follow_up)}</div>' if follow_up else ""
        )
        return (
            f'<div class="st-callout">{icon}<div class="st-callout-body">{inner}{follow_up_html}</div></div>'
        )

    def _render_block_body(self, block: Block) -> str:
        if isinstance(block, Heading):
            tag = heading_tag(block.level)
            return f'<h{tag} class="st-heading st-heading-{block.level}">{_render_spans(block.title)}</h{tag}>'

        if isinstance(block, Paragraph):
            lines = [
                f'<span class="st-line st-line-step">{_render_spans(line.spans)}</span>'
                if line.is_step
                else _render_spans(line.spans)
                for line in block.lines
            ]
            return '<p class="st-paragraph">' + "<br />".join(lines) + "</p>"

        if isinstance(block, DocumentList):
            return self._render_list(block.header, block.items, css="st-documents", marker=DOCUMENT_MARKER)

        if isinstance(block, BulletList):
            return self._render_list(block.header, block.items, css="st-bullets", marker=BULLET_MARKER)

        if isinstance(block, StepList):
            return self._render_list((), block.items, css="st-steps", marker=STEP_MARKER, tag="ol")

        if isinstance(block, NumberedList):
            return self._render_numbered(block)

        if isinstance(block, GroupedList):
            return self._render_groups(block)

        return ""

    def _render_list(
        self,
        header: SpanRun,
        items: tuple[SpanRun, ...],
        *,
        css: str,
        marker: str,
        tag: str = "ul",
    ) -> str:
        header_html = f'<h4 class="st-list-header">{_render_spans(header)}</h4>' if header else ""
        rows = "".join(
            f'<li><span class="st-marker">{marker}</span><span class="st-item">{_render_spans(item)}</span></li>'
            for item in items
            if item
        )
        list_html = f'<{tag} class="st-list {css}">{rows}</{tag}>' if rows else ""
        return f'<div class="st-block {css}-block">{header_html}{list_html}</div>'

    def _render_numbered(self, block: NumberedList) -> str:
        header_html = f'<p class="st-paragraph">{_render_spans(block.header)}</p>' if block.header else ""
        rows = []
        for item in block.items:
            body_html = f'<p class="st-numbered-body">{_render_spans(item.body)}</p>' if item.body else ""
            rows.append(
                '<div class="st-numbered-item">'
                f'<span class="st-badge">{item.index}</span>'
                f'<div class="st-numbered-content"><h4 class="st-numbered-title">{_render_spans(item.title)}</h4>'
                f"{body_html}</div></div>"
            )
        return f'<div class="st-block st-numbered">{header_html}{"".join(rows)}</div>'

    def _render_groups(self, block: GroupedList) -> str:
        cards = []
        for group in block.groups:
            rows = "".join(
                f'<li><span class="st-marker">{BULLET_MARKER}</span><span class="st-item">{_render_spans(item)}</span></li>'
                for item in group.items
            )
            cards.append(
                f'<div class="st-group"><h4 class="st-group-title">{_render_spans(group.title)}</h4>'
                f'<ul class="st-list st-bullets">{rows}</ul></div>'
            )
        return f'<div class="st-block st-groups">{"".join(cards)}</div>'


def _render_spans(spans: SpanRun) -> str:
    parts = []
    for span in spans:
        text = html.escape(span.text)
        if span.emphasis is Emphasis.BOLD:
            parts.append(f"<strong>{text}</strong>")
        elif span.emphasis is Emphasis.ITALIC:
            parts.append(f"<em>{text}</em>")
        else:
            parts.append(text)
    return "".join(parts)
