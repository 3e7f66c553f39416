"""Inline ``**bold**`` / ``*italic*`` span extraction."""

from __future__ import annotations

from .base import Emphasis, Span, SpanRun


def inline(text: str) -> SpanRun:
    """Split *text* into plain and emphasized spans.

    Scans left to right. ``***`` is tried first, then ``**``, then ``*``.
    A delimiter without a usable partner is kept as literal text, so the
    function accepts any input.
    """
    spans: list[Span] = []
    plain: list[str] = []
    i = 0
    n = len(text)

    def flush() -> None:
        if plain:
            spans.append(Span("".join(plain)))
            plain.clear()

    while i < n:
        # A span carries one emphasis, so ***x*** renders as bold.
        if text.startswith("***", i):
            close = text.find("***", i + 3)
            inner = text[i + 3:close] if close != -1 else ""
            if _is_emphasis_body(inner) and "*" not in inner:
                flush()
                spans.append(Span(inner, Emphasis.BOLD))
                i = close + 3
                continue

        if text.startswith("**", i):
            close = text.find("**", i + 2)
            inner = text[i + 2:close] if close != -1 else ""
            if _is_emphasis_body(inner):
                flush()
                spans.append(Span(inner, Emphasis.BOLD))
                i = close + 2
                continue
            plain.append("**")
            i += 2
            continue

        if text[i] == "*":
            close = text.find("*", i + 1)
            inner = text[i + 1:close] if close != -1 else ""
            if _is_emphasis_body(inner):
                flush()
                spans.append(Span(inner, Emphasis.ITALIC))
                i = close + 1
                continue
            plain.append("*")
            i += 1
            continue

        plain.append(text[i])
        i += 1

    flush()
    return tuple(spans)


def strip_emphasis(text: str) -> str:
    return "".join(span.text for span in inline(text))


def _is_emphasis_body(inner: str) -> bool:
    # "5 * 3 * 2" is arithmetic, not emphasis.
    return bool(inner) and inner == inner.strip()
