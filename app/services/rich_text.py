import logging
from typing import Any, Dict, Iterable, List, Optional

from markupsafe import Markup, escape

logger = logging.getLogger(__name__)

BLOCK_TAGS = {
    "paragraph": "p",
    "heading1": "h1",
    "heading2": "h2",
    "heading3": "h3",
    "heading4": "h4",
    "heading5": "h5",
    "heading6": "h6",
    "preformatted": "pre",
}
LIST_TAGS = {"list-item": "ul", "o-list-item": "ol"}
SPAN_TAGS = {"strong": "strong", "em": "em"}


def as_text(blocks: Optional[Iterable[Dict[str, Any]]], join_string: str = " ") -> str:
    """Flatten rich-text blocks into plain text."""
    if not blocks:
        return ""
    return join_string.join(
        block.get("text", "") for block in blocks if isinstance(block.get("text"), str)
    )


def as_html(blocks: Optional[Iterable[Dict[str, Any]]]) -> Markup:
    """
    Serialize rich-text blocks to HTML.
    Consecutive list items are grouped into a single <ul>/<ol>.
    """
    if not blocks:
        return Markup("")

    parts: List[str] = []
    open_list: Optional[str] = None

    for block in blocks:
        block_type = block.get("type")
        list_tag = LIST_TAGS.get(block_type)

        if open_list and list_tag != open_list:
            parts.append(f"</{open_list}>")
            open_list = None
        if list_tag and not open_list:
            parts.append(f"<{list_tag}>")
            open_list = list_tag

        if list_tag:
            parts.append(f"<li>{render_spans(block)}</li>")
        elif block_type in BLOCK_TAGS:
            tag = BLOCK_TAGS[block_type]
            parts.append(f"<{tag}>{render_spans(block)}</{tag}>")
        elif block_type == "image":
            parts.append(_render_image(block))
        elif block_type == "embed":
            parts.append(_render_embed(block))
        else:
            logger.debug(f"Skipping unsupported rich text block: {block_type}")

    if open_list:
        parts.append(f"</{open_list}>")

    return Markup("".join(parts))


def render_spans(block: Dict[str, Any]) -> str:
    """Render a block's text with its strong/em/hyperlink spans applied."""
    text = block.get("text") or ""
    spans = [
        span
        for span in block.get("spans") or []
        if span.get("type") in SPAN_TAGS or span.get("type") == "hyperlink"
    ]
    # Outer spans first: earlier start, then longer.
    spans.sort(key=lambda s: (s.get("start", 0), -s.get("end", 0)))

    boundaries = sorted(
        {0, len(text)}
        | {s.get("start", 0) for s in spans}
        | {s.get("end", 0) for s in spans}
    )

    out: List[str] = []
    stack: List[Dict[str, Any]] = []
    for index, position in enumerate(boundaries):
        # Close spans ending here, reopening any that were nested above them.
        reopen: List[Dict[str, Any]] = []
        while any(s.get("end") == position for s in stack):
            top = stack.pop()
            out.append(_close_tag(top))
            if top.get("end") != position:
                reopen.append(top)
        for span in reversed(reopen):
            out.append(_open_tag(span))
            stack.append(span)

        for span in spans:
            if span.get("start") == position and span.get("end", 0) > position:
                out.append(_open_tag(span))
                stack.append(span)

        if index + 1 < len(boundaries):
            segment = text[position : boundaries[index + 1]]
            out.append(str(escape(segment)).replace("\n", "<br />"))

    while stack:
        out.append(_close_tag(stack.pop()))

    return "".join(out)


def _open_tag(span: Dict[str, Any]) -> str:
    if span.get("type") == "hyperlink":
        data = span.get("data") or {}
        url = escape(data.get("url") or "")
        if data.get("target"):
            target = escape(data["target"])
            return f'<a href="{url}" target="{target}" rel="noopener noreferrer">'
        return f'<a href="{url}">'
    return f"<{SPAN_TAGS[span['type']]}>"


def _close_tag(span: Dict[str, Any]) -> str:
    if span.get("type") == "hyperlink":
        return "</a>"
    return f"</{SPAN_TAGS[span['type']]}>"


def _render_image(block: Dict[str, Any]) -> str:
    url = escape(block.get("url") or "")
    alt = escape(block.get("alt") or "")
    return f'<p class="block-img"><img src="{url}" alt="{alt}" /></p>'


def _render_embed(block: Dict[str, Any]) -> str:
    oembed = block.get("oembed") or {}
    # oEmbed html is trusted provider markup
    return f'<div data-oembed="{escape(oembed.get("embed_url") or "")}">{oembed.get("html") or ""}</div>'
