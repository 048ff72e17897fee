# formatted_text/markdown/builders.py
"""
Builders turning compiler callback arguments into output nodes.

Container builders receive children that were already decoded from the
placeholder stream. Text runs and link attributes may still carry HTML
entities and are unescaped here; code is kept verbatim.
"""

import html
import logging
import re
from typing import Optional, Sequence

from .nodes import (
    BlockQuote,
    BodyCell,
    Bold,
    CodeBlock,
    HeaderCell,
    Heading,
    HorizontalRule,
    Hyperlink,
    Image,
    InlineCode,
    Italic,
    LineBreak,
    ListItem,
    LoadHook,
    OrderedList,
    Paragraph,
    Strikethrough,
    Table,
    TableBody,
    TableHead,
    TableRow,
    Text,
    UnorderedList,
    text_content,
)

logger = logging.getLogger(__name__)

SAFE_SCHEMES = ("http:", "https:")
DEFAULT_ALIGN = "initial"
MAX_HEADING_LEVEL = 6

_DASH_RULES = [
    (re.compile(r"---"), "—"),
    (re.compile(r"--"), "–"),
    (re.compile(r"\.\.\."), "…"),
]
_OPENS_QUOTE = "([{—–“‘"


def _quotes(text: str, mark: str, opening: str, closing: str, opens_run: bool) -> str:
    if opens_run and text.startswith(mark):
        text = opening + text[1:]
    text = re.sub(r"(?<=[\s(\[{—–“‘])" + mark, opening, text)
    return text.replace(mark, closing)


def smarten(text: str, previous: str = "") -> str:
    """
    Apply typographic quotes, dashes and ellipses to a text run.

    ``previous`` is the last character rendered before this run in the same
    block, so a quote right after an inline span closes instead of opening.
    """
    for pattern, replacement in _DASH_RULES:
        text = pattern.sub(replacement, text)
    opens_run = not previous or previous.isspace() or previous in _OPENS_QUOTE
    text = _quotes(text, '"', "“", "”", opens_run)
    return _quotes(text, "'", "‘", "’", opens_run)


def sanitize_url(url, restrict: bool) -> Optional[str]:
    """
    Unescape a link/image destination and optionally restrict its scheme.

    Returns None when the destination must be dropped: it cannot be
    unescaped, is empty, or (with ``restrict``) is not http(s).
    """
    try:
        url = html.unescape(url)
    except (TypeError, AttributeError):
        logger.debug(f"Dropping destination that could not be unescaped: {url!r}")
        return None
    if restrict and not url.lower().startswith(SAFE_SCHEMES):
        logger.debug(f"Dropping destination with unsafe scheme: {url!r}")
        return None
    return url or None


def build_text(text: str, smartypants: bool = False, previous: str = "") -> Text:
    text = html.unescape(text)
    if smartypants:
        text = smarten(text, previous)
    return Text(text)


def build_code_block(code: str, info: Optional[str] = None) -> CodeBlock:
    return CodeBlock(code, info=info or None)


def build_inline_code(code: str) -> InlineCode:
    # mistune hands code over verbatim; entities inside code stay literal
    return InlineCode(code)


def build_raw_html(markup: str) -> Text:
    # Raw markup is shown as-is, never interpreted
    return Text(markup)


def build_heading(children: Sequence, level: int) -> Heading:
    level = min(max(int(level), 1), MAX_HEADING_LEVEL)
    return Heading(level, tuple(children))


def build_list(children: Sequence, ordered: bool, start: Optional[int] = None):
    if ordered:
        return OrderedList(tuple(children), start=start)
    return UnorderedList(tuple(children))


def build_table_cell(children: Sequence, align: Optional[str], head: bool):
    align = align or DEFAULT_ALIGN
    if head:
        return HeaderCell(tuple(children), align=align)
    return BodyCell(tuple(children), align=align)


def build_table_head(cells: Sequence) -> TableHead:
    """The compiler hands over the header cells without a row around them."""
    if cells and all(isinstance(cell, TableRow) for cell in cells):
        return TableHead(tuple(cells))
    return TableHead((TableRow(tuple(cells)),))


def _unescape_title(title: Optional[str]) -> Optional[str]:
    return html.unescape(title) if title else None


def build_link(children: Sequence, url, title: Optional[str], restrict: bool) -> Optional[Hyperlink]:
    href = sanitize_url(url, restrict)
    if href is None:
        return None
    return Hyperlink(href, title=_unescape_title(title), target="_blank", children=tuple(children))


def build_image(alt_children: Sequence, url, title: Optional[str], restrict: bool, on_load=None) -> Optional[Image]:
    src = sanitize_url(url, restrict)
    if src is None:
        return None
    return Image(src, title=_unescape_title(title), alt=text_content(alt_children), on_load=LoadHook(on_load))


CONTAINERS = {
    "block_quote": BlockQuote,
    "list_item": ListItem,
    "paragraph": Paragraph,
    "table": Table,
    "table_body": TableBody,
    "table_row": TableRow,
    "strong": Bold,
    "emphasis": Italic,
    "strikethrough": Strikethrough,
}


def build_container(kind: str, children: Sequence):
    return CONTAINERS[kind](tuple(children))


def build_line_break() -> LineBreak:
    return LineBreak()


def build_horizontal_rule() -> HorizontalRule:
    return HorizontalRule()
