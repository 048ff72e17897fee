# formatted_text/markdown/html.py
"""Serialize a node tree to HTML with BeautifulSoup, for template output."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

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
    OrderedList,
    Paragraph,
    Span,
    Strikethrough,
    Table,
    TableBody,
    TableHead,
    TableRow,
    Text,
    UnorderedList,
)

TAGS = {
    Span: "span",
    BlockQuote: "blockquote",
    UnorderedList: "ul",
    OrderedList: "ol",
    ListItem: "li",
    Paragraph: "p",
    Table: "table",
    TableHead: "thead",
    TableBody: "tbody",
    TableRow: "tr",
    HeaderCell: "th",
    BodyCell: "td",
    Bold: "strong",
    Italic: "em",
    Strikethrough: "del",
    Hyperlink: "a",
}


def _attributes(node) -> dict:
    if isinstance(node, Span) and node.class_name:
        return {"class": node.class_name}
    if isinstance(node, OrderedList) and node.start is not None:
        return {"start": str(node.start)}
    if isinstance(node, (HeaderCell, BodyCell)):
        return {"style": "; ".join(f"{k}: {v}" for k, v in node.style.items())}
    if isinstance(node, Hyperlink):
        attrs = {"href": node.href, "target": node.target, "rel": "noopener noreferrer"}
        if node.title:
            attrs["title"] = node.title
        return attrs
    return {}


def _build(soup: BeautifulSoup, node):
    if isinstance(node, Text):
        return soup.new_string(node.text)
    if isinstance(node, LineBreak):
        return soup.new_tag("br")
    if isinstance(node, HorizontalRule):
        return soup.new_tag("hr")
    if isinstance(node, InlineCode):
        tag = soup.new_tag("code")
        tag.string = node.code
        return tag
    if isinstance(node, CodeBlock):
        pre = soup.new_tag("pre")
        code = soup.new_tag("code")
        if node.info:
            code["class"] = f"language-{node.info.split()[0]}"
        code.string = node.code
        pre.append(code)
        return pre
    if isinstance(node, Image):
        attrs = {"src": node.src, "alt": node.alt}
        if node.title:
            attrs["title"] = node.title
        return soup.new_tag("img", attrs=attrs)

    name = f"h{node.level}" if isinstance(node, Heading) else TAGS[type(node)]
    tag: Tag = soup.new_tag(name, attrs=_attributes(node))
    for child in node.children:
        tag.append(_build(soup, child))
    return tag


def to_html(node) -> str:
    """Return the HTML markup for ``node``; empty string for None."""
    if node is None:
        return ""
    soup = BeautifulSoup("", "html.parser")
    soup.append(_build(soup, node))
    return str(soup)
