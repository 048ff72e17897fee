# formatted_text/markdown/nodes.py
"""
Output node variants produced by the markdown bridge.

Every renderable construct is its own frozen dataclass carrying only the
attributes that construct needs. Containers hold their children as tuples so a
finished tree can be shared freely between the renderer and the display layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple, Union


@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class LineBreak:
    pass


@dataclass(frozen=True)
class HorizontalRule:
    pass


@dataclass(frozen=True)
class CodeBlock:
    code: str
    info: Optional[str] = None


@dataclass(frozen=True)
class InlineCode:
    code: str


@dataclass(frozen=True)
class Span:
    """Generic inline container (plain-text lines, format wrappers)."""

    children: Tuple["Node", ...] = ()
    class_name: Optional[str] = None


@dataclass(frozen=True)
class BlockQuote:
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class Heading:
    level: int
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class OrderedList:
    children: Tuple["Node", ...] = ()
    start: Optional[int] = None


@dataclass(frozen=True)
class UnorderedList:
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class ListItem:
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class Paragraph:
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class Table:
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class TableHead:
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class TableBody:
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class TableRow:
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class HeaderCell:
    children: Tuple["Node", ...] = ()
    align: str = "initial"

    @property
    def style(self) -> dict:
        return {"text-align": self.align}


@dataclass(frozen=True)
class BodyCell:
    children: Tuple["Node", ...] = ()
    align: str = "initial"

    @property
    def style(self) -> dict:
        return {"text-align": self.align}


@dataclass(frozen=True)
class Bold:
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class Italic:
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class Strikethrough:
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class Hyperlink:
    href: str
    title: Optional[str] = None
    target: str = "_blank"
    children: Tuple["Node", ...] = ()


class LoadHook:
    """
    Wraps the caller's image-load callback so one image notifies at most once.

    The display surface calls the hook whenever it finishes loading the
    resource; repeated load events for the same node are ignored.
    """

    __slots__ = ("_callback", "fired")

    def __init__(self, callback: Optional[Callable[[], None]]):
        self._callback = callback
        self.fired = False

    def __call__(self) -> None:
        if self.fired:
            return
        self.fired = True
        if self._callback is not None:
            self._callback()


@dataclass(frozen=True)
class Image:
    src: str
    title: Optional[str] = None
    alt: str = ""
    on_load: LoadHook = field(default_factory=lambda: LoadHook(None), compare=False, repr=False)

    def notify_loaded(self) -> None:
        self.on_load()


Node = Union[
    Text,
    LineBreak,
    HorizontalRule,
    CodeBlock,
    InlineCode,
    Span,
    BlockQuote,
    Heading,
    OrderedList,
    UnorderedList,
    ListItem,
    Paragraph,
    Table,
    TableHead,
    TableBody,
    TableRow,
    HeaderCell,
    BodyCell,
    Bold,
    Italic,
    Strikethrough,
    Hyperlink,
    Image,
]


def text_content(node) -> str:
    """Flatten a node (or a sequence of nodes) into its plain text."""
    if isinstance(node, (list, tuple)):
        return "".join(text_content(child) for child in node)
    if isinstance(node, Text):
        return node.text
    if isinstance(node, (InlineCode, CodeBlock)):
        return node.code
    if isinstance(node, Image):
        return node.alt
    return text_content(getattr(node, "children", ()))
