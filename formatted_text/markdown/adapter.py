# formatted_text/markdown/adapter.py
"""
mistune renderer that produces output nodes instead of HTML.

mistune expects every renderer callback to return a string, and concatenates
the results into the content of the enclosing construct. We're being sneaky:
each callback builds a node, stores it in a NodeRegistry and returns its
placeholder token. Callbacks run bottom-up, so a container's content string is
already a sequence of tokens (plus whatever source text mistune leaked) which
the container decodes back into its children.
"""

import logging

import mistune

from . import builders
from .placeholders import decode, encode
from .registry import NodeRegistry

logger = logging.getLogger(__name__)

INLINE_CONTAINERS = {"emphasis", "strong", "strikethrough"}


class NodeRenderer(mistune.HTMLRenderer):
    # Keeps NAME == "html" so the table and strikethrough plugins register
    # their callbacks; every callback they use is overridden below.

    def __init__(self, options, on_image_load=None):
        super().__init__(escape=False)
        self.options = options
        self.on_image_load = on_image_load
        self.registry = NodeRegistry()
        # Last character rendered in the current block, for smartypants quotes
        self.previous_char = ""

    def add(self, node) -> str:
        return encode(self.registry.register(node))

    def children(self, text: str):
        return decode(text, self.registry)

    def _container(self, kind: str, text: str) -> str:
        if kind not in INLINE_CONTAINERS:
            self.previous_char = ""
        return self.add(builders.build_container(kind, self.children(text)))

    def _block(self, node) -> str:
        self.previous_char = ""
        return self.add(node)

    # Inline level

    def text(self, text: str) -> str:
        node = builders.build_text(
            text,
            smartypants=self.options.get("smartypants", False),
            previous=self.previous_char,
        )
        self.previous_char = node.text[-1:] or self.previous_char
        return self.add(node)

    def emphasis(self, text: str) -> str:
        return self._container("emphasis", text)

    def strong(self, text: str) -> str:
        return self._container("strong", text)

    def strikethrough(self, text: str) -> str:
        return self._container("strikethrough", text)

    def codespan(self, text: str) -> str:
        self.previous_char = text[-1:] or self.previous_char
        return self.add(builders.build_inline_code(text))

    def linebreak(self) -> str:
        self.previous_char = "\n"
        return self.add(builders.build_line_break())

    def softbreak(self) -> str:
        self.previous_char = "\n"
        return self.add(builders.build_text("\n"))

    def inline_html(self, html: str) -> str:
        self.previous_char = html[-1:] or self.previous_char
        return self.add(builders.build_raw_html(html))

    def link(self, text: str, url: str, title=None) -> str:
        node = builders.build_link(self.children(text), url, title, restrict=self.options.get("sanitize", False))
        if node is None:
            return ""
        return self.add(node)

    def image(self, text: str, url: str, title=None) -> str:
        node = builders.build_image(
            self.children(text),
            url,
            title,
            restrict=self.options.get("sanitize", False),
            on_load=self.on_image_load,
        )
        if node is None:
            return ""
        return self.add(node)

    # Block level

    def paragraph(self, text: str) -> str:
        return self._container("paragraph", text)

    def heading(self, text: str, level: int, **attrs) -> str:
        return self._block(builders.build_heading(self.children(text), level))

    def blank_line(self) -> str:
        return ""

    def thematic_break(self) -> str:
        return self._block(builders.build_horizontal_rule())

    def block_text(self, text: str) -> str:
        self.previous_char = ""
        return text

    def block_code(self, code: str, info=None) -> str:
        return self._block(builders.build_code_block(code, info))

    def block_quote(self, text: str) -> str:
        return self._container("block_quote", text)

    def block_html(self, html: str) -> str:
        return self._block(builders.build_raw_html(html))

    def block_error(self, text: str) -> str:
        logger.debug("mistune reported a block error; keeping its content as-is")
        self.previous_char = ""
        return text

    def list(self, text: str, ordered: bool, **attrs) -> str:
        return self._block(builders.build_list(self.children(text), ordered, start=attrs.get("start")))

    def list_item(self, text: str, **attrs) -> str:
        return self._container("list_item", text)

    # Tables (mistune.plugins.table)

    def table(self, text: str) -> str:
        return self._container("table", text)

    def table_head(self, text: str) -> str:
        return self._block(builders.build_table_head(self.children(text)))

    def table_body(self, text: str) -> str:
        return self._container("table_body", text)

    def table_row(self, text: str) -> str:
        return self._container("table_row", text)

    def table_cell(self, text: str, align=None, head=False) -> str:
        return self._block(builders.build_table_cell(self.children(text), align, head))
