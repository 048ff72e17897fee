# formatted_text/markdown/placeholders.py
"""
Placeholder tokens standing in for registered nodes inside the compiler output.

mistune only passes strings between its renderer callbacks, so each node is
represented by ``{{<index>}}``. The compiler may also leak source text next to
the tokens, e.g.::

    "{{87}}{{88}}[{{89}}[{{90}}http://example.com/{{91}}"

``decode`` walks such a stream and turns every leaked fragment into a text
node on the fly.
"""

import html
import re
from typing import List

from .nodes import Node, Text
from .registry import NodeRegistry

OPEN = "{{"
TOKEN_RE = re.compile(r"\{\{(\d+)\}\}")


def encode(index: int) -> str:
    return f"{OPEN}{index}}}}}"


def _leak(fragment: str) -> Text:
    return Text(html.unescape(fragment))


def decode(stream: str, registry: NodeRegistry) -> List[Node]:
    """
    Expand a placeholder stream into nodes, absorbing leaked text.

    Tokens whose index is unknown or already taken are skipped. Safe to call
    on any substring, including while an outer decode is in progress.
    """
    nodes: List[Node] = []
    pos = 0
    end = len(stream)

    while pos < end:
        # Consume tokens until the end or a leak
        match = TOKEN_RE.match(stream, pos)
        while match:
            node = registry.take(int(match.group(1)))
            if node is not None:
                nodes.append(node)
            pos = match.end()
            match = TOKEN_RE.match(stream, pos)

        if pos >= end:
            break

        # A "{{" at pos is not a token here, so look past it
        following = stream.find(OPEN, pos + 1)
        if following == -1:
            nodes.append(_leak(stream[pos:]))
            break
        nodes.append(_leak(stream[pos:following]))
        pos = following

    return nodes
