# formatted_text/markdown/postprocessors/merge_text.py
"""
Postprocessor joining adjacent text nodes.

Leaked fragments and soft breaks arrive as separate Text nodes next to the
text runs mistune rendered itself. Joining them keeps the tree free of
one-character spans without changing the visible text.
"""

from dataclasses import fields, replace
from typing import List

from ..nodes import Text


def _merge(nodes) -> List:
    merged = []
    for node in nodes:
        node = _merge_children(node)
        if merged and isinstance(node, Text) and isinstance(merged[-1], Text):
            merged[-1] = Text(merged[-1].text + node.text)
        else:
            merged.append(node)
    return merged


def _merge_children(node):
    if "children" not in {f.name for f in fields(node)}:
        return node
    return replace(node, children=tuple(_merge(node.children)))


def merge_adjacent_text(nodes, context):
    return _merge(nodes)
