# formatted_text/formatting.py
"""Entry point choosing between plain-text and markdown rendering."""

from formatted_text.markdown.nodes import LineBreak, Span, Text
from formatted_text.markdown.renderer import render_markdown

PLAIN = "plain"
PLAIN_CLASS = "format-plain"


def render_plain_text(text):
    lines = text.replace("\r\n", "\n").split("\n")
    elements = tuple(Span((Text(line), LineBreak())) for line in lines)
    return Span(elements, class_name=PLAIN_CLASS)


def render_formatted_text(text, format="markdown", options=None, on_image_load=None):
    """
    Render ``text`` as a node tree, or return None when there is nothing to show.

    ``format`` is "plain" for line-by-line text; any other value means markdown.
    """
    if not text:
        return None
    if format == PLAIN:
        return render_plain_text(text)
    return render_markdown(text, options=options, on_image_load=on_image_load)
