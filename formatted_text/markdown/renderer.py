# formatted_text/markdown/renderer.py

import logging

import mistune

from .adapter import NodeRenderer
from .config import get_markdown_config, get_mistune_plugins
from .nodes import CodeBlock, Paragraph, Span, Text
from .placeholders import decode
from .postprocessors import apply_postprocessors
from .preprocessors import apply_preprocessors

logger = logging.getLogger(__name__)

MARKDOWN_CLASS = "format-markdown"


def _error_nodes(exc):
    return [Paragraph((Text("An error occurred:"),)), CodeBlock(str(exc))]


def render_markdown(text, options=None, on_image_load=None, context=None):
    """
    Render markdown into a node tree wrapped in a "format-markdown" span.

    Args:
        text: Raw markdown text
        options: Optional overrides for DEFAULT_MARKDOWN_OPTIONS
        on_image_load: Called (without arguments) when a rendered image loads
        context: Optional dict shared with pre/post processors

    Returns None for empty input.
    """
    if not text:
        return None
    context = context or {}
    config = get_markdown_config(options)

    # Pre-processing: Before markdown conversion
    source = apply_preprocessors(text, context)

    renderer = NodeRenderer(config, on_image_load)
    markdown = mistune.create_markdown(
        renderer=renderer,
        hard_wrap=bool(config["breaks"]),
        plugins=get_mistune_plugins(config),
    )

    try:
        output = markdown(source)
    except Exception as e:
        if not config["silent"]:
            raise
        logger.error(f"Markdown rendering failed: {e}", exc_info=True)
        return Span(tuple(_error_nodes(e)), class_name=MARKDOWN_CLASS)

    nodes = decode(output, renderer.registry)

    remaining = renderer.registry.remaining()
    if remaining:
        logger.debug("There were %d unused markdown elements", remaining)

    # Post-processing: After decoding the node tree
    nodes = apply_postprocessors(nodes, context)

    return Span(tuple(nodes), class_name=MARKDOWN_CLASS)
