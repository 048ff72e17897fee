# formatted_text/markdown/postprocessors/__init__.py

from .merge_text import merge_adjacent_text

POSTPROCESSORS = [
    merge_adjacent_text,  # Join leaked fragments with neighbouring text runs
    # Order matters - they run sequentially
]


def apply_postprocessors(nodes, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        nodes = processor(nodes, context)
    return nodes
