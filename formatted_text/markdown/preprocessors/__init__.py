# formatted_text/markdown/preprocessors/__init__.py

from .line_breaks import line_break_tags

PREPROCESSORS = [
    line_break_tags,
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
