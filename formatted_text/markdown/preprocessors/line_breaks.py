# formatted_text/markdown/preprocessors/line_breaks.py

import re

BR_TAG_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
PARAGRAPH_BREAK = "\r\n\r\n"


def line_break_tags(text, context):
    """
    Treat explicit <br> markup as a paragraph separator.

    mistune would otherwise keep the tag as inline HTML and show it verbatim.
    """
    return BR_TAG_RE.sub(PARAGRAPH_BREAK, text)
