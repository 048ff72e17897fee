from formatted_text.formatting import render_formatted_text, render_plain_text
from formatted_text.markdown.renderer import render_markdown

__all__ = ["render_formatted_text", "render_plain_text", "render_markdown"]
