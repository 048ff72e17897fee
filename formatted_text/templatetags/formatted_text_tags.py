# formatted_text/templatetags/formatted_text_tags.py

from django import template
from django.utils.safestring import mark_safe

from formatted_text.formatting import render_formatted_text
from formatted_text.markdown.html import to_html

register = template.Library()

# Output is marked safe, so only http(s) destinations may reach the page
TEMPLATE_OPTIONS = {"sanitize": True}


@register.filter(name="formatted_text")
def formatted_text_filter(value, format="markdown"):
    """Render markdown (or "plain" text) to HTML: {{ value|formatted_text:"plain" }}"""
    return mark_safe(to_html(render_formatted_text(value, format, options=TEMPLATE_OPTIONS)))
