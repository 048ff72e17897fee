from formatted_text import render_formatted_text
from formatted_text.markdown.html import to_html
from formatted_text.markdown.nodes import BodyCell, CodeBlock, Span, Text
from formatted_text.templatetags.formatted_text_tags import formatted_text_filter


def test_none_is_empty() -> None:
    assert to_html(None) == ""


def test_text_is_escaped() -> None:
    assert to_html(Span((Text("<b>&"),))) == "<span>&lt;b&gt;&amp;</span>"


def test_link_markup() -> None:
    html = to_html(render_formatted_text('[go](https://example.com "t")'))
    assert html.startswith('<span class="format-markdown">')
    assert 'href="https://example.com"' in html
    assert 'target="_blank"' in html
    assert 'rel="noopener noreferrer"' in html
    assert 'title="t"' in html
    assert ">go</a>" in html


def test_cell_style() -> None:
    assert to_html(BodyCell((Text("1"),))) == '<td style="text-align: initial">1</td>'


def test_code_block_language() -> None:
    assert to_html(CodeBlock("x\n", info="py")) == '<pre><code class="language-py">x\n</code></pre>'


def test_plain_filter() -> None:
    html = formatted_text_filter("a\nb", "plain")
    assert html == '<span class="format-plain"><span>a<br/></span><span>b<br/></span></span>'


def test_filter_empty_value() -> None:
    assert formatted_text_filter("") == ""


def test_filter_drops_unsafe_links() -> None:
    html = formatted_text_filter("[x](javascript:alert(1))")
    assert "<a" not in html
    assert "javascript" not in html


def test_app_config() -> None:
    from formatted_text.apps import FormattedTextConfig

    assert FormattedTextConfig.name == "formatted_text"


def test_filter_drops_unsafe_images() -> None:
    html = formatted_text_filter("![x](javascript:alert(1)) [ok](https://example.com)")
    assert "<img" not in html
    assert 'href="https://example.com"' in html
