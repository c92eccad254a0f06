"""
Unit tests for the Markdown-to-HTML renderer.
"""

import pytest

from site_builder.renderers.markdown_renderer import MarkdownRenderer
from site_builder.renderers.linkify import _trim_url


class TestMarkdownRenderer:
    """Tests for MarkdownRenderer.render."""

    def test_heading(self):
        assert MarkdownRenderer.render("# Title") == "<h1>Title</h1>"

    def test_table(self):
        html = MarkdownRenderer.render("| a | b |\n| --- | --- |\n| 1 | 2 |")
        assert "<table>" in html
        assert "<th>a</th>" in html
        assert "<td>2</td>" in html

    def test_raw_html_passes_through(self):
        html = MarkdownRenderer.render('<div class="note">kept</div>\n\ntext')
        assert '<div class="note">kept</div>' in html

    def test_smart_quotes(self):
        html = MarkdownRenderer.render('He said "hello".')
        assert "&ldquo;hello&rdquo;" in html

    def test_smart_dashes(self):
        html = MarkdownRenderer.render("one -- two --- three")
        assert "&ndash;" in html
        assert "&mdash;" in html

    def test_html_comments_kept(self):
        html = MarkdownRenderer.render("<!-- LISTSTART -->\n\ntext\n\n<!-- LISTEND -->")
        assert "<!-- LISTSTART -->" in html
        assert "<!-- LISTEND -->" in html


class TestLinkify:
    """Tests for automatic link detection."""

    def test_bare_url_linked(self):
        html = MarkdownRenderer.render("See https://example.test/page for more")
        assert '<a href="https://example.test/page">https://example.test/page</a>' in html

    def test_trailing_period_not_part_of_link(self):
        html = MarkdownRenderer.render("See https://example.test/page.")
        assert '<a href="https://example.test/page">https://example.test/page</a>.' in html

    def test_www_gets_scheme(self):
        html = MarkdownRenderer.render("Visit www.example.test today")
        assert '<a href="http://www.example.test">www.example.test</a>' in html

    def test_markdown_link_not_nested(self):
        html = MarkdownRenderer.render("[https://x.test/a](https://x.test/a?k=1)")
        assert html.count("<a ") == 1
        assert '<a href="https://x.test/a?k=1">https://x.test/a</a>' in html

    def test_raw_anchor_not_nested(self):
        html = MarkdownRenderer.render('Go <a href="https://x.test/">https://x.test/</a> now')
        assert html.count("<a ") == 1

    def test_raw_anchor_with_text_before_url(self):
        """Nothing inside a hand-written anchor is linked again."""
        html = MarkdownRenderer.render('Go <a href="https://x.test/">see https://x.test/</a> now')
        assert html == '<p>Go <a href="https://x.test/">see https://x.test/</a> now</p>'

    def test_raw_anchor_with_markup_inside(self):
        html = MarkdownRenderer.render('<a href="https://x.test/">the *new* site https://x.test/</a>')
        assert html.count("<a ") == 1
        assert "<em>new</em>" in html

    def test_linking_resumes_after_raw_anchor(self):
        html = MarkdownRenderer.render('<a href="https://x.test/">x</a> and https://y.test/')
        assert html.count("<a ") == 2
        assert '<a href="https://y.test/">https://y.test/</a>' in html

    def test_url_after_other_raw_tag(self):
        html = MarkdownRenderer.render("<b>https://x.test/</b>")
        assert '<b><a href="https://x.test/">https://x.test/</a></b>' in html

    def test_url_in_emphasis(self):
        html = MarkdownRenderer.render("*see https://x.test/ now*")
        assert '<em>see <a href="https://x.test/">https://x.test/</a> now</em>' in html

    def test_several_urls_in_one_line(self):
        html = MarkdownRenderer.render("https://a.test/ or https://b.test/.")
        assert html == (
            '<p><a href="https://a.test/">https://a.test/</a> or '
            '<a href="https://b.test/">https://b.test/</a>.</p>'
        )

    def test_code_not_linked(self):
        html = MarkdownRenderer.render("`https://x.test/`")
        assert "<a " not in html

    def test_url_in_table_link_column(self):
        text = (
            "| 链接 |\n"
            "| --- |\n"
            "| [https://x.test/a](https://x.test/a?k=1) |"
        )
        html = MarkdownRenderer.render(text)
        assert html.count("<a ") == 1

    @pytest.mark.parametrize("url,expected", [
        ("https://x.test/a.", "https://x.test/a"),
        ("https://x.test/a),", "https://x.test/a"),
        ("https://x.test/wiki/A_(b)", "https://x.test/wiki/A_(b)"),
        ("https://x.test/a?!", "https://x.test/a"),
    ])
    def test_trim_url(self, url, expected):
        assert _trim_url(url) == expected
