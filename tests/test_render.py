"""Tests for whole-document rendering and the HTML renderer."""

from scholia.adapters.html_renderer import HtmlRenderer
from scholia.core.model import Blank, Heading, Link, ListItem, Paragraph, Strong, Text
from scholia.format.render import plain_text, render_document


def test_render_document_pairs_blocks_with_inlines():
    doc = render_document("### **Intro**\n\n- see https://x.co")
    assert [rb.block for rb in doc.blocks] == [Heading("**Intro**"), Blank(), ListItem("see https://x.co")]
    assert doc.blocks[0].inlines == (Strong((Text("Intro"),)),)
    assert doc.blocks[1].inlines == ()
    assert doc.blocks[2].inlines == (Text("see "), Link("https://x.co", "https://x.co"))


def test_render_is_recomputed_each_call():
    a = render_document("*x*")
    b = render_document("*x*")
    assert a is not b
    assert a.blocks == b.blocks


def test_plain_text():
    doc = render_document("### **Hi**\n[Docs](https://x.co) and *more*\n\n- item")
    assert plain_text(doc) == "Hi\nDocs and more\n\nitem"


def test_html_blocks():
    html = HtmlRenderer().render_html(render_document("### Title\n- item\n\ntext"))
    assert html.split("\n") == [
        "<h3>Title</h3>",
        "<li>item</li>",
        "<br>",
        "<p>text</p>",
    ]


def test_html_inline():
    html = HtmlRenderer().render_html(render_document("**a** *b* [c](https://x.co)"))
    assert html == (
        '<p><strong>a</strong> <em>b</em> '
        '<a href="https://x.co" target="_blank" rel="noreferrer">c</a></p>'
    )


def test_html_escapes_text_and_attributes():
    html = HtmlRenderer().render_html(render_document('<b>hi</b> [x](a"onmouseover="y)'))
    assert "<b>" not in html
    assert "&lt;b&gt;hi&lt;/b&gt;" in html
    assert 'href="a&#34;onmouseover=&#34;y"' in html


def test_html_link_attributes_configurable():
    renderer = HtmlRenderer(link_target="", link_rel="nofollow")
    html = renderer.render_html(render_document("https://x.co"))
    assert html == '<p><a href="https://x.co" rel="nofollow">https://x.co</a></p>'


def test_html_empty_content_renders_nothing():
    assert HtmlRenderer().render_html(render_document("")) == ""


def test_html_whitespace_only_is_a_break():
    assert HtmlRenderer().render_html(render_document("  ")) == "<br>"


def test_paragraph_kept_as_is():
    doc = render_document("  indented")
    assert doc.blocks[0].block == Paragraph("  indented")


def test_html_unbalanced_markers_stay_literal():
    assert HtmlRenderer().render_html(render_document("**oops")) == "<p>**oops</p>"
