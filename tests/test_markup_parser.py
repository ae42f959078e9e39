"""Tests for MarkupParser and its per-block memo."""

from scholia.adapters.markup_parser import MarkupParser
from scholia.format.inline import parse_inline
from scholia.format.render import build_document, render_document

TEXT = "### Title\n**bold** line\n\n- [a](b)\n**bold** line"


def test_parser_matches_render_document():
    assert MarkupParser().parse(TEXT).blocks == render_document(TEXT).blocks
    assert MarkupParser(cache_size=8).parse(TEXT).blocks == render_document(TEXT).blocks


def test_cache_hits_repeated_blocks():
    parser = MarkupParser(cache_size=8)
    parser.parse(TEXT)
    # "**bold** line" appears twice in the same text
    assert parser.misses == 3
    assert parser.hits == 1

    parser.parse(TEXT)
    assert parser.misses == 3
    assert parser.hits == 5


def test_cache_evicts_oldest():
    parser = MarkupParser(cache_size=2)
    parser.parse("a\nb\nc")
    assert list(parser._memo) == ["b", "c"]
    parser.parse("a")
    assert parser.misses == 4


def test_no_cache_by_default():
    parser = MarkupParser()
    parser.parse(TEXT)
    assert parser.hits == 0
    assert not parser._memo


def test_clear():
    parser = MarkupParser(cache_size=4)
    parser.parse(TEXT)
    parser.clear()
    assert not parser._memo
    assert parser.hits == parser.misses == 0


def test_build_document_skips_blank_blocks():
    """Both parsers share one block loop; blanks never reach the inline parser."""
    seen = []

    def fake_inline(content):
        seen.append(content)
        return parse_inline(content)

    doc = build_document("### a\n\n- b", fake_inline)
    assert seen == ["a", "b"]
    assert doc.blocks == MarkupParser(cache_size=2).parse("### a\n\n- b").blocks
