"""Markup parsing for scholia posts and comments."""

from .blocks import classify_line, split_blocks
from .inline import PASSES, parse_inline
from .render import build_document, plain_text, render_document

__all__ = [
    "classify_line",
    "split_blocks",
    "parse_inline",
    "PASSES",
    "build_document",
    "render_document",
    "plain_text",
]
