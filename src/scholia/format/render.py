"""Whole-document rendering: blocks plus their inline nodes."""

from typing import Callable, Sequence

from ..core.model import (
    Blank,
    Document,
    Emphasis,
    InlineNode,
    Link,
    RenderedBlock,
    Strong,
    Text,
)
from .blocks import split_blocks
from .inline import parse_inline


def build_document(
    text: str, inline_parser: Callable[[str], Sequence[InlineNode]]
) -> Document:
    """Split text into blocks and run ``inline_parser`` on each non-blank one."""
    doc = Document(raw=text)
    for block in split_blocks(text):
        if isinstance(block, Blank):
            doc.blocks.append(RenderedBlock(block))
        else:
            doc.blocks.append(RenderedBlock(block, tuple(inline_parser(block.text))))
    return doc


def render_document(text: str) -> Document:
    """Split text into blocks and parse the inline content of each.

    Recomputed from scratch on every call; the raw text is the only state.
    """
    return build_document(text, parse_inline)


def _flatten(nodes: tuple[InlineNode, ...] | list[InlineNode]) -> str:
    parts = []
    for node in nodes:
        if isinstance(node, Text):
            parts.append(node.value)
        elif isinstance(node, Link):
            parts.append(node.label)
        elif isinstance(node, (Strong, Emphasis)):
            parts.append(_flatten(node.children))
    return "".join(parts)


def plain_text(document: Document) -> str:
    """Drop all markup, one output line per block (blank lines stay blank)."""
    return "\n".join(_flatten(rb.inlines) for rb in document.blocks)
