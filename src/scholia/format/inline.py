"""Inline markup pipeline: links, raw URLs, strong and light emphasis.

Parsing starts from a single Text leaf and runs a fixed sequence of passes.
Each pass rescans only the Text leaves left by the previous one, so a span
claimed by an earlier pass (a link label, a URL) is never split again.
"""

import re
from typing import Callable, Sequence

from ..core.model import Emphasis, InlineNode, Link, Strong, Text
from ..core.ports import InlinePass

LINK_RE = re.compile(r"\[(.*?)\]\((.*?)\)")
URL_RE = re.compile(r"https?://[^\s)]+")
STRONG_RE = re.compile(r"\*\*(.*?)\*\*")
EMPHASIS_RE = re.compile(r"\*(.+?)\*")


def scan_text_leaves(
    nodes: Sequence[InlineNode],
    pattern: re.Pattern[str],
    build: Callable[[re.Match[str]], InlineNode],
) -> list[InlineNode]:
    """Apply one pattern to every Text leaf, left to right, without overlap.

    Text before a match is kept as its own leaf, the match becomes
    ``build(match)`` and scanning resumes right after it. Leaves without a
    match are passed through as-is.
    """
    out: list[InlineNode] = []
    for node in nodes:
        if not isinstance(node, Text):
            out.append(node)
            continue

        value = node.value
        last = 0
        for m in pattern.finditer(value):
            if m.start() > last:
                out.append(Text(value[last:m.start()]))
            out.append(build(m))
            last = m.end()

        if last == 0:
            out.append(node)
        elif last < len(value):
            out.append(Text(value[last:]))
    return out


def link_pass(nodes: Sequence[InlineNode]) -> list[InlineNode]:
    """``[label](url)`` -> Link(label, url)."""
    return scan_text_leaves(nodes, LINK_RE, lambda m: Link(m.group(1), m.group(2)))


def url_pass(nodes: Sequence[InlineNode]) -> list[InlineNode]:
    """Bare ``http(s)://...`` -> Link(url, url)."""
    return scan_text_leaves(nodes, URL_RE, lambda m: Link(m.group(0), m.group(0)))


def strong_pass(nodes: Sequence[InlineNode]) -> list[InlineNode]:
    return scan_text_leaves(nodes, STRONG_RE, lambda m: Strong((Text(m.group(1)),)))


def emphasis_pass(nodes: Sequence[InlineNode]) -> list[InlineNode]:
    return scan_text_leaves(nodes, EMPHASIS_RE, lambda m: Emphasis((Text(m.group(1)),)))


# Order matters: links before emphasis so URLs are never split on asterisks,
# strong before light emphasis since "**" also matches the "*" pattern.
PASSES: tuple[InlinePass, ...] = (link_pass, url_pass, strong_pass, emphasis_pass)


def parse_inline(text: str) -> list[InlineNode]:
    """
    Parse one block's content into inline nodes.

    Never fails: unbalanced markers such as ``**oops`` stay literal text.

    Examples:
        >>> parse_inline("**bold** and *italic*")
        [Strong(children=(Text(value='bold'),)), Text(value=' and '), Emphasis(children=(Text(value='italic'),))]
    """
    nodes: list[InlineNode] = [Text(text)]
    for run in PASSES:
        nodes = run(nodes)
    return nodes
