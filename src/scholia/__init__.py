"""scholia - inline markup rendering and editing helpers for forum posts."""

__version__ = "0.1.0"

from .core.model import (  # noqa: E402
    Blank,
    Document,
    Emphasis,
    Heading,
    Link,
    ListItem,
    Paragraph,
    RenderedBlock,
    Selection,
    Strong,
    Text,
)
from .editor import apply_action, wrap_selection  # noqa: E402
from .format import parse_inline, plain_text, render_document, split_blocks  # noqa: E402

__all__ = [
    "__version__",
    "Blank",
    "Document",
    "Emphasis",
    "Heading",
    "Link",
    "ListItem",
    "Paragraph",
    "RenderedBlock",
    "Selection",
    "Strong",
    "Text",
    "apply_action",
    "wrap_selection",
    "parse_inline",
    "plain_text",
    "render_document",
    "split_blocks",
]
