"""Line-level block splitting for post and comment bodies."""

from ..core.model import Blank, Block, Heading, ListItem, Paragraph

HEADING_PREFIX = "### "
LIST_PREFIX = "- "


def classify_line(line: str) -> Block:
    """Classify a single line. Markers only count at column 0."""
    if line.startswith(HEADING_PREFIX):
        return Heading(line[len(HEADING_PREFIX):])
    if line.startswith(LIST_PREFIX):
        return ListItem(line[len(LIST_PREFIX):])
    if line.strip() == "":
        return Blank()
    return Paragraph(line)


def split_blocks(text: str) -> list[Block]:
    """
    Split text on ``\\n`` into one Block per line.

    No line is dropped: a trailing newline yields a trailing Blank and the
    empty string yields a single Blank.

    Examples:
        >>> split_blocks("### Title\\n- item")
        [Heading(text='Title'), ListItem(text='item')]
    """
    return [classify_line(line) for line in text.split("\n")]
