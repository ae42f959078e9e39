"""Text-editing helpers for the post/comment composer.

Everything here works on explicit state: the current text and a Selection
come in, new text and a new Selection go out.
"""

from dataclasses import dataclass

from .core.model import Selection


class SelectionError(ValueError):
    """Selection offsets outside ``0 <= start <= end <= len(text)``."""


class UnknownActionError(KeyError):
    """No toolbar action with that name."""


@dataclass(frozen=True)
class ToolbarAction:
    name: str
    prefix: str
    suffix: str
    title: str


TOOLBAR_ACTIONS: dict[str, ToolbarAction] = {
    a.name: a
    for a in (
        ToolbarAction("bold", "**", "**", "Bold"),
        ToolbarAction("italic", "*", "*", "Italic"),
        ToolbarAction("heading", "### ", "", "Heading"),
        ToolbarAction("list", "- ", "", "List"),
        ToolbarAction("link", "[", "](url)", "Link"),
    )
}


def wrap_selection(
    text: str, selection: Selection, prefix: str, suffix: str
) -> tuple[str, Selection]:
    """Wrap the selected span in prefix/suffix.

    The returned selection brackets the originally selected text, shifted
    by ``len(prefix)``. A caret (empty selection) ends up between prefix and
    suffix, ready for typing.

    Offsets are not validated; see :func:`check_selection`.
    """
    start, end = selection.start, selection.end
    new_text = text[:start] + prefix + text[start:end] + suffix + text[end:]
    shift = len(prefix)
    return new_text, Selection(start + shift, end + shift)


def check_selection(text: str, selection: Selection) -> None:
    if not 0 <= selection.start <= selection.end <= len(text):
        raise SelectionError(
            f"invalid selection {selection.start}..{selection.end} "
            f"for text of length {len(text)}"
        )


def get_action(name: str) -> ToolbarAction:
    try:
        return TOOLBAR_ACTIONS[name]
    except KeyError:
        raise UnknownActionError(name) from None


def apply_action(text: str, selection: Selection, name: str) -> tuple[str, Selection]:
    """Run a named toolbar action (bold, italic, heading, list, link)."""
    action = get_action(name)
    return wrap_selection(text, selection, action.prefix, action.suffix)


def reply_prefix(name: str, content: str) -> str:
    """Prefix a reply with a bold mention of the comment author."""
    return f"**@{name}** {content}"


def mention_query(text: str) -> str | None:
    """Partial handle typed after the last ``@``, if still being typed."""
    at = text.rfind("@")
    if at == -1:
        return None
    query = text[at + 1:]
    if " " in query:
        return None
    return query


def insert_mention(text: str, username: str) -> tuple[str, Selection]:
    """Complete the mention after the last ``@`` with ``username``.

    Returns the new text and a caret at its end. Text without an ``@`` gets
    the mention appended.
    """
    at = text.rfind("@")
    head = text if at == -1 else text[:at]
    new_text = f"{head}@{username} "
    return new_text, Selection(len(new_text), len(new_text))
