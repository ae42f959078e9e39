from __future__ import annotations
from dataclasses import dataclass, field
from typing import ClassVar, Union


# Blocks: one per source line, never merged.


@dataclass(frozen=True)
class Heading:
    kind: ClassVar[str] = "heading"
    text: str


@dataclass(frozen=True)
class ListItem:
    kind: ClassVar[str] = "list_item"
    text: str


@dataclass(frozen=True)
class Paragraph:
    kind: ClassVar[str] = "paragraph"
    text: str


@dataclass(frozen=True)
class Blank:
    kind: ClassVar[str] = "blank"
    text: ClassVar[str] = ""


Block = Union[Heading, ListItem, Paragraph, Blank]


# Inline nodes


@dataclass(frozen=True)
class Text:
    kind: ClassVar[str] = "text"
    value: str


@dataclass(frozen=True)
class Strong:
    kind: ClassVar[str] = "strong"
    children: tuple["InlineNode", ...] = ()


@dataclass(frozen=True)
class Emphasis:
    kind: ClassVar[str] = "emphasis"
    children: tuple["InlineNode", ...] = ()


@dataclass(frozen=True)
class Link:
    kind: ClassVar[str] = "link"
    label: str
    href: str


InlineNode = Union[Text, Strong, Emphasis, Link]


@dataclass(frozen=True)
class Selection:
    start: int  # character offsets into the edited text
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def is_caret(self) -> bool:
        return self.start == self.end


@dataclass(frozen=True)
class RenderedBlock:
    block: Block
    inlines: tuple[InlineNode, ...] = ()

    @property
    def kind(self) -> str:
        return self.block.kind


@dataclass
class Document:
    raw: str
    blocks: list[RenderedBlock] = field(default_factory=list)
