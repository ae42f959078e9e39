from typing import Protocol, Sequence
from .model import Document, InlineNode


class ParserStrategy(Protocol):
    """
    Turn raw post/comment text into a Document. Must accept any string.
    """

    def parse(self, text: str) -> Document:
        pass


class InlinePass(Protocol):
    """
    One ordered scan of the inline pipeline. Rewrites Text leaves only;
    every other node is passed through untouched.
    """

    def __call__(self, nodes: Sequence[InlineNode]) -> list[InlineNode]:
        pass


class Renderer(Protocol):
    def render_html(self, document: Document) -> str:
        pass
