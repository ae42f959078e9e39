from collections import OrderedDict

from ..core.model import Document, InlineNode
from ..core.ports import ParserStrategy
from ..format.inline import parse_inline
from ..format.render import build_document


class MarkupParser(ParserStrategy):
    """Parse raw post text into a Document.

    With ``cache_size > 0`` inline results are memoized per block content,
    oldest entry evicted first. Output is the same either way.
    """

    def __init__(self, cache_size: int = 0):
        self.cache_size = cache_size
        self._memo: OrderedDict[str, tuple[InlineNode, ...]] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def _inlines(self, content: str) -> tuple[InlineNode, ...]:
        if self.cache_size <= 0:
            return tuple(parse_inline(content))

        cached = self._memo.get(content)
        if cached is not None:
            self._memo.move_to_end(content)
            self.hits += 1
            return cached

        self.misses += 1
        nodes = tuple(parse_inline(content))
        self._memo[content] = nodes
        if len(self._memo) > self.cache_size:
            self._memo.popitem(last=False)
        return nodes

    def parse(self, text: str) -> Document:
        return build_document(text, self._inlines)

    def clear(self) -> None:
        self._memo.clear()
        self.hits = 0
        self.misses = 0
