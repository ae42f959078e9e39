from markupsafe import Markup, escape

from ..core.model import (
    Blank,
    Document,
    Emphasis,
    Heading,
    InlineNode,
    Link,
    ListItem,
    Strong,
    Text,
)
from ..core.ports import Renderer

BLOCK_TAGS = {
    Heading: "h3",
    ListItem: "li",
}


class HtmlRenderer(Renderer):
    """Render a Document to HTML. Every text and attribute value is escaped."""

    def __init__(self, link_target: str = "_blank", link_rel: str = "noreferrer"):
        self.link_target = link_target
        self.link_rel = link_rel

    def render_inline(self, nodes: tuple[InlineNode, ...] | list[InlineNode]) -> Markup:
        out = []
        for node in nodes:
            if isinstance(node, Text):
                out.append(escape(node.value))
            elif isinstance(node, Strong):
                out.append(Markup("<strong>%s</strong>") % self.render_inline(node.children))
            elif isinstance(node, Emphasis):
                out.append(Markup("<em>%s</em>") % self.render_inline(node.children))
            elif isinstance(node, Link):
                attrs = Markup(' href="%s"') % node.href
                if self.link_target:
                    attrs += Markup(' target="%s"') % self.link_target
                if self.link_rel:
                    attrs += Markup(' rel="%s"') % self.link_rel
                out.append(Markup("<a%s>%s</a>") % (attrs, node.label))
        return Markup("").join(out)

    def render_html(self, document: Document) -> str:
        # Empty content renders nothing at all, not a lone <br>.
        if not document.raw:
            return ""

        lines = []
        for rb in document.blocks:
            if isinstance(rb.block, Blank):
                lines.append(Markup("<br>"))
                continue
            tag = BLOCK_TAGS.get(type(rb.block), "p")
            lines.append(Markup("<{0}>%s</{0}>".format(tag)) % self.render_inline(rb.inlines))
        return str(Markup("\n").join(lines))
