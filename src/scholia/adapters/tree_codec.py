import io
import json
from typing import Any

import yaml

from ..core.model import Document, Emphasis, InlineNode, Link, Strong, Text


def inline_to_dict(node: InlineNode) -> dict[str, Any]:
    if isinstance(node, Text):
        return {"kind": node.kind, "text": node.value}
    if isinstance(node, Link):
        return {"kind": node.kind, "label": node.label, "href": node.href}
    if isinstance(node, (Strong, Emphasis)):
        return {"kind": node.kind, "children": [inline_to_dict(c) for c in node.children]}
    raise TypeError(f"not an inline node: {node!r}")


def to_dict(document: Document) -> dict[str, Any]:
    """Plain-data view of a Document, stable enough for JSON/YAML output."""
    return {
        "blocks": [
            {
                "kind": rb.kind,
                "text": rb.block.text,
                "inlines": [inline_to_dict(n) for n in rb.inlines],
            }
            for rb in document.blocks
        ]
    }


def dump_json(document: Document, indent: int | None = 2) -> str:
    return json.dumps(to_dict(document), indent=indent, ensure_ascii=False)


def dump_yaml(document: Document) -> str:
    buf = io.StringIO()
    yaml.safe_dump(to_dict(document), buf, sort_keys=False, allow_unicode=True)
    return buf.getvalue()
