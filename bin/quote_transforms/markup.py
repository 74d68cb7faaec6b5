"""HTML fragment <-> content sequence conversion."""

from __future__ import annotations

import html
from typing import Any, Iterable

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from .nodes import Element

_VOID_ELEMENTS = frozenset({"br", "hr", "img", "wbr"})
_BLOCK_ELEMENTS = frozenset(
    {"p", "div", "blockquote", "footer", "h1", "h2", "h3", "h4", "h5", "h6", "ul", "ol", "li"}
)


def parse_markup(markup: str) -> list:
    """Parse an HTML fragment into a content sequence.

    Multi-valued attributes (``class``) are joined with single spaces.
    """
    if not markup:
        return []
    soup = BeautifulSoup(markup, "html.parser")
    nodes = _convert_children(soup.contents)
    while nodes and _is_blank(nodes[0]):
        nodes.pop(0)
    while nodes and _is_blank(nodes[-1]):
        nodes.pop()
    return nodes


def _is_blank(node: Any) -> bool:
    return isinstance(node, str) and not node.strip()


def _is_block(node: Any) -> bool:
    return isinstance(node, Element) and node.type in _BLOCK_ELEMENTS


def _convert_children(children: Iterable[Any]) -> list:
    nodes = _convert_nodes(children)
    # whitespace between block elements is layout, not content
    return [
        node
        for i, node in enumerate(nodes)
        if not (
            _is_blank(node)
            and ((i > 0 and _is_block(nodes[i - 1])) or (i + 1 < len(nodes) and _is_block(nodes[i + 1])))
        )
    ]


def _convert_nodes(children: Iterable[Any]) -> list:
    nodes: list = []
    for child in children:
        if isinstance(child, Comment):
            continue
        if isinstance(child, Tag):
            nodes.append(
                Element(
                    type=child.name,
                    attrs={key: _attr_text(value) for key, value in child.attrs.items()},
                    children=_convert_children(child.contents),
                )
            )
        elif isinstance(child, NavigableString):
            text = str(child)
            if text:
                nodes.append(text)
    return nodes


def _attr_text(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return " ".join(str(v) for v in value)
    return str(value)


def render_markup(sequence: Any) -> str:
    """Serialize a content sequence (or a single node) back to HTML."""
    if sequence is None:
        return ""
    if isinstance(sequence, str):
        return html.escape(sequence, quote=False)
    if isinstance(sequence, Element):
        return _render_element(sequence)
    return "".join(render_markup(node) for node in sequence)


def _render_element(node: Element) -> str:
    attrs = "".join(
        f' {key}="{html.escape(str(value), quote=True)}"' for key, value in node.attrs.items()
    )
    if node.type in _VOID_ELEMENTS and not node.children:
        return f"<{node.type}{attrs} />"
    inner = "".join(render_markup(child) for child in node.children)
    return f"<{node.type}{attrs}>{inner}</{node.type}>"
