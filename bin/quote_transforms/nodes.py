"""Content node model shared by every block transform."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional


PARAGRAPH_TYPE = "p"
LINE_BREAK_TYPE = "br"
CITATION_BREAK_CLASS = "citation-break"


@dataclass
class Element:
    """Markup node: a tag, its attributes and ordered child nodes."""

    type: str
    attrs: dict = field(default_factory=dict)
    children: list = field(default_factory=list)


def element(tag: str, *children: Any, attrs: Optional[dict] = None) -> Element:
    return Element(type=tag, attrs=dict(attrs or {}), children=list(children))


def paragraph(*children: Any) -> Element:
    return element(PARAGRAPH_TYPE, *children)


def citation_break() -> Element:
    """Return a fresh citation-break marker node."""
    return Element(type=LINE_BREAK_TYPE, attrs={"class": CITATION_BREAK_CLASS})


def is_paragraph(node: Any) -> bool:
    return isinstance(node, Element) and node.type == PARAGRAPH_TYPE


def is_citation_break(node: Any) -> bool:
    return (
        isinstance(node, Element)
        and node.type == LINE_BREAK_TYPE
        and node.attrs.get("class") == CITATION_BREAK_CLASS
    )


def has_content(sequence: Any) -> bool:
    """True unless the sequence is absent or empty."""
    if sequence is None:
        return False
    if isinstance(sequence, (list, tuple, str)):
        return len(sequence) > 0
    return True


def flatten_deep(sequence: Optional[Iterable[Any]]) -> list:
    """Expand nested lists into one flat list, keeping node order.

    Elements are leaves here: their children are left untouched.
    """
    flat: list = []
    if sequence is None:
        return flat

    stack = [iter(sequence)]
    while stack:
        try:
            item = next(stack[-1])
        except StopIteration:
            stack.pop()
            continue
        if isinstance(item, (list, tuple)):
            stack.append(iter(item))
        else:
            flat.append(item)
    return flat


def find_citation_break(flat: list) -> int:
    """Index of the first citation-break marker, or -1."""
    for i, node in enumerate(flat):
        if is_citation_break(node):
            return i
    return -1


# ---------------------------------------------------------------------------
# Plain tree interchange
# ---------------------------------------------------------------------------


def to_tree(content: Any) -> Any:
    """Convert nodes to plain strings, lists and dicts."""
    if content is None or isinstance(content, str):
        return content
    if isinstance(content, (list, tuple)):
        return [to_tree(item) for item in content]
    if isinstance(content, Element):
        data: dict = {"type": content.type}
        if content.attrs:
            data["attrs"] = dict(content.attrs)
        data["children"] = [to_tree(child) for child in content.children]
        return data
    raise ValueError(f"unsupported content node: {content!r}")


def from_tree(data: Any) -> Any:
    """Build nodes from the plain representation produced by :func:`to_tree`."""
    if data is None or isinstance(data, str):
        return data
    if isinstance(data, list):
        return [from_tree(item) for item in data]
    if isinstance(data, dict):
        node_type = data.get("type")
        if not isinstance(node_type, str) or not node_type:
            raise ValueError(f"content node without type: {data!r}")
        attrs = data.get("attrs") or {}
        if not isinstance(attrs, dict):
            raise ValueError(f"attrs must be a mapping: {attrs!r}")
        children = data.get("children") or []
        if not isinstance(children, list):
            raise ValueError(f"children must be a list: {children!r}")
        for key, value in attrs.items():
            if value is None or not isinstance(value, (str, int, float)):
                raise ValueError(f"attribute {key!r} must be a scalar: {value!r}")
        return Element(
            type=node_type,
            attrs={str(k): str(v) for k, v in attrs.items()},
            children=[from_tree(child) for child in children],
        )
    raise ValueError(f"unsupported content data: {data!r}")
