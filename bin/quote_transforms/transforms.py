"""Transform rules between text, heading and quote blocks.

Every rule takes one block's attribute dict and returns a TransformResult
holding one or more new blocks. Rules never mutate their input and never
raise: absent or malformed fields fall back to empty defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, Iterator, Mapping, Optional

from .attributes import copy_except, normalize_citation, sequence_copy
from .nodes import (
    citation_break,
    find_citation_break,
    flatten_deep,
    has_content,
    is_paragraph,
)

logger = logging.getLogger(__name__)

TEXT_BLOCK = "core/text"
HEADING_BLOCK = "core/heading"
QUOTE_BLOCK = "core/quote"


@dataclass
class NewBlock:
    """Block name plus the raw attributes a rule produced for it."""

    name: str
    attributes: dict = field(default_factory=dict)


@dataclass
class TransformResult:
    """Ordered output of one rule; may hold one block or several."""

    blocks: list[NewBlock] = field(default_factory=list)

    def __iter__(self) -> Iterator[NewBlock]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    @property
    def names(self) -> list[str]:
        return [block.name for block in self.blocks]


def _single(name: str, attributes: dict) -> TransformResult:
    return TransformResult(blocks=[NewBlock(name=name, attributes=attributes)])


def text_to_quote(attributes: Optional[Mapping[str, Any]]) -> TransformResult:
    """Split text content into quote body and citation at the first citation break."""
    attributes = attributes or {}
    content = attributes.get("content")
    value = None
    citation = None

    if has_content(content):
        flat = flatten_deep(content if isinstance(content, (list, tuple)) else [content])
        position = find_citation_break(flat)
        if position != -1:
            logger.debug("citation break at %d of %d nodes", position, len(flat))
            value = flat[:position]
            citation = normalize_citation(flat[position + 1:])
        else:
            value = flat

    quote = copy_except(attributes, "content", "value", "citation")
    quote["value"] = value
    quote["citation"] = citation
    return _single(QUOTE_BLOCK, quote)


def quote_to_text(attributes: Optional[Mapping[str, Any]]) -> TransformResult:
    """Join quote body and citation into text content.

    A quote without a body degrades to its citation alone.
    """
    attributes = attributes or {}
    value = attributes.get("value")
    citation = attributes.get("citation")

    if not has_content(value):
        return _single(TEXT_BLOCK, {"content": sequence_copy(citation)})

    content = list(value) if isinstance(value, (list, tuple)) else [value]
    if has_content(citation):
        content.append(citation_break())
        content.extend(citation if isinstance(citation, (list, tuple)) else [citation])

    text = copy_except(attributes, "value", "citation", "content")
    text["content"] = content
    return _single(TEXT_BLOCK, text)


def heading_to_quote(attributes: Optional[Mapping[str, Any]]) -> TransformResult:
    attributes = attributes or {}
    return _single(QUOTE_BLOCK, {"value": sequence_copy(attributes.get("content"))})


def quote_to_heading(attributes: Optional[Mapping[str, Any]]) -> TransformResult:
    """Promote the quote's first paragraph to a heading.

    The quote survives as a second block when it has more paragraphs or a
    citation; otherwise the heading replaces it.
    """
    attributes = attributes or {}
    value = attributes.get("value")
    citation = attributes.get("citation")

    is_sequence = isinstance(value, (list, tuple))
    starts_with_paragraph = is_sequence and len(value) > 0 and is_paragraph(value[0])
    heading_element = value[0] if starts_with_paragraph else value
    if is_paragraph(heading_element):
        heading_content = list(heading_element.children)
    else:
        heading_content = sequence_copy(heading_element)

    heading = NewBlock(name=HEADING_BLOCK, attributes={"content": heading_content})
    is_multi_paragraph = starts_with_paragraph and len(value) > 1

    if not (is_multi_paragraph or has_content(citation)):
        return TransformResult(blocks=[heading])

    quote = copy_except(attributes, "value", "citation")
    quote["citation"] = normalize_citation(citation)
    quote["value"] = list(value[1:]) if is_sequence else []
    logger.debug("quote split into heading and %d remaining nodes", len(quote["value"]))
    return TransformResult(blocks=[heading, NewBlock(name=QUOTE_BLOCK, attributes=quote)])
