"""Content transforms between text, heading and quote blocks."""

from .document import dump_blocks, load_block, write_blocks
from .exceptions import TransformNotFoundError
from .markup import parse_markup, render_markup
from .nodes import Element, citation_break, flatten_deep, from_tree, paragraph, to_tree
from .registry import (
    QUOTE_TRANSFORMS,
    Block,
    TransformRegistry,
    TransformRule,
    create_block,
    default_registry,
)
from .transforms import (
    HEADING_BLOCK,
    QUOTE_BLOCK,
    TEXT_BLOCK,
    NewBlock,
    TransformResult,
    heading_to_quote,
    quote_to_heading,
    quote_to_text,
    text_to_quote,
)

__all__ = [
    "Block",
    "Element",
    "HEADING_BLOCK",
    "NewBlock",
    "QUOTE_BLOCK",
    "QUOTE_TRANSFORMS",
    "TEXT_BLOCK",
    "TransformNotFoundError",
    "TransformRegistry",
    "TransformResult",
    "TransformRule",
    "citation_break",
    "create_block",
    "default_registry",
    "dump_blocks",
    "flatten_deep",
    "from_tree",
    "heading_to_quote",
    "load_block",
    "paragraph",
    "parse_markup",
    "quote_to_heading",
    "quote_to_text",
    "render_markup",
    "text_to_quote",
    "to_tree",
    "write_blocks",
]
