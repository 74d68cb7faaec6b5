"""YAML block files: load one block, dump the blocks a transform produced.

File layout:

    name: core/text
    attributes:
      content: 'Quoted text<br class="citation-break">Author'
      align: center

Content fields (content, value, citation) are either an HTML string or a
plain tree (see nodes.to_tree).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable

import yaml

from .attributes import normalize_style
from .nodes import from_tree, to_tree
from .markup import parse_markup, render_markup
from .registry import Block, create_block
from .transforms import QUOTE_BLOCK

CONTENT_FIELDS = ("content", "value", "citation")


def load_block(path: Path) -> Block:
    """Read a block file.

    Raises:
        FileNotFoundError: the file does not exist
        ValueError: the file is not a valid block description
    """
    if not path.exists():
        raise FileNotFoundError(f"block file not found: {path}")
    try:
        data: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"invalid YAML in {path}: {e}") from e
    return block_from_dict(data)


def block_from_dict(data: Any) -> Block:
    if not isinstance(data, dict):
        raise ValueError("invalid block payload")
    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ValueError("block name is required")
    attributes = data.get("attributes") or {}
    if not isinstance(attributes, dict):
        raise ValueError(f"attributes of {name} must be a mapping")

    decoded = {}
    for key, value in attributes.items():
        if key in CONTENT_FIELDS:
            decoded[key] = _decode_content(value)
        else:
            decoded[key] = value
    if name == QUOTE_BLOCK and "style" in decoded:
        decoded["style"] = normalize_style(decoded["style"])
    return create_block(name.strip(), decoded)


def _decode_content(value: Any) -> Any:
    if isinstance(value, str):
        return parse_markup(value)
    return from_tree(value)


def block_to_dict(block: Block, output_format: str = "tree") -> dict:
    encode = render_markup if output_format == "html" else to_tree
    attributes = {}
    for key, value in block.attributes.items():
        if key in CONTENT_FIELDS and value is not None:
            attributes[key] = encode(value)
        else:
            attributes[key] = value
    return {"name": block.name, "attributes": attributes}


def dump_blocks(blocks: Iterable[Block], output_format: str = "tree") -> str:
    data = [block_to_dict(block, output_format) for block in blocks]
    return yaml.dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)


def write_blocks(path: Path, blocks: Iterable[Block], output_format: str = "tree") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_blocks(blocks, output_format), encoding="utf-8")
