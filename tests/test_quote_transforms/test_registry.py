import pytest

from quote_transforms.exceptions import TransformNotFoundError
from quote_transforms.nodes import citation_break, paragraph
from quote_transforms.registry import (
    QUOTE_TRANSFORMS,
    Block,
    TransformRegistry,
    TransformRule,
    create_block,
    default_registry,
)
from quote_transforms.transforms import (
    HEADING_BLOCK,
    QUOTE_BLOCK,
    TEXT_BLOCK,
    NewBlock,
    TransformResult,
    quote_to_heading,
    text_to_quote,
)


def test_table_has_one_rule_per_direction():
    pairs = [(rule.source, rule.target) for rule in QUOTE_TRANSFORMS]
    assert pairs == [
        (TEXT_BLOCK, QUOTE_BLOCK),
        (HEADING_BLOCK, QUOTE_BLOCK),
        (QUOTE_BLOCK, TEXT_BLOCK),
        (QUOTE_BLOCK, HEADING_BLOCK),
    ]


def test_find_returns_registered_rule():
    registry = default_registry()
    rule = registry.find(TEXT_BLOCK, QUOTE_BLOCK)
    assert rule is not None
    assert rule.transform is text_to_quote
    assert registry.find(TEXT_BLOCK, HEADING_BLOCK) is None


def test_targets_for_lists_in_registration_order():
    registry = default_registry()
    assert registry.targets_for(QUOTE_BLOCK) == [TEXT_BLOCK, HEADING_BLOCK]
    assert registry.targets_for("core/image") == []


def test_transform_unregistered_pair_raises():
    registry = default_registry()
    with pytest.raises(TransformNotFoundError) as excinfo:
        registry.transform(Block(name=TEXT_BLOCK, attributes={"content": ["a"]}), HEADING_BLOCK)
    assert excinfo.value.source == TEXT_BLOCK
    assert excinfo.value.target == HEADING_BLOCK
    assert isinstance(excinfo.value, LookupError)


def test_transform_builds_blocks():
    registry = default_registry()
    blocks = registry.transform(
        Block(name=TEXT_BLOCK, attributes={"content": ["a", citation_break(), "b"], "align": "left"}),
        QUOTE_BLOCK,
    )
    assert blocks == [
        Block(name=QUOTE_BLOCK, attributes={"value": ["a"], "citation": ["b"], "align": "left"}),
    ]


def test_transform_returns_pair_for_split_quote():
    registry = default_registry()
    blocks = registry.transform(
        Block(name=QUOTE_BLOCK, attributes={"value": [paragraph("x")], "citation": ["y"]}),
        HEADING_BLOCK,
    )
    assert [block.name for block in blocks] == [HEADING_BLOCK, QUOTE_BLOCK]
    assert blocks[1].attributes == {"value": [], "citation": ["y"]}


def test_create_block_fills_quote_defaults():
    assert create_block(QUOTE_BLOCK).attributes == {"value": []}
    assert create_block(QUOTE_BLOCK, {"citation": ["a"]}).attributes == {
        "value": [],
        "citation": ["a"],
    }
    assert create_block(QUOTE_BLOCK, {"value": None}).attributes == {"value": None}
    assert create_block(TEXT_BLOCK, {"content": ["a"]}).attributes == {"content": ["a"]}


def test_create_block_defaults_are_not_shared():
    first = create_block(QUOTE_BLOCK)
    first.attributes["value"].append("x")
    assert create_block(QUOTE_BLOCK).attributes == {"value": []}


def test_register_replaces_existing_rule():
    def _absorb(attributes):
        return TransformResult(blocks=[NewBlock(name=HEADING_BLOCK, attributes={"content": []})])

    registry = TransformRegistry([TransformRule(QUOTE_BLOCK, HEADING_BLOCK, quote_to_heading)])
    registry.register(TransformRule(QUOTE_BLOCK, HEADING_BLOCK, _absorb))
    assert len(registry.rules()) == 1
    blocks = registry.transform(Block(name=QUOTE_BLOCK, attributes={"value": ["a"]}), HEADING_BLOCK)
    assert blocks == [Block(name=HEADING_BLOCK, attributes={"content": []})]
