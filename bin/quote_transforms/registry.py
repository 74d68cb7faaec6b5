"""Declarative transform table and the dispatcher that applies it."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, Callable, Iterable, Mapping, Optional

from .exceptions import TransformNotFoundError
from .transforms import (
    HEADING_BLOCK,
    QUOTE_BLOCK,
    TEXT_BLOCK,
    TransformResult,
    heading_to_quote,
    quote_to_heading,
    quote_to_text,
    text_to_quote,
)

logger = logging.getLogger(__name__)

TransformFn = Callable[[Optional[Mapping[str, Any]]], TransformResult]

BLOCK_DEFAULT_ATTRIBUTES: dict[str, dict] = {
    QUOTE_BLOCK: {"value": []},
}


@dataclass
class Block:
    name: str
    attributes: dict = field(default_factory=dict)


@dataclass(frozen=True)
class TransformRule:
    source: str
    target: str
    transform: TransformFn


QUOTE_TRANSFORMS: tuple[TransformRule, ...] = (
    TransformRule(source=TEXT_BLOCK, target=QUOTE_BLOCK, transform=text_to_quote),
    TransformRule(source=HEADING_BLOCK, target=QUOTE_BLOCK, transform=heading_to_quote),
    TransformRule(source=QUOTE_BLOCK, target=TEXT_BLOCK, transform=quote_to_text),
    TransformRule(source=QUOTE_BLOCK, target=HEADING_BLOCK, transform=quote_to_heading),
)


def create_block(name: str, attributes: Optional[Mapping[str, Any]] = None) -> Block:
    """Build a block, filling missing attributes from the block defaults."""
    merged = {
        key: _copy_default(value)
        for key, value in BLOCK_DEFAULT_ATTRIBUTES.get(name, {}).items()
    }
    merged.update(attributes or {})
    return Block(name=name, attributes=merged)


def _copy_default(value: Any) -> Any:
    if isinstance(value, list):
        return list(value)
    if isinstance(value, dict):
        return dict(value)
    return value


class TransformRegistry:
    """Lookup table keyed by (source, target) block names."""

    def __init__(self, rules: Optional[Iterable[TransformRule]] = None) -> None:
        self._rules: dict[tuple[str, str], TransformRule] = {}
        for rule in rules or ():
            self.register(rule)

    def register(self, rule: TransformRule) -> None:
        key = (rule.source, rule.target)
        if key in self._rules:
            logger.info("replacing transform %s -> %s", rule.source, rule.target)
        self._rules[key] = rule

    def find(self, source: str, target: str) -> Optional[TransformRule]:
        return self._rules.get((source, target))

    def targets_for(self, source: str) -> list[str]:
        return [target for (src, target) in self._rules if src == source]

    def rules(self) -> list[TransformRule]:
        return list(self._rules.values())

    def transform(self, block: Block, target: str) -> list[Block]:
        """Apply the rule for ``block.name -> target`` and build the new blocks.

        Raises:
            TransformNotFoundError: no rule for the pair
        """
        rule = self.find(block.name, target)
        if rule is None:
            raise TransformNotFoundError(block.name, target)

        result = rule.transform(block.attributes)
        blocks = [create_block(new.name, new.attributes) for new in result]
        logger.debug(
            "%s -> %s produced %s", block.name, target, ", ".join(b.name for b in blocks)
        )
        return blocks


def default_registry() -> TransformRegistry:
    return TransformRegistry(QUOTE_TRANSFORMS)
