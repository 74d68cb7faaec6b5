"""Block attribute helpers: passthrough copies and quote attribute rules."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from .nodes import has_content


QUOTE_STYLES = (1, 2)


def copy_except(attributes: Optional[Mapping[str, Any]], *names: str) -> dict:
    """Shallow copy of ``attributes`` without the given keys."""
    if not attributes:
        return {}
    return {key: value for key, value in attributes.items() if key not in names}


def sequence_copy(sequence: Any) -> Any:
    """New list with the same nodes; absent and bare values pass through."""
    if isinstance(sequence, (list, tuple)):
        return list(sequence)
    return sequence


def normalize_citation(citation: Any) -> Optional[list]:
    """Empty citations collapse to ``None``."""
    if not has_content(citation):
        return None
    return sequence_copy(citation)


def normalize_style(style: Any) -> int:
    """Coerce a stored quote style (``1``, ``"2"``, ...) to an int in QUOTE_STYLES.

    Raises:
        ValueError: the value is not a known style
    """
    if isinstance(style, bool):
        raise ValueError(f"invalid quote style: {style!r}")
    try:
        number = int(str(style).strip())
    except (TypeError, ValueError):
        raise ValueError(f"invalid quote style: {style!r}") from None
    if number not in QUOTE_STYLES:
        raise ValueError(f"invalid quote style: {style!r}")
    return number
