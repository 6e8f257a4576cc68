"""Shared list renderers for judge prompts."""

NONE_PLACEHOLDER = "(none)"


def numbered(items: list[str]) -> str:
    """Render items as a 1-based numbered list, or "(none)" when empty."""
    if not items:
        return NONE_PLACEHOLDER
    return "\n".join(f"{i}. {item}" for i, item in enumerate(items, start=1))


def nodes(passages: list[str]) -> str:
    """Render retrieval passages as "Node i: ..." lines in retrieval order."""
    return "\n".join(f"Node {i}: {passage}" for i, passage in enumerate(passages, start=1))


def score_text(score: float) -> str:
    return f"{score:.2f}"
