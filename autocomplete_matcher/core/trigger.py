"""Trigger policy deciding whether a query is worth searching."""

from ..models.config import SearchConfig


def should_trigger(config: SearchConfig, query: str) -> bool:
    """
    Decide whether a normalized query should run a search.

    A configured ``trigger.condition`` decides alone. Otherwise the query
    must reach ``threshold`` characters and contain a non-space character.

    Args:
        config: Search configuration
        query: Normalized query

    Returns:
        True if the search should run
    """
    if config.trigger.condition is not None:
        return bool(config.trigger.condition(query))
    return len(query) >= config.threshold and bool(query.replace(" ", ""))
