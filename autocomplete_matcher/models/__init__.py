"""Data models for the autocomplete matcher."""

from .config import DataSource, QueryConfig, SearchConfig, TriggerConfig
from .response import MatchEntry, MatchResult, SearchResponse

__all__ = [
    "DataSource",
    "QueryConfig",
    "SearchConfig",
    "TriggerConfig",
    "MatchEntry",
    "MatchResult",
    "SearchResponse",
]
