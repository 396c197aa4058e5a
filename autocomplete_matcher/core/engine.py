"""Main search engine implementation."""

import time
from typing import Any, Dict, List, Mapping, Union

from ..logging_config import get_logger
from ..models.config import SearchConfig
from ..models.response import MatchEntry, SearchResponse
from .assembler import assemble
from .matcher import build_matcher
from .normalizer import QueryNormalizer
from .scanner import scan
from .trigger import should_trigger

logger = get_logger(__name__)

ConfigLike = Union[SearchConfig, Mapping[str, Any]]


def search(config: ConfigLike, raw_query: str) -> List[MatchEntry]:
    """
    Search the configured store for a raw query.

    The query is case-folded and normalized, every record and key is
    matched in store order, then the configured filter and sort are
    applied. Errors from custom matchers, filters or comparators propagate.

    Args:
        config: SearchConfig or a mapping of options
        raw_query: Query text as typed

    Returns:
        Ordered list of match entries

    Raises:
        InvalidConfigError: If the configuration is invalid
    """
    config = SearchConfig.from_options(config)
    query = QueryNormalizer(config.query.manipulate).prepare(raw_query)
    return _list_matches(config, query)


def _list_matches(config: SearchConfig, query: str) -> List[MatchEntry]:
    entries = scan(config.data.store, config.data.key, query, build_matcher(config))
    return assemble(entries, sort=config.sort, filter=config.data.filter)


class SearchEngine:
    """Search engine bound to one configuration."""

    def __init__(self, config: ConfigLike) -> None:
        """
        Initialize the search engine.

        Args:
            config: SearchConfig or a mapping of options

        Raises:
            InvalidConfigError: If the configuration is invalid
        """
        self.config = SearchConfig.from_options(config)
        self.normalizer = QueryNormalizer(self.config.query.manipulate)

        # Performance tracking
        self._stats = self._empty_stats()

    def search(self, raw_query: str) -> SearchResponse:
        """
        Run the full pipeline for a raw query.

        Queries rejected by the trigger policy return an empty response
        without scanning the store.

        Args:
            raw_query: Query text as typed

        Returns:
            SearchResponse with results and metadata
        """
        start_time = time.perf_counter()
        query = self.normalizer.prepare(raw_query or "")

        self._stats["total_queries"] += 1

        if not should_trigger(self.config, query):
            self._stats["skipped_queries"] += 1
            logger.debug("Search not triggered", query=query)
            return self._create_response(query, [], False, start_time)

        results = _list_matches(self.config, query)

        if results:
            self._stats["matched_queries"] += 1
        else:
            self._stats["no_matches"] += 1

        response = self._create_response(query, results, True, start_time)
        logger.debug(
            "Search completed",
            query=query,
            total_results=response.total_results,
            execution_time_ms=round(response.execution_time_ms, 3)
        )
        return response

    def _create_response(
        self,
        query: str,
        results: List[MatchEntry],
        triggered: bool,
        start_time: float
    ) -> SearchResponse:
        execution_time = (time.perf_counter() - start_time) * 1000
        self._stats["total_execution_time"] += execution_time

        return SearchResponse(
            query=query,
            triggered=triggered,
            total_results=len(results),
            results=results,
            execution_time_ms=execution_time
        )

    def get_stats(self) -> Dict[str, Any]:
        """Get engine statistics."""
        stats = self._stats.copy()

        total = stats["total_queries"]
        if total > 0:
            stats["average_execution_time_ms"] = stats["total_execution_time"] / total
            stats["match_rate"] = stats["matched_queries"] / total
            stats["no_match_rate"] = stats["no_matches"] / total
            stats["skip_rate"] = stats["skipped_queries"] / total
        else:
            stats["average_execution_time_ms"] = 0.0
            stats["match_rate"] = 0.0
            stats["no_match_rate"] = 0.0
            stats["skip_rate"] = 0.0

        stats["store_size"] = len(self.config.data.store)
        return stats

    def reset_stats(self) -> None:
        """Reset statistics."""
        self._stats = self._empty_stats()

    @staticmethod
    def _empty_stats() -> Dict[str, Any]:
        return {
            "total_queries": 0,
            "matched_queries": 0,
            "no_matches": 0,
            "skipped_queries": 0,
            "total_execution_time": 0.0,
        }
