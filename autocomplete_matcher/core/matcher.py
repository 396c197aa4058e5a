"""Matching strategies for comparing a query against candidate text."""

from typing import Any, Callable, List, Mapping, Optional, Protocol, Tuple, Union

from rapidfuzz import fuzz

from ..config import get_settings
from ..models.config import SearchConfig
from ..models.response import MatchResult
from .normalizer import fold_with_positions

SpanScore = Tuple[List[Tuple[int, int]], float]


class Matcher(Protocol):
    """Strategy deciding whether candidate text matches a query."""

    def match(self, query: str, text: str) -> Any:
        """Return a truthy match payload, or None when there is no match."""
        ...


class DefaultMatcher:
    """Built-in matcher with strict, loose and fuzzy modes."""

    def __init__(
        self,
        mode: str = "strict",
        diacritics: bool = True,
        fuzzy_threshold: float = 0.8
    ) -> None:
        """
        Initialize the matcher.

        Args:
            mode: One of strict (substring), loose (subsequence) or fuzzy
            diacritics: Fold diacritics in candidate text before comparing
            fuzzy_threshold: Minimum similarity (0-1) for fuzzy matches
        """
        self.mode = mode
        self.diacritics = diacritics
        self.fuzzy_threshold = fuzzy_threshold
        self._strategies = {
            "strict": self._strict_match,
            "loose": self._loose_match,
            "fuzzy": self._fuzzy_match,
        }
        if mode not in self._strategies:
            raise ValueError(f"Unknown match mode: {mode}")

    @classmethod
    def from_config(cls, config: SearchConfig) -> "DefaultMatcher":
        """Create a matcher from a search configuration."""
        return cls(
            mode=config.mode,
            diacritics=config.diacritics,
            fuzzy_threshold=config.fuzzy_threshold
        )

    def match(self, query: str, text: str) -> Optional[MatchResult]:
        """
        Match a normalized query against candidate text.

        Args:
            query: Normalized query
            text: Candidate text as stored in the record

        Returns:
            MatchResult with highlight spans over ``text``, or None
        """
        compared, positions = fold_with_positions(text, self.diacritics)
        found = self._strategies[self.mode](query, compared)
        if found is None:
            return None

        spans, score = found
        return MatchResult(
            text=text,
            spans=self._to_original_spans(spans, positions, len(text)),
            score=score,
            mode=self.mode
        )

    @staticmethod
    def _to_original_spans(
        spans: List[Tuple[int, int]],
        positions: List[int],
        length: int
    ) -> List[Tuple[int, int]]:
        """
        Map spans over folded text back onto the original text.

        A span covers whole original characters, including combining marks
        dropped by folding right after it.
        """
        folded_length = len(positions)
        mapped: List[Tuple[int, int]] = []

        for start, end in spans:
            orig_start = positions[start]
            if end == folded_length:
                orig_end = length
            elif positions[end] > positions[end - 1]:
                orig_end = positions[end]
            else:
                # Span ends inside a character that folded into several
                orig_end = positions[end - 1] + 1

            if mapped and orig_start <= mapped[-1][1]:
                mapped[-1] = (mapped[-1][0], max(mapped[-1][1], orig_end))
            else:
                mapped.append((orig_start, orig_end))

        return mapped

    def _strict_match(self, query: str, text: str) -> Optional[SpanScore]:
        """Literal substring containment."""
        start = text.find(query)
        if start == -1:
            return None
        if not query:
            return [], 0.0
        return [(start, start + len(query))], min(1.0, len(query) / len(text))

    def _loose_match(self, query: str, text: str) -> Optional[SpanScore]:
        """Query characters appear in order, spaces in the query ignored."""
        query = query.replace(" ", "")
        spans: List[Tuple[int, int]] = []
        matched = 0

        for position, char in enumerate(text):
            if matched < len(query) and char == query[matched]:
                # Merge adjacent characters into one span
                if spans and spans[-1][1] == position:
                    spans[-1] = (spans[-1][0], position + 1)
                else:
                    spans.append((position, position + 1))
                matched += 1

        if matched != len(query):
            return None
        return spans, min(1.0, matched / len(text)) if text else 0.0

    def _fuzzy_match(self, query: str, text: str) -> Optional[SpanScore]:
        """Approximate substring match scored with rapidfuzz."""
        if not query:
            return None

        alignment = fuzz.partial_ratio_alignment(query, text)
        if alignment is None:
            return None

        score = alignment.score / 100.0
        if score < self.fuzzy_threshold:
            return None

        spans = []
        if alignment.dest_end > alignment.dest_start:
            spans.append((alignment.dest_start, alignment.dest_end))
        return spans, score


class CallableMatcher:
    """Adapts a caller-supplied ``(query, text) -> match`` function."""

    def __init__(self, func: Callable[[str, str], Any]) -> None:
        self.func = func

    def match(self, query: str, text: str) -> Any:
        result = self.func(query, text)
        return result if result else None


def build_matcher(config: SearchConfig) -> Matcher:
    """
    Select the matcher for a configuration.

    A custom ``search_engine`` replaces the default strategy completely.

    Args:
        config: Search configuration

    Returns:
        Matcher instance
    """
    if config.search_engine is not None:
        return CallableMatcher(config.search_engine)
    return DefaultMatcher.from_config(config)


def match(
    query: str,
    text: Any,
    config: Optional[Union[SearchConfig, Mapping[str, Any]]] = None
) -> Any:
    """
    Match a normalized query against one candidate text.

    Args:
        query: Normalized query
        text: Candidate text
        config: SearchConfig or mapping of options; settings defaults when None

    Returns:
        Match payload, or None when the text does not match

    Raises:
        InvalidConfigError: If the configuration is invalid
    """
    if config is None:
        settings = get_settings()
        matcher: Matcher = DefaultMatcher(
            mode=settings.default_mode,
            diacritics=settings.diacritics,
            fuzzy_threshold=settings.fuzzy_threshold
        )
    else:
        matcher = build_matcher(SearchConfig.from_options(config))
    return matcher.match(query, str(text))
