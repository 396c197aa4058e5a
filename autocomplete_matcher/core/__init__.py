"""Core matching pipeline."""

from .assembler import assemble, by_score
from .engine import SearchEngine, search
from .exceptions import ErrorType, InvalidConfigError, MatcherError
from .matcher import CallableMatcher, DefaultMatcher, Matcher, build_matcher, match
from .normalizer import QueryNormalizer, fold_input, normalize, strip_diacritics
from .scanner import resolve_field, scan, search_record
from .trigger import should_trigger

__all__ = [
    "SearchEngine",
    "search",
    "assemble",
    "by_score",
    "ErrorType",
    "InvalidConfigError",
    "MatcherError",
    "Matcher",
    "DefaultMatcher",
    "CallableMatcher",
    "build_matcher",
    "match",
    "QueryNormalizer",
    "fold_input",
    "normalize",
    "strip_diacritics",
    "resolve_field",
    "scan",
    "search_record",
    "should_trigger",
]
