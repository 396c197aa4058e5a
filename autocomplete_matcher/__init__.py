"""
Autocomplete Matcher - in-memory text matching for autocomplete inputs.

Normalizes a typed query, scans a caller-owned record store field by field,
and returns the matching records with highlight spans in a deterministic
order.
"""

import logging

__version__ = "1.0.0"

# Silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

from .core.engine import SearchEngine, search
from .core.exceptions import InvalidConfigError, MatcherError
from .core.matcher import match
from .core.normalizer import fold_input, normalize
from .core.trigger import should_trigger
from .models.config import SearchConfig
from .models.response import MatchEntry, MatchResult, SearchResponse

__all__ = [
    "SearchEngine",
    "search",
    "match",
    "normalize",
    "fold_input",
    "should_trigger",
    "SearchConfig",
    "MatchEntry",
    "MatchResult",
    "SearchResponse",
    "InvalidConfigError",
    "MatcherError",
]
