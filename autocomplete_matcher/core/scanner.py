"""Linear scan of a record store against a normalized query.

The store is read in order and never mutated; callers must not modify it
while a scan is running.
"""

from collections.abc import Mapping
from typing import Any, List, Optional, Sequence

from ..models.response import MatchEntry
from .matcher import Matcher

# Scalar records have no named fields, only builtin attributes
SCALAR_TYPES = (str, bytes, int, float, complex)


def resolve_field(record: Any, key: Optional[str]) -> Optional[str]:
    """
    Get the searchable text of a record field.

    Mappings are read by key, other objects by attribute. Scalars have no
    fields, and methods are never treated as field values.

    Args:
        record: Record from the store
        key: Field name; None selects the whole record

    Returns:
        Field value as a string, or None if missing or empty
    """
    if key is None:
        value = record
    elif isinstance(record, Mapping):
        value = record.get(key)
    elif isinstance(record, SCALAR_TYPES):
        return None
    else:
        value = getattr(record, key, None)
        if callable(value):
            return None

    if value is None:
        return None

    text = str(value)
    return text or None


def search_record(
    record: Any,
    index: int,
    key: Optional[str],
    query: str,
    matcher: Matcher
) -> Optional[MatchEntry]:
    """
    Match one field of one record.

    Args:
        record: Record from the store
        index: Position of the record in the store
        key: Field to search, None for the whole record
        query: Normalized query
        matcher: Matching strategy

    Returns:
        MatchEntry on a match, None otherwise
    """
    text = resolve_field(record, key)
    if text is None:
        return None

    result = matcher.match(query, text)
    if not result:
        return None

    return MatchEntry(index=index, key=key, match=result, value=record)


def scan(
    store: Sequence[Any],
    keys: Optional[Sequence[str]],
    query: str,
    matcher: Matcher
) -> List[MatchEntry]:
    """
    Collect matches for every record and configured key, in store order.

    Args:
        store: Records to search
        keys: Fields to search per record, None for whole records
        query: Normalized query
        matcher: Matching strategy

    Returns:
        Match entries in scan order
    """
    fields = list(keys) if keys is not None else [None]
    entries = []

    for index, record in enumerate(store):
        for key in fields:
            entry = search_record(record, index, key, query, matcher)
            if entry is not None:
                entries.append(entry)

    return entries
