"""Final ordering of scanned match entries."""

from functools import cmp_to_key
from typing import Any, Callable, List, Optional, Sequence

from ..models.response import MatchEntry

Comparator = Callable[[MatchEntry, MatchEntry], Any]
EntryFilter = Callable[[List[MatchEntry]], Sequence[MatchEntry]]


def assemble(
    entries: Sequence[MatchEntry],
    sort: Optional[Comparator] = None,
    filter: Optional[EntryFilter] = None
) -> List[MatchEntry]:
    """
    Filter and order match entries into the result list.

    Sorting is stable, so entries comparing equal keep their scan order.
    Nothing is truncated here.

    Args:
        entries: Entries in scan order
        sort: Comparator returning a negative, zero or positive number
        filter: Receives the entry list and returns the entries to keep

    Returns:
        New result list
    """
    results = list(entries)

    if filter is not None:
        results = list(filter(results))

    if sort is not None:
        results = sorted(results, key=cmp_to_key(sort))

    return results


def by_score(a: MatchEntry, b: MatchEntry) -> int:
    """Comparator ranking higher default-matcher scores first."""
    score_a = getattr(a.match, "score", 0.0)
    score_b = getattr(b.match, "score", 0.0)
    return (score_b > score_a) - (score_b < score_a)
