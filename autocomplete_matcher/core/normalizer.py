"""Query normalization utilities for consistent matching."""

import re
import unicodedata
from typing import Callable, List, Optional, Tuple

# Unicode "Combining Diacritical Marks" block
COMBINING_MARKS = re.compile(r'[\u0300-\u036f]')

Manipulate = Callable[[str], str]


def fold_input(raw: str) -> str:
    """
    Case-fold raw input text coming from an input source.

    Args:
        raw: Raw text as typed by the user

    Returns:
        Lowercased text
    """
    if not raw:
        return ""
    return raw.lower()


def strip_diacritics(text: str) -> str:
    """
    Remove combining diacritical marks from text.

    Args:
        text: Input text

    Returns:
        Text in NFC form without combining marks
    """
    if not text:
        return ""

    decomposed = unicodedata.normalize('NFD', text)
    stripped = COMBINING_MARKS.sub('', decomposed)
    return unicodedata.normalize('NFC', stripped)


def fold_with_positions(text: str, diacritics: bool = True) -> Tuple[str, List[int]]:
    """
    Fold candidate text one character at a time, tracking where each folded
    character came from.

    Args:
        text: Candidate text from a record
        diacritics: Also strip diacritical marks; otherwise only lowercase

    Returns:
        Tuple of (folded text, index into ``text`` for every folded character)
    """
    pieces = []
    positions: List[int] = []

    for index, char in enumerate(text):
        piece = char.lower()
        if diacritics:
            piece = strip_diacritics(piece)
        pieces.append(piece)
        positions.extend([index] * len(piece))

    return "".join(pieces), positions


def normalize(raw: str, manipulate: Optional[Manipulate] = None) -> str:
    """
    Normalize a query value for matching.

    Input is expected to be case-folded already (see ``fold_input``).
    A ``manipulate`` transform replaces the default diacritic folding
    entirely and its output is returned as is.

    Args:
        raw: Query text
        manipulate: Optional caller-supplied transform

    Returns:
        Normalized query
    """
    if manipulate is not None:
        return manipulate(raw)
    return strip_diacritics(raw)


class QueryNormalizer:
    """Folds and normalizes raw input according to a query configuration."""

    def __init__(self, manipulate: Optional[Manipulate] = None) -> None:
        """
        Initialize the normalizer.

        Args:
            manipulate: Optional transform overriding diacritic folding
        """
        self.manipulate = manipulate

    def prepare(self, raw: str) -> str:
        """Fold case, then normalize."""
        return normalize(fold_input(raw), self.manipulate)

    @staticmethod
    def normalize_candidate(text: str, diacritics: bool = True) -> str:
        """
        Bring candidate text to the same form as a default-normalized query.

        Args:
            text: Candidate text from a record
            diacritics: Also strip diacritical marks; otherwise only lowercase

        Returns:
            Comparable candidate text
        """
        return fold_with_positions(text, diacritics)[0]
