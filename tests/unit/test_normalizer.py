"""Unit tests for query normalization."""

import pytest
from autocomplete_matcher.core.normalizer import (
    QueryNormalizer,
    fold_input,
    normalize,
    strip_diacritics,
)


class TestNormalize:
    """Test cases for the normalize function."""

    @pytest.mark.parametrize("raw", [
        "café", "naïve", "ångström", "crème brûlée", "plain", "", "  spaced  ", "ǅemal",
    ])
    def test_idempotent(self, raw):
        """Normalizing twice gives the same result as once."""
        assert normalize(normalize(raw)) == normalize(raw)

    def test_diacritic_equivalence(self):
        """Accented and unaccented queries normalize identically."""
        assert normalize("café") == normalize("cafe")
        assert normalize("naïve") == "naive"

    def test_decomposed_input(self):
        """Input already in decomposed form is folded too."""
        assert normalize("cafe\u0301") == "cafe"

    def test_does_not_fold_case(self):
        """Case folding is a separate step."""
        assert normalize("Café") == "Cafe"

    def test_manipulate_overrides_default(self):
        """A manipulate transform replaces diacritic folding completely."""
        assert normalize("café", lambda s: s.upper()) == "CAFÉ"

    def test_manipulate_output_returned_verbatim(self):
        """Whatever the transform returns is trusted."""
        assert normalize("anything", lambda s: "") == ""

    def test_empty(self):
        """Empty input stays empty."""
        assert normalize("") == ""
        assert strip_diacritics("") == ""


class TestFoldInput:
    """Test cases for case folding of raw input."""

    def test_lowercases(self):
        """Raw input is lowercased."""
        assert fold_input("BaNaNa") == "banana"
        assert fold_input("ÀB") == "àb"

    def test_empty(self):
        """Empty input stays empty."""
        assert fold_input("") == ""


class TestQueryNormalizer:
    """Test cases for the QueryNormalizer class."""

    def test_prepare_folds_then_normalizes(self):
        """Prepare applies case folding before normalization."""
        normalizer = QueryNormalizer()
        assert normalizer.prepare("CAFÉ") == "cafe"

    def test_prepare_with_manipulate(self):
        """The manipulate transform receives folded input."""
        seen = []

        def manipulate(value):
            seen.append(value)
            return value.replace("-", "")

        normalizer = QueryNormalizer(manipulate)
        assert normalizer.prepare("Ré-Do") == "rédo"
        assert seen == ["ré-do"]

    def test_normalize_candidate(self):
        """Candidate text is lowercased and optionally stripped of accents."""
        assert QueryNormalizer.normalize_candidate("Crème") == "creme"
        assert QueryNormalizer.normalize_candidate("Crème", diacritics=False) == "crème"
