"""Unit tests for the character catalog, anti-pattern set and shared checks."""

import pytest

from keysmith.domain.services.charset import (
    DEFAULT_ANTI_PATTERNS,
    DEFAULT_CATALOG,
    CharacterCatalog,
)
from keysmith.domain.services.password_checks import (
    alphabet_entropy,
    check_complexity,
    has_keyboard_sequence,
    has_repeating_chars,
    matches_weak_pattern,
)


class TestCharacterCatalog:
    """Tests for CharacterCatalog."""

    def test_classes_are_disjoint(self):
        """No character belongs to two classes."""
        classes = list(DEFAULT_CATALOG.classes().values())
        for i, first in enumerate(classes):
            for second in classes[i + 1 :]:
                assert not set(first) & set(second)

    def test_confusable_glyphs_excluded(self):
        """Look-alike characters never appear in the alphabet."""
        for glyph in "IlO0o1":
            assert glyph not in DEFAULT_CATALOG.alphabet

    def test_alphabet_is_union(self):
        """The alphabet is the union of the four classes."""
        assert len(DEFAULT_CATALOG.alphabet) == 24 + 24 + 8 + 13
        assert set(DEFAULT_CATALOG.alphabet) == set().union(
            *map(set, DEFAULT_CATALOG.classes().values())
        )

    def test_working_alphabet(self):
        """Optional classes are added only when enabled."""
        letters = DEFAULT_CATALOG.uppercase + DEFAULT_CATALOG.lowercase
        assert DEFAULT_CATALOG.working_alphabet(False, False) == letters
        assert DEFAULT_CATALOG.working_alphabet(True, False) == letters + DEFAULT_CATALOG.digits
        assert DEFAULT_CATALOG.working_alphabet(True, True) == DEFAULT_CATALOG.alphabet

    def test_overlapping_classes_rejected(self):
        """A catalog with shared characters cannot be built."""
        with pytest.raises(ValueError, match="overlaps"):
            CharacterCatalog(digits="23A")

    def test_empty_class_rejected(self):
        """Every class needs at least one character."""
        with pytest.raises(ValueError, match="must not be empty"):
            CharacterCatalog(symbols="")

    def test_catalog_is_immutable(self):
        """Catalog fields cannot be reassigned."""
        with pytest.raises(AttributeError):
            DEFAULT_CATALOG.uppercase = "XYZ"


class TestChecks:
    """Tests for the shared password predicates."""

    def test_keyboard_sequence_case_insensitive(self):
        """Keyboard runs are found regardless of case."""
        sequences = DEFAULT_ANTI_PATTERNS.keyboard_sequences
        assert has_keyboard_sequence("xxQWExx", sequences)
        assert has_keyboard_sequence("bnm", sequences)
        assert not has_keyboard_sequence("Kx9!mP2@", sequences)

    def test_repeating_chars(self):
        """Three identical characters in a row are detected, two are not."""
        assert has_repeating_chars("abccc")
        assert has_repeating_chars("!!!")
        assert not has_repeating_chars("aabbcc")

    def test_weak_patterns(self):
        """Leading 123/abc and common words are weak."""
        patterns = DEFAULT_ANTI_PATTERNS.weak_patterns
        assert matches_weak_pattern("123xyz", patterns)
        assert matches_weak_pattern("abcXYZ", patterns)
        assert matches_weak_pattern("myPassWord", patterns)
        assert matches_weak_pattern("xAdmin", patterns)
        assert matches_weak_pattern("LOGIN9", patterns)
        assert not matches_weak_pattern("x123", patterns)
        assert not matches_weak_pattern("Kx9!mP2@", patterns)

    def test_complexity_requires_letters(self):
        """Upper and lower case are always required."""
        assert check_complexity("AbCd", include_numbers=False, include_symbols=False)
        assert not check_complexity("abcd", include_numbers=False, include_symbols=False)
        assert not check_complexity("ABCD", include_numbers=False, include_symbols=False)

    def test_complexity_optional_classes(self):
        """Digits and symbols are required only when enabled."""
        assert not check_complexity("AbCd", include_numbers=True, include_symbols=False)
        assert check_complexity("AbCd2", include_numbers=True, include_symbols=False)
        assert not check_complexity("AbCd2", include_numbers=True, include_symbols=True)
        assert check_complexity("AbCd2-", include_numbers=True, include_symbols=True)

    def test_alphabet_entropy(self):
        """Entropy is length * log2(alphabet size)."""
        assert alphabet_entropy(8, 2) == pytest.approx(8.0)
        assert alphabet_entropy(0, 26) == 0.0
        assert alphabet_entropy(10, 1) == 0.0
