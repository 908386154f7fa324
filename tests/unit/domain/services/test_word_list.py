"""Unit tests for WordList."""

import pytest

from keysmith.core.exceptions import InvalidConfigError
from keysmith.domain.entities.generation_config import MemorablePasswordConfig
from keysmith.domain.services.password_generator import PasswordGenerator
from keysmith.domain.services.word_list import DEFAULT_WORD_LIST, DEFAULT_WORDS, WordList


def test_default_word_list():
    assert len(DEFAULT_WORD_LIST) == len(DEFAULT_WORDS) == 111
    assert DEFAULT_WORD_LIST[0] == "able"
    assert "Asia" in DEFAULT_WORD_LIST.words


def test_default_words_are_unique():
    assert len({word.lower() for word in DEFAULT_WORDS}) == len(DEFAULT_WORDS)


def test_word_list_is_immutable():
    with pytest.raises(AttributeError):
        DEFAULT_WORD_LIST.words = ("x",)


def test_from_file(tmp_path):
    """Blank lines and comments are skipped, order is kept."""
    path = tmp_path / "words.txt"
    path.write_text("# colours\nred\n\n  green  \nblue\n", encoding="utf-8")

    word_list = WordList.from_file(path)

    assert word_list.words == ("red", "green", "blue")
    assert len(word_list) == 3
    assert word_list[1] == "green"


def test_from_file_empty(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("# nothing here\n", encoding="utf-8")

    assert len(WordList.from_file(str(path))) == 0


def test_repeated_words_dropped_ignoring_case():
    """Only the first spelling of a word is kept."""
    word_list = WordList(words=("apple", "Apple", "banana", "APPLE", "cherry", "banana"))

    assert word_list.words == ("apple", "banana", "cherry")
    assert len(word_list) == 3


def test_from_file_case_variants_never_repeat_in_password(tmp_path):
    """Words differing only in case count as one word."""
    path = tmp_path / "words.txt"
    path.write_text("apple\nApple\nbanana\n", encoding="utf-8")
    generator = PasswordGenerator(word_list=WordList.from_file(path))
    config = MemorablePasswordConfig(word_count=2, separator="-")

    for _ in range(200):
        first, second = generator.generate_memorable_password(config).split("-")
        assert first != second
        assert {first, second} == {"Apple", "Banana"}


def test_word_count_bounded_by_distinct_words():
    """Case variants do not count toward the available words."""
    generator = PasswordGenerator(word_list=WordList(words=("apple", "Apple", "banana")))

    with pytest.raises(InvalidConfigError, match="exceeds the 2 available words"):
        generator.generate_memorable_password(MemorablePasswordConfig(word_count=3))
