"""Tests for the word list and the letter table."""

import pytest

from lettercraze.exceptions import DictionaryLoadError
from lettercraze.tools import LETTER_TABLE, LetterDictionary, WordDictionary


class TestWordDictionary:
    """Test word list loading and lookups."""

    def test_lookup_is_case_insensitive(self, words):
        assert words.is_word("cat")
        assert words.is_word("CAT")
        assert "Cat" in words
        assert not words.is_word("ZZQX")

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("# comment\nApple\n\nbanana\n  cherry  \n")
        dictionary = WordDictionary.from_file(path)
        assert len(dictionary) == 3
        assert dictionary.is_word("CHERRY")
        assert dictionary.source == str(path)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(DictionaryLoadError):
            WordDictionary.from_file(tmp_path / "nope.txt")

    def test_file_without_words_raises(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("# nothing here\n\n")
        with pytest.raises(DictionaryLoadError):
            WordDictionary.from_file(path)

    def test_bundled_list(self):
        dictionary = WordDictionary.default()
        assert dictionary.is_word("cat")
        assert dictionary.is_word("QUIZ")
        assert not dictionary.is_word("zzqx")
        assert WordDictionary.default() is dictionary


class TestLetterDictionary:
    """Test the frequency and score table."""

    def test_default_table(self):
        letters = LetterDictionary()
        assert set(letters.scores) == set(LETTER_TABLE)
        assert letters.score("e") == 1
        assert letters.score("QU") == 8

    def test_qu_is_canonical(self):
        letters = LetterDictionary()
        assert letters.canonical("qu") == "Qu"
        assert letters.make_tile("QU").content == "Qu"

    def test_unknown_letter_raises(self, letters):
        with pytest.raises(KeyError):
            letters.make_tile("W")

    def test_seed_is_reproducible(self):
        first = LetterDictionary(seed=3)
        second = LetterDictionary(seed=3)
        assert [first.random_letter() for _ in range(20)] == [second.random_letter() for _ in range(20)]

    def test_reseed_restarts_sequence(self, letters):
        letters.reseed(11)
        run = [letters.random_letter() for _ in range(10)]
        letters.reseed(11)
        assert [letters.random_letter() for _ in range(10)] == run

    def test_random_tile_is_scored(self, letters):
        for _ in range(20):
            tile = letters.random_tile()
            assert tile.score == letters.scores[tile.content]

    def test_invalid_tables_raise(self):
        with pytest.raises(ValueError):
            LetterDictionary(frequencies={}, scores={})
        with pytest.raises(ValueError):
            LetterDictionary(frequencies={"A": 1.0}, scores={"B": 1})
        with pytest.raises(ValueError):
            LetterDictionary(frequencies={"A": 0.0}, scores={"A": 1})
