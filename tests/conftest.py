"""Shared fixtures: a small word list, a fixed letter table and board builders."""

from typing import List

import pytest

from lettercraze.engine import LevelSession, RemoveWordEngine
from lettercraze.io import parse_board
from lettercraze.model import Board, GameConfig, LightningLevel, PuzzleLevel, Star, ThemeLevel
from lettercraze.tools import LetterDictionary, WordDictionary


SCORES = {
    "A": 1, "B": 1, "C": 3, "D": 2, "E": 1, "G": 2, "I": 1,
    "O": 2, "Qu": 8, "S": 1, "T": 1, "X": 5, "Z": 5,
}


@pytest.fixture
def words() -> WordDictionary:
    return WordDictionary(["cat", "cats", "act", "dog", "tea", "eat", "at", "quit", "bed"])


@pytest.fixture
def letters() -> LetterDictionary:
    return LetterDictionary.from_scores(SCORES, seed=7)


@pytest.fixture
def make_board(letters):
    """Build a board from layout rows, failing the test on layout errors."""
    def _make(rows: List[str]) -> Board:
        board, errors = parse_board(rows, letters)
        assert errors == [], errors
        return board
    return _make


@pytest.fixture
def make_level(make_board):
    """Build a level of the given type with sensible defaults."""
    def _make(rows: List[str], type: str = "puzzle", stars=(10, 50, 100), **params):
        common = dict(
            name=params.pop("name", f"Test {type}"),
            board=make_board(rows),
            stars=[Star(threshold=t) for t in stars],
        )
        if type == "puzzle":
            params.setdefault("max_num_words", 5)
            return PuzzleLevel(**common, **params)
        if type == "lightning":
            params.setdefault("time_limit", 60)
            return LightningLevel(**common, **params)
        if type == "theme":
            params.setdefault("theme_words", ["cat", "dog"])
            return ThemeLevel(**common, **params)
        raise ValueError(type)
    return _make


@pytest.fixture
def engine(words, letters) -> RemoveWordEngine:
    return RemoveWordEngine(dictionary=words, letters=letters, config=GameConfig(seed=7))


@pytest.fixture
def start_session(words, letters):
    """Start a session on a level with the test dictionaries."""
    def _start(level, **config) -> LevelSession:
        return LevelSession.create(
            level, config=GameConfig(**config), dictionary=words, letters=letters
        )
    return _start
