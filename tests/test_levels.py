"""Tests for level validity, board layouts and YAML level files."""

from pathlib import Path

import pytest

from lettercraze.exceptions import LevelLoadError
from lettercraze.io import format_board, load_level, load_levels, parse_board, parse_level, save_level
from lettercraze.model import Level, LightningLevel, PuzzleLevel, Star, ThemeLevel

LEVELS_DIR = Path(__file__).parent.parent / "levels"


class TestBoardLayout:
    """Test parsing board layout rows."""

    def test_spaced_and_compact_rows(self, letters):
        board, errors = parse_board(["C A T", "D#_"], letters)
        assert errors == []
        assert board.snapshot() == [["C", "A", "T"], ["D", "#", None]]

    def test_qu_is_one_square(self, letters):
        board, errors = parse_board(["QuIT", "_ _ _"], letters)
        assert errors == []
        assert board.cols == 3
        assert board.squares[0][0].tile.score == 8

    def test_empty_layout(self):
        board, errors = parse_board([])
        assert board is None
        assert errors[0].code == "EMPTY_BOARD"

    def test_ragged_rows(self, letters):
        board, errors = parse_board(["C A T", "D O"], letters)
        assert board is None
        assert errors[0].code == "RAGGED_ROW"
        assert errors[0].line == 2

    def test_invalid_characters(self, letters):
        _, errors = parse_board(["C A 7"], letters)
        assert errors[0].code == "INVALID_TOKEN"

    def test_letter_without_score(self, letters):
        _, errors = parse_board(["C W T"], letters)
        assert errors[0].code == "UNKNOWN_LETTER"

    def test_format_board(self, make_board):
        board = make_board(["Qu # _", "C A T"])
        assert format_board(board) == ["Qu # _", "C A T"]


class TestLevelValidity:
    """Test is_valid for each level type."""

    def test_valid_levels(self, make_level):
        assert make_level(["C A T"], "puzzle").is_valid()
        assert make_level(["C A T"], "lightning").is_valid()
        assert make_level(["C A T"], "theme").is_valid()

    def test_puzzle_needs_positive_word_count(self, make_level):
        assert not make_level(["C A T"], "puzzle", max_num_words=None).is_valid()
        assert not make_level(["C A T"], "puzzle", max_num_words=0).is_valid()

    def test_lightning_needs_positive_time(self, make_level):
        assert not make_level(["C A T"], "lightning", time_limit=None).is_valid()
        assert not make_level(["C A T"], "lightning", time_limit=0).is_valid()

    def test_theme_needs_words(self, make_level):
        assert not make_level(["C A T"], "theme", theme_words=[]).is_valid()
        assert not make_level(["C A T"], "theme", theme_words=["  "]).is_valid()

    def test_stars_must_be_non_decreasing(self, make_level):
        assert make_level(["C A T"], stars=(10, 10, 30)).is_valid()
        assert not make_level(["C A T"], stars=(50, 10, 100)).is_valid()
        assert not make_level(["C A T"], stars=()).is_valid()

    def test_common_fields_required(self, make_board):
        stars = [Star(threshold=10)]
        assert not PuzzleLevel(board=make_board(["C"]), stars=stars, max_num_words=1).is_valid()
        assert not PuzzleLevel(name="x", stars=stars, max_num_words=1).is_valid()

    def test_theme_targets_are_normalized(self, make_level):
        level = make_level(["C A T"], "theme", theme_words=["cat", " Dog ", "CAT"])
        assert level.targets() == ["CAT", "DOG"]

    def test_get_type(self, make_level):
        assert make_level(["C A T"], "lightning").get_type() == "lightning"

    def test_copy_is_independent(self, make_level):
        level = make_level(["C A T"], "theme")
        clone = level.copy()
        clone.board.remove_tiles([(0, 0)])
        clone.theme_words.append("act")
        clone.stars[0].threshold = 1

        assert isinstance(clone, ThemeLevel)
        assert level.board.snapshot() == [["C", "A", "T"]]
        assert level.theme_words == ["cat", "dog"]
        assert level.stars[0].threshold == 10


class TestLevelFiles:
    """Test loading and saving levels as YAML."""

    def test_bundled_levels_load_in_order(self):
        levels = load_levels(LEVELS_DIR)
        assert [level.type for level in levels] == ["puzzle", "lightning", "theme"]
        assert all(level.is_valid() for level in levels)

    def test_load_level_variant(self):
        level = load_level(LEVELS_DIR / "02_lightning.yaml")
        assert isinstance(level, LightningLevel)
        assert level.time_limit == 90
        assert not level.board.squares[0][0].enabled

    def test_save_and_load(self, make_level, tmp_path):
        level = make_level(["Qu # _", "C A T"], "puzzle", max_num_words=3)
        path = tmp_path / "nested" / "level.yaml"
        save_level(level, path)

        loaded = load_level(path)
        assert isinstance(loaded, PuzzleLevel)
        assert loaded.name == level.name
        assert loaded.max_num_words == 3
        assert [s.threshold for s in loaded.stars] == [10, 50, 100]
        assert loaded.board.snapshot() == level.board.snapshot()

    def test_missing_file(self, tmp_path):
        with pytest.raises(LevelLoadError):
            load_level(tmp_path / "missing.yaml")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(LevelLoadError):
            load_levels(tmp_path / "missing")

    def test_broken_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("type: puzzle\nboard: [\n")
        with pytest.raises(LevelLoadError):
            load_level(path)

    def test_record_must_be_mapping(self):
        with pytest.raises(LevelLoadError):
            parse_level(["puzzle"])

    def test_unknown_type(self):
        with pytest.raises(LevelLoadError):
            parse_level({"type": "bonus", "name": "x", "board": ["C A T"], "stars": [1]})

    def test_parameter_of_other_type(self):
        with pytest.raises(LevelLoadError, match="time_limit"):
            parse_level({
                "type": "puzzle", "name": "x", "board": ["C A T"],
                "stars": [1], "max_num_words": 2, "time_limit": 30,
            })

    def test_negative_star_threshold(self):
        with pytest.raises(LevelLoadError, match="Invalid level record"):
            parse_level({
                "type": "puzzle", "name": "x", "board": ["C A T"],
                "stars": [-5], "max_num_words": 3,
            })

    def test_bad_board(self):
        with pytest.raises(LevelLoadError, match="Invalid board"):
            parse_level({"type": "puzzle", "name": "x", "board": ["C A", "T"], "stars": [1]})

    def test_missing_values_load_but_do_not_validate(self):
        level = parse_level({"type": "theme", "name": "x", "board": ["C A T"], "stars": [5]})
        assert isinstance(level, ThemeLevel)
        assert isinstance(level, Level)
        assert not level.is_valid()
