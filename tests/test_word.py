"""Tests for candidate words: text, score and extension rules."""

from lettercraze.model import Word


class TestWordText:
    """Test building the word string from tiles."""

    def test_generate_string(self, make_board):
        board = make_board(["C A T", "D O G"])
        word = Word(positions=[(0, 0), (0, 1), (0, 2)])
        assert word.generate_string(board) == "CAT"
        assert len(word) == 3

    def test_qu_tile_contributes_two_letters(self, make_board):
        board = make_board(["Qu I T"])
        word = Word(positions=[(0, 0), (0, 1), (0, 2)])
        assert word.generate_string(board) == "QUIT"
        assert len(word) == 3

    def test_empty_square_gives_empty_string(self, make_board):
        board = make_board(["C _ T"])
        assert Word(positions=[(0, 0), (0, 1)]).generate_string(board) == ""

    def test_get_board_squares_in_selection_order(self, make_board):
        board = make_board(["C A T"])
        squares = Word(positions=[(0, 2), (0, 1)]).get_board_squares(board)
        assert [s.tile.content for s in squares] == ["T", "A"]


class TestWordScore:
    """Test scoring a word from its tiles."""

    def test_sum_of_tile_scores(self, make_board):
        board = make_board(["C A T"])
        assert Word(positions=[(0, 0), (0, 1), (0, 2)]).calculate_score(board) == 5

    def test_length_bonus(self, make_board):
        board = make_board(["C A T S"])
        word = Word(positions=[(0, 0), (0, 1), (0, 2), (0, 3)])
        assert word.calculate_score(board) == 6
        assert word.calculate_score(board, length_bonus=True) == 12

    def test_length_bonus_neutral_for_three_squares(self, make_board):
        board = make_board(["C A T"])
        word = Word(positions=[(0, 0), (0, 1), (0, 2)])
        assert word.calculate_score(board, length_bonus=True) == 5

    def test_empty_square_scores_zero(self, make_board):
        board = make_board(["C _ T"])
        assert Word(positions=[(0, 0), (0, 1)]).calculate_score(board) == 0


class TestWordExtension:
    """Test the path rules for growing a selection."""

    def test_first_square_can_be_anywhere_occupied(self, make_board):
        board = make_board(["C A T", "D O G"])
        assert Word().can_extend(board, 1, 2)

    def test_extend_requires_adjacency(self, make_board):
        board = make_board(["C A T", "D O G"])
        word = Word(positions=[(0, 0)])
        assert not word.extend(board, 0, 2)
        assert word.extend(board, 1, 1)
        assert word.positions == [(0, 0), (1, 1)]

    def test_adjacency(self):
        assert Word.is_adjacent((1, 1), (0, 0))
        assert Word.is_adjacent((1, 1), (2, 1))
        assert not Word.is_adjacent((1, 1), (1, 1))
        assert not Word.is_adjacent((0, 0), (0, 2))

    def test_is_valid_against_moved_tiles(self, make_board):
        board = make_board(["C", "A", "T"])
        word = Word(positions=[(0, 0), (1, 0)])
        assert word.is_valid(board)

        board.remove_tiles([(1, 0)])
        board.apply_gravity("down")
        assert not word.is_valid(board)

    def test_repeated_position_is_invalid(self, make_board):
        board = make_board(["C A T"])
        assert not Word(positions=[(0, 0), (0, 1), (0, 0)]).is_valid(board)
