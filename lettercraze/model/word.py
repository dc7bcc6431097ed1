"""Candidate words built from a selection gesture."""

from typing import TYPE_CHECKING, List, Tuple
from pydantic import BaseModel, Field

from .models import Position

if TYPE_CHECKING:
    from .board import Board, BoardSquare


class Word(BaseModel):
    """
    An ordered selection of squares.

    Holds ``(row, col)`` positions rather than square objects, so a word
    stays meaningful while gravity moves tiles around underneath it.
    Each position is 8-way adjacent to the one before it and no position
    repeats.
    """
    positions: List[Position] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.positions)

    @staticmethod
    def is_adjacent(a: Position, b: Position) -> bool:
        """True if ``b`` touches ``a`` horizontally, vertically or diagonally."""
        return a != b and abs(a[0] - b[0]) <= 1 and abs(a[1] - b[1]) <= 1

    def can_extend(self, board: "Board", row: int, col: int) -> bool:
        """Whether the square at (row, col) may be appended to this word."""
        try:
            square = board.get_board_square(col, row)
        except IndexError:
            return False
        if not square.enabled or square.tile is None:
            return False
        if (row, col) in self.positions:
            return False
        return not self.positions or self.is_adjacent(self.positions[-1], (row, col))

    def extend(self, board: "Board", row: int, col: int) -> bool:
        """Append (row, col) if legal. Returns True if it was added."""
        if not self.can_extend(board, row, col):
            return False
        self.positions.append((row, col))
        return True

    def is_valid(self, board: "Board") -> bool:
        """Re-check adjacency, uniqueness and tile presence against ``board``."""
        replay = Word()
        return all(replay.extend(board, row, col) for row, col in self.positions)

    def get_board_squares(self, board: "Board") -> Tuple["BoardSquare", ...]:
        """The selected squares, in selection order."""
        return tuple(board.get_board_square(col, row) for row, col in self.positions)

    def generate_string(self, board: "Board") -> str:
        """
        Concatenate the tile contents in selection order.

        Returns:
            The upper-cased word, or an empty string if any square is empty
        """
        parts = []
        for square in self.get_board_squares(board):
            if square.tile is None:
                return ""
            parts.append(square.tile.content)
        return "".join(parts).upper()

    def calculate_score(self, board: "Board", length_bonus: bool = False) -> int:
        """
        Sum of the tile scores.

        Args:
            board: Board the positions refer to
            length_bonus: Multiply the sum by ``len - 2`` for words of
                three squares or more

        Returns:
            Points for this word (0 if any square is empty)
        """
        squares = self.get_board_squares(board)
        if any(square.tile is None for square in squares):
            return 0
        total = sum(square.tile.score for square in squares)
        if length_bonus and len(squares) >= 3:
            total *= len(squares) - 2
        return total
