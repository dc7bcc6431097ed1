"""Board grid, squares and tiles."""

from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple
from pydantic import BaseModel, Field

from .models import Gravity, Position
from .word import Word

if TYPE_CHECKING:
    from ..tools.letters import LetterDictionary


DISABLED = "#"
EMPTY = "."


class Tile(BaseModel):
    """A letter and its point value."""
    content: str = Field(..., min_length=1)
    score: int = Field(default=0, ge=0)


class BoardSquare(BaseModel):
    """One grid cell. A disabled square never holds a tile."""
    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)
    enabled: bool = True
    selected: bool = False
    tile: Optional[Tile] = None

    @property
    def position(self) -> Position:
        return (self.row, self.col)

    def is_empty(self) -> bool:
        return self.tile is None

    def set_tile(self, tile: Optional[Tile]) -> None:
        """Place or clear a tile. Disabled squares only accept ``None``."""
        if tile is not None and not self.enabled:
            raise ValueError(f"Cannot place a tile on disabled square {self.position}")
        self.tile = tile


class Board(BaseModel):
    """
    Grid of squares for one level instance.

    Squares are stored row-major and addressed by index; row 0 is the top
    of the board. The board also tracks the word currently being selected.

    Attributes:
        rows: Number of rows
        cols: Number of columns
        squares: ``squares[row][col]``, built blank and enabled if omitted
        selected_word: The current selection, if any
    """

    rows: int = Field(default=6, ge=1)
    cols: int = Field(default=6, ge=1)
    squares: List[List[BoardSquare]] = Field(default_factory=list)
    selected_word: Optional[Word] = None

    def model_post_init(self, __context) -> None:
        """Build a blank grid when no squares were given."""
        if not self.squares:
            self.squares = [
                [BoardSquare(row=r, col=c) for c in range(self.cols)]
                for r in range(self.rows)
            ]

    @classmethod
    def blank(cls, rows: int = 6, cols: int = 6) -> "Board":
        """An empty board with every square enabled."""
        return cls(rows=rows, cols=cols)

    # Square access

    def get_board_square(self, col: int, row: int) -> BoardSquare:
        """
        Square at column ``col``, row ``row``.

        Raises:
            IndexError: If the position is outside the grid
        """
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(
                f"Square (row={row}, col={col}) outside {self.rows}x{self.cols} board"
            )
        return self.squares[row][col]

    def iter_squares(self) -> Iterator[BoardSquare]:
        for line in self.squares:
            yield from line

    def enabled_squares(self) -> List[BoardSquare]:
        return [square for square in self.iter_squares() if square.enabled]

    # Selection

    def get_selected_word(self) -> Optional[Word]:
        return self.selected_word

    def set_selected_word(self, word: Optional[Word]) -> None:
        """Replace the current selection and sync the squares' selected flags."""
        for square in self.iter_squares():
            square.selected = False
        self.selected_word = word
        if word is not None:
            for square in word.get_board_squares(self):
                square.selected = True

    def select_square(self, row: int, col: int) -> bool:
        """
        Add the square at (row, col) to the selection.

        Starts a new word if nothing is selected. Returns False when the
        square is disabled, empty, already selected or not adjacent to the
        last selected square.
        """
        word = self.selected_word if self.selected_word is not None else Word()
        if not word.extend(self, row, col):
            return False
        self.selected_word = word
        self.squares[row][col].selected = True
        return True

    def clear_selection(self) -> None:
        self.set_selected_word(None)

    # Mutation

    def remove_tiles(self, positions: List[Position]) -> List[Tile]:
        """Take the tiles off the given squares and return them."""
        removed = []
        for row, col in positions:
            square = self.get_board_square(col, row)
            if square.tile is not None:
                removed.append(square.tile)
                square.tile = None
        return removed

    def segments(self, col: int) -> List[List[int]]:
        """Row indices of each run of enabled squares in column ``col``."""
        runs: List[List[int]] = []
        current: List[int] = []
        for row in range(self.rows):
            if self.squares[row][col].enabled:
                current.append(row)
            elif current:
                runs.append(current)
                current = []
        if current:
            runs.append(current)
        return runs

    def apply_gravity(self, direction: Gravity = "down") -> List[Tuple[Position, Position]]:
        """
        Settle tiles towards the gravity end of each column.

        Disabled squares split a column into segments that settle
        independently; tiles never pass through them. Tiles keep their
        relative order and are only moved, never created or dropped.

        Args:
            direction: ``"down"`` towards the last row, ``"up"`` towards row 0

        Returns:
            ``(from, to)`` position pairs for every tile that moved
        """
        moves: List[Tuple[Position, Position]] = []
        for col in range(self.cols):
            for segment in self.segments(col):
                occupied = [row for row in segment if self.squares[row][col].tile is not None]
                if direction == "down":
                    targets = segment[len(segment) - len(occupied):]
                else:
                    targets = segment[:len(occupied)]
                tiles = [self.squares[row][col].tile for row in occupied]
                for row in segment:
                    self.squares[row][col].tile = None
                for source, target, tile in zip(occupied, targets, tiles):
                    self.squares[target][col].tile = tile
                    if source != target:
                        moves.append(((source, col), (target, col)))
        return moves

    def fill_empty_squares(self, letter_dictionary: "LetterDictionary") -> List[Position]:
        """
        Put a freshly sampled tile on every enabled empty square.

        Returns:
            Positions that received a tile, in row-major order
        """
        filled: List[Position] = []
        for square in self.iter_squares():
            if square.enabled and square.tile is None:
                square.tile = letter_dictionary.random_tile()
                filled.append(square.position)
        return filled

    # Queries

    def is_full(self) -> bool:
        """True if every enabled square holds a tile."""
        return all(square.tile is not None for square in self.enabled_squares())

    def is_valid(self) -> bool:
        """Dimensions match the grid, coordinates match slots, disabled squares are empty."""
        if len(self.squares) != self.rows:
            return False
        has_enabled = False
        for r, line in enumerate(self.squares):
            if len(line) != self.cols:
                return False
            for c, square in enumerate(line):
                if square.row != r or square.col != c:
                    return False
                if not square.enabled and square.tile is not None:
                    return False
                has_enabled = has_enabled or square.enabled
        return has_enabled

    def copy(self) -> "Board":
        """Independent deep copy: squares and tiles are not shared."""
        return self.model_copy(deep=True)

    def snapshot(self) -> List[List[Optional[str]]]:
        """Tile contents per square; ``"#"`` for disabled, ``None`` for empty."""
        return [
            [
                DISABLED if not square.enabled
                else (square.tile.content if square.tile is not None else None)
                for square in line
            ]
            for line in self.squares
        ]

    def render(self) -> str:
        """Render the board to a string, two characters per square."""
        lines = []
        for line in self.snapshot():
            lines.append(" ".join(f"{cell if cell is not None else EMPTY:<2}" for cell in line).rstrip())
        return "\n".join(lines)
