"""Board layout parsing utilities."""

import re
from typing import List, Optional, Tuple
from pydantic import BaseModel

from ..model.board import Board, BoardSquare
from ..tools.letters import LetterDictionary


DISABLED_TOKEN = "#"
BLANK_TOKEN = "_"

_TOKEN = re.compile(r"[Qq][Uu]|[A-Za-z]|[#_]")


class LayoutError(BaseModel):
    """A problem found while parsing a board layout."""
    code: str
    message: str
    line: Optional[int] = None


def tokenize_row(line: str) -> Tuple[List[str], Optional[str]]:
    """
    Split one layout row into cell tokens.

    Cells may be separated by spaces (``"C A T # _ _"``) or written
    compactly (``"CAT#__"``). ``Qu`` is always one cell.

    Returns a tuple of (tokens, leftover) where leftover holds any
    characters that are not valid cells.
    """
    compact = re.sub(r"\s+", "", line)
    tokens = _TOKEN.findall(compact)
    leftover = _TOKEN.sub("", compact)
    return tokens, leftover or None


def parse_board(
    rows: List[str],
    letters: Optional[LetterDictionary] = None,
) -> Tuple[Optional[Board], List[LayoutError]]:
    """
    Parse a board layout into a Board with error collection.

    ``#`` marks a disabled square, ``_`` a blank square to be filled when a
    session starts, and any other token a fixed tile scored from
    ``letters``.

    Returns a tuple of (board, errors); board is None if there are errors.
    """
    letters = letters or LetterDictionary()
    errors: List[LayoutError] = []
    grid: List[List[BoardSquare]] = []

    if not rows:
        errors.append(LayoutError(code="EMPTY_BOARD", message="Board layout is empty"))
        return None, errors

    width: Optional[int] = None
    for r, line in enumerate(rows):
        tokens, leftover = tokenize_row(line)
        if leftover:
            errors.append(LayoutError(
                code="INVALID_TOKEN",
                message=f"Invalid characters {leftover!r} in row '{line}'",
                line=r + 1,
            ))
            continue
        if width is None:
            width = len(tokens)
        elif len(tokens) != width:
            errors.append(LayoutError(
                code="RAGGED_ROW",
                message=f"Row {r + 1} has {len(tokens)} squares, expected {width}",
                line=r + 1,
            ))
            continue

        squares = []
        for c, token in enumerate(tokens):
            if token == DISABLED_TOKEN:
                squares.append(BoardSquare(row=r, col=c, enabled=False))
            elif token == BLANK_TOKEN:
                squares.append(BoardSquare(row=r, col=c))
            else:
                try:
                    tile = letters.make_tile(token)
                except KeyError:
                    errors.append(LayoutError(
                        code="UNKNOWN_LETTER",
                        message=f"Letter '{token}' has no score",
                        line=r + 1,
                    ))
                    continue
                squares.append(BoardSquare(row=r, col=c, tile=tile))
        grid.append(squares)

    if not width:
        errors.append(LayoutError(code="EMPTY_BOARD", message="Board layout has no squares"))

    if errors:
        return None, errors

    return Board(rows=len(grid), cols=width, squares=grid), errors


def format_board(board: Board) -> List[str]:
    """Write a board back in layout form, one space-separated row per line."""
    lines = []
    for line in board.squares:
        cells = []
        for square in line:
            if not square.enabled:
                cells.append(DISABLED_TOKEN)
            elif square.tile is None:
                cells.append(BLANK_TOKEN)
            else:
                cells.append(square.tile.content)
        lines.append(" ".join(cells))
    return lines
