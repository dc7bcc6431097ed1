"""
Word checks for the removal engine.

Validates:
1. Selection shape (adjacent, non-repeating, every square holds a tile)
2. Minimum length
3. Dictionary membership (puzzle and lightning levels)
4. Theme membership (theme levels)
5. Repeats of an already found word, when the rules forbid them
"""

from typing import List

from ..model.board import Board
from ..model.word import Word
from ..tools.words import WordDictionary
from .models import RemovalError, SelectionCheck


def validate_selection(word: Word, board: Board) -> List[RemovalError]:
    """Check the selection is a legal path of occupied squares."""
    if not word.positions:
        return [RemovalError(code="EMPTY_SELECTION", message="No squares selected")]
    if not word.is_valid(board):
        return [RemovalError(
            code="INVALID_SELECTION",
            message=f"Selection {word.positions} is not a path of adjacent, occupied squares",
        )]
    return []


def validate_length(text: str, length: int, min_length: int) -> List[RemovalError]:
    """Words need at least ``min_length`` squares."""
    if length < min_length:
        return [RemovalError(
            code="TOO_SHORT",
            message=f"'{text}' uses {length} squares; at least {min_length} required",
            word=text,
        )]
    return []


def validate_dictionary(text: str, dictionary: WordDictionary) -> List[RemovalError]:
    if not dictionary.is_word(text):
        return [RemovalError(
            code="NOT_A_WORD",
            message=f"'{text}' is not a valid dictionary word",
            word=text,
        )]
    return []


def validate_theme(text: str, remaining: List[str]) -> List[RemovalError]:
    """Theme levels accept only theme words that are still to be found."""
    if text not in remaining:
        return [RemovalError(
            code="NOT_A_THEME_WORD",
            message=f"'{text}' is not a remaining theme word",
            word=text,
        )]
    return []


def validate_repeat(text: str, found_words: List[str], allow_duplicates: bool) -> List[RemovalError]:
    if not allow_duplicates and text in found_words:
        return [RemovalError(
            code="ALREADY_FOUND",
            message=f"'{text}' has already been found",
            word=text,
        )]
    return []


def check_dictionary_word(
    word: Word,
    board: Board,
    dictionary: WordDictionary,
    found_words: List[str],
    min_length: int = 3,
    allow_duplicates: bool = True,
) -> SelectionCheck:
    """Rules for puzzle and lightning levels."""
    errors = validate_selection(word, board)
    if errors:
        return SelectionCheck(accepted=False, errors=errors)

    text = word.generate_string(board)
    errors.extend(validate_length(text, len(word), min_length))
    errors.extend(validate_dictionary(text, dictionary))
    errors.extend(validate_repeat(text, found_words, allow_duplicates))
    return SelectionCheck(accepted=not errors, word=text, errors=errors)


def check_theme_word(
    word: Word,
    board: Board,
    remaining: List[str],
    min_length: int = 3,
) -> SelectionCheck:
    """Rules for theme levels."""
    errors = validate_selection(word, board)
    if errors:
        return SelectionCheck(accepted=False, errors=errors)

    text = word.generate_string(board)
    errors.extend(validate_length(text, len(word), min_length))
    errors.extend(validate_theme(text, remaining))
    return SelectionCheck(accepted=not errors, word=text, errors=errors)
