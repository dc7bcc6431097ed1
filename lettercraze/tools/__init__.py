"""Letter and word dictionaries used by the board and the removal engine."""

from .letters import LETTER_TABLE, LetterDictionary
from .words import WordDictionary, normalize_word

__all__ = [
    "LETTER_TABLE",
    "LetterDictionary",
    "WordDictionary",
    "normalize_word",
]
