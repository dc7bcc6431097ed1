"""Word validation, removal and session handling."""

from .models import RemovalError, RemovalResult, SelectionCheck, TickResult
from .validate import (
    validate_selection,
    validate_length,
    validate_dictionary,
    validate_theme,
    validate_repeat,
    check_dictionary_word,
    check_theme_word,
)
from .remove import RemoveWordEngine
from .session import LevelSession, load_dictionary

__all__ = [
    # Results
    "RemovalError",
    "RemovalResult",
    "SelectionCheck",
    "TickResult",
    # Validation
    "validate_selection",
    "validate_length",
    "validate_dictionary",
    "validate_theme",
    "validate_repeat",
    "check_dictionary_word",
    "check_theme_word",
    # Engine
    "RemoveWordEngine",
    "LevelSession",
    "load_dictionary",
]
