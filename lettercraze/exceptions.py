"""Exception hierarchy for the LetterCraze core."""


class LetterCrazeError(Exception):
    """Base exception for game core failures."""


class DictionaryLoadError(LetterCrazeError):
    """Raised when a word list cannot be read or yields no words."""


class LevelLoadError(LetterCrazeError):
    """Raised when a level definition cannot be parsed."""


class InvalidLevelError(LetterCrazeError, ValueError):
    """Raised when a session is started on a level that does not validate."""
