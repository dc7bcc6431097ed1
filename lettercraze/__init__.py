"""LetterCraze word-puzzle game core."""

__version__ = "0.1.0"
