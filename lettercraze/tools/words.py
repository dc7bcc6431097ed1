"""Word list membership checks for the removal engine."""

from pathlib import Path
from typing import Iterable, Optional, Set

from ..exceptions import DictionaryLoadError
from ..model.models import normalize_word
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

_DATA_FILE = Path(__file__).parent / "data" / "words.txt"
_DEFAULT: Optional["WordDictionary"] = None


class WordDictionary:
    """Set of valid words. Lookups are case-insensitive."""

    def __init__(self, words: Iterable[str], source: str = "<memory>"):
        self.source = source
        self._words: Set[str] = set()
        for word in words:
            word = normalize_word(word)
            if word and not word.startswith("#") and word.isalpha():
                self._words.add(word)
        if not self._words:
            raise DictionaryLoadError(f"No words loaded from {source}")

    @classmethod
    def from_file(cls, path: str | Path) -> "WordDictionary":
        """
        Load one word per line. Blank lines and ``#`` comments are skipped.

        Raises:
            DictionaryLoadError: If the file is missing, unreadable or empty
        """
        path = Path(path)
        if not path.exists():
            raise DictionaryLoadError(f"Missing word list: {path}")
        try:
            with open(path, encoding="utf-8") as f:
                dictionary = cls(f, source=str(path))
        except (OSError, UnicodeDecodeError) as exc:
            raise DictionaryLoadError(f"Cannot read word list {path}: {exc}") from exc
        LOGGER.info("Loaded %s words from %s", f"{len(dictionary):,}", path)
        return dictionary

    @classmethod
    def default(cls) -> "WordDictionary":
        """The bundled word list, loaded once."""
        global _DEFAULT
        if _DEFAULT is None:
            _DEFAULT = cls.from_file(_DATA_FILE)
        return _DEFAULT

    def is_word(self, word: str) -> bool:
        return normalize_word(word) in self._words

    def __contains__(self, word: str) -> bool:
        return self.is_word(word)

    def __len__(self) -> int:
        return len(self._words)
