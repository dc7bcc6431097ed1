import threading
from typing import Any, Dict, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from ..model.level import Level
from ..model.models import GameConfig
from ..model.progress import LevelProgress, Model
from ..model.word import Word
from ..tools.letters import LetterDictionary
from ..tools.words import WordDictionary
from ..utils.logger import get_logger
from .models import RemovalResult, TickResult
from .remove import RemoveWordEngine

LOGGER = get_logger(__name__)


def load_dictionary(config: GameConfig) -> WordDictionary:
    """The configured word list, or the bundled one when none is set."""
    if config.dictionary_path:
        return WordDictionary.from_file(config.dictionary_path)
    return WordDictionary.default()


class LevelSession(BaseModel):
    """
    One attempt at a level, driven by gestures and clock ticks.

    Wraps a ``LevelProgress`` and the removal engine. Gestures, releases
    and ticks are serialized by a lock, so a tick that ends a lightning
    level never interleaves with a word removal.

    Attributes:
        progress: The attempt being played
        engine: Removal engine holding the dictionaries and rules
        history: Results of every release, in order
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    progress: LevelProgress
    engine: RemoveWordEngine
    history: List[RemovalResult] = Field(default_factory=list)
    _lock: Any = PrivateAttr(default_factory=threading.RLock)

    @classmethod
    def create(
        cls,
        level: Level,
        config: Optional[GameConfig] = None,
        dictionary: Optional[WordDictionary] = None,
        letters: Optional[LetterDictionary] = None,
    ) -> "LevelSession":
        """
        Factory method to start playing a copy of ``level``.

        Args:
            level: Level template; it is copied, never mutated
            config: Game rules (defaults to ``GameConfig()``)
            dictionary: Word list (defaults to the configured one)
            letters: Letter table (defaults to a table seeded from config)

        Returns:
            A session whose board has every blank square filled

        Raises:
            InvalidLevelError: If the level does not validate
            DictionaryLoadError: If the word list cannot be loaded
        """
        progress = LevelProgress.start(level)
        return cls._begin(progress, config, dictionary, letters)

    @classmethod
    def from_model(
        cls,
        model: Model,
        index: int,
        config: Optional[GameConfig] = None,
        dictionary: Optional[WordDictionary] = None,
        letters: Optional[LetterDictionary] = None,
    ) -> "LevelSession":
        """Start level ``index`` of ``model`` and make it the current attempt."""
        progress = model.start_level(index)
        return cls._begin(progress, config, dictionary, letters)

    @classmethod
    def _begin(
        cls,
        progress: LevelProgress,
        config: Optional[GameConfig],
        dictionary: Optional[WordDictionary],
        letters: Optional[LetterDictionary],
    ) -> "LevelSession":
        if config is None:
            config = GameConfig()
        if dictionary is None:
            dictionary = load_dictionary(config)
        if letters is None:
            letters = LetterDictionary(seed=config.seed)

        filled = progress.level.board.fill_empty_squares(letters)
        LOGGER.info(
            "Starting %s level '%s' (%s blank squares filled)",
            progress.level.type, progress.level.name, len(filled),
        )
        engine = RemoveWordEngine(dictionary=dictionary, letters=letters, config=config)
        return cls(progress=progress, engine=engine)

    @property
    def board(self):
        return self.progress.level.board

    @property
    def is_playing(self) -> bool:
        return self.progress.is_playing

    # Gestures

    def press(self, row: int, col: int) -> bool:
        """Start a new selection at (row, col)."""
        with self._lock:
            if not self.progress.is_playing:
                return False
            self.board.clear_selection()
            return self.board.select_square(row, col)

    def drag(self, row: int, col: int) -> bool:
        """Extend the selection to (row, col) if it is a legal next square."""
        with self._lock:
            if not self.progress.is_playing or self.board.get_selected_word() is None:
                return False
            return self.board.select_square(row, col)

    def release(self) -> RemovalResult:
        """Submit the current selection."""
        return self.submit()

    def submit(self, word: Optional[Word] = None) -> RemovalResult:
        """Submit ``word`` (or the current selection) to the removal engine."""
        with self._lock:
            result = self.engine.submit(self.progress, word)
            if not result.ignored:
                self.history.append(result)
            return result

    def select_word(self, positions: List[Tuple[int, int]]) -> RemovalResult:
        """
        Press, drag through and release ``positions`` in one call.

        If the gesture breaks off (a square that cannot be selected), the
        whole path is still submitted so the engine reports why it failed.
        """
        with self._lock:
            completed = bool(positions) and self.press(*positions[0])
            for row, col in positions[1:]:
                if not completed:
                    break
                completed = self.drag(row, col)
            if completed:
                return self.release()
            self.board.clear_selection()
            return self.submit(Word(positions=list(positions)))

    def tick(self, seconds: float) -> TickResult:
        """Advance the lightning clock."""
        with self._lock:
            return self.engine.tick(self.progress, seconds)

    def stop(self) -> None:
        """Abandon the attempt; later input is ignored."""
        with self._lock:
            self.progress.stop(completed=False)

    def get_state(self) -> Dict[str, Any]:
        """
        Get the current session state.

        Returns:
            Dictionary with the progress state and the board snapshot
        """
        with self._lock:
            state = self.progress.get_state()
            state["board"] = self.board.snapshot()
            state["selection"] = (
                list(self.board.get_selected_word().positions)
                if self.board.get_selected_word() is not None else []
            )
            state["submissions"] = len(self.history)
            return state
