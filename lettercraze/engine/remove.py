"""
Word removal.

Handles the release of a selection: the candidate word is checked against
the rules of the level type, and if accepted its tiles are removed, the
board settles and (except on theme levels) refills, and the score, found
words and stars are updated. Every state change is reported as a
``GameEvent`` so the presentation layer never has to diff the board.
"""

from typing import Callable, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from ..model.level import LightningLevel, PuzzleLevel
from ..model.models import GameConfig, GameEvent
from ..model.progress import LevelProgress
from ..model.word import Word
from ..tools.letters import LetterDictionary
from ..tools.words import WordDictionary
from ..utils.logger import get_logger
from .models import RemovalError, RemovalResult, SelectionCheck, TickResult
from .validate import check_dictionary_word, check_theme_word

LOGGER = get_logger(__name__)


class RemoveWordEngine(BaseModel):
    """
    Applies selections and clock ticks to a level attempt.

    The engine holds no per-attempt state; everything it changes lives in
    the ``LevelProgress`` passed to it.

    Attributes:
        dictionary: Valid words for puzzle and lightning levels
        letters: Letter table used to refill the board
        config: Rules (minimum length, duplicates, gravity, bonus)
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    dictionary: WordDictionary
    letters: LetterDictionary = Field(default_factory=LetterDictionary)
    config: GameConfig = Field(default_factory=GameConfig)

    def submit(self, progress: LevelProgress, word: Optional[Word] = None) -> RemovalResult:
        """
        Handle the release of a selection.

        Args:
            progress: The attempt to update
            word: Candidate word; defaults to the board's current selection

        Returns:
            RemovalResult with the new state and the events to render.
            Input while the level is not being played, or without a
            selection, is ignored.
        """
        if not progress.is_playing:
            return self._result(progress, ignored=True)

        board = progress.level.board
        if word is None:
            word = board.get_selected_word()
        if word is None:
            return self._result(progress, ignored=True)

        # Remove highlight
        events = [GameEvent(kind="highlight_cleared", positions=list(word.positions))]
        for row, col in word.positions:
            if 0 <= row < board.rows and 0 <= col < board.cols:
                board.squares[row][col].selected = False

        branches: Dict[str, Callable[[LevelProgress, Word, List[GameEvent]], RemovalResult]] = {
            "puzzle": self.remove_from_puzzle_level,
            "lightning": self.remove_from_lightning_level,
            "theme": self.remove_from_theme_level,
        }
        branch = branches.get(progress.level.type)
        if branch is None:
            LOGGER.error("Invalid level type: %s", progress.level.type)
            board.clear_selection()
            events.append(GameEvent(kind="selection_cleared"))
            error = RemovalError(
                code="UNKNOWN_LEVEL_TYPE",
                message=f"Invalid level type: {progress.level.type!r}",
            )
            return self._result(progress, events=events, error=error)

        return branch(progress, word, events)

    def remove_from_puzzle_level(
        self, progress: LevelProgress, word: Word, events: List[GameEvent]
    ) -> RemovalResult:
        """Dictionary word, refill, ends after ``max_num_words`` words."""
        check = self._check_dictionary_word(progress, word)
        if not check.accepted:
            return self._reject(progress, check, events)

        points = self._remove_word(progress, word, check.word, events, refill=True)

        level = progress.level
        if isinstance(level, PuzzleLevel) and len(progress.found_words) >= level.max_num_words:
            self._end_level(progress, events, "max_words")

        return self._result(progress, events=events, accepted=True, word=check.word, points=points)

    def remove_from_lightning_level(
        self, progress: LevelProgress, word: Word, events: List[GameEvent]
    ) -> RemovalResult:
        """Dictionary word, refill; only the clock ends the level."""
        check = self._check_dictionary_word(progress, word)
        if not check.accepted:
            return self._reject(progress, check, events)

        points = self._remove_word(progress, word, check.word, events, refill=True)
        return self._result(progress, events=events, accepted=True, word=check.word, points=points)

    def remove_from_theme_level(
        self, progress: LevelProgress, word: Word, events: List[GameEvent]
    ) -> RemovalResult:
        """Remaining theme word, no refill, ends when every theme word is found."""
        check = check_theme_word(
            word,
            progress.level.board,
            progress.remaining_theme_words(),
            min_length=self.config.min_word_length,
        )
        if not check.accepted:
            return self._reject(progress, check, events)

        points = self._remove_word(progress, word, check.word, events, refill=False)

        if not progress.remaining_theme_words():
            self._end_level(progress, events, "theme_complete")

        return self._result(progress, events=events, accepted=True, word=check.word, points=points)

    def tick(self, progress: LevelProgress, seconds: float) -> TickResult:
        """
        Advance the lightning clock by ``seconds``.

        Ends the level once the time limit is reached. Does nothing for
        other level types or when the level is not being played.
        """
        if seconds < 0:
            raise ValueError(f"Cannot tick backwards ({seconds}s)")

        level = progress.level
        if not progress.is_playing or not isinstance(level, LightningLevel):
            return TickResult(
                elapsed=progress.elapsed,
                remaining=progress.remaining_time(),
                is_playing=progress.is_playing,
            )

        events: List[GameEvent] = []
        progress.elapsed = min(float(level.time_limit), progress.elapsed + seconds)
        events.append(GameEvent(kind="time_changed", value=progress.remaining_time()))
        if progress.elapsed >= level.time_limit:
            self._end_level(progress, events, "time_up")

        return TickResult(
            elapsed=progress.elapsed,
            remaining=progress.remaining_time(),
            is_playing=progress.is_playing,
            events=events,
        )

    def _check_dictionary_word(self, progress: LevelProgress, word: Word) -> SelectionCheck:
        return check_dictionary_word(
            word,
            progress.level.board,
            self.dictionary,
            progress.found_words,
            min_length=self.config.min_word_length,
            allow_duplicates=self.config.allow_duplicate_words,
        )

    def _reject(
        self, progress: LevelProgress, check: SelectionCheck, events: List[GameEvent]
    ) -> RemovalResult:
        """Clear the selection and leave everything else alone."""
        progress.level.board.clear_selection()
        events.append(GameEvent(kind="selection_cleared"))
        reason = check.errors[0].code if check.errors else None
        events.append(GameEvent(kind="word_rejected", word=check.word or None, reason=reason))
        LOGGER.debug("Rejected '%s': %s", check.word, [e.code for e in check.errors])
        return self._result(progress, events=events, word=check.word or None, errors=check.errors)

    def _remove_word(
        self,
        progress: LevelProgress,
        word: Word,
        text: str,
        events: List[GameEvent],
        refill: bool,
    ) -> int:
        """Apply an accepted word to the board and the progress. Returns its points."""
        board = progress.level.board
        positions = list(word.positions)
        points = word.calculate_score(board, length_bonus=self.config.length_bonus)

        # Remove word from board
        board.remove_tiles(positions)
        events.append(GameEvent(kind="tiles_removed", positions=positions, word=text))
        board.clear_selection()
        events.append(GameEvent(kind="selection_cleared"))

        # Apply gravity and generate tiles
        moves = board.apply_gravity(self.config.gravity)
        if moves:
            events.append(GameEvent(kind="tiles_moved", moves=moves))
        if refill:
            filled = board.fill_empty_squares(self.letters)
            if filled:
                events.append(GameEvent(kind="tiles_added", positions=filled))

        progress.add_score(points)
        events.append(GameEvent(kind="score_changed", value=progress.score))
        progress.add_found_word(text)
        events.append(GameEvent(kind="word_found", word=text))

        previous_stars = progress.star_count
        if progress.update_star_count() != previous_stars:
            events.append(GameEvent(kind="stars_changed", value=progress.star_count))

        LOGGER.info(
            "Accepted '%s' for %s points (score %s, stars %s)",
            text, points, progress.score, progress.star_count,
        )
        return points

    def _end_level(self, progress: LevelProgress, events: List[GameEvent], reason: str) -> None:
        progress.stop(completed=True)
        events.append(GameEvent(kind="level_ended", reason=reason))
        LOGGER.info(
            "Level '%s' ended (%s) with score %s and %s stars",
            progress.level.name, reason, progress.score, progress.star_count,
        )

    @staticmethod
    def _result(
        progress: LevelProgress,
        events: Optional[List[GameEvent]] = None,
        accepted: bool = False,
        ignored: bool = False,
        word: Optional[str] = None,
        points: int = 0,
        errors: Optional[List[RemovalError]] = None,
        error: Optional[RemovalError] = None,
    ) -> RemovalResult:
        board = progress.level.board
        return RemovalResult(
            accepted=accepted,
            ignored=ignored,
            word=word,
            points=points,
            score=progress.score,
            found_words=list(progress.found_words),
            star_count=progress.star_count,
            is_playing=progress.is_playing,
            board=board.snapshot() if board is not None else [],
            events=events or [],
            errors=errors or [],
            error=error,
        )
