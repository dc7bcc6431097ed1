"""
Play-session state.

``LevelProgress`` is the mutable state of one level attempt, ``Progress``
keeps the best result per level and ``Model`` is the root that owns the
level templates and the progress tree.
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from .level import Level, LevelRecord, LightningLevel, PuzzleLevel, ThemeLevel
from ..exceptions import InvalidLevelError


class LevelProgress(BaseModel):
    """
    State of one attempt at a level.

    The progress owns its own copy of the level, so the board can be
    mutated without touching the template.

    Attributes:
        level: The level copy being played
        score: Points accumulated so far
        found_words: Accepted words in the order they were found
        star_count: Number of stars whose threshold the score has reached
        is_playing: False once the level has ended
        elapsed: Seconds played (advanced by the lightning clock)
        completed: True if the level ended through its end condition
    """

    level: LevelRecord
    score: int = Field(default=0, ge=0)
    found_words: List[str] = Field(default_factory=list)
    star_count: int = Field(default=0, ge=0)
    is_playing: bool = True
    elapsed: float = Field(default=0.0, ge=0)
    completed: bool = False

    @classmethod
    def start(cls, level: Level) -> "LevelProgress":
        """
        Begin an attempt on a copy of ``level``.

        Raises:
            InvalidLevelError: If the level does not validate
        """
        if not level.is_valid():
            raise InvalidLevelError(f"Level '{level.name}' ({level.type}) is not valid")
        return cls(level=level.copy())

    def add_found_word(self, word: str) -> None:
        self.found_words.append(word)

    def add_score(self, points: int) -> None:
        self.score = max(0, self.score + points)

    def update_star_count(self) -> int:
        """Recount the stars obtained at the current score."""
        self.star_count = sum(1 for star in self.level.stars or [] if star.is_obtained(self.score))
        return self.star_count

    def stop(self, completed: bool = True) -> None:
        self.is_playing = False
        self.completed = completed

    def remaining_time(self) -> Optional[float]:
        """Seconds left on a lightning level, None for other types."""
        if not isinstance(self.level, LightningLevel) or self.level.time_limit is None:
            return None
        return max(0.0, self.level.time_limit - self.elapsed)

    def remaining_words(self) -> Optional[int]:
        """Words left before a puzzle or theme level ends, None otherwise."""
        if isinstance(self.level, PuzzleLevel) and self.level.max_num_words is not None:
            return max(0, self.level.max_num_words - len(self.found_words))
        if isinstance(self.level, ThemeLevel):
            return len(self.remaining_theme_words())
        return None

    def remaining_theme_words(self) -> List[str]:
        """Theme words not found yet (empty for other level types)."""
        if not isinstance(self.level, ThemeLevel):
            return []
        return [word for word in self.level.targets() if word not in self.found_words]

    def get_state(self) -> Dict:
        """
        Get the attempt state as a dictionary.

        Useful for serialization and logging.
        """
        return {
            "level": self.level.name,
            "type": self.level.type,
            "score": self.score,
            "found_words": list(self.found_words),
            "star_count": self.star_count,
            "is_playing": self.is_playing,
            "completed": self.completed,
            "elapsed": self.elapsed,
            "remaining_time": self.remaining_time(),
            "remaining_words": self.remaining_words(),
        }


class LevelResult(BaseModel):
    """Best recorded outcome for one level."""
    name: str
    score: int = 0
    star_count: int = 0
    words_found: int = 0


class Progress(BaseModel):
    """Results across levels plus the attempt in progress."""
    results: Dict[str, LevelResult] = Field(default_factory=dict)
    current_level_progress: Optional[LevelProgress] = None

    def get_current_level_progress(self) -> Optional[LevelProgress]:
        return self.current_level_progress

    def best_stars(self, name: str) -> int:
        result = self.results.get(name)
        return result.star_count if result else 0

    def record(self, progress: LevelProgress) -> LevelResult:
        """Keep ``progress`` as the level's result if it beats the stored one."""
        name = progress.level.name or ""
        candidate = LevelResult(
            name=name,
            score=progress.score,
            star_count=progress.star_count,
            words_found=len(progress.found_words),
        )
        best = self.results.get(name)
        if best is None or (candidate.star_count, candidate.score) > (best.star_count, best.score):
            self.results[name] = candidate
        return self.results[name]


class Model(BaseModel):
    """
    Root of a play session.

    Holds the level templates in play order and the progress tree. Level 0
    is always unlocked; later levels unlock once the previous level has
    earned at least one star.
    """
    levels: List[LevelRecord] = Field(default_factory=list)
    progress: Progress = Field(default_factory=Progress)

    def get_progress(self) -> Progress:
        return self.progress

    def is_unlocked(self, index: int) -> bool:
        if not 0 <= index < len(self.levels):
            raise IndexError(f"No level at index {index}")
        if index == 0:
            return True
        previous = self.levels[index - 1].name or ""
        return self.progress.best_stars(previous) >= 1

    def start_level(self, index: int) -> LevelProgress:
        """
        Make a fresh attempt on level ``index`` the current one.

        Raises:
            IndexError: If there is no such level
            ValueError: If the level is still locked
            InvalidLevelError: If the level does not validate
        """
        if not self.is_unlocked(index):
            raise ValueError(f"Level {index} ('{self.levels[index].name}') is locked")
        current = LevelProgress.start(self.levels[index])
        self.progress.current_level_progress = current
        return current

    def finish_level(self) -> Optional[LevelResult]:
        """Record and clear the current attempt."""
        current = self.progress.current_level_progress
        if current is None:
            return None
        current.stop(completed=current.completed)
        result = self.progress.record(current)
        self.progress.current_level_progress = None
        return result
