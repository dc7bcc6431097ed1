"""
Level templates.

A level is a tagged record: the shared ``name``, ``board`` and ``stars``
plus exactly one end-condition parameter chosen by ``type``. Templates are
loaded once and never played directly; every session plays a ``copy()``.
"""

from typing import Annotated, List, Literal, Optional, Union
from pydantic import BaseModel, Field

from .board import Board
from .models import Star, normalize_word


class Level(BaseModel):
    """
    Fields shared by every level type.

    ``type`` is a plain string here so that a level with an unrecognised tag
    can still be represented and rejected by the removal engine.
    """
    type: str
    name: Optional[str] = None
    board: Optional[Board] = None
    stars: Optional[List[Star]] = None

    def get_type(self) -> str:
        return self.type

    def _has_valid_common_fields(self) -> bool:
        if not self.name or self.board is None or not self.stars:
            return False
        thresholds = [star.threshold for star in self.stars]
        if thresholds != sorted(thresholds):
            return False
        return self.board.is_valid()

    def is_valid(self) -> bool:
        return self._has_valid_common_fields()

    def copy(self) -> "Level":
        """Deep copy, so a session can mutate the board freely."""
        return self.model_copy(deep=True)


class PuzzleLevel(Level):
    """Ends after a fixed number of words."""
    type: Literal["puzzle"] = "puzzle"
    max_num_words: Optional[int] = None

    def is_valid(self) -> bool:
        return (
            self._has_valid_common_fields()
            and self.max_num_words is not None
            and self.max_num_words > 0
        )


class LightningLevel(Level):
    """Ends when the time limit (seconds) runs out."""
    type: Literal["lightning"] = "lightning"
    time_limit: Optional[int] = None

    def is_valid(self) -> bool:
        return (
            self._has_valid_common_fields()
            and self.time_limit is not None
            and self.time_limit > 0
        )


class ThemeLevel(Level):
    """Ends when every word of the theme has been found."""
    type: Literal["theme"] = "theme"
    theme_words: Optional[List[str]] = None

    def targets(self) -> List[str]:
        """Theme words normalized for comparison, duplicates dropped."""
        seen: List[str] = []
        for word in self.theme_words or []:
            word = normalize_word(word)
            if word and word not in seen:
                seen.append(word)
        return seen

    def is_valid(self) -> bool:
        return self._has_valid_common_fields() and bool(self.targets())


AnyLevel = Annotated[
    Union[PuzzleLevel, LightningLevel, ThemeLevel],
    Field(discriminator="type"),
]

# Known tags resolve to their variant; any other tag stays a plain Level.
LevelRecord = Union[AnyLevel, Level]
