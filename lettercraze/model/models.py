"""
Pydantic models shared across the model layer.

Type aliases for level tags and gravity, the star threshold, the game
configuration and the events the removal engine emits for presentation.
The board, level and progress classes live in their own modules.
"""

from pathlib import Path
from typing import List, Optional, Literal, Tuple
from pydantic import BaseModel, Field

import yaml


# Type aliases
LevelType = Literal["puzzle", "lightning", "theme"]
Gravity = Literal["down", "up"]
EventKind = Literal[
    "highlight_cleared",
    "selection_cleared",
    "word_rejected",
    "tiles_removed",
    "tiles_moved",
    "tiles_added",
    "score_changed",
    "word_found",
    "stars_changed",
    "time_changed",
    "level_ended",
]

Position = Tuple[int, int]


class Star(BaseModel):
    """A score threshold; obtained once the session score reaches it."""
    threshold: int = Field(..., ge=0)

    def is_obtained(self, score: int) -> bool:
        return score >= self.threshold


class GameConfig(BaseModel):
    """Rules and sources for a play session."""
    min_word_length: int = Field(default=3, ge=1)
    allow_duplicate_words: bool = True
    length_bonus: bool = False
    gravity: Gravity = "down"
    seed: Optional[int] = None
    dictionary_path: Optional[str] = None  # bundled list when unset


class GameEvent(BaseModel):
    """
    One state change for the presentation layer to apply.

    Only the fields relevant to ``kind`` are set: squares for highlight,
    removal and refill events, ``moves`` for gravity, values for score,
    stars and time.
    """
    kind: EventKind
    positions: List[Position] = Field(default_factory=list)
    moves: List[Tuple[Position, Position]] = Field(default_factory=list)
    word: Optional[str] = None
    value: Optional[float] = None
    reason: Optional[str] = None


def load_config(config_path: str | Path) -> GameConfig:
    """Load a game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def normalize_word(word: str) -> str:
    """Words are compared stripped and upper-cased."""
    return word.strip().upper()
