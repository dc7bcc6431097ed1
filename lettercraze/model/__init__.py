"""Game state models: board, words, levels and progress."""

from .models import (
    LevelType,
    Gravity,
    EventKind,
    Position,
    Star,
    GameConfig,
    GameEvent,
    load_config,
    normalize_word,
)
from .word import Word
from .board import Board, BoardSquare, Tile
from .level import Level, PuzzleLevel, LightningLevel, ThemeLevel, AnyLevel, LevelRecord
from .progress import LevelProgress, LevelResult, Progress, Model

__all__ = [
    "LevelType",
    "Gravity",
    "EventKind",
    "Position",
    "Star",
    "GameConfig",
    "GameEvent",
    "load_config",
    "normalize_word",
    "Word",
    "Board",
    "BoardSquare",
    "Tile",
    "Level",
    "PuzzleLevel",
    "LightningLevel",
    "ThemeLevel",
    "AnyLevel",
    "LevelRecord",
    "LevelProgress",
    "LevelResult",
    "Progress",
    "Model",
]
