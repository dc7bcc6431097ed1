"""Level definition parsing and YAML persistence."""

from .parsing import LayoutError, parse_board, format_board, tokenize_row
from .levels import (
    LevelDefinition,
    parse_level,
    level_to_dict,
    load_level,
    save_level,
    load_levels,
)

__all__ = [
    # Parsing
    "LayoutError",
    "parse_board",
    "format_board",
    "tokenize_row",
    # Levels
    "LevelDefinition",
    "parse_level",
    "level_to_dict",
    "load_level",
    "save_level",
    "load_levels",
]
