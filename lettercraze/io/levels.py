"""
Level definitions in YAML.

A level file holds one record:

    type: puzzle
    name: Warm Up
    board:
      - "C A T _ _ _"
      - "_ _ _ _ # _"
    stars: [10, 50, 100]
    max_num_words: 5

``puzzle`` levels carry ``max_num_words``, ``lightning`` levels
``time_limit`` (seconds) and ``theme`` levels ``theme_words``.
"""

from pathlib import Path
from typing import Annotated, Any, Dict, List, Optional
from pydantic import BaseModel, Field, TypeAdapter, ValidationError

import yaml

from ..exceptions import LevelLoadError
from ..model.level import AnyLevel, Level, LightningLevel, PuzzleLevel, ThemeLevel
from ..model.models import LevelType, Star
from ..tools.letters import LetterDictionary
from .parsing import format_board, parse_board


_TYPE_PARAMETERS: Dict[str, str] = {
    "puzzle": "max_num_words",
    "lightning": "time_limit",
    "theme": "theme_words",
}

_LEVEL_ADAPTER = TypeAdapter(AnyLevel)


class LevelDefinition(BaseModel):
    """The on-disk shape of a level."""
    type: LevelType
    name: Optional[str] = None
    board: List[str] = Field(default_factory=list)
    stars: List[Annotated[int, Field(ge=0)]] = Field(default_factory=list)
    max_num_words: Optional[int] = None
    time_limit: Optional[int] = None
    theme_words: Optional[List[str]] = None


def parse_level(data: Dict[str, Any], letters: Optional[LetterDictionary] = None) -> Level:
    """
    Build a level from a parsed YAML mapping.

    Structural problems (unknown type, unreadable board, a parameter that
    belongs to another level type) raise; missing or meaningless values
    load and are reported by ``Level.is_valid()``.

    Raises:
        LevelLoadError: If the record cannot be turned into a level
    """
    if not isinstance(data, dict):
        raise LevelLoadError(f"Level record must be a mapping, got {type(data).__name__}")

    try:
        definition = LevelDefinition(**data)
    except ValidationError as exc:
        raise LevelLoadError(f"Invalid level record: {exc}") from exc

    own_parameter = _TYPE_PARAMETERS[definition.type]
    for parameter in _TYPE_PARAMETERS.values():
        if parameter != own_parameter and getattr(definition, parameter) is not None:
            raise LevelLoadError(
                f"'{parameter}' does not apply to {definition.type} level '{definition.name}'"
            )

    board, errors = parse_board(definition.board, letters)
    if errors:
        raise LevelLoadError(
            f"Invalid board in level '{definition.name}': {[e.message for e in errors]}"
        )

    return _LEVEL_ADAPTER.validate_python({
        "type": definition.type,
        "name": definition.name,
        "board": board,
        "stars": [Star(threshold=t) for t in definition.stars],
        own_parameter: getattr(definition, own_parameter),
    })


def level_to_dict(level: Level) -> Dict[str, Any]:
    """The YAML mapping for ``level``; inverse of :func:`parse_level`."""
    data: Dict[str, Any] = {
        "type": level.type,
        "name": level.name,
        "board": format_board(level.board) if level.board is not None else [],
        "stars": [star.threshold for star in level.stars or []],
    }
    if isinstance(level, PuzzleLevel):
        data["max_num_words"] = level.max_num_words
    elif isinstance(level, LightningLevel):
        data["time_limit"] = level.time_limit
    elif isinstance(level, ThemeLevel):
        data["theme_words"] = list(level.theme_words or [])
    return data


def load_level(path: str | Path, letters: Optional[LetterDictionary] = None) -> Level:
    """Load a level from a YAML file."""
    path = Path(path)

    if not path.exists():
        raise LevelLoadError(f"Level file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise LevelLoadError(f"Cannot parse {path}: {exc}") from exc

    return parse_level(data, letters)


def save_level(level: Level, path: str | Path) -> None:
    """Write ``level`` to a YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.safe_dump(level_to_dict(level), f, sort_keys=False)


def load_levels(directory: str | Path, letters: Optional[LetterDictionary] = None) -> List[Level]:
    """Load every ``*.yaml`` level in ``directory``, ordered by file name."""
    directory = Path(directory)
    if not directory.is_dir():
        raise LevelLoadError(f"Level directory not found: {directory}")
    paths = sorted(list(directory.glob("*.yaml")) + list(directory.glob("*.yml")))
    return [load_level(path, letters) for path in paths]
