"""Data models for word removal results."""

from typing import List, Optional
from pydantic import BaseModel, Field

from ..model.models import GameEvent


class RemovalError(BaseModel):
    """A single reason a selection was refused, or an action failed."""
    code: str
    message: str
    word: Optional[str] = None


class SelectionCheck(BaseModel):
    """Result of checking a candidate word against the level rules."""
    accepted: bool
    word: str = ""
    errors: List[RemovalError] = Field(default_factory=list)


class RemovalResult(BaseModel):
    """
    Outcome of releasing a selection.

    ``errors`` lists why a word was rejected (an ordinary outcome);
    ``error`` is set only when the action itself could not be carried out.
    The state fields are the values after the removal.
    """
    accepted: bool = False
    ignored: bool = False
    word: Optional[str] = None
    points: int = 0
    score: int = 0
    found_words: List[str] = Field(default_factory=list)
    star_count: int = 0
    is_playing: bool = True
    board: List[List[Optional[str]]] = Field(default_factory=list)
    events: List[GameEvent] = Field(default_factory=list)
    errors: List[RemovalError] = Field(default_factory=list)
    error: Optional[RemovalError] = None


class TickResult(BaseModel):
    """Outcome of advancing the lightning clock."""
    elapsed: float = 0.0
    remaining: Optional[float] = None
    is_playing: bool = True
    events: List[GameEvent] = Field(default_factory=list)
