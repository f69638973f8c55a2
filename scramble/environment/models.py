"""
Pydantic models for the environment layer.

This module contains the configuration and result models used by the game and
the command-line shell. The game logic itself lives in game.py.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from ..verifiers.checks import MIN_WORD_LENGTH
from ..verifiers.data import DEFAULT_MIN_ZIPF
from ..verifiers.models import ValidationError


class GameConfig(BaseModel):
    """Configuration for a game session."""
    word_list: Optional[str] = None  # None uses the bundled start.txt
    dictionary: Optional[str] = None  # None uses wordfreq
    language: str = "en"
    min_length: int = Field(default=MIN_WORD_LENGTH, ge=1)
    min_zipf: float = Field(default=DEFAULT_MIN_ZIPF, ge=0)
    seed: Optional[int] = None


class SubmissionResult(BaseModel):
    """Outcome of submitting one word to the game."""
    accepted: bool
    word: str = ""
    score: int = 0
    error: Optional[ValidationError] = None


class GameSummary(BaseModel):
    """Snapshot of a finished (or abandoned) game."""
    root_word: str
    score: int = 0
    used_words: List[str] = Field(default_factory=list)
