"""Game environment for word-scramble."""

from .models import GameConfig, SubmissionResult, GameSummary
from .word_list import DEFAULT_WORD_LIST, WordListError, load_word_list, pick_root_word
from .game import Game, build_checker

__all__ = [
    "GameConfig",
    "SubmissionResult",
    "GameSummary",
    "DEFAULT_WORD_LIST",
    "WordListError",
    "load_word_list",
    "pick_root_word",
    "Game",
    "build_checker",
]
