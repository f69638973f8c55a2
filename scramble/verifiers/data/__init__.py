from .dictionary import (
    DEFAULT_MIN_ZIPF,
    RealnessChecker,
    WordfreqChecker,
    WordSetChecker,
    check_word,
)

__all__ = [
    "DEFAULT_MIN_ZIPF",
    "RealnessChecker",
    "WordfreqChecker",
    "WordSetChecker",
    "check_word",
]
