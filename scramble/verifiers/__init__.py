"""Word verification for word-scramble."""

from .verify import validate
from .models import RejectionCode, ValidationError, ValidationResult
from .checks import (
    MIN_WORD_LENGTH,
    normalize,
    is_original,
    is_possible,
    is_real,
    is_long_enough,
)
from .data import RealnessChecker, WordfreqChecker, WordSetChecker, check_word

__all__ = [
    # Main verification
    "validate",
    # Models
    "RejectionCode",
    "ValidationError",
    "ValidationResult",
    # Checks
    "MIN_WORD_LENGTH",
    "normalize",
    "is_original",
    "is_possible",
    "is_real",
    "is_long_enough",
    # Dictionary
    "RealnessChecker",
    "WordfreqChecker",
    "WordSetChecker",
    "check_word",
]
