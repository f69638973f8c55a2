"""
Word verification module for validating a player's submission.

Checks run in a fixed order and stop at the first failure, so the order
decides which message the player sees when a word breaks several rules:
1. Non-empty (empty input is silently skipped, not an error)
2. Originality (not accepted before, not the root word itself)
3. Feasibility (spelled from the root's letters, each used at most once)
4. Realness (known to the dictionary oracle)
5. Minimum length
"""

import logging
from typing import Sequence

from .models import ValidationError, ValidationResult
from .checks import (
    MIN_WORD_LENGTH,
    normalize,
    is_original,
    is_possible,
    is_real,
    is_long_enough,
)
from .data import RealnessChecker

logger = logging.getLogger(__name__)


def already_used_error(word: str) -> ValidationError:
    return ValidationError(
        code="ALREADY_USED",
        title="Word used already",
        message="Be more original!",
        word=word,
    )


def not_possible_error(word: str, root_word: str) -> ValidationError:
    return ValidationError(
        code="NOT_POSSIBLE",
        title="Word not possible",
        message=f"You can't spell that word from '{root_word}'!",
        word=word,
    )


def not_real_error(word: str) -> ValidationError:
    return ValidationError(
        code="NOT_REAL",
        title="Word not recognized",
        message="You can't just make them up, you know!",
        word=word,
    )


def too_short_error(word: str, min_length: int) -> ValidationError:
    return ValidationError(
        code="TOO_SHORT",
        title="Word too short",
        message=f"Words must be at least {min_length} letters long.",
        word=word,
    )


def validate(
    candidate: str,
    root_word: str,
    used_words: Sequence[str],
    checker: RealnessChecker,
    *,
    language: str = "en",
    min_length: int = MIN_WORD_LENGTH,
) -> ValidationResult:
    """
    Main verification function: validates one raw submission against the game.

    Returns a ValidationResult with:
    - valid: True if the word passes every check
    - word: the normalized candidate
    - error: the first failing check's rejection (None if valid or skipped)
    - skipped: True for empty input, which is neither accepted nor an error
    """
    word = normalize(candidate)

    if not word:
        return ValidationResult(valid=False, word=word, skipped=True)

    if not is_original(word, root_word, used_words):
        error = already_used_error(word)
    elif not is_possible(word, root_word):
        error = not_possible_error(word, root_word)
    elif not is_real(word, checker, language):
        error = not_real_error(word)
    elif not is_long_enough(word, min_length):
        error = too_short_error(word, min_length)
    else:
        return ValidationResult(valid=True, word=word)

    logger.debug("Rejected '%s' (%s)", word, error.code)
    return ValidationResult(valid=False, word=word, error=error)
