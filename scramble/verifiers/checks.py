"""Predicate checks used by the validation pipeline."""

from typing import Sequence

from .data import RealnessChecker


MIN_WORD_LENGTH = 3


def normalize(word: str) -> str:
    """Lowercase and trim surrounding whitespace."""
    return word.lower().strip()


def is_original(word: str, root_word: str, used_words: Sequence[str]) -> bool:
    """A word is original if it was not accepted before and is not the root word itself."""
    return word not in used_words and word != root_word


def is_possible(word: str, root_word: str) -> bool:
    """
    Check that `word` can be spelled from the letters of `root_word`.

    Each letter of the root may be used at most once: matched letters are
    removed from a working copy of the root as the word is consumed.
    """
    remaining = list(root_word)
    for letter in word:
        if letter not in remaining:
            return False
        remaining.remove(letter)
    return True


def is_real(word: str, checker: RealnessChecker, language: str = "en") -> bool:
    """Ask the dictionary oracle whether `word` is a correctly spelled word."""
    return checker.is_real(word, language)


def is_long_enough(word: str, min_length: int = MIN_WORD_LENGTH) -> bool:
    return len(word) >= min_length
