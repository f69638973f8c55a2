# Dictionary oracles answering "is this a real word?".
# The default oracle is backed by the wordfreq corpus: https://github.com/rspeer/wordfreq

import logging
from pathlib import Path
from typing import Iterable, Protocol, Set

from wordfreq import zipf_frequency

logger = logging.getLogger(__name__)

# Zipf scale: 1.0 is about once per 100 million words. Below that, most
# entries in the wordfreq lists are typos, fragments and tokenizer noise.
DEFAULT_MIN_ZIPF = 1.0


class RealnessChecker(Protocol):
    """Anything that can tell whether a word is correctly spelled in a language."""

    def is_real(self, word: str, language: str) -> bool:
        ...


class WordfreqChecker(object):
    '''
    Treats a word as real if it is purely alphabetic and wordfreq has seen it
    at least `min_zipf` often in `language`.
    '''
    def __init__(self, min_zipf=DEFAULT_MIN_ZIPF):
        self.min_zipf = min_zipf

    def is_real(self, word, language):
        if not word or not word.isalpha():
            return False
        freq = zipf_frequency(word, language)
        logger.debug("zipf(%s, %s) = %.2f", word, language, freq)
        return freq >= self.min_zipf

    def check_language(self, language):
        '''
        Raises ValueError if wordfreq has no word list for `language`.
        '''
        try:
            zipf_frequency("a", language)
        except LookupError as e:
            raise ValueError(f"No wordfreq word list for language '{language}'") from e


class WordSetChecker(object):
    '''
    Treats a word as real if it appears in a fixed set of lowercase words.
    The language argument is ignored.
    '''
    def __init__(self, words: Iterable[str]):
        self.words: Set[str] = {w.strip().lower() for w in words if w.strip()}

    @classmethod
    def from_file(cls, path) -> "WordSetChecker":
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Dictionary file not found: {path}")
        checker = cls(path.read_text(encoding="utf-8").splitlines())
        logger.info("Loaded %s dictionary words from %s", len(checker.words), path)
        return checker

    def is_real(self, word, language):
        return word.lower() in self.words


_DEFAULT = WordfreqChecker()


def check_word(word, language="en"):
    '''
    Returns True if `word` is a real word in `language` according to wordfreq.
    Returns False otherwise.
    '''
    return _DEFAULT.is_real(word, language)
