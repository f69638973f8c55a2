"""Loading the newline-delimited list of root words."""

import logging
import random
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

DEFAULT_WORD_LIST = Path(__file__).parent / "data" / "start.txt"


class WordListError(RuntimeError):
    """The root word list is missing, unreadable or empty. The game cannot start."""


def load_word_list(path: Optional[str | Path] = None) -> List[str]:
    """
    Load root words from a UTF-8 text file, one word per line.

    Words are trimmed and lowercased; blank lines are skipped.

    Raises:
        WordListError: If the file is missing, unreadable or has no words
    """
    path = Path(path) if path is not None else DEFAULT_WORD_LIST

    if not path.exists():
        raise WordListError(f"Couldn't load {path} file with words")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise WordListError(f"Couldn't read {path}: {e}") from e

    words = [line.strip().lower() for line in text.splitlines() if line.strip()]
    if not words:
        raise WordListError(f"{path} contains no words")

    logger.info("Loaded %s root words from %s", len(words), path)
    return words


def pick_root_word(words: List[str], rng: random.Random) -> str:
    """Choose one root word uniformly at random."""
    if not words:
        raise WordListError("Cannot pick a root word from an empty list")
    return rng.choice(words)
