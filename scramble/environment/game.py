import logging
import random
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, ConfigDict

from .models import GameConfig, GameSummary, SubmissionResult
from .word_list import load_word_list, pick_root_word
from ..verifiers.verify import validate
from ..verifiers.data import RealnessChecker, WordfreqChecker, WordSetChecker

logger = logging.getLogger(__name__)


class Game(BaseModel):
    """
    Manages the state of a single word-scramble game.

    Holds the root word, the words accepted so far and the score. The only
    ways to change that state are start() and add_new_word().

    Attributes:
        root_word: The word every answer must be spelled from
        used_words: Accepted words, newest first
        score: One point per accepted word; always len(used_words)
        config: Game configuration (word list, dictionary, minimum length)
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    root_word: str = ""
    used_words: List[str] = Field(default_factory=list)
    score: int = Field(default=0, ge=0)
    config: GameConfig = Field(default_factory=GameConfig)
    _rng: random.Random = None
    _checker: Any = None
    _words: Optional[List[str]] = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.config.seed)

    @classmethod
    def create(
        cls,
        config: Optional[GameConfig] = None,
        checker: Optional[RealnessChecker] = None,
        **config_kwargs: Any
    ) -> "Game":
        """
        Factory method to create a game and start it.

        Args:
            config: Optional GameConfig instance
            checker: Dictionary oracle to use instead of the configured one
            **config_kwargs: Config parameters if config not provided

        Returns:
            A started Game instance

        Raises:
            WordListError: If the word list cannot be loaded
        """
        if config is None:
            config = GameConfig(**config_kwargs)

        game = cls(config=config)
        if checker is not None:
            game._checker = checker
        game.start()
        return game

    @property
    def checker(self) -> RealnessChecker:
        """The dictionary oracle, built from the config on first use unless injected."""
        if self._checker is None:
            self._checker = build_checker(self.config)
        return self._checker

    @property
    def words(self) -> List[str]:
        """The loaded root word list, read once per game instance."""
        if self._words is None:
            self._words = load_word_list(self.config.word_list)
        return self._words

    def start(self) -> str:
        """
        Start (or restart) the game with a fresh root word.

        Clears the used words, resets the score and picks a new root word
        uniformly at random. The new word may repeat the previous game's.

        Returns:
            The new root word

        Raises:
            WordListError: If the word list cannot be loaded
        """
        root_word = pick_root_word(self.words, self._rng)

        self.used_words = []
        self.score = 0
        self.root_word = root_word
        logger.info("New game with root word '%s'", root_word)
        return root_word

    def add_new_word(self, candidate: str) -> SubmissionResult:
        """
        Validate a raw submission and, if it passes, record it.

        An accepted word is put at the front of used_words and the score goes
        up by one. Rejected and empty submissions leave the state untouched.
        """
        result = validate(
            candidate,
            self.root_word,
            self.used_words,
            self.checker,
            language=self.config.language,
            min_length=self.config.min_length,
        )

        if not result.valid:
            return SubmissionResult(
                accepted=False,
                word=result.word,
                score=self.score,
                error=result.error,
            )

        self.used_words = [result.word] + self.used_words
        self.score += 1
        return SubmissionResult(accepted=True, word=result.word, score=self.score)

    def get_state(self) -> Dict:
        """
        Get the current game state as a dictionary.

        Returns:
            Dictionary containing game state
        """
        return {
            "root_word": self.root_word,
            "used_words": list(self.used_words),
            "score": self.score,
            "word_count": len(self.used_words),
        }

    def summary(self) -> GameSummary:
        return GameSummary(
            root_word=self.root_word,
            score=self.score,
            used_words=list(self.used_words),
        )


def build_checker(config: GameConfig) -> RealnessChecker:
    """
    Pick the dictionary oracle named by the config.

    Raises:
        FileNotFoundError: If the dictionary file does not exist
        ValueError: If wordfreq has no word list for the configured language
    """
    if config.dictionary:
        return WordSetChecker.from_file(config.dictionary)
    checker = WordfreqChecker(min_zipf=config.min_zipf)
    checker.check_language(config.language)
    return checker
