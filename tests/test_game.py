"""Test game state, the accept path and restarting."""

from pathlib import Path

import pytest

from scramble.environment import (
    Game,
    GameConfig,
    WordListError,
    build_checker,
)
from scramble.verifiers import WordSetChecker, WordfreqChecker


DICTIONARY = WordSetChecker(["rag", "range", "anger", "organ", "groan", "gear", "roe", "ago", "go"])


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


@pytest.fixture
def orange_list(tmp_path: Path) -> str:
    return _write(tmp_path / "start.txt", ["orange"])


@pytest.fixture
def game(orange_list) -> Game:
    return Game.create(word_list=orange_list, checker=DICTIONARY)


class TestGameCreation:
    """Test cases for creating and starting a game."""

    def test_create_starts_game(self, game):
        """A created game has a root word and an empty score."""
        assert game.root_word == "orange"
        assert game.used_words == []
        assert game.score == 0

    def test_create_with_config(self, orange_list):
        """A GameConfig instance can be passed directly."""
        config = GameConfig(word_list=orange_list, min_length=4)
        game = Game.create(config=config, checker=DICTIONARY)
        assert game.config.min_length == 4
        assert game.root_word == "orange"

    def test_root_word_is_lowercased(self, tmp_path):
        """Root words from the list are normalized."""
        path = _write(tmp_path / "start.txt", ["  ORANGE  "])
        game = Game.create(word_list=path, checker=DICTIONARY)
        assert game.root_word == "orange"

    def test_missing_word_list_is_fatal(self, tmp_path):
        """Without a word list the game cannot start."""
        with pytest.raises(WordListError):
            Game.create(word_list=str(tmp_path / "nope.txt"), checker=DICTIONARY)

    def test_empty_word_list_is_fatal(self, tmp_path):
        """A list with only blank lines is as bad as a missing one."""
        path = _write(tmp_path / "start.txt", ["", "   ", ""])
        with pytest.raises(WordListError):
            Game.create(word_list=path, checker=DICTIONARY)

    def test_bundled_word_list(self):
        """The default config uses the bundled start.txt."""
        game = Game.create(checker=DICTIONARY)
        assert game.root_word in game.words
        assert len(game.words) > 100
        assert all(w == w.lower() and w.isalpha() for w in game.words)

    def test_seed_is_reproducible(self, tmp_path):
        """The same seed picks the same sequence of root words."""
        path = _write(tmp_path / "start.txt", ["orange", "listen", "silkworm", "airplane", "kitchen"])
        a = Game.create(word_list=path, seed=7, checker=DICTIONARY)
        b = Game.create(word_list=path, seed=7, checker=DICTIONARY)
        roots_a = [a.root_word] + [a.start() for _ in range(5)]
        roots_b = [b.root_word] + [b.start() for _ in range(5)]
        assert roots_a == roots_b


class TestAddNewWord:
    """Test the accept and reject paths."""

    def test_accept_increments_score(self, game):
        """An accepted word scores one point."""
        result = game.add_new_word("rag")
        assert result.accepted is True
        assert result.word == "rag"
        assert result.score == 1
        assert game.score == 1
        assert game.used_words == ["rag"]

    def test_newest_word_first(self, game):
        """Accepted words are prepended."""
        game.add_new_word("rag")
        game.add_new_word("range")
        game.add_new_word("organ")
        assert game.used_words == ["organ", "range", "rag"]

    def test_rejection_leaves_state(self, game):
        """A rejected word changes nothing."""
        game.add_new_word("rag")
        before = game.get_state()
        result = game.add_new_word("xyz")
        assert result.accepted is False
        assert result.error.code == "NOT_POSSIBLE"
        assert result.score == 1
        assert game.get_state() == before

    @pytest.mark.parametrize("raw", ["", "  ", "\t"])
    def test_empty_input_is_silent(self, game, raw):
        """Empty input is neither accepted nor an error."""
        result = game.add_new_word(raw)
        assert result.accepted is False
        assert result.error is None
        assert game.score == 0
        assert game.used_words == []

    def test_normalized_word_is_stored(self, game):
        """Words are stored lowercased and trimmed."""
        game.add_new_word("  RAG ")
        assert game.used_words == ["rag"]

    def test_min_length_from_config(self, orange_list):
        """The configured minimum length applies."""
        game = Game.create(word_list=orange_list, min_length=4, checker=DICTIONARY)
        result = game.add_new_word("rag")
        assert result.error.code == "TOO_SHORT"

    def test_score_matches_used_words(self, game):
        """Score always equals the number of used words."""
        for raw in ["rag", "rag", "xyz", "", "orange", "gear", "go", "arg", "anger", "GEAR"]:
            game.add_new_word(raw)
            assert game.score == len(game.used_words)
        assert game.used_words == ["anger", "gear", "rag"]
        assert len(set(game.used_words)) == len(game.used_words)
        assert game.root_word not in game.used_words

    def test_orange_scenario(self, game):
        """Walk through a short game on 'orange'."""
        first = game.add_new_word("rag")
        assert first.accepted is True
        assert game.score == 1
        assert game.used_words == ["rag"]

        again = game.add_new_word("rag")
        assert again.error.code == "ALREADY_USED"

        root = game.add_new_word("orange")
        assert root.error.code == "ALREADY_USED"

        nonsense = game.add_new_word("xyz")
        assert nonsense.error.code == "NOT_POSSIBLE"

        assert game.score == 1
        assert game.used_words == ["rag"]


class TestRestart:
    """Test restarting a game."""

    def test_restart_clears_state(self, game):
        """Restart empties the used words and resets the score."""
        game.add_new_word("rag")
        game.add_new_word("gear")
        root = game.start()
        assert root == "orange"
        assert game.used_words == []
        assert game.score == 0

    def test_restart_draws_from_list(self, tmp_path):
        """A restarted game's root word comes from the configured list."""
        words = ["orange", "listen", "silkworm"]
        path = _write(tmp_path / "start.txt", words)
        game = Game.create(word_list=path, seed=1, checker=DICTIONARY)
        for _ in range(20):
            assert game.start() in words

    def test_word_accepted_again_after_restart(self, game):
        """Used words do not carry over to the next game."""
        game.add_new_word("rag")
        game.start()
        assert game.add_new_word("rag").accepted is True

    def test_word_list_read_once(self, tmp_path):
        """Restarting reuses the loaded list even if the file disappears."""
        path = tmp_path / "start.txt"
        _write(path, ["orange"])
        game = Game.create(word_list=str(path), checker=DICTIONARY)
        path.unlink()
        assert game.start() == "orange"


class TestState:
    """Test state snapshots."""

    def test_get_state(self, game):
        game.add_new_word("rag")
        assert game.get_state() == {
            "root_word": "orange",
            "used_words": ["rag"],
            "score": 1,
            "word_count": 1,
        }

    def test_summary(self, game):
        game.add_new_word("gear")
        summary = game.summary()
        assert summary.root_word == "orange"
        assert summary.score == 1
        assert summary.used_words == ["gear"]


class TestCheckerSelection:
    """Test how the dictionary oracle is chosen."""

    def test_default_is_wordfreq(self):
        checker = build_checker(GameConfig(min_zipf=2.5))
        assert isinstance(checker, WordfreqChecker)
        assert checker.min_zipf == 2.5

    def test_unknown_language(self):
        """An unsupported wordfreq language fails when the oracle is built."""
        with pytest.raises(ValueError, match="language 'xx'"):
            build_checker(GameConfig(language="xx"))

    def test_dictionary_file_ignores_language(self, tmp_path):
        """A word-set dictionary does not depend on wordfreq languages."""
        path = _write(tmp_path / "dict.txt", ["rag"])
        checker = build_checker(GameConfig(dictionary=path, language="xx"))
        assert checker.is_real("rag", "xx") is True

    def test_dictionary_file(self, tmp_path):
        path = _write(tmp_path / "dict.txt", ["rag", "gear"])
        checker = build_checker(GameConfig(dictionary=path))
        assert isinstance(checker, WordSetChecker)
        assert checker.words == {"rag", "gear"}

    def test_checker_built_from_config(self, orange_list, tmp_path):
        """Without an injected oracle the game uses the configured dictionary."""
        dictionary = _write(tmp_path / "dict.txt", ["gear"])
        game = Game.create(word_list=orange_list, dictionary=dictionary)
        assert game.add_new_word("gear").accepted is True
        assert game.add_new_word("rag").error.code == "NOT_REAL"
