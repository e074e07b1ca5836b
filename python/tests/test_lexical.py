"""Tests for the lexical database backends."""

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from lexitrie.lexical import LexicalDatabase, WordNetDatabase


class TestLexicalDatabase:
    """Tests for the base interface."""

    def test_abstract(self):
        with pytest.raises(TypeError):
            LexicalDatabase()

    def test_default_all_words(self):
        class Minimal(LexicalDatabase):
            def pos_tags_for(self, word):
                return set()

            def synsets_of(self, word, pos):
                return []

        assert list(Minimal().all_words()) == []

    def test_fake_backend(self, lexical_db):
        assert lexical_db.pos_tags_for("finally") == {"r"}
        assert lexical_db.synsets_of("finally", "n") == []


class TestWordNetDatabase:
    """Tests for the nltk WordNet backend."""

    @pytest.fixture
    def wordnet(self):
        pytest.importorskip("nltk")
        from nltk.corpus import wordnet

        try:
            wordnet.ensure_loaded()
        except LookupError:
            pytest.skip("WordNet data not installed")
        return WordNetDatabase()

    def test_construction_is_lazy(self):
        db = WordNetDatabase()
        assert db._wn is None
        assert db.auto_download is False

    def test_pos_tags(self, wordnet):
        assert "n" in wordnet.pos_tags_for("coach")
        assert "v" in wordnet.pos_tags_for("coach")

    def test_satellite_folded_into_adjective(self, wordnet):
        tags = wordnet.pos_tags_for("beautiful")
        assert "a" in tags
        assert "s" not in tags

    def test_exact_lemma_only(self, wordnet):
        """Test an inflected form does not pick up its base form's synsets."""
        assert wordnet.pos_tags_for("running") != wordnet.pos_tags_for("run")
        assert wordnet.synsets_of("coaches", "n") == []

    def test_synsets_of(self, wordnet):
        names = wordnet.synsets_of("stagecoach", "n")
        assert "stage" in names
        assert "stagecoach" in names

    def test_phrase(self, wordnet):
        assert "finally" in wordnet.synsets_of("in the end", "r")

    def test_unknown_word(self, wordnet):
        assert wordnet.pos_tags_for("qwzxv") == set()
        assert wordnet.synsets_of("qwzxv", "n") == []

    def test_all_words_uses_spaces(self, wordnet):
        for word in wordnet.all_words():
            assert "_" not in word
            if " " in word:
                break
        else:
            pytest.fail("no multi-word lemmas")


class FakeSynset:
    def __init__(self, name, pos, lemma_names):
        self._name = name
        self._pos = pos
        self._lemma_names = lemma_names

    def name(self):
        return self._name

    def pos(self):
        return self._pos

    def lemma_names(self):
        return self._lemma_names


class RecordingReader:
    """Corpus reader stand-in that records overlapping lookups."""

    def __init__(self):
        self.active = 0
        self.max_active = 0
        self._count_lock = threading.Lock()

    def synsets(self, form, pos=None):
        with self._count_lock:
            self.active += 1
            self.max_active = max(self.max_active, self.active)
        time.sleep(0.005)
        with self._count_lock:
            self.active -= 1
        synsets = [
            FakeSynset(f"{form}.n.01", "n", [form, "other"]),
            FakeSynset(f"{form}.s.01", "s", [form]),
            FakeSynset("base.v.01", "v", ["base"]),
        ]
        if pos is None:
            return synsets
        return [s for s in synsets if s.pos() == pos]


class TestWordNetLocking:
    """Tests for lookups shared between worker threads."""

    @pytest.fixture
    def db(self):
        db = WordNetDatabase()
        db._wn = RecordingReader()
        return db

    def test_lookups_filtered(self, db):
        assert db.pos_tags_for("coach") == {"n", "a"}
        assert db.synsets_of("coach", "n") == ["coach", "other"]
        assert db.synsets_of("coach", "a") == ["coach"]

    def test_threads_never_overlap(self, db):
        words = [f"word{i}" for i in range(16)]
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(db.pos_tags_for, words))
        assert results == [{"n", "a"}] * len(words)
        assert db._wn.max_active == 1
