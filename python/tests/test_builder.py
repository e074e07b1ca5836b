"""Tests for the builder module."""

import pytest
import tempfile
import threading
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from lexitrie.builder.dictionary import DictionaryBuilder
from lexitrie.builder.runner import visit_all
from lexitrie.ingest import word_list
from lexitrie.trie import Trie


class TestDictionaryBuilder:
    """Tests for DictionaryBuilder."""

    def test_add_word(self):
        """Test valid new words are accepted."""
        builder = DictionaryBuilder()
        assert builder.add_word("hello")
        assert builder.add_word("ice cream")
        assert builder.get_word_count() == 2

    def test_add_word_rejects_invalid(self):
        builder = DictionaryBuilder(min_length=3, max_length=5)
        assert not builder.add_word("hi")
        assert not builder.add_word("goodbye")
        assert not builder.add_word("c4t")
        assert builder.stats.total_discarded == 3
        assert builder.get_word_count() == 0

    def test_add_word_rejects_line_endings(self):
        builder = DictionaryBuilder()
        assert not builder.add_word("cat\n")
        assert not builder.add_word("\u017fun")
        assert builder.get_words() == []

    def test_add_word_duplicates(self):
        builder = DictionaryBuilder()
        assert builder.add_word("cat")
        assert not builder.add_word("cat")
        assert builder.stats.total_duplicates == 1
        assert builder.stats.total_raw == 2
        assert builder.stats.total_valid == 1

    def test_add_words(self):
        builder = DictionaryBuilder()
        accepted = builder.add_words(["cat", "dog", "cat", "1"])
        assert accepted == 2
        assert builder.get_words() == ["cat", "dog"]

    def test_add_ingest_result(self, sample_wordlist_content):
        """Test the ingestor's discard and duplicate counts carry over."""
        with tempfile.NamedTemporaryFile(
            mode="w", suffix=".txt", delete=False, encoding="utf-8"
        ) as f:
            f.write(sample_wordlist_content)
            filepath = Path(f.name)

        try:
            result = word_list.ingest(filepath)
            builder = DictionaryBuilder()
            assert builder.add_ingest_result(result) == 7
            assert builder.stats.total_raw == 11
            assert builder.stats.total_discarded == 3
            assert builder.stats.total_duplicates == 1
            assert builder.stats.total_valid == 7
        finally:
            filepath.unlink()

    def test_build(self):
        """Test both tries hold every word."""
        builder = DictionaryBuilder()
        builder.add_words(["cat", "car", "dog"])
        forward, reverse = builder.build()

        assert isinstance(forward, Trie)
        assert sorted(forward) == ["car", "cat", "dog"]
        assert sorted(reverse) == ["god", "rac", "tac"]
        assert builder.stats.forward_nodes == forward.node_count()
        assert builder.stats.reverse_nodes == reverse.node_count()

    def test_build_empty(self):
        forward, reverse = DictionaryBuilder().build()
        assert len(forward) == 0
        assert len(reverse) == 0

    def test_build_deterministic(self):
        """Test the same input builds identical tries."""
        words = ["stagecoach", "coach", "cat", "car"]
        first = DictionaryBuilder()
        first.add_words(words)
        second = DictionaryBuilder()
        second.add_words(words)

        a, _ = first.build()
        b, _ = second.build()
        assert a.find_starting_with("") == b.find_starting_with("")
        assert a.node_count() == b.node_count()


class TestVisitAll:
    """Tests for the per-node runner."""

    @pytest.fixture
    def nodes(self):
        trie = Trie()
        for word in ["alpha", "beta", "gamma", "delta", "epsilon"]:
            trie.insert(word)
        return trie, list(trie.word_nodes())

    def test_inline(self, nodes):
        trie, word_nodes = nodes
        results = visit_all(word_nodes, trie.word_of)
        assert results == [trie.word_of(node) for node in word_nodes]

    def test_threaded_keeps_order(self, nodes):
        """Test results come back in node order across threads."""
        trie, word_nodes = nodes
        results = visit_all(word_nodes, trie.word_of, workers=4)
        assert results == [trie.word_of(node) for node in word_nodes]

    @pytest.mark.parametrize("workers", [0, 1, 3])
    def test_progress_on_calling_thread(self, nodes, workers):
        """Test progress runs once per node on the caller's thread."""
        trie, word_nodes = nodes
        caller = threading.get_ident()
        calls = []

        def progress():
            calls.append(threading.get_ident())

        visit_all(word_nodes, trie.word_of, workers=workers, progress=progress)
        assert len(calls) == len(word_nodes)
        assert set(calls) == {caller}

    def test_exception_propagates(self, nodes):
        _, word_nodes = nodes

        def boom(node):
            raise RuntimeError("visit failed")

        with pytest.raises(RuntimeError, match="visit failed"):
            visit_all(word_nodes, boom, workers=2)
