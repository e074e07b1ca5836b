"""Tests for the synonym curator."""

import pytest

from lexitrie.builder.dictionary import DictionaryBuilder
from lexitrie.builder.linker import MorphologyLinker
from lexitrie.builder.synonyms import SynonymCurator


@pytest.fixture
def curator(morphology, lexical_db, sample_words, sample_frequencies, sample_uk_to_us):
    builder = DictionaryBuilder()
    builder.add_words(sample_words)
    forward, _ = builder.build()
    MorphologyLinker(forward, morphology, sample_frequencies).link_all()
    return SynonymCurator(
        forward,
        morphology,
        lexical_db,
        sample_frequencies,
        sample_uk_to_us,
    )


def synonyms_of(curator, word):
    return curator.trie.lookup(word).synonyms


class TestIsSimilar:
    """Tests for the closeness filter."""

    def test_containment(self, curator):
        """Test either string containing the other is similar."""
        assert curator.is_similar("stagecoach", "coach")
        assert curator.is_similar("coach", "stagecoach")
        assert curator.is_similar("finally", "final")

    def test_containment_ignores_case_and_hyphens(self, curator):
        assert curator.is_similar("stagecoach", "Stage-Coach")

    def test_stem_after_americanizing(self, curator):
        """Test colour and discolor share the stem color."""
        assert curator.is_similar("colour", "discolor")
        assert curator.is_similar("colour", "color")

    def test_short_tokens_skipped(self, curator):
        """Test 'in' does not make 'in the end' similar to 'finally'."""
        assert not curator.is_similar("finally", "in the end")

    def test_unrelated(self, curator):
        assert not curator.is_similar("colour", "hue")
        assert not curator.is_similar("stagecoach", "diligence")

    def test_phrase_token_stem(self, curator):
        assert curator.is_similar("sprinting", "quick sprints")


class TestInflectedSynonyms:
    """Tests for synonyms generated from the lemma."""

    def test_past(self, curator):
        """Test sprint's synonyms are put in the past and kept if words."""
        assert curator.inflected_synonyms("sprint", "vbd") == ["sprinted", "dashed", "ran"]

    def test_uninflected_tag(self, curator):
        assert curator.inflected_synonyms("sprint", "vb") == []
        assert curator.inflected_synonyms("sprint", "nn") == []

    def test_closed_class_tag(self, curator):
        assert curator.inflected_synonyms("sprint", "cc") == []

    def test_unknown_tag(self, curator):
        assert curator.inflected_synonyms("sprint", "xx") is None

    def test_generated_forms_must_be_words(self, curator):
        """Test sprints, dashes and runs: only runs is a word."""
        assert curator.inflected_synonyms("sprint", "vbz") == ["runs"]


class TestCandidates:
    """Tests for candidate collection."""

    def test_word_itself_removed(self, curator):
        merged, _ = curator.candidates(curator.trie.lookup("finally"))
        assert "finally" not in merged
        assert merged == ["final", "in the end", "at last", "eventually"]

    def test_lemma_used_for_uncovered_tags(self, curator):
        """Test sprinted borrows sprint's synonyms through its lemma link."""
        merged, unhandled = curator.candidates(curator.trie.lookup("sprinted"))
        assert merged == ["dashed", "ran"]
        assert unhandled == ["xx"]

    def test_no_synonyms(self, curator):
        merged, unhandled = curator.candidates(curator.trie.lookup("dog"))
        assert merged == []
        assert unhandled == []

    def test_duplicates_dropped(self, morphology, sample_words, make_lexical_db):
        builder = DictionaryBuilder()
        builder.add_words(sample_words)
        forward, _ = builder.build()
        db = make_lexical_db({
            ("dash", "n"): ["dash", "sprint", "hyphen"],
            ("dash", "v"): ["dash", "sprint", "rush"],
        })
        curator = SynonymCurator(forward, morphology, db, {}, {})
        merged, _ = curator.candidates(forward.lookup("dash"))
        assert merged == ["sprint", "hyphen", "rush"]


class TestCuration:
    """Tests for the full curation pass."""

    @pytest.fixture
    def stats(self, curator):
        return curator.curate_all()

    def test_finally(self, curator, stats):
        """Test phrases survive while derivational relatives do not."""
        assert synonyms_of(curator, "finally") == ["in the end", "at last", "eventually"]

    def test_stagecoach(self, curator, stats):
        assert synonyms_of(curator, "stagecoach") == ["diligence"]

    def test_colour(self, curator, stats):
        assert synonyms_of(curator, "colour") == ["hue"]

    def test_inflected(self, curator, stats):
        assert synonyms_of(curator, "sprinted") == ["dashed", "ran"]

    def test_word_without_synsets(self, curator, stats):
        assert synonyms_of(curator, "cat") == []

    def test_stats(self, curator, stats):
        assert stats.words == len(curator.trie)
        # finally, stagecoach, colour, sprint, sprinted
        assert stats.with_synonyms == 5
        assert stats.unhandled_tags == {"xx": 1}
        # final; stage, coach; color, discolor
        assert stats.rejected == 5

    def test_prepare_called(self, curator, stats):
        assert curator.morphology.prepared >= 1
        assert curator.lexical_db.prepared == 1

    def test_threaded_matches_inline(
        self, morphology, lexical_db, sample_words, sample_frequencies, sample_uk_to_us
    ):
        results = []
        for workers in (1, 4):
            builder = DictionaryBuilder()
            builder.add_words(sample_words)
            forward, _ = builder.build()
            MorphologyLinker(forward, morphology, sample_frequencies).link_all()
            SynonymCurator(
                forward,
                morphology,
                lexical_db,
                sample_frequencies,
                sample_uk_to_us,
                workers=workers,
            ).curate_all()
            results.append({
                forward.word_of(node): list(node.synonyms)
                for node in forward.word_nodes()
            })
        assert results[0] == results[1]
