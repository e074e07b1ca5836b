"""Synonym curator.

Walks every word node of the forward trie once (after linking) and writes
a curated synonym list.

Candidates come from two places:
    1. Synsets the lexical database records for the word itself.
    2. For frequency-table tags the database does not cover, synonyms of
       the word's lemma put through the matching inflection (plural,
       past, present participle, third person present). A generated
       candidate survives only if it is a dictionary word.

Candidates that are closely related to the word are then rejected:
    - alternative spellings and hyphenation variants (containment)
    - derivational relatives, eg. "stagecoach" and "coach", "color" and
      "discolor" (stem containment, token by token)
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Optional

from ..lexical import LexicalDatabase
from ..morphology.base import MorphologyProvider
from ..normalizer import clean_synonym, similarity_key
from ..schema import (
    CLOSED_CLASS_TAGS,
    Inflection,
    NOUN,
    UNINFLECTED_TAGS,
    VERB,
    inflection_for_tag,
    normalise_pos_tag,
)
from ..trie import Trie, TrieNode
from .runner import Progress, visit_all

# Tokens shorter than this are skipped by the stem check; "in" would
# otherwise reject "in the end" as a synonym of "finally".
MIN_STEM_TOKEN_LENGTH = 3


@dataclass
class CurationStats:
    """Statistics from a curation pass."""

    words: int = 0
    with_synonyms: int = 0
    synonyms: int = 0
    rejected: int = 0
    unhandled_tags: Counter = field(default_factory=Counter)


@dataclass
class NodeCuration:
    """What curating one node produced."""

    synonyms: int = 0
    rejected: int = 0
    unhandled_tags: list[str] = field(default_factory=list)


class SynonymCurator:
    """Attaches curated synonym lists to trie nodes."""

    def __init__(
        self,
        trie: Trie,
        morphology: MorphologyProvider,
        lexical_db: LexicalDatabase,
        frequencies: dict[str, dict[str, float]],
        uk_to_us: dict[str, str],
        workers: int = 1,
    ):
        """Initialize curator.

        Args:
            trie: Forward trie, already linked.
            morphology: Inflection and stemming source.
            lexical_db: Synset source.
            frequencies: Word -> POS tag -> frequency.
            uk_to_us: British -> American spellings.
            workers: Threads used by curate_all().
        """
        self.trie = trie
        self.morphology = morphology
        self.lexical_db = lexical_db
        self.frequencies = frequencies
        self.uk_to_us = uk_to_us
        self.workers = workers

    def americanize(self, word: str) -> str:
        return self.uk_to_us.get(word, word)

    def lookup_synonyms(self, word: str, pos: str) -> list[str]:
        """Cleaned synonyms of a word for one WordNet POS, all senses."""
        return [
            clean_synonym(name)
            for name in self.lexical_db.synsets_of(word, pos)
        ]

    def inflected_synonyms(self, lemma: str, tag: str) -> Optional[list[str]]:
        """Synonyms of the lemma inflected to match a frequency tag.

        Args:
            lemma: The word's lemma.
            tag: Frequency-table POS tag.

        Returns:
            Generated candidates that are dictionary words, or None if
            the tag is not one this curator knows.
        """
        if tag in UNINFLECTED_TAGS or tag in CLOSED_CLASS_TAGS:
            return []

        inflection = inflection_for_tag(tag)
        if inflection is None:
            return None

        pos = NOUN if inflection is Inflection.PLURAL else VERB
        generated = [
            self.morphology.inflected_form(synonym, inflection)
            for synonym in self.lookup_synonyms(lemma, pos)
        ]
        return [syn for syn in generated if self.trie.contains(syn)]

    def is_similar(self, word: str, candidate: str) -> bool:
        """Whether a candidate is too close to the word to be a synonym.

        Args:
            word: Dictionary word.
            candidate: Proposed synonym.

        Returns:
            True if either string contains the other once lower-cased and
            dehyphenated, or if any candidate token of 3+ letters shares a
            stem (by containment) with the word after Americanizing both.
        """
        syn = similarity_key(candidate)
        word = similarity_key(word)

        if syn in word or word in syn:
            return True

        word_stem = None
        for token in syn.split(" "):
            if len(token) < MIN_STEM_TOKEN_LENGTH:
                continue
            if word_stem is None:
                word_stem = self.morphology.stem(self.americanize(word))
            token_stem = self.morphology.stem(self.americanize(token))
            # Prefixes survive Porter stemming, eg. "color" and "discolor"
            if token_stem in word_stem or word_stem in token_stem:
                return True
        return False

    def candidates(self, node: TrieNode) -> tuple[list[str], list[str]]:
        """Collect merged, de-duplicated candidates before similarity rejection.

        Returns:
            (candidates, frequency tags this curator does not handle).
        """
        word = self.trie.word_of(node)
        wordnet_tags = sorted(self.lexical_db.pos_tags_for(word))

        synonyms: list[str] = []
        for tag in wordnet_tags:
            synonyms.extend(self.lookup_synonyms(word, tag))

        covered = {normalise_pos_tag(tag) for tag in wordnet_tags}
        frequency_tags = [
            tag for tag in self.frequencies.get(word, {})
            if tag not in covered
        ]

        lemma_node = node if node.lemma is None else self.trie.node(node.lemma)
        lemma = self.trie.word_of(lemma_node)

        unhandled: list[str] = []
        for tag in frequency_tags:
            generated = self.inflected_synonyms(lemma, tag)
            if generated is None:
                unhandled.append(tag)
                continue
            synonyms.extend(generated)

        merged = list(dict.fromkeys(syn for syn in synonyms if syn != word))
        return merged, unhandled

    def curate_node(self, node: TrieNode) -> NodeCuration:
        """Compute and store one node's synonym list."""
        word = self.trie.word_of(node)
        candidates, unhandled = self.candidates(node)

        node.synonyms = [
            syn for syn in candidates
            if not self.is_similar(word, syn)
        ]
        return NodeCuration(
            synonyms=len(node.synonyms),
            rejected=len(candidates) - len(node.synonyms),
            unhandled_tags=unhandled,
        )

    def curate_all(self, progress: Optional[Progress] = None) -> CurationStats:
        """Curate every word node.

        Args:
            progress: Called once per word node.

        Returns:
            CurationStats.
        """
        self.morphology.prepare()
        self.lexical_db.prepare()

        stats = CurationStats()
        nodes = list(self.trie.word_nodes())
        for result in visit_all(nodes, self.curate_node, self.workers, progress):
            stats.words += 1
            if result.synonyms:
                stats.with_synonyms += 1
            stats.synonyms += result.synonyms
            stats.rejected += result.rejected
            stats.unhandled_tags.update(result.unhandled_tags)
        return stats
