"""Morphology linker.

Walks every word node of the forward trie once and writes:
    - lemma: index of the node spelling the word's base form, or the
      node itself when the base form is not a dictionary word
    - inflections: on lemma nodes only, the inflected forms that exist
      in the dictionary

Inflections generated per frequency-table tag:
    vb, vbp -> past, present participle, third person present
    nn, nnp -> plural
Closed-class tags (cc, in, det, ...) are skipped; any other tag is counted
in LinkStats.ignored_tags.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Optional

from ..morphology.base import MorphologyProvider
from ..schema import (
    CLOSED_CLASS_TAGS,
    Inflection,
    NOUN_LEMMA_TAGS,
    VERB_INFLECTIONS,
    VERB_LEMMA_TAGS,
)
from ..trie import Trie, TrieNode
from .runner import Progress, visit_all


@dataclass
class LinkStats:
    """Statistics from a linking pass."""

    words: int = 0
    lemmas: int = 0
    inflections: int = 0
    ignored_tags: Counter = field(default_factory=Counter)


@dataclass
class NodeLink:
    """What linking one node produced."""

    is_lemma: bool
    inflections: int = 0
    ignored_tags: list[str] = field(default_factory=list)


class MorphologyLinker:
    """Attaches lemma and inflection links to trie nodes."""

    def __init__(
        self,
        trie: Trie,
        morphology: MorphologyProvider,
        frequencies: dict[str, dict[str, float]],
        workers: int = 1,
    ):
        """Initialize linker.

        Args:
            trie: Forward trie to annotate.
            morphology: Lemma and inflection source.
            frequencies: Word -> POS tag -> frequency.
            workers: Threads used by link_all().
        """
        self.trie = trie
        self.morphology = morphology
        self.frequencies = frequencies
        self.workers = workers

    def _resolve_word(self, word: str) -> Optional[TrieNode]:
        node = self.trie.lookup(word)
        if node is None or not node.is_word:
            return None
        return node

    def link_node(self, node: TrieNode) -> NodeLink:
        """Link one word node to its lemma and, if a lemma, its inflections."""
        word = self.trie.word_of(node)

        lemma_node = self._resolve_word(self.morphology.lemma(word)) or node
        node.lemma = lemma_node.index

        if not node.is_lemma:
            return NodeLink(is_lemma=False)

        link = NodeLink(is_lemma=True)
        for tag in self.frequencies.get(word, {}):
            if tag in VERB_LEMMA_TAGS:
                inflections = VERB_INFLECTIONS
            elif tag in NOUN_LEMMA_TAGS:
                inflections = (Inflection.PLURAL,)
            elif tag in CLOSED_CLASS_TAGS:
                continue
            else:
                link.ignored_tags.append(tag)
                continue

            for inflection in inflections:
                form = self.morphology.inflected_form(word, inflection)
                target = self._resolve_word(form)
                if target is not None:
                    node.inflections[inflection] = target.index

        link.inflections = len(node.inflections)
        return link

    def link_all(self, progress: Optional[Progress] = None) -> LinkStats:
        """Link every word node.

        Args:
            progress: Called once per word node.

        Returns:
            LinkStats.
        """
        self.morphology.prepare()

        stats = LinkStats()
        nodes = list(self.trie.word_nodes())
        for link in visit_all(nodes, self.link_node, self.workers, progress):
            stats.words += 1
            if link.is_lemma:
                stats.lemmas += 1
                stats.inflections += link.inflections
            stats.ignored_tags.update(link.ignored_tags)
        return stats
