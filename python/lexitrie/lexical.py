"""Lexical database backends.

The curator asks a lexical database two questions: which parts of speech
does it record for a word, and which words share a synset with it.

Backends:
    - wordnet: Princeton WordNet through nltk
      Install: pip install nltk
      Data: python -m nltk.downloader wordnet
"""

import threading
from abc import ABC, abstractmethod
from typing import Iterator

from .normalizer import to_wordnet_form
from .schema import ADJECTIVE


class LexicalDatabase(ABC):
    """Base class for synset sources."""

    name: str = "base"

    @abstractmethod
    def pos_tags_for(self, word: str) -> set[str]:
        """WordNet POS letters (n, v, a, r) recorded for the word."""
        pass

    @abstractmethod
    def synsets_of(self, word: str, pos: str) -> list[str]:
        """Raw lemma names of every synset containing the word.

        Args:
            word: Word, spaces allowed.
            pos: WordNet POS letter.

        Returns:
            Lemma names flattened across all senses. Names may contain
            underscores and sense markers; empty if the word is unknown.
        """
        pass

    def all_words(self) -> Iterator[str]:
        """Every lemma the database knows, phrases space-separated."""
        return iter(())

    def prepare(self) -> None:
        """Load any lazy resources before the database is shared by threads."""
        pass


class WordNetDatabase(LexicalDatabase):
    """nltk WordNet backend.

    Lookups match the index entry exactly: nltk's morphological fallback
    (running -> run) is filtered out so that a word only sees its own synsets.

    nltk's corpus reader seeks on shared file handles, so every lookup
    holds one lock. Sharded curation still works; lookups just queue.
    """

    name = "wordnet"

    def __init__(self, auto_download: bool = False):
        """Initialize backend.

        Args:
            auto_download: Download the WordNet corpus if it is missing.
        """
        self.auto_download = auto_download
        self._wn = None
        self._lock = threading.Lock()

    def _get_wordnet(self):
        if self._wn is None:
            try:
                import nltk
                from nltk.corpus import wordnet as wn
            except ImportError as e:
                raise ImportError(
                    "nltk required. Install: pip install nltk"
                ) from e

            try:
                wn.ensure_loaded()
            except LookupError:
                if not self.auto_download:
                    raise
                print("WordNet not found locally. Downloading via nltk...")
                nltk.download("wordnet", quiet=True)
                wn.ensure_loaded()

            self._wn = wn
        return self._wn

    def prepare(self) -> None:
        self._get_wordnet()

    def _own_synsets(self, word: str, pos: str | None = None) -> list[tuple[str, list[str]]]:
        """(pos, lemma names) of each synset indexed under exactly this word."""
        wn = self._get_wordnet()
        form = to_wordnet_form(word).lower()
        if pos == ADJECTIVE:
            poses = (ADJECTIVE, "s")
        else:
            poses = (pos,)

        found = []
        seen = set()
        with self._lock:
            for p in poses:
                for synset in wn.synsets(form, pos=p):
                    if synset.name() in seen:
                        continue
                    seen.add(synset.name())
                    names = synset.lemma_names()
                    if any(name.lower() == form for name in names):
                        found.append((synset.pos(), list(names)))
        return found

    def pos_tags_for(self, word: str) -> set[str]:
        tags = set()
        for pos, _ in self._own_synsets(word):
            tags.add(ADJECTIVE if pos == "s" else pos)
        return tags

    def synsets_of(self, word: str, pos: str) -> list[str]:
        names: list[str] = []
        for _, lemma_names in self._own_synsets(word, pos):
            names.extend(lemma_names)
        return names

    def all_words(self) -> Iterator[str]:
        wn = self._get_wordnet()
        for name in wn.all_lemma_names():
            yield name.replace("_", " ")
