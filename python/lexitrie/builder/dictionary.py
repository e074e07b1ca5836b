"""Dictionary builder for forward and reverse tries.

Validates candidate words, drops duplicates, and inserts the survivors
twice: as given (forward trie) and reversed (reverse trie, used for
ends-with queries).
"""

from dataclasses import dataclass
from typing import Iterable

from ..ingest.base import IngestResult
from ..normalizer import (
    MAX_WORD_LENGTH,
    MIN_WORD_LENGTH,
    is_valid_word,
    reverse_word,
)
from ..trie import Trie


@dataclass
class BuildStats:
    """Statistics from a build operation."""

    total_raw: int = 0
    total_valid: int = 0
    total_discarded: int = 0
    total_duplicates: int = 0
    forward_nodes: int = 0
    reverse_nodes: int = 0


class DictionaryBuilder:
    """Builds forward and reverse tries from candidate words."""

    def __init__(
        self,
        min_length: int = MIN_WORD_LENGTH,
        max_length: int = MAX_WORD_LENGTH,
    ):
        """Initialize builder.

        Args:
            min_length: Minimum word length to include.
            max_length: Maximum word length to include.
        """
        self.min_length = min_length
        self.max_length = max_length
        self.stats = BuildStats()

        # Insertion-ordered set of accepted words
        self._words: dict[str, None] = {}

    def add_word(self, word: str) -> bool:
        """Add a single candidate.

        Args:
            word: Candidate word.

        Returns:
            True if the word was valid and new.
        """
        self.stats.total_raw += 1

        if not is_valid_word(word, self.min_length, self.max_length):
            self.stats.total_discarded += 1
            return False

        if word in self._words:
            self.stats.total_duplicates += 1
            return False

        self._words[word] = None
        self.stats.total_valid = len(self._words)
        return True

    def add_words(self, words: Iterable[str]) -> int:
        """Add candidates, returning how many were accepted."""
        return sum(1 for word in words if self.add_word(word))

    def add_ingest_result(self, result: IngestResult) -> int:
        """Add words from a word-list IngestResult.

        Lines the ingestor already discarded or de-duplicated are folded
        into this builder's counts.

        Args:
            result: IngestResult from a WordListIngestor.

        Returns:
            Number of words accepted.
        """
        self.stats.total_raw += result.total_discarded + result.total_duplicates
        self.stats.total_discarded += result.total_discarded
        self.stats.total_duplicates += result.total_duplicates
        return self.add_words(result.words)

    def get_words(self) -> list[str]:
        """Get accepted words in first-seen order."""
        return list(self._words)

    def get_word_count(self) -> int:
        """Get accepted word count."""
        return len(self._words)

    def build(self) -> tuple[Trie, Trie]:
        """Build both tries.

        Returns:
            (forward trie, reverse trie).
        """
        forward = Trie()
        reverse = Trie()
        for word in self._words:
            forward.insert(word)
            reverse.insert(reverse_word(word))

        self.stats.forward_nodes = forward.node_count()
        self.stats.reverse_nodes = reverse.node_count()
        return forward, reverse
