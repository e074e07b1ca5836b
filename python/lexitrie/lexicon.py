"""Lexicon facade.

Holds the forward and reverse tries, the frequency table and the spelling
map, and exposes the query surface:

    lexicon = Lexicon.open(LexiconConfig.from_defaults())

    lexicon.find("cat")                 # ["cat"]
    lexicon.find_masked("ca?")          # ["cat", "car", "cap"]
    lexicon.find_starting_with("ca")    # ["cat", "car", "cap", ...]
    lexicon.find_ending_with("at")      # ["cat", "bat", ...]
    lexicon.synonyms("finally")         # ["in the end", "at last", ...]
    lexicon.lemma("running")            # "run"
    lexicon.inflections("run")          # {"past": "ran", ...}

Once built or loaded, nothing is mutated, so queries need no locking.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from .builder.dictionary import BuildStats, DictionaryBuilder
from .builder.linker import LinkStats, MorphologyLinker
from .builder.runner import Progress
from .builder.synonyms import CurationStats, SynonymCurator
from .cache import Snapshot, load_snapshot, save_snapshot
from .config import LexiconConfig
from .ingest import pos_frequencies, spelling, word_list
from .lexical import LexicalDatabase, WordNetDatabase
from .morphology import MorphologyProvider, get_provider
from .normalizer import MAX_WORD_LENGTH, MIN_WORD_LENGTH, reverse_word
from .trie import WILDCARD, Trie, TrieNode

# Called with a stage title and node total; returns the per-node callback
ProgressFactory = Callable[[str, int], Progress]


@dataclass
class BuildReport:
    """Statistics from the build passes of a fresh lexicon."""

    build: BuildStats
    link: LinkStats
    curation: CurationStats


class Lexicon:
    """Query surface over a built dictionary."""

    def __init__(
        self,
        forward: Trie,
        reverse: Trie,
        words: list[str],
        frequencies: dict[str, dict[str, float]],
        uk_to_us: dict[str, str],
        wildcard: str = WILDCARD,
    ):
        """Initialize from already built structures.

        Args:
            forward: Linked and curated trie.
            reverse: Trie of reversed words.
            words: Accepted word list.
            frequencies: Word -> POS tag -> frequency.
            uk_to_us: British -> American spellings.
            wildcard: Character find_masked() treats as any character.
        """
        self.forward = forward
        self.reverse = reverse
        self.words = words
        self.frequencies = frequencies
        self.uk_to_us = uk_to_us
        self.wildcard = wildcard
        self.report: Optional[BuildReport] = None

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def build(
        cls,
        words: Iterable[str],
        frequencies: dict[str, dict[str, float]],
        uk_to_us: dict[str, str],
        morphology: MorphologyProvider,
        lexical_db: LexicalDatabase,
        min_length: int = MIN_WORD_LENGTH,
        max_length: int = MAX_WORD_LENGTH,
        wildcard: str = WILDCARD,
        workers: int = 1,
        progress: Optional[ProgressFactory] = None,
        verbose: bool = False,
    ) -> "Lexicon":
        """Build, link and curate a lexicon from a word list.

        Args:
            words: Candidate words; invalid ones are discarded.
            frequencies: Word -> POS tag -> frequency.
            uk_to_us: British -> American spellings.
            morphology: Lemma, inflection and stem source.
            lexical_db: Synset source.
            min_length: Minimum word length.
            max_length: Maximum word length.
            wildcard: Wildcard character for masked queries.
            workers: Threads for the linking and curation passes.
            progress: Factory for per-node progress callbacks.
            verbose: Print status lines.

        Returns:
            Lexicon with report set.
        """
        builder = DictionaryBuilder(min_length=min_length, max_length=max_length)
        builder.add_words(words)

        if verbose:
            print("Generating dictionary trees... ", end="")
        forward, reverse = builder.build()
        if verbose:
            print("done.")
            print(f"Discarded {builder.stats.total_discarded:,} words.")
            print(f"Kept {builder.get_word_count():,} words.")

        linker = MorphologyLinker(forward, morphology, frequencies, workers=workers)
        link_stats = linker.link_all(
            progress("Linking lemmas", len(forward)) if progress else None
        )

        curator = SynonymCurator(
            forward,
            morphology,
            lexical_db,
            frequencies,
            uk_to_us,
            workers=workers,
        )
        curation_stats = curator.curate_all(
            progress("Synonyms", len(forward)) if progress else None
        )

        lexicon = cls(
            forward,
            reverse,
            builder.get_words(),
            frequencies,
            uk_to_us,
            wildcard=wildcard,
        )
        lexicon.report = BuildReport(
            build=builder.stats,
            link=link_stats,
            curation=curation_stats,
        )
        return lexicon

    @classmethod
    def from_snapshot(cls, snapshot: Snapshot, wildcard: str = WILDCARD) -> "Lexicon":
        """Restore a lexicon from a snapshot."""
        return cls(
            snapshot.forward,
            snapshot.reverse,
            snapshot.words,
            snapshot.frequencies,
            snapshot.uk_to_us,
            wildcard=wildcard,
        )

    @classmethod
    def open(
        cls,
        config: LexiconConfig,
        morphology: Optional[MorphologyProvider] = None,
        lexical_db: Optional[LexicalDatabase] = None,
        rebuild: bool = False,
        progress: Optional[ProgressFactory] = None,
    ) -> "Lexicon":
        """Load the snapshot, or rebuild everything from source files.

        A fresh build is saved as the new snapshot.

        Args:
            config: Source files and build options.
            morphology: Defaults to the "english" provider.
            lexical_db: Defaults to WordNetDatabase.
            rebuild: Ignore any existing snapshot.
            progress: Factory for per-node progress callbacks.

        Returns:
            Ready Lexicon.
        """
        if not rebuild:
            snapshot = load_snapshot(config.snapshot)
            if snapshot is not None:
                if config.verbose:
                    print(f"Loading from snapshot {config.snapshot}")
                return cls.from_snapshot(snapshot, wildcard=config.wildcard)

        if config.verbose:
            print("Rebuilding everything...")

        morphology = morphology or get_provider()
        lexical_db = lexical_db or WordNetDatabase()

        word_result = word_list.ingest(
            config.word_list,
            min_length=config.min_length,
            max_length=config.max_length,
        )
        words = word_result.words
        if config.verbose:
            print(f"Discarded {word_result.total_discarded:,} lines from {word_result.name}.")
            print(f"Kept {len(words):,} words from {word_result.name}.")

        if config.include_wordnet_words:
            before = len(words)
            words = words + list(lexical_db.all_words())
            if config.verbose:
                print(f"Adding words from WordNet: {len(words) - before:,} candidates")

        frequencies = pos_frequencies.ingest(config.pos_frequencies).entries
        uk_to_us = spelling.ingest(config.uk_to_us).entries
        if config.verbose:
            print(f"Loaded POS frequencies for {len(frequencies):,} words.")
            print(f"Loaded {len(uk_to_us):,} UK -> US spellings.")

        lexicon = cls.build(
            words,
            frequencies,
            uk_to_us,
            morphology,
            lexical_db,
            min_length=config.min_length,
            max_length=config.max_length,
            wildcard=config.wildcard,
            workers=config.workers,
            progress=progress,
            verbose=config.verbose,
        )

        path = save_snapshot(lexicon.snapshot(), config.snapshot)
        if config.verbose:
            print(f"Saved snapshot to {path}")
        return lexicon

    def snapshot(self) -> Snapshot:
        """Capture this lexicon for the snapshot cache."""
        return Snapshot(
            forward=self.forward,
            reverse=self.reverse,
            words=self.words,
            frequencies=self.frequencies,
            uk_to_us=self.uk_to_us,
        )

    # =========================================================================
    # Queries
    # =========================================================================

    def find(self, word: str) -> list[str]:
        """Exact match."""
        return self.forward.find(word)

    def find_masked(self, pattern: str) -> list[str]:
        """Fixed-length match; the wildcard matches any character."""
        return self.forward.find_masked(pattern, self.wildcard)

    def find_starting_with(self, prefix: str, reverse: bool = False) -> list[str]:
        """Every word starting with the prefix.

        Args:
            prefix: Prefix to match; empty matches every word.
            reverse: Search the reverse trie instead.
        """
        trie = self.reverse if reverse else self.forward
        return trie.find_starting_with(prefix)

    def find_ending_with(self, suffix: str) -> list[str]:
        """Every word ending with the suffix."""
        return [
            reverse_word(word)
            for word in self.find_starting_with(reverse_word(suffix), reverse=True)
        ]

    def contains(self, word: str) -> bool:
        return self.forward.contains(word)

    def lookup(self, string: str) -> Optional[TrieNode]:
        """Node for an exact path, word or not."""
        return self.forward.lookup(string)

    def word_of(self, node: TrieNode) -> str:
        return self.forward.word_of(node)

    def _word_node(self, word: str) -> Optional[TrieNode]:
        node = self.forward.lookup(word)
        if node is None or not node.is_word:
            return None
        return node

    def synonyms(self, word: str) -> list[str]:
        """Curated synonyms; empty for unknown words."""
        node = self._word_node(word)
        return list(node.synonyms) if node else []

    def lemma(self, word: str) -> Optional[str]:
        """Base form of a dictionary word, None for unknown words."""
        node = self._word_node(word)
        if node is None or node.lemma is None:
            return None
        return self.forward.word_of(self.forward.node(node.lemma))

    def inflections(self, word: str) -> dict[str, str]:
        """Inflected forms of a lemma keyed by inflection name."""
        node = self._word_node(word)
        if node is None:
            return {}
        return {
            inflection.value: self.forward.word_of(self.forward.node(index))
            for inflection, index in node.inflections.items()
        }

    @property
    def word_count(self) -> int:
        return len(self.forward)

    def __getitem__(self, string: str) -> Optional[TrieNode]:
        return self.lookup(string)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return self.word_count

    def __repr__(self) -> str:
        return f'<Lexicon word_count="{self.word_count}">'
