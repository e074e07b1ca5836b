"""lexitrie - Lexical dictionary for word games.

An in-memory character trie over a validated word list, annotated with
lemma/inflection links and curated WordNet synonyms.

Core concepts:
    - One generic trie traversal serves exact, wildcard and prefix queries
    - Suffix queries run a prefix query on a trie of reversed words
    - Synonym candidates that are spelling variants or derivational
      relatives of the word are filtered out

Example:
    "run" --past--> "ran", --present_participle--> "running"
    synonyms("finally") keeps "in the end", rejects "final"

Usage:
    from lexitrie import Lexicon, LexiconConfig

    lexicon = Lexicon.open(LexiconConfig.from_defaults("./data"))

    lexicon.find_masked("ca?")          # ["cab", "cad", "cam", ...]
    lexicon.find_ending_with("ology")
    lexicon.synonyms("finally")
    lexicon.inflections("run")          # {"past": "ran", ...}
"""

from .config import LexiconConfig
from .lexicon import Lexicon

__version__ = "0.1.0"

__all__ = [
    "Lexicon",
    "LexiconConfig",
]
