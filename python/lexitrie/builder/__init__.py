"""Lexicon builder module.

Builds and annotates the tries:
- Forward and reverse tries from a validated word list
- Lemma and inflection links
- Curated synonym lists
"""

from .dictionary import BuildStats, DictionaryBuilder
from .linker import LinkStats, MorphologyLinker
from .synonyms import CurationStats, SynonymCurator

__all__ = [
    "BuildStats",
    "DictionaryBuilder",
    "LinkStats",
    "MorphologyLinker",
    "CurationStats",
    "SynonymCurator",
]
