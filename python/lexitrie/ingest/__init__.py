"""Source ingestion module.

Provides ingestors for the line-based files a lexicon is built from:
- Word lists (one word per line)
- POS frequency tables
- UK -> US spelling maps

Usage:
    from lexitrie.ingest import word_list, pos_frequencies, spelling

    words = word_list.ingest("path/to/UKACD.txt").words
    frequencies = pos_frequencies.ingest("path/to/word_pos_frequencies.yml").entries
    uk_to_us = spelling.ingest("path/to/uk-us-spelling").entries
"""

from .base import Ingestor, IngestResult
from . import pos_frequencies
from . import spelling
from . import word_list

# Register available ingestors
INGESTORS: dict[str, type[Ingestor]] = {
    "word_list": word_list.WordListIngestor,
    "pos_frequencies": pos_frequencies.PosFrequencyIngestor,
    "spelling": spelling.SpellingIngestor,
}


def get_ingestor(name: str) -> type[Ingestor]:
    """Get ingestor class by name."""
    if name not in INGESTORS:
        raise ValueError(f"Unknown ingestor: {name}. Available: {list(INGESTORS.keys())}")
    return INGESTORS[name]


def register_ingestor(name: str, ingestor_cls: type[Ingestor]) -> None:
    """Register a custom ingestor."""
    INGESTORS[name] = ingestor_cls


__all__ = [
    "Ingestor",
    "IngestResult",
    "pos_frequencies",
    "spelling",
    "word_list",
    "get_ingestor",
    "register_ingestor",
    "INGESTORS",
]
