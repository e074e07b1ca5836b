"""British to American spelling map ingestor.

Format: one pair per line, whitespace separated.
    colour color
    analyse analyze
"""

from pathlib import Path
from typing import Optional

from .base import Ingestor, IngestResult


class SpellingIngestor(Ingestor):
    """Ingestor for UK -> US spelling pairs."""

    replace_duplicates = True

    def __init__(self, comment_char: Optional[str] = "#"):
        super().__init__(comment_char)

    def read_entry(self, line: str, line_number: int) -> Optional[tuple[str, str]]:
        parts = line.split()
        if len(parts) < 2:
            return None
        return parts[0], parts[1]


def ingest(filepath: Path | str) -> IngestResult:
    """Convenience function to ingest a spelling map.

    Args:
        filepath: Path to spelling file.

    Returns:
        IngestResult keyed by British spelling, valued by American spelling.
    """
    return SpellingIngestor().ingest(filepath)
