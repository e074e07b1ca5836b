"""Word list ingestor.

Simple format: one candidate word per line (eg. UKACD).
A line is kept only if it passes the word rule: starts with a letter,
then letters, apostrophes, hyphens and spaces, within the length bounds.
"""

from pathlib import Path
from typing import Optional

from ..normalizer import MAX_WORD_LENGTH, MIN_WORD_LENGTH, validate
from .base import Ingestor, IngestResult


class WordListIngestor(Ingestor):
    """Ingestor for plain text word lists."""

    def __init__(
        self,
        min_length: int = MIN_WORD_LENGTH,
        max_length: int = MAX_WORD_LENGTH,
        comment_char: Optional[str] = None,
    ):
        super().__init__(comment_char)
        self.min_length = min_length
        self.max_length = max_length

    def read_entry(self, line: str, line_number: int) -> Optional[tuple[str, int]]:
        word = validate(line, self.min_length, self.max_length)
        if word is None:
            return None
        return word, line_number


def ingest(
    filepath: Path | str,
    min_length: int = MIN_WORD_LENGTH,
    max_length: int = MAX_WORD_LENGTH,
    comment_char: Optional[str] = None,
) -> IngestResult:
    """Convenience function to ingest a word list.

    Args:
        filepath: Path to text file.
        min_length: Minimum word length.
        max_length: Maximum word length.
        comment_char: Character that starts a comment line.

    Returns:
        IngestResult keyed by word, valued by first line number.
    """
    ingestor = WordListIngestor(
        min_length=min_length,
        max_length=max_length,
        comment_char=comment_char,
    )
    return ingestor.ingest(filepath)
