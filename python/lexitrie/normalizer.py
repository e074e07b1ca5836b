"""Text validation and cleanup for lexitrie.

Handles the word-list validity rule, cleanup of raw WordNet lemma names,
and the keys used when comparing a word against a candidate synonym.
"""

import re
from typing import Optional

# ASCII only. Starts with a letter; then letters, apostrophes, hyphens, spaces.
WORD_PATTERN = re.compile(r"[A-Za-z][A-Za-z\-' ]*")

MIN_WORD_LENGTH = 2
MAX_WORD_LENGTH = 16

# Adjective markers on WordNet lemma names, eg. beautiful(ip), beautiful(a)
SENSE_MARKER_PATTERN = re.compile(r"\([a-z]*\)$")


def is_valid_word(
    word: str,
    min_length: int = MIN_WORD_LENGTH,
    max_length: int = MAX_WORD_LENGTH,
) -> bool:
    """Check a candidate against the word-list rule.

    Args:
        word: Candidate word (already stripped of line endings).
        min_length: Minimum total length.
        max_length: Maximum total length.

    Returns:
        True if the word starts with a letter, contains only letters,
        apostrophes, hyphens and spaces, and fits the length bounds.
    """
    if not min_length <= len(word) <= max_length:
        return False
    return WORD_PATTERN.fullmatch(word) is not None


def clean_synonym(raw: str) -> str:
    """Turn a raw lemma name into a dictionary-style string.

    Strips a trailing sense marker and replaces underscores with spaces.

    Args:
        raw: Lemma name, eg. "look_up" or "beautiful(a)".

    Returns:
        Cleaned string, eg. "look up" or "beautiful".
    """
    return SENSE_MARKER_PATTERN.sub("", raw).replace("_", " ")


def to_wordnet_form(word: str) -> str:
    """Convert spaces to the underscore form WordNet indexes phrases under."""
    return word.replace(" ", "_")


def similarity_key(text: str) -> str:
    """Lower-case and dehyphenate for containment checks."""
    return text.lower().replace("-", "")


def reverse_word(word: str) -> str:
    """Reverse a word for the ends-with trie."""
    return word[::-1]


def validate(
    word: str,
    min_length: int = MIN_WORD_LENGTH,
    max_length: int = MAX_WORD_LENGTH,
) -> Optional[str]:
    """Strip a raw line and return it if valid, else None.

    Args:
        word: Raw line.
        min_length: Minimum total length.
        max_length: Maximum total length.

    Returns:
        Stripped word or None if invalid.
    """
    word = word.strip()
    if is_valid_word(word, min_length, max_length):
        return word
    return None
