"""Part-of-speech frequency table ingestor.

Format (one word per line, YAML flow-mapping style):
    "run": { vb: 0.41, nn: 0.32, vbp: 0.27 }
    stagecoach: { nn: 1.0 }

Tags are lower-cased. Pairs whose value is not a number are dropped; a
line with no usable pair is discarded.
"""

import re
from pathlib import Path
from typing import Optional

from .base import Ingestor, IngestResult

LINE_PATTERN = re.compile(r'^"?([^{"]+?)"?:\s*\{\s*(.*?)\s*\}\s*$')
PAIR_PATTERN = re.compile(r"^([^:]+):\s*(.+)$")
PAIR_SEPARATOR = re.compile(r",\s*")


def parse_frequencies(data: str) -> dict[str, float]:
    """Parse the inside of a "{ tag: freq, ... }" mapping.

    Args:
        data: Text between the braces.

    Returns:
        Tag -> frequency for every well-formed pair.
    """
    pairs: dict[str, float] = {}
    for item in PAIR_SEPARATOR.split(data):
        match = PAIR_PATTERN.match(item.strip())
        if not match:
            continue
        try:
            pairs[match.group(1).strip().lower()] = float(match.group(2))
        except ValueError:
            continue
    return pairs


class PosFrequencyIngestor(Ingestor):
    """Ingestor for word -> POS tag -> frequency tables."""

    replace_duplicates = True

    def read_entry(
        self, line: str, line_number: int
    ) -> Optional[tuple[str, dict[str, float]]]:
        match = LINE_PATTERN.match(line)
        if not match:
            return None
        pairs = parse_frequencies(match.group(2))
        if not pairs:
            return None
        return match.group(1), pairs


def ingest(filepath: Path | str) -> IngestResult:
    """Convenience function to ingest a POS frequency table.

    Args:
        filepath: Path to table file.

    Returns:
        IngestResult keyed by word, valued by tag -> frequency.
    """
    return PosFrequencyIngestor().ingest(filepath)
