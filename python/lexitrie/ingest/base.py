"""Base ingestor interface for lexicon sources.

All sources are line-based text files. Ingestors inherit from Ingestor and
implement read_entry(); the shared ingest() method handles file reading,
counting and de-duplication. Malformed lines are discarded and counted,
never raised.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, Optional


@dataclass
class IngestResult:
    """Result of ingesting a source file."""

    entries: dict[str, Any]
    source_path: str
    name: str
    total_raw: int = 0          # Non-blank lines in source
    total_valid: int = 0        # Unique entries kept
    total_discarded: int = 0    # Malformed lines
    total_duplicates: int = 0   # Repeated keys within this source
    errors: list[str] = field(default_factory=list)  # Sample of discarded lines

    @property
    def words(self) -> list[str]:
        """Entry keys in first-seen order."""
        return list(self.entries)

    def __repr__(self) -> str:
        return (
            f"IngestResult({self.name}: "
            f"{self.total_valid}/{self.total_raw} valid, "
            f"{self.total_discarded} discarded, "
            f"{self.total_duplicates} dupes)"
        )


class Ingestor(ABC):
    """Base class for line-based source ingestors.

    Subclasses must implement:
        - read_entry(line, line_number) -> (key, value) or None if malformed

    Set replace_duplicates to let a later line overwrite an earlier key.
    """

    replace_duplicates: bool = False
    max_errors: int = 20

    def __init__(self, comment_char: Optional[str] = None):
        """Initialize ingestor.

        Args:
            comment_char: Lines starting with this character are skipped.
        """
        self.comment_char = comment_char

    def parse(self, filepath: Path) -> Iterator[tuple[str, int]]:
        """Yield (line, line_number) for every non-blank, non-comment line.

        Args:
            filepath: Path to source file.

        Yields:
            Stripped lines with their 1-based line numbers.
        """
        with open(filepath, "r", encoding="utf-8", errors="ignore") as f:
            for line_num, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                if self.comment_char and line.startswith(self.comment_char):
                    continue
                yield line, line_num

    @abstractmethod
    def read_entry(self, line: str, line_number: int) -> Optional[tuple[str, Any]]:
        """Turn one line into a (key, value) entry.

        Args:
            line: Stripped source line.
            line_number: 1-based line number.

        Returns:
            Entry tuple, or None if the line is malformed.
        """
        pass

    def get_name(self, filepath: Path) -> str:
        """Generate source name from filepath."""
        return filepath.stem

    def ingest(self, filepath: Path | str) -> IngestResult:
        """Ingest a source file.

        Args:
            filepath: Path to source file.

        Returns:
            IngestResult with entries and statistics.
        """
        filepath = Path(filepath)

        entries: dict[str, Any] = {}
        total_raw = 0
        discarded = 0
        duplicates = 0
        errors: list[str] = []

        for line, line_num in self.parse(filepath):
            total_raw += 1

            entry = self.read_entry(line, line_num)
            if entry is None:
                discarded += 1
                if len(errors) < self.max_errors:
                    errors.append(f"line {line_num}: {line!r}")
                continue

            key, value = entry
            if key in entries:
                duplicates += 1
                if not self.replace_duplicates:
                    continue
            entries[key] = value

        return IngestResult(
            entries=entries,
            source_path=str(filepath.resolve()),
            name=self.get_name(filepath),
            total_raw=total_raw,
            total_valid=len(entries),
            total_discarded=discarded,
            total_duplicates=duplicates,
            errors=errors,
        )
