"""Snapshot cache for built lexicons.

A snapshot pickles everything a Lexicon needs (both tries, the word list,
the frequency table and the spelling map) into one file. Loading it skips
building, linking and curation entirely.

A snapshot that is missing, unreadable, or written by another format
version loads as None and the caller rebuilds.
"""

import pickle
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .trie import Trie

FORMAT_VERSION = 1


@dataclass
class Snapshot:
    """Everything needed to restore a Lexicon."""

    forward: Trie
    reverse: Trie
    words: list[str]
    frequencies: dict[str, dict[str, float]]
    uk_to_us: dict[str, str]
    format_version: int = FORMAT_VERSION


def save_snapshot(snapshot: Snapshot, filepath: Path | str) -> Path:
    """Write a snapshot.

    Args:
        snapshot: Snapshot to write.
        filepath: Destination file; parent directories are created.

    Returns:
        Path written.
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, "wb") as f:
        pickle.dump(snapshot, f, protocol=pickle.HIGHEST_PROTOCOL)
    return filepath


def load_snapshot(filepath: Path | str) -> Optional[Snapshot]:
    """Read a snapshot.

    Args:
        filepath: Snapshot file.

    Returns:
        The snapshot, or None if it is absent, unreadable or stale.
    """
    filepath = Path(filepath)
    if not filepath.is_file():
        return None

    try:
        with open(filepath, "rb") as f:
            snapshot = pickle.load(f)
    except (pickle.UnpicklingError, EOFError, AttributeError, ImportError) as e:
        print(f"Ignoring unreadable snapshot {filepath}: {e}")
        return None

    if not isinstance(snapshot, Snapshot):
        print(f"Ignoring snapshot {filepath}: unexpected {type(snapshot).__name__}")
        return None
    if snapshot.format_version != FORMAT_VERSION:
        print(
            f"Ignoring snapshot {filepath}: format {snapshot.format_version}, "
            f"expected {FORMAT_VERSION}"
        )
        return None
    return snapshot
