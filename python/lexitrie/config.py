"""Configuration loader for lexitrie.

Defaults live under the "defaults" key of a config.json found next to the
package, at the project root, or in the working directory. Keys missing
from the file fall back to FALLBACK_DEFAULTS. LexiconConfig turns those
defaults into the explicit value handed to Lexicon.open().
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

CONFIG_FILENAME = "config.json"

FALLBACK_DEFAULTS = {
    "data_dir": "data",
    "word_list": "UKACD.txt",
    "uk_to_us": "uk-us-spelling",
    "pos_frequencies": "word_pos_frequencies.yml",
    "snapshot": "lexicon.pickle",
    "min_length": 2,
    "max_length": 16,
    "wildcard": "?",
    "include_wordnet_words": True,
    "workers": 0,
    "quiet": False,
}

_config: dict[str, Any] | None = None


def _candidate_dirs() -> list[Path]:
    package_dir = Path(__file__).resolve().parent
    return [
        package_dir.parent.parent,  # python/lexitrie -> project root
        package_dir.parent,
        Path.cwd(),
        Path.cwd().parent,
    ]


def _find_config() -> Path | None:
    """Return the first config.json among the candidate directories."""
    for directory in _candidate_dirs():
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def _read(path: Path) -> dict[str, Any] | None:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        print(f"Ignoring unreadable {path}: {e}")
        return None
    return data if isinstance(data, dict) else None


def load(path: Optional[Path | str] = None) -> dict[str, Any]:
    """Load and cache the configuration.

    Args:
        path: Explicit config file; replaces the cached configuration.
            Without it, the cached configuration is returned, or the
            first config.json found is read.

    Returns:
        Parsed configuration, always with a "defaults" mapping.
    """
    global _config
    if path is None and _config is not None:
        return _config

    config_path = Path(path) if path is not None else _find_config()
    data = _read(config_path) if config_path else None

    _config = data or {}
    _config["defaults"] = {**FALLBACK_DEFAULTS, **(_config.get("defaults") or {})}
    return _config


def reset() -> None:
    """Forget the cached configuration."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    return load()["defaults"].get(key, fallback)


def default_data_dir() -> str:
    return get_default("data_dir")


def default_min_length() -> int:
    return get_default("min_length")


def default_max_length() -> int:
    return get_default("max_length")


def default_workers() -> int:
    return get_default("workers")


@dataclass
class LexiconConfig:
    """Source files and build options for one lexicon.

    Examples:
        # Defaults from config.json, files under ./data
        LexiconConfig.from_defaults()

        # Explicit files, no WordNet supplement
        LexiconConfig(
            word_list=Path("words.txt"),
            uk_to_us=Path("uk-us.txt"),
            pos_frequencies=Path("freq.yml"),
            snapshot=Path("cache/lexicon.pickle"),
            include_wordnet_words=False,
        )
    """

    word_list: Path
    uk_to_us: Path
    pos_frequencies: Path
    snapshot: Path
    min_length: int = FALLBACK_DEFAULTS["min_length"]
    max_length: int = FALLBACK_DEFAULTS["max_length"]
    wildcard: str = FALLBACK_DEFAULTS["wildcard"]
    include_wordnet_words: bool = FALLBACK_DEFAULTS["include_wordnet_words"]
    workers: int = FALLBACK_DEFAULTS["workers"]
    verbose: bool = True

    @classmethod
    def from_defaults(
        cls,
        data_dir: Optional[Path | str] = None,
        **overrides: Any,
    ) -> "LexiconConfig":
        """Build a config from config.json defaults.

        Args:
            data_dir: Directory holding the source files (default from config).
            **overrides: Field values that win over the defaults.

        Returns:
            LexiconConfig with file names resolved against data_dir.
        """
        defaults = load()["defaults"]
        base = Path(data_dir if data_dir is not None else defaults["data_dir"])

        values: dict[str, Any] = {
            "word_list": base / defaults["word_list"],
            "uk_to_us": base / defaults["uk_to_us"],
            "pos_frequencies": base / defaults["pos_frequencies"],
            "snapshot": base / defaults["snapshot"],
            "min_length": defaults["min_length"],
            "max_length": defaults["max_length"],
            "wildcard": defaults["wildcard"],
            "include_wordnet_words": defaults["include_wordnet_words"],
            "workers": defaults["workers"],
            "verbose": not defaults["quiet"],
        }
        values.update(overrides)
        return cls(**values)
